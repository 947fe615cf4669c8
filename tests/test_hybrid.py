"""
Hybrid Arbiter Tests
====================
Arbitration between a statistical classifier and the rule-based classifier.
"""

import unittest

from gesture_classifier import (
    ClassificationResult,
    ClassifierConfigurationError,
    GestureClassifier,
    HybridArbiter,
    HybridConfig,
    ResultReason,
    SignLabel,
    ideal_pose,
)


class FixedClassifier:
    """Returns the same result for every pose and counts calls."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    def classify(self, pose):
        self.calls += 1
        return self.result


class TestDecide(unittest.TestCase):

    def setUp(self):
        self.arbiter = HybridArbiter(FixedClassifier(ClassificationResult.no_sign()))

    def test_confident_model_wins(self):
        model = ClassificationResult(SignLabel.A, 0.95, "x")
        rule = ClassificationResult(SignLabel.B, 0.7, "y")
        self.assertIs(self.arbiter.decide(model, rule), model)

    def test_rule_wins_when_model_unsure(self):
        model = ClassificationResult(SignLabel.A, 0.5, "x")
        rule = ClassificationResult(SignLabel.B, 0.7, "y")
        self.assertEqual(self.arbiter.decide(model, rule), ClassificationResult(SignLabel.B, 0.7, "y"))

    def test_threshold_is_exclusive(self):
        model = ClassificationResult(SignLabel.A, 0.88, "x")
        rule = ClassificationResult(SignLabel.C, 0.67, "y")
        self.assertIs(self.arbiter.decide(model, rule), rule)

    def test_model_result_when_rule_has_no_sign(self):
        model = ClassificationResult(SignLabel.A, 0.3, "x")
        rule = ClassificationResult.no_sign("Try making a clear sign", ResultReason.NO_MATCH)
        self.assertIs(self.arbiter.decide(model, rule), model)

    def test_confident_none_is_not_trusted(self):
        model = ClassificationResult(SignLabel.NONE, 0.99, "")
        rule = ClassificationResult(SignLabel.B, 0.95, "Excellent! ✨")
        self.assertIs(self.arbiter.decide(model, rule), rule)

    def test_custom_threshold(self):
        arbiter = HybridArbiter(FixedClassifier(None), config=HybridConfig(confidence_threshold=0.4))
        model = ClassificationResult(SignLabel.A, 0.5, "x")
        rule = ClassificationResult(SignLabel.B, 0.7, "y")
        self.assertIs(arbiter.decide(model, rule), model)

    def test_invalid_threshold(self):
        with self.assertRaises(ClassifierConfigurationError):
            HybridConfig(confidence_threshold=1.5)


class RecordingRule(GestureClassifier):

    def __init__(self):
        super().__init__()
        self.calls = 0

    def classify(self, pose):
        self.calls += 1
        return super().classify(pose)


class TestDetect(unittest.TestCase):

    def test_rule_skipped_when_model_confident(self):
        model_result = ClassificationResult(SignLabel.C, 0.97, "Perfect")
        rule = RecordingRule()
        arbiter = HybridArbiter(FixedClassifier(model_result), rule=rule)

        self.assertIs(arbiter.detect(ideal_pose(SignLabel.A)), model_result)
        self.assertEqual(rule.calls, 0)

    def test_rule_feedback_used_when_model_unsure(self):
        statistical = FixedClassifier(ClassificationResult(SignLabel.B, 0.6, "Good try"))
        arbiter = HybridArbiter(statistical)

        result = arbiter.classify(ideal_pose(SignLabel.A))
        self.assertEqual(result.sign, SignLabel.A)
        self.assertEqual(result.feedback, "Perfect! 🎉")
        self.assertEqual(statistical.calls, 1)

    def test_no_hand(self):
        model_result = ClassificationResult.no_sign("Show your hand to the camera", ResultReason.NO_HAND)
        arbiter = HybridArbiter(FixedClassifier(model_result))
        self.assertIs(arbiter.detect(None), model_result)


if __name__ == "__main__":
    unittest.main()
