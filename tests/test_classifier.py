"""
Classifier Tests
================
Unit tests for the rule-based sign classifier.
"""

import unittest

import numpy as np

from gesture_classifier import (
    ClassificationResult,
    ClassifierConfig,
    ClassifierConfigurationError,
    GestureClassifier,
    ResultReason,
    SignLabel,
    ideal_pose,
)
from gesture_classifier.classifier import (
    evaluate_a,
    evaluate_b,
    evaluate_c,
    evaluate_hello,
    evaluate_thank_you,
)
from hand_tracking import HandPose, JointSample, resolve_joints

NAMES = ("wrist", "thumbTip", "indexFingerTip", "middleFingerTip", "ringFingerTip", "littleFingerTip")
ORIGIN = (0.0, 0.0, 0.0)


def make_pose(thumb, index, middle, ring, little, wrist=ORIGIN, names=NAMES):
    positions = (wrist, thumb, index, middle, ring, little)
    return HandPose(is_tracked=True, joints=[JointSample(n, p) for n, p in zip(names, positions)])


def joints_of(pose):
    return resolve_joints(pose.joints)


# Poses with hand-checked criteria counts
B_FULL = make_pose(
    thumb=(0.05, 0.0, 0.0), index=(0.0, 0.20, 0.0), middle=(0.02, 0.20, 0.0),
    ring=(-0.02, 0.20, 0.0), little=(-0.04, 0.20, 0.0),
)
B_THREE_OF_SIX = make_pose(
    thumb=(-0.11, 0.0, 0.0), index=(0.0, 0.20, 0.0), middle=(0.05, 0.20, 0.0),
    ring=(0.0, 0.05, 0.0), little=(0.0, 0.05, 0.0),
)
B_FOUR_OF_SIX = make_pose(
    thumb=(-0.11, 0.0, 0.0), index=(0.0, 0.20, 0.0), middle=(0.05, 0.20, 0.0),
    ring=(0.0, 0.20, 0.0), little=(0.0, 0.05, 0.0),
)
C_FULL = make_pose(
    thumb=(0.12, 0.05, 0.0), index=(0.02, 0.13, 0.0), middle=(0.0, 0.14, 0.0),
    ring=(-0.02, 0.13, 0.0), little=(-0.04, 0.12, 0.0),
)
OPEN_HAND = make_pose(
    thumb=(0.13, 0.02, 0.0), index=(0.0, 0.20, 0.0), middle=(0.01, 0.20, 0.0),
    ring=(-0.01, 0.20, 0.0), little=(-0.03, 0.18, 0.0),
)


class TestEarlyExits(unittest.TestCase):

    def setUp(self):
        self.classifier = GestureClassifier()

    def test_no_pose(self):
        result = self.classifier.classify(None)
        self.assertEqual(result.sign, SignLabel.NONE)
        self.assertEqual(result.confidence, 0.0)
        self.assertEqual(result.feedback, "Show your hand to the camera")
        self.assertEqual(result.reason, ResultReason.NO_HAND)

    def test_untracked_pose_ignores_joints(self):
        pose = HandPose(is_tracked=False, joints=ideal_pose(SignLabel.A).joints)
        result = self.classifier.classify(pose)
        self.assertEqual(
            (result.sign, result.confidence, result.feedback),
            (SignLabel.NONE, 0.0, "Show your hand to the camera"),
        )

    def test_missing_joint(self):
        pose = HandPose(is_tracked=True, joints=ideal_pose(SignLabel.A).joints[:5])
        result = self.classifier.classify(pose)
        self.assertEqual(
            (result.sign, result.confidence, result.feedback),
            (SignLabel.NONE, 0.0, "Position your hand in view"),
        )
        self.assertEqual(result.reason, ResultReason.JOINTS_UNRESOLVED)

    def test_joint_names_are_case_sensitive(self):
        names = ("wrist", "thumbTip", "IndexFingerTip", "middleFingerTip", "ringFingerTip", "littleFingerTip")
        pose = make_pose(
            thumb=(0.04, 0.03, 0.02), index=(0.02, 0.08, 0.0), middle=(0.01, 0.09, 0.0),
            ring=(0.0, 0.08, 0.0), little=(-0.01, 0.07, 0.0), names=names,
        )
        self.assertEqual(self.classifier.classify(pose).feedback, "Position your hand in view")

    def test_vendor_qualified_names_resolve(self):
        names = tuple(f"HandSkeleton.JointName.{n}" for n in NAMES)
        pose = HandPose(
            is_tracked=True,
            joints=[JointSample(n, j.position) for n, j in zip(names, ideal_pose(SignLabel.A).joints)],
        )
        self.assertEqual(self.classifier.classify(pose).sign, SignLabel.A)

    def test_no_sign_matched(self):
        result = self.classifier.classify(B_THREE_OF_SIX)
        self.assertEqual(
            (result.sign, result.confidence, result.feedback),
            (SignLabel.NONE, 0.0, "Try making a clear sign"),
        )
        self.assertEqual(result.reason, ResultReason.NO_MATCH)


class TestSigns(unittest.TestCase):

    def setUp(self):
        self.classifier = GestureClassifier()
        self.config = ClassifierConfig()

    def test_letter_a_full_match(self):
        result = self.classifier.classify(ideal_pose(SignLabel.A))
        self.assertEqual(result.sign, SignLabel.A)
        self.assertAlmostEqual(result.confidence, 5 / 5 * 0.95 + 0.05)
        self.assertEqual(result.feedback, "Perfect! 🎉")
        self.assertEqual(result.reason, ResultReason.FULL_MATCH)

    def test_letter_a_partial_match(self):
        pose = make_pose(
            thumb=(0.04, 0.03, 0.02), index=(0.02, 0.20, 0.0), middle=(0.01, 0.09, 0.0),
            ring=(0.0, 0.08, 0.0), little=(-0.01, 0.07, 0.0),
        )
        result = self.classifier.classify(pose)
        self.assertEqual(result.sign, SignLabel.A)
        self.assertAlmostEqual(result.confidence, 4 / 5)
        self.assertEqual(result.feedback, "Curl your index finger into your palm")
        self.assertEqual(result.reason, ResultReason.PARTIAL_MATCH)

    def test_letter_b_full_match(self):
        result = self.classifier.classify(B_FULL)
        self.assertEqual(result.sign, SignLabel.B)
        self.assertAlmostEqual(result.confidence, 0.95)
        self.assertEqual(result.feedback, "Excellent! ✨")

    def test_letter_b_below_partial_threshold(self):
        result = evaluate_b(joints_of(B_THREE_OF_SIX), self.config)
        self.assertEqual(result, ClassificationResult(SignLabel.NONE, 0.0, ""))

    def test_letter_b_partial_match(self):
        result = self.classifier.classify(B_FOUR_OF_SIX)
        self.assertEqual(result.sign, SignLabel.B)
        self.assertAlmostEqual(result.confidence, 4 / 6)
        self.assertEqual(result.feedback, "Straighten your pinky")

    def test_letter_c_full_match(self):
        result = self.classifier.classify(C_FULL)
        self.assertEqual(result.sign, SignLabel.C)
        self.assertAlmostEqual(result.confidence, 0.92)
        self.assertEqual(result.feedback, "Great! 👏")

    def test_letter_c_index_too_curled(self):
        pose = make_pose(
            thumb=(0.12, 0.05, 0.0), index=(0.02, 0.08, 0.0), middle=(0.0, 0.14, 0.0),
            ring=(-0.02, 0.13, 0.0), little=(-0.04, 0.12, 0.0),
        )
        result = self.classifier.classify(pose)
        self.assertEqual(result.sign, SignLabel.C)
        self.assertAlmostEqual(result.confidence, 2 / 3)
        self.assertEqual(result.feedback, "Extend your index finger a bit")

    def test_letter_c_index_too_straight(self):
        pose = make_pose(
            thumb=(0.12, 0.05, 0.0), index=(0.02, 0.20, 0.0), middle=(0.0, 0.14, 0.0),
            ring=(-0.02, 0.13, 0.0), little=(-0.04, 0.12, 0.0),
        )
        result = evaluate_c(joints_of(pose), self.config)
        self.assertEqual(result.sign, SignLabel.C)
        self.assertEqual(result.feedback, "Curl your index finger slightly")

    def test_hello_evaluator(self):
        full = evaluate_hello(joints_of(OPEN_HAND), self.config)
        self.assertEqual((full.sign, full.feedback), (SignLabel.HELLO, "Perfect wave! 👋"))
        self.assertAlmostEqual(full.confidence, 0.98)

        tucked = make_pose(
            thumb=(0.05, 0.0, 0.0), index=(0.0, 0.20, 0.0), middle=(0.01, 0.20, 0.0),
            ring=(-0.01, 0.20, 0.0), little=(-0.03, 0.18, 0.0),
        )
        partial = evaluate_hello(joints_of(tucked), self.config)
        self.assertEqual(partial.sign, SignLabel.HELLO)
        self.assertAlmostEqual(partial.confidence, 4 / 5)
        self.assertEqual(partial.feedback, "Extend your thumb out to the side")

    def test_thank_you_evaluator(self):
        together = make_pose(
            thumb=(0.05, 0.0, 0.0), index=(0.0, 0.20, 0.0), middle=(0.02, 0.20, 0.0),
            ring=(-0.02, 0.20, 0.0), little=(-0.04, 0.18, 0.0),
        )
        full = evaluate_thank_you(joints_of(together), self.config)
        self.assertEqual((full.sign, full.feedback), (SignLabel.THANK_YOU, "Beautiful! 🙏"))
        self.assertAlmostEqual(full.confidence, 0.94)

        apart = evaluate_thank_you(joints_of(B_FOUR_OF_SIX), self.config)
        self.assertEqual(apart.sign, SignLabel.THANK_YOU)
        self.assertAlmostEqual(apart.confidence, 3 / 4)
        self.assertEqual(apart.feedback, "Keep your fingers close together (flat hand)")

    def test_earlier_sign_wins(self):
        # Full Hello, but B's partial match is evaluated first
        self.assertEqual(evaluate_hello(joints_of(OPEN_HAND), self.config).sign, SignLabel.HELLO)
        result = self.classifier.classify(OPEN_HAND)
        self.assertEqual(result.sign, SignLabel.B)
        self.assertAlmostEqual(result.confidence, 5 / 6)
        self.assertEqual(result.feedback, "Tuck your thumb into your palm")

    def test_evaluators_give_no_opinion_when_far_off(self):
        joints = joints_of(ideal_pose(SignLabel.A))
        for evaluate in (evaluate_b, evaluate_hello, evaluate_thank_you):
            self.assertEqual(evaluate(joints, self.config).feedback, "")
        self.assertEqual(evaluate_a(joints_of(B_FULL), self.config).sign, SignLabel.NONE)


class TestProperties(unittest.TestCase):

    def test_deterministic(self):
        classifier = GestureClassifier()
        self.assertEqual(classifier.classify(B_FOUR_OF_SIX), classifier.classify(B_FOUR_OF_SIX))
        self.assertEqual(
            GestureClassifier().classify(C_FULL), GestureClassifier().classify(C_FULL)
        )

    def test_confidence_bounds_on_random_poses(self):
        rng = np.random.default_rng(7)
        classifier = GestureClassifier()
        poses = [
            HandPose(
                is_tracked=True,
                joints=[JointSample(n, rng.uniform(-0.25, 0.25, 3)) for n in NAMES],
            )
            for _ in range(300)
        ]
        for result in classifier.classify_batch(poses):
            self.assertGreaterEqual(result.confidence, 0.0)
            self.assertLessEqual(result.confidence, 1.0)
            self.assertEqual(result.confidence == 0.0, result.sign is SignLabel.NONE)
            if result.is_match:
                self.assertTrue(result.feedback)

    def test_custom_thresholds(self):
        # Looser curl threshold turns the B pose into an A candidate
        config = ClassifierConfig(curled_distance=0.25)
        result = GestureClassifier(config).classify(B_FULL)
        self.assertEqual(result.sign, SignLabel.A)


class TestClassifierConfig(unittest.TestCase):

    def test_defaults(self):
        config = ClassifierConfig()
        self.assertEqual(config.curled_distance, 0.12)
        self.assertEqual(config.little_extended_distance, 0.14)
        self.assertEqual(config.to_dict()["fingers_together_distance"], 0.04)

    def test_invalid_curve_band(self):
        with self.assertRaises(ClassifierConfigurationError):
            ClassifierConfig(curve_min_distance=0.2, curve_max_distance=0.1)

    def test_full_confidence_must_beat_partial(self):
        with self.assertRaises(ClassifierConfigurationError):
            ClassifierConfig(b_full_confidence=0.8)

    def test_partial_threshold_range(self):
        with self.assertRaises(ValueError):
            ClassifierConfig(c_partial_threshold=3)


if __name__ == "__main__":
    unittest.main()
