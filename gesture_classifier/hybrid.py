"""
Hybrid recognition: trust a confident model, otherwise prefer rule-based feedback.
"""

from typing import Optional

from hand_tracking.models import HandPose

from .classifier import GestureClassifier
from .config import HybridConfig
from .signs import ClassificationResult


class HybridArbiter:
    """
    Combines a statistical classifier with the rule-based GestureClassifier.

    Any object with a ``classify(pose) -> ClassificationResult`` method can be
    used as the statistical delegate.

    Usage:
        arbiter = HybridArbiter(KerasSignClassifier("asl_model.keras"))
        result = arbiter.detect(pose)
    """

    def __init__(
        self,
        statistical,
        rule: Optional[GestureClassifier] = None,
        config: Optional[HybridConfig] = None,
    ):
        self.statistical = statistical
        self.rule = rule or GestureClassifier()
        self.config = config or HybridConfig()

    def is_confident(self, result: ClassificationResult) -> bool:
        """True if a model result is trusted without consulting the rules."""
        return result.is_match and result.confidence > self.config.confidence_threshold

    def decide(
        self,
        statistical_result: ClassificationResult,
        rule_result: ClassificationResult,
    ) -> ClassificationResult:
        """
        Pick between a model result and a rule-based result.

        Args:
            statistical_result: Output of the statistical classifier
            rule_result: Output of the rule-based classifier

        Returns:
            The model result if confident, else the rule result if it found a
            sign, else the model result
        """
        if self.is_confident(statistical_result):
            return statistical_result

        if rule_result.is_match:
            return rule_result

        return statistical_result

    def detect(self, pose: Optional[HandPose]) -> ClassificationResult:
        """
        Classify a pose with both classifiers.

        The rule-based classifier only runs when the model is not confident.
        """
        statistical_result = self.statistical.classify(pose)
        if self.is_confident(statistical_result):
            return statistical_result

        return self.decide(statistical_result, self.rule.classify(pose))

    # Same call shape as the delegate classifiers
    classify = detect
