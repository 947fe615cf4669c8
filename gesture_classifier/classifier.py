"""
Rule-based GestureClassifier.
Maps six hand joints to a sign, a confidence and corrective feedback.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from hand_tracking.models import HandPose, JointRole, JointSample, REQUIRED_ROLES
from hand_tracking.utils import resolve_joints

from .config import ClassifierConfig
from .signs import ClassificationResult, ResultReason, SignLabel

Joints = Dict[JointRole, JointSample]
Evaluator = Callable[[Joints, ClassifierConfig], ClassificationResult]


def _distance(a: JointSample, b: JointSample) -> float:
    return float(np.linalg.norm(a.vector - b.vector))


def _decide(
    sign: SignLabel,
    checks: Sequence[bool],
    corrections: Sequence[str],
    threshold: int,
    full_confidence: float,
    full_feedback: str,
) -> ClassificationResult:
    """
    Two-tier decision shared by every sign.

    Args:
        sign: Sign being evaluated
        checks: Criteria results
        corrections: Messages for the unmet criteria, in priority order
        threshold: Minimum criteria met for a partial match
        full_confidence: Confidence reported when every criterion is met
        full_feedback: Affirming message for a full match

    Returns:
        Full match, partial match, or a NONE result with empty feedback
    """
    correct = sum(1 for c in checks if c)

    if correct == len(checks):
        return ClassificationResult(sign, full_confidence, full_feedback, ResultReason.FULL_MATCH)

    if correct >= threshold:
        return ClassificationResult(
            sign, correct / len(checks), corrections[0], ResultReason.PARTIAL_MATCH
        )

    return ClassificationResult.no_sign()


def evaluate_a(joints: Joints, config: ClassifierConfig) -> ClassificationResult:
    """Letter A: fist with all four fingers curled and the thumb along the side."""
    wrist = joints[JointRole.WRIST]
    thumb = joints[JointRole.THUMB_TIP]
    index = joints[JointRole.INDEX_TIP]

    index_curled = _distance(index, wrist) < config.curled_distance
    middle_curled = _distance(joints[JointRole.MIDDLE_TIP], wrist) < config.curled_distance
    ring_curled = _distance(joints[JointRole.RING_TIP], wrist) < config.curled_distance
    little_curled = _distance(joints[JointRole.LITTLE_TIP], wrist) < config.curled_distance
    thumb_on_side = thumb.x > index.x - config.thumb_side_margin

    checks = [index_curled, middle_curled, ring_curled, little_curled, thumb_on_side]
    messages = [
        "Curl your index finger into your palm",
        "Curl your middle finger more",
        "Tuck your ring finger in",
        "Curl your pinky finger",
        "Place your thumb on the side of your fist",
    ]
    corrections = [msg for ok, msg in zip(checks, messages) if not ok]

    correct = sum(1 for c in checks if c)
    full_confidence = correct / len(checks) * 0.95 + 0.05

    return _decide(
        SignLabel.A, checks, corrections,
        config.a_partial_threshold, full_confidence, "Perfect! 🎉",
    )


def evaluate_b(joints: Joints, config: ClassifierConfig) -> ClassificationResult:
    """Letter B: flat hand, fingers straight up and together, thumb tucked."""
    wrist = joints[JointRole.WRIST]
    index = joints[JointRole.INDEX_TIP]
    middle = joints[JointRole.MIDDLE_TIP]

    index_extended = _distance(index, wrist) > config.extended_distance
    middle_extended = _distance(middle, wrist) > config.extended_distance
    ring_extended = _distance(joints[JointRole.RING_TIP], wrist) > config.extended_distance
    little_extended = _distance(joints[JointRole.LITTLE_TIP], wrist) > config.little_extended_distance
    fingers_parallel = abs(index.y - middle.y) < config.parallel_tolerance
    thumb_tucked = _distance(joints[JointRole.THUMB_TIP], wrist) < config.thumb_tucked_distance

    checks = [
        index_extended, middle_extended, ring_extended,
        little_extended, fingers_parallel, thumb_tucked,
    ]
    messages = [
        "Extend your index finger straight up",
        "Straighten your middle finger",
        "Extend your ring finger",
        "Straighten your pinky",
        "Keep all fingers together and parallel",
        "Tuck your thumb into your palm",
    ]
    corrections = [msg for ok, msg in zip(checks, messages) if not ok]

    return _decide(
        SignLabel.B, checks, corrections,
        config.b_partial_threshold, config.b_full_confidence, "Excellent! ✨",
    )


def evaluate_c(joints: Joints, config: ClassifierConfig) -> ClassificationResult:
    """Letter C: index and middle curved, thumb opposite the index."""
    wrist = joints[JointRole.WRIST]
    thumb = joints[JointRole.THUMB_TIP]
    index = joints[JointRole.INDEX_TIP]

    index_dist = _distance(index, wrist)
    middle_dist = _distance(joints[JointRole.MIDDLE_TIP], wrist)

    index_curved = config.curve_min_distance < index_dist < config.curve_max_distance
    middle_curved = config.curve_min_distance < middle_dist < config.curve_max_distance
    thumb_opposite = abs(thumb.x - index.x) > config.thumb_opposed_distance

    corrections = []
    if not index_curved:
        if index_dist < config.curve_min_distance:
            corrections.append("Extend your index finger a bit")
        else:
            corrections.append("Curl your index finger slightly")
    if not middle_curved:
        corrections.append("Curve your middle finger to match the 'C'")
    if not thumb_opposite:
        corrections.append("Move your thumb opposite your index finger")

    return _decide(
        SignLabel.C, [index_curved, middle_curved, thumb_opposite], corrections,
        config.c_partial_threshold, config.c_full_confidence, "Great! 👏",
    )


def evaluate_hello(joints: Joints, config: ClassifierConfig) -> ClassificationResult:
    """Hello: open palm, every finger and the thumb extended."""
    wrist = joints[JointRole.WRIST]

    index_extended = _distance(joints[JointRole.INDEX_TIP], wrist) > config.extended_distance
    middle_extended = _distance(joints[JointRole.MIDDLE_TIP], wrist) > config.extended_distance
    ring_extended = _distance(joints[JointRole.RING_TIP], wrist) > config.extended_distance
    little_extended = _distance(joints[JointRole.LITTLE_TIP], wrist) > config.little_extended_distance
    thumb_extended = _distance(joints[JointRole.THUMB_TIP], wrist) > config.thumb_extended_distance

    fingers = [index_extended, middle_extended, ring_extended, little_extended]
    corrections = []
    if not all(fingers):
        corrections.append("Spread all fingers wide open")
    if not thumb_extended:
        corrections.append("Extend your thumb out to the side")

    return _decide(
        SignLabel.HELLO, fingers + [thumb_extended], corrections,
        config.hello_partial_threshold, config.hello_full_confidence, "Perfect wave! 👋",
    )


def evaluate_thank_you(joints: Joints, config: ClassifierConfig) -> ClassificationResult:
    """Thank You: flat hand with the fingers extended and close together."""
    wrist = joints[JointRole.WRIST]
    index = joints[JointRole.INDEX_TIP]
    middle = joints[JointRole.MIDDLE_TIP]

    index_extended = _distance(index, wrist) > config.extended_distance
    middle_extended = _distance(middle, wrist) > config.extended_distance
    ring_extended = _distance(joints[JointRole.RING_TIP], wrist) > config.extended_distance
    fingers_together = _distance(index, middle) < config.fingers_together_distance

    fingers = [index_extended, middle_extended, ring_extended]
    corrections = []
    if not all(fingers):
        corrections.append("Extend all fingers straight")
    if not fingers_together:
        corrections.append("Keep your fingers close together (flat hand)")

    return _decide(
        SignLabel.THANK_YOU, fingers + [fingers_together], corrections,
        config.thank_you_partial_threshold, config.thank_you_full_confidence, "Beautiful! 🙏",
    )


# Priority order: the first evaluator that claims a sign wins
SIGN_EVALUATORS: Tuple[Tuple[SignLabel, Evaluator], ...] = (
    (SignLabel.A, evaluate_a),
    (SignLabel.B, evaluate_b),
    (SignLabel.C, evaluate_c),
    (SignLabel.HELLO, evaluate_hello),
    (SignLabel.THANK_YOU, evaluate_thank_you),
)


class GestureClassifier:
    """
    Rule-based sign classifier.

    Stateless: the same pose always produces the same result, and one instance
    can be shared between threads.

    Usage:
        classifier = GestureClassifier()
        result = classifier.classify(pose)
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        """
        Initialize classifier.

        Args:
            config: ClassifierConfig with geometric thresholds (uses defaults if None)
        """
        self.config = config or ClassifierConfig()

    def classify(self, pose: Optional[HandPose]) -> ClassificationResult:
        """
        Classify a hand pose.

        Args:
            pose: Hand snapshot, or None when no hand is available

        Returns:
            ClassificationResult. Never raises; unusable input produces a NONE
            result whose feedback and reason say why.
        """
        if pose is None or not pose.is_tracked:
            return ClassificationResult.no_sign(self.config.no_hand_feedback, ResultReason.NO_HAND)

        joints = resolve_joints(pose.joints)
        if len(joints) < len(REQUIRED_ROLES):
            return ClassificationResult.no_sign(
                self.config.joints_unresolved_feedback, ResultReason.JOINTS_UNRESOLVED
            )

        for sign, evaluate in SIGN_EVALUATORS:
            result = evaluate(joints, self.config)
            if result.sign is sign:
                return result

        return ClassificationResult.no_sign(self.config.no_match_feedback, ResultReason.NO_MATCH)

    def classify_batch(self, poses: list) -> list:
        """
        Classify multiple poses.

        Args:
            poses: List of HandPose (or None)

        Returns:
            List of ClassificationResult
        """
        return [self.classify(pose) for pose in poses]
