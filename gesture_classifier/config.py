"""
Configuration for the rule-based classifier and the hybrid arbiter.
"""

from dataclasses import dataclass, asdict

from .exceptions import ClassifierConfigurationError


@dataclass
class ClassifierConfig:
    """
    Geometric thresholds for the rule-based classifier.

    Distances are in meters, measured from the wrist unless noted. Defaults were
    tuned against a single physical rig; keep them for compatible behavior.
    """

    # Letter A
    curled_distance: float = 0.12          # fingertip closer than this = curled
    thumb_side_margin: float = 0.03        # thumb.x must exceed index.x minus this

    # Letter B / Hello / Thank You
    extended_distance: float = 0.15        # index/middle/ring extended
    little_extended_distance: float = 0.14 # pinky is shorter
    parallel_tolerance: float = 0.05       # max |index.y - middle.y|
    thumb_tucked_distance: float = 0.10

    # Letter C
    curve_min_distance: float = 0.10
    curve_max_distance: float = 0.16
    thumb_opposed_distance: float = 0.08   # min |thumb.x - index.x|

    # Hello / Thank You
    thumb_extended_distance: float = 0.12
    fingers_together_distance: float = 0.04  # index tip to middle tip

    # Minimum criteria met for a partial match
    a_partial_threshold: int = 3            # of 5
    b_partial_threshold: int = 4            # of 6
    c_partial_threshold: int = 2            # of 3
    hello_partial_threshold: int = 4        # of 5
    thank_you_partial_threshold: int = 3    # of 4

    # Full-match confidences (A is computed from its criteria count)
    b_full_confidence: float = 0.95
    c_full_confidence: float = 0.92
    hello_full_confidence: float = 0.98
    thank_you_full_confidence: float = 0.94

    # Sentinel feedback
    no_hand_feedback: str = "Show your hand to the camera"
    joints_unresolved_feedback: str = "Position your hand in view"
    no_match_feedback: str = "Try making a clear sign"

    def __post_init__(self):
        """Validate configuration."""
        distances = {
            "curled_distance": self.curled_distance,
            "extended_distance": self.extended_distance,
            "little_extended_distance": self.little_extended_distance,
            "parallel_tolerance": self.parallel_tolerance,
            "thumb_tucked_distance": self.thumb_tucked_distance,
            "curve_min_distance": self.curve_min_distance,
            "curve_max_distance": self.curve_max_distance,
            "thumb_opposed_distance": self.thumb_opposed_distance,
            "thumb_extended_distance": self.thumb_extended_distance,
            "fingers_together_distance": self.fingers_together_distance,
        }
        for name, value in distances.items():
            if value <= 0:
                raise ClassifierConfigurationError(f"{name} must be positive")

        if self.curve_min_distance >= self.curve_max_distance:
            raise ClassifierConfigurationError("curve_min_distance must be < curve_max_distance")

        # (threshold, total criteria, full confidence)
        signs = {
            "a": (self.a_partial_threshold, 5, None),
            "b": (self.b_partial_threshold, 6, self.b_full_confidence),
            "c": (self.c_partial_threshold, 3, self.c_full_confidence),
            "hello": (self.hello_partial_threshold, 5, self.hello_full_confidence),
            "thank_you": (self.thank_you_partial_threshold, 4, self.thank_you_full_confidence),
        }
        for name, (threshold, total, full_confidence) in signs.items():
            if not 1 <= threshold < total:
                raise ClassifierConfigurationError(
                    f"{name}_partial_threshold must be in [1, {total - 1}]"
                )
            if full_confidence is None:
                continue
            if not 0.0 < full_confidence <= 1.0:
                raise ClassifierConfigurationError(f"{name}_full_confidence must be in (0, 1]")
            if full_confidence <= (total - 1) / total:
                raise ClassifierConfigurationError(
                    f"{name}_full_confidence must exceed the best partial confidence "
                    f"({total - 1}/{total})"
                )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class HybridConfig:
    """Policy settings for combining model and rule-based results."""

    # Model results above this are trusted as-is
    confidence_threshold: float = 0.88

    def __post_init__(self):
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ClassifierConfigurationError("confidence_threshold must be in [0, 1]")

    def to_dict(self) -> dict:
        return asdict(self)
