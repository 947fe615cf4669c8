"""
Sign labels and classification results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SignLabel(Enum):
    """Signs the tutor can recognize. Values are the display / model label strings."""

    A = "A"
    B = "B"
    C = "C"
    HELLO = "Hello"
    THANK_YOU = "Thank You"
    NONE = "none"

    @classmethod
    def from_label(cls, label: str) -> Optional["SignLabel"]:
        """Map a display or model label back to a SignLabel (None if unknown)."""
        for sign in cls:
            if sign.value == label:
                return sign
        return None

    @classmethod
    def recognizable(cls) -> Tuple["SignLabel", ...]:
        """All real signs in lesson order."""
        return tuple(sign for sign in cls if sign is not cls.NONE)

    def __str__(self) -> str:
        return self.value


class ResultReason(Enum):
    """Why a classification result was produced."""

    FULL_MATCH = "full_match"
    PARTIAL_MATCH = "partial_match"
    NO_HAND = "no_hand"
    JOINTS_UNRESOLVED = "joints_unresolved"
    NO_MATCH = "no_match"

    # Statistical classifier outcomes
    MODEL_PREDICTION = "model_prediction"
    MODEL_UNAVAILABLE = "model_unavailable"
    INSUFFICIENT_JOINTS = "insufficient_joints"
    UNKNOWN_LABEL = "unknown_label"
    PREDICTION_FAILED = "prediction_failed"


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of classifying one hand pose.

    An empty feedback string means "no opinion": the caller should show its
    own default prompt.
    """

    sign: SignLabel
    confidence: float
    feedback: str
    reason: Optional[ResultReason] = None

    @classmethod
    def no_sign(cls, feedback: str = "", reason: Optional[ResultReason] = None) -> "ClassificationResult":
        """Result carrying no sign (confidence is always 0)."""
        return cls(sign=SignLabel.NONE, confidence=0.0, feedback=feedback, reason=reason)

    @property
    def is_match(self) -> bool:
        return self.sign is not SignLabel.NONE
