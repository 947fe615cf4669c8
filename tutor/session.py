"""
Lesson session: walks the learner through each sign and grades attempts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set

from gesture_classifier.signs import ClassificationResult, SignLabel

from .config import TutorConfig


class FeedbackTier(Enum):
    IDLE = "idle"
    SUCCESS = "success"
    CLOSE = "close"
    UNCLEAR = "unclear"
    WRONG_SIGN = "wrong_sign"
    NO_SIGN = "no_sign"


@dataclass(frozen=True)
class LessonFeedback:
    """Grade for one classification against the current target sign."""

    tier: FeedbackTier
    message: str
    hint: str = ""
    detected: SignLabel = SignLabel.NONE
    confidence: float = 0.0
    newly_learned: bool = False


class LessonSession:
    """
    Tracks the target sign, the latest grade and the signs learned so far.

    Usage:
        session = LessonSession()
        feedback = session.update(classifier.classify(pose))
    """

    def __init__(self, config: Optional[TutorConfig] = None):
        self.config = config or TutorConfig()
        self.signs = SignLabel.recognizable()
        self.current_target = self.signs[0]
        self.signs_learned: Set[SignLabel] = set()
        self.last_feedback = self._prompt()

    def _prompt(self) -> LessonFeedback:
        return LessonFeedback(
            tier=FeedbackTier.IDLE,
            message=f"Make the sign for '{self.current_target.value}'",
        )

    def update(self, result: ClassificationResult) -> LessonFeedback:
        """
        Grade a classification result against the current target.

        Args:
            result: Output of any sign classifier

        Returns:
            LessonFeedback (also stored as ``last_feedback``)
        """
        target = self.current_target
        newly_learned = False

        if result.sign is target:
            if result.confidence > self.config.success_confidence:
                tier, message = FeedbackTier.SUCCESS, "Perfect!"
                if target not in self.signs_learned:
                    self.signs_learned.add(target)
                    newly_learned = True
            elif result.confidence > self.config.progress_confidence:
                tier, message = FeedbackTier.CLOSE, "Almost there!"
            else:
                tier, message = FeedbackTier.UNCLEAR, "Hold the pose a bit clearer"
        elif result.is_match:
            tier = FeedbackTier.WRONG_SIGN
            message = f"That's {result.sign.value}. Try {target.value}."
        else:
            tier = FeedbackTier.NO_SIGN
            message = result.feedback or "Show your hand to the camera"

        self.last_feedback = LessonFeedback(
            tier=tier,
            message=message,
            hint=result.feedback,
            detected=result.sign,
            confidence=result.confidence,
            newly_learned=newly_learned,
        )
        return self.last_feedback

    def next_sign(self) -> bool:
        """Advance to the next sign. Returns False at the last sign."""
        idx = self.signs.index(self.current_target)
        if idx >= len(self.signs) - 1:
            return False
        self.current_target = self.signs[idx + 1]
        self.last_feedback = self._prompt()
        return True

    def previous_sign(self) -> bool:
        """Go back to the previous sign. Returns False at the first sign."""
        idx = self.signs.index(self.current_target)
        if idx == 0:
            return False
        self.current_target = self.signs[idx - 1]
        self.last_feedback = self._prompt()
        return True

    @property
    def is_complete(self) -> bool:
        return self.signs_learned.issuperset(self.signs)
