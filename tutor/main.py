"""
Sign tutor loop.

Pipeline:
    Hand pose source -> classifier (rule-based or hybrid) -> LessonSession -> feedback

Features:
    - MOCK_DATA mode: feeds the ideal pose of each target sign instead of live tracking
    - Hybrid recognition when a trained model file is present
    - Console feedback on every change of grade

Run:
    python -m tutor.main
"""

import time
from pathlib import Path
from typing import Callable, List, Optional

from gesture_classifier.classifier import GestureClassifier
from gesture_classifier.templates import ideal_pose
from hand_tracking.models import HandPose

from .config import TutorConfig
from .session import FeedbackTier, LessonFeedback, LessonSession

# ---------------------- CONFIG ----------------------

# If True, use ideal reference poses instead of a tracking source.
MOCK_DATA = True

# Trained statistical model (optional)
MODEL_PATH = "asl_model.keras"

# Mock updates per sign before moving on
UPDATES_PER_SIGN = 5


# ---------------------- UTILS ----------------------


def build_recognizer(model_path: str = MODEL_PATH, verbose: bool = False):
    """
    Hybrid recognizer if a model file exists, rule-based classifier otherwise.
    """
    if Path(model_path).exists():
        from gesture_classifier.hybrid import HybridArbiter
        from gesture_classifier.statistical import KerasSignClassifier

        return HybridArbiter(KerasSignClassifier(model_path=model_path, verbose=verbose))

    if verbose:
        print(f"[TUTOR] No model at {model_path}, using rule-based classifier")
    return GestureClassifier()


def format_feedback(session: LessonSession, feedback: LessonFeedback) -> str:
    line = (
        f"[TUTOR] target={session.current_target.value:<9} "
        f"detected={feedback.detected.value:<9} conf={feedback.confidence:.2f}  {feedback.message}"
    )
    if feedback.hint and feedback.hint != feedback.message:
        line += f"  ({feedback.hint})"
    return line


# ---------------------- CORE LOOP ----------------------


def run_lesson(
    pose_source: Callable[[], Optional[HandPose]],
    recognizer,
    session: LessonSession,
    config: Optional[TutorConfig] = None,
    max_updates: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> List[LessonFeedback]:
    """
    Poll a pose source, classify each pose and grade it.

    Args:
        pose_source: Returns the latest pose (or None when no hand)
        recognizer: Object with ``classify(pose) -> ClassificationResult``
        session: Lesson being graded
        config: TutorConfig (uses session's config if None)
        max_updates: Stop after this many updates (None = config.max_updates)
        sleep: Sleep function used to pace the loop

    Returns:
        Feedback for every update, in order
    """
    config = config or session.config
    limit = max_updates if max_updates is not None else config.max_updates

    history: List[LessonFeedback] = []
    last_tier: Optional[FeedbackTier] = None

    while limit is None or len(history) < limit:
        loop_start = time.time()

        feedback = session.update(recognizer.classify(pose_source()))
        history.append(feedback)

        if config.verbose and (feedback.tier != last_tier or feedback.newly_learned):
            print(format_feedback(session, feedback))
        last_tier = feedback.tier

        if feedback.newly_learned and config.verbose:
            print(f"[TUTOR] Learned {session.current_target.value}! "
                  f"({len(session.signs_learned)}/{len(session.signs)})")

        if limit is not None and len(history) >= limit:
            break

        elapsed = time.time() - loop_start
        sleep(max(config.poll_interval - elapsed, 0.0))

    return history


def run_mock_tutor(updates_per_sign: int = UPDATES_PER_SIGN, config: Optional[TutorConfig] = None):
    """
    Run a full lesson using the ideal pose of each target sign as input.
    """
    config = config or TutorConfig(verbose=True)
    session = LessonSession(config)
    recognizer = build_recognizer(verbose=config.verbose)

    print("[TUTOR] Mock lesson started")

    while True:
        run_lesson(
            pose_source=lambda: ideal_pose(session.current_target),
            recognizer=recognizer,
            session=session,
            config=config,
            max_updates=updates_per_sign,
        )
        if not session.next_sign():
            break

    learned = ", ".join(s.value for s in session.signs if s in session.signs_learned) or "none"
    print(f"[TUTOR] Lesson finished. Signs learned: {learned}")
    return session


if __name__ == "__main__":
    if MOCK_DATA:
        run_mock_tutor()
    else:
        print("[TUTOR] Live tracking needs a pose source; see run_lesson()")
