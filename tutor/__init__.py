"""
Tutor Package
Lesson grading and training-data collection on top of the sign classifiers.
"""

from .config import TutorConfig
from .session import LessonSession, LessonFeedback, FeedbackTier
from .data_collection import DataCollector, TrainingSample

__version__ = "1.0.0"
__all__ = [
    "TutorConfig",
    "LessonSession",
    "LessonFeedback",
    "FeedbackTier",
    "DataCollector",
    "TrainingSample",
]
