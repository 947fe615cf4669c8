"""
Gesture Classifier Package
Rule-based and hybrid sign recognition over tracked hand joints.

The Keras-backed classifier lives in ``gesture_classifier.statistical`` and is
imported explicitly so the rule-based classifier works without TensorFlow.
"""

from .classifier import GestureClassifier, SIGN_EVALUATORS
from .config import ClassifierConfig, HybridConfig
from .exceptions import GestureClassifierError, ClassifierConfigurationError
from .features import extract_features, FEATURE_NAMES
from .hybrid import HybridArbiter
from .signs import SignLabel, ClassificationResult, ResultReason
from .templates import ideal_joints, ideal_pose

__version__ = "1.0.0"
__all__ = [
    "GestureClassifier",
    "SIGN_EVALUATORS",
    "ClassifierConfig",
    "HybridConfig",
    "GestureClassifierError",
    "ClassifierConfigurationError",
    "extract_features",
    "FEATURE_NAMES",
    "HybridArbiter",
    "SignLabel",
    "ClassificationResult",
    "ResultReason",
    "ideal_joints",
    "ideal_pose",
]
