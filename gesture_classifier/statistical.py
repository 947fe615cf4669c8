"""
Statistical sign classifier backed by a Keras model over joint features.
"""

import os
from typing import Optional

import numpy as np

os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "2")
from tensorflow.keras.models import load_model

from hand_tracking.models import HandPose

from .features import NUM_FEATURE_JOINTS, extract_features
from .signs import ClassificationResult, ResultReason, SignLabel


class KerasSignClassifier:
    """
    Sign classifier using a trained Keras model.

    The model takes the 12-value feature vector from ``extract_features`` and
    outputs one probability per class name.

    Usage:
        classifier = KerasSignClassifier(model_path="asl_model.keras")
        result = classifier.classify(pose)
    """

    def __init__(
        self,
        model_path: Optional[str] = None,
        model=None,
        class_names: Optional[list] = None,
        verbose: bool = False,
    ):
        """
        Initialize classifier.

        A model that fails to load is reported and left unset; classification
        then returns a "Model not loaded" result instead of raising.

        Args:
            model_path: Path to trained Keras model
            model: Already-built model with a ``predict`` method (overrides model_path)
            class_names: Label for each model output (default: recognizable sign labels)
            verbose: Print load and prediction info
        """
        self.verbose = verbose
        self.class_names = class_names or [sign.value for sign in SignLabel.recognizable()]
        self.model = model

        if self.model is None and model_path is not None:
            try:
                self.model = load_model(model_path)
                if self.verbose:
                    print(f"[MODEL] Loaded {model_path}")
            except (OSError, ValueError) as e:
                print(f"[MODEL] Failed to load {model_path}: {e}")

    @property
    def is_loaded(self) -> bool:
        return self.model is not None

    def classify(self, pose: Optional[HandPose]) -> ClassificationResult:
        """
        Classify a hand pose.

        Args:
            pose: Hand snapshot, or None when no hand is available

        Returns:
            ClassificationResult with tiered feedback for the predicted sign
        """
        if pose is None or not pose.is_tracked:
            return ClassificationResult.no_sign("Show your hand to the camera", ResultReason.NO_HAND)

        if self.model is None:
            return ClassificationResult.no_sign("Model not loaded", ResultReason.MODEL_UNAVAILABLE)

        if len(pose.joints) < NUM_FEATURE_JOINTS:
            return ClassificationResult.no_sign("Not enough joints tracked", ResultReason.INSUFFICIENT_JOINTS)

        features = np.expand_dims(extract_features(pose), axis=0)

        try:
            predictions = np.asarray(self.model.predict(features, verbose=0))[0]
        except Exception as e:
            print(f"[MODEL] Prediction error: {e}")
            return ClassificationResult.no_sign("Prediction failed", ResultReason.PREDICTION_FAILED)

        if predictions.size == 0 or not np.all(np.isfinite(predictions)):
            print(f"[MODEL] Non-finite model output: {predictions}")
            return ClassificationResult.no_sign("Prediction failed", ResultReason.PREDICTION_FAILED)

        class_idx = int(np.argmax(predictions))
        if class_idx >= len(self.class_names):
            if self.verbose:
                print(f"[MODEL] Output {class_idx} has no class name")
            return ClassificationResult.no_sign(
                f"Unknown sign detected: class {class_idx}", ResultReason.UNKNOWN_LABEL
            )
        label = self.class_names[class_idx]

        sign = SignLabel.from_label(label)
        if sign is None or sign is SignLabel.NONE:
            if self.verbose:
                print(f"[MODEL] Unknown label from model: {label}")
            return ClassificationResult.no_sign(
                f"Unknown sign detected: {label}", ResultReason.UNKNOWN_LABEL
            )

        confidence = float(np.clip(predictions[class_idx], 0.0, 1.0))

        if self.verbose:
            print(f"[MODEL] Prediction: {label} ({int(confidence * 100)}% confidence)")

        return ClassificationResult(
            sign=sign,
            confidence=confidence,
            feedback=self.feedback_for(sign, confidence),
            reason=ResultReason.MODEL_PREDICTION,
        )

    @staticmethod
    def feedback_for(sign: SignLabel, confidence: float) -> str:
        """Encouragement text for a predicted sign at a given confidence."""
        if confidence > 0.9:
            return "Perfect"
        if confidence > 0.75:
            return f"Great, almost perfect for {sign.value}"
        if confidence > 0.6:
            return f"Good try, keep practicing {sign.value}"
        if confidence > 0.4:
            return f"Getting closer to {sign.value}"
        return f"Not quite {sign.value}. Review the correct form"

    def get_model_info(self) -> dict:
        """
        Get information about the loaded model.

        Returns:
            Dictionary with model information
        """
        if self.model is None:
            return {"loaded": False, "num_classes": len(self.class_names), "class_names": self.class_names}

        return {
            "loaded": True,
            "input_shape": getattr(self.model, "input_shape", None),
            "output_shape": getattr(self.model, "output_shape", None),
            "num_classes": len(self.class_names),
            "class_names": self.class_names,
        }
