"""
Collection of labeled feature vectors for training the statistical classifier.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from gesture_classifier.features import FEATURE_NAMES, extract_features
from gesture_classifier.signs import SignLabel
from hand_tracking.models import HandPose
from hand_tracking.utils import validate_pose

from .config import TutorConfig


@dataclass(frozen=True, eq=False)
class TrainingSample:
    features: np.ndarray
    label: str


class DataCollector:
    """
    Records training samples for one sign at a time.

    The caller polls ``record`` while recording is active; recording stops on
    its own once the sign has enough samples.
    """

    def __init__(self, config: Optional[TutorConfig] = None):
        self.config = config or TutorConfig()
        self.signs = SignLabel.recognizable()
        self.current_sign = self.signs[0]
        self.samples: List[TrainingSample] = []
        self.samples_collected = 0
        self.is_recording = False

    def start_recording(self, pose: Optional[HandPose]) -> bool:
        """
        Start recording the current sign.

        Returns:
            False if the hand is not visible
        """
        if not validate_pose(pose):
            if self.config.verbose:
                print("[COLLECT] Hand not visible")
            return False
        self.is_recording = True
        return True

    def stop_recording(self) -> None:
        self.is_recording = False

    def record(self, pose: Optional[HandPose]) -> Optional[TrainingSample]:
        """
        Record one sample from a pose.

        Returns:
            The sample, or None if not recording, the sign is complete, or the
            pose is untracked or has non-finite joints
        """
        if not self.is_recording:
            return None

        if self.is_complete:
            self.stop_recording()
            return None

        if not validate_pose(pose):
            if self.config.verbose:
                print("[COLLECT] Sample failed (no hand or bad joints)")
            return None

        sample = TrainingSample(features=extract_features(pose), label=self.current_sign.value)
        self.samples.append(sample)
        self.samples_collected += 1

        if self.is_complete:
            self.stop_recording()
            if self.config.verbose:
                print(f"[COLLECT] {self.current_sign.value}: {self.samples_collected} samples")

        return sample

    def next_sign(self) -> bool:
        """Move to the next sign once the current one is complete."""
        idx = self.signs.index(self.current_sign)
        if not self.can_navigate_next or idx >= len(self.signs) - 1:
            return False
        self.current_sign = self.signs[idx + 1]
        self.samples_collected = 0
        return True

    def previous_sign(self) -> bool:
        idx = self.signs.index(self.current_sign)
        if self.is_recording or idx == 0:
            return False
        self.current_sign = self.signs[idx - 1]
        self.samples_collected = 0
        return True

    @property
    def is_complete(self) -> bool:
        return self.samples_collected >= self.config.target_samples_per_sign

    @property
    def can_navigate_next(self) -> bool:
        return self.is_complete and not self.is_recording

    @property
    def progress(self) -> float:
        return min(self.samples_collected / self.config.target_samples_per_sign, 1.0)

    def to_arrays(self) -> Tuple[np.ndarray, List[str]]:
        """
        Stack collected samples for training.

        Returns:
            Tuple of (features [n, 12] float32, labels)
        """
        if not self.samples:
            return np.zeros((0, len(FEATURE_NAMES)), dtype=np.float32), []
        features = np.stack([s.features for s in self.samples]).astype(np.float32)
        return features, [s.label for s in self.samples]
