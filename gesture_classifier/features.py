"""
Flat feature vectors for the statistical classifier.
"""

from typing import Optional

import numpy as np

from hand_tracking.models import HandPose

NUM_FEATURE_JOINTS = 6
FEATURE_NAMES = tuple(f"feature_{i}" for i in range(NUM_FEATURE_JOINTS * 2))


def extract_features(pose: Optional[HandPose], num_joints: int = NUM_FEATURE_JOINTS) -> np.ndarray:
    """
    Convert the first joints of a pose into an (x, y) feature vector.

    Joints are taken positionally; missing joints are zero-padded so the
    vector always has ``num_joints * 2`` entries.

    Args:
        pose: Hand pose (None gives an all-zero vector)
        num_joints: Number of leading joints to use

    Returns:
        float32 array of shape (num_joints * 2,)
    """
    features = np.zeros(num_joints * 2, dtype=np.float32)
    if pose is None:
        return features

    for i, joint in enumerate(pose.joints[:num_joints]):
        features[2 * i] = joint.x
        features[2 * i + 1] = joint.y

    return features
