"""
Conversion from MediaPipe hand landmarks to HandPose snapshots.
"""

from typing import Dict, List, Optional

import mediapipe as mp

from .config import LandmarkConfig
from .exceptions import LandmarkCountError
from .models import HandPose, JointSample, REQUIRED_ROLES
from .utils import mirror_pose

_FINGER_PREFIXES = {
    "THUMB": "thumb",
    "INDEX_FINGER": "indexFinger",
    "MIDDLE_FINGER": "middleFinger",
    "RING_FINGER": "ringFinger",
    "PINKY": "littleFinger",
}

# Thumb has CMC/MCP/IP joints, the other fingers MCP/PIP/DIP
_THUMB_SUFFIXES = {"CMC": "Knuckle", "MCP": "IntermediateBase", "IP": "IntermediateTip", "TIP": "Tip"}
_FINGER_SUFFIXES = {"MCP": "Knuckle", "PIP": "IntermediateBase", "DIP": "IntermediateTip", "TIP": "Tip"}


def joint_name(landmark_name: str) -> str:
    """
    Map a MediaPipe landmark name (e.g. "PINKY_TIP") to the joint naming
    used by the classifier (e.g. "littleFingerTip").
    """
    if landmark_name == "WRIST":
        return "wrist"

    for prefix, finger in _FINGER_PREFIXES.items():
        if landmark_name.startswith(prefix + "_"):
            part = landmark_name[len(prefix) + 1:]
            suffixes = _THUMB_SUFFIXES if prefix == "THUMB" else _FINGER_SUFFIXES
            if part in suffixes:
                return finger + suffixes[part]

    raise ValueError(f"Unknown hand landmark: {landmark_name}")


def landmark_joint_names() -> Dict[int, str]:
    """Joint name for every MediaPipe hand landmark index."""
    return {int(lm): joint_name(lm.name) for lm in mp.solutions.hands.HandLandmark}


def pose_from_landmarks(hand_landmarks, config: Optional[LandmarkConfig] = None) -> HandPose:
    """
    Build a HandPose from one hand's MediaPipe landmarks.

    The six joints the classifier resolves come first, in conventional order
    (wrist, thumb tip, index, middle, ring, little tips), followed by the
    remaining joints in landmark order.

    Args:
        hand_landmarks: A landmark list (``results.multi_hand_world_landmarks[i]``)
            or a plain sequence of points with x/y/z attributes. None means no hand.
        config: LandmarkConfig (uses defaults if None)

    Returns:
        HandPose

    Raises:
        LandmarkCountError: If the number of landmarks is not as expected
    """
    config = config or LandmarkConfig()

    if hand_landmarks is None:
        return HandPose.untracked()

    points = list(getattr(hand_landmarks, "landmark", hand_landmarks))
    if len(points) != config.expected_landmarks:
        raise LandmarkCountError(
            f"Expected {config.expected_landmarks} landmarks, got {len(points)}"
        )

    sy = -config.scale if config.flip_y else config.scale

    names = landmark_joint_names()
    joints: List[JointSample] = [
        JointSample(
            name=names[idx],
            position=(point.x * config.scale, point.y * sy, point.z * config.scale),
        )
        for idx, point in enumerate(points)
    ]

    required_names = [role.key for role in REQUIRED_ROLES]
    head = [j for name in required_names for j in joints if j.name == name]
    tail = [j for j in joints if j.name not in required_names]

    pose = HandPose(is_tracked=True, joints=head + tail)
    return mirror_pose(pose, horizontal=config.mirror)
