"""
Reference ("ghost") hand poses for each sign.

Positions are relative to a wrist at the origin, in meters, using realistic
hand proportions. Used for demos and mock tracking data.
"""

from typing import Dict, List, Tuple

from hand_tracking.models import HandPose, JointSample

from .signs import SignLabel

_JOINT_NAMES = (
    "wrist",
    "thumbTip",
    "indexFingerTip",
    "middleFingerTip",
    "ringFingerTip",
    "littleFingerTip",
)

_IDEAL_POSITIONS: Dict[SignLabel, Tuple[Tuple[float, float, float], ...]] = {
    SignLabel.A: (
        (0.0, 0.0, 0.0),
        (0.04, 0.03, 0.02),
        (0.02, 0.08, 0.0),
        (0.01, 0.09, 0.0),
        (0.0, 0.08, 0.0),
        (-0.01, 0.07, 0.0),
    ),
    SignLabel.B: (
        (0.0, 0.0, 0.0),
        (0.03, 0.02, 0.01),
        (0.02, 0.18, 0.0),
        (0.0, 0.19, 0.0),
        (-0.02, 0.18, 0.0),
        (-0.04, 0.17, 0.0),
    ),
    SignLabel.C: (
        (0.0, 0.0, 0.0),
        (0.05, 0.10, 0.0),
        (0.03, 0.15, -0.02),
        (0.01, 0.16, -0.02),
        (-0.01, 0.15, -0.02),
        (-0.03, 0.13, -0.01),
    ),
    SignLabel.HELLO: (
        (0.0, 0.0, 0.0),
        (0.06, 0.08, 0.01),
        (0.03, 0.18, 0.0),
        (0.01, 0.19, 0.0),
        (-0.01, 0.18, 0.0),
        (-0.03, 0.16, 0.0),
    ),
    SignLabel.THANK_YOU: (
        (0.0, 0.0, 0.0),
        (0.05, 0.06, 0.01),
        (0.02, 0.17, 0.02),
        (0.0, 0.18, 0.02),
        (-0.02, 0.17, 0.02),
        (-0.04, 0.16, 0.02),
    ),
}


def ideal_joints(sign: SignLabel) -> List[JointSample]:
    """Reference joints for a sign (empty for SignLabel.NONE)."""
    positions = _IDEAL_POSITIONS.get(sign, ())
    return [JointSample(name, pos) for name, pos in zip(_JOINT_NAMES, positions)]


def ideal_pose(sign: SignLabel) -> HandPose:
    """Tracked reference pose for a sign."""
    return HandPose(is_tracked=True, joints=ideal_joints(sign))
