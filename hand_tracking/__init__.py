"""
Hand Tracking Module
Hand pose snapshots and joint resolution for sign recognition.
"""

from .models import JointSample, HandPose, JointRole, REQUIRED_ROLES
from .utils import resolve_joints, mirror_pose, validate_pose
from .config import LandmarkConfig
from .exceptions import HandTrackingError, LandmarkCountError

__version__ = "1.0.0"
__all__ = [
    "JointSample",
    "HandPose",
    "JointRole",
    "REQUIRED_ROLES",
    "resolve_joints",
    "mirror_pose",
    "validate_pose",
    "LandmarkConfig",
    "HandTrackingError",
    "LandmarkCountError",
]
