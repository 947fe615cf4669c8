"""
Utility functions for hand poses.
"""

import math
from typing import Dict, Iterable, Optional

from .models import HandPose, JointRole, JointSample, REQUIRED_ROLES


def resolve_joints(joints: Iterable[JointSample]) -> Dict[JointRole, JointSample]:
    """
    Resolve the required joint roles from a joint sequence.

    A role is filled by the first joint whose name contains the role key
    (case-sensitive), so vendor-qualified names such as "hand.indexFingerTip"
    still resolve.

    Args:
        joints: Joints in pose order

    Returns:
        Mapping of role to joint; unresolved roles are absent
    """
    resolved: Dict[JointRole, JointSample] = {}
    pending = list(REQUIRED_ROLES)

    for joint in joints:
        if not pending:
            break
        for role in list(pending):
            if role.key in joint.name:
                resolved[role] = joint
                pending.remove(role)

    return resolved


def mirror_pose(pose: HandPose, horizontal: bool = True, vertical: bool = False) -> HandPose:
    """
    Flip joint positions horizontally (x) and/or vertically (y).

    Args:
        pose: Input pose
        horizontal: Negate x (mirror left/right hand)
        vertical: Negate y

    Returns:
        Flipped pose
    """
    if not horizontal and not vertical:
        return pose

    sx = -1.0 if horizontal else 1.0
    sy = -1.0 if vertical else 1.0
    joints = [
        JointSample(name=j.name, position=(j.x * sx, j.y * sy, j.z))
        for j in pose.joints
    ]
    return HandPose(is_tracked=pose.is_tracked, joints=joints)


def validate_pose(pose: Optional[HandPose]) -> bool:
    """
    Validate that a pose is usable for classification.

    Args:
        pose: Pose to validate

    Returns:
        True if the pose is tracked, has joints and all positions are finite
    """
    if pose is None:
        return False
    if not isinstance(pose, HandPose):
        return False
    if not pose.is_tracked or len(pose.joints) == 0:
        return False
    for joint in pose.joints:
        if not all(math.isfinite(v) for v in joint.position):
            return False
    return True
