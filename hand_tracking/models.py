"""
Hand pose data types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import numpy as np


class JointRole(Enum):
    """Joints the sign classifier needs, keyed by the name substring that identifies them."""

    WRIST = "wrist"
    THUMB_TIP = "thumbTip"
    INDEX_TIP = "indexFingerTip"
    MIDDLE_TIP = "middleFingerTip"
    RING_TIP = "ringFingerTip"
    LITTLE_TIP = "littleFingerTip"

    @property
    def key(self) -> str:
        return self.value


# Conventional positional order of the first six joints in a pose
REQUIRED_ROLES: Tuple[JointRole, ...] = (
    JointRole.WRIST,
    JointRole.THUMB_TIP,
    JointRole.INDEX_TIP,
    JointRole.MIDDLE_TIP,
    JointRole.RING_TIP,
    JointRole.LITTLE_TIP,
)


@dataclass(frozen=True)
class JointSample:
    """A named 3D joint position (meters)."""

    name: str
    position: Tuple[float, float, float]

    def __post_init__(self):
        # Normalize lists / numpy arrays into a plain float tuple
        object.__setattr__(self, "position", tuple(float(v) for v in self.position))
        if len(self.position) != 3:
            raise ValueError(f"position must have 3 components, got {len(self.position)}")

    @property
    def vector(self) -> np.ndarray:
        """Position as a numpy vector."""
        return np.asarray(self.position, dtype=np.float64)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]


@dataclass(frozen=True)
class HandPose:
    """
    One hand-tracking snapshot.

    Joint order matters: callers index positionally (wrist, thumb tip, index tip,
    middle tip, ring tip, little tip first by convention).
    """

    is_tracked: bool
    joints: Tuple[JointSample, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "joints", tuple(self.joints))

    @classmethod
    def untracked(cls) -> "HandPose":
        """Pose for a hand that is not currently visible."""
        return cls(is_tracked=False, joints=())

    def __len__(self) -> int:
        return len(self.joints)
