"""
Landmark conversion settings.
"""

from dataclasses import dataclass


@dataclass
class LandmarkConfig:
    """Configuration for converting MediaPipe hand landmarks into hand poses."""

    # MediaPipe world landmarks have y pointing down; flip so "up" is positive
    flip_y: bool = True

    # Negate x (use when the tracked hand is the mirror of the training hand)
    mirror: bool = False

    # Number of landmarks per hand produced by MediaPipe Hands
    expected_landmarks: int = 21

    # Scale applied to every coordinate (1.0 keeps meters)
    scale: float = 1.0

    def __post_init__(self):
        """Validate configuration."""
        if self.expected_landmarks < 6:
            raise ValueError("expected_landmarks must be >= 6")
        if self.scale <= 0:
            raise ValueError("scale must be positive")
