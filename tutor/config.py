"""
Tutor configuration.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TutorConfig:
    """Configuration for lessons and training-sample collection."""

    # Polling
    poll_interval: float = 0.1           # Seconds between classifications (10 Hz)
    max_updates: Optional[int] = None    # None = run until stopped

    # Lesson feedback tiers
    success_confidence: float = 0.85     # Target sign above this counts as learned
    progress_confidence: float = 0.65    # Target sign above this is "almost there"

    # Data collection
    target_samples_per_sign: int = 100

    # Output settings
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if not 0.0 <= self.progress_confidence <= self.success_confidence <= 1.0:
            raise ValueError("need 0 <= progress_confidence <= success_confidence <= 1")
        if self.target_samples_per_sign <= 0:
            raise ValueError("target_samples_per_sign must be positive")
        if self.max_updates is not None and self.max_updates < 0:
            raise ValueError("max_updates must be >= 0")
