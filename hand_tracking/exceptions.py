"""
Custom exceptions for hand tracking module.
"""


class HandTrackingError(Exception):
    """Base exception for hand-tracking errors."""
    pass


class LandmarkCountError(HandTrackingError):
    """Raised when a landmark list does not have the expected number of points."""
    pass
