"""
Custom exceptions for gesture classifier package.
"""


class GestureClassifierError(Exception):
    """Base exception for gesture classification errors."""
    pass


class ClassifierConfigurationError(GestureClassifierError, ValueError):
    """Raised when classifier thresholds or policy settings are invalid."""
    pass
