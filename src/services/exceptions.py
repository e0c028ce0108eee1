"""
Service-level exceptions.

This module contains exceptions that can be raised by the analytics services.
Callers are expected to check record counts up front and show a "need more
data" state; InsufficientDataError signals a violated precondition.
"""

class AnalyticsError(Exception):
    """Base exception for cycle analytics errors."""
    pass

class InsufficientDataError(AnalyticsError):
    """Raised when an analysis receives fewer records than it requires."""

    def __init__(self, required: int, actual: int, analysis: str = "analysis"):
        self.required = required
        self.actual = actual
        self.analysis = analysis
        super().__init__(
            f"{analysis} requires at least {required} record(s), got {actual}"
        )

class ImageDecodeError(AnalyticsError):
    """Raised when an uploaded image payload cannot be decoded."""
    pass
