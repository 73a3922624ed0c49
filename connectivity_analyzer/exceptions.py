"""
Custom exceptions for connectivity analysis.

This module defines a hierarchy of exceptions that separates "no data"
outcomes (which never raise) from caller mistakes such as handing the
segmenter an unsorted event sequence.
"""

from typing import Optional


class ConnectivityAnalysisError(Exception):
    """Base exception for all connectivity analysis errors."""

    pass


class PreconditionViolation(ConnectivityAnalysisError):
    """Raised when a caller ignores a documented input precondition."""

    pass


class UnsortedEventsError(PreconditionViolation):
    """Raised when events are not in ascending timestamp order.

    Attributes:
        index: Position of the first event that is earlier than its
            predecessor.
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.index is not None:
            return f"{base} (index: {self.index})"
        return base


class MixedTimezoneError(PreconditionViolation):
    """Raised when naive and timezone-aware timestamps are mixed.

    Attributes:
        index: Position of the first event whose awareness differs from
            the first event's.
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.index is not None:
            return f"{base} (index: {self.index})"
        return base


class DataValidationError(ConnectivityAnalysisError):
    """Raised when a raw record fails validation.

    Attributes:
        field: Name of the offending field (if known).
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            return f"{base} (field: {self.field})"
        return base


class ConfigurationError(ConnectivityAnalysisError):
    """Raised for configuration-related errors."""

    pass
