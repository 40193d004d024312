"""Error kinds raised by the filtering and aggregation engine.

Both errors are recoverable by the caller: the engine signals bad input
instead of silently ignoring it, and the surrounding application decides
whether to fall back to "no filter" or surface a message.
"""

from typing import Optional


class SpendviewError(Exception):
    """Base class for spendview errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.details = details


class InvalidDateFormat(SpendviewError, ValueError):
    """Raised when a custom period date is not a valid YYYY-MM-DD string."""

    def __init__(self, value: str):
        super().__init__(
            f"Invalid date format: {value!r}",
            details="Expected a calendar date in YYYY-MM-DD form",
        )
        self.value = value


class UnknownEnumValue(SpendviewError, ValueError):
    """Raised when a type or category name is outside the closed set."""

    def __init__(self, enum_name: str, value: str, allowed: Optional[list[str]] = None):
        details = f"Allowed: {', '.join(allowed)}" if allowed else None
        super().__init__(f"Unknown {enum_name} value: {value!r}", details=details)
        self.enum_name = enum_name
        self.value = value
