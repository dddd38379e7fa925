class OrthocalError(Exception):
    """Base error."""

class InvalidDate(OrthocalError, ValueError):
    """Raised when a (year, month, day, kind) or day number names no valid date."""

class InvalidConfiguration(OrthocalError, ValueError):
    """Raised when an indent week number falls outside 1..33."""

class NumericConversionError(OrthocalError, ValueError):
    """Raised when a year string is not a decimal integer."""

class OutOfRange(OrthocalError, ValueError):
    """Raised when a year is below the supported minimum (2)."""

class InvariantViolation(AssertionError):
    """Internal contract breach in the marker index; never a user error."""
