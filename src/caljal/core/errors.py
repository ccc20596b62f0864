class CaljalError(Exception):
    """Base error."""

class OutOfRangeError(CaljalError, ValueError):
    """Raised when a Solar year falls outside the break-point table."""

class ValidationError(CaljalError, ValueError):
    """Raised when a JalaliDateTime field is outside its documented bound."""
