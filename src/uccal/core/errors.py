class UccalError(Exception):
    """Base error."""

class ParseError(UccalError, TypeError):
    """Raised when parse() is given something it cannot read as a date."""

class RangeError(UccalError, ValueError):
    """Raised when a triad or day-of-year falls outside its table."""
