"""
Domain exceptions for capital app.

Exception Hierarchy:
    CapitalServiceError (base)
    └── CapitalNotFoundError
"""


class CapitalServiceError(Exception):
    """Base exception for capital service errors."""
    pass


class CapitalNotFoundError(CapitalServiceError):
    """Raised when the capital row is missing and could not be created."""
    pass
