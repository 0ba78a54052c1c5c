"""
Domain exceptions for night sales app.

This module defines the exception hierarchy for the cash handoff workflow.
"""


class NightSalesServiceError(Exception):
    """Base exception for night sales service errors."""
    pass


class NightSaleNotFoundError(NightSalesServiceError):
    """Raised when a night sale does not exist."""
    pass


class InvalidAmountError(NightSalesServiceError):
    """Raised when the reported amount is not positive."""
    pass


class InvalidSaleTransitionError(NightSalesServiceError):
    """Raised when the sale was already accepted or rejected."""
    pass
