"""
Domain exceptions for purchases app.

This module defines the exception hierarchy for shopping-list errors,
with one type per failure the views map to an HTTP status.
"""


class PurchaseServiceError(Exception):
    """Base exception for purchase service errors."""
    pass


class PurchaseItemNotFoundError(PurchaseServiceError):
    """Raised when a shopping item does not exist."""
    pass


class InvalidPurchaseItemError(PurchaseServiceError):
    """Raised when item data is invalid (empty name, negative price)."""
    pass
