"""Domain exceptions for payroll app."""


class PayrollServiceError(Exception):
    """Base exception for payroll service errors."""
    pass


class PaymentNotFoundError(PayrollServiceError):
    """Raised when a payment does not exist."""
    pass


class InvalidPaymentError(PayrollServiceError):
    """Raised when the amount is not positive or the employee is not an active cook."""
    pass
