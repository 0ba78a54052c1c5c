"""Domain-specific exceptions for kitchen list services."""


class KitchenServiceError(Exception):
    """Base exception for kitchen services."""
    pass


class KitchenListNotFoundError(KitchenServiceError):
    """Raised when a kitchen list does not exist."""
    pass


class InvalidKitchenListError(KitchenServiceError):
    """Raised when the list title or a line name is blank."""
    pass


class EmptyKitchenListError(KitchenServiceError):
    """Raised when a list is submitted without lines."""
    pass


class InvalidListTransitionError(KitchenServiceError):
    """Raised when the list is not in a state that allows the operation."""
    pass


class NotListOwnerError(KitchenServiceError):
    """Raised when a cook acts on someone else's list."""
    pass


class InsufficientPermissionsError(KitchenServiceError):
    """Raised when the user's role doesn't allow the operation."""
    pass
