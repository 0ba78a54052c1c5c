"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    DuplicateEmailError,
    UserNotFoundError,
)
from .user_authentication import authenticate_user
from .user_management import list_cooks, create_cook, remove_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'DuplicateEmailError',
    'UserNotFoundError',
    # Services
    'authenticate_user',
    'list_cooks',
    'create_cook',
    'remove_user',
]
