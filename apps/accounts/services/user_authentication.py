"""User authentication service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    The email is trimmed and lower-cased before lookup, so logins are
    case-insensitive.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated or soft-deleted
    """
    normalized_email = email.strip().lower()

    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=normalized_email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Credenciales incorrectas")

    if not user.check_password(password):
        raise InvalidCredentialsError("Credenciales incorrectas")

    if not user.is_active or user.deleted_at is not None:
        raise InactiveAccountError("La cuenta está desactivada")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
