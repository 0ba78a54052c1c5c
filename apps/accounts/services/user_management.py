"""
Cook account management.

Admins create cook accounts and remove them. Removal is a soft delete so
kitchen lists, night sales and payroll rows keep pointing at a real user.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
from django.db.models import QuerySet

from apps.accounts.models import UserRole

from .exceptions import DuplicateEmailError, UserNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)


def list_cooks() -> QuerySet:
    """Active cooks ordered by name."""
    return User.objects.cooks().order_by('name', 'email')


@transaction.atomic
def create_cook(*, name: str, email: str, password: str) -> User:
    """
    Create a cook account.

    Raises:
        DuplicateEmailError: If the email is already registered
    """
    normalized_email = email.strip().lower()

    if User.objects.filter(email=normalized_email).exists():
        raise DuplicateEmailError(f"El correo {normalized_email} ya está registrado")

    try:
        user = User.objects.create_user(
            email=normalized_email,
            password=password,
            name=name.strip(),
            role=UserRole.COOK,
        )
    except IntegrityError:
        raise DuplicateEmailError(f"El correo {normalized_email} ya está registrado")

    logger.info("Cook account created: %s", user.email)
    return user


@transaction.atomic
def remove_user(*, user_id: UUID) -> User:
    """
    Soft-delete a cook account. Admin accounts cannot be removed here.

    Raises:
        UserNotFoundError: If no active cook has this id
    """
    try:
        user = (
            User.objects
            .cooks()
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    user.soft_delete()
    logger.info("User %s soft-deleted", user.email)
    return user
