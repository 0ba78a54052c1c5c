"""
Kitchen list workflow.

A list moves ``pending -> approved`` or ``pending -> rejected`` exactly once.
Approval turns every line into a shopping item; the status flip and the
inserted items share one transaction so a failed insert leaves the list
pending. Rows are locked with ``select_for_update`` before the status check,
so two admins acting on the same list cannot both succeed.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.kitchen.models import KitchenList, KitchenListItem, ListStatus
from apps.purchases.models import PurchaseItem
from apps.purchases.services import ShoppingListService

from .exceptions import (
    KitchenListNotFoundError,
    InvalidKitchenListError,
    EmptyKitchenListError,
    InvalidListTransitionError,
    NotListOwnerError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = '1'


def _lock_list(list_id: UUID) -> KitchenList:
    try:
        return (
            KitchenList.objects
            .select_for_update()
            .get(id=list_id)
        )
    except KitchenList.DoesNotExist:
        raise KitchenListNotFoundError(f"Kitchen list with ID {list_id} not found")


def _require_admin(user: User) -> None:
    if not user.is_admin:
        raise InsufficientPermissionsError("Solo un administrador puede revisar listas")


def _transition(kitchen_list: KitchenList, new_status: str) -> None:
    if not kitchen_list.can_transition_to(new_status):
        raise InvalidListTransitionError(
            f"List {kitchen_list.id} is {kitchen_list.status} and cannot become {new_status}"
        )
    kitchen_list.status = new_status


def _build_lines(lines: Iterable[dict]) -> List[KitchenListItem]:
    items = []
    for position, line in enumerate(lines):
        name = (line.get('name') or '').strip()
        if not name:
            raise InvalidKitchenListError("Cada producto necesita un nombre")

        estimated_price = line.get('estimated_price')
        items.append(KitchenListItem(
            name=name,
            quantity=(line.get('quantity') or '').strip() or DEFAULT_QUANTITY,
            estimated_price=Decimal(estimated_price) if estimated_price is not None else None,
            position=position,
        ))
    return items


@transaction.atomic
def submit_list(
    *,
    owner: User,
    title: str,
    target_date: date,
    lines: Iterable[dict]
) -> KitchenList:
    """
    Submit a restock list.

    Lists submitted by an admin skip review: they are stored approved and
    their lines become shopping items dated ``target_date`` right away.

    Args:
        owner: Submitting user (cook or admin)
        title: List title
        target_date: Day the ingredients are needed
        lines: Dicts with ``name``, ``quantity`` and optional ``estimated_price``.
            A blank quantity is stored as ``"1"``.

    Returns:
        Created KitchenList instance

    Raises:
        InvalidKitchenListError: If the title or a line name is blank
        EmptyKitchenListError: If there are no lines
    """
    title = (title or '').strip()
    if not title:
        raise InvalidKitchenListError("El título es obligatorio")

    items = _build_lines(lines)
    if not items:
        raise EmptyKitchenListError("Agrega al menos un producto")

    kitchen_list = KitchenList.objects.create(
        owner=owner,
        title=title,
        target_date=target_date,
        status=ListStatus.PENDING,
    )
    for item in items:
        item.kitchen_list = kitchen_list
    KitchenListItem.objects.bulk_create(items)

    if owner.is_admin:
        ShoppingListService.create_items_from_lines(items, target_date)
        _transition(kitchen_list, ListStatus.APPROVED)
        kitchen_list.approved_at = timezone.now()
        kitchen_list.save(update_fields=['status', 'approved_at'])
        logger.info("Kitchen list %s submitted by admin %s and auto-approved", kitchen_list.id, owner.email)
    else:
        logger.info("Kitchen list %s submitted by %s", kitchen_list.id, owner.email)

    return kitchen_list


@transaction.atomic
def approve_list(
    *,
    list_id: UUID,
    actor: User,
    purchase_date: Optional[date] = None
) -> List[PurchaseItem]:
    """
    Approve a pending list and materialize its lines.

    Args:
        list_id: UUID of the list
        actor: Reviewing admin
        purchase_date: Date for the created shopping items (default today)

    Returns:
        The created shopping items, one per line

    Raises:
        KitchenListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If actor is not an admin
        InvalidListTransitionError: If the list is no longer pending
    """
    _require_admin(actor)
    kitchen_list = _lock_list(list_id)
    _transition(kitchen_list, ListStatus.APPROVED)

    created = ShoppingListService.create_items_from_lines(
        kitchen_list.items.all(),
        purchase_date or timezone.localdate(),
    )

    kitchen_list.approved_at = timezone.now()
    kitchen_list.save(update_fields=['status', 'approved_at'])

    logger.info("Kitchen list %s approved by %s (%d items)", kitchen_list.id, actor.email, len(created))
    return created


@transaction.atomic
def reject_list(*, list_id: UUID, actor: User) -> KitchenList:
    """
    Reject a pending list. No shopping items are created.

    Raises:
        KitchenListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If actor is not an admin
        InvalidListTransitionError: If the list is no longer pending
    """
    _require_admin(actor)
    kitchen_list = _lock_list(list_id)
    _transition(kitchen_list, ListStatus.REJECTED)
    kitchen_list.save(update_fields=['status'])

    logger.info("Kitchen list %s rejected by %s", kitchen_list.id, actor.email)
    return kitchen_list


@transaction.atomic
def hide_list(*, list_id: UUID, user: User) -> KitchenList:
    """
    Soft-delete a list from the cook's own view.

    Only the owner may hide a list and only while it is pending; admins
    still see it.

    Raises:
        KitchenListNotFoundError: If list doesn't exist or is already hidden
        NotListOwnerError: If user doesn't own the list
        InvalidListTransitionError: If the list was already reviewed
    """
    kitchen_list = _lock_list(list_id)

    if kitchen_list.owner_id != user.id:
        raise NotListOwnerError("Solo puedes eliminar tus propias listas")
    if kitchen_list.deleted_by_cook is not None:
        raise KitchenListNotFoundError(f"Kitchen list with ID {list_id} not found")
    if not kitchen_list.is_pending:
        raise InvalidListTransitionError("Solo se pueden eliminar listas pendientes")

    kitchen_list.deleted_by_cook = timezone.now()
    kitchen_list.save(update_fields=['deleted_by_cook'])

    logger.info("Kitchen list %s hidden by its owner", kitchen_list.id)
    return kitchen_list


@transaction.atomic
def delete_list(
    *,
    list_id: UUID,
    actor: User,
    materialize: bool = False,
    purchase_date: Optional[date] = None
) -> int:
    """
    Permanently delete a reviewed list.

    With ``materialize`` the lines are first copied into shopping items
    dated ``purchase_date`` (default today); the list status is left as is
    since the row is removed right after.

    Returns:
        Number of shopping items created

    Raises:
        KitchenListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If actor is not an admin
        InvalidListTransitionError: If the list is still pending
    """
    _require_admin(actor)
    kitchen_list = _lock_list(list_id)

    if kitchen_list.is_pending:
        raise InvalidListTransitionError("Aprueba o rechaza la lista antes de eliminarla")

    created = []
    if materialize:
        created = ShoppingListService.create_items_from_lines(
            kitchen_list.items.all(),
            purchase_date or timezone.localdate(),
        )

    kitchen_list.delete()

    logger.info(
        "Kitchen list %s deleted by %s (materialized %d items)",
        list_id, actor.email, len(created)
    )
    return len(created)


def get_own_lists(*, owner: User) -> QuerySet:
    """Lists of a user not hidden by them, newest first."""
    return (
        KitchenList.objects
        .filter(owner=owner, deleted_by_cook__isnull=True)
        .prefetch_related('items')
        .order_by('-created_at')
    )


def get_recent_lists(*, owner: User, limit: Optional[int] = None) -> QuerySet:
    """Most recent own lists for the cook dashboard."""
    limit = limit or settings.COOK_RECENT_LISTS_LIMIT
    return get_own_lists(owner=owner)[:limit]


def get_pending_lists() -> QuerySet:
    """Lists awaiting review, soonest target date first."""
    return (
        KitchenList.objects
        .filter(status=ListStatus.PENDING)
        .select_related('owner')
        .prefetch_related('items')
        .order_by('target_date', 'created_at')
    )
