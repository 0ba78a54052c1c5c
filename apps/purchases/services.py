"""
Purchase Services Module
=========================

This module provides business logic for the daily shopping list.

Classes:
    ShoppingListService: Item CRUD, per-date listing, history and the bulk
        materialization used when a kitchen list is approved.

Example:
    Materializing the lines of an approved kitchen list::

        from apps.purchases.services import ShoppingListService

        items = ShoppingListService.create_items_from_lines(
            lines=kitchen_list.items.all(),
            purchase_date=date.today(),
        )
        # "Tomate (0)", "Queso (5)", ...
"""

import logging
from collections import OrderedDict
from decimal import Decimal

from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from .exceptions import PurchaseItemNotFoundError, InvalidPurchaseItemError
from .models import PurchaseItem

logger = logging.getLogger(__name__)


def materialized_item_name(name, quantity):
    """Name given to a shopping item created from a kitchen list line."""
    return f"{name} ({quantity})"


class ShoppingListService:
    """
    Service for shopping list management.

    Methods:
        create_item: Add a single item to a date's list.
        update_item: Rename and/or reprice an item.
        toggle_item: Flip an item's completion.
        delete_item: Remove an item.
        items_for_date: Items and totals of one purchase date.
        history: All items grouped by purchase date.
        create_items_from_lines: Bulk-create items from kitchen list lines.
    """

    @staticmethod
    def _get_item(item_id, lock=False):
        queryset = PurchaseItem.objects.all()
        if lock:
            queryset = queryset.select_for_update()
        try:
            return queryset.get(id=item_id)
        except PurchaseItem.DoesNotExist:
            raise PurchaseItemNotFoundError(f"Shopping item {item_id} not found")

    @staticmethod
    def create_item(name, purchase_date=None, price=None):
        """
        Add an item to the shopping list.

        Args:
            name (str): Item name; must not be blank.
            purchase_date (date, optional): Defaults to today.
            price (Decimal, optional): Defaults to 0.

        Returns:
            PurchaseItem: The created item.

        Raises:
            InvalidPurchaseItemError: If the name is blank or price negative.
        """
        name = (name or '').strip()
        if not name:
            raise InvalidPurchaseItemError("Item name is required")

        price = Decimal(price) if price is not None else Decimal('0.00')
        if price < 0:
            raise InvalidPurchaseItemError("Price cannot be negative")

        return PurchaseItem.objects.create(
            name=name,
            price=price,
            purchase_date=purchase_date or timezone.localdate(),
            is_completed=False,
        )

    @staticmethod
    @transaction.atomic
    def update_item(item_id, name=None, price=None):
        """Rename and/or reprice an item in place."""
        item = ShoppingListService._get_item(item_id, lock=True)
        update_fields = ['updated_at']

        if name is not None:
            name = name.strip()
            if not name:
                raise InvalidPurchaseItemError("Item name is required")
            item.name = name
            update_fields.append('name')

        if price is not None:
            price = Decimal(price)
            if price < 0:
                raise InvalidPurchaseItemError("Price cannot be negative")
            item.price = price
            update_fields.append('price')

        item.save(update_fields=update_fields)
        return item

    @staticmethod
    @transaction.atomic
    def toggle_item(item_id):
        """Flip completion of an item."""
        item = ShoppingListService._get_item(item_id, lock=True)
        item.toggle_completed()
        return item

    @staticmethod
    def delete_item(item_id):
        item = ShoppingListService._get_item(item_id)
        item.delete()

    @staticmethod
    def items_for_date(purchase_date):
        """
        Items of one purchase date with list totals.

        Returns:
            dict: ``date``, ``items`` (pending first), ``total``,
            ``pending_count`` and ``completed_count``.
        """
        items = list(
            PurchaseItem.objects
            .filter(purchase_date=purchase_date)
            .order_by('is_completed', 'created_at')
        )
        completed = [item for item in items if item.is_completed]

        return {
            'date': purchase_date,
            'items': items,
            'total': sum((item.price for item in items), Decimal('0.00')),
            'pending_count': len(items) - len(completed),
            'completed_count': len(completed),
        }

    @staticmethod
    def history():
        """
        All items grouped by purchase date, most recent date first.

        Returns:
            dict: ``days`` (list of ``{date, items, count, total}``) and
            ``grand_total``.
        """
        grouped = OrderedDict()
        for item in PurchaseItem.objects.order_by('-purchase_date', 'created_at'):
            grouped.setdefault(item.purchase_date, []).append(item)

        days = [
            {
                'date': purchase_date,
                'items': items,
                'count': len(items),
                'total': sum((item.price for item in items), Decimal('0.00')),
            }
            for purchase_date, items in grouped.items()
        ]
        grand_total = PurchaseItem.objects.aggregate(total=Sum('price'))['total'] or Decimal('0.00')

        return {'days': days, 'grand_total': grand_total}

    @staticmethod
    def create_items_from_lines(lines, purchase_date):
        """
        Create one shopping item per kitchen list line.

        Each item is named ``"{line.name} ({line.quantity})"``, priced with
        the line's estimated price (or 0), dated ``purchase_date`` and left
        not completed. Runs in the caller's transaction; if the insert
        fails nothing is created.

        Args:
            lines (Iterable): Objects with ``name``, ``quantity`` and
                ``estimated_price`` attributes.
            purchase_date (date): Date the items are scheduled for.

        Returns:
            list[PurchaseItem]: The created items, in line order.
        """
        items = [
            PurchaseItem(
                name=materialized_item_name(line.name, line.quantity),
                price=line.estimated_price or Decimal('0.00'),
                purchase_date=purchase_date,
                is_completed=False,
            )
            for line in lines
        ]
        created = PurchaseItem.objects.bulk_create(items)
        logger.info("Materialized %d shopping items for %s", len(created), purchase_date)
        return created
