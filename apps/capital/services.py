"""
Ledger Service Module
=====================

This module owns the shared "capital" balance: the cash available for
purchases. Every other app changes the balance only through
:class:`LedgerService`.

Classes:
    LedgerService: read / adjust / set operations over the capital row.

Example:
    Crediting an accepted night sale::

        from apps.capital.services import LedgerService
        from decimal import Decimal

        new_amount = LedgerService.adjust(Decimal('1200.50'))

Note:
    ``adjust`` runs a single ``UPDATE capital SET amount = amount + delta``
    through an ``F()`` expression, so concurrent adjustments cannot lose an
    update. Callers that must change another row together with the balance
    wrap both calls in ``transaction.atomic()``.
"""

import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction, DatabaseError
from django.db.models import F

from .exceptions import CapitalNotFoundError
from .models import Capital

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Service that exclusively owns the capital balance.

    Methods:
        read: Return the current amount, seeding the row if absent.
        adjust: Add a (possibly negative) delta atomically.
        set: Overwrite the amount (manual correction by an admin).
    """

    @staticmethod
    def _get_or_create_row():
        row = Capital.objects.order_by('id').first()
        if row is not None:
            return row

        default_amount = Decimal(settings.CAPITAL_DEFAULT_AMOUNT)
        try:
            row = Capital.objects.create(amount=default_amount)
        except DatabaseError:
            logger.exception("Could not create the capital row")
            raise CapitalNotFoundError("Capital record not found and could not be created")

        logger.info("Capital row created with default amount %s", default_amount)
        return row

    @staticmethod
    def read():
        """
        Fetch the current balance.

        Returns:
            Decimal: The current capital amount.

        Raises:
            CapitalNotFoundError: If the row is missing and creation failed.
        """
        return LedgerService._get_or_create_row().amount

    @staticmethod
    @transaction.atomic
    def adjust(delta):
        """
        Add ``delta`` to the balance and return the new amount.

        Args:
            delta (Decimal): Amount to add; negative values subtract.

        Returns:
            Decimal: The balance after the adjustment.
        """
        delta = Decimal(delta)
        row = LedgerService._get_or_create_row()

        Capital.objects.filter(pk=row.pk).update(amount=F('amount') + delta)
        row.refresh_from_db(fields=['amount'])

        logger.info("Capital adjusted by %s, balance now %s", delta, row.amount)
        return row.amount

    @staticmethod
    @transaction.atomic
    def set(new_amount):
        """
        Overwrite the balance unconditionally.

        Returns:
            Decimal: The stored amount.
        """
        new_amount = Decimal(new_amount)
        row = LedgerService._get_or_create_row()

        Capital.objects.filter(pk=row.pk).update(amount=new_amount)
        row.refresh_from_db(fields=['amount'])

        logger.info("Capital manually set to %s", row.amount)
        return row.amount
