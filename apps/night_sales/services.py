"""
Night Sales Services Module
===========================

This module provides the cash handoff workflow: cooks report the cash
collected during a night shift, an admin accepts (crediting capital) or
rejects it.

Classes:
    NightSaleService: submit / accept / reject / delete plus the history
        queries used by the cook and admin screens.

Example:
    Accepting a handoff::

        from apps.night_sales.services import NightSaleService

        sale, capital = NightSaleService.accept(sale_id)
        # capital == previous balance + sale.total_amount

Note:
    Accepting a sale and deleting an accepted sale change the sale row and
    the capital balance in one transaction; either both writes land or
    neither does.
"""

import logging
from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.db.models import Q, Sum
from django.utils import timezone

from apps.capital.services import LedgerService

from .exceptions import (
    NightSaleNotFoundError,
    InvalidAmountError,
    InvalidSaleTransitionError,
)
from .models import NightSale, SaleStatus

logger = logging.getLogger(__name__)


class NightSaleService:
    """
    Service for the cash handoff workflow.

    Methods:
        submit: Cook reports cash collected.
        accept: Credit capital and mark accepted.
        reject: Mark rejected, no ledger effect.
        delete: Remove a sale, reversing the credit if it was accepted.
        cook_history: Pending plus recently accepted sales of a cook.
        admin_overview: Pending sales and the last week's accepted ones.
        recent_income: Sum of sales accepted in the dashboard window.
    """

    @staticmethod
    def _lock_sale(sale_id):
        try:
            return NightSale.objects.select_for_update().get(id=sale_id)
        except NightSale.DoesNotExist:
            raise NightSaleNotFoundError(f"Night sale {sale_id} not found")

    @staticmethod
    def _transition(sale, new_status):
        if not sale.can_transition_to(new_status):
            raise InvalidSaleTransitionError(
                f"Night sale {sale.id} is {sale.status} and cannot become {new_status}"
            )
        sale.status = new_status

    @staticmethod
    def submit(cook, total_amount, description=None):
        """
        Report cash collected by a cook.

        Args:
            cook (User): Reporting cook.
            total_amount (Decimal): Cash amount; must be greater than zero.
            description (str, optional): Free text; blank is stored as null.

        Returns:
            NightSale: The pending sale.

        Raises:
            InvalidAmountError: If total_amount <= 0.
        """
        total_amount = Decimal(total_amount)
        if total_amount <= 0:
            raise InvalidAmountError("El monto debe ser mayor a cero")

        description = (description or '').strip() or None

        sale = NightSale.objects.create(
            cook=cook,
            total_amount=total_amount,
            description=description,
            status=SaleStatus.PENDING,
        )
        logger.info("Night sale %s submitted by %s for %s", sale.id, cook.email, total_amount)
        return sale

    @staticmethod
    @transaction.atomic
    def accept(sale_id):
        """
        Accept a pending sale and credit its amount to capital.

        Returns:
            tuple: ``(sale, capital_amount)`` after the credit.

        Raises:
            NightSaleNotFoundError: If the sale doesn't exist.
            InvalidSaleTransitionError: If the sale is not pending.
        """
        sale = NightSaleService._lock_sale(sale_id)
        NightSaleService._transition(sale, SaleStatus.ACCEPTED)

        sale.accepted_at = timezone.now()
        sale.save(update_fields=['status', 'accepted_at'])
        capital = LedgerService.adjust(sale.total_amount)

        logger.info("Night sale %s accepted, capital credited %s", sale.id, sale.total_amount)
        return sale, capital

    @staticmethod
    @transaction.atomic
    def reject(sale_id):
        """Reject a pending sale. Capital is not touched."""
        sale = NightSaleService._lock_sale(sale_id)
        NightSaleService._transition(sale, SaleStatus.REJECTED)
        sale.save(update_fields=['status'])

        logger.info("Night sale %s rejected", sale.id)
        return sale

    @staticmethod
    @transaction.atomic
    def delete(sale_id):
        """
        Delete a sale in any state.

        An accepted sale's amount is subtracted from capital first so the
        balance matches the remaining history.

        Returns:
            Decimal or None: Capital after the reversal, or None when the
            sale had not been accepted.
        """
        sale = NightSaleService._lock_sale(sale_id)

        capital = None
        if sale.is_accepted:
            capital = LedgerService.adjust(-sale.total_amount)
            logger.info("Reversed %s from capital for deleted night sale %s", sale.total_amount, sale.id)

        sale.delete()
        logger.info("Night sale %s deleted", sale_id)
        return capital

    @staticmethod
    def cook_history(cook, now=None):
        """
        Sales shown on the cook's screen.

        All pending sales plus sales accepted within the last
        ``NIGHT_SALES_COOK_WINDOW_HOURS``, newest first, capped at
        ``NIGHT_SALES_COOK_HISTORY_LIMIT``. Rejected sales are not shown.
        """
        now = now or timezone.now()
        window_start = now - timedelta(hours=settings.NIGHT_SALES_COOK_WINDOW_HOURS)

        return (
            NightSale.objects
            .filter(cook=cook)
            .filter(
                Q(status=SaleStatus.PENDING)
                | Q(status=SaleStatus.ACCEPTED, accepted_at__gte=window_start)
            )
            .order_by('-created_at')[:settings.NIGHT_SALES_COOK_HISTORY_LIMIT]
        )

    @staticmethod
    def admin_overview(now=None):
        """
        Pending sales (newest first) and sales accepted in the last
        ``NIGHT_SALES_ADMIN_HISTORY_DAYS`` days (most recently accepted first).
        """
        now = now or timezone.now()
        since = now - timedelta(days=settings.NIGHT_SALES_ADMIN_HISTORY_DAYS)

        pending = (
            NightSale.objects
            .filter(status=SaleStatus.PENDING)
            .select_related('cook')
            .order_by('-created_at')
        )
        accepted = (
            NightSale.objects
            .filter(status=SaleStatus.ACCEPTED, accepted_at__gte=since)
            .select_related('cook')
            .order_by('-accepted_at')
        )
        return {'pending': pending, 'accepted': accepted}

    @staticmethod
    def recent_income(now=None):
        """Sum of sales accepted within ``DASHBOARD_INCOME_WINDOW_HOURS``."""
        now = now or timezone.now()
        since = now - timedelta(hours=settings.DASHBOARD_INCOME_WINDOW_HOURS)

        total = (
            NightSale.objects
            .filter(status=SaleStatus.ACCEPTED, accepted_at__gte=since)
            .aggregate(total=Sum('total_amount'))['total']
        )
        return total or Decimal('0.00')
