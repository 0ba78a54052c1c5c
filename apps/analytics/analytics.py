"""
Analytics Module
=================

This module provides read-only queries for the admin screens. It
aggregates shopping items, payroll payments and night sales into the
movements feed, the dashboard figures and the spending summaries.

Classes:
    AnalyticsQueries: Static methods for the analytics endpoints.

Key Features:
    - Unified movements feed (shopping days, payroll, accepted night sales)
    - Dashboard totals: capital, total spent, spent today, recent income
    - Spending over the current week, month and year
    - Per-day breakdown of a period

Example:
    Getting dashboard figures::

        from apps.analytics.analytics import AnalyticsQueries

        data = AnalyticsQueries.dashboard()
        print(f"Capital: {data['capital']} MXN")
        print(f"Spent today: {data['spent_today']} MXN")

Note:
    This module is read-only and doesn't modify any data, except that
    reading capital seeds the capital row when it is missing.
"""

from collections import OrderedDict
from datetime import timedelta
from decimal import Decimal

from django.db.models import Sum
from django.utils import timezone

from apps.capital.services import LedgerService
from apps.night_sales.models import NightSale, SaleStatus
from apps.night_sales.services import NightSaleService
from apps.payroll.models import PayrollPayment
from apps.purchases.models import PurchaseItem

from .exceptions import InvalidPeriodError
from .movements import build_movements

WEEK = 'week'
MONTH = 'month'
YEAR = 'year'
PERIODS = (WEEK, MONTH, YEAR)


def period_start(period, today):
    """
    First day included in a spending period.

    ``week`` covers the last seven days including today, ``month`` starts
    on the first of the current month and ``year`` on January 1st.

    Raises:
        InvalidPeriodError: If period is not week, month or year.
    """
    if period == WEEK:
        return today - timedelta(days=6)
    if period == MONTH:
        return today.replace(day=1)
    if period == YEAR:
        return today.replace(month=1, day=1)
    raise InvalidPeriodError(f"Invalid period '{period}'. Use one of: {', '.join(PERIODS)}")


def _sum(queryset, field):
    return queryset.aggregate(total=Sum(field))['total'] or Decimal('0.00')


class AnalyticsQueries:
    """
    Queries for analytics endpoints.

    Methods:
        movements: Unified reverse-chronological money feed.
        dashboard: Capital, spending totals, recent income and movements.
        spending_summary: Shopping spend for week, month and year.
        period_breakdown: Shopping items of a period grouped per day.

    Note:
        All methods return plain dictionaries or lists, recomputed from the
        current records on every call.
    """

    @staticmethod
    def movements():
        """
        Build the movements feed.

        Returns:
            list[dict]: Entries with ``type`` (shopping | payroll |
            night_sale), ``id``, ``date``, ``title``, ``amount`` and
            ``details``, most recent first.
        """
        items = PurchaseItem.objects.only('purchase_date', 'price').order_by('-purchase_date')
        payments = PayrollPayment.objects.select_related('employee').order_by('-payment_date')
        sales = (
            NightSale.objects
            .filter(status=SaleStatus.ACCEPTED)
            .select_related('cook')
            .order_by('-accepted_at')
        )
        return build_movements(items, payments, sales)

    @staticmethod
    def dashboard(now=None):
        """
        Admin home screen figures.

        Returns:
            dict: A dictionary containing:
                - capital (Decimal): Current capital balance.
                - total_spent (Decimal): All shopping items plus all payroll.
                - spent_today (Decimal): Shopping items dated today.
                - recent_income (Decimal): Night sales accepted in the
                  dashboard income window.
                - movements (list): The movements feed.
        """
        now = now or timezone.now()
        today = timezone.localdate(now)

        shopping_total = _sum(PurchaseItem.objects.all(), 'price')
        payroll_total = _sum(PayrollPayment.objects.all(), 'amount')

        return {
            'capital': LedgerService.read(),
            'total_spent': shopping_total + payroll_total,
            'spent_today': _sum(PurchaseItem.objects.filter(purchase_date=today), 'price'),
            'recent_income': NightSaleService.recent_income(now=now),
            'movements': AnalyticsQueries.movements(),
        }

    @staticmethod
    def spending_summary(today=None):
        """
        Shopping spend over the current week, month and year.

        Returns:
            dict: ``week``, ``month``, ``year`` totals and ``capital``.
        """
        today = today or timezone.localdate()

        summary = {}
        for period in PERIODS:
            items = PurchaseItem.objects.filter(
                purchase_date__gte=period_start(period, today),
                purchase_date__lte=today,
            )
            summary[period] = _sum(items, 'price')

        summary['capital'] = LedgerService.read()
        return summary

    @staticmethod
    def period_breakdown(period, today=None):
        """
        Shopping items since the period start grouped per day.

        Args:
            period (str): ``week``, ``month`` or ``year``.
            today (date, optional): Reference day, defaults to today.

        Returns:
            dict: ``period``, ``start_date``, ``days`` (most recent first,
            each ``{date, items, total}``) and ``grand_total``.

        Raises:
            InvalidPeriodError: If period is unknown.
        """
        today = today or timezone.localdate()
        start_date = period_start(period, today)

        items = (
            PurchaseItem.objects
            .filter(purchase_date__gte=start_date)
            .order_by('-purchase_date', '-created_at')
        )

        grouped = OrderedDict()
        for item in items:
            grouped.setdefault(item.purchase_date, []).append(item)

        days = [
            {
                'date': purchase_date,
                'items': day_items,
                'total': sum((item.price for item in day_items), Decimal('0.00')),
            }
            for purchase_date, day_items in grouped.items()
        ]

        return {
            'period': period,
            'start_date': start_date,
            'days': days,
            'grand_total': sum((day['total'] for day in days), Decimal('0.00')),
        }
