"""
Movements projection.

Builds the unified money feed from a snapshot of records. Nothing here
touches the database: callers pass the rows in, the same rows always give
the same feed.
"""

from collections import OrderedDict
from datetime import datetime, time
from decimal import Decimal

from django.utils import timezone

SHOPPING = 'shopping'
PAYROLL = 'payroll'
NIGHT_SALE = 'night_sale'

SHOPPING_TITLE = 'Lista de Compras'


def _sort_key(value):
    """Dates sort as local midnight so they compare with datetimes."""
    if isinstance(value, datetime):
        return value
    return timezone.make_aware(datetime.combine(value, time.min))


def shopping_entries(items):
    """One entry per purchase date with the day's item count and price sum."""
    by_date = OrderedDict()
    for item in items:
        day = by_date.setdefault(item.purchase_date, {'count': 0, 'total': Decimal('0.00')})
        day['count'] += 1
        day['total'] += item.price or Decimal('0.00')

    return [
        {
            'type': SHOPPING,
            'id': f'shopping-{purchase_date.isoformat()}',
            'date': purchase_date,
            'title': SHOPPING_TITLE,
            'amount': day['total'],
            'details': f"{day['count']} items",
        }
        for purchase_date, day in by_date.items()
    ]


def payroll_entries(payments):
    return [
        {
            'type': PAYROLL,
            'id': str(payment.id),
            'date': payment.payment_date,
            'title': f'Pago Nómina: {payment.employee.get_display_name()}',
            'amount': payment.amount,
            'details': payment.notes or 'Sin notas',
        }
        for payment in payments
    ]


def night_sale_entries(sales):
    """Entries for accepted sales only, dated by acceptance."""
    return [
        {
            'type': NIGHT_SALE,
            'id': str(sale.id),
            'date': sale.accepted_at,
            'title': f'Venta Nocturna: {sale.cook.get_display_name()}',
            'amount': sale.total_amount,
            'details': sale.description or 'Sin descripción',
        }
        for sale in sales
        if sale.is_accepted and sale.accepted_at is not None
    ]


def build_movements(items, payments, sales):
    """
    Merge shopping days, payroll payments and accepted night sales into one
    list, most recent first. Entries with the same moment keep input order.

    Args:
        items: Purchase items (``purchase_date``, ``price``).
        payments: Payroll payments with ``employee`` loaded.
        sales: Night sales with ``cook`` loaded; non-accepted ones are skipped.

    Returns:
        list[dict]: ``{type, id, date, title, amount, details}`` entries.
    """
    movements = shopping_entries(items) + payroll_entries(payments) + night_sale_entries(sales)
    movements.sort(key=lambda entry: _sort_key(entry['date']), reverse=True)
    return movements
