"""
Payroll service.

Payments are plain expense records: recording or deleting one never
touches capital.
"""

import logging
from decimal import Decimal
from uuid import UUID

from django.conf import settings
from django.db.models import QuerySet, Sum
from django.utils import timezone

from apps.accounts.models import User

from .exceptions import PaymentNotFoundError, InvalidPaymentError
from .models import PayrollPayment

logger = logging.getLogger(__name__)


def record_payment(
    *,
    employee_id: UUID,
    amount: Decimal,
    days_worked: int = 0,
    notes: str = ''
) -> PayrollPayment:
    """
    Record a payment to a cook, dated now.

    Raises:
        InvalidPaymentError: If amount <= 0 or the employee is not an active cook
    """
    amount = Decimal(amount)
    if amount <= 0:
        raise InvalidPaymentError("El monto debe ser mayor a cero")

    try:
        employee = User.objects.cooks().get(id=employee_id)
    except User.DoesNotExist:
        raise InvalidPaymentError(f"Employee {employee_id} is not an active cook")

    payment = PayrollPayment.objects.create(
        employee=employee,
        amount=amount,
        days_worked=days_worked or 0,
        notes=(notes or '').strip(),
        payment_date=timezone.now(),
    )
    logger.info("Payroll payment %s of %s recorded for %s", payment.id, amount, employee.email)
    return payment


def delete_payment(*, payment_id: UUID) -> None:
    deleted, _ = PayrollPayment.objects.filter(id=payment_id).delete()
    if not deleted:
        raise PaymentNotFoundError(f"Payment {payment_id} not found")
    logger.info("Payroll payment %s deleted", payment_id)


def recent_payments(*, limit: int = None) -> QuerySet:
    """Most recent payments across all cooks."""
    limit = limit or settings.PAYROLL_RECENT_LIMIT
    return (
        PayrollPayment.objects
        .select_related('employee')
        .order_by('-payment_date')[:limit]
    )


def employee_payments(*, employee: User) -> dict:
    """
    A cook's own payments, newest first, with the total paid in the
    current calendar month (local time).
    """
    payments = (
        PayrollPayment.objects
        .filter(employee=employee)
        .select_related('employee')
        .order_by('-payment_date')
    )

    month_start = timezone.localtime().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    month_total = (
        payments
        .filter(payment_date__gte=month_start)
        .aggregate(total=Sum('amount'))['total']
    )

    return {
        'payments': payments,
        'month_total': month_total or Decimal('0.00'),
    }
