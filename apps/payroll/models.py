from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid


class PayrollPayment(models.Model):
    """
    Payment made to a cook.

    Counted as an expense when movements and dashboard totals are built;
    it never changes the capital balance.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='payroll_payments'
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    days_worked = models.PositiveIntegerField(default=0)
    notes = models.TextField(blank=True, default='')
    payment_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'payroll'
        indexes = [
            models.Index(fields=['-payment_date'], name='payroll_date_idx'),
            models.Index(fields=['employee', '-payment_date'], name='payroll_employee_date_idx'),
        ]
        ordering = ['-payment_date']

    def __str__(self):
        return f"{self.employee} - {self.amount} MXN"
