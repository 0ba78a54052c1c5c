from django.db import models
from decimal import Decimal


class Capital(models.Model):
    """
    Shared cash balance available for purchases (MXN).

    Only the first row is authoritative. Code outside ``apps.capital.services``
    must not read or write this model directly.
    """

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'capital'
        ordering = ['id']
        verbose_name_plural = 'capital'

    def __str__(self):
        return f"{self.amount} MXN"
