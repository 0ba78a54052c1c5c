from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class SaleStatus(models.TextChoices):
    PENDING = 'pending', 'Pendiente'
    ACCEPTED = 'accepted', 'Aceptada'
    REJECTED = 'rejected', 'Rechazada'


ALLOWED_TRANSITIONS = {
    SaleStatus.PENDING: {SaleStatus.ACCEPTED, SaleStatus.REJECTED},
    SaleStatus.ACCEPTED: set(),
    SaleStatus.REJECTED: set(),
}


class NightSale(models.Model):
    """Cash collected by a cook during a night shift, awaiting admin acceptance."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cook = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='night_sales'
    )
    total_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    description = models.TextField(null=True, blank=True)

    status = models.CharField(
        max_length=10,
        choices=SaleStatus.choices,
        default=SaleStatus.PENDING
    )

    created_at = models.DateTimeField(auto_now_add=True)
    accepted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'night_sales'
        indexes = [
            models.Index(fields=['status', '-created_at'], name='night_status_created_idx'),
            models.Index(fields=['status', '-accepted_at'], name='night_status_accepted_idx'),
            models.Index(fields=['cook', '-created_at'], name='night_cook_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.cook} - {self.total_amount} MXN ({self.status})"

    @property
    def is_accepted(self):
        return self.status == SaleStatus.ACCEPTED

    def can_transition_to(self, new_status):
        return new_status in ALLOWED_TRANSITIONS[SaleStatus(self.status)]
