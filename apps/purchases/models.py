from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class PurchaseItem(models.Model):
    """Single priced expense line tied to a purchase date."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)

    # Price may be 0 (unknown yet, e.g. materialized from a kitchen list)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    purchase_date = models.DateField()

    # Completion tracking
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shopping_items'
        indexes = [
            models.Index(fields=['purchase_date'], name='shopping_date_idx'),
            models.Index(fields=['purchase_date', 'is_completed'], name='shopping_date_done_idx'),
        ]
        ordering = ['-purchase_date', 'created_at']

    def __str__(self):
        return f"{self.name} - {self.price} MXN ({self.purchase_date})"

    def toggle_completed(self):
        """Flip completion and stamp or clear ``completed_at``."""
        from django.utils import timezone

        self.is_completed = not self.is_completed
        self.completed_at = timezone.now() if self.is_completed else None
        self.save(update_fields=['is_completed', 'completed_at', 'updated_at'])
