# ==========================================
# apps/kitchen/models.py
# ==========================================

from django.conf import settings
from django.db import models
import uuid


class ListStatus(models.TextChoices):
    PENDING = 'pending', 'Pendiente'
    APPROVED = 'approved', 'Aprobada'
    REJECTED = 'rejected', 'Rechazada'


# Only pending lists can move; approved and rejected are terminal.
ALLOWED_TRANSITIONS = {
    ListStatus.PENDING: {ListStatus.APPROVED, ListStatus.REJECTED},
    ListStatus.APPROVED: set(),
    ListStatus.REJECTED: set(),
}


class KitchenList(models.Model):
    """Restock request: ingredients a cook needs for a target date."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='kitchen_lists'
    )
    title = models.CharField(max_length=200)
    target_date = models.DateField()

    status = models.CharField(
        max_length=10,
        choices=ListStatus.choices,
        default=ListStatus.PENDING
    )
    approved_at = models.DateTimeField(null=True, blank=True)

    # Hidden from the cook's own view; still visible to admins
    deleted_by_cook = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'kitchen_lists'
        indexes = [
            models.Index(fields=['status', 'target_date'], name='kitchen_status_date_idx'),
            models.Index(fields=['owner', '-created_at'], name='kitchen_owner_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.get_status_display()})"

    @property
    def is_pending(self):
        return self.status == ListStatus.PENDING

    def can_transition_to(self, new_status):
        return new_status in ALLOWED_TRANSITIONS[ListStatus(self.status)]


class KitchenListItem(models.Model):
    """One requested ingredient; quantity is free text ("0", "poco", "2 kg")."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    kitchen_list = models.ForeignKey(
        KitchenList,
        on_delete=models.CASCADE,
        related_name='items',
        db_column='list_id'
    )
    name = models.CharField(max_length=200)
    quantity = models.CharField(max_length=50, default='1')
    estimated_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True
    )
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'kitchen_list_items'
        ordering = ['position']

    def __str__(self):
        return f"{self.name} ({self.quantity})"
