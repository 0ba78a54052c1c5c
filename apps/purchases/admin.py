# ==========================================
# apps/purchases/admin.py
# ==========================================

from django.contrib import admin
from django.utils import timezone
from .models import PurchaseItem


@admin.register(PurchaseItem)
class PurchaseItemAdmin(admin.ModelAdmin):
    """Admin interface for shopping items."""

    list_display = [
        'name',
        'price',
        'purchase_date',
        'is_completed',
        'completed_at',
    ]

    list_filter = [
        'is_completed',
        'purchase_date',
    ]

    search_fields = ['name']

    date_hierarchy = 'purchase_date'

    readonly_fields = ['completed_at', 'created_at', 'updated_at']

    actions = ['mark_completed']

    @admin.action(description='Mark selected items as completed')
    def mark_completed(self, request, queryset):
        updated = queryset.filter(is_completed=False).update(
            is_completed=True,
            completed_at=timezone.now()
        )
        self.message_user(request, f'{updated} item(s) marked as completed.')
