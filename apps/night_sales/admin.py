from django.contrib import admin
from .models import NightSale


@admin.register(NightSale)
class NightSaleAdmin(admin.ModelAdmin):
    """
    Read-mostly admin for night sales.

    Status changes go through the API so capital stays in sync.
    """

    list_display = ['cook', 'total_amount', 'status', 'created_at', 'accepted_at']
    list_filter = ['status', 'created_at']
    search_fields = ['cook__email', 'cook__name', 'description']
    raw_id_fields = ['cook']
    readonly_fields = ['status', 'created_at', 'accepted_at']
