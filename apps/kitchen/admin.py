from django.contrib import admin
from .models import KitchenList, KitchenListItem


class KitchenListItemInline(admin.TabularInline):
    model = KitchenListItem
    extra = 0
    fields = ['position', 'name', 'quantity', 'estimated_price']


@admin.register(KitchenList)
class KitchenListAdmin(admin.ModelAdmin):
    list_display = ['title', 'owner', 'target_date', 'status', 'approved_at', 'deleted_by_cook', 'created_at']
    list_filter = ['status', 'target_date']
    search_fields = ['title', 'owner__email', 'owner__name']
    raw_id_fields = ['owner']
    readonly_fields = ['approved_at', 'deleted_by_cook', 'created_at']
    inlines = [KitchenListItemInline]
