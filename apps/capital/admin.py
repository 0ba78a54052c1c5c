from django.contrib import admin
from .models import Capital


@admin.register(Capital)
class CapitalAdmin(admin.ModelAdmin):
    list_display = ['id', 'amount', 'updated_at']
    readonly_fields = ['updated_at']
