from django.contrib import admin
from .models import PayrollPayment


@admin.register(PayrollPayment)
class PayrollPaymentAdmin(admin.ModelAdmin):
    list_display = ['employee', 'amount', 'days_worked', 'payment_date']
    list_filter = ['payment_date']
    search_fields = ['employee__email', 'employee__name', 'notes']
    raw_id_fields = ['employee']
    date_hierarchy = 'payment_date'
