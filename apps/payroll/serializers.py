from rest_framework import serializers
from decimal import Decimal
from apps.accounts.serializers import UserMinimalSerializer
from .models import PayrollPayment


class PaymentCreateSerializer(serializers.Serializer):
    """Validate a new payroll payment."""

    employee_id = serializers.UUIDField()
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
    )
    days_worked = serializers.IntegerField(required=False, min_value=0, default=0)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class PayrollPaymentSerializer(serializers.ModelSerializer):
    employee = UserMinimalSerializer(read_only=True)

    class Meta:
        model = PayrollPayment
        fields = ['id', 'employee', 'amount', 'days_worked', 'notes', 'payment_date']
        read_only_fields = fields


class EmployeePaymentsSerializer(serializers.Serializer):
    """A cook's payments with this month's total."""

    payments = PayrollPaymentSerializer(many=True)
    month_total = serializers.DecimalField(max_digits=12, decimal_places=2)
