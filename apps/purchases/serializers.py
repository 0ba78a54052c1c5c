from rest_framework import serializers
from decimal import Decimal
from .models import PurchaseItem


# =============================================================================
# Input Serializers
# =============================================================================

class DateQuerySerializer(serializers.Serializer):
    """
    Validate the ``date`` query parameter.

    Query Parameters:
        date (date): Purchase date to show; defaults to today
    """

    date = serializers.DateField(required=False)


class PurchaseItemCreateSerializer(serializers.Serializer):
    """Validate input for adding an item."""

    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False,
    )
    purchase_date = serializers.DateField(required=False)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('El nombre es obligatorio')
        return value.strip()


class PurchaseItemUpdateSerializer(serializers.Serializer):
    """Validate a rename and/or reprice."""

    name = serializers.CharField(max_length=255, required=False)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False,
    )

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('El nombre es obligatorio')
        return value.strip()


# =============================================================================
# Output Serializers
# =============================================================================

class PurchaseItemSerializer(serializers.ModelSerializer):
    """Serializer for shopping items."""

    class Meta:
        model = PurchaseItem
        fields = [
            'id',
            'name',
            'price',
            'purchase_date',
            'is_completed',
            'completed_at',
            'created_at',
        ]
        read_only_fields = fields


class DailyListSerializer(serializers.Serializer):
    """Items of one date with totals."""

    date = serializers.DateField()
    items = PurchaseItemSerializer(many=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    pending_count = serializers.IntegerField()
    completed_count = serializers.IntegerField()


class HistoryDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    items = PurchaseItemSerializer(many=True)
    count = serializers.IntegerField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class HistorySerializer(serializers.Serializer):
    days = HistoryDaySerializer(many=True)
    grand_total = serializers.DecimalField(max_digits=12, decimal_places=2)
