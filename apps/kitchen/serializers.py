from rest_framework import serializers
from decimal import Decimal
from apps.accounts.serializers import UserMinimalSerializer
from .models import KitchenList, KitchenListItem
from .services import stock_level


# =============================================================================
# Input Serializers
# =============================================================================

class KitchenListLineInputSerializer(serializers.Serializer):
    """One requested ingredient."""

    name = serializers.CharField(max_length=200)
    quantity = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    estimated_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False,
        allow_null=True,
    )

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('El nombre es obligatorio')
        return value.strip()


class KitchenListCreateSerializer(serializers.Serializer):
    """Validate a list submission."""

    title = serializers.CharField(max_length=200)
    target_date = serializers.DateField()
    items = KitchenListLineInputSerializer(many=True, allow_empty=False)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError('El título es obligatorio')
        return value.strip()


class ApproveListSerializer(serializers.Serializer):
    """Date the approved lines are scheduled for (default today)."""

    purchase_date = serializers.DateField(required=False)


class DeleteListQuerySerializer(serializers.Serializer):
    """
    Query parameters for an admin hard delete.

    Query Parameters:
        materialize (bool): Copy the lines into the shopping list first
        purchase_date (date): Date for the copied items (default today)
    """

    materialize = serializers.BooleanField(required=False, default=False)
    purchase_date = serializers.DateField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class KitchenListItemSerializer(serializers.ModelSerializer):
    stock_level = serializers.SerializerMethodField()

    class Meta:
        model = KitchenListItem
        fields = ['id', 'name', 'quantity', 'estimated_price', 'stock_level']
        read_only_fields = fields

    def get_stock_level(self, obj):
        return stock_level(obj.quantity)


class KitchenListSerializer(serializers.ModelSerializer):
    """Kitchen list with its lines."""

    owner = UserMinimalSerializer(read_only=True)
    items = KitchenListItemSerializer(many=True, read_only=True)
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = KitchenList
        fields = [
            'id',
            'owner',
            'title',
            'target_date',
            'status',
            'approved_at',
            'created_at',
            'items',
            'item_count',
        ]
        read_only_fields = fields

    def get_item_count(self, obj):
        return len(obj.items.all())
