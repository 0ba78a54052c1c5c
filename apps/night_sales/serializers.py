from rest_framework import serializers
from decimal import Decimal
from apps.accounts.serializers import UserMinimalSerializer
from .models import NightSale


class NightSaleCreateSerializer(serializers.Serializer):
    """Validate a cook's cash report."""

    total_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
    )
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=1000,
    )


class NightSaleSerializer(serializers.ModelSerializer):
    """Serializer for night sales."""

    cook = UserMinimalSerializer(read_only=True)

    class Meta:
        model = NightSale
        fields = [
            'id',
            'cook',
            'total_amount',
            'description',
            'status',
            'created_at',
            'accepted_at',
        ]
        read_only_fields = fields


class NightSalesOverviewSerializer(serializers.Serializer):
    pending = NightSaleSerializer(many=True)
    accepted = NightSaleSerializer(many=True)


class CapitalChangeSerializer(serializers.Serializer):
    """Sale after a workflow step together with the resulting capital."""

    sale = NightSaleSerializer(allow_null=True)
    capital = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
