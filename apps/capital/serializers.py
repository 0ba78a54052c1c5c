from rest_framework import serializers


class CapitalSerializer(serializers.Serializer):
    """Current capital balance."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField(read_only=True)


class CapitalUpdateSerializer(serializers.Serializer):
    """Input for a manual capital correction."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
