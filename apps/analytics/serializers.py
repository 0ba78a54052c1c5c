"""
Serializers for analytics app.

Input Serializers:
    PeriodQuerySerializer - Validates the ``period`` query parameter

Response Serializers:
    MovementSerializer - One entry of the movements feed
    DashboardResponseSerializer - Admin home figures
    SpendingSummarySerializer - Week / month / year spend
    PeriodBreakdownSerializer - Items of a period grouped per day
"""

from datetime import date, datetime

from rest_framework import serializers
from django.utils import timezone
from apps.purchases.serializers import PurchaseItemSerializer
from .analytics import PERIODS, MONTH


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class PeriodQuerySerializer(serializers.Serializer):
    """
    Validate the period query parameter.

    Query Parameters:
        period (str): week, month or year (default month)
    """

    period = serializers.ChoiceField(choices=PERIODS, required=False, default=MONTH)


# =============================================================================
# Response Serializers
# =============================================================================

class MovementSerializer(serializers.Serializer):
    """Movement entry; shopping days carry a date, the rest a timestamp."""

    type = serializers.CharField()
    id = serializers.CharField()
    date = serializers.SerializerMethodField()
    title = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    details = serializers.CharField()

    def get_date(self, obj):
        value = obj['date']
        if isinstance(value, date) and not isinstance(value, datetime):
            return value.isoformat()
        return timezone.localtime(value).isoformat()


class DashboardResponseSerializer(serializers.Serializer):
    capital = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    spent_today = serializers.DecimalField(max_digits=12, decimal_places=2)
    recent_income = serializers.DecimalField(max_digits=12, decimal_places=2)
    movements = MovementSerializer(many=True)


class SpendingSummarySerializer(serializers.Serializer):
    week = serializers.DecimalField(max_digits=12, decimal_places=2)
    month = serializers.DecimalField(max_digits=12, decimal_places=2)
    year = serializers.DecimalField(max_digits=12, decimal_places=2)
    capital = serializers.DecimalField(max_digits=12, decimal_places=2)


class PeriodDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    items = PurchaseItemSerializer(many=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class PeriodBreakdownSerializer(serializers.Serializer):
    period = serializers.CharField()
    start_date = serializers.DateField()
    days = PeriodDaySerializer(many=True)
    grand_total = serializers.DecimalField(max_digits=12, decimal_places=2)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
