from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsAdminRole
from apps.capital.exceptions import CapitalNotFoundError
from .analytics import AnalyticsQueries
from .serializers import (
    # Input serializers
    PeriodQuerySerializer,
    # Response serializers
    MovementSerializer,
    DashboardResponseSerializer,
    SpendingSummarySerializer,
    PeriodBreakdownSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    responses={200: MovementSerializer(many=True)},
    description="Unified feed of shopping days, payroll payments and accepted night sales, most recent first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def movements(request):
    """Movements feed - thin HTTP handler."""
    return Response(MovementSerializer(AnalyticsQueries.movements(), many=True).data)


@extend_schema(
    responses={200: DashboardResponseSerializer, 503: ErrorSerializer},
    description="Capital, total spent, spent today, recent night-sales income and the movements feed.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def dashboard(request):
    """Admin dashboard figures."""
    try:
        data = AnalyticsQueries.dashboard()
    except CapitalNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response(DashboardResponseSerializer(data).data)


@extend_schema(
    responses={200: SpendingSummarySerializer, 503: ErrorSerializer},
    description="Shopping spend over the current week, month and year, plus capital.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def spending_summary(request):
    try:
        data = AnalyticsQueries.spending_summary()
    except CapitalNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response(SpendingSummarySerializer(data).data)


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, enum=['week', 'month', 'year'], description='Period (default month)'),
    ],
    responses={200: PeriodBreakdownSerializer, 400: ErrorSerializer},
    description="Shopping items since the start of the period, grouped per day.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def period_breakdown(request):
    """Per-day breakdown of a period - thin HTTP handler."""
    query_serializer = PeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        data = AnalyticsQueries.period_breakdown(query_serializer.validated_data['period'])
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PeriodBreakdownSerializer(data).data)
