from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole
from .exceptions import PurchaseItemNotFoundError, InvalidPurchaseItemError
from .models import PurchaseItem
from .serializers import (
    DateQuerySerializer,
    PurchaseItemCreateSerializer,
    PurchaseItemUpdateSerializer,
    PurchaseItemSerializer,
    DailyListSerializer,
    HistorySerializer,
)
from .services import ShoppingListService


class PurchaseItemViewSet(viewsets.GenericViewSet):
    """
    ViewSet for the daily shopping list.

    All business logic is handled by ShoppingListService.
    Views are thin HTTP handlers only.

    list: Items of one date (?date=YYYY-MM-DD, default today) with totals
    create: Add an item
    partial_update: Rename / reprice an item
    destroy: Delete an item
    toggle: Flip completion
    history: All items grouped by date
    """

    queryset = PurchaseItem.objects.all()
    serializer_class = PurchaseItemSerializer
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'
    permission_classes = [IsAuthenticated, IsAdminRole]

    @extend_schema(
        parameters=[
            OpenApiParameter('date', OpenApiTypes.DATE, description='Purchase date (YYYY-MM-DD), default today'),
        ],
        responses={200: DailyListSerializer},
    )
    def list(self, request):
        """Get the shopping list of one date."""
        query_serializer = DateQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        purchase_date = query_serializer.validated_data.get('date') or timezone.localdate()

        daily = ShoppingListService.items_for_date(purchase_date)
        return Response(DailyListSerializer(daily).data)

    @extend_schema(request=PurchaseItemCreateSerializer, responses={201: PurchaseItemSerializer})
    def create(self, request):
        """Add an item to the list."""
        input_serializer = PurchaseItemCreateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            item = ShoppingListService.create_item(**input_serializer.validated_data)
        except InvalidPurchaseItemError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(PurchaseItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=PurchaseItemUpdateSerializer, responses={200: PurchaseItemSerializer})
    def partial_update(self, request, pk=None):
        """Rename and/or reprice an item."""
        input_serializer = PurchaseItemUpdateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            item = ShoppingListService.update_item(pk, **input_serializer.validated_data)
        except PurchaseItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidPurchaseItemError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(PurchaseItemSerializer(item).data)

    def destroy(self, request, pk=None):
        """Delete an item."""
        try:
            ShoppingListService.delete_item(pk)
        except PurchaseItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: PurchaseItemSerializer})
    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        """
        Flip completion of an item.

        POST /api/purchases/items/{id}/toggle/
        """
        try:
            item = ShoppingListService.toggle_item(pk)
        except PurchaseItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(PurchaseItemSerializer(item).data)

    @extend_schema(responses={200: HistorySerializer})
    @action(detail=False, methods=['get'])
    def history(self, request):
        """
        All purchases grouped by date.

        GET /api/purchases/items/history/
        """
        return Response(HistorySerializer(ShoppingListService.history()).data)
