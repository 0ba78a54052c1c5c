from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole, IsCookRole
from apps.purchases.serializers import PurchaseItemSerializer
from .models import KitchenList
from .serializers import (
    KitchenListCreateSerializer,
    KitchenListSerializer,
    ApproveListSerializer,
    DeleteListQuerySerializer,
)
from .services import (
    submit_list,
    approve_list,
    reject_list,
    hide_list,
    delete_list,
    get_own_lists,
    get_recent_lists,
    get_pending_lists,
    KitchenListNotFoundError,
    InvalidKitchenListError,
    EmptyKitchenListError,
    InvalidListTransitionError,
    NotListOwnerError,
    InsufficientPermissionsError,
)


class KitchenListViewSet(viewsets.GenericViewSet):
    """
    ViewSet for kitchen restock lists.

    create: Submit a list (admins' lists are approved on submit)
    mine: Own lists, hidden ones excluded
    recent: Most recent own lists
    pending: Lists awaiting review (admin)
    approve / reject: Review a pending list (admin)
    hide: Cook removes a pending list from their view
    destroy: Permanently delete a reviewed list (admin)
    """

    queryset = KitchenList.objects.all()
    serializer_class = KitchenListSerializer
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    admin_actions = {'pending', 'approve', 'reject', 'destroy'}

    def get_permissions(self):
        if self.action in self.admin_actions:
            return [IsAuthenticated(), IsAdminRole()]
        if self.action == 'hide':
            return [IsAuthenticated(), IsCookRole()]
        return [IsAuthenticated()]

    @extend_schema(request=KitchenListCreateSerializer, responses={201: KitchenListSerializer})
    def create(self, request):
        """Submit a restock list."""
        input_serializer = KitchenListCreateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)
        data = input_serializer.validated_data

        try:
            kitchen_list = submit_list(
                owner=request.user,
                title=data['title'],
                target_date=data['target_date'],
                lines=data['items'],
            )
        except (InvalidKitchenListError, EmptyKitchenListError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(KitchenListSerializer(kitchen_list).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: KitchenListSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Own lists, newest first."""
        return Response(KitchenListSerializer(get_own_lists(owner=request.user), many=True).data)

    @extend_schema(responses={200: KitchenListSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def recent(self, request):
        """Most recent own lists for the cook dashboard."""
        return Response(KitchenListSerializer(get_recent_lists(owner=request.user), many=True).data)

    @extend_schema(responses={200: KitchenListSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def pending(self, request):
        """Lists awaiting review, soonest target date first."""
        return Response(KitchenListSerializer(get_pending_lists(), many=True).data)

    @extend_schema(request=ApproveListSerializer, responses={200: PurchaseItemSerializer(many=True)})
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        """
        Approve a pending list.

        POST /api/kitchen/lists/{id}/approve/
        Body: {"purchase_date": "2024-03-15"}  (optional, default today)
        Returns the created shopping items.
        """
        input_serializer = ApproveListSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            items = approve_list(
                list_id=pk,
                actor=request.user,
                purchase_date=input_serializer.validated_data.get('purchase_date'),
            )
        except KitchenListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidListTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(PurchaseItemSerializer(items, many=True).data)

    @extend_schema(request=None, responses={200: KitchenListSerializer})
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        """Reject a pending list."""
        try:
            kitchen_list = reject_list(list_id=pk, actor=request.user)
        except KitchenListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidListTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(KitchenListSerializer(kitchen_list).data)

    @extend_schema(request=None, responses={204: None})
    @action(detail=True, methods=['post'])
    def hide(self, request, pk=None):
        """Hide a pending list from its owner's view."""
        try:
            hide_list(list_id=pk, user=request.user)
        except KitchenListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotListOwnerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidListTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('materialize', OpenApiTypes.BOOL, description='Copy lines into the shopping list first'),
            OpenApiParameter('purchase_date', OpenApiTypes.DATE, description='Date for copied items, default today'),
        ],
        responses={200: None},
    )
    def destroy(self, request, pk=None):
        """Permanently delete a reviewed list."""
        query_serializer = DeleteListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        try:
            created = delete_list(
                list_id=pk,
                actor=request.user,
                materialize=query_serializer.validated_data['materialize'],
                purchase_date=query_serializer.validated_data.get('purchase_date'),
            )
        except KitchenListNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidListTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'materialized_items': created})
