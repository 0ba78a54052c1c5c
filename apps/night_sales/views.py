from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole, IsCookRole
from .exceptions import (
    NightSaleNotFoundError,
    InvalidAmountError,
    InvalidSaleTransitionError,
)
from .models import NightSale
from .serializers import (
    NightSaleCreateSerializer,
    NightSaleSerializer,
    NightSalesOverviewSerializer,
    CapitalChangeSerializer,
)
from .services import NightSaleService


class NightSaleViewSet(viewsets.GenericViewSet):
    """
    ViewSet for night sales.

    create: Cook reports cash collected
    mine: Cook's pending and recently accepted sales
    overview: Pending and last week's accepted sales (admin)
    accept / reject: Review a pending sale (admin)
    destroy: Delete a sale, reversing capital if accepted (admin)
    """

    queryset = NightSale.objects.all()
    serializer_class = NightSaleSerializer
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_permissions(self):
        if self.action in ('create', 'mine'):
            return [IsAuthenticated(), IsCookRole()]
        return [IsAuthenticated(), IsAdminRole()]

    @extend_schema(request=NightSaleCreateSerializer, responses={201: NightSaleSerializer})
    def create(self, request):
        input_serializer = NightSaleCreateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            sale = NightSaleService.submit(cook=request.user, **input_serializer.validated_data)
        except InvalidAmountError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NightSaleSerializer(sale).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: NightSaleSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Own pending sales plus those accepted recently."""
        sales = NightSaleService.cook_history(request.user)
        return Response(NightSaleSerializer(sales, many=True).data)

    @extend_schema(responses={200: NightSalesOverviewSerializer})
    @action(detail=False, methods=['get'])
    def overview(self, request):
        return Response(NightSalesOverviewSerializer(NightSaleService.admin_overview()).data)

    @extend_schema(request=None, responses={200: CapitalChangeSerializer})
    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        """
        Accept a pending sale and credit capital.

        POST /api/night-sales/{id}/accept/
        """
        try:
            sale, capital = NightSaleService.accept(pk)
        except NightSaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidSaleTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CapitalChangeSerializer({'sale': sale, 'capital': capital}).data)

    @extend_schema(request=None, responses={200: NightSaleSerializer})
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        try:
            sale = NightSaleService.reject(pk)
        except NightSaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidSaleTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NightSaleSerializer(sale).data)

    @extend_schema(responses={200: CapitalChangeSerializer})
    def destroy(self, request, pk=None):
        """Delete a sale; an accepted one is subtracted from capital first."""
        try:
            capital = NightSaleService.delete(pk)
        except NightSaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CapitalChangeSerializer({'sale': None, 'capital': capital}).data)
