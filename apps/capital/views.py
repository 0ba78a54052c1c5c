from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .exceptions import CapitalNotFoundError
from .serializers import CapitalSerializer, CapitalUpdateSerializer
from .services import LedgerService


@extend_schema(
    methods=['GET'],
    responses={200: CapitalSerializer},
    description="Get the current capital balance (created with the default amount if missing).",
    tags=['capital'],
)
@extend_schema(
    methods=['PUT'],
    request=CapitalUpdateSerializer,
    responses={200: CapitalSerializer},
    description="Manually overwrite the capital balance.",
    tags=['capital'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated, IsAdminRole])
def capital_detail(request):
    """Read or overwrite the capital balance - thin HTTP handler."""
    try:
        if request.method == 'GET':
            amount = LedgerService.read()
        else:
            input_serializer = CapitalUpdateSerializer(data=request.data)
            input_serializer.is_valid(raise_exception=True)
            amount = LedgerService.set(input_serializer.validated_data['amount'])
    except CapitalNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response(CapitalSerializer({'amount': amount, 'currency': 'MXN'}).data)
