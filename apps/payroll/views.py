from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole, IsCookRole
from .exceptions import PaymentNotFoundError, InvalidPaymentError
from .serializers import (
    PaymentCreateSerializer,
    PayrollPaymentSerializer,
    EmployeePaymentsSerializer,
)
from .services import record_payment, delete_payment, recent_payments, employee_payments


@extend_schema(
    methods=['GET'],
    responses={200: PayrollPaymentSerializer(many=True)},
    description="Most recent payroll payments.",
    tags=['payroll'],
)
@extend_schema(
    methods=['POST'],
    request=PaymentCreateSerializer,
    responses={201: PayrollPaymentSerializer},
    description="Record a payment to a cook. Capital is not affected.",
    tags=['payroll'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def payment_list(request):
    if request.method == 'GET':
        return Response(PayrollPaymentSerializer(recent_payments(), many=True).data)

    serializer = PaymentCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        payment = record_payment(**serializer.validated_data)
    except InvalidPaymentError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PayrollPaymentSerializer(payment).data, status=status.HTTP_201_CREATED)


@extend_schema(responses={204: None}, tags=['payroll'])
@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def payment_delete(request, pk):
    try:
        delete_payment(payment_id=pk)
    except PaymentNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(responses={200: EmployeePaymentsSerializer}, tags=['payroll'])
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsCookRole])
def my_payments(request):
    """Cook's own payments and this month's total."""
    return Response(EmployeePaymentsSerializer(employee_payments(employee=request.user)).data)
