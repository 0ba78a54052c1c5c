import pytest
import uuid
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.payroll.models import PayrollPayment


@pytest.mark.django_db
class TestPaymentList:
    """Tests for GET/POST /api/payroll/"""

    def test_create(self, admin_client, payroll_cook):
        url = reverse('payroll:payment-list')
        data = {
            'employee_id': str(payroll_cook.id),
            'amount': '1800.00',
            'days_worked': 6,
            'notes': 'Semana 13',
        }
        response = admin_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['employee']['id'] == str(payroll_cook.id)
        assert response.data['days_worked'] == 6

    def test_create_negative_amount(self, admin_client, payroll_cook):
        url = reverse('payroll:payment-list')
        response = admin_client.post(
            url, {'employee_id': str(payroll_cook.id), 'amount': '-5'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_for_unknown_employee(self, admin_client):
        url = reverse('payroll:payment-list')
        response = admin_client.post(
            url, {'employee_id': str(uuid.uuid4()), 'amount': '100.00'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_list(self, admin_client, payment):
        url = reverse('payroll:payment-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data] == [str(payment.id)]

    def test_cook_forbidden(self, cook_client):
        url = reverse('payroll:payment-list')
        response = cook_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestPaymentDelete:
    """Tests for DELETE /api/payroll/{id}/"""

    def test_delete(self, admin_client, payment):
        url = reverse('payroll:payment-delete', kwargs={'pk': payment.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not PayrollPayment.objects.exists()

    def test_delete_missing(self, admin_client):
        url = reverse('payroll:payment-delete', kwargs={'pk': uuid.uuid4()})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestMyPayments:
    """Tests for GET /api/payroll/mine/"""

    def test_mine(self, cook_client, payment):
        url = reverse('payroll:my-payments')
        response = cook_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['payments']) == 1
        assert Decimal(response.data['month_total']) == Decimal('1500.00')

    def test_admin_forbidden(self, admin_client):
        url = reverse('payroll:my-payments')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
