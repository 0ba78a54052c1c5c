import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.payroll.models import PayrollPayment


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def payroll_admin(db):
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def payroll_cook(db):
    return User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero Uno',
        role=UserRole.COOK,
    )


@pytest.fixture
def admin_client(payroll_admin):
    """Return API client authenticated as admin."""
    return _client_for(payroll_admin)


@pytest.fixture
def cook_client(payroll_cook):
    """Return API client authenticated as cook."""
    return _client_for(payroll_cook)


@pytest.fixture
def payment(db, payroll_cook):
    return PayrollPayment.objects.create(
        employee=payroll_cook,
        amount=Decimal('1500.00'),
        days_worked=5,
        notes='Semana 12',
    )
