import pytest
from decimal import Decimal
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.capital.models import Capital
from apps.night_sales.models import NightSale, SaleStatus


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def sales_admin(db):
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def sales_cook(db):
    return User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero Uno',
        role=UserRole.COOK,
    )


@pytest.fixture
def admin_client(sales_admin):
    """Return API client authenticated as admin."""
    return _client_for(sales_admin)


@pytest.fixture
def cook_client(sales_cook):
    """Return API client authenticated as cook."""
    return _client_for(sales_cook)


@pytest.fixture
def capital(db):
    """Capital row holding the default 5000.00."""
    return Capital.objects.create(amount=Decimal('5000.00'))


@pytest.fixture
def pending_sale(db, sales_cook):
    return NightSale.objects.create(
        cook=sales_cook,
        total_amount=Decimal('1200.50'),
        description='noche viernes',
    )


@pytest.fixture
def accepted_sale(db, sales_cook):
    """Sale accepted an hour ago."""
    return NightSale.objects.create(
        cook=sales_cook,
        total_amount=Decimal('800.00'),
        status=SaleStatus.ACCEPTED,
        accepted_at=timezone.now() - timedelta(hours=1),
    )


@pytest.fixture
def rejected_sale(db, sales_cook):
    return NightSale.objects.create(
        cook=sales_cook,
        total_amount=Decimal('300.00'),
        status=SaleStatus.REJECTED,
    )
