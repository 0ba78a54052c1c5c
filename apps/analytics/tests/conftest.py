import pytest
from decimal import Decimal
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.capital.models import Capital
from apps.night_sales.models import NightSale, SaleStatus
from apps.payroll.models import PayrollPayment
from apps.purchases.models import PurchaseItem


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_admin(db):
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def analytics_cook(db):
    return User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Luis',
        role=UserRole.COOK,
    )


@pytest.fixture
def admin_client(analytics_admin):
    """Return API client authenticated as admin."""
    return _client_for(analytics_admin)


@pytest.fixture
def cook_client(analytics_cook):
    """Return API client authenticated as cook."""
    return _client_for(analytics_cook)


# =============================================================================
# Records
# =============================================================================

@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def capital(db):
    return Capital.objects.create(amount=Decimal('5000.00'))


@pytest.fixture
def shopping_items(db, today):
    """Two items today, one three days ago, one last year."""
    return [
        PurchaseItem.objects.create(name='Pan', price=Decimal('100.00'), purchase_date=today),
        PurchaseItem.objects.create(name='Carne', price=Decimal('250.00'), purchase_date=today),
        PurchaseItem.objects.create(
            name='Queso', price=Decimal('80.00'), purchase_date=today - timedelta(days=3)
        ),
        PurchaseItem.objects.create(
            name='Aceite', price=Decimal('40.00'), purchase_date=today.replace(year=today.year - 1, day=1)
        ),
    ]


@pytest.fixture
def payroll_payment(db, analytics_cook):
    return PayrollPayment.objects.create(
        employee=analytics_cook,
        amount=Decimal('1500.00'),
        days_worked=5,
        payment_date=timezone.now() - timedelta(days=1),
    )


@pytest.fixture
def accepted_sale(db, analytics_cook):
    return NightSale.objects.create(
        cook=analytics_cook,
        total_amount=Decimal('1200.50'),
        description='noche viernes',
        status=SaleStatus.ACCEPTED,
        accepted_at=timezone.now() - timedelta(hours=2),
    )


@pytest.fixture
def pending_sale(db, analytics_cook):
    return NightSale.objects.create(
        cook=analytics_cook,
        total_amount=Decimal('300.00'),
    )
