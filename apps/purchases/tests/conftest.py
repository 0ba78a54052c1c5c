import pytest
from decimal import Decimal
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.purchases.models import PurchaseItem


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def shop_admin(db):
    """Create and return an admin who manages the shopping list."""
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def shop_cook(db):
    """Create and return a cook."""
    return User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero Uno',
        role=UserRole.COOK,
    )


@pytest.fixture
def admin_client(shop_admin):
    """Return API client authenticated as admin."""
    client = APIClient()
    refresh = RefreshToken.for_user(shop_admin)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def cook_client(shop_cook):
    """Return API client authenticated as cook."""
    client = APIClient()
    refresh = RefreshToken.for_user(shop_cook)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def pending_item(db, today):
    """Create an open item on today's list."""
    return PurchaseItem.objects.create(
        name='Pan de hamburguesa',
        price=Decimal('120.00'),
        purchase_date=today,
    )


@pytest.fixture
def completed_item(db, today):
    """Create a completed item on today's list."""
    return PurchaseItem.objects.create(
        name='Carne molida',
        price=Decimal('350.50'),
        purchase_date=today,
        is_completed=True,
        completed_at=timezone.now(),
    )


@pytest.fixture
def yesterday_item(db, today):
    """Create an item on yesterday's list."""
    return PurchaseItem.objects.create(
        name='Lechuga',
        price=Decimal('25.00'),
        purchase_date=today - timedelta(days=1),
    )
