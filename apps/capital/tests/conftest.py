import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.capital.models import Capital


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(db):
    """Return API client authenticated as admin."""
    admin = User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )
    return _client_for(admin)


@pytest.fixture
def cook_client(db):
    """Return API client authenticated as cook."""
    cook = User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero',
        role=UserRole.COOK,
    )
    return _client_for(cook)


@pytest.fixture
def capital(db):
    return Capital.objects.create(amount=Decimal('5000.00'))
