import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return an admin."""
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def cook_user(db):
    """Create and return a cook."""
    return User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero Uno',
        role=UserRole.COOK,
    )


@pytest.fixture
def second_admin(db):
    """Create another admin account."""
    return User.objects.create_user(
        email='gerente@burgerclub.mx',
        password='TestPass123!',
        name='Gerente',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def removed_cook(db):
    """Create a soft-deleted cook."""
    user = User.objects.create_user(
        email='removed@burgerclub.mx',
        password='TestPass123!',
        name='Ex Cocinero',
        role=UserRole.COOK,
    )
    user.soft_delete()
    return user


@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as admin using JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def cook_client(cook_user):
    """Return an API client authenticated as cook using JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(cook_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
