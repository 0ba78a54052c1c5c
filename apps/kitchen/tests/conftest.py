import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.kitchen.models import KitchenList, KitchenListItem, ListStatus


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
def kitchen_admin(db):
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def kitchen_cook(db):
    return User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero Uno',
        role=UserRole.COOK,
    )


@pytest.fixture
def other_cook(db):
    return User.objects.create_user(
        email='cook2@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero Dos',
        role=UserRole.COOK,
    )


@pytest.fixture
def admin_client(kitchen_admin):
    """Return API client authenticated as admin."""
    return _client_for(kitchen_admin)


@pytest.fixture
def cook_client(kitchen_cook):
    """Return API client authenticated as cook."""
    return _client_for(kitchen_cook)


@pytest.fixture
def other_cook_client(other_cook):
    return _client_for(other_cook)


@pytest.fixture
def target_date():
    return timezone.localdate() + timedelta(days=1)


@pytest.fixture
def pending_list(db, kitchen_cook, target_date):
    """Pending list with three lines owned by the cook."""
    kitchen_list = KitchenList.objects.create(
        owner=kitchen_cook,
        title='Viernes',
        target_date=target_date,
    )
    KitchenListItem.objects.create(kitchen_list=kitchen_list, name='Tomate', quantity='0', position=0)
    KitchenListItem.objects.create(kitchen_list=kitchen_list, name='Queso', quantity='5', position=1)
    KitchenListItem.objects.create(
        kitchen_list=kitchen_list, name='Pan', quantity='poco', estimated_price='80.00', position=2
    )
    return kitchen_list


@pytest.fixture
def approved_list(db, kitchen_cook, target_date):
    kitchen_list = KitchenList.objects.create(
        owner=kitchen_cook,
        title='Jueves',
        target_date=target_date,
        status=ListStatus.APPROVED,
        approved_at=timezone.now(),
    )
    KitchenListItem.objects.create(kitchen_list=kitchen_list, name='Cebolla', quantity='2', position=0)
    return kitchen_list


@pytest.fixture
def rejected_list(db, kitchen_cook, target_date):
    kitchen_list = KitchenList.objects.create(
        owner=kitchen_cook,
        title='Miércoles',
        target_date=target_date,
        status=ListStatus.REJECTED,
    )
    KitchenListItem.objects.create(kitchen_list=kitchen_list, name='Papas', quantity='nada', position=0)
    return kitchen_list
