import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.tasks.models import DailyTask


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def task_admin(db):
    return User.objects.create_user(
        email='admin@burgerclub.mx',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def admin_client(task_admin):
    """Return API client authenticated as admin."""
    client = APIClient()
    refresh = RefreshToken.for_user(task_admin)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def cook_client(db):
    """Return API client authenticated as a cook."""
    cook = User.objects.create_user(
        email='cook@burgerclub.mx',
        password='TestPass123!',
        name='Cocinero',
        role=UserRole.COOK,
    )
    client = APIClient()
    refresh = RefreshToken.for_user(cook)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def today_task(db):
    return DailyTask.objects.create(title='Limpiar plancha', task_date=timezone.localdate())


@pytest.fixture
def tomorrow_task(db):
    return DailyTask.objects.create(
        title='Pedir refrescos',
        task_date=timezone.localdate() + timedelta(days=1),
    )
