import pytest
from decimal import Decimal
from django.core.management import call_command
from apps.accounts.models import User, UserRole
from apps.capital.models import Capital
from apps.kitchen.models import KitchenList, ListStatus
from apps.night_sales.models import NightSale, SaleStatus


@pytest.mark.django_db
class TestCreateSampleData:
    """Tests for the create_sample_data management command."""

    def test_creates_accounts_and_workflow_data(self):
        call_command('create_sample_data')

        assert User.objects.filter(role=UserRole.ADMIN).count() == 1
        assert User.objects.cooks().count() == 2
        assert KitchenList.objects.filter(status=ListStatus.PENDING).count() == 2
        assert KitchenList.objects.filter(status=ListStatus.APPROVED).count() == 1
        assert NightSale.objects.filter(status=SaleStatus.ACCEPTED).count() == 1
        assert Capital.objects.get().amount == Decimal('6200.50')

    def test_clear_then_recreate(self):
        call_command('create_sample_data')
        call_command('create_sample_data', '--clear')

        assert User.objects.cooks().count() == 2
        assert NightSale.objects.count() == 2
        assert Capital.objects.get().amount == Decimal('6200.50')
