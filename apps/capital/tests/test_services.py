import pytest
from decimal import Decimal
from unittest import mock
from django.db import DatabaseError
from apps.capital.exceptions import CapitalNotFoundError
from apps.capital.models import Capital
from apps.capital.services import LedgerService


@pytest.mark.django_db
class TestRead:
    """Tests for LedgerService.read."""

    def test_seeds_default_when_missing(self):
        assert LedgerService.read() == Decimal('5000.00')
        assert Capital.objects.count() == 1

    def test_seed_amount_from_settings(self, settings):
        settings.CAPITAL_DEFAULT_AMOUNT = Decimal('1234.56')

        assert LedgerService.read() == Decimal('1234.56')

    def test_reads_first_row(self, capital):
        Capital.objects.create(amount=Decimal('1.00'))

        assert LedgerService.read() == Decimal('5000.00')

    def test_creation_failure(self):
        with mock.patch.object(Capital.objects, 'create', side_effect=DatabaseError('down')):
            with pytest.raises(CapitalNotFoundError):
                LedgerService.read()


@pytest.mark.django_db
class TestAdjust:
    """Tests for LedgerService.adjust."""

    def test_sequential_adjustments_sum(self, capital):
        deltas = [Decimal('100.25'), Decimal('-40.00'), Decimal('0.75'), Decimal('-1000')]
        for delta in deltas:
            LedgerService.adjust(delta)

        assert LedgerService.read() == Decimal('5000.00') + sum(deltas)

    def test_returns_new_amount(self, capital):
        assert LedgerService.adjust(Decimal('1200.50')) == Decimal('6200.50')

    def test_can_go_negative(self, capital):
        assert LedgerService.adjust(Decimal('-6000')) == Decimal('-1000.00')

    def test_seeds_before_adjusting(self):
        assert LedgerService.adjust(Decimal('10')) == Decimal('5010.00')


@pytest.mark.django_db
class TestSet:
    """Tests for LedgerService.set."""

    def test_overwrites(self, capital):
        assert LedgerService.set(Decimal('750.00')) == Decimal('750.00')
        capital.refresh_from_db()
        assert capital.amount == Decimal('750.00')
