import pytest
import uuid
from decimal import Decimal
from datetime import timedelta
from unittest import mock
from django.db import DatabaseError
from django.utils import timezone
from apps.kitchen.models import KitchenList, ListStatus
from apps.kitchen.services import (
    submit_list,
    approve_list,
    reject_list,
    hide_list,
    delete_list,
    get_own_lists,
    get_recent_lists,
    get_pending_lists,
    stock_level,
    KitchenListNotFoundError,
    InvalidKitchenListError,
    EmptyKitchenListError,
    InvalidListTransitionError,
    NotListOwnerError,
    InsufficientPermissionsError,
)
from apps.purchases.models import PurchaseItem


# =============================================================================
# Submit
# =============================================================================

@pytest.mark.django_db
class TestSubmitList:
    """Tests for submit_list."""

    def test_cook_submission_stays_pending(self, kitchen_cook, target_date):
        kitchen_list = submit_list(
            owner=kitchen_cook,
            title='  Sábado ',
            target_date=target_date,
            lines=[{'name': 'Tomate', 'quantity': '0'}, {'name': 'Lechuga', 'quantity': ''}],
        )

        assert kitchen_list.status == ListStatus.PENDING
        assert kitchen_list.title == 'Sábado'
        assert kitchen_list.approved_at is None
        assert [(i.name, i.quantity) for i in kitchen_list.items.all()] == [('Tomate', '0'), ('Lechuga', '1')]
        assert PurchaseItem.objects.count() == 0

    def test_admin_submission_is_auto_approved(self, kitchen_admin, target_date):
        kitchen_list = submit_list(
            owner=kitchen_admin,
            title='Compras admin',
            target_date=target_date,
            lines=[{'name': 'Tomate', 'quantity': '0'}, {'name': 'Queso', 'quantity': '5'}],
        )

        kitchen_list.refresh_from_db()
        assert kitchen_list.status == ListStatus.APPROVED
        assert kitchen_list.approved_at is not None

        items = PurchaseItem.objects.order_by('name')
        assert [(i.name, i.price, i.purchase_date) for i in items] == [
            ('Queso (5)', Decimal('0.00'), target_date),
            ('Tomate (0)', Decimal('0.00'), target_date),
        ]
        assert not items.filter(is_completed=True).exists()

    def test_blank_title_rejected(self, kitchen_cook, target_date):
        with pytest.raises(InvalidKitchenListError):
            submit_list(owner=kitchen_cook, title='  ', target_date=target_date, lines=[{'name': 'Pan'}])

        assert KitchenList.objects.count() == 0

    def test_no_lines_rejected(self, kitchen_cook, target_date):
        with pytest.raises(EmptyKitchenListError):
            submit_list(owner=kitchen_cook, title='Vacía', target_date=target_date, lines=[])

        assert KitchenList.objects.count() == 0

    def test_blank_line_name_rejected(self, kitchen_cook, target_date):
        with pytest.raises(InvalidKitchenListError):
            submit_list(owner=kitchen_cook, title='Lista', target_date=target_date, lines=[{'name': ' '}])


# =============================================================================
# Approve / Reject
# =============================================================================

@pytest.mark.django_db
class TestApproveList:
    """Tests for approve_list."""

    def test_creates_one_item_per_line(self, kitchen_admin, pending_list):
        purchase_date = timezone.localdate() + timedelta(days=3)

        created = approve_list(list_id=pending_list.id, actor=kitchen_admin, purchase_date=purchase_date)

        assert len(created) == 3
        items = PurchaseItem.objects.all()
        assert set(items.values_list('name', flat=True)) == {'Tomate (0)', 'Queso (5)', 'Pan (poco)'}
        assert set(items.values_list('purchase_date', flat=True)) == {purchase_date}
        assert items.get(name='Pan (poco)').price == Decimal('80.00')
        assert not items.filter(is_completed=True).exists()

        pending_list.refresh_from_db()
        assert pending_list.status == ListStatus.APPROVED
        assert pending_list.approved_at is not None

    def test_defaults_to_today(self, kitchen_admin, pending_list):
        approve_list(list_id=pending_list.id, actor=kitchen_admin)

        assert set(PurchaseItem.objects.values_list('purchase_date', flat=True)) == {timezone.localdate()}

    def test_second_approval_never_materializes_twice(self, kitchen_admin, pending_list):
        approve_list(list_id=pending_list.id, actor=kitchen_admin)

        with pytest.raises(InvalidListTransitionError):
            approve_list(list_id=pending_list.id, actor=kitchen_admin)

        assert PurchaseItem.objects.count() == 3

    def test_approve_then_reject_is_invalid(self, kitchen_admin, pending_list):
        approve_list(list_id=pending_list.id, actor=kitchen_admin)

        with pytest.raises(InvalidListTransitionError):
            reject_list(list_id=pending_list.id, actor=kitchen_admin)

        pending_list.refresh_from_db()
        assert pending_list.status == ListStatus.APPROVED

    def test_reject_then_approve_is_invalid(self, kitchen_admin, pending_list):
        reject_list(list_id=pending_list.id, actor=kitchen_admin)

        with pytest.raises(InvalidListTransitionError):
            approve_list(list_id=pending_list.id, actor=kitchen_admin)

        assert PurchaseItem.objects.count() == 0

    def test_failed_insert_leaves_list_pending(self, kitchen_admin, pending_list):
        with mock.patch.object(
            PurchaseItem.objects, 'bulk_create', side_effect=DatabaseError('insert failed')
        ):
            with pytest.raises(DatabaseError):
                approve_list(list_id=pending_list.id, actor=kitchen_admin)

        pending_list.refresh_from_db()
        assert pending_list.status == ListStatus.PENDING
        assert pending_list.approved_at is None

    def test_cook_cannot_approve(self, kitchen_cook, pending_list):
        with pytest.raises(InsufficientPermissionsError):
            approve_list(list_id=pending_list.id, actor=kitchen_cook)

    def test_missing_list(self, kitchen_admin):
        with pytest.raises(KitchenListNotFoundError):
            approve_list(list_id=uuid.uuid4(), actor=kitchen_admin)


@pytest.mark.django_db
class TestRejectList:
    """Tests for reject_list."""

    def test_reject_has_no_side_effects(self, kitchen_admin, pending_list):
        kitchen_list = reject_list(list_id=pending_list.id, actor=kitchen_admin)

        assert kitchen_list.status == ListStatus.REJECTED
        assert kitchen_list.approved_at is None
        assert PurchaseItem.objects.count() == 0


# =============================================================================
# Hide (cook soft delete) / Hard delete
# =============================================================================

@pytest.mark.django_db
class TestHideList:
    """Tests for hide_list."""

    def test_owner_hides_pending_list(self, kitchen_cook, pending_list):
        hide_list(list_id=pending_list.id, user=kitchen_cook)

        pending_list.refresh_from_db()
        assert pending_list.deleted_by_cook is not None
        assert pending_list not in get_own_lists(owner=kitchen_cook)
        # Admins still see it
        assert pending_list in get_pending_lists()

    def test_other_cook_cannot_hide(self, other_cook, pending_list):
        with pytest.raises(NotListOwnerError):
            hide_list(list_id=pending_list.id, user=other_cook)

    def test_reviewed_list_cannot_be_hidden(self, kitchen_cook, approved_list):
        with pytest.raises(InvalidListTransitionError):
            hide_list(list_id=approved_list.id, user=kitchen_cook)

    def test_hidden_twice(self, kitchen_cook, pending_list):
        hide_list(list_id=pending_list.id, user=kitchen_cook)

        with pytest.raises(KitchenListNotFoundError):
            hide_list(list_id=pending_list.id, user=kitchen_cook)


@pytest.mark.django_db
class TestDeleteList:
    """Tests for delete_list."""

    def test_delete_without_materializing(self, kitchen_admin, rejected_list):
        created = delete_list(list_id=rejected_list.id, actor=kitchen_admin)

        assert created == 0
        assert not KitchenList.objects.filter(id=rejected_list.id).exists()
        assert PurchaseItem.objects.count() == 0

    def test_delete_with_materialize(self, kitchen_admin, approved_list):
        purchase_date = timezone.localdate() - timedelta(days=1)

        created = delete_list(
            list_id=approved_list.id,
            actor=kitchen_admin,
            materialize=True,
            purchase_date=purchase_date,
        )

        assert created == 1
        item = PurchaseItem.objects.get()
        assert item.name == 'Cebolla (2)'
        assert item.purchase_date == purchase_date
        assert not KitchenList.objects.filter(id=approved_list.id).exists()

    def test_pending_list_cannot_be_deleted(self, kitchen_admin, pending_list):
        with pytest.raises(InvalidListTransitionError):
            delete_list(list_id=pending_list.id, actor=kitchen_admin)

    def test_cook_cannot_delete(self, kitchen_cook, rejected_list):
        with pytest.raises(InsufficientPermissionsError):
            delete_list(list_id=rejected_list.id, actor=kitchen_cook)


# =============================================================================
# Queries
# =============================================================================

@pytest.mark.django_db
class TestQueries:
    """Tests for list queries."""

    def test_pending_ordered_by_target_date(self, kitchen_cook, pending_list, approved_list):
        sooner = KitchenList.objects.create(
            owner=kitchen_cook,
            title='Hoy',
            target_date=timezone.localdate(),
        )

        assert list(get_pending_lists()) == [sooner, pending_list]

    def test_recent_lists_limited(self, kitchen_cook, target_date, settings):
        settings.COOK_RECENT_LISTS_LIMIT = 2
        for n in range(4):
            KitchenList.objects.create(owner=kitchen_cook, title=f'Lista {n}', target_date=target_date)

        assert len(get_recent_lists(owner=kitchen_cook)) == 2


class TestStockLevel:
    """Tests for the quantity classification."""

    @pytest.mark.parametrize('quantity', ['0', 'no', 'NADA', ' nada '])
    def test_critical(self, quantity):
        assert stock_level(quantity) == 'critical'

    @pytest.mark.parametrize('quantity', ['poco', 'Bajo', '1', '2'])
    def test_low(self, quantity):
        assert stock_level(quantity) == 'low'

    @pytest.mark.parametrize('quantity', ['3', '2 kg', 'mucho', ''])
    def test_ok(self, quantity):
        assert stock_level(quantity) == 'ok'
