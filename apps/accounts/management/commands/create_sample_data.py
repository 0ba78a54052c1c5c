"""
Management command to create sample data for trying the API.

Usage:
    python manage.py create_sample_data

This creates:
- 3 users (admin, luis, ana)
- The capital row with the default amount
- Shopping items for the last few days
- Daily tasks for today
- Kitchen lists (pending from cooks, one auto-approved from the admin)
- Payroll payments
- Night sales (one pending, one accepted through the ledger)
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import timedelta

from apps.accounts.models import User, UserRole
from apps.capital.models import Capital
from apps.capital.services import LedgerService
from apps.kitchen.models import KitchenList
from apps.kitchen.services import submit_list
from apps.night_sales.models import NightSale
from apps.night_sales.services import NightSaleService
from apps.payroll.models import PayrollPayment
from apps.purchases.models import PurchaseItem
from apps.tasks.models import DailyTask


class Command(BaseCommand):
    help = 'Create sample data for trying the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.stdout.write(f'  Capital: {LedgerService.read()} MXN')

        self.create_shopping_items()
        self.create_tasks()
        self.create_kitchen_lists(users)
        self.create_payroll(users)
        self.create_night_sales(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@burgerclub.mx / admin12345 (admin)')
        self.stdout.write('  luis@burgerclub.mx / cocina12345 (cook)')
        self.stdout.write('  ana@burgerclub.mx / cocina12345 (cook)')

    def clear_data(self):
        """Clear all data from the database."""
        NightSale.objects.all().delete()
        PayrollPayment.objects.all().delete()
        KitchenList.objects.all().delete()
        DailyTask.objects.all().delete()
        PurchaseItem.objects.all().delete()
        Capital.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@burgerclub.mx',
            defaults={
                'name': 'Administrador',
                'role': UserRole.ADMIN,
                'is_staff': True,
            }
        )
        admin.set_password('admin12345')
        admin.save()

        cooks = []
        for name in ('Luis', 'Ana'):
            cook, _ = User.objects.get_or_create(
                email=f'{name.lower()}@burgerclub.mx',
                defaults={'name': name, 'role': UserRole.COOK}
            )
            cook.set_password('cocina12345')
            cook.save()
            cooks.append(cook)

        return {'admin': admin, 'luis': cooks[0], 'ana': cooks[1]}

    def create_shopping_items(self):
        self.stdout.write('  Creating shopping items...')

        today = timezone.localdate()
        samples = [
            ('Pan de hamburguesa (40)', '180.00', 0, True),
            ('Carne molida 5 kg', '650.00', 0, False),
            ('Queso americano', '210.50', 0, False),
            ('Jitomate', '64.00', 1, True),
            ('Papas congeladas', '320.00', 2, True),
            ('Refrescos', '410.00', 5, True),
        ]
        for name, price, days_ago, completed in samples:
            PurchaseItem.objects.create(
                name=name,
                price=Decimal(price),
                purchase_date=today - timedelta(days=days_ago),
                is_completed=completed,
                completed_at=timezone.now() if completed else None,
            )

    def create_tasks(self):
        self.stdout.write('  Creating tasks...')

        for title in ('Limpiar plancha', 'Revisar tanque de gas', 'Pedir refrescos'):
            DailyTask.objects.create(title=title, task_date=timezone.localdate())

    def create_kitchen_lists(self, users):
        self.stdout.write('  Creating kitchen lists...')

        tomorrow = timezone.localdate() + timedelta(days=1)
        submit_list(
            owner=users['luis'],
            title='Fin de semana',
            target_date=tomorrow,
            lines=[
                {'name': 'Tomate', 'quantity': '0'},
                {'name': 'Cebolla', 'quantity': 'poco'},
                {'name': 'Queso', 'quantity': '5'},
            ],
        )
        submit_list(
            owner=users['ana'],
            title='Salsas',
            target_date=tomorrow,
            lines=[
                {'name': 'Catsup', 'quantity': 'nada'},
                {'name': 'Mostaza', 'quantity': '2'},
            ],
        )
        submit_list(
            owner=users['admin'],
            title='Desechables',
            target_date=tomorrow,
            lines=[{'name': 'Servilletas', 'quantity': '3 paquetes', 'estimated_price': '95.00'}],
        )

    def create_payroll(self, users):
        self.stdout.write('  Creating payroll payments...')

        for cook, amount, days in ((users['luis'], '1800.00', 6), (users['ana'], '1500.00', 5)):
            PayrollPayment.objects.create(
                employee=cook,
                amount=Decimal(amount),
                days_worked=days,
                notes='Pago semanal',
                payment_date=timezone.now() - timedelta(days=2),
            )

    def create_night_sales(self, users):
        self.stdout.write('  Creating night sales...')

        NightSaleService.submit(users['ana'], Decimal('950.00'), 'Sábado')
        accepted = NightSaleService.submit(users['luis'], Decimal('1200.50'), 'noche viernes')
        _, capital = NightSaleService.accept(accepted.id)
        self.stdout.write(f'  Capital after accepted sale: {capital} MXN')
