from decimal import Decimal
import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PayrollPayment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('days_worked', models.PositiveIntegerField(default=0)),
                ('notes', models.TextField(blank=True, default='')),
                ('payment_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payroll_payments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'payroll',
                'ordering': ['-payment_date'],
                'indexes': [
                    models.Index(fields=['-payment_date'], name='payroll_date_idx'),
                    models.Index(fields=['employee', '-payment_date'], name='payroll_employee_date_idx'),
                ],
            },
        ),
    ]
