import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='KitchenList',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('target_date', models.DateField()),
                ('status', models.CharField(choices=[('pending', 'Pendiente'), ('approved', 'Aprobada'), ('rejected', 'Rechazada')], default='pending', max_length=10)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('deleted_by_cook', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='kitchen_lists', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'kitchen_lists',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'target_date'], name='kitchen_status_date_idx'),
                    models.Index(fields=['owner', '-created_at'], name='kitchen_owner_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='KitchenListItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('quantity', models.CharField(default='1', max_length=50)),
                ('estimated_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('position', models.PositiveIntegerField(default=0)),
                ('kitchen_list', models.ForeignKey(db_column='list_id', on_delete=django.db.models.deletion.CASCADE, related_name='items', to='kitchen.kitchenlist')),
            ],
            options={
                'db_table': 'kitchen_list_items',
                'ordering': ['position'],
            },
        ),
    ]
