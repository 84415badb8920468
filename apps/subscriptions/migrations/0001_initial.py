import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('salons', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='License',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('key', models.CharField(max_length=64, unique=True)),
                ('plan', models.CharField(choices=[('trial', 'Trial'), ('standard_month', 'Standard (monthly)'), ('standard_year', 'Standard (annual)'), ('gold_month', 'Gold (monthly)'), ('gold_year', 'Gold (annual)'), ('premium_month', 'Premium (monthly)'), ('premium_year', 'Premium (annual)')], default='trial', max_length=20)),
                ('status', models.CharField(choices=[('active', 'Active'), ('expired', 'Expired'), ('suspended', 'Suspended')], db_index=True, default='active', max_length=20)),
                ('valid_until', models.DateTimeField(help_text='License expires after this moment')),
                ('booking_limit', models.PositiveIntegerField(default=50)),
                ('has_waiting_list', models.BooleanField(default=False)),
                ('report_level', models.PositiveSmallIntegerField(default=1)),
                ('salon', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='license', to='salons.salon')),
            ],
            options={
                'verbose_name': 'License',
                'verbose_name_plural': 'Licenses',
                'db_table': 'licenses',
                'ordering': ['-created_at'],
            },
        ),
    ]
