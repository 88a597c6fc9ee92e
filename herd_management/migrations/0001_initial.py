# Generated manually for Pen and Animal models
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Pen',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('capacity', models.PositiveIntegerField(default=0, help_text='Number of head the pen is designed to hold')),
                ('daily_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Daily upkeep cost of the pen', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'pens',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Animal',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('tag', models.CharField(help_text='External ear tag / registration number', max_length=50, unique=True)),
                ('breed', models.CharField(blank=True, max_length=100)),
                ('sex', models.CharField(choices=[('male', 'Male'), ('female', 'Female')], max_length=10)),
                ('castrated', models.BooleanField(default=False)),
                ('photo_url', models.URLField(blank=True, max_length=500)),
                ('entry_date', models.DateField(db_index=True)),
                ('entry_weight', models.DecimalField(decimal_places=2, help_text='Weight at entry (kg)', max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('current_weight', models.DecimalField(decimal_places=2, help_text='Most recent weighing (kg)', max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('exit_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('sold', 'Sold'), ('dead', 'Dead')], db_index=True, default='active', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='registered_animals', to=settings.AUTH_USER_MODEL)),
                ('father', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='offspring_as_father', to='herd_management.animal')),
                ('mother', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='offspring_as_mother', to='herd_management.animal')),
                ('pen', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='animals', to='herd_management.pen')),
            ],
            options={
                'db_table': 'animals',
                'ordering': ['name', 'tag'],
                'indexes': [models.Index(fields=['status', 'pen'], name='animals_status_pen_idx')],
            },
        ),
    ]
