# Generated manually for the Cost model
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('herd_management', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Cost',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('category', models.CharField(choices=[('food', 'Food'), ('service', 'Service'), ('pen', 'Pen'), ('veterinary', 'Veterinary'), ('other', 'Other')], db_index=True, max_length=20)),
                ('description', models.CharField(max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('date', models.DateField(db_index=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('animal', models.ForeignKey(blank=True, help_text='Leave empty for general (overhead) costs', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='costs', to='herd_management.animal')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recorded_costs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'costs',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['animal', 'date'], name='costs_animal_date_idx'),
                    models.Index(fields=['category', 'date'], name='costs_category_date_idx'),
                ],
            },
        ),
    ]
