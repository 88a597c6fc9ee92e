"""
Cost Tracking Models

Every cost belongs to one of five categories:

1. FOOD - Feed and supplements
2. SERVICE - Labour, transport, third-party services
3. PEN - Pen upkeep and rent
4. VETERINARY - Medicines, vaccines, vet visits
5. OTHER - Anything else

Each cost can be:
- Linked to a specific animal (per-animal costing)
- Unlinked (general overhead, never attributed to any animal)
"""

import uuid
from decimal import Decimal
from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator


class CostCategory(models.TextChoices):
    """Predefined cost categories used by the monthly report."""
    FOOD = 'food', 'Food'
    SERVICE = 'service', 'Service'
    PEN = 'pen', 'Pen'
    VETERINARY = 'veterinary', 'Veterinary'
    OTHER = 'other', 'Other'


class Cost(models.Model):
    """
    A single cost record.

    Costs referencing an animal block the animal's deletion.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    animal = models.ForeignKey(
        'herd_management.Animal',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='costs',
        help_text="Leave empty for general (overhead) costs"
    )
    category = models.CharField(
        max_length=20,
        choices=CostCategory.choices,
        db_index=True
    )
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    date = models.DateField(db_index=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recorded_costs'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'costs'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['animal', 'date'], name='costs_animal_date_idx'),
            models.Index(fields=['category', 'date'], name='costs_category_date_idx'),
        ]

    def __str__(self):
        target = self.animal.tag if self.animal_id else 'general'
        return f"{self.get_category_display()} {self.amount} ({target}, {self.date})"

    @property
    def is_general(self):
        return self.animal_id is None
