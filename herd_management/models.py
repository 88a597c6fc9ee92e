"""
Herd Management Models

Handles:
- Pens (physical enclosures, occupancy derived from assigned animals)
- Individually tagged animals with parentage and lifecycle status
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


# =============================================================================
# PEN MODEL
# =============================================================================

class Pen(models.Model):
    """
    A physical enclosure holding a group of animals.

    Occupancy is not stored: it is the number of active animals currently
    assigned to the pen. Capacity is informational and is not enforced.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=100, unique=True)
    capacity = models.PositiveIntegerField(
        default=0,
        help_text="Number of head the pen is designed to hold"
    )
    daily_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Daily upkeep cost of the pen"
    )
    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pens'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def current_occupancy(self):
        """Active animals in this pen (uses the queryset annotation when present)."""
        annotated = getattr(self, 'occupancy', None)
        if annotated is not None:
            return annotated
        return self.animals.filter(status=Animal.Status.ACTIVE).count()


# =============================================================================
# ANIMAL MODEL
# =============================================================================

class Animal(models.Model):
    """
    An individually tagged head of cattle.

    Status moves from active to sold or dead; both are terminal.
    Sales and costs referencing an animal block its deletion.
    """

    class Sex(models.TextChoices):
        MALE = 'male', 'Male'
        FEMALE = 'female', 'Female'

    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        SOLD = 'sold', 'Sold'
        DEAD = 'dead', 'Dead'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Identification
    name = models.CharField(max_length=100)
    tag = models.CharField(
        max_length=50,
        unique=True,
        help_text="External ear tag / registration number"
    )
    breed = models.CharField(max_length=100, blank=True)
    sex = models.CharField(max_length=10, choices=Sex.choices)
    castrated = models.BooleanField(default=False)
    photo_url = models.URLField(max_length=500, blank=True)

    # Parentage
    father = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='offspring_as_father'
    )
    mother = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='offspring_as_mother'
    )

    # Housing
    pen = models.ForeignKey(
        Pen,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='animals'
    )

    # Lifecycle
    entry_date = models.DateField(db_index=True)
    entry_weight = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Weight at entry (kg)"
    )
    current_weight = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Most recent weighing (kg)"
    )
    exit_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='registered_animals'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'animals'
        ordering = ['name', 'tag']
        indexes = [
            models.Index(fields=['status', 'pen'], name='animals_status_pen_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.tag})"

    @property
    def is_active(self):
        return self.status == self.Status.ACTIVE

    def clean(self):
        """Validate parentage and exit data"""
        from .services import ancestry_contains

        errors = {}

        for field, expected_sex in (('father', self.Sex.MALE), ('mother', self.Sex.FEMALE)):
            parent = getattr(self, field)
            if parent is None:
                continue
            if not self._state.adding and parent.pk == self.pk:
                errors[field] = 'An animal cannot be its own parent'
            elif parent.sex != expected_sex:
                errors[field] = f'{field.capitalize()} must be {expected_sex}'
            elif not self._state.adding and ancestry_contains(parent, self.pk):
                errors[field] = (
                    f'{parent} descends from {self}; this link would create a parentage cycle'
                )

        if self.father_id and self.father_id == self.mother_id:
            errors['mother'] = 'Father and mother must be different animals'

        if self.exit_date and self.entry_date and self.exit_date < self.entry_date:
            errors['exit_date'] = 'Exit date cannot be before entry date'

        if errors:
            raise ValidationError(errors)
