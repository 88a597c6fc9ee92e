"""
Feed Inventory Models

This module handles feed inventory tracking for the feedlot.

Models:
    - Food: A feed item with its running stock balance and reorder point
    - StockMovement: One entry or exit against a feed item (audit trail)

Food.current_stock only changes through feed_inventory.services.record_movement.
It may go negative: physical shrinkage is reconciled later, not blocked.
"""

import uuid
from decimal import Decimal
from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator


class Food(models.Model):
    """
    A feed item held in stock (corn silage, mineral salt, ration...).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=100, unique=True)
    unit = models.CharField(
        max_length=20,
        default='kg',
        help_text="Unit of measure (kg, bag, ton, l)"
    )

    # Stock Levels
    current_stock = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0.000'),
        help_text="Running balance driven by stock movements (may be negative)"
    )
    min_stock = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal('0.000'))],
        default=Decimal('0.000'),
        help_text="Reorder point: at or below this level the item is low"
    )
    unit_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        default=Decimal('0.00'),
        help_text="Reference cost per unit, used as the default for new movements"
    )
    is_active = models.BooleanField(default=True, db_index=True)

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'foods'
        ordering = ['name']
        verbose_name = 'Food'
        verbose_name_plural = 'Foods'

    def __str__(self):
        return f"{self.name} ({self.current_stock} {self.unit})"

    @property
    def is_low_stock(self):
        """True when stock is at or below the reorder point."""
        return self.current_stock <= self.min_stock

    @property
    def stock_value(self):
        return self.current_stock * self.unit_cost


class StockMovement(models.Model):
    """
    A single inventory transaction (entry or exit) against a feed item.

    total_cost is recomputed as quantity x unit_cost on every save.
    balance_after records the food's stock right after this movement.
    """

    class MovementType(models.TextChoices):
        ENTRY = 'entry', 'Entry'
        EXIT = 'exit', 'Exit'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    food = models.ForeignKey(
        Food,
        on_delete=models.PROTECT,
        related_name='movements'
    )
    movement_type = models.CharField(
        max_length=10,
        choices=MovementType.choices,
        db_index=True
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal('0.001'))]
    )
    unit_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        default=Decimal('0.00')
    )
    total_cost = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        editable=False
    )
    balance_after = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        help_text="Food stock right after this movement"
    )
    date = models.DateField(db_index=True)
    notes = models.TextField(blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='stock_movements'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stock_movements'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['food', 'date'], name='stock_mov_food_date_idx'),
        ]

    def __str__(self):
        sign = '+' if self.movement_type == self.MovementType.ENTRY else '-'
        return f"{self.food.name} {sign}{self.quantity} on {self.date}"

    def save(self, *args, **kwargs):
        self.total_cost = (self.quantity * self.unit_cost).quantize(Decimal('0.01'))
        super().save(*args, **kwargs)

    @property
    def signed_quantity(self):
        if self.movement_type == self.MovementType.EXIT:
            return -self.quantity
        return self.quantity
