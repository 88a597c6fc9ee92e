"""
Inventory ledger for feed stock.

Every stock change is a StockMovement. Recording a movement and applying it
to Food.current_stock happen in one transaction with the food row locked, and
the balance itself is moved with an F() expression so concurrent movements
cannot lose updates.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, List

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from .models import Food, StockMovement

logger = logging.getLogger(__name__)

# Column scales of StockMovement.quantity and unit_cost
QUANTITY_STEP = Decimal('0.001')
CENTS = Decimal('0.01')


def _to_decimal(value, field, step):
    try:
        number = Decimal(str(value))
        if not number.is_finite():
            raise ValueError(value)
        return number.quantize(step)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: f'"{value}" is not a valid number'})


def record_movement(food_id, movement_type, quantity, unit_cost=None, date=None,
                    notes='', actor=None) -> StockMovement:
    """
    Record an entry or exit against a food and apply it to the running stock.

    Args:
        food_id: Primary key of the Food
        movement_type: 'entry' or 'exit'
        quantity: Positive amount moved, in the food's unit
        unit_cost: Cost per unit; defaults to the food's reference unit cost
        date: Movement date; defaults to today
        notes: Free text
        actor: User recording the movement

    Returns:
        The persisted StockMovement (with balance_after set)

    Raises:
        ValidationError: on bad input or an unknown food. Nothing is written.
    """
    if movement_type not in StockMovement.MovementType.values:
        raise ValidationError({
            'movement_type': f'Must be one of {StockMovement.MovementType.values}'
        })

    if quantity in (None, ''):
        raise ValidationError({'quantity': 'This field is required.'})
    quantity = _to_decimal(quantity, 'quantity', QUANTITY_STEP)
    if quantity <= 0:
        raise ValidationError({'quantity': 'Quantity must be positive'})

    if unit_cost not in (None, ''):
        unit_cost = _to_decimal(unit_cost, 'unit_cost', CENTS)
        if unit_cost < 0:
            raise ValidationError({'unit_cost': 'Unit cost cannot be negative'})
    else:
        unit_cost = None

    delta = quantity if movement_type == StockMovement.MovementType.ENTRY else -quantity

    with transaction.atomic():
        try:
            food = Food.objects.select_for_update().get(pk=food_id)
        except (Food.DoesNotExist, ValidationError, ValueError):
            raise ValidationError({'food': f'Food {food_id} does not exist'})

        Food.objects.filter(pk=food.pk).update(
            current_stock=F('current_stock') + delta,
            updated_at=timezone.now()
        )
        food.refresh_from_db(fields=['current_stock', 'updated_at'])

        movement = StockMovement.objects.create(
            food=food,
            movement_type=movement_type,
            quantity=quantity,
            unit_cost=unit_cost if unit_cost is not None else food.unit_cost,
            balance_after=food.current_stock,
            date=date or timezone.localdate(),
            notes=notes or '',
            created_by=actor,
        )

    logger.info(
        f"Stock {movement_type} of {quantity} {food.unit} on {food.name} "
        f"(balance {food.current_stock}) by {getattr(actor, 'username', 'system')}"
    )
    if food.current_stock < 0:
        logger.warning(f"Food {food.name} stock is negative: {food.current_stock}")

    return movement


def is_low_stock(food: Food) -> bool:
    """True iff current stock is at or below the minimum (boundary counts as low)."""
    return food.current_stock <= food.min_stock


def list_low_stock(foods: Iterable[Food]) -> List[Food]:
    """Return the foods that are low on stock. Order is not significant."""
    return [food for food in foods if is_low_stock(food)]


def replay_stock(initial_stock, movements: Iterable[StockMovement]) -> Decimal:
    """
    Recompute a balance from an initial stock and a sequence of movements.

    The result does not depend on the order of the movements.
    """
    balance = Decimal(str(initial_stock))
    for movement in movements:
        balance += movement.signed_quantity
    return balance
