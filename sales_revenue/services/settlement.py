"""
Sale settlement.

Recording a sale and moving the animal to ``sold`` are one unit of work:
the animal row is locked, the sale is inserted and the animal's status and
exit date are updated inside a single transaction. Payment is tracked
afterwards through toggle_paid and never touches the animal or cash flow.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Q, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from core.money import to_cents
from herd_management.models import Animal
from herd_management.services import transition_status

from ..models import Sale

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def record_sale(animal_id, buyer_name, buyer_contact='', price=None, sale_date=None,
                payment_date=None, paid=False, notes='', actor=None) -> Sale:
    """
    Record the sale of an active animal and mark it sold.

    Raises:
        ValidationError: missing buyer, bad price, unknown animal or an animal
        that is not active. Nothing is written in any of these cases.
    """
    errors = {}
    if not buyer_name or not str(buyer_name).strip():
        errors['buyer_name'] = 'Buyer name is required'

    try:
        price = Decimal(str(price)) if price not in (None, '') else None
    except (InvalidOperation, ValueError):
        price = None
        errors['sale_price'] = 'Sale price must be a number'
    if price is None and 'sale_price' not in errors:
        errors['sale_price'] = 'Sale price is required'
    elif price is not None and price < 0:
        errors['sale_price'] = 'Sale price cannot be negative'

    if errors:
        raise ValidationError(errors)

    sale_date = sale_date or timezone.localdate()

    with transaction.atomic():
        try:
            animal = Animal.objects.select_for_update().get(pk=animal_id)
        except (Animal.DoesNotExist, ValidationError, ValueError):
            raise ValidationError({'animal': f'Animal {animal_id} does not exist'})

        if animal.status != Animal.Status.ACTIVE:
            logger.warning(
                f"Rejected sale of {animal.tag}: status is {animal.status}"
            )
            raise ValidationError({
                'animal': f'Animal {animal.tag} is {animal.status}; only active animals can be sold'
            })

        if sale_date < animal.entry_date:
            raise ValidationError({'sale_date': 'Sale date cannot be before the entry date'})

        sale = Sale.objects.create(
            animal=animal,
            buyer_name=buyer_name.strip(),
            buyer_contact=buyer_contact or '',
            sale_price=price,
            sale_date=sale_date,
            payment_date=payment_date,
            paid=bool(paid),
            notes=notes or '',
            created_by=actor,
        )
        transition_status(animal, Animal.Status.SOLD, sale_date)

    logger.info(
        f"Sale {sale.id} recorded: {animal.tag} to {sale.buyer_name} for {price} "
        f"by {getattr(actor, 'username', 'system')}"
    )
    return sale


def toggle_paid(sale: Sale) -> Sale:
    """Flip the paid flag. No other column is written."""
    sale.paid = not sale.paid
    sale.save(update_fields=['paid'])
    logger.info(f"Sale {sale.id} marked {'paid' if sale.paid else 'unpaid'}")
    return sale


def sales_summary(queryset) -> Dict[str, object]:
    """Total, paid and pending amounts for a (filtered) sale queryset."""
    totals = queryset.aggregate(
        count=Count('id'),
        total=Coalesce(Sum('sale_price'), ZERO),
        paid_total=Coalesce(Sum('sale_price', filter=Q(paid=True)), ZERO),
        pending_total=Coalesce(Sum('sale_price', filter=Q(paid=False)), ZERO),
    )
    return {
        key: value if key == 'count' else to_cents(value)
        for key, value in totals.items()
    }
