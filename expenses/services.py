"""
Cost aggregation for the monthly per-animal report.

The report is built from one grouped query (animal x category) and every
aggregate figure is derived by summing the returned rows, so the grand total
shown always equals the sum of the rows shown. General costs (no animal)
never enter the report; they have their own total over the same range.
"""

import calendar
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.core.exceptions import ValidationError
from django.db.models import Q, Sum
from django.db.models.functions import Coalesce

from core.money import to_cents
from herd_management.models import Animal

from .models import Cost, CostCategory

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')
NO_PEN = '-'


def month_range(month: str) -> Tuple[date, date]:
    """
    Inclusive date range for a ``YYYY-MM`` month.

    The end bound is the real last day of the month (28/29/30/31).
    """
    try:
        start = datetime.strptime(month, '%Y-%m').date()
    except (TypeError, ValueError):
        raise ValidationError({'month': f'"{month}" is not a valid month (expected YYYY-MM)'})

    last_day = calendar.monthrange(start.year, start.month)[1]
    return start, start.replace(day=last_day)


def build_monthly_report(period_start: date, period_end: date,
                         animals: Optional[Iterable[Animal]] = None) -> List[Dict[str, Any]]:
    """
    Per-animal cost roll-up over an inclusive date range.

    Args:
        period_start: First day included
        period_end: Last day included
        animals: Animals to report on; defaults to all active animals

    Returns:
        One row per animal, in the order given, with the five category
        subtotals and ``total_cost`` (their sum).
    """
    if period_end < period_start:
        raise ValidationError({'period_end': 'End of period cannot be before its start'})

    if animals is None:
        animals = Animal.objects.filter(status=Animal.Status.ACTIVE).select_related('pen')
    animals = list(animals)

    subtotals: Dict[Any, Dict[str, Decimal]] = {}
    grouped = (
        Cost.objects
        .filter(
            animal_id__in=[animal.pk for animal in animals],
            date__gte=period_start,
            date__lte=period_end,
        )
        .values('animal_id', 'category')
        .annotate(total=Sum('amount'))
        .order_by()
    )
    for entry in grouped:
        subtotals.setdefault(entry['animal_id'], {})[entry['category']] = to_cents(entry['total'])

    rows = []
    for animal in animals:
        by_category = subtotals.get(animal.pk, {})
        row = {
            'animal_id': animal.pk,
            'animal_name': animal.name,
            'tag': animal.tag,
            'breed': animal.breed,
            'entry_date': animal.entry_date,
            'current_weight': animal.current_weight,
            'pen_name': animal.pen.name if animal.pen_id else NO_PEN,
        }
        for category in CostCategory.values:
            row[category] = by_category.get(category, ZERO)
        row['total_cost'] = sum((row[category] for category in CostCategory.values), ZERO)
        rows.append(row)

    logger.info(
        f"Built cost report {period_start}..{period_end}: {len(rows)} animals"
    )
    return rows


def summarize_report(rows: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Grand and per-category totals, computed only from the report rows."""
    rows = list(rows)
    summary = {
        category: sum((row[category] for row in rows), ZERO)
        for category in CostCategory.values
    }
    summary['total_cost'] = sum((row['total_cost'] for row in rows), ZERO)
    summary['animal_count'] = len(rows)
    return summary


def general_costs_total(period_start: date, period_end: date) -> Decimal:
    """Sum of costs with no animal reference in the inclusive range."""
    total = Cost.objects.filter(
        animal__isnull=True,
        date__gte=period_start,
        date__lte=period_end,
    ).aggregate(total=Coalesce(Sum('amount'), ZERO))['total']
    return to_cents(total)


def cost_totals(queryset) -> Dict[str, Decimal]:
    """Total, general and per-animal sums for a (filtered) cost queryset."""
    totals = queryset.aggregate(
        total=Coalesce(Sum('amount'), ZERO),
        general=Coalesce(Sum('amount', filter=Q(animal__isnull=True)), ZERO),
        per_animal=Coalesce(Sum('amount', filter=Q(animal__isnull=False)), ZERO),
    )
    return {key: to_cents(value) for key, value in totals.items()}
