"""
Cash-flow ledger totals.
"""

from decimal import Decimal
from typing import Dict

from django.db.models import Q, Sum
from django.db.models.functions import Coalesce

from core.money import to_cents

from ..models import CashFlowEntry

ZERO = Decimal('0.00')


def cash_flow_summary(queryset) -> Dict[str, Decimal]:
    """Income, expense and balance (income - expense) for a queryset of entries."""
    totals = queryset.aggregate(
        income=Coalesce(Sum('amount', filter=Q(entry_type=CashFlowEntry.EntryType.INCOME)), ZERO),
        expense=Coalesce(Sum('amount', filter=Q(entry_type=CashFlowEntry.EntryType.EXPENSE)), ZERO),
    )
    totals = {key: to_cents(value) for key, value in totals.items()}
    totals['balance'] = totals['income'] - totals['expense']
    return totals
