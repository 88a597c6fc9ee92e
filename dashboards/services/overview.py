"""
Feedlot Overview Service

Headline figures for the dashboard landing page:
- Active herd and occupied pens
- Current-month costs and sales
- Feed items at or below their reorder point
"""

import logging
from decimal import Decimal

from django.db import DatabaseError
from django.db.models import Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from core.money import to_cents
from expenses.models import Cost
from expenses.services import month_range
from feed_inventory.models import Food
from feed_inventory.services import list_low_stock
from herd_management.models import Animal, Pen
from herd_management.services import pens_with_occupancy
from sales_revenue.models import Sale

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


class FeedlotOverviewService:
    """Service for the feedlot overview dashboard"""

    def __init__(self, today=None):
        self.today = today or timezone.localdate()
        self.period_start, self.period_end = month_range(self.today.strftime('%Y-%m'))

    def get_overview_stats(self):
        """
        Get overview statistics for the current calendar month.

        Returns:
            dict: Overview metrics
        """
        occupied_pens = pens_with_occupancy(
            Pen.objects.filter(is_active=True)
        ).filter(occupancy__gt=0).count()

        return {
            'month': self.today.strftime('%Y-%m'),
            'period_start': self.period_start.isoformat(),
            'period_end': self.period_end.isoformat(),
            'active_animals': Animal.objects.filter(status=Animal.Status.ACTIVE).count(),
            'occupied_pens': occupied_pens,
            'month_costs': str(self._sum(Cost.objects.all(), 'amount', 'date')),
            'month_sales': str(self._sum(Sale.objects.all(), 'sale_price', 'sale_date')),
            'low_stock_foods': self.get_low_stock_count(),
        }

    def get_low_stock_count(self):
        """Number of active foods at or below minimum stock (0 if the lookup fails)."""
        try:
            return len(list_low_stock(Food.objects.filter(is_active=True)))
        except DatabaseError:
            logger.exception("Failed to count low-stock foods")
            return 0

    def _sum(self, queryset, amount_field, date_field):
        total = queryset.filter(**{
            f'{date_field}__gte': self.period_start,
            f'{date_field}__lte': self.period_end,
        }).aggregate(total=Coalesce(Sum(amount_field), ZERO))['total']
        return to_cents(total)
