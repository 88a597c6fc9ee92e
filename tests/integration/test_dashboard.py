"""
Dashboard Overview Integration Tests
"""

from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from rest_framework import status

from dashboards.services import FeedlotOverviewService
from expenses.models import Cost
from herd_management.models import Animal, Pen
from sales_revenue.services import record_sale

pytestmark = pytest.mark.django_db


@pytest.fixture
def busy_feedlot(animal, make_animal, food, employee_user):
    Pen.objects.create(name='Empty pen', capacity=5)
    sold = make_animal()
    make_animal(status=Animal.Status.DEAD, exit_date=date(2024, 2, 1))

    Cost.objects.create(animal=animal, category='food', description='Ration',
                        amount=Decimal('120.00'), date=date(2024, 3, 3))
    Cost.objects.create(animal=None, category='other', description='Fence',
                        amount=Decimal('80.00'), date=date(2024, 3, 30))
    Cost.objects.create(animal=animal, category='food', description='Ration',
                        amount=Decimal('999.00'), date=date(2024, 4, 1))

    record_sale(sold.id, 'Buyer', price=Decimal('4200.00'), sale_date=date(2024, 3, 15))

    food.current_stock = Decimal('5')
    food.save()
    return {'sold': sold}


class TestFeedlotOverviewService:

    def test_overview_for_march(self, busy_feedlot):
        stats = FeedlotOverviewService(today=date(2024, 3, 20)).get_overview_stats()

        assert stats['month'] == '2024-03'
        assert stats['period_end'] == '2024-03-31'
        assert stats['active_animals'] == 1
        assert stats['occupied_pens'] == 1
        assert stats['month_costs'] == '200.00'
        assert stats['month_sales'] == '4200.00'
        assert stats['low_stock_foods'] == 1

    def test_empty_month(self, busy_feedlot):
        stats = FeedlotOverviewService(today=date(2024, 5, 2)).get_overview_stats()

        assert stats['month_costs'] == '0.00'
        assert stats['month_sales'] == '0.00'

    def test_low_stock_lookup_failure_counts_zero(self, busy_feedlot):
        with patch('dashboards.services.overview.list_low_stock', side_effect=DatabaseError('boom')):
            count = FeedlotOverviewService(today=date(2024, 3, 20)).get_low_stock_count()

        assert count == 0


class TestOverviewAPI:

    def test_overview_endpoint(self, employee_client, busy_feedlot):
        response = employee_client.get('/api/dashboards/overview/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['currency'] == 'BRL'
        assert response.data['active_animals'] == 1

    def test_overview_requires_authentication(self, api_client):
        response = api_client.get('/api/dashboards/overview/')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
