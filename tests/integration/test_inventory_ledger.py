"""
Inventory Ledger Integration Tests

Verifies that every stock movement is persisted together with the stock
change it causes, and that low-stock classification follows the
current_stock <= min_stock rule.

SCENARIO:
=========
Corn silage starts at 100 kg with a reorder point of 20 kg:
- Entry of 50 kg  -> 150 kg, not low
- Exit of 140 kg  -> 10 kg, low
- Exit of 5 kg    -> 5 kg, still low
"""

from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.core.exceptions import ValidationError
from rest_framework import status

from feed_inventory.models import Food, StockMovement
from feed_inventory.services import is_low_stock, list_low_stock, record_movement, replay_stock

pytestmark = pytest.mark.django_db


# =============================================================================
# TEST: RECORD MOVEMENT
# =============================================================================

class TestRecordMovement:
    """Tests for record_movement()."""

    def test_stock_scenario_entry_then_exits(self, food, employee_user):
        record_movement(food.id, 'entry', 50, actor=employee_user)
        food.refresh_from_db()
        assert food.current_stock == Decimal('150')
        assert not is_low_stock(food)

        record_movement(food.id, 'exit', 140, actor=employee_user)
        food.refresh_from_db()
        assert food.current_stock == Decimal('10')
        assert is_low_stock(food)

        record_movement(food.id, 'exit', 5, actor=employee_user)
        food.refresh_from_db()
        assert food.current_stock == Decimal('5')
        assert is_low_stock(food)

    def test_total_cost_is_recomputed(self, food, employee_user):
        movement = record_movement(
            food.id, 'entry', Decimal('12.5'), unit_cost=Decimal('2.00'),
            date=date(2024, 3, 5), notes='Delivery #12', actor=employee_user
        )

        assert movement.total_cost == Decimal('25.00')
        assert movement.balance_after == Decimal('112.5')
        assert movement.created_by == employee_user
        assert movement.date == date(2024, 3, 5)

    def test_unit_cost_defaults_to_food_reference_cost(self, food, employee_user):
        movement = record_movement(food.id, 'entry', 10, actor=employee_user)

        assert movement.unit_cost == Decimal('0.45')
        assert movement.total_cost == Decimal('4.50')

    def test_stock_may_go_negative(self, food, employee_user):
        record_movement(food.id, 'exit', 130, actor=employee_user)

        food.refresh_from_db()
        assert food.current_stock == Decimal('-30')
        assert is_low_stock(food)

    @pytest.mark.parametrize('quantity', [0, -5, '', None, 'abc'])
    def test_invalid_quantity_writes_nothing(self, food, employee_user, quantity):
        with pytest.raises(ValidationError):
            record_movement(food.id, 'entry', quantity, actor=employee_user)

        food.refresh_from_db()
        assert food.current_stock == Decimal('100')
        assert StockMovement.objects.count() == 0

    def test_values_are_rounded_to_column_scale(self, food, employee_user):
        movement = record_movement(
            food.id, 'entry', Decimal('3.00049'), unit_cost=Decimal('0.333'), actor=employee_user
        )
        movement.refresh_from_db()

        assert movement.quantity == Decimal('3.000')
        assert movement.unit_cost == Decimal('0.33')
        assert movement.total_cost == Decimal('0.99')
        assert movement.total_cost == (movement.quantity * movement.unit_cost).quantize(Decimal('0.01'))

    def test_quantity_rounding_to_zero_rejected(self, food, employee_user):
        with pytest.raises(ValidationError) as excinfo:
            record_movement(food.id, 'entry', Decimal('0.0004'), actor=employee_user)

        assert 'quantity' in excinfo.value.message_dict
        assert StockMovement.objects.count() == 0

    @pytest.mark.parametrize('quantity', ['NaN', 'Infinity'])
    def test_non_finite_quantity_rejected(self, food, employee_user, quantity):
        with pytest.raises(ValidationError):
            record_movement(food.id, 'entry', quantity, actor=employee_user)

        food.refresh_from_db()
        assert food.current_stock == Decimal('100')

    def test_unknown_food_writes_nothing(self, employee_user):
        import uuid

        with pytest.raises(ValidationError) as excinfo:
            record_movement(uuid.uuid4(), 'entry', 10, actor=employee_user)

        assert 'food' in excinfo.value.message_dict
        assert StockMovement.objects.count() == 0

    def test_unknown_movement_type_rejected(self, food, employee_user):
        with pytest.raises(ValidationError) as excinfo:
            record_movement(food.id, 'transfer', 10, actor=employee_user)

        assert 'movement_type' in excinfo.value.message_dict

    def test_failed_movement_insert_rolls_back_stock(self, food, employee_user):
        """If persisting the movement fails, the stock change is undone too."""
        with patch.object(StockMovement.objects, 'create', side_effect=RuntimeError('store down')):
            with pytest.raises(RuntimeError):
                record_movement(food.id, 'exit', 40, actor=employee_user)

        food.refresh_from_db()
        assert food.current_stock == Decimal('100')
        assert StockMovement.objects.count() == 0


# =============================================================================
# TEST: LOW STOCK & REPLAY
# =============================================================================

class TestLowStock:

    def test_boundary_counts_as_low(self, food):
        food.current_stock = Decimal('20')
        assert is_low_stock(food)

        food.current_stock = Decimal('20.001')
        assert not is_low_stock(food)

    def test_list_low_stock_filters(self, db):
        low = Food.objects.create(name='Mineral salt', current_stock=Decimal('3'), min_stock=Decimal('5'))
        Food.objects.create(name='Soy meal', current_stock=Decimal('500'), min_stock=Decimal('50'))
        edge = Food.objects.create(name='Urea', current_stock=Decimal('10'), min_stock=Decimal('10'))

        result = list_low_stock(Food.objects.all())

        assert {f.id for f in result} == {low.id, edge.id}


class TestReplay:

    def test_replay_matches_running_balance_regardless_of_order(self, food, employee_user):
        same_day = date(2024, 5, 1)
        record_movement(food.id, 'exit', 30, date=same_day, actor=employee_user)
        record_movement(food.id, 'entry', 70, date=same_day, actor=employee_user)
        record_movement(food.id, 'exit', Decimal('12.5'), date=same_day, actor=employee_user)

        movements = list(StockMovement.objects.filter(food=food))
        food.refresh_from_db()

        assert replay_stock(100, movements) == food.current_stock
        assert replay_stock(100, reversed(movements)) == food.current_stock
        assert food.current_stock == Decimal('127.5')


# =============================================================================
# TEST: API ENDPOINTS
# =============================================================================

class TestInventoryAPI:

    def test_create_movement_endpoint(self, employee_client, food, employee_user):
        response = employee_client.post('/api/feed/movements/', {
            'food': str(food.id),
            'movement_type': 'exit',
            'quantity': '85',
            'date': '2024-03-02',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Decimal(response.data['balance_after']) == Decimal('15')
        assert response.data['created_by'] == employee_user.id

        food.refresh_from_db()
        assert food.current_stock == Decimal('15')

    def test_create_movement_rejects_zero_quantity(self, employee_client, food):
        response = employee_client.post('/api/feed/movements/', {
            'food': str(food.id),
            'movement_type': 'entry',
            'quantity': '0',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert StockMovement.objects.count() == 0

    def test_create_movement_unknown_food(self, employee_client):
        import uuid

        response = employee_client.post('/api/feed/movements/', {
            'food': str(uuid.uuid4()),
            'movement_type': 'entry',
            'quantity': '5',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'food' in response.data['errors']

    def test_movement_list_most_recent_first_with_limit(self, employee_client, food, employee_user):
        for day in (1, 3, 2):
            record_movement(food.id, 'entry', 1, date=date(2024, 4, day), actor=employee_user)

        response = employee_client.get('/api/feed/movements/', {'limit': 2})

        assert response.status_code == status.HTTP_200_OK
        assert [m['date'] for m in response.data] == ['2024-04-03', '2024-04-02']

    def test_low_stock_endpoint(self, employee_client, food, employee_user):
        record_movement(food.id, 'exit', 90, actor=employee_user)

        response = employee_client.get('/api/feed/foods/low-stock/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['name'] == 'Corn silage'
        assert response.data['results'][0]['is_low_stock'] is True

    def test_low_stock_endpoint_degrades_to_empty_list(self, employee_client, food):
        from django.db import DatabaseError

        with patch('feed_inventory.views.list_low_stock', side_effect=DatabaseError('boom')):
            response = employee_client.get('/api/feed/foods/low-stock/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'count': 0, 'results': []}

    def test_stock_cannot_be_edited_directly(self, employee_client, food):
        response = employee_client.patch(
            f'/api/feed/foods/{food.id}/', {'current_stock': '999', 'min_stock': '25'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        food.refresh_from_db()
        assert food.current_stock == Decimal('100')
        assert food.min_stock == Decimal('25')

    def test_opening_stock_cannot_be_added_on_update(self, employee_client, food):
        response = employee_client.patch(
            f'/api/feed/foods/{food.id}/', {'opening_stock': '50'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        food.refresh_from_db()
        assert food.current_stock == Decimal('100')

    def test_create_food_records_opening_balance_as_movement(self, employee_client, employee_user):
        response = employee_client.post('/api/feed/foods/', {
            'name': 'Cottonseed',
            'unit': 'kg',
            'opening_stock': '750',
            'current_stock': '9999',
            'min_stock': '100',
            'unit_cost': '1.20',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Decimal(response.data['current_stock']) == Decimal('750')
        assert 'opening_stock' not in response.data

        food = Food.objects.get(name='Cottonseed')
        movement = StockMovement.objects.get(food=food)
        assert food.current_stock == Decimal('750')
        assert movement.movement_type == StockMovement.MovementType.ENTRY
        assert movement.balance_after == Decimal('750')
        assert movement.notes == 'Opening balance'
        assert movement.created_by == employee_user
        assert replay_stock(0, [movement]) == food.current_stock

    def test_create_food_without_opening_stock_starts_empty(self, employee_client):
        response = employee_client.post('/api/feed/foods/', {
            'name': 'Urea', 'unit': 'kg', 'current_stock': '40',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        food = Food.objects.get(name='Urea')
        assert food.current_stock == Decimal('0')
        assert not StockMovement.objects.filter(food=food).exists()

    def test_food_with_movements_cannot_be_deleted(self, employee_client, food, employee_user):
        record_movement(food.id, 'entry', 1, actor=employee_user)

        response = employee_client.delete(f'/api/feed/foods/{food.id}/')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Food.objects.filter(id=food.id).exists()

    def test_requires_authentication(self, api_client):
        response = api_client.get('/api/feed/foods/')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
