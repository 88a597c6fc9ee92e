"""
Shared pytest fixtures for feedlot tests.
"""

import uuid
from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    unique_id = uuid.uuid4().hex[:8]
    return User.objects.create_user(
        username=f'admin_{unique_id}',
        email=f'admin_{unique_id}@feedlot.test',
        password='Feedlot!pass123',
        full_name='Ana Admin',
        role='admin',
    )


@pytest.fixture
def employee_user(db):
    unique_id = uuid.uuid4().hex[:8]
    return User.objects.create_user(
        username=f'employee_{unique_id}',
        email=f'employee_{unique_id}@feedlot.test',
        password='Feedlot!pass123',
        full_name='Eduardo Employee',
        role='employee',
    )


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def employee_client(employee_user):
    client = APIClient()
    client.force_authenticate(user=employee_user)
    return client


@pytest.fixture
def pen(db):
    from herd_management.models import Pen

    return Pen.objects.create(name='Pen A', capacity=20, daily_cost=Decimal('35.00'))


@pytest.fixture
def make_animal(db, employee_user):
    """Factory for animals with sensible defaults."""
    from herd_management.models import Animal

    def _make_animal(**overrides):
        unique_id = uuid.uuid4().hex[:6]
        values = {
            'name': f'Steer {unique_id}',
            'tag': f'BR-{unique_id}',
            'breed': 'Nelore',
            'sex': Animal.Sex.MALE,
            'entry_date': date(2024, 1, 10),
            'entry_weight': Decimal('280.00'),
            'current_weight': Decimal('350.00'),
            'created_by': employee_user,
        }
        values.update(overrides)
        return Animal.objects.create(**values)

    return _make_animal


@pytest.fixture
def animal(make_animal, pen):
    return make_animal(name='Trovão', tag='BR-0001', pen=pen)


@pytest.fixture
def food(db):
    from feed_inventory.models import Food

    return Food.objects.create(
        name='Corn silage',
        unit='kg',
        current_stock=Decimal('100'),
        min_stock=Decimal('20'),
        unit_cost=Decimal('0.45'),
    )
