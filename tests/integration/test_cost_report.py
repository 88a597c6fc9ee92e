"""
Cost Report Integration Tests

SCENARIO:
=========
Animal X (active) has costs:
- March: food 100, veterinary 50
- April: food 30
A general (unattributed) cost of 500 is recorded in March.

The March report must show food=100, veterinary=50, others=0, total=150,
exclude April's cost, and leave the 500 to the general total only.
"""

import csv
import io
from datetime import date
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from openpyxl import load_workbook
from rest_framework import status

from core.money import to_cents
from expenses.models import Cost, CostCategory
from expenses.services import (
    build_monthly_report,
    cost_totals,
    general_costs_total,
    month_range,
    summarize_report,
)
from herd_management.models import Animal

pytestmark = pytest.mark.django_db


@pytest.fixture
def report_setup(animal, make_animal, employee_user):
    def cost(target, category, amount, day):
        return Cost.objects.create(
            animal=target, category=category, description=f'{category} cost',
            amount=Decimal(amount), date=day, created_by=employee_user
        )

    cost(animal, CostCategory.FOOD, '100.00', date(2024, 3, 4))
    cost(animal, CostCategory.VETERINARY, '50.00', date(2024, 3, 31))
    cost(animal, CostCategory.FOOD, '30.00', date(2024, 4, 1))
    cost(None, CostCategory.OTHER, '500.00', date(2024, 3, 15))

    other = make_animal(name='Zebu, Jr.', tag='BR-0002')
    cost(other, CostCategory.SERVICE, '20.00', date(2024, 3, 1))
    cost(other, CostCategory.PEN, '12.50', date(2024, 3, 20))

    sold = make_animal(name='Gone', tag='BR-0003', status=Animal.Status.SOLD)
    cost(sold, CostCategory.FOOD, '999.00', date(2024, 3, 10))

    return {'animal': animal, 'other': other, 'sold': sold}


class TestMonthRange:

    @pytest.mark.parametrize('month,end', [
        ('2024-02', date(2024, 2, 29)),
        ('2023-02', date(2023, 2, 28)),
        ('2024-04', date(2024, 4, 30)),
        ('2024-12', date(2024, 12, 31)),
    ])
    def test_end_is_real_last_day(self, month, end):
        start, stop = month_range(month)
        assert start == end.replace(day=1)
        assert stop == end

    @pytest.mark.parametrize('month', ['2024-13', 'March', '', None])
    def test_invalid_month(self, month):
        with pytest.raises(ValidationError):
            month_range(month)


class TestMoneyRendering:
    """Aggregates are normalised to cents whatever the backend's SUM() returns."""

    @pytest.mark.parametrize('value,expected', [
        (500, '500.00'),
        (Decimal('500'), '500.00'),
        (Decimal('182.5'), '182.50'),
        (12.5, '12.50'),
        (None, '0.00'),
    ])
    def test_to_cents(self, value, expected):
        assert str(to_cents(value)) == expected

    def test_whole_amount_totals_keep_cents(self, animal):
        Cost.objects.create(animal=None, category='other', description='Fence',
                            amount=Decimal('500'), date=date(2024, 3, 2))
        Cost.objects.create(animal=animal, category='food', description='Hay',
                            amount=Decimal('40'), date=date(2024, 3, 2))

        assert str(general_costs_total(*month_range('2024-03'))) == '500.00'
        totals = cost_totals(Cost.objects.all())
        assert {key: str(value) for key, value in totals.items()} == {
            'total': '540.00', 'general': '500.00', 'per_animal': '40.00',
        }
        row = build_monthly_report(*month_range('2024-03'))[0]
        assert str(row['food']) == '40.00'


class TestBuildMonthlyReport:

    def test_march_scenario(self, report_setup):
        rows = build_monthly_report(*month_range('2024-03'))
        row = next(r for r in rows if r['animal_id'] == report_setup['animal'].id)

        assert row['food'] == Decimal('100.00')
        assert row['veterinary'] == Decimal('50.00')
        assert row['service'] == row['pen'] == row['other'] == Decimal('0.00')
        assert row['total_cost'] == Decimal('150.00')
        assert row['pen_name'] == 'Pen A'

    def test_only_active_animals_by_default(self, report_setup):
        rows = build_monthly_report(*month_range('2024-03'))

        assert {r['tag'] for r in rows} == {'BR-0001', 'BR-0002'}

    def test_explicit_animal_selection(self, report_setup):
        rows = build_monthly_report(
            date(2024, 3, 1), date(2024, 3, 31), animals=[report_setup['sold']]
        )

        assert len(rows) == 1
        assert rows[0]['total_cost'] == Decimal('999.00')
        assert rows[0]['pen_name'] == '-'

    def test_category_subtotals_sum_to_total(self, report_setup):
        rows = build_monthly_report(date(2024, 1, 1), date(2024, 12, 31))

        for row in rows:
            assert sum(row[c] for c in CostCategory.values) == row['total_cost']

    def test_summary_equals_sum_of_rows(self, report_setup):
        rows = build_monthly_report(*month_range('2024-03'))
        summary = summarize_report(rows)

        assert summary['total_cost'] == sum(r['total_cost'] for r in rows)
        assert summary['total_cost'] == Decimal('182.50')
        assert summary['food'] == Decimal('100.00')
        assert summary['animal_count'] == 2

    def test_general_costs_never_in_report(self, report_setup):
        rows = build_monthly_report(*month_range('2024-03'))

        assert Decimal('500.00') not in [r['other'] for r in rows]
        assert general_costs_total(*month_range('2024-03')) == Decimal('500.00')
        assert general_costs_total(*month_range('2024-04')) == Decimal('0.00')

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError):
            build_monthly_report(date(2024, 3, 31), date(2024, 3, 1))

    def test_cost_totals(self, report_setup):
        totals = cost_totals(Cost.objects.filter(date__range=(date(2024, 3, 1), date(2024, 3, 31))))

        assert totals['general'] == Decimal('500.00')
        assert totals['per_animal'] == Decimal('1181.50')
        assert totals['total'] == Decimal('1681.50')


class TestCostAPI:

    def test_monthly_report_endpoint(self, employee_client, report_setup):
        response = employee_client.get('/api/expenses/reports/monthly/', {'month': '2024-03'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['period_end'] == '2024-03-31'
        assert response.data['summary']['total_cost'] == '182.50'
        assert response.data['general_costs_total'] == '500.00'
        assert len(response.data['rows']) == 2

    def test_monthly_report_bad_month(self, employee_client):
        response = employee_client.get('/api/expenses/reports/monthly/', {'month': '2024-3x'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'month' in response.data['errors']

    def test_csv_export_quotes_embedded_commas(self, employee_client, report_setup):
        response = employee_client.get(
            '/api/expenses/reports/monthly/export/', {'month': '2024-03', 'file_type': 'csv'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('text/csv')
        content = response.content.decode('utf-8')
        assert '"Zebu, Jr."' in content

        rows = list(csv.reader(io.StringIO(content)))
        assert rows[0] == [
            'Tag', 'Name', 'Breed', 'Entry Date', 'Current Weight', 'Pen',
            'Food', 'Service', 'Pen Cost', 'Veterinary', 'Other', 'Total',
        ]
        assert len(rows) == 3
        assert all(len(row) == 12 for row in rows)
        zebu = next(row for row in rows if row[0] == 'BR-0002')
        assert zebu[1] == 'Zebu, Jr.'
        assert zebu[3] == '10/01/2024'
        assert zebu[-1] == '32.50'

    def test_xlsx_export(self, employee_client, report_setup):
        response = employee_client.get(
            '/api/expenses/reports/monthly/export/', {'month': '2024-03', 'file_type': 'xlsx'}
        )

        assert response.status_code == status.HTTP_200_OK
        workbook = load_workbook(io.BytesIO(response.content))
        sheet = workbook.active
        assert sheet.cell(row=1, column=1).value == 'Tag'
        assert sheet.max_row == 3

    def test_export_rejects_unknown_file_type(self, employee_client):
        response = employee_client.get(
            '/api/expenses/reports/monthly/export/', {'month': '2024-03', 'file_type': 'pdf'}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_cost_list_filters_and_totals(self, employee_client, report_setup):
        response = employee_client.get('/api/expenses/costs/', {
            'general': 'true', 'start_date': '2024-03-01', 'end_date': '2024-03-31'
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['totals']['total'] == '500.00'
        assert response.data['totals']['per_animal'] == '0.00'

    def test_create_cost_stamps_creator(self, employee_client, employee_user, animal):
        response = employee_client.post('/api/expenses/costs/', {
            'animal': str(animal.id),
            'category': 'veterinary',
            'description': 'Vaccination',
            'amount': '42.00',
            'date': '2024-03-12',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Cost.objects.get(id=response.data['id']).created_by == employee_user

    def test_negative_cost_rejected(self, employee_client):
        response = employee_client.post('/api/expenses/costs/', {
            'category': 'other',
            'description': 'Refund?',
            'amount': '-1.00',
            'date': '2024-03-12',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_categories_endpoint(self, employee_client):
        response = employee_client.get('/api/expenses/categories/')

        assert [c['value'] for c in response.data] == ['food', 'service', 'pen', 'veterinary', 'other']
