"""
Filter sets for cost listings.
"""

import django_filters

from .models import Cost, CostCategory


class CostFilter(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=CostCategory.choices)
    start_date = django_filters.DateFilter(field_name='date', lookup_expr='gte')
    end_date = django_filters.DateFilter(field_name='date', lookup_expr='lte')
    general = django_filters.BooleanFilter(field_name='animal', lookup_expr='isnull')

    class Meta:
        model = Cost
        fields = ['animal', 'category', 'start_date', 'end_date', 'general']
