"""
Filter sets for sale and cash-flow listings.
"""

import django_filters

from .models import CashFlowEntry, Sale


class SaleFilter(django_filters.FilterSet):
    start_date = django_filters.DateFilter(field_name='sale_date', lookup_expr='gte')
    end_date = django_filters.DateFilter(field_name='sale_date', lookup_expr='lte')

    class Meta:
        model = Sale
        fields = ['animal', 'paid', 'start_date', 'end_date']


class CashFlowFilter(django_filters.FilterSet):
    entry_type = django_filters.ChoiceFilter(choices=CashFlowEntry.EntryType.choices)
    start_date = django_filters.DateFilter(field_name='date', lookup_expr='gte')
    end_date = django_filters.DateFilter(field_name='date', lookup_expr='lte')

    class Meta:
        model = CashFlowEntry
        fields = ['entry_type', 'category', 'payment_method', 'start_date', 'end_date']
