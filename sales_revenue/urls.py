"""
Sales & Cash Flow URLs

Mounted under /api/
"""
from django.urls import path
from .views import (
    CashFlowDetailView,
    CashFlowListCreateView,
    SaleDetailView,
    SaleListCreateView,
    SaleTogglePaidView,
)

app_name = 'sales_revenue'

urlpatterns = [
    # Sales
    path('sales/', SaleListCreateView.as_view(), name='sale-list'),
    path('sales/<uuid:pk>/', SaleDetailView.as_view(), name='sale-detail'),
    path('sales/<uuid:pk>/toggle-paid/', SaleTogglePaidView.as_view(), name='sale-toggle-paid'),

    # Cash flow
    path('cash-flow/', CashFlowListCreateView.as_view(), name='cash-flow-list'),
    path('cash-flow/<uuid:pk>/', CashFlowDetailView.as_view(), name='cash-flow-detail'),
]
