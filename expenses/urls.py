"""
URL configuration for Cost Tracking app.

All endpoints are prefixed with /api/expenses/
"""

from django.urls import path
from .views import (
    CostCategoryListView,
    CostDetailView,
    CostListCreateView,
    MonthlyCostReportExportView,
    MonthlyCostReportView,
)

app_name = 'expenses'

urlpatterns = [
    # ==========================================================================
    # CATEGORIES (Constants)
    # ==========================================================================
    path('categories/', CostCategoryListView.as_view(), name='category-list'),

    # ==========================================================================
    # COSTS
    # ==========================================================================
    path('costs/', CostListCreateView.as_view(), name='cost-list'),
    path('costs/<uuid:pk>/', CostDetailView.as_view(), name='cost-detail'),

    # ==========================================================================
    # REPORTS
    # ==========================================================================
    path('reports/monthly/', MonthlyCostReportView.as_view(), name='monthly-report'),
    path('reports/monthly/export/', MonthlyCostReportExportView.as_view(), name='monthly-report-export'),
]
