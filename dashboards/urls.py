"""
Dashboard URL Configuration
"""

from django.urls import path
from .views import OverviewDashboardView

app_name = 'dashboards'

urlpatterns = [
    path('overview/', OverviewDashboardView.as_view(), name='overview'),
]
