"""
URL configuration for core project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/auth/', include('accounts.urls')),  # Login, profile, user management
    path('api/herd/', include('herd_management.urls')),  # Animals and pens
    path('api/feed/', include('feed_inventory.urls')),  # Foods and stock movements
    path('api/expenses/', include('expenses.urls')),  # Costs and monthly reports
    path('api/', include('sales_revenue.urls')),  # Sales and cash flow
    path('api/dashboards/', include('dashboards.urls')),
]
