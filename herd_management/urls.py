"""
Herd Management URLs

All endpoints are prefixed with /api/herd/
"""
from django.urls import path
from .views import (
    AnimalDetailView,
    AnimalListCreateView,
    AnimalStatusView,
    PenDetailView,
    PenListCreateView,
)

app_name = 'herd_management'

urlpatterns = [
    path('pens/', PenListCreateView.as_view(), name='pen-list'),
    path('pens/<uuid:pk>/', PenDetailView.as_view(), name='pen-detail'),

    path('animals/', AnimalListCreateView.as_view(), name='animal-list'),
    path('animals/<uuid:pk>/', AnimalDetailView.as_view(), name='animal-detail'),
    path('animals/<uuid:pk>/status/', AnimalStatusView.as_view(), name='animal-status'),
]
