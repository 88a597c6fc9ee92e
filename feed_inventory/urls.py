"""
Feed Inventory URLs

All endpoints are prefixed with /api/feed/
"""
from django.urls import path
from .views import (
    FoodDetailView,
    FoodListCreateView,
    LowStockFoodView,
    StockMovementListCreateView,
)

app_name = 'feed_inventory'

urlpatterns = [
    # Low-stock feed (must come before detail routes)
    path('foods/low-stock/', LowStockFoodView.as_view(), name='food-low-stock'),

    path('foods/', FoodListCreateView.as_view(), name='food-list'),
    path('foods/<uuid:pk>/', FoodDetailView.as_view(), name='food-detail'),

    path('movements/', StockMovementListCreateView.as_view(), name='movement-list'),
]
