"""
Feed Inventory API Views

Provides endpoints for managing feed items, the low-stock feed and the
stock movement ledger.
"""

import logging
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import ProtectedDestroyMixin

from .models import Food, StockMovement
from .serializers import (
    FoodSerializer,
    StockMovementCreateSerializer,
    StockMovementSerializer,
)
from .services import list_low_stock, record_movement

logger = logging.getLogger(__name__)


# =============================================================================
# FOOD VIEWS
# =============================================================================

class FoodListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/feed/foods/
    POST /api/feed/foods/
    """
    queryset = Food.objects.all()
    serializer_class = FoodSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['is_active', 'unit']
    search_fields = ['name']
    ordering_fields = ['name', 'current_stock', 'unit_cost']
    ordering = ['name']

    def perform_create(self, serializer):
        opening_stock = serializer.validated_data.pop('opening_stock', None)

        with transaction.atomic():
            food = serializer.save()
            if opening_stock:
                record_movement(
                    food.id,
                    StockMovement.MovementType.ENTRY,
                    opening_stock,
                    notes='Opening balance',
                    actor=self.request.user,
                )
                food.refresh_from_db()

        logger.info(
            f"Food {food.name} created with opening stock {food.current_stock} "
            f"by {self.request.user.username}"
        )


class FoodDetailView(ProtectedDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/feed/foods/{id}/

    Foods with recorded movements cannot be deleted; deactivate them instead.
    """
    queryset = Food.objects.all()
    serializer_class = FoodSerializer
    permission_classes = [permissions.IsAuthenticated]


class LowStockFoodView(APIView):
    """
    GET /api/feed/foods/low-stock/

    Active foods at or below their minimum stock. A store failure degrades to
    an empty list.
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        try:
            low = list_low_stock(Food.objects.filter(is_active=True))
        except DatabaseError:
            logger.exception("Failed to load low-stock foods")
            low = []

        low.sort(key=lambda food: food.current_stock - food.min_stock)
        data = FoodSerializer(low, many=True).data
        return Response({'count': len(data), 'results': data})


# =============================================================================
# STOCK MOVEMENT VIEWS
# =============================================================================

class StockMovementListCreateView(APIView):
    """
    GET  /api/feed/movements/?food=&movement_type=&limit=
    POST /api/feed/movements/

    Listing returns the most recent movements first.
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        queryset = StockMovement.objects.select_related('food', 'created_by')

        food_id = request.query_params.get('food')
        if food_id:
            try:
                uuid.UUID(food_id)
            except ValueError:
                return Response({'error': 'Invalid food id'}, status=status.HTTP_400_BAD_REQUEST)
            queryset = queryset.filter(food_id=food_id)

        movement_type = request.query_params.get('movement_type')
        if movement_type:
            queryset = queryset.filter(movement_type=movement_type)

        try:
            limit = int(request.query_params.get('limit', settings.MOVEMENT_LIST_LIMIT))
        except ValueError:
            limit = settings.MOVEMENT_LIST_LIMIT
        limit = max(1, min(limit, 500))

        movements = queryset.order_by('-date', '-created_at')[:limit]
        return Response(StockMovementSerializer(movements, many=True).data)

    def post(self, request):
        serializer = StockMovementCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            movement = record_movement(
                food_id=data['food'],
                movement_type=data['movement_type'],
                quantity=data['quantity'],
                unit_cost=data.get('unit_cost'),
                date=data.get('date'),
                notes=data.get('notes', ''),
                actor=request.user,
            )
        except ValidationError as exc:
            logger.warning(f"Rejected stock movement from {request.user.username}: {exc.message_dict}")
            return Response({'errors': exc.message_dict}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            StockMovementSerializer(movement).data,
            status=status.HTTP_201_CREATED
        )
