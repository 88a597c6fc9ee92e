"""
Herd Management API Views

Provides CRUD operations for pens and animals, plus the status endpoint
that records deaths (sales go through /api/sales/).
"""

import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import ProtectedDestroyMixin

from .models import Animal
from .serializers import AnimalSerializer, AnimalStatusSerializer, PenSerializer
from .services import StatusTransitionError, pens_with_occupancy, transition_status

logger = logging.getLogger(__name__)


# =============================================================================
# PEN VIEWS
# =============================================================================

class PenListCreateView(generics.ListCreateAPIView):
    """
    GET /api/herd/pens/
    POST /api/herd/pens/
    """
    serializer_class = PenSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['is_active']
    search_fields = ['name']
    ordering_fields = ['name', 'capacity', 'daily_cost']
    ordering = ['name']

    def get_queryset(self):
        return pens_with_occupancy()

    def perform_create(self, serializer):
        pen = serializer.save()
        logger.info(f"Pen {pen.name} created by {self.request.user.username}")


class PenDetailView(ProtectedDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/herd/pens/{id}/

    Deleting a pen unassigns its animals.
    """
    serializer_class = PenSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return pens_with_occupancy()


# =============================================================================
# ANIMAL VIEWS
# =============================================================================

class AnimalListCreateView(generics.ListCreateAPIView):
    """
    GET /api/herd/animals/
    POST /api/herd/animals/

    Filters: status, pen, sex. Search: name, tag, breed.
    """
    serializer_class = AnimalSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['status', 'pen', 'sex']
    search_fields = ['name', 'tag', 'breed']
    ordering_fields = ['name', 'tag', 'entry_date', 'current_weight']
    ordering = ['name']

    def get_queryset(self):
        return Animal.objects.select_related('pen', 'father', 'mother', 'created_by')

    def perform_create(self, serializer):
        animal = serializer.save(created_by=self.request.user)
        logger.info(f"Animal {animal.tag} registered by {self.request.user.username}")


class AnimalDetailView(ProtectedDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/herd/animals/{id}/

    Deletion is refused while sales or costs reference the animal.
    """
    serializer_class = AnimalSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return Animal.objects.select_related('pen', 'father', 'mother', 'created_by')


class AnimalStatusView(APIView):
    """
    POST /api/herd/animals/{id}/status/

    Record a death. Sales go through /api/sales/ so that every sold animal
    has a Sale behind it.
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        serializer = AnimalStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        new_status = serializer.validated_data['status']
        exit_date = serializer.validated_data.get('exit_date') or timezone.localdate()

        with transaction.atomic():
            animal = get_object_or_404(Animal.objects.select_for_update(), pk=pk)
            if exit_date and exit_date < animal.entry_date:
                return Response(
                    {'errors': {'exit_date': ['Exit date cannot be before entry date']}},
                    status=status.HTTP_400_BAD_REQUEST
                )
            try:
                transition_status(animal, new_status, exit_date)
            except StatusTransitionError as exc:
                logger.warning(f"Rejected status change for {animal.tag}: {exc}")
                return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(AnimalSerializer(animal).data)
