"""
Sales & Cash Flow API Views

API Endpoints:
- /api/sales/ - List sales (with summary) / record a sale
- /api/sales/{id}/ - Retrieve/update/delete a sale
- /api/sales/{id}/toggle-paid/ - Flip the paid flag
- /api/cash-flow/ - List entries (with summary) / create entry
- /api/cash-flow/{id}/ - Retrieve/update/delete entry
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .filters import CashFlowFilter, SaleFilter
from .models import CashFlowEntry, Sale
from .serializers import CashFlowEntrySerializer, SaleCreateSerializer, SaleSerializer
from .services import cash_flow_summary, record_sale, sales_summary, toggle_paid

logger = logging.getLogger(__name__)


class SummaryListMixin:
    """Attach an aggregate summary of the filtered queryset to list responses."""

    def get_summary(self, queryset):
        raise NotImplementedError

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        summary = {
            key: value if isinstance(value, int) else str(value)
            for key, value in self.get_summary(queryset).items()
        }

        page = self.paginate_queryset(queryset)
        if page is not None:
            response = self.get_paginated_response(self.get_serializer(page, many=True).data)
            response.data['summary'] = summary
            return response

        serializer = self.get_serializer(queryset, many=True)
        return Response({'results': serializer.data, 'count': len(serializer.data), 'summary': summary})


# =============================================================================
# SALE VIEWS
# =============================================================================

class SaleListCreateView(SummaryListMixin, generics.ListCreateAPIView):
    """
    GET /api/sales/
    POST /api/sales/

    Recording a sale marks the animal as sold in the same transaction.
    """
    serializer_class = SaleSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = SaleFilter
    search_fields = ['buyer_name', 'animal__tag', 'animal__name']
    ordering_fields = ['sale_date', 'sale_price', 'created_at']
    ordering = ['-sale_date', '-created_at']

    def get_queryset(self):
        return Sale.objects.select_related('animal', 'created_by')

    def get_summary(self, queryset):
        return sales_summary(queryset)

    def create(self, request, *args, **kwargs):
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            sale = record_sale(
                animal_id=data['animal'],
                buyer_name=data['buyer_name'],
                buyer_contact=data.get('buyer_contact', ''),
                price=data['sale_price'],
                sale_date=data.get('sale_date'),
                payment_date=data.get('payment_date'),
                paid=data.get('paid', False),
                notes=data.get('notes', ''),
                actor=request.user,
            )
        except ValidationError as exc:
            return Response({'errors': exc.message_dict}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)


class SaleDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/sales/{id}/

    Only buyer, price, payment date and notes can be edited. Deleting a sale
    does not bring the animal back to active.
    """
    serializer_class = SaleSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return Sale.objects.select_related('animal', 'created_by')

    def perform_destroy(self, instance):
        logger.info(f"Sale {instance.id} of {instance.animal.tag} deleted by {self.request.user.username}")
        instance.delete()


class SaleTogglePaidView(APIView):
    """
    POST /api/sales/{id}/toggle-paid/

    Flip the paid flag of a sale.
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        with transaction.atomic():
            sale = get_object_or_404(Sale.objects.select_for_update(), pk=pk)
            toggle_paid(sale)

        return Response({
            'success': True,
            'sale_id': str(sale.id),
            'paid': sale.paid,
        })


# =============================================================================
# CASH FLOW VIEWS
# =============================================================================

class CashFlowListCreateView(SummaryListMixin, generics.ListCreateAPIView):
    """
    GET /api/cash-flow/
    POST /api/cash-flow/
    """
    serializer_class = CashFlowEntrySerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = CashFlowFilter
    search_fields = ['description', 'category', 'reference_id']
    ordering_fields = ['date', 'amount', 'created_at']
    ordering = ['-date', '-created_at']

    def get_queryset(self):
        return CashFlowEntry.objects.select_related('created_by')

    def get_summary(self, queryset):
        return cash_flow_summary(queryset)

    def perform_create(self, serializer):
        entry = serializer.save(created_by=self.request.user)
        logger.info(f"Cash flow entry recorded: {entry} by {self.request.user.username}")


class CashFlowDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/cash-flow/{id}/
    """
    serializer_class = CashFlowEntrySerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return CashFlowEntry.objects.select_related('created_by')
