"""
Views for Cost Tracking.

API Endpoints:
- /api/expenses/costs/ - List/create costs (list includes totals)
- /api/expenses/costs/{id}/ - Retrieve/update/delete cost
- /api/expenses/categories/ - Cost categories (constants)
- /api/expenses/reports/monthly/?month=YYYY-MM - Per-animal monthly report
- /api/expenses/reports/monthly/export/?month=YYYY-MM&file_type=csv|xlsx - Report export
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpResponse
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exports import build_report_workbook, write_report_csv
from .filters import CostFilter
from .models import Cost, CostCategory
from .serializers import AnimalCostReportRowSerializer, CostSerializer
from .services import (
    build_monthly_report,
    cost_totals,
    general_costs_total,
    month_range,
    summarize_report,
)

logger = logging.getLogger(__name__)


# =============================================================================
# COST CATEGORY VIEWS (Constants)
# =============================================================================

class CostCategoryListView(APIView):
    """
    GET /api/expenses/categories/

    List all cost categories (system constants).
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        categories = [
            {'value': value, 'label': label}
            for value, label in CostCategory.choices
        ]
        return Response(categories)


# =============================================================================
# COST VIEWS
# =============================================================================

class CostListCreateView(generics.ListCreateAPIView):
    """
    GET /api/expenses/costs/
    POST /api/expenses/costs/

    Filters: animal, category, start_date, end_date, general=true.
    """
    serializer_class = CostSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = CostFilter
    search_fields = ['description', 'animal__tag', 'animal__name']
    ordering_fields = ['date', 'amount', 'category', 'created_at']
    ordering = ['-date', '-created_at']

    def get_queryset(self):
        return Cost.objects.select_related('animal', 'created_by')

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        totals = {key: str(value) for key, value in cost_totals(queryset).items()}

        page = self.paginate_queryset(queryset)
        if page is not None:
            response = self.get_paginated_response(self.get_serializer(page, many=True).data)
            response.data['totals'] = totals
            return response

        serializer = self.get_serializer(queryset, many=True)
        return Response({'results': serializer.data, 'count': len(serializer.data), 'totals': totals})

    def perform_create(self, serializer):
        cost = serializer.save(created_by=self.request.user)
        logger.info(f"Cost recorded: {cost} by {self.request.user.username}")


class CostDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/expenses/costs/{id}/
    """
    serializer_class = CostSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return Cost.objects.select_related('animal', 'created_by')


# =============================================================================
# MONTHLY REPORT VIEWS
# =============================================================================

class MonthlyReportMixin:
    """Resolve ?month=YYYY-MM (default: current month) into a date range."""

    def get_month(self, request):
        return request.query_params.get('month') or timezone.localdate().strftime('%Y-%m')


class MonthlyCostReportView(MonthlyReportMixin, APIView):
    """
    GET /api/expenses/reports/monthly/?month=YYYY-MM

    Per-animal cost roll-up for active animals, the summary derived from
    those rows, and the general (unattributed) cost total.
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        month = self.get_month(request)
        try:
            period_start, period_end = month_range(month)
        except ValidationError as exc:
            return Response({'errors': exc.message_dict}, status=status.HTTP_400_BAD_REQUEST)

        rows = build_monthly_report(period_start, period_end)
        summary = summarize_report(rows)

        return Response({
            'month': month,
            'period_start': period_start.isoformat(),
            'period_end': period_end.isoformat(),
            'currency': settings.FEEDLOT_CURRENCY,
            'rows': AnimalCostReportRowSerializer(rows, many=True).data,
            'summary': {
                key: value if key == 'animal_count' else str(value)
                for key, value in summary.items()
            },
            'general_costs_total': str(general_costs_total(period_start, period_end)),
        })


class MonthlyCostReportExportView(MonthlyReportMixin, APIView):
    """
    GET /api/expenses/reports/monthly/export/?month=YYYY-MM&file_type=csv|xlsx
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        month = self.get_month(request)
        file_type = request.query_params.get('file_type', 'csv').lower()
        if file_type not in ('csv', 'xlsx'):
            return Response(
                {'error': 'file_type must be csv or xlsx'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            period_start, period_end = month_range(month)
        except ValidationError as exc:
            return Response({'errors': exc.message_dict}, status=status.HTTP_400_BAD_REQUEST)

        rows = build_monthly_report(period_start, period_end)
        filename = f"cost_report_{month}.{file_type}"

        if file_type == 'xlsx':
            response = HttpResponse(
                build_report_workbook(rows, month),
                content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
            )
        else:
            response = HttpResponse(content_type='text/csv; charset=utf-8')
            write_report_csv(response, rows)

        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        logger.info(f"Cost report {month} exported as {file_type} by {request.user.username}")
        return response
