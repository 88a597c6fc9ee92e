"""
Dashboard API Views

Provides REST API endpoints for dashboard data consumption.
"""

from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from .services import FeedlotOverviewService


class OverviewDashboardView(APIView):
    """
    Feedlot Overview Endpoint

    GET /api/dashboards/overview/

    Returns:
    - Active animals and occupied pens
    - Costs and sales for the current calendar month
    - Count of feed items low on stock
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        service = FeedlotOverviewService()
        data = service.get_overview_stats()
        data['currency'] = settings.FEEDLOT_CURRENCY
        return Response(data)
