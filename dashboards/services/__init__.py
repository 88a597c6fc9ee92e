"""
Dashboard Services Package

Business logic for dashboard data aggregation.
"""

from .overview import FeedlotOverviewService

__all__ = ['FeedlotOverviewService']
