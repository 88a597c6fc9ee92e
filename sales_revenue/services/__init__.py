"""
Sales & Revenue Services

Service layer for sale settlement and cash-flow totals.
"""

from .settlement import record_sale, sales_summary, toggle_paid
from .cash_flow import cash_flow_summary

__all__ = [
    'record_sale',
    'toggle_paid',
    'sales_summary',
    'cash_flow_summary',
]
