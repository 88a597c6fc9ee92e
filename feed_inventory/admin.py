"""
Admin configuration for Feed Inventory models.

Stock movements are read-only in the admin: they are the ledger behind
Food.current_stock and are only written through the API.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import Food, StockMovement


class StockMovementInline(admin.TabularInline):
    """Recent movements shown on the food page"""
    model = StockMovement
    extra = 0
    fields = ['date', 'movement_type', 'quantity', 'unit_cost', 'total_cost', 'balance_after', 'created_by']
    readonly_fields = fields
    can_delete = False
    max_num = 0
    ordering = ['-date', '-created_at']


@admin.register(Food)
class FoodAdmin(admin.ModelAdmin):
    list_display = ['name', 'unit', 'current_stock', 'min_stock', 'unit_cost', 'stock_status', 'is_active']
    list_filter = ['is_active', 'unit']
    search_fields = ['name']
    readonly_fields = ['current_stock', 'created_at', 'updated_at']
    inlines = [StockMovementInline]

    def stock_status(self, obj):
        if obj.is_low_stock:
            return format_html('<span style="color: {};">{}</span>', '#dc3545', 'LOW')
        return format_html('<span style="color: {};">{}</span>', '#28a745', 'OK')
    stock_status.short_description = 'Status'


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ['date', 'food', 'movement_type', 'quantity', 'unit_cost', 'total_cost', 'balance_after', 'created_by']
    list_filter = ['movement_type', 'date', 'food']
    search_fields = ['food__name', 'notes']
    date_hierarchy = 'date'
    list_per_page = 50

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
