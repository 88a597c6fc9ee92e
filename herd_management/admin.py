"""
Admin configuration for Herd Management models.
"""

from django.contrib import admin

from .models import Animal, Pen
from .services import pens_with_occupancy


@admin.register(Pen)
class PenAdmin(admin.ModelAdmin):
    list_display = ['name', 'capacity', 'occupancy_display', 'daily_cost', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name']

    def get_queryset(self, request):
        return pens_with_occupancy(super().get_queryset(request))

    def occupancy_display(self, obj):
        return obj.current_occupancy
    occupancy_display.short_description = 'Occupancy'
    occupancy_display.admin_order_field = 'occupancy'


@admin.register(Animal)
class AnimalAdmin(admin.ModelAdmin):
    list_display = ['tag', 'name', 'breed', 'sex', 'pen', 'status', 'entry_date', 'current_weight']
    list_filter = ['status', 'sex', 'castrated', 'pen']
    search_fields = ['tag', 'name', 'breed']
    raw_id_fields = ['father', 'mother']
    readonly_fields = ['created_by', 'created_at', 'updated_at']
    date_hierarchy = 'entry_date'

    fieldsets = (
        ('Identification', {
            'fields': ('name', 'tag', 'breed', 'sex', 'castrated', 'photo_url')
        }),
        ('Parentage & Housing', {
            'fields': ('father', 'mother', 'pen')
        }),
        ('Lifecycle', {
            'fields': ('entry_date', 'entry_weight', 'current_weight', 'exit_date', 'status')
        }),
        ('Audit', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
