"""
Admin configuration for Cost Tracking models.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import Cost


@admin.register(Cost)
class CostAdmin(admin.ModelAdmin):
    """Admin for cost records"""
    list_display = ['date', 'category', 'description_short', 'amount', 'animal_display', 'created_by']
    list_filter = ['category', 'date']
    search_fields = ['description', 'animal__tag', 'animal__name']
    raw_id_fields = ['animal']
    readonly_fields = ['created_by', 'created_at', 'updated_at']
    date_hierarchy = 'date'
    list_per_page = 50

    def description_short(self, obj):
        return obj.description[:50] + ('...' if len(obj.description) > 50 else '')
    description_short.short_description = 'Description'

    def animal_display(self, obj):
        if obj.animal_id:
            return obj.animal.tag
        return format_html('<em>{}</em>', 'general')
    animal_display.short_description = 'Animal'

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
