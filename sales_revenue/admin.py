from django.contrib import admin, messages
from django.utils.html import format_html

from .models import CashFlowEntry, Sale
from .services import toggle_paid


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """
    Sales are recorded through the API so the animal is marked sold in the
    same transaction; the admin is for review and payment follow-up.
    """
    list_display = ['sale_date', 'animal', 'buyer_name', 'sale_price', 'payment_badge', 'payment_date']
    list_filter = ['paid', 'sale_date']
    search_fields = ['buyer_name', 'buyer_contact', 'animal__tag', 'animal__name']
    readonly_fields = ['animal', 'sale_date', 'paid', 'created_by', 'created_at', 'updated_at']
    date_hierarchy = 'sale_date'
    actions = ['toggle_paid_action']

    def has_add_permission(self, request):
        return False

    def payment_badge(self, obj):
        color = '#28a745' if obj.paid else '#ffc107'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            color, 'PAID' if obj.paid else 'PENDING'
        )
    payment_badge.short_description = 'Payment'

    def toggle_paid_action(self, request, queryset):
        for sale in queryset:
            toggle_paid(sale)
        self.message_user(request, f'Toggled payment status on {queryset.count()} sale(s).', messages.SUCCESS)
    toggle_paid_action.short_description = 'Toggle paid flag'


@admin.register(CashFlowEntry)
class CashFlowEntryAdmin(admin.ModelAdmin):
    list_display = ['date', 'entry_type', 'category', 'description', 'amount', 'payment_method']
    list_filter = ['entry_type', 'payment_method', 'date']
    search_fields = ['description', 'category', 'reference_id']
    readonly_fields = ['created_by', 'created_at', 'updated_at']
    date_hierarchy = 'date'

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
