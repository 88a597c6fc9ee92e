"""
Serializers for sales and the cash-flow ledger.
"""

from rest_framework import serializers

from .models import CashFlowEntry, Sale


class SaleSerializer(serializers.ModelSerializer):
    """
    Sale read/update serializer.

    The animal, sale date and paid flag are settlement fields: they are set
    when the sale is recorded and the flag changes only via toggle-paid.
    """
    animal_tag = serializers.CharField(source='animal.tag', read_only=True)
    animal_name = serializers.CharField(source='animal.name', read_only=True)
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Sale
        fields = [
            'id', 'animal', 'animal_tag', 'animal_name',
            'buyer_name', 'buyer_contact', 'sale_price', 'sale_date',
            'payment_date', 'paid', 'notes',
            'created_by', 'created_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'animal', 'sale_date', 'paid',
            'created_by', 'created_at', 'updated_at'
        ]

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None

    def validate_sale_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Sale price cannot be negative")
        return value


class SaleCreateSerializer(serializers.Serializer):
    """Input for recording a sale; persistence is done by the settlement service."""
    animal = serializers.UUIDField()
    buyer_name = serializers.CharField(max_length=200)
    buyer_contact = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    sale_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    sale_date = serializers.DateField(required=False)
    payment_date = serializers.DateField(required=False, allow_null=True)
    paid = serializers.BooleanField(required=False, default=False)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_sale_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Sale price cannot be negative")
        return value


class CashFlowEntrySerializer(serializers.ModelSerializer):
    entry_type_display = serializers.CharField(source='get_entry_type_display', read_only=True)
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = CashFlowEntry
        fields = [
            'id', 'entry_type', 'entry_type_display', 'category', 'description',
            'amount', 'date', 'payment_method', 'reference_id',
            'created_by', 'created_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None

    def validate_amount(self, value):
        if value < 0:
            raise serializers.ValidationError("Amount cannot be negative")
        return value
