"""
Serializers for Cost Tracking.
"""

from rest_framework import serializers

from .models import Cost


class CostSerializer(serializers.ModelSerializer):
    category_display = serializers.CharField(source='get_category_display', read_only=True)
    animal_tag = serializers.CharField(source='animal.tag', read_only=True, default=None)
    animal_name = serializers.CharField(source='animal.name', read_only=True, default=None)
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Cost
        fields = [
            'id', 'animal', 'animal_tag', 'animal_name',
            'category', 'category_display', 'description', 'amount', 'date',
            'created_by', 'created_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None

    def validate_amount(self, value):
        if value < 0:
            raise serializers.ValidationError("Amount cannot be negative")
        return value


class AnimalCostReportRowSerializer(serializers.Serializer):
    """One row of the monthly per-animal cost report."""
    animal_id = serializers.UUIDField()
    animal_name = serializers.CharField()
    tag = serializers.CharField()
    breed = serializers.CharField()
    entry_date = serializers.DateField()
    current_weight = serializers.DecimalField(max_digits=8, decimal_places=2)
    pen_name = serializers.CharField()
    food = serializers.DecimalField(max_digits=14, decimal_places=2)
    service = serializers.DecimalField(max_digits=14, decimal_places=2)
    pen = serializers.DecimalField(max_digits=14, decimal_places=2)
    veterinary = serializers.DecimalField(max_digits=14, decimal_places=2)
    other = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_cost = serializers.DecimalField(max_digits=14, decimal_places=2)
