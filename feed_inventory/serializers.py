from rest_framework import serializers

from .models import Food, StockMovement


class FoodSerializer(serializers.ModelSerializer):
    """
    Feed item. Stock is read-only here: it only moves through stock movements.
    An opening balance can be given once, at creation, and is recorded as an
    entry movement by the view.
    """
    opening_stock = serializers.DecimalField(
        max_digits=12, decimal_places=3, min_value=0, required=False, write_only=True
    )
    is_low_stock = serializers.BooleanField(read_only=True)
    stock_value = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)

    class Meta:
        model = Food
        fields = [
            'id', 'name', 'unit', 'current_stock', 'opening_stock', 'min_stock', 'unit_cost',
            'stock_value', 'is_low_stock', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'current_stock', 'created_at', 'updated_at']

    def validate_opening_stock(self, value):
        if self.instance is not None:
            raise serializers.ValidationError(
                "Stock can only be changed by recording a stock movement."
            )
        return value


class StockMovementSerializer(serializers.ModelSerializer):
    food_name = serializers.CharField(source='food.name', read_only=True)
    food_unit = serializers.CharField(source='food.unit', read_only=True)
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = StockMovement
        fields = [
            'id', 'food', 'food_name', 'food_unit', 'movement_type', 'quantity',
            'unit_cost', 'total_cost', 'balance_after', 'date', 'notes',
            'created_by', 'created_by_name', 'created_at'
        ]
        read_only_fields = fields

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None


class StockMovementCreateSerializer(serializers.Serializer):
    """Input for recording a movement; persistence is done by the ledger service."""
    food = serializers.UUIDField()
    movement_type = serializers.ChoiceField(choices=StockMovement.MovementType.choices)
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3)
    unit_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    date = serializers.DateField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be positive")
        return value

    def validate_unit_cost(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Unit cost cannot be negative")
        return value
