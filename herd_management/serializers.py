from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import Animal, Pen


class PenSerializer(serializers.ModelSerializer):
    current_occupancy = serializers.IntegerField(read_only=True)
    available_space = serializers.SerializerMethodField()

    class Meta:
        model = Pen
        fields = [
            'id', 'name', 'capacity', 'current_occupancy', 'available_space',
            'daily_cost', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_available_space(self, obj):
        # Negative when the pen holds more than its nominal capacity
        return obj.capacity - obj.current_occupancy


class AnimalSerializer(serializers.ModelSerializer):
    """
    Animal registration and editing.

    Status and exit date are read-only here; they change through the status
    endpoint or through a sale.
    """
    pen_name = serializers.CharField(source='pen.name', read_only=True, default=None)
    father_tag = serializers.CharField(source='father.tag', read_only=True, default=None)
    mother_tag = serializers.CharField(source='mother.tag', read_only=True, default=None)
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Animal
        fields = [
            'id', 'name', 'tag', 'breed', 'sex', 'castrated', 'photo_url',
            'father', 'father_tag', 'mother', 'mother_tag',
            'pen', 'pen_name',
            'entry_date', 'entry_weight', 'current_weight',
            'exit_date', 'status',
            'created_by', 'created_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'exit_date', 'status', 'created_by', 'created_at', 'updated_at'
        ]

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None

    def validate(self, attrs):
        # Run the model's parentage rules against the would-be state
        instance = self.instance or Animal()
        candidate = Animal(pk=instance.pk)
        candidate._state.adding = instance._state.adding
        for field in ('name', 'tag', 'sex', 'father', 'mother', 'entry_date', 'exit_date'):
            setattr(candidate, field, attrs.get(field, getattr(instance, field, None)))

        try:
            candidate.clean()
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.message_dict)

        return attrs


class AnimalStatusSerializer(serializers.Serializer):
    """Deaths only; a sale goes through /api/sales/ so a Sale row always backs `sold`."""
    status = serializers.ChoiceField(
        choices=[(Animal.Status.DEAD.value, Animal.Status.DEAD.label)],
        error_messages={
            'invalid_choice': '"{input}" cannot be set here; record sales through /api/sales/.'
        }
    )
    exit_date = serializers.DateField(required=False, allow_null=True)
