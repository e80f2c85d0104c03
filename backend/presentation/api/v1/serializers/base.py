"""
Base Serializers.

Common serializer mixins and base classes for domain objects.
"""

from rest_framework import serializers

from domain.shared.exceptions import ValidationException


class DBElementFieldsMixin(serializers.Serializer):
    """Mixin for the fields every element has."""

    id = serializers.IntegerField(read_only=True)
    id_string = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class RecursiveSerializer(serializers.Serializer):
    """Serializer for recursive tree structures."""

    def to_representation(self, instance):
        serializer = self.parent.parent.__class__(instance, context=self.context)
        return serializer.data


def as_drf_error(exc: ValidationException) -> serializers.ValidationError:
    """Convert a domain validation error into a DRF one, keyed by field."""
    if exc.field:
        return serializers.ValidationError({exc.field: [exc.message]})
    return serializers.ValidationError(exc.message)
