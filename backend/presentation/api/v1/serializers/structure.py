"""
Structure Serializers.

Serializers for structural elements and tree views.
"""

from rest_framework import serializers

from .base import DBElementFieldsMixin, RecursiveSerializer


class StructuralElementSerializer(DBElementFieldsMixin, serializers.Serializer):
    """Structural element with all of its subelements nested."""

    name = serializers.CharField(read_only=True)
    comment = serializers.CharField(read_only=True)
    level = serializers.IntegerField(read_only=True)
    full_path = serializers.SerializerMethodField()
    parent_id = serializers.SerializerMethodField()
    children = RecursiveSerializer(many=True, read_only=True, source='subelements')

    def get_full_path(self, obj):
        return obj.full_path()

    def get_parent_id(self, obj):
        return obj.parent.id if obj.parent is not None else None


class StructuralElementListSerializer(DBElementFieldsMixin, serializers.Serializer):
    """Flat representation without children."""

    name = serializers.CharField(read_only=True)
    level = serializers.IntegerField(read_only=True)
    full_path = serializers.SerializerMethodField()

    def get_full_path(self, obj):
        return obj.full_path()


class TreeViewNodeSerializer(serializers.Serializer):
    """Node of a tree view, nodes without children have no 'nodes' key."""

    text = serializers.CharField(read_only=True)
    id = serializers.IntegerField(read_only=True, allow_null=True)
    nodes = RecursiveSerializer(many=True, read_only=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not data.get('nodes'):
            data.pop('nodes', None)
        return data
