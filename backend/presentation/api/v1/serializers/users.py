"""
User Serializers.

Serializers for users, their profile and password changes.
"""

from rest_framework import serializers

from domain.shared.exceptions import ValidationException
from domain.users.entities import PROFILE_FIELD_MAX_LENGTH, validate_profile_field

from .base import DBElementFieldsMixin, as_drf_error


class GroupMinimalSerializer(serializers.Serializer):
    """Minimal group serializer for nested representations."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    full_path = serializers.SerializerMethodField()

    def get_full_path(self, obj):
        return obj.full_path()


class UserSerializer(DBElementFieldsMixin, serializers.Serializer):
    """Read-only representation of a user."""

    username = serializers.CharField(read_only=True)
    full_name = serializers.CharField(read_only=True)
    roles = serializers.ListField(child=serializers.CharField(), read_only=True)
    first_name = serializers.CharField(read_only=True, allow_null=True)
    last_name = serializers.CharField(read_only=True, allow_null=True)
    department = serializers.CharField(read_only=True, allow_null=True)
    email = serializers.CharField(read_only=True, allow_null=True)
    language = serializers.CharField(read_only=True, allow_null=True)
    timezone = serializers.CharField(read_only=True, allow_null=True)
    theme = serializers.CharField(read_only=True, allow_null=True)
    group = GroupMinimalSerializer(read_only=True, allow_null=True)
    permissions = serializers.SerializerMethodField()

    def get_permissions(self, obj):
        return obj.permissions.as_dict()


def _profile_field():
    return serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=PROFILE_FIELD_MAX_LENGTH,
    )


class UserProfileSerializer(serializers.Serializer):
    """
    Serializer for editing the profile of a user.

    Values are checked with the same rules the domain applies.
    """

    first_name = _profile_field()
    last_name = _profile_field()
    department = _profile_field()
    email = _profile_field()
    language = _profile_field()
    timezone = _profile_field()
    theme = _profile_field()

    def validate(self, attrs):
        for name, value in attrs.items():
            try:
                validate_profile_field(name, value)
            except ValidationException as exc:
                raise as_drf_error(exc)
        return attrs

    def update(self, instance, validated_data):
        accounts = self.context.get('accounts')
        if accounts is not None:
            accounts.update_profile(instance, **validated_data)
        else:
            instance.update_profile(**validated_data)
        return instance


class ChangePasswordSerializer(serializers.Serializer):
    """
    Serializer for password change.

    Needs the user and the account service in the context.
    """

    old_password = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )
    new_password = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )
    new_password_confirm = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )

    def validate_old_password(self, value):
        user = self.context['user']
        if not self.context['accounts'].verify_password(user, value):
            raise serializers.ValidationError('The current password is wrong.')
        return value

    def validate(self, attrs):
        if attrs['new_password'] != attrs['new_password_confirm']:
            raise serializers.ValidationError({
                'new_password_confirm': 'The passwords do not match.'
            })
        return attrs

    def save(self, **kwargs):
        try:
            return self.context['accounts'].change_password(
                self.context['user'],
                self.validated_data['new_password'],
            )
        except ValidationException as exc:
            raise as_drf_error(exc)
