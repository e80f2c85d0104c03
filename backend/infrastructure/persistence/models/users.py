"""
User Models.

Custom user model and groups for authentication and authorization.
"""

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models
from simple_history.models import HistoricalRecords

from .base import PermissionsHolderMixin, StructuralModel, TimeStampedMixin


class Group(PermissionsHolderMixin, StructuralModel):
    """
    Group of users.

    Groups can be nested, users inherit permissions from their group
    and its parent groups.
    """

    class Meta(StructuralModel.Meta):
        db_table = 'groups'
        verbose_name = 'Group'
        verbose_name_plural = 'Groups'


class UserManager(BaseUserManager):
    """Manager with helpers to create users with hashed passwords."""

    use_in_migrations = True

    def create_user(self, name, password=None, **extra_fields):
        if not name:
            raise ValueError('The user name must be set')
        user = self.model(name=self.model.normalize_username(name), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, name, password=None, **extra_fields):
        from domain.users.permissions import PERMISSION_STRUCTURE, PermissionsEmbed

        # Superusers get every operation allowed directly
        permissions = PermissionsEmbed()
        for permission, operations in PERMISSION_STRUCTURE.items():
            for bit in operations.values():
                permissions.set_permission_value(permission, bit, True)
        extra_fields.setdefault('permissions', permissions.as_dict())
        return self.create_user(name, password, **extra_fields)


class User(PermissionsHolderMixin, TimeStampedMixin, AbstractBaseUser):
    """
    Custom User model.

    Users log in with their name. Profile preferences are stored in
    the config_* columns.
    """

    name = models.CharField(
        max_length=180,
        unique=True,
        verbose_name="Username"
    )
    # The hashed password
    password = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name="Password"
    )

    # Personal info
    first_name = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        verbose_name="First name"
    )
    last_name = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        verbose_name="Last name"
    )
    department = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        verbose_name="Department"
    )
    email = models.EmailField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        verbose_name="Email"
    )

    # Settings
    language = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        db_column='config_language',
        verbose_name="Language"
    )
    timezone = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        db_column='config_timezone',
        verbose_name="Timezone"
    )
    theme = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        default='',
        db_column='config_theme',
        verbose_name="Theme"
    )

    group = models.ForeignKey(
        Group,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='users',
        verbose_name="Group"
    )

    objects = UserManager()

    history = HistoricalRecords(excluded_fields=['password', 'last_login'])

    USERNAME_FIELD = 'name'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['name']

    def __str__(self):
        return self.name
