"""
Base ORM Models and Mixins.

Provides common functionality for all models:
- Timestamps (created_at, updated_at)
- Name and comment
- Self-referencing parent for tree structures
- Permission storage
- History tracking
"""

from django.db import models
from simple_history.models import HistoricalRecords


class TimeStampedMixin(models.Model):
    """Mixin for created_at and updated_at timestamps."""

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created at"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Last modified"
    )

    class Meta:
        abstract = True


class NamedModel(TimeStampedMixin):
    """Element with a name and a free text comment."""

    name = models.CharField(
        max_length=255,
        verbose_name="Name"
    )
    comment = models.TextField(
        blank=True,
        default='',
        verbose_name="Comment"
    )

    class Meta:
        abstract = True

    def __str__(self):
        return self.name


class StructuralModel(NamedModel):
    """
    Base model for tree structured elements.

    An element with children can not be deleted.
    Uses django-simple-history to track all changes.
    """

    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
        verbose_name="Parent element"
    )

    history = HistoricalRecords(inherit=True)

    class Meta:
        abstract = True
        ordering = ['name', 'id']


class PermissionsHolderMixin(models.Model):
    """
    Mixin for permission storage.

    Raw permission values keyed by permission name,
    see domain.users.permissions for the bit layout.
    """

    permissions = models.JSONField(
        default=dict,
        blank=True,
        verbose_name="Permissions"
    )

    class Meta:
        abstract = True
