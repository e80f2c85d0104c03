"""
Persistence Models Package.

All Django ORM models for Part-DB.
"""

# Base mixins
from .base import (
    TimeStampedMixin,
    NamedModel,
    StructuralModel,
    PermissionsHolderMixin,
)

# Structure models
from .structure import (
    Category,
    Storelocation,
    Footprint,
    Manufacturer,
    Supplier,
)

# User models
from .users import (
    Group,
    User,
    UserManager,
)


__all__ = [
    # Base
    'TimeStampedMixin',
    'NamedModel',
    'StructuralModel',
    'PermissionsHolderMixin',

    # Structure
    'Category',
    'Storelocation',
    'Footprint',
    'Manufacturer',
    'Supplier',

    # Users
    'Group',
    'User',
    'UserManager',
]
