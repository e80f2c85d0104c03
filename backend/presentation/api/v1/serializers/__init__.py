"""
Serializers Package.

Serializers for Part-DB domain objects.
"""

from .base import DBElementFieldsMixin, RecursiveSerializer

from .users import (
    GroupMinimalSerializer,
    UserSerializer,
    UserProfileSerializer,
    ChangePasswordSerializer,
)

from .structure import (
    StructuralElementSerializer,
    StructuralElementListSerializer,
    TreeViewNodeSerializer,
)


__all__ = [
    # Base
    'DBElementFieldsMixin',
    'RecursiveSerializer',

    # Users
    'GroupMinimalSerializer',
    'UserSerializer',
    'UserProfileSerializer',
    'ChangePasswordSerializer',

    # Structure
    'StructuralElementSerializer',
    'StructuralElementListSerializer',
    'TreeViewNodeSerializer',
]
