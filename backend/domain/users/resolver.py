"""
Users Domain - Permission resolution.

An operation that is set to inherit on the user is looked up on the user's
group, then on each parent group. If nothing along the way decides, the
operation is disallowed.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Union

from domain.shared.events import PermissionsChanged
from domain.shared.exceptions import ValidationException

from .entities import Group, User
from .permissions import PERMISSION_STRUCTURE, check_permission_name

logger = logging.getLogger(__name__)

PermissionHolder = Union[User, Group]


class PermissionResolver:
    """Resolve permission operations by name, see PERMISSION_STRUCTURE."""

    def list_permissions(self) -> List[str]:
        return list(PERMISSION_STRUCTURE)

    def list_operations(self, permission: str) -> List[str]:
        check_permission_name(permission)
        return list(PERMISSION_STRUCTURE[permission])

    def get_bit(self, permission: str, operation: str) -> int:
        """Get the bit offset of an operation."""
        operations = PERMISSION_STRUCTURE.get(permission)
        if operations is None:
            raise ValidationException(
                f"Unknown permission '{permission}'", "permission", permission
            )
        if operation not in operations:
            raise ValidationException(
                f"Unknown operation '{operation}' for permission '{permission}'",
                "operation",
                operation
            )
        return operations[operation]

    def dont_inherit(
        self,
        holder: PermissionHolder,
        permission: str,
        operation: str
    ) -> Optional[bool]:
        """Get the value set directly on holder (None if inherited)."""
        bit = self.get_bit(permission, operation)
        return holder.permissions.get_permission_value(permission, bit)

    def inherit(self, user: User, permission: str, operation: str) -> Optional[bool]:
        """Get the value for user, following the group hierarchy upwards."""
        value = self.dont_inherit(user, permission, operation)
        if value is not None:
            return value

        group = user.group
        while group is not None:
            value = self.dont_inherit(group, permission, operation)
            if value is not None:
                return value
            group = group.parent
        return None

    def is_allowed(self, user: User, permission: str, operation: str) -> bool:
        allowed = self.inherit(user, permission, operation)
        if allowed is None:
            logger.debug(
                f"{user.username}: {permission}.{operation} inherits everywhere, disallowing"
            )
            return False
        return allowed

    def set(
        self,
        holder: PermissionHolder,
        permission: str,
        operation: str,
        value: Optional[bool]
    ) -> None:
        """Set an operation on holder by name."""
        bit = self.get_bit(permission, operation)
        if holder.permissions.get_permission_value(permission, bit) == value:
            return
        holder.permissions.set_permission_value(permission, bit, value)
        holder.touch()
        holder.add_domain_event(PermissionsChanged(
            owner_type=holder.__class__.__name__,
            owner_id=holder.id,
            permission=permission,
            operation=operation,
            value=value,
        ))

    def set_all_operations(
        self,
        holder: PermissionHolder,
        value: Optional[bool],
        permissions: Optional[List[str]] = None,
    ) -> None:
        """Set every operation of the given (or all) permissions on holder."""
        for permission in permissions or self.list_permissions():
            for operation in self.list_operations(permission):
                self.set(holder, permission, operation, value)
