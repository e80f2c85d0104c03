"""
Users Domain - Permission embed.

Every permission (parts, users, ...) is stored as one integer. Each operation
of a permission occupies two bits at a fixed even offset:

    00 - inherit from the group (or parent group)
    01 - allow
    10 - disallow
"""

from __future__ import annotations
from typing import Dict, Mapping, Optional

from domain.shared.exceptions import ValidationException


INHERIT = 0b00
ALLOW = 0b01
DISALLOW = 0b10

BITS_PER_OPERATION = 2
MAX_BIT_OFFSET = 30

_STRUCTURAL_OPERATIONS = {
    "read": 0,
    "edit": 2,
    "create": 4,
    "move": 6,
    "delete": 8,
}

# permission -> operation -> bit offset
PERMISSION_STRUCTURE: Dict[str, Dict[str, int]] = {
    "system": {
        "server_infos": 0,
        "config": 2,
        "show_logs": 4,
    },
    "groups": {
        **_STRUCTURAL_OPERATIONS,
        "edit_permissions": 10,
    },
    "users": {
        "read": 0,
        "create": 2,
        "delete": 4,
        "edit_username": 6,
        "move": 8,
        "edit_infos": 10,
        "edit_permissions": 12,
        "set_password": 14,
    },
    "self": {
        "edit_infos": 0,
        "edit_username": 2,
        "show_permissions": 4,
    },
    "parts": {
        **_STRUCTURAL_OPERATIONS,
        "show_history": 10,
    },
    "categories": dict(_STRUCTURAL_OPERATIONS),
    "storelocations": dict(_STRUCTURAL_OPERATIONS),
    "footprints": dict(_STRUCTURAL_OPERATIONS),
    "manufacturers": dict(_STRUCTURAL_OPERATIONS),
    "suppliers": dict(_STRUCTURAL_OPERATIONS),
    "tools": {
        "import": 0,
        "labels": 2,
        "statistics": 4,
    },
    "database": {
        "see_status": 0,
        "update_db": 2,
        "read_db_settings": 4,
        "write_db_settings": 6,
    },
}


def check_permission_name(permission: str) -> None:
    if permission not in PERMISSION_STRUCTURE:
        raise ValidationException(
            f"Unknown permission '{permission}'", "permission", permission
        )


def check_bit_offset(bit_n: int) -> None:
    if not isinstance(bit_n, int) or bit_n < 0 or bit_n > MAX_BIT_OFFSET or bit_n % 2:
        raise ValidationException(
            f"Bit offset must be an even number between 0 and {MAX_BIT_OFFSET}",
            "bit_n",
            bit_n
        )


def value_to_bits(value: Optional[bool]) -> int:
    if value is None:
        return INHERIT
    return ALLOW if value else DISALLOW


def bits_to_value(bits: int) -> Optional[bool]:
    if bits == ALLOW:
        return True
    if bits == DISALLOW:
        return False
    # 0b11 is not a valid state and is treated like inherit
    return None


class PermissionsEmbed:
    """
    Permission values of a user or group.

    Values for permissions that were never set are 0 (everything inherits).
    """

    def __init__(self, values: Optional[Mapping[str, int]] = None):
        self._values: Dict[str, int] = {}
        if values:
            for permission, raw in values.items():
                self.set_raw_permission_value(permission, raw)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PermissionsEmbed):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"<PermissionsEmbed {self.as_dict()}>"

    # =========================================================================
    # RAW ACCESS
    # =========================================================================

    def get_raw_permission_value(self, permission: str) -> int:
        check_permission_name(permission)
        return self._values.get(permission, 0)

    def set_raw_permission_value(self, permission: str, value: int) -> PermissionsEmbed:
        check_permission_name(permission)
        if not isinstance(value, int) or value < 0 or value >= 1 << (MAX_BIT_OFFSET + BITS_PER_OPERATION):
            raise ValidationException(
                f"Invalid raw value for permission '{permission}'", permission, value
            )
        self._values[permission] = value
        return self

    def get_bit_value(self, permission: str, bit_n: int) -> int:
        """Get the two-bit value stored at offset bit_n."""
        check_bit_offset(bit_n)
        return (self.get_raw_permission_value(permission) >> bit_n) & 0b11

    # =========================================================================
    # TRI-STATE ACCESS
    # =========================================================================

    def get_permission_value(self, permission: str, bit_n: int) -> Optional[bool]:
        """
        Get the value of an operation.

        Returns True if allowed, False if disallowed and None if inherited.
        """
        return bits_to_value(self.get_bit_value(permission, bit_n))

    def set_permission_value(
        self,
        permission: str,
        bit_n: int,
        value: Optional[bool]
    ) -> PermissionsEmbed:
        """Set an operation to allow (True), disallow (False) or inherit (None)."""
        check_bit_offset(bit_n)
        raw = self.get_raw_permission_value(permission)
        raw &= ~(0b11 << bit_n)
        raw |= value_to_bits(value) << bit_n
        self._values[permission] = raw
        return self

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def as_dict(self) -> Dict[str, int]:
        """Get non-zero raw values keyed by permission name."""
        return {name: raw for name, raw in sorted(self._values.items()) if raw}

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, int]]) -> PermissionsEmbed:
        return cls(values or {})
