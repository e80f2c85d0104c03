import pytest

from domain.shared.exceptions import ValidationException
from domain.users.permissions import (
    ALLOW,
    DISALLOW,
    INHERIT,
    PERMISSION_STRUCTURE,
    PermissionsEmbed,
)


class TestPermissionsEmbed:

    def test_new_embed_inherits_everything(self):
        permissions = PermissionsEmbed()
        assert permissions.get_raw_permission_value("parts") == 0
        assert permissions.get_permission_value("parts", 0) is None
        assert permissions.get_bit_value("parts", 0) == INHERIT

    def test_allow(self):
        permissions = PermissionsEmbed().set_permission_value("parts", 2, True)
        assert permissions.get_raw_permission_value("parts") == 0b0100
        assert permissions.get_bit_value("parts", 2) == ALLOW
        assert permissions.get_permission_value("parts", 2) is True

    def test_disallow(self):
        permissions = PermissionsEmbed().set_permission_value("parts", 2, False)
        assert permissions.get_raw_permission_value("parts") == 0b1000
        assert permissions.get_bit_value("parts", 2) == DISALLOW
        assert permissions.get_permission_value("parts", 2) is False

    def test_back_to_inherit(self):
        permissions = PermissionsEmbed().set_permission_value("parts", 2, True)
        permissions.set_permission_value("parts", 2, None)
        assert permissions.get_raw_permission_value("parts") == 0

    def test_operations_do_not_interfere(self):
        permissions = PermissionsEmbed()
        permissions.set_permission_value("parts", 0, True)
        permissions.set_permission_value("parts", 2, False)
        permissions.set_permission_value("parts", 0, False)

        assert permissions.get_raw_permission_value("parts") == 0b1010
        assert permissions.get_raw_permission_value("users") == 0

    def test_highest_offset(self):
        permissions = PermissionsEmbed().set_permission_value("database", 30, False)
        assert permissions.get_raw_permission_value("database") == 0b10 << 30
        assert permissions.get_permission_value("database", 30) is False

    def test_both_bits_set_counts_as_inherit(self):
        permissions = PermissionsEmbed().set_raw_permission_value("parts", 0b11)
        assert permissions.get_bit_value("parts", 0) == 0b11
        assert permissions.get_permission_value("parts", 0) is None

    def test_unknown_permission_raises(self):
        with pytest.raises(ValidationException):
            PermissionsEmbed().get_permission_value("coffee", 0)

    @pytest.mark.parametrize("bit_n", [1, -2, 32])
    def test_invalid_bit_offset_raises(self, bit_n):
        with pytest.raises(ValidationException):
            PermissionsEmbed().set_permission_value("parts", bit_n, True)

    @pytest.mark.parametrize("raw", [-1, 1 << 32])
    def test_invalid_raw_value_raises(self, raw):
        with pytest.raises(ValidationException):
            PermissionsEmbed().set_raw_permission_value("parts", raw)

    def test_as_dict_skips_untouched_permissions(self):
        permissions = PermissionsEmbed()
        permissions.set_permission_value("users", 0, True)
        permissions.set_permission_value("parts", 0, True)
        permissions.set_permission_value("parts", 0, None)
        assert permissions.as_dict() == {"users": 1}

    def test_from_dict(self):
        permissions = PermissionsEmbed.from_dict({"parts": 0b0101, "tools": 0b10})
        assert permissions.get_permission_value("parts", 2) is True
        assert permissions.get_permission_value("tools", 0) is False
        assert permissions == PermissionsEmbed({"tools": 2, "parts": 5})

    def test_from_dict_with_unknown_permission_raises(self):
        with pytest.raises(ValidationException):
            PermissionsEmbed.from_dict({"coffee": 1})


def test_every_offset_is_valid_and_unique():
    for permission, operations in PERMISSION_STRUCTURE.items():
        offsets = list(operations.values())
        assert len(offsets) == len(set(offsets)), permission
        assert all(offset % 2 == 0 and 0 <= offset <= 30 for offset in offsets), permission
