import pytest

from domain.shared.exceptions import ValidationException
from domain.trees import build_tree_view
from presentation.api.v1.serializers import (
    ChangePasswordSerializer,
    StructuralElementListSerializer,
    StructuralElementSerializer,
    TreeViewNodeSerializer,
    UserProfileSerializer,
    UserSerializer,
)


class FakeAccounts:
    """Accounts service double that knows a single password."""

    def __init__(self, password):
        self.password = password
        self.changed = []

    def verify_password(self, user, password):
        return password == self.password

    def change_password(self, user, new_password, old_password=None):
        if len(new_password) < 6:
            raise ValidationException("Password too short", "password")
        self.changed.append((user.name, new_password))
        return user


class TestUserSerializer:

    def test_data(self, engineer):
        engineer.permissions.set_permission_value("parts", 0, True)

        data = UserSerializer(engineer).data

        assert data['id'] == 7
        assert data['id_string'] == "U000007"
        assert data['username'] == "ada"
        assert data['full_name'] == "Ada Lovelace"
        assert data['roles'] == ["ROLE_USER"]
        assert data['email'] == "ada@example.com"
        assert data['group'] == {'id': 2, 'name': "engineers", 'full_path': "staff → engineers"}
        assert data['permissions'] == {"parts": 1}

    def test_password_is_never_serialized(self, engineer):
        engineer.set_password("md5$x$y")
        data = UserSerializer(engineer).data
        assert 'password' not in data
        assert "md5$x$y" not in str(data)

    def test_without_group(self, engineer):
        engineer.set_group(None)
        assert UserSerializer(engineer).data['group'] is None


class TestUserProfileSerializer:

    def test_update(self, engineer):
        serializer = UserProfileSerializer(
            engineer, data={'department': "Analytics", 'timezone': "Europe/Paris"}, partial=True
        )

        assert serializer.is_valid(), serializer.errors
        serializer.save()

        assert engineer.department == "Analytics"
        assert engineer.timezone == "Europe/Paris"

    def test_uses_accounts_from_context(self, engineer):
        class Accounts:
            calls = []

            def update_profile(self, user, **fields):
                self.calls.append(fields)
                return list(fields)

        accounts = Accounts()
        serializer = UserProfileSerializer(
            engineer, data={'theme': "darkly"}, partial=True, context={'accounts': accounts}
        )
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        assert accounts.calls == [{'theme': "darkly"}]

    def test_invalid_email(self, engineer):
        serializer = UserProfileSerializer(engineer, data={'email': "nope"}, partial=True)
        assert not serializer.is_valid()
        assert 'email' in serializer.errors

    def test_invalid_timezone(self, engineer):
        serializer = UserProfileSerializer(engineer, data={'timezone': "Mars/Base"}, partial=True)
        assert not serializer.is_valid()
        assert 'timezone' in serializer.errors

    def test_too_long(self, engineer):
        serializer = UserProfileSerializer(engineer, data={'department': "d" * 256}, partial=True)
        assert not serializer.is_valid()
        assert 'department' in serializer.errors


class TestChangePasswordSerializer:

    def serializer(self, user, accounts, **data):
        return ChangePasswordSerializer(
            data=data, context={'user': user, 'accounts': accounts}
        )

    def test_change(self, engineer):
        accounts = FakeAccounts("secret1")
        serializer = self.serializer(
            engineer, accounts,
            old_password="secret1", new_password="secret2", new_password_confirm="secret2",
        )

        assert serializer.is_valid(), serializer.errors
        serializer.save()

        assert accounts.changed == [("ada", "secret2")]

    def test_wrong_old_password(self, engineer):
        serializer = self.serializer(
            engineer, FakeAccounts("secret1"),
            old_password="wrong!", new_password="secret2", new_password_confirm="secret2",
        )
        assert not serializer.is_valid()
        assert 'old_password' in serializer.errors

    def test_confirmation_mismatch(self, engineer):
        serializer = self.serializer(
            engineer, FakeAccounts("secret1"),
            old_password="secret1", new_password="secret2", new_password_confirm="secret3",
        )
        assert not serializer.is_valid()
        assert 'new_password_confirm' in serializer.errors

    def test_domain_error_becomes_validation_error(self, engineer):
        from rest_framework.exceptions import ValidationError

        serializer = self.serializer(
            engineer, FakeAccounts("secret1"),
            old_password="secret1", new_password="abc", new_password_confirm="abc",
        )
        assert serializer.is_valid(), serializer.errors
        with pytest.raises(ValidationError) as exc_info:
            serializer.save()
        assert 'password' in exc_info.value.detail


class TestStructureSerializers:

    def test_nested_children(self, categories):
        data = StructuralElementSerializer(categories.electronics).data

        assert data['id_string'] == "C000001"
        assert data['level'] == 0
        assert data['parent_id'] is None
        assert [child['name'] for child in data['children']] == ["Passives", "Semiconductors"]

        passives = data['children'][0]
        assert passives['parent_id'] == 1
        assert passives['full_path'] == "Electronics → Passives"
        assert [child['name'] for child in passives['children']] == ["Capacitors", "Resistors"]
        assert passives['children'][0]['children'] == []

    def test_list(self, categories):
        data = StructuralElementListSerializer(list(categories.electronics.descendants()), many=True).data
        assert [item['full_path'] for item in data] == [
            "Electronics → Passives",
            "Electronics → Passives → Capacitors",
            "Electronics → Passives → Resistors",
            "Electronics → Semiconductors",
        ]
        assert 'children' not in data[0]

    def test_tree_view(self, categories):
        data = TreeViewNodeSerializer(build_tree_view(categories.roots), many=True).data

        assert data[0]['text'] == "Electronics"
        assert [node['text'] for node in data[0]['nodes']] == ["Passives", "Semiconductors"]
        assert 'nodes' not in data[0]['nodes'][1]
        assert data[1] == {'text': "Mechanics", 'id': 6}
