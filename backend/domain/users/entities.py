"""
Users Domain - Entities.

User is the identity that logs in and owns permissions.
Group is a structural element, so groups can be nested and permissions
can be inherited from parent groups.
"""

from __future__ import annotations
from dataclasses import InitVar, dataclass, field
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.base_entity import NamedDBElement
from domain.shared.events import UserPasswordChanged
from domain.shared.exceptions import ValidationException
from domain.structure.entities import StructuralDBElement

from .permissions import PermissionsEmbed


ROLE_USER = "ROLE_USER"

NAME_MAX_LENGTH = 180
PROFILE_FIELD_MAX_LENGTH = 255

PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "department",
    "email",
    "language",
    "timezone",
    "theme",
)


@dataclass(eq=False, repr=False)
class Group(StructuralDBElement):
    """
    Group of users.

    Users of a group inherit the group's permissions (and those of its
    parent groups) for every operation they do not set themselves.
    """

    ID_PREFIX = "G"

    permissions: PermissionsEmbed = field(default_factory=PermissionsEmbed)
    _users: List[User] = field(default_factory=list, init=False)

    @property
    def users(self) -> List[User]:
        return self._users.copy()


@dataclass(eq=False, repr=False)
class User(AggregateRoot, NamedDBElement):
    """
    User that can log in and has permissions.

    Besides the login data this entity stores some information about the
    user like the names, email address and profile preferences.
    """

    ID_PREFIX = "U"

    # The hashed password, empty if the user can not log in with a password
    password: str = ""

    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    department: Optional[str] = ""
    email: Optional[str] = ""

    # Profile preferences
    language: Optional[str] = ""
    timezone: Optional[str] = ""
    theme: Optional[str] = ""

    group: Optional[Group] = None
    permissions: PermissionsEmbed = field(default_factory=PermissionsEmbed)

    # False when restoring already stored users
    validate: InitVar[bool] = True

    def __post_init__(self, validate: bool = True):
        super().__post_init__()
        if validate:
            self._check_name(self.name)
            for name in PROFILE_FIELDS:
                validate_profile_field(name, getattr(self, name))
        group = self.group
        self.group = None
        if group is not None:
            self.set_group(group)

    # =========================================================================
    # AUTHENTICATION
    # =========================================================================

    @property
    def username(self) -> str:
        """A visual identifier that represents this user."""
        return str(self.name)

    @property
    def roles(self) -> List[str]:
        """Every user has at least ROLE_USER."""
        roles = [ROLE_USER]
        return list(dict.fromkeys(roles))

    def set_roles(self, roles: List[str]) -> User:
        # Roles are derived from permissions, explicit roles are not stored
        return self

    def get_password(self) -> str:
        """Get the password hash."""
        return str(self.password or "")

    def set_password(self, password_hash: str) -> User:
        """Set the password hash (not the plain password)."""
        self.password = password_hash
        self.touch()
        self.add_domain_event(UserPasswordChanged(user_id=self.id))
        return self

    @property
    def salt(self) -> None:
        # The hash contains its own salt
        return None

    def erase_credentials(self) -> None:
        pass

    # =========================================================================
    # PROFILE
    # =========================================================================

    @property
    def full_name(self) -> str:
        return self.get_full_name()

    def get_full_name(self, including_username: bool = False) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        full_name = " ".join(parts)
        if not full_name:
            return self.username
        if including_username:
            return f"{full_name} (@{self.username})"
        return full_name

    def rename(self, name: str) -> None:
        self._check_name(name)
        super().rename(name)

    def update_profile(self, **fields: Any) -> List[str]:
        """
        Update the given profile fields.

        Returns the names of the fields that actually changed.
        """
        unknown = set(fields) - set(PROFILE_FIELDS)
        if unknown:
            raise ValidationException(
                f"Unknown profile fields: {', '.join(sorted(unknown))}",
                "profile",
                sorted(unknown)
            )
        for name, value in fields.items():
            validate_profile_field(name, value)

        changes = []
        for name, value in fields.items():
            if getattr(self, name) != value:
                setattr(self, name, value)
                changes.append(name)
        if changes:
            self.touch()
        return changes

    def profile(self) -> Dict[str, Optional[str]]:
        return {name: getattr(self, name) for name in PROFILE_FIELDS}

    # =========================================================================
    # GROUP
    # =========================================================================

    def set_group(self, group: Optional[Group]) -> User:
        if self.group is not None:
            self.group._users = [u for u in self.group._users if u is not self]
        self.group = group
        if group is not None:
            group._users.append(self)
        return self

    @staticmethod
    def _check_name(name: str) -> None:
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationException(
                f"Username must not be longer than {NAME_MAX_LENGTH} characters",
                "name",
                name
            )


def validate_profile_field(name: str, value: Optional[str]) -> None:
    """Raise ValidationException if value is not acceptable for the profile field."""
    if value is None or value == "":
        return
    if not isinstance(value, str):
        raise ValidationException(f"{name} must be a string", name, value)
    if len(value) > PROFILE_FIELD_MAX_LENGTH:
        raise ValidationException(
            f"{name} must not be longer than {PROFILE_FIELD_MAX_LENGTH} characters",
            name,
            value
        )
    if name == "email":
        try:
            validate_email(value)
        except DjangoValidationError:
            raise ValidationException(f"Invalid email: {value}", name, value)
    if name == "timezone":
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValidationException(f"Unknown timezone: {value}", name, value)
