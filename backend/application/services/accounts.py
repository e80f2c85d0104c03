"""
Account Services.

Use cases around users: creating accounts, changing passwords and
profiles, checking permissions.
"""

import logging
from typing import Any, List, Optional

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password

from domain.shared.exceptions import (
    AuthorizationException,
    EntityAlreadyExistsException,
    ValidationException,
)
from domain.users.entities import Group, User
from domain.users.repositories import UserRepository
from domain.users.resolver import PermissionResolver

logger = logging.getLogger(__name__)


class UserAccountService:
    """Account management on top of a UserRepository."""

    def __init__(
        self,
        users: UserRepository,
        resolver: Optional[PermissionResolver] = None,
    ):
        self.users = users
        self.resolver = resolver or PermissionResolver()

    def create_user(
        self,
        name: str,
        password: Optional[str] = None,
        group: Optional[Group] = None,
        **profile: Any,
    ) -> User:
        """Create a user; profile preferences default to the configured values."""
        if self.users.exists(name):
            raise EntityAlreadyExistsException("User", name)

        profile.setdefault("language", settings.PARTDB_DEFAULT_LANGUAGE)
        profile.setdefault("timezone", settings.PARTDB_DEFAULT_TIMEZONE)
        profile.setdefault("theme", settings.PARTDB_DEFAULT_THEME)

        user = User(name=name, group=group)
        user.update_profile(**profile)
        if password is not None:
            user.set_password(self._hash(password))
        user = self.users.save(user)
        logger.info(f"Created user {user.username} ({user.id_string})")
        return user

    def change_password(
        self,
        user: User,
        new_password: str,
        old_password: Optional[str] = None,
    ) -> User:
        """
        Replace the password of user.

        If old_password is given it has to match the current password.
        """
        if old_password is not None and not self.verify_password(user, old_password):
            raise ValidationException("Old password is wrong", "old_password")
        user.set_password(self._hash(new_password))
        user.erase_credentials()
        return self.users.save(user)

    def verify_password(self, user: User, password: str) -> bool:
        encoded = user.get_password()
        if not encoded:
            return False
        return check_password(password, encoded)

    def update_profile(self, user: User, **fields: Any) -> List[str]:
        changes = user.update_profile(**fields)
        if changes:
            self.users.save(user)
            logger.info(f"Updated profile of {user.username}: {', '.join(changes)}")
        return changes

    def move_to_group(self, user: User, group: Optional[Group]) -> User:
        user.set_group(group)
        return self.users.save(user)

    # =========================================================================
    # PERMISSIONS
    # =========================================================================

    def is_allowed(self, user: User, permission: str, operation: str) -> bool:
        return self.resolver.is_allowed(user, permission, operation)

    def require(self, user: User, permission: str, operation: str) -> None:
        """Raise AuthorizationException unless user may do operation."""
        if not self.is_allowed(user, permission, operation):
            logger.warning(f"Denied {permission}.{operation} for {user.username}")
            raise AuthorizationException(f"{permission}.{operation}", user.username)

    def _hash(self, password: str) -> str:
        if len(password) < settings.PARTDB_MIN_PASSWORD_LENGTH:
            raise ValidationException(
                f"Password must be at least {settings.PARTDB_MIN_PASSWORD_LENGTH} characters long",
                "password"
            )
        return make_password(password)
