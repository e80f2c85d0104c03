"""
Django implementations of the domain repositories.
"""

import logging
from typing import List, Optional, Type

from django.db import transaction

from domain.shared.exceptions import (
    EntityAlreadyExistsException,
    EntityNotFoundException,
    InvalidOperationException,
)
from domain.structure.entities import StructuralDBElement
from domain.structure.repositories import StructuralElementRepository
from domain.users.entities import Group, User
from domain.users.repositories import UserRepository

from . import models
from .mappers import (
    apply_structural,
    apply_user,
    build_forest,
    model_for,
    user_to_domain,
)

logger = logging.getLogger(__name__)


def dispatch_events(aggregate) -> None:
    """Log and clear the pending domain events of a saved aggregate."""
    for event in aggregate.clear_domain_events():
        logger.info(f"{event.event_type} on {aggregate!r}: {event}")


class DjangoStructuralElementRepository(StructuralElementRepository):
    """
    Repository for one kind of structural element.

    The whole table is read with a single query and the trees are linked
    in memory, so children are always pre-loaded.
    """

    def __init__(self, domain_cls: Type[StructuralDBElement]):
        self.domain_cls = domain_cls
        self.model = model_for(domain_cls)

    def get_roots(self) -> List[StructuralDBElement]:
        rows = self.model.objects.order_by('name', 'id')
        return build_forest(rows, self.domain_cls)

    def get_by_id(self, element_id: int) -> StructuralDBElement:
        for element in self.get_flat():
            if element.id == element_id:
                return element
        raise EntityNotFoundException(self.domain_cls.__name__, element_id)

    def find_by_name(self, name: str) -> List[StructuralDBElement]:
        return [element for element in self.get_flat() if element.name == name]

    @transaction.atomic
    def save(self, element: StructuralDBElement) -> StructuralDBElement:
        if not isinstance(element, self.domain_cls):
            raise TypeError(
                f"Can not save {type(element).__name__} in {self.domain_cls.__name__} repository"
            )
        row = self._get_row(element.id) if element.id is not None else self.model()
        apply_structural(element, row)
        row.save()

        element.id = row.id
        element.created_at = row.created_at
        element.updated_at = row.updated_at
        dispatch_events(element)
        return element

    @transaction.atomic
    def delete(self, element: StructuralDBElement) -> None:
        if element.id is None:
            raise InvalidOperationException(
                f"{self.domain_cls.__name__} '{element.name}' was never saved",
                current_state="unsaved"
            )
        row = self._get_row(element.id)
        if row.children.exists():
            raise InvalidOperationException(
                f"{self.domain_cls.__name__} '{element.name}' has subelements and can not be deleted",
                current_state="has_children"
            )
        row.delete()
        logger.info(f"Deleted {element!r} ({element.full_path()})")
        if element.parent is not None:
            element.set_parent(None)
            element.clear_domain_events()
        element.id = None

    def _get_row(self, element_id: int):
        try:
            return self.model.objects.get(pk=element_id)
        except self.model.DoesNotExist:
            raise EntityNotFoundException(self.domain_cls.__name__, element_id)


class DjangoUserRepository(UserRepository):
    """Repository for users, groups are resolved with their parent chain."""

    def __init__(self, groups: Optional[DjangoStructuralElementRepository] = None):
        self.groups = groups or DjangoStructuralElementRepository(Group)

    def get_by_id(self, user_id: int) -> User:
        try:
            row = models.User.objects.get(pk=user_id)
        except models.User.DoesNotExist:
            raise EntityNotFoundException("User", user_id)
        return self._to_domain(row)

    def get_by_name(self, name: str) -> Optional[User]:
        row = models.User.objects.filter(name=name).first()
        if row is None:
            return None
        return self._to_domain(row)

    def list_all(self) -> List[User]:
        groups = {group.id: group for group in self.groups.get_flat()}
        return [
            user_to_domain(row, groups.get(row.group_id))
            for row in models.User.objects.order_by('name')
        ]

    @transaction.atomic
    def save(self, user: User) -> User:
        duplicates = models.User.objects.filter(name=user.name)
        if user.id is not None:
            duplicates = duplicates.exclude(pk=user.id)
        if duplicates.exists():
            raise EntityAlreadyExistsException("User", user.name)

        if user.id is not None:
            try:
                row = models.User.objects.get(pk=user.id)
            except models.User.DoesNotExist:
                raise EntityNotFoundException("User", user.id)
        else:
            row = models.User()
        apply_user(user, row)
        row.save()

        user.id = row.id
        user.created_at = row.created_at
        user.updated_at = row.updated_at
        dispatch_events(user)
        return user

    def exists(self, name: str) -> bool:
        return models.User.objects.filter(name=name).exists()

    def _to_domain(self, row: models.User) -> User:
        group = None
        if row.group_id is not None:
            group = self.groups.get_by_id(row.group_id)
        return user_to_domain(row, group)
