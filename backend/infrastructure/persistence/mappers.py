"""
Mappers between ORM rows and domain objects.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Type

from domain.shared.exceptions import InvalidOperationException
from domain.structure import entities as structure
from domain.users import entities as users
from domain.users.permissions import PermissionsEmbed

from . import models


STRUCTURAL_MODELS = {
    structure.Category: models.Category,
    structure.Storelocation: models.Storelocation,
    structure.Footprint: models.Footprint,
    structure.Manufacturer: models.Manufacturer,
    structure.Supplier: models.Supplier,
    users.Group: models.Group,
}

# Fields that only some structural kinds have
EXTRA_FIELDS = {
    structure.Storelocation: ['is_full'],
    structure.Manufacturer: ['website'],
    structure.Supplier: ['website'],
}


def model_for(domain_cls: Type[structure.StructuralDBElement]):
    try:
        return STRUCTURAL_MODELS[domain_cls]
    except KeyError:
        raise TypeError(f"{domain_cls.__name__} is not a persisted structural element")


# =============================================================================
# STRUCTURAL ELEMENTS
# =============================================================================

def build_forest(
    rows: Iterable[models.StructuralModel],
    domain_cls: Type[structure.StructuralDBElement],
) -> List[structure.StructuralDBElement]:
    """
    Convert rows of one table into domain trees.

    Children keep the order of rows, so pass rows sorted the way
    the children should be ordered.
    """
    by_parent: Dict[Optional[int], list] = defaultdict(list)
    for row in rows:
        by_parent[row.parent_id].append(row)

    def convert(row, parent):
        element = structural_to_domain(row, domain_cls, parent)
        for child in by_parent.get(row.id, []):
            convert(child, element)
        return element

    return [convert(row, None) for row in by_parent.get(None, [])]


def structural_to_domain(row, domain_cls, parent=None):
    kwargs = {
        'id': row.id,
        'name': row.name,
        'comment': row.comment or '',
        'created_at': row.created_at,
        'updated_at': row.updated_at,
        'parent': parent,
    }
    for field in EXTRA_FIELDS.get(domain_cls, []):
        kwargs[field] = getattr(row, field)
    if domain_cls is users.Group:
        kwargs['permissions'] = PermissionsEmbed.from_dict(row.permissions)
    return domain_cls(**kwargs)


def apply_structural(element: structure.StructuralDBElement, row) -> None:
    """Copy the state of a domain element onto a row."""
    row.name = element.name
    row.comment = element.comment
    row.parent_id = _saved_id(element.parent)
    for field in EXTRA_FIELDS.get(type(element), []):
        setattr(row, field, getattr(element, field))
    if isinstance(element, users.Group):
        row.permissions = element.permissions.as_dict()


# =============================================================================
# USERS
# =============================================================================

def user_to_domain(row: models.User, group: Optional[users.Group] = None) -> users.User:
    """Convert a user row; group must be the already loaded domain group."""
    return users.User(
        id=row.id,
        name=row.name,
        created_at=row.created_at,
        updated_at=row.updated_at,
        password=row.password or "",
        first_name=row.first_name,
        last_name=row.last_name,
        department=row.department,
        email=row.email,
        language=row.language,
        timezone=row.timezone,
        theme=row.theme,
        group=group,
        permissions=PermissionsEmbed.from_dict(row.permissions),
        validate=False,
    )


def apply_user(user: users.User, row: models.User) -> None:
    row.name = user.name
    row.password = user.get_password()
    for field in users.PROFILE_FIELDS:
        setattr(row, field, getattr(user, field))
    row.group_id = _saved_id(user.group)
    row.permissions = user.permissions.as_dict()


def _saved_id(element) -> Optional[int]:
    if element is None:
        return None
    if element.id is None:
        raise InvalidOperationException(
            f"{element.__class__.__name__} '{element.name}' must be saved first",
            current_state="unsaved"
        )
    return element.id
