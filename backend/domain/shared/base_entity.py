"""
Base element classes for all domain entities.

Elements have identity and lifecycle.
Two persisted elements are equal if they are of the same class and share the same ID.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Optional

from .exceptions import ValidationException


@dataclass(eq=False)
class DBElement(ABC):
    """
    Base class for everything that is stored in the database.

    The ID is assigned by the database, so it stays None until the element
    was persisted for the first time. Unsaved elements are only equal to
    themselves and can not be hashed.
    """

    ID_PREFIX: ClassVar[str] = "E"

    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        # The hash must not change when the database assigns the ID
        if self.id is None:
            raise TypeError("Elements without an ID are unhashable")
        return hash((self.__class__.__name__, self.id))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"

    @property
    def id_string(self) -> str:
        """
        Return the ID as a string, e.g. P000014 for a part with ID 14.
        """
        return f"{self.ID_PREFIX}{self.id or 0:06d}"

    def touch(self) -> None:
        """Mark element as modified."""
        self.updated_at = datetime.utcnow()


@dataclass(eq=False)
class NamedDBElement(DBElement):
    """
    Element with a human readable name and an optional comment.
    """

    name: str = ""
    comment: str = ""

    def __post_init__(self):
        self.name = self._clean_name(self.name)

    def __str__(self) -> str:
        return self.name

    def rename(self, name: str) -> None:
        """Change the name of the element."""
        cleaned = self._clean_name(name)
        if cleaned != self.name:
            self.name = cleaned
            self.touch()

    @staticmethod
    def _clean_name(name: Optional[str]) -> str:
        if name is None or not str(name).strip():
            raise ValidationException("Name must not be blank", "name", name)
        return str(name).strip()
