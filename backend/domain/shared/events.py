"""
Domain Events.

Domain events are records of significant business occurrences.
They are collected on the aggregate and drained by the repository after saving.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened in the domain.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


# =============================================================================
# STRUCTURE EVENTS
# =============================================================================

@dataclass(frozen=True)
class ElementMoved(DomainEvent):
    """Event raised when a structural element gets a new parent."""

    element_id: Optional[int] = None
    element_type: str = ""
    old_parent_id: Optional[int] = None
    new_parent_id: Optional[int] = None


# =============================================================================
# USER EVENTS
# =============================================================================

@dataclass(frozen=True)
class UserPasswordChanged(DomainEvent):
    """Event raised when the password hash of a user was replaced."""

    user_id: Optional[int] = None


@dataclass(frozen=True)
class PermissionsChanged(DomainEvent):
    """Event raised when a single permission operation was changed."""

    owner_type: str = ""
    owner_id: Optional[int] = None
    permission: str = ""
    operation: str = ""
    value: Optional[bool] = None
