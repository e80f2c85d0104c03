"""
Base Aggregate Root mixin.

Aggregates are clusters of domain objects that can be treated as a single unit.
The Aggregate Root is the only entry point to the aggregate.
"""

from __future__ import annotations
from typing import List

from .events import DomainEvent


class AggregateRoot:
    """
    Mixin for aggregate roots.

    Collects domain events for significant state changes. The events are
    dispatched (logged) by the repository once the aggregate was persisted.
    """

    def _pending_events(self) -> List[DomainEvent]:
        events = self.__dict__.get("_domain_events")
        if events is None:
            events = []
            self.__dict__["_domain_events"] = events
        return events

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to be dispatched after persistence."""
        self._pending_events().append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """Clear and return all pending domain events."""
        events = self._pending_events()
        drained = events.copy()
        events.clear()
        return drained

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Get all pending domain events."""
        return self._pending_events().copy()
