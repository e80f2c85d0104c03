"""
Structure Domain - Repository Interfaces (Ports).

The actual implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from domain.shared.exceptions import EntityNotFoundException

from .entities import StructuralDBElement


T = TypeVar("T", bound=StructuralDBElement)


class StructuralElementRepository(ABC, Generic[T]):
    """Repository interface for one kind of structural element."""

    @abstractmethod
    def get_by_id(self, element_id: int) -> T:
        """Get element by ID (with its whole tree loaded)."""
        pass

    @abstractmethod
    def get_roots(self) -> List[T]:
        """Get all root elements with their children pre-loaded."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> List[T]:
        """Get all elements with the given name."""
        pass

    @abstractmethod
    def save(self, element: T) -> T:
        """Save (create or update) an element."""
        pass

    @abstractmethod
    def delete(self, element: T) -> None:
        """Delete an element without children."""
        pass

    def get_flat(self) -> List[T]:
        """Get all elements depth-first in tree order."""
        flat: List[T] = []
        for root in self.get_roots():
            flat.append(root)
            flat.extend(root.descendants())
        return flat

    def get_by_id_or_none(self, element_id: Optional[int]) -> Optional[T]:
        if element_id is None:
            return None
        try:
            return self.get_by_id(element_id)
        except EntityNotFoundException:
            return None
