"""
Users Domain - Repository Interfaces (Ports).
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import User


class UserRepository(ABC):
    """Repository interface for User."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[User]:
        """Get user by login name."""
        pass

    @abstractmethod
    def list_all(self) -> List[User]:
        """Get all users ordered by name."""
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """Save (create or update) a user."""
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check if a user with this login name exists."""
        pass
