"""
Repository interfaces.

Business code depends on these abstractions; the SQL-backed
implementations live next to them in this package.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from avid.domain.member import Member


class MemberRepository(ABC):
    """Persistence operations for Member entities."""

    @abstractmethod
    def add(self, member: Member) -> int:
        """Insert a new member. Returns the number of affected rows."""
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def update(self, member: Member) -> int:
        """Replace the stored member with the same username. Returns affected rows."""
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def remove(self, member: Member) -> int:
        """Delete the stored member with the same username. Returns affected rows."""
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def search(self, keyword: str, first: int = 0, max_results: Optional[int] = None) -> List[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def get_search_count(self, keyword: str) -> int:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_all(self, first: int = 0, max_results: Optional[int] = None) -> List[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")
