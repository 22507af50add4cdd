"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    def find_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete_by_id(self, id: Any) -> None:
        """Remove an entity by ID."""

    @abstractmethod
    def exists_by_id(self, id: Any) -> bool:
        """Return ``True`` when an entity with that ID is stored."""
