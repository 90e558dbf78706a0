"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity in storage order."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def exists_by_id(self, id: int) -> bool:
        """Return ``True`` when an entity with ``id`` is stored."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist an entity.

        Inserts when the entity has no primary key yet, otherwise
        overwrites the stored row.  Returns the stored form.
        """

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Remove an entity by ID.  No-op when nothing matches."""
