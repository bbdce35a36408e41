"""
Data‑access contracts consumed by the service layer.

``CrudDataService`` is generic over the entity type ``T`` and its
identifier type ``ID``.  Implementations perform the raw storage
access and are responsible for raising ``NotFoundError`` and
``DuplicationError``; services never construct these themselves.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from campus_coffee_api.app.schemas.pos import Pos

T = TypeVar("T")
ID = TypeVar("ID")


class CrudDataService(ABC, Generic[T, ID]):
    """Storage operations every entity type supports."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return all stored entities."""

    @abstractmethod
    def get_by_id(self, entity_id: ID) -> T:
        """Return the entity with ``entity_id``.

        Raises ``NotFoundError`` if no such entity exists.
        """

    @abstractmethod
    def upsert(self, entity: T) -> T:
        """Create ``entity`` if it has no id, otherwise update it.

        Returns the stored entity.  Raises ``DuplicationError`` if a
        uniqueness constraint would be violated.
        """

    @abstractmethod
    def delete(self, entity_id: ID) -> None:
        """Remove the entity with ``entity_id``.

        Raises ``NotFoundError`` if no such entity exists.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove all entities."""


class PosDataService(CrudDataService[Pos, int]):
    """Storage operations for points of sale."""

    @abstractmethod
    def get_by_name(self, name: str) -> Pos:
        """Return the POS called ``name``.

        Raises ``NotFoundError`` if no POS has that name.
        """
