"""
Generic CRUD service.

``CrudService`` offers the same five operations for every entity type
and forwards each of them to an injected ``CrudDataService``.  The only
decision it makes on its own is in ``upsert``: an entity that already
carries an id must exist before it is written, so an update of a
missing record fails with ``NotFoundError`` instead of silently
creating a new one.

Errors raised by the data port are never caught here.  The service
holds no state besides its collaborators and may be shared freely.
"""

from __future__ import annotations

import logging
from typing import Generic, List, TypeVar

from campus_coffee_api.app.ports.data import CrudDataService

T = TypeVar("T")
ID = TypeVar("ID")

logger = logging.getLogger(__name__)


class CrudService(Generic[T, ID]):
    """CRUD facade over a data port for entities of ``entity_type``."""

    def __init__(self, entity_type: type[T], data_service: CrudDataService[T, ID]) -> None:
        self._entity_type = entity_type
        self._data_service = data_service

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    @property
    def data_service(self) -> CrudDataService[T, ID]:
        """The injected data port."""
        return self._data_service

    def clear(self) -> None:
        logger.debug("Clearing all %s entities", self._entity_type.__name__)
        self._data_service.clear()

    def get_all(self) -> List[T]:
        return self._data_service.get_all()

    def get_by_id(self, entity_id: ID) -> T:
        return self._data_service.get_by_id(entity_id)

    def upsert(self, entity: T) -> T:
        """Create ``entity`` if it has no id, otherwise update it.

        Raises ``NotFoundError`` if the id does not belong to a stored
        entity; the data port is not written to in that case.
        """
        entity_id = entity.id
        if entity_id is None:
            logger.debug("Creating new %s", self._entity_type.__name__)
        else:
            # Raises NotFoundError for unknown ids before anything is written.
            self.get_by_id(entity_id)
            logger.debug("Updating %s with ID %s", self._entity_type.__name__, entity_id)
        return self._data_service.upsert(entity)

    def delete(self, entity_id: ID) -> None:
        logger.debug("Deleting %s with ID %s", self._entity_type.__name__, entity_id)
        self._data_service.delete(entity_id)


def create_crud_service(entity_type: type[T], data_service: CrudDataService[T, ID]) -> CrudService[T, ID]:
    """Build a ``CrudService`` for ``entity_type`` backed by ``data_service``."""
    return CrudService(entity_type, data_service)
