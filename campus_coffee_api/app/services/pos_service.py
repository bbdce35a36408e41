"""
Service layer for points of sale.

``PosService`` is the generic ``CrudService`` bound to ``Pos`` plus a
lookup by the POS's unique name.
"""

from __future__ import annotations

from campus_coffee_api.app.ports.data import PosDataService
from campus_coffee_api.app.schemas.pos import Pos
from campus_coffee_api.app.services.crud_service import CrudService


class PosService(CrudService[Pos, int]):
    """CRUD operations and name lookup for POS."""

    def __init__(self, data_service: PosDataService) -> None:
        super().__init__(Pos, data_service)

    @property
    def data_service(self) -> PosDataService:
        return self._data_service

    def get_by_name(self, name: str) -> Pos:
        """Return the POS called ``name``; raises ``NotFoundError`` if absent."""
        return self._data_service.get_by_name(name)


def create_pos_service(data_service: PosDataService) -> PosService:
    return PosService(data_service)
