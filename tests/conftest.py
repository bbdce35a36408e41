from typing import Dict, List, Optional, Tuple

import pytest

from campus_coffee_api.app.core.exceptions import DuplicationError, NotFoundError
from campus_coffee_api.app.ports.data import PosDataService
from campus_coffee_api.app.schemas.pos import CampusType, Pos, PosType


class FakePosDataService(PosDataService):
    """In-memory POS port that records every call made to it."""

    def __init__(self, entities: Optional[List[Pos]] = None) -> None:
        self.store: Dict[int, Pos] = {}
        self.calls: List[Tuple[str, tuple]] = []
        self.upsert_results: List[Pos] = []
        self._next_id = 1
        for entity in entities or []:
            self.store[entity.id] = entity
            self._next_id = max(self._next_id, entity.id + 1)

    def called(self, method: str) -> List[tuple]:
        return [args for name, args in self.calls if name == method]

    def get_all(self) -> List[Pos]:
        self.calls.append(("get_all", ()))
        return list(self.store.values())

    def get_by_id(self, entity_id: int) -> Pos:
        self.calls.append(("get_by_id", (entity_id,)))
        if entity_id not in self.store:
            raise NotFoundError(Pos, entity_id)
        return self.store[entity_id]

    def get_by_name(self, name: str) -> Pos:
        self.calls.append(("get_by_name", (name,)))
        for entity in self.store.values():
            if entity.name == name:
                return entity
        raise NotFoundError(Pos, name, field="name")

    def upsert(self, entity: Pos) -> Pos:
        self.calls.append(("upsert", (entity,)))
        for other in self.store.values():
            if other.name == entity.name and other.id != entity.id:
                raise DuplicationError(Pos, "name", entity.name)
        if entity.id is None:
            entity = entity.model_copy(update={"id": self._next_id})
            self._next_id += 1
        self.store[entity.id] = entity
        self.upsert_results.append(entity)
        return entity

    def delete(self, entity_id: int) -> None:
        self.calls.append(("delete", (entity_id,)))
        if entity_id not in self.store:
            raise NotFoundError(Pos, entity_id)
        del self.store[entity_id]

    def clear(self) -> None:
        self.calls.append(("clear", ()))
        self.store.clear()


def make_pos(pos_id: Optional[int], name: str) -> Pos:
    return Pos(
        id=pos_id,
        name=name,
        description="Test Description",
        type=PosType.CAFE,
        campus=CampusType.ALTSTADT,
        street="Teststraße",
        house_number="1",
        postal_code=64823,
        city="Teststadt",
    )


@pytest.fixture
def fake_port() -> FakePosDataService:
    return FakePosDataService()


@pytest.fixture
def populated_port() -> FakePosDataService:
    return FakePosDataService([make_pos(1, "POS 1"), make_pos(2, "POS 2")])
