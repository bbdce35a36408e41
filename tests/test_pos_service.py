"""Tests for campus_coffee_api/app/services/pos_service.py."""

import pytest

from campus_coffee_api.app.core.exceptions import NotFoundError
from campus_coffee_api.app.schemas.pos import Pos
from campus_coffee_api.app.services.pos_service import PosService, create_pos_service

from .conftest import make_pos


def test_create_pos_service_binds_pos(populated_port):
    service = create_pos_service(populated_port)

    assert isinstance(service, PosService)
    assert service.entity_type is Pos
    assert service.data_service is populated_port


def test_get_by_name_returns_matching_pos(populated_port):
    service = create_pos_service(populated_port)

    assert service.get_by_name("POS 2") == make_pos(2, "POS 2")
    assert populated_port.called("get_by_name") == [("POS 2",)]


def test_get_by_name_propagates_not_found(populated_port):
    service = create_pos_service(populated_port)

    with pytest.raises(NotFoundError, match="Pos with name Unknown does not exist."):
        service.get_by_name("Unknown")


def test_update_through_pos_service_keeps_existence_check(populated_port):
    service = create_pos_service(populated_port)

    with pytest.raises(NotFoundError):
        service.upsert(make_pos(42, "Ghost"))

    assert populated_port.called("upsert") == []
