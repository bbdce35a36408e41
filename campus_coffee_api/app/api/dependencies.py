"""
API dependencies.

Builds the services handed to endpoint functions.  Tests replace
``get_pos_service`` through ``app.dependency_overrides`` to run the
routes against an in‑memory data port.
"""

from functools import lru_cache

from campus_coffee_api.app.data.pos_data_service import SqlitePosDataService
from campus_coffee_api.app.services.pos_service import PosService, create_pos_service


@lru_cache()
def get_pos_service() -> PosService:
    """Return the shared POS service backed by SQLite."""
    return create_pos_service(SqlitePosDataService())
