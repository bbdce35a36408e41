"""
SQLite implementation of ``PosDataService``.

Every call opens its own connection and closes it before returning.
All queries use parameterized statements.  The ``pos.name`` column is
UNIQUE; violating it is reported as ``DuplicationError``.  Timestamps
are stored as ISO 8601 strings in UTC.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from enum import Enum
from typing import List

from campus_coffee_api.app.core.db import get_connection
from campus_coffee_api.app.core.exceptions import DuplicationError, NotFoundError
from campus_coffee_api.app.ports.data import PosDataService
from campus_coffee_api.app.schemas.pos import Pos

logger = logging.getLogger(__name__)

_COLUMNS = (
    "name",
    "description",
    "type",
    "campus",
    "street",
    "house_number",
    "postal_code",
    "city",
)

_INSERT_SQL = "INSERT INTO pos ({}, created_at, updated_at) VALUES ({}, ?, ?)".format(
    ", ".join(_COLUMNS), ", ".join("?" for _ in _COLUMNS)
)
_UPDATE_SQL = "UPDATE pos SET {}, updated_at = ? WHERE id = ?".format(
    ", ".join(f"{column} = ?" for column in _COLUMNS)
)


class SqlitePosDataService(PosDataService):
    """Stores POS in the ``pos`` table."""

    def get_all(self) -> List[Pos]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM pos ORDER BY id").fetchall()
            return [self._row_to_pos(row) for row in rows]
        finally:
            conn.close()

    def get_by_id(self, entity_id: int) -> Pos:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM pos WHERE id = ?", (entity_id,)).fetchone()
            if not row:
                raise NotFoundError(Pos, entity_id)
            return self._row_to_pos(row)
        finally:
            conn.close()

    def get_by_name(self, name: str) -> Pos:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM pos WHERE name = ?", (name,)).fetchone()
            if not row:
                raise NotFoundError(Pos, name, field="name")
            return self._row_to_pos(row)
        finally:
            conn.close()

    def upsert(self, entity: Pos) -> Pos:
        """Insert ``entity`` if it has no id, otherwise update its row.

        ``created_at`` is set on insert and kept on update;
        ``updated_at`` is refreshed on every write.  Returns the row as
        stored.  A failed write is rolled back before the error is
        raised.
        """
        now = datetime.now(timezone.utc).isoformat()
        values = [self._column_value(entity, column) for column in _COLUMNS]
        conn = get_connection()
        cursor = conn.cursor()
        try:
            try:
                if entity.id is None:
                    cursor.execute(_INSERT_SQL, (*values, now, now))
                    pos_id = cursor.lastrowid
                    action = "Created"
                else:
                    cursor.execute(_UPDATE_SQL, (*values, now, entity.id))
                    if cursor.rowcount == 0:
                        raise NotFoundError(Pos, entity.id)
                    pos_id = entity.id
                    action = "Updated"
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                if "pos.name" in str(exc):
                    raise DuplicationError(Pos, "name", entity.name) from exc
                raise
            except NotFoundError:
                conn.rollback()
                raise
            conn.commit()
            logger.info("%s POS %s (%s)", action, pos_id, entity.name)
            row = cursor.execute("SELECT * FROM pos WHERE id = ?", (pos_id,)).fetchone()
            return self._row_to_pos(row)
        finally:
            cursor.close()
            conn.close()

    def delete(self, entity_id: int) -> None:
        conn = get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM pos WHERE id = ?", (entity_id,))
            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError(Pos, entity_id)
            conn.commit()
            logger.info("Deleted POS %s", entity_id)
        finally:
            cursor.close()
            conn.close()

    def clear(self) -> None:
        conn = get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM pos")
            conn.commit()
            logger.info("Deleted all POS (%s rows)", cursor.rowcount)
        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _column_value(entity: Pos, column: str):
        value = getattr(entity, column)
        # Enums are stored by value.
        return value.value if isinstance(value, Enum) else value

    @staticmethod
    def _row_to_pos(row: sqlite3.Row) -> Pos:
        """Convert a database row to a ``Pos`` instance."""
        return Pos.model_validate(dict(row))
