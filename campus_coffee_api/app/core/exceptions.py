"""
Domain exceptions.

Data ports raise these to signal that a record is missing or that a
write would break a uniqueness constraint.  Services let them
propagate unchanged; the API layer maps them to HTTP status codes.
"""

from typing import Any


class CampusCoffeeError(Exception):
    """Base class for all domain errors."""


class NotFoundError(CampusCoffeeError):
    """No record of ``entity_type`` exists for ``entity_id``.

    ``field`` names the attribute that was looked up when it is not the
    identifier, e.g. ``NotFoundError(Pos, "Mensa", field="name")``.
    """

    def __init__(self, entity_type: type, entity_id: Any, field: str = "ID") -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type.__name__} with {field} {entity_id} does not exist.")


class DuplicationError(CampusCoffeeError):
    """Writing a record would duplicate the unique ``field`` value."""

    def __init__(self, entity_type: type, field: str, value: Any) -> None:
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type.__name__} with {field} '{value}' already exists.")
