"""
Pydantic models for points of sale (POS).

A POS is a place on campus where coffee can be bought: a café, a
bakery, a cafeteria or a vending machine.  ``id`` is ``None`` until the
POS has been stored; ``created_at`` and ``updated_at`` are maintained
by the data layer and ignored when sent by clients.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PosType(str, Enum):
    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"


class CampusType(str, Enum):
    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


class Pos(BaseModel):
    """A point of sale."""

    id: Optional[int] = Field(None, description="Identifier; absent for a POS not yet stored")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    name: str = Field(..., min_length=1, description="Unique name of the POS")
    description: str
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int
    city: str

    model_config = {
        "from_attributes": True,
    }
