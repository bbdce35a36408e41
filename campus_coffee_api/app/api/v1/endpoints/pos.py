"""
POS endpoints for API v1.

These routes expose CRUD operations for points of sale.  Domain errors
raised by the service are mapped to HTTP responses: a missing POS
yields 404, a duplicate name 409.  The handlers are plain functions
because the service layer is synchronous; FastAPI runs them in its
thread pool.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from campus_coffee_api.app.api.dependencies import get_pos_service
from campus_coffee_api.app.core.exceptions import DuplicationError, NotFoundError
from campus_coffee_api.app.schemas.pos import Pos
from campus_coffee_api.app.services.pos_service import PosService

router = APIRouter()


@router.get("/", response_model=List[Pos])
def list_pos(service: PosService = Depends(get_pos_service)) -> List[Pos]:
    """Return all POS."""
    return service.get_all()


@router.get("/filter", response_model=Pos)
def get_pos_by_name(
    name: str = Query(..., min_length=1),
    service: PosService = Depends(get_pos_service),
) -> Pos:
    """Retrieve a single POS by its unique name."""
    try:
        return service.get_by_name(name)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{pos_id}", response_model=Pos)
def get_pos(pos_id: int, service: PosService = Depends(get_pos_service)) -> Pos:
    """Retrieve a single POS by ID.  Raises 404 if it does not exist."""
    try:
        return service.get_by_id(pos_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Pos, status_code=status.HTTP_201_CREATED)
def create_pos(pos: Pos, service: PosService = Depends(get_pos_service)) -> Pos:
    """Create a new POS.

    The payload must not carry an ``id``; ids are assigned by the
    database.  Returns 409 if a POS with the same name exists.
    """
    if pos.id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="POS ID must not be set when creating a new POS.",
        )
    try:
        return service.upsert(pos)
    except DuplicationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.put("/{pos_id}", response_model=Pos)
def update_pos(pos_id: int, pos: Pos, service: PosService = Depends(get_pos_service)) -> Pos:
    """Update an existing POS.

    The ``id`` in the payload must match ``pos_id``.  Returns 404 if
    the POS does not exist and 409 if the new name is already taken.
    """
    if pos.id != pos_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="POS ID in path and body do not match.",
        )
    try:
        return service.upsert(pos)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DuplicationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.delete("/{pos_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pos(pos_id: int, service: PosService = Depends(get_pos_service)) -> None:
    """Delete a POS.  Raises 404 if it does not exist."""
    try:
        service.delete(pos_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
