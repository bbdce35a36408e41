"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers under a unified
prefix.  When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import pos

router = APIRouter()

router.include_router(pos.router, prefix="/pos", tags=["pos"])
