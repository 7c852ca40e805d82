"""
Top-level API router.

Aggregates domain routers under the ``/api`` prefix applied in
``main.create_app``.  Only the ``usuarios`` collection exists.
"""

from fastapi import APIRouter

from .endpoints import usuarios

router = APIRouter()

router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"])
