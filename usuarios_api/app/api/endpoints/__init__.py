"""Endpoint modules; each defines an ``APIRouter`` for one collection."""
