"""Aggregate router exports."""
from .collections import router as collections_router
from .system import router as system_router

__all__ = [
    "collections_router",
    "system_router",
]
