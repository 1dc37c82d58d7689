"""API routers."""

from . import documents, health, search

__all__ = ["documents", "health", "search"]
