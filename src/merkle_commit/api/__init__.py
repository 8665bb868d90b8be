"""API routes module."""

from .routes_merkle import router as merkle_router

__all__ = ["merkle_router"]
