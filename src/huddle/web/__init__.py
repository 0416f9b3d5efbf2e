"""Static browser pages served alongside the API."""

from .pages import router as pages_router

__all__ = ["pages_router"]
