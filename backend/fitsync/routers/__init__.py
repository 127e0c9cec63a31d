"""API routers package."""

from fitsync.routers import fitness, nutrition, plans

__all__ = ["fitness", "nutrition", "plans"]
