"""HTTP API for the listing assistant."""

from .app import app, create_app

__all__ = ["app", "create_app"]
