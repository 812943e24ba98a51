"""HTTP boundary: app factory, routes and error mapping."""

from .app import create_app

__all__ = ["create_app"]
