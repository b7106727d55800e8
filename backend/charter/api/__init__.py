"""REST API for the charter backend."""

from .app import build_app, create_app

__all__ = ['build_app', 'create_app']
