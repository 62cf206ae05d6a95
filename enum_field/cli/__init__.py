"""Command-line inspection tool for enum_field hosts."""

from .app import app

__all__ = ["app"]
