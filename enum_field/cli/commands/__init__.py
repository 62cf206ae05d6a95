"""CLI commands for enum-field."""

from . import show

__all__ = ["show"]
