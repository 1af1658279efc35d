"""Rundown providers."""

from . import directory

__all__ = ["directory"]
