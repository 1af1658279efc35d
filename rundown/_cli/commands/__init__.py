"""Rundown command import aggregation."""

from ._deployment import deployment

__all__ = ["deployment"]
