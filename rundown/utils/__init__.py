"""Utility functions."""

from __future__ import annotations

from typing import Any


def str_to_bool(val: Any) -> bool:
    """Convert a string representation of truth to True or False.

    True values are 'y', 'yes', 't', 'true', 'on', and '1'.
    All other values are False.

    """
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        return val.lower() in ("y", "yes", "t", "true", "on", "1")
    return False
