"""Decide whether a deployment may be destroyed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .components import LifecycleState

if TYPE_CHECKING:
    from .components import DeploymentRecord


def is_eligible(deployment: DeploymentRecord) -> bool:
    """Only a deployment that completed successfully can be destroyed."""
    return deployment.lifecycle_state is LifecycleState.SUCCESS
