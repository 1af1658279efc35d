"""What a destroy batch should target."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ExplicitDestroyRequest:
    """Destroy exactly the deployments with these IDs, in this order.

    Duplicates are kept. Each occurrence is resolved and destroyed.

    """

    ids: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate the request."""
        if not self.ids:
            raise ValueError("an explicit destroy request requires at least one ID")


@dataclass(frozen=True)
class AllDeploymentsRequest:
    """Destroy every deployment in scope whose infrastructure still exists."""


DestroyRequest = Union[ExplicitDestroyRequest, AllDeploymentsRequest]
"""Either an explicit, ordered set of IDs or the "all" sentinel."""

ALL_DEPLOYMENTS = AllDeploymentsRequest()


def destroy_request_from_ids(ids: Iterable[str]) -> DestroyRequest:
    """Build a destroy request from (possibly empty) CLI arguments.

    Args:
        ids: Deployment IDs. An empty iterable means "all".

    """
    ids = tuple(ids)
    if ids:
        return ExplicitDestroyRequest(ids)
    return ALL_DEPLOYMENTS
