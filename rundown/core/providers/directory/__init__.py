"""Deployment directory providers."""

from ._base import LATEST_COMPLETED_FIRST, AppClient, DeploymentOrder, DirectoryClient
from ._http import HttpAppClient, HttpDirectoryClient

__all__ = [
    "LATEST_COMPLETED_FIRST",
    "AppClient",
    "DeploymentOrder",
    "DirectoryClient",
    "HttpAppClient",
    "HttpDirectoryClient",
]
