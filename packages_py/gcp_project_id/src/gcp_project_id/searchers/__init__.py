"""
Project ID search strategies.
"""
from typing import List

from ..types import Searcher
from .credentials import CredentialsSearcher, find_default_credentials
from .environment import EnvironmentSearcher
from .gcloud import GCloudSearcher, command_output, common_gcloud_paths


def default_searchers() -> List[Searcher]:
    """
    The standard searcher chain, in precedence order.

    1. GCP_PROJECT, GCLOUD_PROJECT, GOOGLE_CLOUD_PROJECT environment variables.
    2. Application default credentials: a credentials file in a well-known
       location, or the GCE metadata server when running on Google Cloud.
    3. The default project configured in the gcloud CLI. User-level
       credentials carry no project, so on a workstation this is often the
       only source.
    """
    return [
        EnvironmentSearcher(),
        CredentialsSearcher(),
        GCloudSearcher(),
    ]


__all__ = [
    "default_searchers",
    "EnvironmentSearcher",
    "CredentialsSearcher",
    "GCloudSearcher",
    "find_default_credentials",
    "command_output",
    "common_gcloud_paths",
]
