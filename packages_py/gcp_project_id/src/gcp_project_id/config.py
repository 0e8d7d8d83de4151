"""
Configuration utilities for gcp_project_id
"""
import logging
from typing import Optional

from .types import DEFAULT_TIMEOUT_SECONDS, Options

logger = logging.getLogger(__name__)


# Checked in order, the first non-empty value wins.
DEFAULT_ENV_KEYS = (
    "GCP_PROJECT",
    "GCLOUD_PROJECT",
    "GOOGLE_CLOUD_PROJECT",
)

GCLOUD_EXECUTABLE = "gcloud"
GCLOUD_ARGS = ("config", "get-value", "project")

NOT_FOUND_MESSAGE = (
    "Google Cloud project ID not found; check your credentials "
    "file, set the GCP_PROJECT environment variable or install the "
    "`gcloud` CLI and run `gcloud init` to configure your project."
)

DEFAULT_OPTIONS = Options()


def get_options(*opts: Optional[Options]) -> Options:
    """
    Pick the options for a resolution call.

    Only the first argument is considered; anything after it is ignored.

    Args:
        opts: Zero or more Options

    Returns:
        The first Options given, or DEFAULT_OPTIONS
    """
    if opts and opts[0] is not None:
        if len(opts) > 1:
            logger.debug(f"get_options: Ignoring {len(opts) - 1} extra options")
        return opts[0]
    return DEFAULT_OPTIONS
