"""
Resolve the current Google Cloud project ID, on a workstation or in the cloud.
"""
from .types import (
    Options,
    ResolutionResult,
    ErrorKind,
    DiscoveredCredentials,
    Searcher,
    FindCredentialsFn,
    OutputFn,
)
from .config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_ENV_KEYS,
    DEFAULT_OPTIONS,
    GCLOUD_EXECUTABLE,
    GCLOUD_ARGS,
    NOT_FOUND_MESSAGE,
    get_options,
)
from .errors import (
    ProjectIdError,
    SearchContextError,
    DeadlineExceededError,
    SearchCancelledError,
    CredentialsLookupError,
    SearcherFailedError,
    ProjectIdNotFoundError,
)
from .context import SearchContext
from .transport import DeadlineRequest, DeadlineResponse
from .searchers import (
    default_searchers,
    EnvironmentSearcher,
    CredentialsSearcher,
    GCloudSearcher,
    find_default_credentials,
    command_output,
    common_gcloud_paths,
)
from .resolver import ProjectIdResolver, find_project_id, project_id


__all__ = [
    # Types
    "Options",
    "ResolutionResult",
    "ErrorKind",
    "DiscoveredCredentials",
    "Searcher",
    "FindCredentialsFn",
    "OutputFn",
    # Config
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_ENV_KEYS",
    "DEFAULT_OPTIONS",
    "GCLOUD_EXECUTABLE",
    "GCLOUD_ARGS",
    "NOT_FOUND_MESSAGE",
    "get_options",
    # Errors
    "ProjectIdError",
    "SearchContextError",
    "DeadlineExceededError",
    "SearchCancelledError",
    "CredentialsLookupError",
    "SearcherFailedError",
    "ProjectIdNotFoundError",
    # Context
    "SearchContext",
    # Transport
    "DeadlineRequest",
    "DeadlineResponse",
    # Searchers
    "default_searchers",
    "EnvironmentSearcher",
    "CredentialsSearcher",
    "GCloudSearcher",
    "find_default_credentials",
    "command_output",
    "common_gcloud_paths",
    # Resolver
    "ProjectIdResolver",
    "find_project_id",
    "project_id",
]


__version__ = "1.0.0"
