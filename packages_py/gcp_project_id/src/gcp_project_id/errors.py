"""
Exceptions raised while resolving a project ID.
"""
from typing import Optional

from .types import ErrorKind


class ProjectIdError(Exception):
    """Base class for all gcp_project_id errors."""

    kind: ErrorKind = ErrorKind.SEARCHER_FAILED


class SearchContextError(ProjectIdError):
    """The search context is done; no more work should be started."""
    pass


class DeadlineExceededError(SearchContextError, TimeoutError):
    """The search context deadline passed."""
    pass


class SearchCancelledError(SearchContextError):
    """The search context was cancelled."""
    pass


class CredentialsLookupError(ProjectIdError):
    """Application default credentials discovery failed."""
    pass


class SearcherFailedError(ProjectIdError):
    """
    A searcher raised, aborting the whole chain.

    The original exception is kept as ``__cause__``.
    """

    kind = ErrorKind.SEARCHER_FAILED

    def __init__(self, searcher: str, cause: Optional[BaseException] = None):
        self.searcher = searcher
        message = f"{searcher}: {cause}" if cause is not None else searcher
        super().__init__(message)
        self.__cause__ = cause


class ProjectIdNotFoundError(ProjectIdError):
    """Strict mode is on and no searcher found a project ID."""

    kind = ErrorKind.NOT_FOUND
