"""
Type definitions for gcp_project_id
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .context import SearchContext
    from .errors import ProjectIdError


DEFAULT_TIMEOUT_SECONDS = 30.0


class ErrorKind(str, Enum):
    """Why a resolution failed"""
    SEARCHER_FAILED = "searcher_failed"
    NOT_FOUND = "not_found"


class Options(BaseModel):
    """Options for a single project ID resolution"""

    model_config = ConfigDict(frozen=True)

    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=0)
    """Overall deadline for the whole searcher chain (seconds). Default: 30.0"""

    scopes: Tuple[str, ...] = ()
    """OAuth scopes passed to credential discovery"""

    strict: bool = False
    """Fail with ProjectIdNotFoundError when no searcher finds an ID"""


@dataclass(frozen=True)
class DiscoveredCredentials:
    """What the credential discovery collaborator hands back"""

    credentials: Any
    """The google.auth credentials object"""

    project_id: Optional[str] = None
    """Project associated with the credentials, None for user-level credentials"""


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of running the searcher chain"""

    project_id: str = ""
    """The resolved project ID, empty when nothing was found"""

    error: Optional["ProjectIdError"] = None
    """Set when a searcher failed or strict mode found nothing"""

    searcher: Optional[str] = None
    """Name of the searcher that produced the ID or the error"""

    resolution_time_seconds: float = 0.0
    """Time spent running the chain (seconds)"""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        return self.ok and bool(self.project_id)

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        if self.error is None:
            return None
        return getattr(self.error, "kind", ErrorKind.SEARCHER_FAILED)

    def unwrap(self) -> str:
        """Return the project ID, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error.with_traceback(None)
        return self.project_id


class Searcher(Protocol):
    """
    A single project ID lookup strategy.

    Returns an empty string when it has nothing to offer and raises a
    ProjectIdError when the lookup itself is broken.
    """

    def project_id(self, ctx: "SearchContext", scopes: Sequence[str] = ()) -> str:
        ...


# Credential discovery: (context, scopes) -> DiscoveredCredentials
FindCredentialsFn = Callable[["SearchContext", Sequence[str]], DiscoveredCredentials]

# Command runner: (context, argv) -> captured stdout
OutputFn = Callable[["SearchContext", Sequence[str]], bytes]
