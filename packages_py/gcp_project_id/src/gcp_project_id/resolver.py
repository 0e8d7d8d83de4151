"""
Project ID resolver: runs the searcher chain under one deadline.
"""
import logging
import time
from typing import Optional, Sequence, Tuple

from .config import NOT_FOUND_MESSAGE, get_options
from .context import SearchContext
from .errors import ProjectIdNotFoundError, SearcherFailedError
from .searchers import default_searchers
from .types import Options, ResolutionResult, Searcher

logger = logging.getLogger(__name__)


class ProjectIdResolver:
    """
    Project ID Resolver

    Tries each searcher in order:
    - a non-empty result wins and stops the chain
    - an empty result falls through to the next searcher
    - an exception aborts the chain; later searchers are not run

    When every searcher comes back empty the result is empty, or a
    ProjectIdNotFoundError in strict mode.
    """

    def __init__(self, searchers: Optional[Sequence[Searcher]] = None):
        """
        Create a new ProjectIdResolver.

        Args:
            searchers: Searchers in precedence order, default_searchers() when None
        """
        if searchers is None:
            searchers = default_searchers()
        self._searchers: Tuple[Searcher, ...] = tuple(searchers)

    @property
    def searchers(self) -> Tuple[Searcher, ...]:
        return self._searchers

    def resolve(
        self,
        options: Optional[Options] = None,
        parent: Optional[SearchContext] = None,
    ) -> ResolutionResult:
        """
        Run the searcher chain.

        Args:
            options: Resolution options, DEFAULT_OPTIONS when None
            parent: Optional parent context; its deadline and cancellation apply too

        Returns:
            ResolutionResult with the project ID, or the error that stopped the chain

        Example:
            result = ProjectIdResolver().resolve(Options(strict=True))
            if result.error_kind is ErrorKind.NOT_FOUND:
                ...
        """
        opts = get_options(options)
        start_time = time.monotonic()

        with SearchContext.with_timeout(opts.timeout_seconds, parent) as ctx:
            for searcher in self._searchers:
                name = type(searcher).__name__
                logger.debug(f"resolve: Trying {name}")
                try:
                    project_id = searcher.project_id(ctx, opts.scopes)
                except Exception as e:
                    logger.error(f"resolve: {name} failed, aborting search: {e}")
                    return ResolutionResult(
                        error=SearcherFailedError(name, e),
                        searcher=name,
                        resolution_time_seconds=time.monotonic() - start_time,
                    )

                if project_id:
                    logger.info(f"resolve: Project ID '{project_id}' found by {name}")
                    return ResolutionResult(
                        project_id=project_id,
                        searcher=name,
                        resolution_time_seconds=time.monotonic() - start_time,
                    )

        elapsed = time.monotonic() - start_time
        if opts.strict:
            logger.warning("resolve: No project ID found (strict mode)")
            return ResolutionResult(
                error=ProjectIdNotFoundError(NOT_FOUND_MESSAGE),
                resolution_time_seconds=elapsed,
            )

        logger.debug("resolve: No project ID found")
        return ResolutionResult(resolution_time_seconds=elapsed)

    def project_id(
        self,
        options: Optional[Options] = None,
        parent: Optional[SearchContext] = None,
    ) -> str:
        """
        Resolve the project ID, raising instead of returning an error.

        Raises:
            SearcherFailedError: If a searcher failed
            ProjectIdNotFoundError: If strict mode is on and nothing was found
        """
        return self.resolve(options, parent).unwrap()


def find_project_id(
    *opts: Options,
    searchers: Optional[Sequence[Searcher]] = None,
    parent: Optional[SearchContext] = None,
) -> ResolutionResult:
    """
    Resolve the default Google Cloud project ID without raising.

    Only the first Options argument is used.
    """
    return ProjectIdResolver(searchers).resolve(get_options(*opts), parent)


def project_id(
    *opts: Options,
    searchers: Optional[Sequence[Searcher]] = None,
    parent: Optional[SearchContext] = None,
) -> str:
    """
    Resolve the default Google Cloud project ID.

    Search order:
    1. GCP_PROJECT, GCLOUD_PROJECT, GOOGLE_CLOUD_PROJECT environment variables
    2. google.auth application default credentials
    3. The default project configured in the gcloud CLI

    Returns an empty string when nothing is found, unless Options.strict is
    set, in which case ProjectIdNotFoundError is raised. A failing searcher
    raises SearcherFailedError.
    """
    return find_project_id(*opts, searchers=searchers, parent=parent).unwrap()
