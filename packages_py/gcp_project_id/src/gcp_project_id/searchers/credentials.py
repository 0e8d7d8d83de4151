"""
Application default credentials searcher.
"""
import logging
from typing import Sequence

import google.auth

from ..context import SearchContext
from ..errors import CredentialsLookupError
from ..transport import DeadlineRequest
from ..types import DiscoveredCredentials, FindCredentialsFn

logger = logging.getLogger(__name__)


def find_default_credentials(
    ctx: SearchContext, scopes: Sequence[str] = ()
) -> DiscoveredCredentials:
    """
    Run the standard google.auth application default credentials search.

    Checks GOOGLE_APPLICATION_CREDENTIALS, the gcloud well-known credentials
    file and finally the GCE metadata server. Metadata server traffic goes
    through DeadlineRequest so it stays inside the context deadline.

    Args:
        ctx: Search context
        scopes: OAuth scopes for the credentials

    Returns:
        DiscoveredCredentials with the credentials and their project, if any

    Raises:
        SearchContextError: If the context is already done
        google.auth.exceptions.DefaultCredentialsError: If no credentials are found
    """
    ctx.raise_if_done()
    credentials, project_id = google.auth.default(
        scopes=list(scopes) or None,
        request=DeadlineRequest(ctx),
    )
    return DiscoveredCredentials(credentials=credentials, project_id=project_id)


class CredentialsSearcher:
    """
    Read the project ID off the application default credentials.

    A failed lookup is a hard error: it usually means a broken credentials
    setup, which should not be skipped silently. Credentials without a project
    (user-level credentials) are a plain "not found".
    """

    def __init__(self, find_credentials: FindCredentialsFn = find_default_credentials):
        self._find_credentials = find_credentials

    def project_id(self, ctx: SearchContext, scopes: Sequence[str] = ()) -> str:
        try:
            found = self._find_credentials(ctx, scopes)
        except Exception as e:
            logger.debug(f"CredentialsSearcher: Credential discovery failed: {e}")
            raise CredentialsLookupError(f"find credentials: {e}") from e

        project_id = found.project_id or ""
        if not project_id:
            logger.debug("CredentialsSearcher: Credentials have no associated project")
        return project_id
