"""
Environment variable searcher.
"""
import logging
import os
from typing import Mapping, Optional, Sequence, Tuple

from ..config import DEFAULT_ENV_KEYS
from ..context import SearchContext

logger = logging.getLogger(__name__)


class EnvironmentSearcher:
    """
    Look the project ID up in environment variables.

    Keys are checked in the order given; an earlier key wins over a later one
    when both are set. Works for Cloud Functions and most on-premises setups.
    """

    def __init__(self, *keys: str, environ: Optional[Mapping[str, str]] = None):
        self._keys: Tuple[str, ...] = keys or DEFAULT_ENV_KEYS
        self._environ = environ

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._keys

    def project_id(self, ctx: SearchContext, scopes: Sequence[str] = ()) -> str:
        environ = os.environ if self._environ is None else self._environ
        for key in self._keys:
            value = environ.get(key)
            if value:
                logger.debug(f"EnvironmentSearcher: Found project ID in ${key}")
                return value
        logger.debug(f"EnvironmentSearcher: None of {list(self._keys)} set")
        return ""
