"""
httpx transport for google.auth that honours a SearchContext deadline.

google.auth talks to the GCE metadata server through a transport Request
object. This one clamps every request timeout to what is left of the search
context and refuses to start a request once the context is done, so a slow
metadata probe cannot run past the resolution deadline.
"""
import logging
from typing import Any, Mapping, Optional

import httpx
from google.auth import exceptions, transport

from .context import SearchContext

logger = logging.getLogger(__name__)


def clamp_timeout(timeout: Optional[float], remaining: Optional[float]) -> Optional[float]:
    """
    Combine a per-request timeout with the time left on the context.

    Args:
        timeout: Timeout requested by google.auth, None for no limit
        remaining: Seconds left on the context, None for no deadline

    Returns:
        The tighter of the two, or None when neither is set
    """
    if remaining is None:
        return timeout
    if timeout is None:
        return remaining
    return min(timeout, remaining)


class DeadlineResponse(transport.Response):
    """google.auth Response backed by an httpx.Response."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    @property
    def data(self) -> bytes:
        return self._response.content


class DeadlineRequest(transport.Request):
    """
    google.auth Request backed by httpx, bounded by a SearchContext.

    Failures, including a done context, surface as
    google.auth.exceptions.TransportError, which is what google.auth expects
    from a transport (the metadata server probe treats it as "not on GCE").
    """

    def __init__(self, ctx: SearchContext, client: Optional[httpx.Client] = None):
        """
        Create a new DeadlineRequest.

        Args:
            ctx: Context whose deadline bounds every request
            client: Optional httpx.Client to reuse; a short-lived one is created per call otherwise
        """
        self._ctx = ctx
        self._client = client

    def __call__(
        self,
        url: str,
        method: str = "GET",
        body: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> DeadlineResponse:
        err = self._ctx.err()
        if err is not None:
            logger.debug(f"DeadlineRequest: Refusing {method} {url}: {err}")
            raise exceptions.TransportError(str(err)) from err

        effective_timeout = clamp_timeout(timeout, self._ctx.remaining())
        logger.debug(f"DeadlineRequest: {method} {url} (timeout={effective_timeout})")

        try:
            if self._client is not None:
                response = self._client.request(
                    method, url, content=body, headers=headers, timeout=effective_timeout
                )
            else:
                with httpx.Client() as client:
                    response = client.request(
                        method, url, content=body, headers=headers, timeout=effective_timeout
                    )
        except httpx.HTTPError as caught:
            logger.debug(f"DeadlineRequest: {method} {url} failed: {caught}")
            raise exceptions.TransportError(caught) from caught

        return DeadlineResponse(response)
