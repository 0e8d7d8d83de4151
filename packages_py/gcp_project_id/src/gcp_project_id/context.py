"""
Deadline and cancellation shared by every searcher in a resolution.

A SearchContext carries one absolute deadline (time.monotonic based) and a
cancellation flag. Child contexts never outlive their parent: the child
deadline is capped by the parent deadline and a cancelled parent makes every
child report itself cancelled.

Example:
    with SearchContext.with_timeout(30.0) as ctx:
        searcher.project_id(ctx, scopes)
    # ctx is cancelled here, whatever happened inside the block
"""
import logging
import threading
import time
from typing import Optional

from .errors import DeadlineExceededError, SearchCancelledError, SearchContextError

logger = logging.getLogger(__name__)


class SearchContext:
    """Cancellable, deadline-bound context passed down the searcher chain."""

    def __init__(
        self,
        deadline: Optional[float] = None,
        parent: Optional["SearchContext"] = None,
    ):
        """
        Create a new SearchContext.

        Args:
            deadline: Absolute time.monotonic() deadline, None for no deadline
            parent: Optional parent context whose deadline and cancellation apply
        """
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline
        self._parent = parent
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> "SearchContext":
        """A context that never expires on its own."""
        return cls()

    @classmethod
    def with_timeout(
        cls, timeout_seconds: float, parent: Optional["SearchContext"] = None
    ) -> "SearchContext":
        """Derive a context that expires timeout_seconds from now."""
        return cls(deadline=time.monotonic() + timeout_seconds, parent=parent)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._parent is not None and self._parent.cancelled

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def cancel(self) -> None:
        self._cancelled.set()

    def err(self) -> Optional[SearchContextError]:
        """Return the reason this context is done, or None while it is live."""
        if self.cancelled:
            return SearchCancelledError("context cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceededError("context deadline exceeded")
        return None

    def done(self) -> bool:
        return self.err() is not None

    def raise_if_done(self) -> None:
        err = self.err()
        if err is not None:
            raise err

    def __enter__(self) -> "SearchContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()

    def __repr__(self) -> str:
        return f"SearchContext(remaining={self.remaining()!r}, cancelled={self.cancelled!r})"
