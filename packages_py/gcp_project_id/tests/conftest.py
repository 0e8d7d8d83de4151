"""Pytest configuration and fixtures for gcp_project_id tests."""
import os
from typing import Generator, List, Optional, Sequence
from unittest import mock

import pytest

from gcp_project_id import SearchContext


class StubSearcher:
    """Searcher double that returns a fixed ID or raises, recording each call."""

    def __init__(self, project_id: str = "", error: Optional[Exception] = None):
        self._project_id = project_id
        self._error = error
        self.calls: List[tuple] = []

    def project_id(self, ctx: SearchContext, scopes: Sequence[str] = ()) -> str:
        self.calls.append((ctx, tuple(scopes)))
        if self._error is not None:
            raise self._error
        return self._project_id

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Run with an empty process environment."""
    with mock.patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def background_ctx() -> Generator[SearchContext, None, None]:
    """A live context without a deadline, cancelled after the test."""
    with SearchContext.background() as ctx:
        yield ctx


@pytest.fixture
def stub_searcher():
    """Factory for StubSearcher instances."""
    return StubSearcher
