"""
Shared test fixtures for the paginator test suite.

Provides a scripted stand-in for a GitLab list endpoint that records the
params of every call, so tests never touch the network.
"""

from __future__ import annotations

from typing import Any

import pytest


class StubFetch:
    """Returns pre-scripted ``(headers, records)`` responses in order."""

    def __init__(self, responses: list[Any]) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any) -> Any:
        *fixed, params = args
        self.calls.append((tuple(fixed), dict(params)))
        if not self._responses:
            return {}, []
        return self._responses.pop(0)

    @property
    def params(self) -> list[dict[str, Any]]:
        return [params for _, params in self.calls]


@pytest.fixture
def stub_fetch():
    """Factory building a StubFetch from a list of responses."""
    return StubFetch


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def make_records(count: int, start: int = 1) -> list[dict[str, Any]]:
    """Create ``count`` minimal records with sequential ids."""
    return [{"id": i, "name": f"record-{i}"} for i in range(start, start + count)]


def next_link(query: str, base: str = "https://gitlab.example.com/api/v4/users") -> dict[str, str]:
    """Build a headers dict with a next relation pointing at ``base?query``."""
    return {"link": f'<{base}?{query}>; rel="next"'}
