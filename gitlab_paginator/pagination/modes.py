"""Pagination mode selection."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping


class PaginationMode(str, Enum):
    OFFSET = "offset"
    KEYSET = "keyset"


# Endpoints that only accept one mode regardless of the caller's params.
# As of GitLab 17.0 the users endpoint only supports keyset pagination.
FORCED_MODES: dict[str, PaginationMode] = {
    "users": PaginationMode.KEYSET,
}


def resolve_mode(method: str, params: Mapping[str, Any]) -> PaginationMode:
    """Pick the mode for one request from the params and the forced-mode table."""
    if params.get("pagination") == PaginationMode.KEYSET.value:
        return PaginationMode.KEYSET
    return FORCED_MODES.get(method, PaginationMode.OFFSET)
