"""Cursor over a paged GitLab list endpoint."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from gitlab_paginator.config.settings import PaginationSettings, get_settings
from gitlab_paginator.pagination.exceptions import InvalidPageSize, InvalidResponseShape
from gitlab_paginator.pagination.link_header import parse_next_link
from gitlab_paginator.pagination.modes import PaginationMode, resolve_mode

logger = logging.getLogger(__name__)

# (*args, params) -> (headers, records)
FetchFunc = Callable[..., Any]


@dataclass
class CursorState:
    """Mutable position of a Paginator. A fresh instance is the Fresh state."""

    page: int = 0
    next_params: dict[str, str] = field(default_factory=dict)
    exhausted: bool = False
    records: deque[Any] = field(default_factory=deque)


class Paginator:
    """
    Iterate through the records of a paginated list endpoint.

    The endpoint is any callable taking the fixed ``args`` followed by a
    params dict and returning ``(headers, records)``. Offset pagination
    (``page``/``per_page``) is used unless the params ask for
    ``pagination="keyset"`` or the method only supports keyset, in which
    case continuation params come from the ``Link`` header of the previous
    response.

    Usage:
        paginator = Paginator("projects", api.projects, params={"per_page": 50})
        for record in paginator:
            ...
    """

    def __init__(
        self,
        method: str,
        fetch: FetchFunc,
        args: Sequence[Any] = (),
        params: Optional[Mapping[str, Any]] = None,
        settings: Optional[PaginationSettings] = None,
    ) -> None:
        if not method:
            raise ValueError("Paginator method name must be a non-empty string")
        self.method = method
        self.args = tuple(args)
        self.params = params if params is not None else {}
        self._fetch = fetch
        self._settings = settings or get_settings().pagination
        self._state = CursorState()

    @property
    def page(self) -> int:
        """Page number of the last offset fetch, 0 before the first one."""
        return self._state.page

    @property
    def exhausted(self) -> bool:
        return self._state.exhausted

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch_page(self) -> Optional[list[Any]]:
        """Return the records of the next page, or None once the listing is done."""
        state = self._state
        if state.exhausted:
            return None

        params = dict(self.params)
        # Continuation values only ever come from a previous response
        params.pop("cursor", None)

        mode = resolve_mode(self.method, params)
        per_page = params.get("per_page") or self._settings.default_per_page
        limit = self._page_size(per_page)

        page = state.page + 1
        if mode is PaginationMode.KEYSET:
            request_params = {
                "order_by": self._settings.keyset_order_by,
                "sort": self._settings.keyset_sort,
                "per_page": per_page,
                **params,
                "pagination": PaginationMode.KEYSET.value,
                **state.next_params,
            }
        else:
            request_params = {**params, "page": page, "per_page": per_page}

        logger.debug("Fetching %s (%s) with params %s", self.method, mode.value, request_params)

        response = self._fetch(*self.args, request_params)
        headers, records = self._unpack(response)
        exhausted = len(records) < limit

        if mode is PaginationMode.KEYSET:
            self.parse_continuation(headers)
        else:
            state.page = page

        if exhausted:
            logger.debug(
                "%s returned %d of %d records; listing exhausted",
                self.method,
                len(records),
                limit,
            )
            state.exhausted = True

        state.records = deque(records)

        if not records:
            return None
        return list(records)

    next_page = fetch_page

    def parse_continuation(self, headers: Optional[Mapping[str, Any]]) -> bool:
        """
        Take keyset continuation params from the ``link`` header.

        Returns True and replaces the stored continuation when a next link
        with a query string is present; otherwise leaves state untouched.
        """
        link = headers.get("link") if headers else None
        next_params = parse_next_link(link)
        if next_params is None:
            return False
        self._state.next_params = next_params
        return True

    def next(self) -> Optional[Any]:
        """
        Return the next record, fetching another page when the buffer is empty.

        Returns None once every record has been handed out.
        """
        state = self._state
        if state.records:
            return state.records.popleft()
        if state.exhausted:
            return None

        self.fetch_page()

        if self._state.records:
            return self._state.records.popleft()
        return None

    def all(self) -> list[Any]:
        """Reset and return the complete listing from the first page."""
        self.reset()

        records: list[Any] = []
        while True:
            page = self.fetch_page()
            if page is None:
                return records
            records.extend(page)

    def reset(self) -> None:
        """Go back to the first page with nothing fetched yet."""
        self._state = CursorState()

    def __iter__(self) -> Iterator[Any]:
        """Yield the remaining records, buffered ones first."""
        while True:
            while self._state.records:
                yield self._state.records.popleft()
            if self.fetch_page() is None:
                return

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _page_size(self, per_page: Any) -> int:
        """Numeric page size used for the short-page check; "2" and "2.0" both read as 2."""
        try:
            return int(per_page)
        except (TypeError, ValueError):
            pass
        try:
            return int(float(per_page))
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidPageSize(self.method, per_page) from exc

    def _unpack(self, response: Any) -> tuple[Any, Sequence[Any]]:
        try:
            headers, records = response
        except (TypeError, ValueError) as exc:
            raise InvalidResponseShape(self.method, response) from exc

        if not isinstance(records, (list, tuple)):
            raise InvalidResponseShape(self.method, records)
        return headers, records
