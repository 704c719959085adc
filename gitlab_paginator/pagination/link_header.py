"""Parsing of the HTTP ``Link`` response header."""

from __future__ import annotations

import re
from typing import Optional

_NEXT_SEGMENT_RE = re.compile(r'<([^<>]*)>;\s*rel="next"')


def parse_next_link(header_value: Optional[str]) -> Optional[dict[str, str]]:
    """
    Extract the query parameters of the ``rel="next"`` URL in a Link header.

    Segments are comma separated, e.g.::

        <https://gitlab.example.com/api/v4/users?cursor=abc&id_after=10>; rel="next",
        <https://gitlab.example.com/api/v4/users?id_after=0>; rel="first"

    Pairs split on ``&`` and key/value on the first ``=``. Values are not
    percent-decoded; they are sent back exactly as the server wrote them.

    Returns None when the header is missing, has no next relation, or the
    next URL carries no query string.
    """
    if not header_value:
        return None

    next_url = None
    for segment in header_value.split(","):
        match = _NEXT_SEGMENT_RE.search(segment)
        if match:
            next_url = match.group(1)
            break

    if next_url is None:
        return None

    _, _, query = next_url.partition("?")
    # Drop a fragment if the server sent one
    query = query.split("#", 1)[0]
    if not query:
        return None

    params: dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        params[key] = value
    return params or None
