from gitlab_paginator.pagination.exceptions import (
    InvalidPageSize,
    InvalidResponseShape,
    PaginatorError,
)
from gitlab_paginator.pagination.link_header import parse_next_link
from gitlab_paginator.pagination.modes import FORCED_MODES, PaginationMode, resolve_mode
from gitlab_paginator.pagination.paginator import CursorState, Paginator

__all__ = [
    "CursorState",
    "FORCED_MODES",
    "InvalidPageSize",
    "InvalidResponseShape",
    "PaginationMode",
    "Paginator",
    "PaginatorError",
    "parse_next_link",
    "resolve_mode",
]
