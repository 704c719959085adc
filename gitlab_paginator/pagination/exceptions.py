"""Errors raised by the pagination cursor."""

from __future__ import annotations


class PaginatorError(RuntimeError):
    """Base class for paginator failures."""


class InvalidResponseShape(PaginatorError):
    """The list method returned something other than (headers, records)."""

    def __init__(self, method: str, value: object) -> None:
        super().__init__(
            f"The {method} method returned a non list value: {type(value).__name__}"
        )
        self.method = method
        self.value = value


class InvalidPageSize(PaginatorError):
    """The per_page param cannot be read as a number."""

    def __init__(self, method: str, value: object) -> None:
        super().__init__(f"Invalid per_page {value!r} for the {method} method")
        self.method = method
        self.value = value
