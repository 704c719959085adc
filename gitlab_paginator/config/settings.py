"""
Central configuration for the GitLab paginator.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class PaginationSettings:
    """Settings for the pagination cursor."""

    # Page size used when the caller does not pass a truthy per_page
    default_per_page: int = 20

    # Default ordering for keyset requests (caller params override these)
    keyset_order_by: str = "id"
    keyset_sort: str = "asc"


@dataclass(frozen=True)
class ClientSettings:
    """Settings for the GitLab HTTP client."""

    # Root of the v4 REST API
    base_url: str = "https://gitlab.com/api/v4"

    # Maximum retries per request for connection errors and retryable statuses
    max_retries: int = 3

    # Backoff base for retries (seconds). Actual wait = base * 2^attempt
    backoff_base: float = 1.0

    # Maximum backoff wait (seconds)
    max_backoff: float = 30.0

    # Request timeout (seconds)
    request_timeout: int = 30

    # User-Agent string sent with every request
    user_agent: str = "gitlab-paginator/0.1"


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.pagination.default_per_page)
        print(settings.client.base_url)
    """

    pagination: PaginationSettings = field(default_factory=PaginationSettings)
    client: ClientSettings = field(default_factory=ClientSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    return Settings()
