"""HTTP client for GitLab v4 list endpoints with retry and backoff."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping, Optional

import requests

from gitlab_paginator.config.settings import ClientSettings, get_settings

logger = logging.getLogger(__name__)


class GitLabHttpError(RuntimeError):
    """A request failed with a non-retryable status or ran out of retries."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitLabHttpClient:
    """Issues GET requests and returns ``(headers, decoded JSON body)``."""

    _RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
        sleep_func: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings or get_settings().client
        self._session = session or requests.Session()
        self._session.headers.update({
            "User-Agent": self._settings.user_agent,
            "Accept": "application/json",
        })
        self._sleep = sleep_func

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> tuple[dict[str, str], Any]:
        """
        GET ``path`` below the base URL.

        Header names are lowercased so callers can look up ``link`` directly.
        """
        url = f"{self._settings.base_url.rstrip('/')}/{path.lstrip('/')}"
        last_error: Optional[Exception] = None

        for attempt in range(self._settings.max_retries + 1):
            try:
                response = self._session.get(
                    url,
                    params=dict(params or {}),
                    timeout=self._settings.request_timeout,
                )
            except requests.RequestException as exc:
                last_error = exc
                if attempt >= self._settings.max_retries:
                    break
                logger.warning("Request to %s failed (%s); retrying", url, exc)
                self._sleep_with_backoff(attempt)
                continue

            if response.status_code in self._RETRYABLE_STATUS_CODES:
                last_error = GitLabHttpError(
                    f"Retryable HTTP status {response.status_code} for URL: {url}",
                    status_code=response.status_code,
                )
                if attempt >= self._settings.max_retries:
                    break
                logger.warning("HTTP %d from %s; retrying", response.status_code, url)
                self._sleep_with_backoff(attempt)
                continue

            if response.status_code >= 400:
                raise GitLabHttpError(
                    f"HTTP request failed with status {response.status_code} for URL: {url}",
                    status_code=response.status_code,
                )

            headers = {name.lower(): value for name, value in response.headers.items()}
            return headers, response.json()

        raise GitLabHttpError(
            f"Failed to fetch URL after {self._settings.max_retries + 1} attempts: {url}"
        ) from last_error

    def _sleep_with_backoff(self, attempt: int) -> None:
        backoff = min(
            self._settings.backoff_base * (2 ** attempt),
            self._settings.max_backoff,
        )
        self._sleep(backoff)
