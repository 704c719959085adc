"""GitLab v4 list endpoints and the paginator factory."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote

from gitlab_paginator.config.settings import Settings, get_settings
from gitlab_paginator.client.http_client import GitLabHttpClient
from gitlab_paginator.pagination.paginator import Paginator

Params = Optional[Mapping[str, Any]]
ListResponse = tuple[dict[str, str], Any]


def _path_id(value: Any) -> str:
    """Encode a numeric id or ``namespace/path`` for use in a URL segment."""
    return quote(str(value), safe="")


class GitLabApi:
    """Thin wrapper over the list endpoints the paginator walks."""

    def __init__(
        self,
        http_client: Optional[GitLabHttpClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._http = http_client or GitLabHttpClient(self._settings.client)
        self._list_methods: dict[str, Callable[..., ListResponse]] = {
            "users": self.users,
            "projects": self.projects,
            "groups": self.groups,
            "group_projects": self.group_projects,
            "project_issues": self.project_issues,
            "project_merge_requests": self.project_merge_requests,
            "project_members": self.project_members,
        }

    def users(self, params: Params = None) -> ListResponse:
        """GET /users."""
        return self._http.get("users", params)

    def projects(self, params: Params = None) -> ListResponse:
        """GET /projects."""
        return self._http.get("projects", params)

    def groups(self, params: Params = None) -> ListResponse:
        """GET /groups."""
        return self._http.get("groups", params)

    def group_projects(self, group_id: Any, params: Params = None) -> ListResponse:
        """GET /groups/:id/projects."""
        return self._http.get(f"groups/{_path_id(group_id)}/projects", params)

    def project_issues(self, project_id: Any, params: Params = None) -> ListResponse:
        """GET /projects/:id/issues."""
        return self._http.get(f"projects/{_path_id(project_id)}/issues", params)

    def project_merge_requests(self, project_id: Any, params: Params = None) -> ListResponse:
        """GET /projects/:id/merge_requests."""
        return self._http.get(f"projects/{_path_id(project_id)}/merge_requests", params)

    def project_members(self, project_id: Any, params: Params = None) -> ListResponse:
        """GET /projects/:id/members."""
        return self._http.get(f"projects/{_path_id(project_id)}/members", params)

    @property
    def list_methods(self) -> list[str]:
        return sorted(self._list_methods)

    def paginator(self, method: str, *args: Any, params: Params = None) -> Paginator:
        """
        Build a Paginator over one of the list endpoints.

            for issue in api.paginator("project_issues", "group/app", params={"state": "opened"}):
                ...
        """
        fetch = self._list_methods.get(method)
        if fetch is None:
            raise ValueError(f"Unknown list method: {method!r}")
        return Paginator(
            method,
            fetch,
            args=args,
            params=params,
            settings=self._settings.pagination,
        )
