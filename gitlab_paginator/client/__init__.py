from gitlab_paginator.client.http_client import GitLabHttpClient, GitLabHttpError
from gitlab_paginator.client.api import GitLabApi

__all__ = [
    "GitLabApi",
    "GitLabHttpClient",
    "GitLabHttpError",
]
