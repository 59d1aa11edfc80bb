"""GitHub REST API access: HTTP client and the two endpoints the action reads."""

from tagrelease.github.api import get_release_by_tag, list_tags
from tagrelease.github.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
)

__all__ = [
    # API
    "get_release_by_tag",
    "list_tags",
    # HTTP
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]
