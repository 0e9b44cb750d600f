"""GitHub REST API access."""

from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .releases import create_release, releases_url

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "create_release",
    "releases_url",
]
