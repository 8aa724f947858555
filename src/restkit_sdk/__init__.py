"""Minimal REST client over an injectable HTTP transport."""

from .client import AsyncRestClient, RestClient
from .exceptions import RestClientError, RestHTTPError, RestValidationError
from .paths import ById, Where, get_request_path, resolve_criteria
from .querystring import build_query_string
from .request_options import RequestOptions, deep_merge, merge_request_options
from .transport import AsyncHttpxTransport, HttpxTransport

__all__ = [
    "AsyncHttpxTransport",
    "AsyncRestClient",
    "ById",
    "HttpxTransport",
    "RequestOptions",
    "RestClient",
    "RestClientError",
    "RestHTTPError",
    "RestValidationError",
    "Where",
    "build_query_string",
    "deep_merge",
    "get_request_path",
    "merge_request_options",
    "resolve_criteria",
]
