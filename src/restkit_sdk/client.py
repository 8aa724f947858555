"""Synchronous and asynchronous REST clients."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import BaseModel

from .exceptions import RestHTTPError, RestValidationError
from .paths import Criteria, get_request_path
from .querystring import build_query_string
from .request_options import OptionsLike, RequestOptions, coerce_request_options, merge_request_options
from .security import sanitize_headers
from .transport import AsyncTransport, Transport

logger = logging.getLogger(__name__)


def _is_structured(body: Any) -> bool:
    return isinstance(body, (Mapping, list, tuple, BaseModel))


def _encode_body(body: Any, content_type: str | None) -> Any:
    if not content_type or not _is_structured(body):
        return body
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    if content_type.lower() == "application/json":
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False)
    if not isinstance(body, Mapping):
        body = {str(index): item for index, item in enumerate(body)}
    return build_query_string(body)


def _is_success(status: int) -> bool:
    return 200 <= status < 400


class _BaseRestClient:
    def __init__(self, transport: Any, endpoint: str | None = None) -> None:
        if transport is None:
            raise RestValidationError("transport is required")
        self.transport = transport
        self.endpoint = endpoint
        self.defaults = RequestOptions(
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} endpoint={self.endpoint!r}>"

    def _build_options(self, method: str, body: Any, options: OptionsLike) -> RequestOptions:
        effective = merge_request_options(
            self.defaults,
            coerce_request_options(options),
            method=method,
            body=body,
        )
        effective.body = _encode_body(body, effective.content_type)
        return effective

    def _log_request(self, path: str, options: RequestOptions) -> None:
        logger.debug(
            "%s %s endpoint=%s headers=%s",
            options.method,
            path,
            self.endpoint,
            sanitize_headers(options.headers),
        )

    @staticmethod
    def _check_status(method: str, path: str, response: Any) -> None:
        logger.debug("%s %s -> %s", method, path, response.status)
        if not _is_success(response.status):
            raise RestHTTPError(response, message=f"{method} {path} failed")


class RestClient(_BaseRestClient):
    """Synchronous client."""

    def __init__(self, transport: Transport, endpoint: str | None = None) -> None:
        super().__init__(transport, endpoint)

    def request(self, method: str, path: str, body: Any = None, options: OptionsLike = None) -> Any:
        request_options = self._build_options(method, body, options)
        self._log_request(path, request_options)
        response = self.transport.fetch(path, request_options)
        self._check_status(method, path, response)
        try:
            return response.json()
        except Exception:
            logger.debug("%s %s returned an unparseable body", method, path)
            return None

    def find(self, resource: str, criteria: Criteria = None, options: OptionsLike = None) -> Any:
        return self.request("GET", get_request_path(resource, criteria), None, options)

    def post(self, resource: str, body: Any = None, options: OptionsLike = None) -> Any:
        return self.request("POST", resource, body, options)

    def create(self, resource: str, body: Any = None, options: OptionsLike = None) -> Any:
        return self.post(resource, body, options)

    def update(self, resource: str, criteria: Criteria = None, body: Any = None, options: OptionsLike = None) -> Any:
        return self.request("PUT", get_request_path(resource, criteria), body, options)

    def patch(self, resource: str, criteria: Criteria = None, body: Any = None, options: OptionsLike = None) -> Any:
        return self.request("PATCH", get_request_path(resource, criteria), body, options)

    def destroy(self, resource: str, criteria: Criteria = None, options: OptionsLike = None) -> Any:
        return self.request("DELETE", get_request_path(resource, criteria), None, options)


class AsyncRestClient(_BaseRestClient):
    """Asynchronous client."""

    def __init__(self, transport: AsyncTransport, endpoint: str | None = None) -> None:
        super().__init__(transport, endpoint)

    async def request(self, method: str, path: str, body: Any = None, options: OptionsLike = None) -> Any:
        request_options = self._build_options(method, body, options)
        self._log_request(path, request_options)
        response = await self.transport.fetch(path, request_options)
        self._check_status(method, path, response)
        try:
            return await response.json()
        except Exception:
            logger.debug("%s %s returned an unparseable body", method, path)
            return None

    async def find(self, resource: str, criteria: Criteria = None, options: OptionsLike = None) -> Any:
        return await self.request("GET", get_request_path(resource, criteria), None, options)

    async def post(self, resource: str, body: Any = None, options: OptionsLike = None) -> Any:
        return await self.request("POST", resource, body, options)

    async def create(self, resource: str, body: Any = None, options: OptionsLike = None) -> Any:
        return await self.post(resource, body, options)

    async def update(
        self,
        resource: str,
        criteria: Criteria = None,
        body: Any = None,
        options: OptionsLike = None,
    ) -> Any:
        return await self.request("PUT", get_request_path(resource, criteria), body, options)

    async def patch(
        self,
        resource: str,
        criteria: Criteria = None,
        body: Any = None,
        options: OptionsLike = None,
    ) -> Any:
        return await self.request("PATCH", get_request_path(resource, criteria), body, options)

    async def destroy(self, resource: str, criteria: Criteria = None, options: OptionsLike = None) -> Any:
        return await self.request("DELETE", get_request_path(resource, criteria), None, options)
