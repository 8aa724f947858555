"""Transport protocols and the default httpx-backed implementations."""

from __future__ import annotations

import os
from typing import Any, Protocol

import httpx

from .request_options import RequestOptions
from .security import validate_base_url


class Response(Protocol):
    status: int

    def json(self) -> Any: ...


class AsyncResponse(Protocol):
    status: int

    async def json(self) -> Any: ...


class Transport(Protocol):
    def fetch(self, path: str, options: RequestOptions) -> Response: ...


class AsyncTransport(Protocol):
    async def fetch(self, path: str, options: RequestOptions) -> AsyncResponse: ...


class HttpxResponse:
    """Adapts :class:`httpx.Response` to the client's response interface."""

    def __init__(self, raw: httpx.Response) -> None:
        self.raw = raw
        self.status = raw.status_code
        self.headers = raw.headers

    def json(self) -> Any:
        return self.raw.json()

    def __repr__(self) -> str:
        return f"<HttpxResponse [{self.status}]>"


class AsyncHttpxResponse(HttpxResponse):
    async def json(self) -> Any:  # type: ignore[override]
        return self.raw.json()

    def __repr__(self) -> str:
        return f"<AsyncHttpxResponse [{self.status}]>"


class _BaseHttpxTransport:
    default_timeout = 30.0
    base_url_env_var = "RESTKIT_BASE_URL"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = default_timeout,
        follow_redirects: bool = True,
        allow_http: bool = False,
    ) -> None:
        raw_base_url = base_url or os.getenv(self.base_url_env_var) or ""
        self.base_url = validate_base_url(raw_base_url, allow_http=allow_http) if raw_base_url else ""
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self._client_kwargs: dict[str, Any] = {
            "timeout": timeout,
            "follow_redirects": follow_redirects,
            "trust_env": False,
        }
        if self.base_url:
            self._client_kwargs["base_url"] = self.base_url

    def _request_kwargs(self, path: str, options: RequestOptions) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "method": options.method or "GET",
            "url": path,
            "headers": dict(options.headers),
        }
        body = options.body
        if isinstance(body, (str, bytes)):
            kwargs["content"] = body
        elif body is not None:
            kwargs["json"] = body
        if options.timeout is not None:
            kwargs["timeout"] = options.timeout
        if options.follow_redirects is not None:
            kwargs["follow_redirects"] = options.follow_redirects
        if options.extensions:
            kwargs["extensions"] = dict(options.extensions)
        return kwargs


class HttpxTransport(_BaseHttpxTransport):
    """Synchronous transport over :class:`httpx.Client`."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = _BaseHttpxTransport.default_timeout,
        follow_redirects: bool = True,
        allow_http: bool = False,
        httpx_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            follow_redirects=follow_redirects,
            allow_http=allow_http,
        )
        self._httpx = httpx_client or httpx.Client(**self._client_kwargs)

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    def fetch(self, path: str, options: RequestOptions) -> HttpxResponse:
        return HttpxResponse(self._httpx.request(**self._request_kwargs(path, options)))


class AsyncHttpxTransport(_BaseHttpxTransport):
    """Asynchronous transport over :class:`httpx.AsyncClient`."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = _BaseHttpxTransport.default_timeout,
        follow_redirects: bool = True,
        allow_http: bool = False,
        httpx_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            follow_redirects=follow_redirects,
            allow_http=allow_http,
        )
        self._httpx = httpx_client or httpx.AsyncClient(**self._client_kwargs)

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._httpx.aclose()

    async def fetch(self, path: str, options: RequestOptions) -> AsyncHttpxResponse:
        response = await self._httpx.request(**self._request_kwargs(path, options))
        return AsyncHttpxResponse(response)
