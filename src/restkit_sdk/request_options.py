"""Per-request options and the merge rules that combine them."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Union


@dataclass
class RequestOptions:
    method: str | None = None
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None
    follow_redirects: bool | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RequestOptions":
        """Build options from a plain mapping.

        Keys matching a field populate it; anything else is kept in
        ``extensions`` and handed to the transport as-is.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        extensions: dict[str, Any] = {}
        for key, value in mapping.items():
            if key in known:
                values[key] = value
            else:
                extensions[key] = value
        if extensions:
            values["extensions"] = deep_merge(values.get("extensions") or {}, extensions)
        if values.get("headers") is not None:
            values["headers"] = dict(values["headers"])
        else:
            values.pop("headers", None)
        return cls(**values)

    @property
    def content_type(self) -> str | None:
        # Only the two common spellings are honoured.
        return self.headers.get("Content-Type") or self.headers.get("content-type")


OptionsLike = Union[RequestOptions, Mapping[str, Any], None]


def coerce_request_options(options: OptionsLike) -> RequestOptions | None:
    if options is None or isinstance(options, RequestOptions):
        return options
    if isinstance(options, Mapping):
        return RequestOptions.from_mapping(options)
    raise TypeError(f"options must be RequestOptions or a mapping, got {type(options).__name__}")


def deep_merge(*mappings: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings left to right, recursing into nested mappings.

    ``None`` values are skipped, so they never replace an earlier value.
    The result never shares a nested dict or list with any input.
    """
    merged: dict[str, Any] = {}
    for mapping in mappings:
        if not mapping:
            continue
        for key, value in mapping.items():
            if value is None:
                continue
            if isinstance(value, Mapping):
                current = merged.get(key)
                merged[key] = deep_merge(current if isinstance(current, Mapping) else None, value)
            elif isinstance(value, list):
                merged[key] = list(value)
            else:
                merged[key] = value
    return merged


def merge_request_options(*layers: RequestOptions | None, method: str, body: Any = None) -> RequestOptions:
    """Combine option layers into the effective options for one call.

    Precedence is positional: later layers win over earlier ones, ``None``
    scalars never override, ``headers`` and ``extensions`` merge key by key.
    ``method`` and ``body`` are applied last and always win.
    """
    effective = RequestOptions()
    for layer in layers:
        if layer is None:
            continue
        effective.headers = deep_merge(effective.headers, layer.headers)
        effective.extensions = deep_merge(effective.extensions, layer.extensions)
        if layer.timeout is not None:
            effective.timeout = layer.timeout
        if layer.follow_redirects is not None:
            effective.follow_redirects = layer.follow_redirects
    effective.method = method
    effective.body = body
    return effective
