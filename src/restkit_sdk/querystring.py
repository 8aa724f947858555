"""Query-string encoding for criteria and form bodies."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

import httpx


def _is_structured(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _flatten(key: str, value: Any) -> Iterator[tuple[str, Any]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _flatten(f"{key}[{sub_key}]", sub_value)
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            suffix = index if _is_structured(item) else ""
            yield from _flatten(f"{key}[{suffix}]", item)
        return
    yield key, value


def build_query_string(params: Mapping[str, Any] | None) -> str:
    """Encode ``params`` as ``key=value&key2=value2``.

    Top-level keys are sorted. Nested mappings expand to ``key[sub]=value``,
    lists to ``key[]=value`` (``key[i][sub]`` for structured items) and
    ``None`` values are skipped.
    """
    if not params:
        return ""
    pairs: list[tuple[str, Any]] = []
    for key in sorted(params, key=str):
        pairs.extend(_flatten(str(key), params[key]))
    return str(httpx.QueryParams(pairs))
