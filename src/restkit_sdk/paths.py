"""Resource path resolution from criteria."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Any, Mapping, Union

from pydantic import BaseModel

from .querystring import build_query_string


@dataclass(frozen=True)
class Where:
    """Filter a collection; encoded as a query string."""

    params: Mapping[str, Any]


@dataclass(frozen=True)
class ById:
    """Address a single entity; appended as a path segment."""

    value: str | Number


Criteria = Union[Where, ById, Mapping[str, Any], BaseModel, str, Number, None]


def resolve_criteria(criteria: Criteria) -> Where | ById | None:
    if criteria is None or isinstance(criteria, (Where, ById)):
        return criteria
    if isinstance(criteria, BaseModel):
        return Where(criteria.model_dump(mode="json", exclude_none=True))
    if isinstance(criteria, Mapping):
        return Where(criteria)
    if isinstance(criteria, (str, Number)):
        # 0, 0.0, False and "" mean "no criteria"; use ById(0) to address entity 0.
        return ById(criteria) if criteria else None
    raise TypeError(f"criteria must be a mapping, string or number, got {type(criteria).__name__}")


def _segment(value: str | Number) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_request_path(resource: str, criteria: Criteria = None) -> str:
    resolved = resolve_criteria(criteria)
    if isinstance(resolved, Where):
        return f"{resource}?{build_query_string(resolved.params)}"
    if isinstance(resolved, ById):
        segment = _segment(resolved.value)
        if resource.endswith("/"):
            return f"{resource}{segment}/"
        return f"{resource}/{segment}"
    return resource
