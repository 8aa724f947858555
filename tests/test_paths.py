from __future__ import annotations

import pytest
from pydantic import BaseModel

from restkit_sdk.paths import ById, Where, get_request_path, resolve_criteria
from restkit_sdk.querystring import build_query_string


def test_mapping_criteria_appends_query_string() -> None:
    criteria = {"name": "x", "age": 3}
    assert get_request_path("users", criteria) == "users?" + build_query_string(criteria)
    assert get_request_path("users", criteria) == "users?age=3&name=x"


def test_id_criteria_appends_segment() -> None:
    assert get_request_path("a", 1) == "a/1"
    assert get_request_path("a", "abc") == "a/abc"


def test_id_criteria_keeps_trailing_slash_style() -> None:
    assert get_request_path("a/", 1) == "a/1/"
    assert get_request_path("a/", "abc") == "a/abc/"


@pytest.mark.parametrize("criteria", [None, 0, 0.0, "", False])
def test_falsy_criteria_leave_resource_unchanged(criteria) -> None:
    assert get_request_path("a", criteria) == "a"


def test_explicit_by_id_addresses_zero() -> None:
    assert get_request_path("a", ById(0)) == "a/0"
    assert get_request_path("a/", ById(0)) == "a/0/"


def test_explicit_where_wrapper() -> None:
    assert get_request_path("users", Where({"role": "admin"})) == "users?role=admin"


def test_nested_where_criteria() -> None:
    assert get_request_path("users", {"where": {"name": "x"}}) == "users?where%5Bname%5D=x"


def test_model_criteria_is_a_where_clause() -> None:
    class Filter(BaseModel):
        role: str
        team: str | None = None

    assert get_request_path("users", Filter(role="admin")) == "users?role=admin"


def test_resolve_criteria_tags_values() -> None:
    assert resolve_criteria({"a": 1}) == Where({"a": 1})
    assert resolve_criteria(5) == ById(5)
    assert resolve_criteria(0) is None
    assert resolve_criteria(ById(0)) == ById(0)


def test_resolve_criteria_rejects_unknown_types() -> None:
    with pytest.raises(TypeError, match="criteria must be"):
        resolve_criteria({1, 2})


def test_float_criteria_appends_segment() -> None:
    assert get_request_path("prices", 1.5) == "prices/1.5"
    assert get_request_path("prices/", 1.5) == "prices/1.5/"


def test_bool_criteria_renders_lowercase() -> None:
    assert get_request_path("flags", True) == "flags/true"
    assert get_request_path("flags", ById(False)) == "flags/false"
