"""Tests for PageRequest, Page and SortKey."""

from __future__ import annotations

import pytest

from pagequery_core import (
    InvalidRangeError,
    NullPlacement,
    Page,
    PageRequest,
    ResultRow,
    SortDirection,
    SortKey,
    check_range,
)


class Row(ResultRow):
    name: str
    age: int


# -- SortKey -----------------------------------------------------------------


def test_sort_key_parse() -> None:
    assert SortKey.parse("-member.age") == SortKey("member.age", SortDirection.DESC)
    assert SortKey.parse("member.age") == SortKey.asc("member.age")


def test_sort_key_str() -> None:
    assert str(SortKey.desc("member.age")) == "-member.age"
    assert str(SortKey.asc("team.name", NullPlacement.LAST)) == "team.name nulls last"


# -- Range checks ------------------------------------------------------------


@pytest.mark.parametrize(
    ("offset", "limit"),
    [(-1, 10), (0, 0), (0, -1), (True, 10), (0, 2.5), ("0", 10)],
)
def test_check_range_rejects(offset, limit) -> None:
    with pytest.raises(InvalidRangeError) as info:
        check_range(offset, limit)
    assert info.value.to_dict()["error"] == "INVALID_RANGE"


def test_check_range_accepts_zero_offset() -> None:
    check_range(0, 1)


# -- PageRequest -------------------------------------------------------------


def test_page_request_defaults() -> None:
    request = PageRequest()
    assert (request.offset, request.limit, request.sort) == (0, 20, ())


def test_page_request_validates() -> None:
    with pytest.raises(InvalidRangeError):
        PageRequest(offset=-5, limit=10)


def test_page_request_of_page() -> None:
    request = PageRequest.of_page(2, 10, [SortKey.desc("member.age")])
    assert request.offset == 20
    assert request.page_number == 2
    assert request.sort == (SortKey.desc("member.age"),)
    assert request.next().offset == 30
    with pytest.raises(InvalidRangeError):
        PageRequest.of_page(-1, 10)


def test_page_request_with_sort() -> None:
    request = PageRequest(10, 5).with_sort(SortKey.asc("member.id"))
    assert request == PageRequest(10, 5, (SortKey.asc("member.id"),))


# -- Page --------------------------------------------------------------------


def test_page_has_next() -> None:
    assert Page((1, 2), offset=0, limit=2, total=5).has_next is True
    assert Page((1,), offset=4, limit=2, total=5).has_next is False
    assert Page((1, 2), offset=0, limit=2).has_next is None
    assert Page((1,), offset=0, limit=2).has_next is False


def test_page_rejects_inconsistent_totals() -> None:
    with pytest.raises(ValueError):
        Page((1, 2, 3), offset=0, limit=2)
    with pytest.raises(ValueError):
        Page((1, 2), offset=10, limit=5, total=11)


def test_page_empty_past_the_end_keeps_total() -> None:
    page = Page((), offset=200, limit=10, total=100)
    assert len(page) == 0
    assert page.has_next is False


def test_page_map() -> None:
    page = Page([1, 2], offset=0, limit=5, total=2).map(str)
    assert page.content == ("1", "2")
    assert page.total == 2


def test_page_to_dict_dumps_models() -> None:
    page = Page((Row(name="a", age=1),), offset=0, limit=10, total=1)
    assert page.to_dict() == {
        "content": [{"name": "a", "age": 1}],
        "totalElements": 1,
        "offset": 0,
        "limit": 10,
    }
    assert page.to_dict(lambda r: r.name)["content"] == ["a"]
