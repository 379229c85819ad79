"""Unit tests for building list and dict records from body lines."""

from __future__ import annotations

import pytest

from beanctl.exceptions import MalformedRecord
from beanctl.parser import build_dict, build_list, strip_list_framing


def test_list_items_lose_their_framing() -> None:
    """Leading dash/space runs are removed, plain lines pass through."""

    assert build_list(["- alpha", "beta", "-gamma"]) == ["alpha", "beta", "gamma"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("- default", "default"),
        ("- - nested", "nested"),
        ("   indented", "indented"),
        ("tube - name", "tube - name"),
        ("- my  tube ", "my  tube "),
        ("-", ""),
    ],
)
def test_strip_list_framing(line: str, expected: str) -> None:
    """Only the leading framing is removed; the remainder stays verbatim."""

    assert strip_list_framing(line) == expected


def test_list_keeps_order_and_duplicates() -> None:
    """Items keep body order and repeated names are not merged."""

    assert build_list(["- b", "- a", "- b"]) == ["b", "a", "b"]


def test_dict_from_key_value_lines() -> None:
    """Each `key: value` line becomes one mapping entry."""

    assert build_dict(["count: 5", "name: queue-a"]) == {"count": "5", "name": "queue-a"}


def test_dict_values_are_verbatim_strings() -> None:
    """Values keep inner whitespace and colons, and are never coerced."""

    record = build_dict(["os: Linux 6.1  x86", "url: http://host:11300", "uptime:42"])

    assert record == {"os": "Linux 6.1  x86", "url": "http://host:11300", "uptime": "42"}


def test_dict_allows_empty_values() -> None:
    """A key followed by a bare colon maps to an empty string."""

    assert build_dict(["hostname:", "name: "]) == {"hostname": "", "name": ""}


def test_dict_duplicate_key_keeps_last_value() -> None:
    """A repeated key is overwritten by its last occurrence."""

    assert build_dict(["id: 1", "id: 2"]) == {"id": "2"}


def test_dict_preserves_insertion_order() -> None:
    """Keys come out in body order for deterministic output."""

    assert list(build_dict(["z: 1", "a: 2", "m: 3"])) == ["z", "a", "m"]


def test_dict_malformed_line_aborts() -> None:
    """A line without a separator fails and carries the whole line."""

    with pytest.raises(MalformedRecord) as excinfo:
        build_dict(["count: 5", "malformed line without colon", "name: queue-a"])

    assert excinfo.value.line == "malformed line without colon"
    assert str(excinfo.value) == "YAML parse error for line: malformed line without colon"


def test_dict_strips_list_framing_before_splitting() -> None:
    """Dict lines written as list items still decode to key/value pairs."""

    assert build_dict(["- a: 1", "-b: 2"]) == {"a": "1", "b": "2"}


def test_dict_malformed_list_item_reports_stripped_line() -> None:
    """The error carries the line as it was matched, without its framing."""

    with pytest.raises(MalformedRecord) as excinfo:
        build_dict(["- bad"])

    assert excinfo.value.line == "bad"


def test_dict_requires_key_before_colon() -> None:
    """A colon with nothing in front of it is not a key/value pair."""

    with pytest.raises(MalformedRecord):
        build_dict([": orphan"])


def test_dict_empty_lines_give_empty_mapping() -> None:
    assert build_dict([]) == {}
