"""Tests for description sinks (matchkit._description)."""

from __future__ import annotations

from typing import Any

import pytest

from matchkit import (
    NULL_DESCRIPTION,
    Description,
    IsAnything,
    NullDescription,
    StringDescription,
    anything,
    equal_to,
    to_string,
)


def _value(value: Any) -> str:
    return str(StringDescription().append_value(value))


class _Loud:
    """Self-describing value that records every describe_to call."""

    def __init__(self) -> None:
        self.calls = 0

    def describe_to(self, description: Description) -> None:
        self.calls += 1
        description.append_text("loud")


class TestAppendValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            ("abc", '"abc"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("a\nb\tc\rd\\e", '"a\\nb\\tc\\rd\\\\e"'),
            (1, "<1>"),
            (3.5, "<3.5>"),
            (True, "<True>"),
            ([1, "x"], '[<1>, "x"]'),
            ((1, 2), "[<1>, <2>]"),
            ([], "[]"),
            ([[1], None], "[[<1>], None]"),
        ],
    )
    def test_rendering(self, value: Any, expected: str) -> None:
        assert _value(value) == expected

    def test_self_describing_value_renders_itself(self) -> None:
        assert _value(equal_to("x")) == '"x"'

    def test_classes_use_default_rendering(self) -> None:
        # a matcher class has describe_to, but is not self-describing itself
        assert _value(IsAnything) == f"<{IsAnything}>"


class TestAppendLists:
    def test_value_list(self) -> None:
        text = StringDescription().append_value_list("(", "; ", ")", [1, "a"])
        assert str(text) == '(<1>; "a")'

    def test_value_list_accepts_one_shot_iterables(self) -> None:
        text = StringDescription().append_value_list("[", ", ", "]", iter([1, 2]))
        assert str(text) == "[<1>, <2>]"

    def test_empty_value_list(self) -> None:
        assert str(StringDescription().append_value_list("[", ", ", "]", [])) == "[]"

    def test_list_of_self_describing(self) -> None:
        text = StringDescription().append_list("{", ",", "}", [equal_to(1), anything()])
        assert str(text) == "{<1>,ANYTHING}"


class TestStringDescription:
    def test_operations_chain(self) -> None:
        description = StringDescription()
        result = (
            description.append_text("a ")
            .append_value(1)
            .append_text(" ")
            .append_description_of(anything())
        )
        assert result is description
        assert str(description) == "a <1> ANYTHING"

    def test_text_is_verbatim(self) -> None:
        assert str(StringDescription().append_text('"%0" \\n')) == '"%0" \\n'

    def test_to_string(self) -> None:
        assert StringDescription.to_string(equal_to(2)) == "<2>"
        assert to_string(anything("whatever")) == "whatever"


class TestNullDescription:
    def test_is_shared_singleton(self) -> None:
        assert isinstance(NULL_DESCRIPTION, NullDescription)

    def test_every_operation_returns_itself(self) -> None:
        d = NULL_DESCRIPTION
        assert d.append_text("x") is d
        assert d.append_value(1) is d
        assert d.append_description_of(anything()) is d
        assert d.append_value_list("[", ", ", "]", [1]) is d
        assert d.append_list("[", ", ", "]", [anything()]) is d

    def test_renders_empty(self) -> None:
        NULL_DESCRIPTION.append_text("ignored").append_value(3)
        assert str(NULL_DESCRIPTION) == ""

    def test_never_asks_values_to_describe_themselves(self) -> None:
        loud = _Loud()
        NULL_DESCRIPTION.append_description_of(loud)
        NULL_DESCRIPTION.append_list("[", ", ", "]", [loud])
        assert loud.calls == 0
