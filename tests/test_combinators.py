"""Tests for AllOf, Is and DescribedAs."""

from __future__ import annotations

from typing import Any

import pytest

from matchkit import (
    AllOf,
    BaseMatcher,
    Description,
    DescribedAs,
    DescriptionTemplateError,
    MatcherError,
    StringDescription,
    all_of,
    anything,
    described_as,
    equal_to,
    instance_of,
    is_,
    is_a,
    to_string,
)
from matchkit.testing import (
    assert_description,
    assert_does_not_match,
    assert_matches,
    assert_mismatch_description,
    assert_null_safe,
    assert_unknown_type_safe,
)


class CountingMatcher(BaseMatcher[Any]):
    """Matches everything and counts how often it was asked."""

    def __init__(self) -> None:
        self.calls = 0

    def matches(self, item: Any) -> bool:
        self.calls += 1
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("counted")


class TestAllOf:
    def test_empty_matches_everything(self) -> None:
        m = all_of()
        assert_matches(m, 1)
        assert_matches(m, None)
        assert_description("()", m)

    def test_matches_when_every_child_matches(self) -> None:
        m = all_of(instance_of(int), equal_to(3))
        assert_matches(m, 3)
        assert_does_not_match(m, 4)
        assert_does_not_match(m, "3")

    def test_literals_are_wrapped(self) -> None:
        assert_matches(all_of(1), 1)
        assert_does_not_match(all_of(1), 2)

    def test_description_joins_with_and(self) -> None:
        assert_description("(<1> and ANYTHING and is <2>)", all_of(1, anything(), is_(2)))

    def test_mismatch_names_only_first_failing_child(self) -> None:
        m = all_of(anything(), equal_to(1), equal_to(2))
        assert_mismatch_description("<1> was <3>", m, 3)

    def test_stops_at_first_rejection(self) -> None:
        counter = CountingMatcher()
        m = all_of(equal_to(1), counter)
        assert not m.matches(2)
        m.describe_mismatch(2, StringDescription())
        assert counter.calls == 0

    def test_evaluates_all_children_on_success(self) -> None:
        counter = CountingMatcher()
        assert all_of(anything(), counter).matches("x")
        assert counter.calls == 1

    def test_is_reusable(self) -> None:
        m = all_of(instance_of(str))
        assert [m.matches(v) for v in ("a", 1, "b")] == [True, False, True]

    def test_copes_with_none_and_unknown_types(self) -> None:
        m = all_of(equal_to("irrelevant"))
        assert_null_safe(m)
        assert_unknown_type_safe(m)

    def test_children_held_in_order(self) -> None:
        assert all_of(1, 2) == AllOf((equal_to(1), equal_to(2)))


class TestIs:
    def test_delegates_matching(self) -> None:
        assert_matches(is_(equal_to(1)), 1)
        assert_does_not_match(is_(equal_to(1)), 2)

    def test_prefixes_description(self) -> None:
        assert_description("is <1>", is_(equal_to(1)))
        assert_description('is "a"', is_("a"))

    def test_mismatch_delegates_unchanged(self) -> None:
        assert_mismatch_description("was <2>", is_(1), 2)

    def test_is_a(self) -> None:
        m = is_a(int)
        assert_matches(m, 3)
        assert_does_not_match(m, "3")
        assert_description("is an instance of int", m)
        assert_mismatch_description('"3" is a str', m, "3")
        assert_mismatch_description("None", m, None)


class TestDescribedAs:
    def test_overrides_description(self) -> None:
        assert_description("my description", described_as("my description", anything()))

    def test_placeholders_follow_template_order(self) -> None:
        m = described_as("%1 then %0 done", anything(), "x", 2)
        assert_description('<2> then "x" done', m)

    def test_adjacent_and_repeated_placeholders(self) -> None:
        assert_description("<1><2><1>", described_as("%0%1%0", anything(), 1, 2))

    def test_template_without_placeholders_ignores_values(self) -> None:
        assert_description("plain", described_as("plain", anything(), 1, 2))

    def test_does_not_change_outcome_or_mismatch(self) -> None:
        m = described_as("the number %0", equal_to(1), 1)
        assert_matches(m, 1)
        assert_mismatch_description("was <2>", m, 2)

    def test_values_are_captured_at_construction(self) -> None:
        values = ["before"]
        m = DescribedAs("%0", anything(), values)
        values[0] = "after"
        assert to_string(m) == '"before"'

    def test_out_of_range_placeholder_is_a_usage_error(self) -> None:
        m = described_as("value %2", anything(), 1)
        with pytest.raises(DescriptionTemplateError) as excinfo:
            to_string(m)
        assert excinfo.value.index == 2
        assert excinfo.value.count == 1
        assert isinstance(excinfo.value, MatcherError)
        assert isinstance(excinfo.value, IndexError)

    def test_out_of_range_placeholder_does_not_affect_matching(self) -> None:
        assert described_as("%5", equal_to(1)).matches(1)
