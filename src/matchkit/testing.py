"""Test utilities for matchkit.

Assertion helpers that check a matcher's outcome and its exact
diagnostic text, plus a small diagnosing matcher useful for exercising
composites. These are NOT an assertion entry point for application
tests — they exist to test matchers themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from matchkit._description import StringDescription
from matchkit._matcher import TypeSafeDiagnosingMatcher

if TYPE_CHECKING:
    from matchkit._description import Description
    from matchkit._registry import RegistryBuilder
    from matchkit._types import Matcher

MISMATCHABLE_TYPE_URL = "matchkit.testing.v1.Mismatchable"


class _UnknownType:
    """A type no matcher can know about."""

    def __str__(self) -> str:
        return "unknown"


def mismatch_text(matcher: Matcher[Any], item: Any) -> str:
    """Render the mismatch description of ``item`` against ``matcher``."""
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


def assert_matches(matcher: Matcher[Any], item: Any, message: str = "") -> None:
    if not matcher.matches(item):
        msg = f"{message} because: {mismatch_text(matcher, item)!r}".lstrip()
        raise AssertionError(msg)


def assert_does_not_match(matcher: Matcher[Any], item: Any, message: str = "") -> None:
    if matcher.matches(item):
        msg = message or f"expected {StringDescription.to_string(matcher)!r} not to match"
        raise AssertionError(msg)


def assert_description(expected: str, matcher: Matcher[Any]) -> None:
    actual = StringDescription.to_string(matcher)
    if actual != expected:
        msg = f"expected description {expected!r}, got {actual!r}"
        raise AssertionError(msg)


def assert_mismatch_description(expected: str, matcher: Matcher[Any], item: Any) -> None:
    """Check mismatch text; the matcher must reject ``item`` first."""
    if matcher.matches(item):
        msg = "Precondition: matcher should not match item"
        raise AssertionError(msg)
    actual = mismatch_text(matcher, item)
    if actual != expected:
        msg = f"expected mismatch description {expected!r}, got {actual!r}"
        raise AssertionError(msg)


def assert_null_safe(matcher: Matcher[Any]) -> None:
    """matches(None) must return a bool without raising."""
    try:
        matcher.matches(None)
    except Exception as e:
        msg = f"matcher was not None-safe: {e!r}"
        raise AssertionError(msg) from e


def assert_unknown_type_safe(matcher: Matcher[Any]) -> None:
    """Matching an unrelated type must be an ordinary mismatch."""
    try:
        matcher.matches(_UnknownType())
    except Exception as e:
        msg = f"matcher was not unknown-type safe: {e!r}"
        raise AssertionError(msg) from e


@dataclass(frozen=True, slots=True)
class Mismatchable(TypeSafeDiagnosingMatcher[str]):
    """Matches one string; diagnoses anything else as ``mismatched: <item>``.

    >>> from matchkit.testing import Mismatchable, mismatch_text
    >>> mismatch_text(Mismatchable("a"), "b")
    'mismatched: b'
    """

    value: str

    expected_type = str

    def matches_safely(self, item: str, mismatch_description: Description) -> bool:
        if item == self.value:
            return True
        mismatch_description.append_text(f"mismatched: {item}")
        return False

    def describe_to(self, description: Description) -> None:
        description.append_text(f"mismatchable: {self.value}")


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the Mismatchable test matcher.

    Type URL: matchkit.testing.v1.Mismatchable
    Config field: { "value": "expected string" }
    """
    return builder.matcher(MISMATCHABLE_TYPE_URL, _mismatchable_factory)


def _mismatchable_factory(config: dict[str, Any]) -> Mismatchable:
    value = config.get("value")
    if not isinstance(value, str):
        msg = "Mismatchable requires a 'value' field (string)"
        raise ValueError(msg)
    return Mismatchable(value=value)
