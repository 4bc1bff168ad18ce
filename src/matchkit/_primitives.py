"""Primitive matchers the collection and combinator factories build on.

Each matcher is a frozen dataclass — immutable after construction.
Literal arguments given to any factory in matchkit go through
wrap_matcher, which turns a plain value into an equal_to matcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from matchkit._matcher import BaseMatcher, DiagnosingMatcher
from matchkit._types import is_matcher

if TYPE_CHECKING:
    from matchkit._description import Description
    from matchkit._types import Matcher


@dataclass(frozen=True, slots=True)
class IsEqual[T](BaseMatcher[T]):
    """Equality (==) against a fixed value."""

    value: T

    def matches(self, item: Any) -> bool:
        return bool(item == self.value)

    def describe_to(self, description: Description) -> None:
        description.append_value(self.value)


@dataclass(frozen=True, slots=True)
class IsAnything(BaseMatcher[Any]):
    """Always matches. Used for the unconstrained side of map matchers."""

    description: str = "ANYTHING"

    def matches(self, item: Any) -> bool:
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text(self.description)


@dataclass(frozen=True, slots=True)
class IsInstanceOf(DiagnosingMatcher[Any]):
    """isinstance() check against a type."""

    expected_type: type

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        if item is None:
            mismatch_description.append_text("None")
            return False
        if not isinstance(item, self.expected_type):
            mismatch_description.append_value(item).append_text(
                f" is a {type(item).__name__}"
            )
            return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text(f"an instance of {self.expected_type.__name__}")


def equal_to[T](value: T) -> IsEqual[T]:
    """Match values equal to ``value``."""
    return IsEqual(value)


def anything(description: str = "ANYTHING") -> IsAnything:
    """Match every value, describing itself with ``description``."""
    return IsAnything(description)


def instance_of(expected_type: type) -> IsInstanceOf:
    """Match instances of ``expected_type`` (subclasses included)."""
    return IsInstanceOf(expected_type)


def wrap_matcher(item: Any) -> Matcher[Any]:
    """Return ``item`` if it is already a matcher, else ``equal_to(item)``."""
    if is_matcher(item):
        return item
    return IsEqual(item)
