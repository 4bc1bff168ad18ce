"""Map entry containment: has_entry, has_key, has_value."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from matchkit._matcher import TypeSafeMatcher
from matchkit._primitives import anything, wrap_matcher

if TYPE_CHECKING:
    from matchkit._description import Description
    from matchkit._types import Matcher


@dataclass(frozen=True, slots=True)
class _Entry:
    """Renders one mapping entry as ``<key=value>``."""

    key: Any
    value: Any

    def describe_to(self, description: Description) -> None:
        description.append_text(f"<{self.key}={self.value}>")


@dataclass(frozen=True, slots=True)
class IsMapContaining[K, V](TypeSafeMatcher[Mapping[K, V]]):
    """Some entry has a key satisfying key_matcher and a value satisfying
    value_matcher.

    Scans entries in the mapping's own iteration order and stops at the
    first qualifying one.
    """

    key_matcher: Matcher[K]
    value_matcher: Matcher[V]

    expected_type = Mapping

    def matches_safely(self, item: Mapping[K, V]) -> bool:
        for key, value in item.items():
            if self.key_matcher.matches(key) and self.value_matcher.matches(value):
                return True
        return False

    def describe_mismatch_safely(
        self, item: Mapping[K, V], description: Description
    ) -> None:
        description.append_text("map was ").append_value_list(
            "[", ", ", "]", (_Entry(k, v) for k, v in item.items())
        )

    def describe_to(self, description: Description) -> None:
        description.append_text("map containing [")
        description.append_description_of(self.key_matcher)
        description.append_text("->")
        description.append_description_of(self.value_matcher)
        description.append_text("]")


def has_entry(key: Any, value: Any) -> IsMapContaining[Any, Any]:
    """Match mappings with an entry satisfying both ``key`` and ``value``.

    Either argument may be a matcher or a literal (compared with equal_to).
    """
    return IsMapContaining(wrap_matcher(key), wrap_matcher(value))


def has_key(key: Any) -> IsMapContaining[Any, Any]:
    """Match mappings with at least one key satisfying ``key``."""
    return IsMapContaining(wrap_matcher(key), anything())


def has_value(value: Any) -> IsMapContaining[Any, Any]:
    """Match mappings with at least one value satisfying ``value``."""
    return IsMapContaining(anything(), wrap_matcher(value))
