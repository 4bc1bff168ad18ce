"""Sequence and membership matchers.

- IsIterableContainingInOrder: exact length, strict positional match
- IsArrayContainingInOrder: list/tuple adapter over the iterable version
- IsIterableContaining: at least one element satisfies the child
- IsIterableContainingEvery: AllOf over one IsIterableContaining per
  expected item, applied to a single list copy of the candidate

Each call to matches or describe_mismatch traverses the candidate once.
A one-shot iterator is used up by that call, so a caller that wants both
the outcome and the diagnosis must pass a re-iterable candidate.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchkit._combinators import AllOf
from matchkit._matcher import TypeSafeDiagnosingMatcher, TypeSafeMatcher
from matchkit._primitives import wrap_matcher

if TYPE_CHECKING:
    from matchkit._description import Description
    from matchkit._types import Matcher


@dataclass(frozen=True, slots=True)
class IsIterableContainingInOrder[E](TypeSafeDiagnosingMatcher[Iterable[E]]):
    """The i-th item satisfies the i-th matcher, and the lengths agree.

    The first failing position wins the diagnosis; a length difference is
    only reported when every compared position matched.
    """

    matchers: tuple[Matcher[E], ...]

    expected_type = Iterable

    def matches_safely(
        self, item: Iterable[E], mismatch_description: Description
    ) -> bool:
        items = list(item)
        for index, (matcher, actual) in enumerate(zip(self.matchers, items)):
            if not matcher.matches(actual):
                mismatch_description.append_text(f"item {index}: expected ")
                mismatch_description.append_description_of(matcher).append_text(" but ")
                matcher.describe_mismatch(actual, mismatch_description)
                return False
        if len(items) != len(self.matchers):
            mismatch_description.append_text("had ").append_value(len(items))
            mismatch_description.append_text(" items but expected ").append_value(
                len(self.matchers)
            )
            return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("iterable containing ").append_list(
            "[", ", ", "]", self.matchers
        )


@dataclass(frozen=True, slots=True)
class IsArrayContainingInOrder[E](TypeSafeMatcher[Sequence[E]]):
    """In-order containment for lists and tuples.

    Matching and mismatch text come from an IsIterableContainingInOrder
    over the same matchers; only the description differs.
    """

    matchers: tuple[Matcher[E], ...]
    _iterable_matcher: IsIterableContainingInOrder[E] = field(
        init=False, repr=False, compare=False
    )

    expected_type = (list, tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_iterable_matcher", IsIterableContainingInOrder(self.matchers)
        )

    def matches_safely(self, item: Sequence[E]) -> bool:
        return self._iterable_matcher.matches(item)

    def describe_mismatch_safely(
        self, item: Sequence[E], description: Description
    ) -> None:
        self._iterable_matcher.describe_mismatch(item, description)

    def describe_to(self, description: Description) -> None:
        description.append_list("[", ", ", "]", self.matchers)


@dataclass(frozen=True, slots=True)
class IsIterableContaining[E](TypeSafeDiagnosingMatcher[Iterable[E]]):
    """At least one element satisfies element_matcher.

    Stops at the first satisfying element. On failure every element is
    diagnosed, in order: ``mismatches were: [was <1>, was <2>]``.
    """

    element_matcher: Matcher[E]

    expected_type = Iterable

    def matches_safely(
        self, item: Iterable[E], mismatch_description: Description
    ) -> bool:
        seen: list[E] = []
        for element in item:
            if self.element_matcher.matches(element):
                return True
            seen.append(element)

        if not seen:
            mismatch_description.append_text("was empty")
            return False

        mismatch_description.append_text("mismatches were: [")
        for index, element in enumerate(seen):
            if index:
                mismatch_description.append_text(", ")
            self.element_matcher.describe_mismatch(element, mismatch_description)
        mismatch_description.append_text("]")
        return False

    def describe_to(self, description: Description) -> None:
        description.append_text("a collection containing ").append_description_of(
            self.element_matcher
        )


@dataclass(frozen=True, slots=True)
class IsIterableContainingEvery[E](TypeSafeDiagnosingMatcher[Iterable[E]]):
    """Every matcher is satisfied by some element, each checked on its own.

    The candidate is copied into a list once and every membership check
    runs over that copy. Description and mismatch text are those of the
    underlying AllOf.
    """

    matchers: tuple[Matcher[E], ...]
    _all_of: AllOf[Iterable[E]] = field(init=False, repr=False, compare=False)

    expected_type = Iterable

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_all_of",
            AllOf(tuple(IsIterableContaining(m) for m in self.matchers)),
        )

    def matches_safely(
        self, item: Iterable[E], mismatch_description: Description
    ) -> bool:
        items = list(item)
        if self._all_of.matches(items):
            return True
        self._all_of.describe_mismatch(items, mismatch_description)
        return False

    def describe_to(self, description: Description) -> None:
        self._all_of.describe_to(description)


def contains(*items: Any) -> IsIterableContainingInOrder[Any]:
    """Match iterables whose items satisfy ``items`` one-to-one, in order.

    Literals are compared with equal_to.
    """
    return IsIterableContainingInOrder(tuple(wrap_matcher(i) for i in items))


def array_containing(*items: Any) -> IsArrayContainingInOrder[Any]:
    """Match lists or tuples whose items satisfy ``items`` one-to-one, in order."""
    return IsArrayContainingInOrder(tuple(wrap_matcher(i) for i in items))


def has_item(item: Any) -> IsIterableContaining[Any]:
    """Match iterables with at least one element satisfying ``item``."""
    return IsIterableContaining(wrap_matcher(item))


def has_items(*items: Any) -> IsIterableContainingEvery[Any]:
    """Match iterables where every one of ``items`` is satisfied by some element.

    Each expected item is checked independently, so one element may
    satisfy several of them. Order and extra elements are irrelevant.
    """
    return IsIterableContainingEvery(tuple(wrap_matcher(i) for i in items))
