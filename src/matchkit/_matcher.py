"""Matcher base classes.

Concrete matchers are frozen dataclasses that inherit one of these bases:

- BaseMatcher: plain predicate; mismatch text defaults to "was <item>"
- DiagnosingMatcher: one combined match-and-explain routine
- TypeSafeMatcher / TypeSafeDiagnosingMatcher: reject None and candidates
  of the wrong shape as an ordinary mismatch, never a TypeError
- FeatureMatcher: extract a feature from the candidate, match the feature

The diagnosing variants run their combined routine against
NULL_DESCRIPTION when only the boolean is wanted, so a single code path
produces both the outcome and the explanation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from matchkit._description import NULL_DESCRIPTION, to_string

if TYPE_CHECKING:
    from matchkit._description import Description
    from matchkit._types import Matcher


class MatcherError(Exception):
    """Base class for every error raised by matchkit."""


class BaseMatcher[T](ABC):
    """Common base for matchers. Subclasses provide matches and describe_to."""

    __slots__ = ()

    @abstractmethod
    def matches(self, item: T) -> bool: ...

    @abstractmethod
    def describe_to(self, description: Description) -> None: ...

    def describe_mismatch(self, item: T, description: Description) -> None:
        description.append_text("was ").append_value(item)

    def __str__(self) -> str:
        return to_string(self)


class DiagnosingMatcher[T](BaseMatcher[T]):
    """Matcher whose diagnosis is produced while matching."""

    __slots__ = ()

    @abstractmethod
    def _matches(self, item: Any, mismatch_description: Description) -> bool: ...

    def matches(self, item: T) -> bool:
        return self._matches(item, NULL_DESCRIPTION)

    def describe_mismatch(self, item: T, description: Description) -> None:
        self._matches(item, description)


def _describe_unexpected(item: Any, description: Description) -> None:
    if item is None:
        description.append_text("was None")
    else:
        description.append_text(f"was a {type(item).__name__} (")
        description.append_value(item)
        description.append_text(")")


class TypeSafeMatcher[T](BaseMatcher[T]):
    """Only consults matches_safely when the candidate is an expected_type.

    INV: None and wrong-typed candidates never match and never raise.
    """

    __slots__ = ()

    expected_type: ClassVar[type | tuple[type, ...]] = object

    @abstractmethod
    def matches_safely(self, item: T) -> bool: ...

    def describe_mismatch_safely(self, item: T, description: Description) -> None:
        BaseMatcher.describe_mismatch(self, item, description)

    def matches(self, item: Any) -> bool:
        return _accepts(self.expected_type, item) and self.matches_safely(item)

    def describe_mismatch(self, item: Any, description: Description) -> None:
        if _accepts(self.expected_type, item):
            self.describe_mismatch_safely(item, description)
        else:
            _describe_unexpected(item, description)


class TypeSafeDiagnosingMatcher[T](BaseMatcher[T]):
    """Type-safe matcher with a combined match-and-explain routine."""

    __slots__ = ()

    expected_type: ClassVar[type | tuple[type, ...]] = object

    @abstractmethod
    def matches_safely(self, item: T, mismatch_description: Description) -> bool: ...

    def matches(self, item: Any) -> bool:
        return _accepts(self.expected_type, item) and self.matches_safely(
            item, NULL_DESCRIPTION
        )

    def describe_mismatch(self, item: Any, description: Description) -> None:
        if _accepts(self.expected_type, item):
            self.matches_safely(item, description)
        else:
            _describe_unexpected(item, description)


class FeatureMatcher[T, U](TypeSafeDiagnosingMatcher[T]):
    """Match a feature derived from the candidate against sub_matcher.

    Subclasses declare a ``sub_matcher`` field and implement
    feature_value_of. The feature description introduces the expectation
    ("a collection with size <2>"), the feature name introduces the
    diagnosis ("collection size was <3>").
    """

    __slots__ = ()

    feature_description: ClassVar[str]
    feature_name: ClassVar[str]
    sub_matcher: Matcher[U]

    @abstractmethod
    def feature_value_of(self, actual: T) -> U: ...

    def matches_safely(self, item: T, mismatch_description: Description) -> bool:
        value = self.feature_value_of(item)
        if self.sub_matcher.matches(value):
            return True
        mismatch_description.append_text(f"{self.feature_name} ")
        self.sub_matcher.describe_mismatch(value, mismatch_description)
        return False

    def describe_to(self, description: Description) -> None:
        description.append_text(f"{self.feature_description} ").append_description_of(
            self.sub_matcher
        )


def _accepts(expected: type | tuple[type, ...], item: Any) -> bool:
    return item is not None and isinstance(item, expected)
