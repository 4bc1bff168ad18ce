"""Composite matchers — conjunction and decorating wrappers.

AllOf evaluates its children in order and stops at the first rejection.
Is and DescribedAs forward matching and mismatch reporting to a single
child and only change the positive description.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import re2

from matchkit._matcher import BaseMatcher, DiagnosingMatcher, MatcherError
from matchkit._primitives import instance_of, wrap_matcher

if TYPE_CHECKING:
    from matchkit._description import Description
    from matchkit._types import Matcher

# %0, %1, ... in described_as templates
_ARG_PATTERN = re2.compile(r"%([0-9]+)")


class DescriptionTemplateError(MatcherError, IndexError):
    """A described_as placeholder refers past the end of its values."""

    def __init__(self, template: str, index: int, count: int) -> None:
        self.template = template
        self.index = index
        self.count = count
        super().__init__(
            f"placeholder %{index} in {template!r} has no value "
            f"({count} value(s) supplied)"
        )


@dataclass(frozen=True, slots=True)
class AllOf[T](DiagnosingMatcher[T]):
    """Every child must match (logical AND).

    Short-circuits on the first rejecting child; later children are never
    evaluated. The mismatch names only that first failing child. Empty
    AllOf matches everything (vacuous truth).
    """

    matchers: tuple[Matcher[T], ...]

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        for matcher in self.matchers:
            if not matcher.matches(item):
                mismatch_description.append_description_of(matcher).append_text(" ")
                matcher.describe_mismatch(item, mismatch_description)
                return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " and ", ")", self.matchers)


@dataclass(frozen=True, slots=True)
class Is[T](BaseMatcher[T]):
    """Prefixes the child's description with "is "; otherwise transparent."""

    matcher: Matcher[T]

    def matches(self, item: Any) -> bool:
        return self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("is ").append_description_of(self.matcher)

    def describe_mismatch(self, item: Any, description: Description) -> None:
        self.matcher.describe_mismatch(item, description)


@dataclass(frozen=True, slots=True)
class DescribedAs[T](BaseMatcher[T]):
    """Replaces the child's description with a templated one.

    ``%N`` in the template is replaced by ``values[N]`` rendered with
    append_value. The mismatch text still comes from the child.
    """

    template: str
    matcher: Matcher[T]
    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        # described_as and the config path pass tuples; direct construction may not
        object.__setattr__(self, "values", tuple(self.values))

    def matches(self, item: Any) -> bool:
        return self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        text_start = 0
        for arg in _ARG_PATTERN.finditer(self.template):
            index = int(arg.group(1))
            if index >= len(self.values):
                raise DescriptionTemplateError(self.template, index, len(self.values))
            description.append_text(self.template[text_start : arg.start()])
            description.append_value(self.values[index])
            text_start = arg.end()
        if text_start < len(self.template):
            description.append_text(self.template[text_start:])

    def describe_mismatch(self, item: Any, description: Description) -> None:
        self.matcher.describe_mismatch(item, description)


def all_of(*matchers: Any) -> AllOf[Any]:
    """Match when every given matcher matches; literals mean equal_to."""
    return AllOf(tuple(wrap_matcher(m) for m in matchers))


def is_(matcher_or_value: Any) -> Is[Any]:
    """Decorate a matcher with "is ", or test equality against a literal.

    ``is_(equal_to(x))`` and ``is_(x)`` are equivalent.
    """
    return Is(wrap_matcher(matcher_or_value))


def is_a(expected_type: type) -> Is[Any]:
    """Shortcut for ``is_(instance_of(expected_type))``."""
    return Is(instance_of(expected_type))


def described_as[T](template: str, matcher: Matcher[T], *values: Any) -> DescribedAs[T]:
    """Override ``matcher``'s description with ``template``.

    >>> from matchkit import described_as, equal_to, to_string
    >>> to_string(described_as("the answer %0", equal_to(42), 42))
    'the answer <42>'
    """
    return DescribedAs(template, matcher, values)
