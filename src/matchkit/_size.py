"""Size matchers — feature extraction over aggregates.

Both delegate the count to a nested matcher, so diagnostics are entirely
shaped by it: ``collection size was <3>``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from matchkit._matcher import FeatureMatcher
from matchkit._primitives import wrap_matcher

if TYPE_CHECKING:
    from matchkit._types import Matcher


@dataclass(frozen=True, slots=True)
class IsCollectionWithSize(FeatureMatcher[Sized, int]):
    """Size of anything supporting len(), read in O(1)."""

    sub_matcher: Matcher[int]

    expected_type = Sized
    feature_description = "a collection with size"
    feature_name = "collection size"

    def feature_value_of(self, actual: Sized) -> int:
        return len(actual)


@dataclass(frozen=True, slots=True)
class IsIterableWithSize(FeatureMatcher[Iterable[Any], int]):
    """Item count from a single forward pass over the candidate.

    The exhausted iterator is discarded; only the count is matched.
    """

    sub_matcher: Matcher[int]

    expected_type = Iterable
    feature_description = "an iterable with size"
    feature_name = "iterable size"

    def feature_value_of(self, actual: Iterable[Any]) -> int:
        return sum(1 for _ in actual)


def has_size(size: int | Matcher[int]) -> IsCollectionWithSize:
    """Match sized collections whose len() satisfies ``size``.

    ``size`` is an int (equality) or a matcher over the length.
    """
    return IsCollectionWithSize(wrap_matcher(size))


def iterable_with_size(size: int | Matcher[int]) -> IsIterableWithSize:
    """Match iterables yielding a number of items that satisfies ``size``."""
    return IsIterableWithSize(wrap_matcher(size))
