"""Core protocols for matchkit.

Every matcher exposes the same three operations, so composites hold
children typed as the protocol rather than as concrete classes:
- matches: the boolean outcome for a candidate
- describe_to: the expected-behavior text
- describe_mismatch: why a rejected candidate failed
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from matchkit._description import Description

T = TypeVar("T", contravariant=True)


@runtime_checkable
class SelfDescribing(Protocol):
    """Anything that can render itself into a Description."""

    def describe_to(self, description: Description, /) -> None: ...


@runtime_checkable
class Matcher(Protocol[T]):
    """Match a candidate value and explain the outcome.

    describe_mismatch is only meaningful when matches() returned False for
    the same candidate. Callers (assertion code) guard this.
    """

    def matches(self, item: T, /) -> bool: ...

    def describe_to(self, description: Description, /) -> None: ...

    def describe_mismatch(self, item: T, description: Description, /) -> None: ...


def is_matcher(obj: Any) -> bool:
    """True when obj is a matcher instance (classes themselves never are)."""
    return not isinstance(obj, type) and isinstance(obj, Matcher)
