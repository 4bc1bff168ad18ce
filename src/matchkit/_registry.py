"""Type registry for config-driven matcher construction.

The registry compiles MatcherConfig trees into runtime matchers. Built-in
node types map straight onto the factory functions; ``custom`` nodes are
resolved through factories registered by type URL:

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (config: dict) → Matcher
- load_matcher() walks the config tree and constructs runtime matchers

Example::

    builder = RegistryBuilder()
    builder.matcher("acme.v1.Even", lambda cfg: EvenMatcher())
    registry = builder.build()

    matcher = registry.load_matcher(parse_matcher_config(yaml_data))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from matchkit._combinators import AllOf, DescribedAs, Is
from matchkit._config import (
    AllOfConfig,
    AnythingConfig,
    ArrayContainingConfig,
    ContainsConfig,
    CustomConfig,
    DescribedAsConfig,
    EqualToConfig,
    HasEntryConfig,
    HasItemConfig,
    HasItemsConfig,
    HasSizeConfig,
    IsConfig,
    IterableWithSizeConfig,
    parse_matcher_config,
)
from matchkit._mapping import IsMapContaining
from matchkit._matcher import MatcherError
from matchkit._primitives import IsAnything, IsEqual
from matchkit._sequence import (
    IsArrayContainingInOrder,
    IsIterableContaining,
    IsIterableContainingEvery,
    IsIterableContainingInOrder,
)
from matchkit._size import IsCollectionWithSize, IsIterableWithSize
from matchkit._types import is_matcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from matchkit._config import MatcherConfig
    from matchkit._types import Matcher

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_DEPTH = 32
MAX_MATCHERS_PER_COMPOUND = 256

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownTypeUrlError(MatcherError):
    """A custom type_url was not found in the registry."""

    def __init__(self, type_url: str, available: list[str]) -> None:
        self.type_url = type_url
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown matcher type_url: {type_url!r} (registered: {registered})"
        else:
            msg = (
                f"unknown matcher type_url: {type_url!r} "
                f"(no matcher types are registered)"
            )
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyMatchersError(MatcherError):
    """A compound node has too many children (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many matchers in compound: {count} exceeds maximum {max_}")


class DepthExceededError(MatcherError):
    """The config tree nests deeper than MAX_DEPTH."""

    def __init__(self, depth: int, max_: int) -> None:
        self.depth = depth
        self.max = max_
        super().__init__(f"matcher depth {depth} exceeds maximum allowed depth {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type MatcherFactory = Callable[[dict[str, Any]], Matcher[Any]]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register custom matcher factories with type URLs, then call build() to
    produce an immutable Registry.
    """

    def __init__(self) -> None:
        self._matcher_factories: dict[str, MatcherFactory] = {}

    def matcher(self, type_url: str, factory: MatcherFactory) -> RegistryBuilder:
        """Register a matcher factory with a type URL."""
        self._matcher_factories[type_url] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        logger.debug(
            "building matcher registry with %d custom type(s)",
            len(self._matcher_factories),
        )
        return Registry(
            _matcher_factories=MappingProxyType(dict(self._matcher_factories)),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of custom matcher factories.

    Constructed via RegistryBuilder. An empty Registry still loads every
    built-in node type.
    """

    _matcher_factories: MappingProxyType[str, MatcherFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_matcher(self, config: MatcherConfig) -> Matcher[Any]:
        """Build a runtime matcher from configuration.

        Raises:
            UnknownTypeUrlError: custom type_url not registered
            InvalidConfigError: a custom factory rejected its config
            TooManyMatchersError: a compound node has too many children
            DepthExceededError: the tree nests deeper than MAX_DEPTH
        """
        matcher = self._load(config, 1)
        logger.debug("loaded matcher: %s", type(matcher).__name__)
        return matcher

    @property
    def matcher_count(self) -> int:
        """Number of registered custom matcher types."""
        return len(self._matcher_factories)

    def contains_matcher(self, type_url: str) -> bool:
        """Check if a matcher type URL is registered."""
        return type_url in self._matcher_factories

    def matcher_type_urls(self) -> list[str]:
        """Return all registered matcher type URLs (sorted)."""
        return sorted(self._matcher_factories.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _load(self, config: MatcherConfig, depth: int) -> Matcher[Any]:
        if depth > MAX_DEPTH:
            raise DepthExceededError(depth, MAX_DEPTH)
        child = depth + 1

        match config:
            case EqualToConfig(value=value):
                return IsEqual(value)
            case AnythingConfig(description=text):
                return IsAnything(text)
            case AllOfConfig(matchers=children):
                return AllOf(self._load_all(children, child))
            case IsConfig(matcher=inner):
                return Is(self._load(inner, child))
            case DescribedAsConfig(template=template, matcher=inner, values=values):
                return DescribedAs(template, self._load(inner, child), values)
            case HasSizeConfig(size=size):
                return IsCollectionWithSize(self._load(size, child))
            case IterableWithSizeConfig(size=size):
                return IsIterableWithSize(self._load(size, child))
            case ContainsConfig(matchers=children):
                return IsIterableContainingInOrder(self._load_all(children, child))
            case ArrayContainingConfig(matchers=children):
                return IsArrayContainingInOrder(self._load_all(children, child))
            case HasItemConfig(matcher=inner):
                return IsIterableContaining(self._load(inner, child))
            case HasItemsConfig(matchers=children):
                # one membership check per item, one level below
                items = self._load_all(children, child + 1)
                return IsIterableContainingEvery(items)
            case HasEntryConfig(key=key, value=value):
                return IsMapContaining(self._load(key, child), self._load(value, child))
            case CustomConfig(typed_config=tc):
                return self._load_custom(tc.type_url, tc.config)
            case _:  # pragma: no cover
                msg = f"unknown matcher config type: {type(config).__name__}"
                raise InvalidConfigError(msg)

    def _load_all(
        self, children: tuple[MatcherConfig, ...], depth: int
    ) -> tuple[Matcher[Any], ...]:
        if len(children) > MAX_MATCHERS_PER_COMPOUND:
            raise TooManyMatchersError(len(children), MAX_MATCHERS_PER_COMPOUND)
        return tuple(self._load(c, depth) for c in children)

    def _load_custom(self, type_url: str, config: dict[str, Any]) -> Matcher[Any]:
        factory = self._matcher_factories.get(type_url)
        if factory is None:
            raise UnknownTypeUrlError(type_url, list(self._matcher_factories.keys()))
        try:
            matcher = factory(config)
        except Exception as e:
            raise InvalidConfigError(str(e)) from e
        if not is_matcher(matcher):
            msg = f"factory for {type_url!r} returned {type(matcher).__name__}, not a matcher"
            raise InvalidConfigError(msg)
        return matcher


def load_matcher(data: dict[str, Any], registry: Registry | None = None) -> Matcher[Any]:
    """Parse ``data`` and build it with ``registry`` (built-ins only if None)."""
    return (registry or Registry()).load_matcher(parse_matcher_config(data))
