"""matchkit — composable value matchers with readable failure diagnostics.

All public types are exported from this module for flat imports:

    from matchkit import all_of, has_entry, has_items, has_size, to_string
"""

__version__ = "0.1.0"

# Protocols
from matchkit._types import Matcher, SelfDescribing, is_matcher

# Description sinks
from matchkit._description import (
    NULL_DESCRIPTION,
    Description,
    NullDescription,
    StringDescription,
    to_string,
)

# Base classes
from matchkit._matcher import (
    BaseMatcher,
    DiagnosingMatcher,
    FeatureMatcher,
    MatcherError,
    TypeSafeDiagnosingMatcher,
    TypeSafeMatcher,
)

# Primitives
from matchkit._primitives import (
    IsAnything,
    IsEqual,
    IsInstanceOf,
    anything,
    equal_to,
    instance_of,
    wrap_matcher,
)

# Combinators
from matchkit._combinators import (
    AllOf,
    DescribedAs,
    DescriptionTemplateError,
    Is,
    all_of,
    described_as,
    is_,
    is_a,
)

# Feature extraction
from matchkit._size import (
    IsCollectionWithSize,
    IsIterableWithSize,
    has_size,
    iterable_with_size,
)

# Containers
from matchkit._sequence import (
    IsArrayContainingInOrder,
    IsIterableContaining,
    IsIterableContainingEvery,
    IsIterableContainingInOrder,
    array_containing,
    contains,
    has_item,
    has_items,
)
from matchkit._mapping import IsMapContaining, has_entry, has_key, has_value

# Config types — see matchkit._config for details
from matchkit._config import (
    AllOfConfig,
    AnythingConfig,
    ArrayContainingConfig,
    ConfigParseError,
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
    MatcherConfig,
    TypedConfig,
    parse_matcher_config,
)

# Registry — see matchkit._registry for details
from matchkit._registry import (
    MAX_DEPTH,
    MAX_MATCHERS_PER_COMPOUND,
    DepthExceededError,
    InvalidConfigError,
    Registry,
    RegistryBuilder,
    TooManyMatchersError,
    UnknownTypeUrlError,
    load_matcher,
)

__all__ = [
    # Protocols
    "Matcher",
    "SelfDescribing",
    "is_matcher",
    # Description sinks
    "Description",
    "StringDescription",
    "NullDescription",
    "NULL_DESCRIPTION",
    "to_string",
    # Base classes
    "BaseMatcher",
    "DiagnosingMatcher",
    "TypeSafeMatcher",
    "TypeSafeDiagnosingMatcher",
    "FeatureMatcher",
    "MatcherError",
    # Primitives
    "IsEqual",
    "IsAnything",
    "IsInstanceOf",
    "equal_to",
    "anything",
    "instance_of",
    "wrap_matcher",
    # Combinators
    "AllOf",
    "Is",
    "DescribedAs",
    "DescriptionTemplateError",
    "all_of",
    "is_",
    "is_a",
    "described_as",
    # Feature extraction
    "IsCollectionWithSize",
    "IsIterableWithSize",
    "has_size",
    "iterable_with_size",
    # Containers
    "IsIterableContainingInOrder",
    "IsArrayContainingInOrder",
    "IsIterableContaining",
    "IsIterableContainingEvery",
    "IsMapContaining",
    "contains",
    "array_containing",
    "has_item",
    "has_items",
    "has_entry",
    "has_key",
    "has_value",
    # Config types
    "MatcherConfig",
    "TypedConfig",
    "EqualToConfig",
    "AnythingConfig",
    "AllOfConfig",
    "IsConfig",
    "DescribedAsConfig",
    "HasSizeConfig",
    "IterableWithSizeConfig",
    "ContainsConfig",
    "ArrayContainingConfig",
    "HasItemConfig",
    "HasItemsConfig",
    "HasEntryConfig",
    "CustomConfig",
    "ConfigParseError",
    "parse_matcher_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "load_matcher",
    "UnknownTypeUrlError",
    "InvalidConfigError",
    "TooManyMatchersError",
    "DepthExceededError",
    "MAX_DEPTH",
    "MAX_MATCHERS_PER_COMPOUND",
]
