"""Config types for declarative matcher construction.

A matcher tree can be written as a JSON/YAML-shaped dict and compiled by
a Registry. Construction path:
  dict → parse_matcher_config() → MatcherConfig → Registry.load_matcher() → Matcher

Every node is a dict with a ``type`` discriminant. Wherever a child
matcher is expected, a non-dict literal is shorthand for equal_to:

    {"type": "has_items", "matchers": [3, {"type": "anything"}]}

Relationship to runtime types:

| Config type               | Runtime type                 |
|---------------------------|------------------------------|
| EqualToConfig             | IsEqual                      |
| AnythingConfig            | IsAnything                   |
| AllOfConfig               | AllOf                        |
| IsConfig                  | Is                           |
| DescribedAsConfig         | DescribedAs                  |
| HasSizeConfig             | IsCollectionWithSize         |
| IterableWithSizeConfig    | IsIterableWithSize           |
| ContainsConfig            | IsIterableContainingInOrder  |
| ArrayContainingConfig     | IsArrayContainingInOrder     |
| HasItemConfig             | IsIterableContaining         |
| HasItemsConfig            | AllOf of IsIterableContaining|
| HasEntryConfig            | IsMapContaining              |
| CustomConfig              | registered factory result    |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from matchkit._matcher import MatcherError

# ═══════════════════════════════════════════════════════════════════════════════
# Config types (frozen dataclasses)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TypedConfig:
    """Reference to a registered matcher factory with its configuration."""

    type_url: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class EqualToConfig:
    value: Any


@dataclass(frozen=True, slots=True)
class AnythingConfig:
    description: str = "ANYTHING"


@dataclass(frozen=True, slots=True)
class AllOfConfig:
    matchers: tuple[MatcherConfig, ...]


@dataclass(frozen=True, slots=True)
class IsConfig:
    matcher: MatcherConfig


@dataclass(frozen=True, slots=True)
class DescribedAsConfig:
    template: str
    matcher: MatcherConfig
    values: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class HasSizeConfig:
    size: MatcherConfig


@dataclass(frozen=True, slots=True)
class IterableWithSizeConfig:
    size: MatcherConfig


@dataclass(frozen=True, slots=True)
class ContainsConfig:
    matchers: tuple[MatcherConfig, ...]


@dataclass(frozen=True, slots=True)
class ArrayContainingConfig:
    matchers: tuple[MatcherConfig, ...]


@dataclass(frozen=True, slots=True)
class HasItemConfig:
    matcher: MatcherConfig


@dataclass(frozen=True, slots=True)
class HasItemsConfig:
    matchers: tuple[MatcherConfig, ...]


@dataclass(frozen=True, slots=True)
class HasEntryConfig:
    """Also the target of ``has_key`` / ``has_value`` (other side: anything)."""

    key: MatcherConfig
    value: MatcherConfig


@dataclass(frozen=True, slots=True)
class CustomConfig:
    """Matcher resolved via the registry's matcher factories."""

    typed_config: TypedConfig


type MatcherConfig = (
    EqualToConfig
    | AnythingConfig
    | AllOfConfig
    | IsConfig
    | DescribedAsConfig
    | HasSizeConfig
    | IterableWithSizeConfig
    | ContainsConfig
    | ArrayContainingConfig
    | HasItemConfig
    | HasItemsConfig
    | HasEntryConfig
    | CustomConfig
)

# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(MatcherError):
    """Error parsing a config dict into config types."""


def parse_matcher_config(data: dict[str, Any]) -> MatcherConfig:
    """Parse a dict into a MatcherConfig.

    This is the main entry point for config loading.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    node_type = data.get("type")
    if node_type is None:
        msg = "matcher missing required field 'type'"
        raise ConfigParseError(msg)

    match node_type:
        case "equal_to":
            return EqualToConfig(value=_require(data, "value"))
        case "anything":
            description = data.get("description", "ANYTHING")
            if not isinstance(description, str):
                msg = f"'description' must be a string, got {type(description).__name__}"
                raise ConfigParseError(msg)
            return AnythingConfig(description=description)
        case "all_of":
            return AllOfConfig(matchers=_parse_operands(data, "matchers"))
        case "is":
            return IsConfig(matcher=_parse_operand(_require(data, "matcher")))
        case "described_as":
            return _parse_described_as(data)
        case "has_size":
            return HasSizeConfig(size=_parse_operand(_require(data, "size")))
        case "iterable_with_size":
            return IterableWithSizeConfig(size=_parse_operand(_require(data, "size")))
        case "contains":
            return ContainsConfig(matchers=_parse_operands(data, "matchers"))
        case "array_containing":
            return ArrayContainingConfig(matchers=_parse_operands(data, "matchers"))
        case "has_item":
            return HasItemConfig(matcher=_parse_operand(_require(data, "matcher")))
        case "has_items":
            return HasItemsConfig(matchers=_parse_operands(data, "matchers"))
        case "has_entry":
            return HasEntryConfig(
                key=_parse_operand(_require(data, "key")),
                value=_parse_operand(_require(data, "value")),
            )
        case "has_key":
            return HasEntryConfig(
                key=_parse_operand(_require(data, "key")), value=AnythingConfig()
            )
        case "has_value":
            return HasEntryConfig(
                key=AnythingConfig(), value=_parse_operand(_require(data, "value"))
            )
        case "custom":
            return CustomConfig(typed_config=_parse_typed_config(data))

    msg = f"unknown matcher type: {node_type!r}"
    raise ConfigParseError(msg)


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        msg = f"{data['type']} matcher missing required field {key!r}"
        raise ConfigParseError(msg)
    return data[key]


def _parse_operand(data: Any) -> MatcherConfig:
    """A child matcher: a config dict, or a literal meaning equal_to."""
    if isinstance(data, dict):
        return parse_matcher_config(data)
    return EqualToConfig(value=data)


def _parse_operands(data: dict[str, Any], key: str) -> tuple[MatcherConfig, ...]:
    raw = _require(data, key)
    if not isinstance(raw, list):
        msg = f"{key!r} must be a list, got {type(raw).__name__}"
        raise ConfigParseError(msg)
    return tuple(_parse_operand(item) for item in raw)


def _parse_described_as(data: dict[str, Any]) -> DescribedAsConfig:
    template = _require(data, "template")
    if not isinstance(template, str):
        msg = f"'template' must be a string, got {type(template).__name__}"
        raise ConfigParseError(msg)

    values = data.get("values", [])
    if not isinstance(values, list):
        msg = f"'values' must be a list, got {type(values).__name__}"
        raise ConfigParseError(msg)

    return DescribedAsConfig(
        template=template,
        matcher=_parse_operand(_require(data, "matcher")),
        values=tuple(values),
    )


def _parse_typed_config(data: dict[str, Any]) -> TypedConfig:
    """Parse the type_url/config pair of a custom matcher node."""
    if "type_url" not in data:
        msg = "custom matcher missing required field 'type_url'"
        raise ConfigParseError(msg)

    type_url = data["type_url"]
    if not isinstance(type_url, str):
        msg = f"type_url must be a string, got {type(type_url).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config", {})
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return TypedConfig(type_url=type_url, config=config)
