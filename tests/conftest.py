"""Conformance fixture loader for matchkit.

Loads YAML fixtures from tests/fixtures/ and compiles each matcher config
through the registry, pairing it with candidates and the exact
description and mismatch text they must produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from matchkit import Registry, RegistryBuilder, parse_matcher_config
from matchkit.testing import register

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class ConformanceCase:
    """A single candidate from a conformance fixture."""

    fixture_name: str
    case_name: str
    matcher: Any
    description: str
    value: Any
    matches: bool
    mismatch: str | None


def make_registry() -> Registry:
    """Registry with the testing domain (Mismatchable) registered."""
    return register(RegistryBuilder()).build()


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_conformance_cases() -> list[ConformanceCase]:
    """Load every case from every fixture file, in file order."""
    registry = make_registry()
    cases: list[ConformanceCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file, registry))
    return cases


def _load_file(path: Path, registry: Registry) -> list[ConformanceCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[ConformanceCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            matcher = registry.load_matcher(parse_matcher_config(doc["matcher"]))
            for case in doc["cases"]:
                cases.append(
                    ConformanceCase(
                        fixture_name=f"{path.stem}::{doc['name']}",
                        case_name=case["name"],
                        matcher=matcher,
                        description=doc["description"],
                        value=case["value"],
                        matches=case["matches"],
                        mismatch=case.get("mismatch"),
                    )
                )
    return cases
