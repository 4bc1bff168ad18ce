"""Conformance tests for matchkit.

Every fixture in tests/fixtures/ is compiled through the config path and
checked for its outcome, its description, and its exact mismatch text.

Run with: uv run pytest tests/test_conformance.py -v
"""

from __future__ import annotations

import pytest
from conftest import ConformanceCase, load_conformance_cases

from matchkit import StringDescription

CASES = load_conformance_cases()


def _case_id(case: ConformanceCase) -> str:
    return f"{case.fixture_name}::{case.case_name}"


class TestConformance:
    def test_fixtures_were_found(self) -> None:
        assert len(CASES) > 0

    @pytest.mark.parametrize("case", CASES, ids=_case_id)
    def test_outcome(self, case: ConformanceCase) -> None:
        assert case.matcher.matches(case.value) is case.matches

    @pytest.mark.parametrize("case", CASES, ids=_case_id)
    def test_description(self, case: ConformanceCase) -> None:
        assert StringDescription.to_string(case.matcher) == case.description

    @pytest.mark.parametrize(
        "case", [c for c in CASES if not c.matches], ids=_case_id
    )
    def test_mismatch(self, case: ConformanceCase) -> None:
        description = StringDescription()
        case.matcher.describe_mismatch(case.value, description)
        assert str(description) == case.mismatch
