"""Unit tests for benchmark scenario definitions."""

from __future__ import annotations

import json

import pytest

from rxbench.fixtures import LONG_DATA_LENGTH, long_data
from rxbench.scenarios import (
    DEFAULT_SCENARIOS,
    BenchmarkScenario,
    InputKind,
    scenario_by_name,
)


@pytest.mark.parametrize(
    ("name", "pattern", "text", "expected"),
    [
        (
            "literal",
            ".*y",
            "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxy",
            True,
        ),
        (
            "not-literal",
            ".*.y",
            "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxy",
            True,
        ),
        (
            "anchored-literal-short-non-match",
            "zbc(d|e).*",
            "abcdefghijklmnopqrstuvwxyz",
            False,
        ),
        (
            "anchored-short-match",
            ".bc(d|e).*",
            "abcdefghijklmnopqrstuvwxyz",
            True,
        ),
        (
            "pathological-backtracking",
            "a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?a?aaaaaaaaaaaaaaaaaaaaaaaa",
            "aaaaaaaaaaaaaaaaaaaaaaaa",
            True,
        ),
    ],
)
def test_literal_scenarios_match_their_definitions(
    name: str,
    pattern: str,
    text: str,
    expected: bool,  # noqa: FBT001
) -> None:
    """Catalogue entries carry the exact pattern, input and expectation."""
    scenario = scenario_by_name(name)

    assert scenario.pattern == pattern
    assert scenario.text == text
    assert scenario.expect_match is expected
    assert scenario.input_kind is InputKind.LITERAL


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("anchored-literal-long-non-match", False),
        ("anchored-long-match", True),
    ],
)
def test_long_scenarios_use_shared_corpus(name: str, expected: bool) -> None:  # noqa: FBT001
    """Long-data scenarios read the memoised corpus rather than a copy."""
    scenario = scenario_by_name(name)

    assert scenario.input_kind is InputKind.LONG_DATA
    assert scenario.literal is None
    assert scenario.text is long_data()
    assert scenario.expect_match is expected


def test_default_scenario_names_are_unique() -> None:
    """Scenario names identify catalogue entries unambiguously."""
    names = [scenario.name for scenario in DEFAULT_SCENARIOS]

    assert len(names) == len(set(names)) == 9


def test_only_pathological_scenario_is_adversarial() -> None:
    """Exactly one default scenario is flagged as adversarial."""
    adversarial = [s.name for s in DEFAULT_SCENARIOS if s.adversarial]

    assert adversarial == ["pathological-backtracking"]


def test_scenario_by_name_rejects_unknown_names() -> None:
    """Unknown scenario names raise KeyError listing the valid names."""
    with pytest.raises(KeyError, match="unknown scenario 'bogus'"):
        scenario_by_name("bogus")


def test_as_dict_summarises_long_input() -> None:
    """The serialised form reports corpus length and is JSON-encodable."""
    payload = scenario_by_name("anchored-long-match").as_dict()

    assert payload == {
        "name": "anchored-long-match",
        "pattern": ".bc(d|e).*",
        "expect_match": True,
        "input_kind": "long-data",
        "input_length": LONG_DATA_LENGTH,
        "adversarial": False,
    }
    assert json.loads(json.dumps(payload)) == payload


def test_scenarios_are_immutable() -> None:
    """Scenarios are frozen once constructed."""
    scenario = scenario_by_name("literal")

    with pytest.raises(AttributeError):
        scenario.pattern = ".*"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "error", "error_match"),
    [
        pytest.param(
            {"name": "", "pattern": ".*", "expect_match": True, "literal": "x"},
            ValueError,
            "name must be a non-empty string",
            id="empty_name",
        ),
        pytest.param(
            {"name": "s", "pattern": "  ", "expect_match": True, "literal": "x"},
            ValueError,
            "pattern must be a non-empty string",
            id="blank_pattern",
        ),
        pytest.param(
            {"name": "s", "pattern": ".*", "expect_match": 1, "literal": "x"},
            TypeError,
            "expect_match must be a bool",
            id="int_expect_match",
        ),
        pytest.param(
            {
                "name": "s",
                "pattern": ".*",
                "expect_match": True,
                "literal": "x",
                "adversarial": "yes",
            },
            TypeError,
            "adversarial must be a bool",
            id="str_adversarial",
        ),
        pytest.param(
            {"name": "s", "pattern": ".*", "expect_match": True},
            ValueError,
            "literal must be a string",
            id="missing_literal",
        ),
        pytest.param(
            {
                "name": "s",
                "pattern": ".*",
                "expect_match": True,
                "input_kind": InputKind.LONG_DATA,
                "literal": "x",
            },
            ValueError,
            "literal must be None",
            id="literal_with_long_data",
        ),
        pytest.param(
            {
                "name": "s",
                "pattern": ".*",
                "expect_match": True,
                "input_kind": "random",
                "literal": "x",
            },
            ValueError,
            "input_kind must be one of",
            id="invalid_input_kind",
        ),
    ],
)
def test_scenario_validation(
    kwargs: dict[str, object],
    error: type[Exception],
    error_match: str,
) -> None:
    """Invalid scenario definitions fail at construction time."""
    with pytest.raises(error, match=error_match):
        BenchmarkScenario(**kwargs)  # type: ignore[arg-type]
