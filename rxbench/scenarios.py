"""Benchmark scenario definitions and the default scenario catalogue.

A scenario pairs a pattern with an input-selection strategy and the boolean
result every correct back-end must produce. Scenarios are immutable and
validated on construction, so a malformed definition fails at import time
rather than part-way through a run.

Examples
--------
>>> scenario = scenario_by_name("literal")
>>> scenario.pattern, scenario.expect_match
('.*y', True)
>>> scenario_by_name("anchored-long-match").input_kind
<InputKind.LONG_DATA: 'long-data'>
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from rxbench.fixtures import (
    ALPHABET,
    IN_RANGE_INPUT,
    LITERAL_INPUT,
    MATCH_CLASS_INPUT,
    PATHOLOGICAL_INPUT,
    long_data,
)


class InputKind(enum.StrEnum):
    """How a scenario obtains its input text.

    Members
    -------
    LITERAL
        A short fixed string stored on the scenario.
    LONG_DATA
        The shared generated alphabet corpus from :mod:`rxbench.fixtures`.
    """

    LITERAL = "literal"
    LONG_DATA = "long-data"


class BenchmarkScenarioDict(typ.TypedDict):
    """Serialisable summary of a benchmark scenario."""

    name: str
    pattern: str
    expect_match: bool
    input_kind: str
    input_length: int
    adversarial: bool


@dc.dataclass(frozen=True, slots=True)
class BenchmarkScenario:
    """Describe one (pattern, input, expected result) benchmark case.

    Parameters
    ----------
    name:
        Unique human-readable scenario name.
    pattern:
        Regular-expression source compiled by each back-end.
    expect_match:
        Whether the pattern must fully match the scenario input.
    input_kind:
        Input-selection strategy.
    literal:
        Fixed input text; required for ``InputKind.LITERAL`` and forbidden
        otherwise.
    adversarial:
        Whether the scenario triggers exponential behaviour in backtracking
        engines.

    Raises
    ------
    TypeError
        If a boolean field is not a ``bool``.
    ValueError
        If ``name`` or ``pattern`` is empty, or ``literal`` does not agree
        with ``input_kind``.
    """

    name: str
    pattern: str
    expect_match: bool
    input_kind: InputKind = InputKind.LITERAL
    literal: str | None = None
    adversarial: bool = False

    def __post_init__(self) -> None:
        """Validate scenario values before any compilation happens."""
        _validate_non_empty_string(self.name, name="name")
        _validate_non_empty_string(self.pattern, name="pattern")
        _validate_bool(self.expect_match, name="expect_match")
        _validate_bool(self.adversarial, name="adversarial")
        _validate_input(self.input_kind, self.literal)

    @property
    def text(self) -> str:
        """Return the input text this scenario is evaluated against."""
        if self.input_kind is InputKind.LONG_DATA:
            return long_data()
        return typ.cast("str", self.literal)

    def as_dict(self) -> BenchmarkScenarioDict:
        """Convert the scenario into a JSON-serialisable mapping.

        The generated corpus is summarised by its length rather than copied.

        Examples
        --------
        >>> scenario_by_name("literal").as_dict()["input_length"]
        51
        """
        return {
            "name": self.name,
            "pattern": self.pattern,
            "expect_match": self.expect_match,
            "input_kind": self.input_kind.value,
            "input_length": len(self.text),
            "adversarial": self.adversarial,
        }


def _validate_non_empty_string(value: object, *, name: str) -> str:
    """Validate non-empty string values."""
    if not isinstance(value, str) or not value.strip():
        msg = f"{name} must be a non-empty string"
        raise ValueError(msg)
    return value


def _validate_bool(value: object, *, name: str) -> bool:
    """Validate boolean values."""
    if not isinstance(value, bool):
        msg = f"{name} must be a bool, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _validate_input(input_kind: object, literal: object) -> None:
    """Validate that the literal agrees with the input-selection strategy."""
    if not isinstance(input_kind, InputKind):
        valid = sorted(kind.value for kind in InputKind)
        msg = f"input_kind must be one of {valid}, got {input_kind!r}"
        raise ValueError(msg)
    if input_kind is InputKind.LITERAL and not isinstance(literal, str):
        msg = "literal must be a string when input_kind is 'literal'"
        raise ValueError(msg)
    if input_kind is not InputKind.LITERAL and literal is not None:
        msg = f"literal must be None when input_kind is {input_kind.value!r}"
        raise ValueError(msg)


# See http://swtch.com/~rsc/regexp/regexp1.html.
PATHOLOGICAL_BACKTRACKING = BenchmarkScenario(
    name="pathological-backtracking",
    pattern="a?" * 24 + "a" * 24,
    expect_match=True,
    literal=PATHOLOGICAL_INPUT,
    adversarial=True,
)
LITERAL = BenchmarkScenario(
    name="literal",
    pattern=".*y",
    expect_match=True,
    literal=LITERAL_INPUT,
)
NOT_LITERAL = BenchmarkScenario(
    name="not-literal",
    pattern=".*.y",
    expect_match=True,
    literal=LITERAL_INPUT,
)
MATCH_CLASS = BenchmarkScenario(
    name="match-class",
    pattern=".*[abcdw]",
    expect_match=True,
    literal=MATCH_CLASS_INPUT,
)
MATCH_CLASS_IN_RANGE = BenchmarkScenario(
    name="match-class-in-range",
    pattern=".*[ac]",
    expect_match=True,
    literal=IN_RANGE_INPUT,
)
ANCHORED_LITERAL_SHORT_NON_MATCH = BenchmarkScenario(
    name="anchored-literal-short-non-match",
    pattern="zbc(d|e).*",
    expect_match=False,
    literal=ALPHABET,
)
ANCHORED_LITERAL_LONG_NON_MATCH = BenchmarkScenario(
    name="anchored-literal-long-non-match",
    pattern="zbc(d|e).*",
    expect_match=False,
    input_kind=InputKind.LONG_DATA,
)
ANCHORED_SHORT_MATCH = BenchmarkScenario(
    name="anchored-short-match",
    pattern=".bc(d|e).*",
    expect_match=True,
    literal=ALPHABET,
)
ANCHORED_LONG_MATCH = BenchmarkScenario(
    name="anchored-long-match",
    pattern=".bc(d|e).*",
    expect_match=True,
    input_kind=InputKind.LONG_DATA,
)

DEFAULT_SCENARIOS: typ.Final[tuple[BenchmarkScenario, ...]] = (
    PATHOLOGICAL_BACKTRACKING,
    LITERAL,
    NOT_LITERAL,
    MATCH_CLASS,
    MATCH_CLASS_IN_RANGE,
    ANCHORED_LITERAL_SHORT_NON_MATCH,
    ANCHORED_LITERAL_LONG_NON_MATCH,
    ANCHORED_SHORT_MATCH,
    ANCHORED_LONG_MATCH,
)

_SCENARIOS_BY_NAME: typ.Final[dict[str, BenchmarkScenario]] = {
    scenario.name: scenario for scenario in DEFAULT_SCENARIOS
}


def scenario_by_name(name: str) -> BenchmarkScenario:
    """Return the default scenario called ``name``.

    Raises
    ------
    KeyError
        If no default scenario has that name.
    """
    try:
        return _SCENARIOS_BY_NAME[name]
    except KeyError:
        valid = ", ".join(_SCENARIOS_BY_NAME)
        msg = f"unknown scenario {name!r}; expected one of: {valid}"
        raise KeyError(msg) from None


__all__ = [
    "ANCHORED_LITERAL_LONG_NON_MATCH",
    "ANCHORED_LITERAL_SHORT_NON_MATCH",
    "ANCHORED_LONG_MATCH",
    "ANCHORED_SHORT_MATCH",
    "DEFAULT_SCENARIOS",
    "LITERAL",
    "MATCH_CLASS",
    "MATCH_CLASS_IN_RANGE",
    "NOT_LITERAL",
    "PATHOLOGICAL_BACKTRACKING",
    "BenchmarkScenario",
    "BenchmarkScenarioDict",
    "InputKind",
    "scenario_by_name",
]
