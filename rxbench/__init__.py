"""rxbench package.

Provides a harness for comparing interchangeable regular-expression
back-ends fairly: a closed registry of implementations, deterministic
fixtures, a correctness gate and a guarded measurement loop. Re-exports the
core types for convenience.

Example:
>>> from rxbench import Implementation, prepare_benchmark, scenario_by_name
>>> prepared = prepare_benchmark(scenario_by_name("literal"), Implementation.RE)
>>> prepared.run_once()
True

"""

from __future__ import annotations

from rxbench.characters import to_lower_case, to_upper_case
from rxbench.harness import (
    CorrectnessError,
    CorrectnessViolationError,
    HarnessError,
    MeasurementInvariantError,
    PreparedBenchmark,
    UnboundedScenarioError,
    check_correctness,
    prepare_benchmark,
    prepare_for_measurement,
    run_measurement_loop,
)
from rxbench.matcher import Matcher
from rxbench.registry import (
    Implementation,
    UnknownImplementationError,
    compile_matcher,
    registered_implementations,
)
from rxbench.scenarios import (
    DEFAULT_SCENARIOS,
    BenchmarkScenario,
    InputKind,
    scenario_by_name,
)
from rxbench.selection import get_selected_implementations

PACKAGE_NAME = "rxbench"

__all__ = [
    "DEFAULT_SCENARIOS",
    "PACKAGE_NAME",
    "BenchmarkScenario",
    "CorrectnessError",
    "CorrectnessViolationError",
    "HarnessError",
    "Implementation",
    "InputKind",
    "Matcher",
    "MeasurementInvariantError",
    "PreparedBenchmark",
    "UnboundedScenarioError",
    "UnknownImplementationError",
    "check_correctness",
    "compile_matcher",
    "get_selected_implementations",
    "prepare_benchmark",
    "prepare_for_measurement",
    "registered_implementations",
    "run_measurement_loop",
    "scenario_by_name",
    "to_lower_case",
    "to_upper_case",
]
