"""Repetition plans and the timed call shared by the regex microbenchmarks.

A plan fixes how many loop iterations make up one timed round (``nreps``)
and how many rounds pytest-benchmark collects. Adversarial scenarios on
engines without a linear-time guarantee get a single iteration and a small
round count, so they are measured rather than skipped while staying bounded.

Examples
--------
>>> from benchmarks._measurement_plan import loop_plan
>>> from rxbench import Implementation, scenario_by_name
>>> loop_plan(scenario_by_name("literal"), Implementation.RE2).nreps
1000
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from rxbench.harness import prepare_for_measurement
from rxbench.registry import implementation_spec
from rxbench.scenarios import InputKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from rxbench.harness import PreparedBenchmark
    from rxbench.registry import Implementation
    from rxbench.scenarios import BenchmarkScenario

SHORT_INPUT_NREPS = 1000
LONG_DATA_NREPS = 10
DEFAULT_ROUNDS = 20
UNBOUNDED_NREPS = 1
UNBOUNDED_ROUNDS = 3


class PedanticBenchmark(typ.Protocol):
    """The slice of pytest-benchmark's fixture used to time a loop."""

    def pedantic(
        self,
        target: cabc.Callable[..., object],
        args: tuple[object, ...] = (),
        kwargs: dict[str, object] | None = None,
        setup: cabc.Callable[[], object] | None = None,
        rounds: int = 1,
    ) -> object: ...


@dc.dataclass(frozen=True, slots=True)
class LoopPlan:
    """Iterations per timed round and the number of rounds to collect."""

    nreps: int
    rounds: int

    def __post_init__(self) -> None:
        if self.nreps < 1:
            msg = f"nreps must be >= 1, got {self.nreps}"
            raise ValueError(msg)
        if self.rounds < 1:
            msg = f"rounds must be >= 1, got {self.rounds}"
            raise ValueError(msg)


def loop_plan(
    scenario: BenchmarkScenario,
    implementation: Implementation | str,
) -> LoopPlan:
    """Return the repetition plan for one scenario and back-end pairing."""
    if scenario.adversarial and not implementation_spec(implementation).linear_time:
        return LoopPlan(nreps=UNBOUNDED_NREPS, rounds=UNBOUNDED_ROUNDS)
    if scenario.input_kind is InputKind.LONG_DATA:
        return LoopPlan(nreps=LONG_DATA_NREPS, rounds=DEFAULT_ROUNDS)
    return LoopPlan(nreps=SHORT_INPUT_NREPS, rounds=DEFAULT_ROUNDS)


def time_measurement_loop(
    benchmark: PedanticBenchmark,
    prepared: PreparedBenchmark,
    plan: LoopPlan,
) -> None:
    """Time ``plan.rounds`` guarded loops of ``plan.nreps`` iterations each.

    The preparation hook runs as each round's untimed setup, immediately
    before that round's loop, so it is not repeated inside the timed call.
    """
    benchmark.pedantic(
        prepared.measure,
        args=(plan.nreps,),
        kwargs={"prepare": None},
        setup=prepare_for_measurement,
        rounds=plan.rounds,
    )


__all__ = [
    "DEFAULT_ROUNDS",
    "LONG_DATA_NREPS",
    "SHORT_INPUT_NREPS",
    "UNBOUNDED_NREPS",
    "UNBOUNDED_ROUNDS",
    "LoopPlan",
    "PedanticBenchmark",
    "loop_plan",
    "time_measurement_loop",
]
