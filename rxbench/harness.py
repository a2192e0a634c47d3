"""Compile, verify and repeatedly run matchers for benchmark scenarios.

The phases for a single (scenario, implementation) pairing always run in
order: compile, correctness gate, then measurement. Measurement is only
reachable through a :class:`PreparedBenchmark`, which exists only once the
gate has passed.

Example
-------
prepared = prepare_benchmark(scenario_by_name("literal"), Implementation.RE2)
prepared.measure(1000)
"""

from __future__ import annotations

import dataclasses as dc
import gc
import logging
import typing as typ

from rxbench.registry import compile_matcher, implementation_spec

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from rxbench.matcher import Matcher
    from rxbench.registry import Implementation
    from rxbench.scenarios import BenchmarkScenario

type PrepareHook = cabc.Callable[[], None]

_LOGGER = logging.getLogger(__name__)


class HarnessError(Exception):
    """Base class for failures detected by the benchmark harness."""


class UnboundedScenarioError(HarnessError):
    """Raised when an adversarial scenario is paired with a backtracking engine.

    Such pairings can take exponential time, so they are refused before
    compilation unless the caller opts in explicitly.
    """

    def __init__(self, scenario: str, implementation: str) -> None:
        super().__init__(
            f"scenario {scenario!r} is adversarial and implementation "
            f"{implementation!r} does not guarantee linear-time matching; "
            "pass allow_unbounded=True to run it anyway",
        )
        self.scenario = scenario
        self.implementation = implementation


class CorrectnessError(HarnessError):
    """Base class for a matcher disagreeing with the expected result.

    Attributes
    ----------
    scenario:
        Name of the scenario being checked.
    implementation:
        Identifier of the back-end under test.
    expected:
        Result the scenario declares.
    observed:
        Result the matcher produced.
    """

    def __init__(
        self,
        message: str,
        *,
        scenario: str,
        implementation: str,
        expected: bool,
        observed: bool,
    ) -> None:
        super().__init__(message)
        self.scenario = scenario
        self.implementation = implementation
        self.expected = expected
        self.observed = observed


class CorrectnessViolationError(CorrectnessError):
    """Raised by the correctness gate before any timing takes place."""

    def __init__(
        self,
        *,
        scenario: str,
        implementation: str,
        expected: bool,
        observed: bool,
    ) -> None:
        super().__init__(
            f"correctness gate failed for scenario {scenario!r} with "
            f"implementation {implementation!r}: expected {expected}, "
            f"observed {observed}",
            scenario=scenario,
            implementation=implementation,
            expected=expected,
            observed=observed,
        )


class MeasurementInvariantError(CorrectnessError):
    """Raised when a matcher changes its answer during the measurement loop."""

    def __init__(
        self,
        *,
        scenario: str,
        implementation: str,
        expected: bool,
        observed: bool,
        iteration: int,
    ) -> None:
        super().__init__(
            f"measurement loop aborted at iteration {iteration} for scenario "
            f"{scenario!r} with implementation {implementation!r}: expected "
            f"{expected}, observed {observed}",
            scenario=scenario,
            implementation=implementation,
            expected=expected,
            observed=observed,
        )
        self.iteration = iteration


def prepare_for_measurement() -> None:
    """Reduce measurement noise before entering a timed loop.

    Forces a full collection so a pending garbage-collection cycle does not
    land inside the loop. CPython offers no runtime switch for its
    specialising adaptive interpreter, so there is nothing further to
    suppress here; runtimes that can pin their compiler tier should supply
    their own hook.
    """
    gc.collect()


def check_correctness(
    matcher: Matcher,
    text: str,
    *,
    expected: bool,
    scenario: str,
    implementation: str,
) -> None:
    """Evaluate ``matcher`` once and fail fast on a wrong answer.

    Raises
    ------
    CorrectnessViolationError
        If ``matcher.test(text)`` differs from ``expected``.
    """
    observed = bool(matcher.test(text))
    if observed != expected:
        raise CorrectnessViolationError(
            scenario=scenario,
            implementation=implementation,
            expected=expected,
            observed=observed,
        )
    _LOGGER.debug(
        "rxbench.gate.passed scenario=%s implementation=%s expected=%s",
        scenario,
        implementation,
        expected,
    )


def _validate_nreps(nreps: object) -> int:
    """Validate that a repetition count is a non-negative integer."""
    if not isinstance(nreps, int) or isinstance(nreps, bool):
        msg = f"nreps must be an int, got {type(nreps).__name__}"
        raise TypeError(msg)
    if nreps < 0:
        msg = f"nreps must be >= 0, got {nreps}"
        raise ValueError(msg)
    return nreps


def run_measurement_loop(
    matcher: Matcher,
    text: str,
    nreps: int,
    *,
    expected: bool,
    scenario: str = "<unnamed>",
    implementation: str = "<unknown>",
) -> None:
    """Invoke ``matcher.test(text)`` exactly ``nreps`` times.

    The loop body only calls the matcher and compares its answer with
    ``expected``; the first disagreement aborts the loop.

    Parameters
    ----------
    matcher:
        Matcher that has already passed the correctness gate.
    text:
        Input evaluated on every iteration; never modified.
    nreps:
        Number of iterations, supplied by the external runner.
    expected:
        Result every iteration must produce.
    scenario:
        Scenario name used when reporting a failure.
    implementation:
        Implementation identifier used when reporting a failure.

    Raises
    ------
    TypeError
        If ``nreps`` is not an integer.
    ValueError
        If ``nreps`` is negative.
    MeasurementInvariantError
        If any iteration disagrees with ``expected``.
    """
    _validate_nreps(nreps)
    test = matcher.test
    for iteration in range(nreps):
        if test(text) != expected:
            raise MeasurementInvariantError(
                scenario=scenario,
                implementation=implementation,
                expected=expected,
                observed=not expected,
                iteration=iteration,
            )


@dc.dataclass(frozen=True, slots=True)
class PreparedBenchmark:
    """A compiled matcher that has passed the correctness gate.

    Instances are created by :func:`prepare_benchmark` and own their matcher
    exclusively; concurrent runs must each prepare their own instance.

    Attributes
    ----------
    scenario:
        Scenario the matcher was validated against.
    implementation:
        Back-end that compiled the matcher.
    matcher:
        Validated matcher.
    text:
        Scenario input, shared read-only with other prepared benchmarks.
    """

    scenario: BenchmarkScenario
    implementation: Implementation
    matcher: Matcher
    text: str

    def run_once(self) -> bool:
        """Evaluate the matcher once, raising on a wrong answer.

        Suited to runners that time a single call per round.

        Raises
        ------
        MeasurementInvariantError
            If the matcher disagrees with the scenario's expected result.
        """
        observed = self.matcher.test(self.text)
        if observed != self.scenario.expect_match:
            raise MeasurementInvariantError(
                scenario=self.scenario.name,
                implementation=self.implementation.value,
                expected=self.scenario.expect_match,
                observed=bool(observed),
                iteration=0,
            )
        return observed

    def measure(
        self,
        nreps: int,
        *,
        prepare: PrepareHook | None = prepare_for_measurement,
    ) -> None:
        """Run the preparation hook, then the measurement loop.

        Parameters
        ----------
        nreps:
            Number of loop iterations.
        prepare:
            Hook invoked immediately before the loop; ``None`` skips it.
        """
        _validate_nreps(nreps)
        _LOGGER.debug(
            "rxbench.measure scenario=%s implementation=%s nreps=%d",
            self.scenario.name,
            self.implementation.value,
            nreps,
        )
        if prepare is not None:
            prepare()
        run_measurement_loop(
            self.matcher,
            self.text,
            nreps,
            expected=self.scenario.expect_match,
            scenario=self.scenario.name,
            implementation=self.implementation.value,
        )


def prepare_benchmark(
    scenario: BenchmarkScenario,
    implementation: Implementation | str,
    *,
    allow_unbounded: bool = False,
) -> PreparedBenchmark:
    """Compile ``scenario.pattern`` and pass it through the correctness gate.

    Parameters
    ----------
    scenario:
        Scenario to prepare.
    implementation:
        Back-end identifier; validated before compilation.
    allow_unbounded:
        Permit adversarial scenarios on engines without a linear-time
        guarantee. Such runs may not terminate in reasonable time.

    Returns
    -------
    PreparedBenchmark
        A validated benchmark ready for measurement.

    Raises
    ------
    UnknownImplementationError
        If ``implementation`` is not registered.
    UnboundedScenarioError
        If ``scenario`` is adversarial, the engine is not linear-time, and
        ``allow_unbounded`` is false.
    CorrectnessViolationError
        If the compiled matcher gives the wrong answer.
    re.error, regex.error, re2.error
        If the back-end rejects the pattern.
    """
    spec = implementation_spec(implementation)
    if scenario.adversarial and not spec.linear_time and not allow_unbounded:
        raise UnboundedScenarioError(scenario.name, spec.implementation.value)

    matcher = compile_matcher(spec.implementation, scenario.pattern)
    text = scenario.text
    check_correctness(
        matcher,
        text,
        expected=scenario.expect_match,
        scenario=scenario.name,
        implementation=spec.implementation.value,
    )
    return PreparedBenchmark(
        scenario=scenario,
        implementation=spec.implementation,
        matcher=matcher,
        text=text,
    )


__all__ = [
    "CorrectnessError",
    "CorrectnessViolationError",
    "HarnessError",
    "MeasurementInvariantError",
    "PrepareHook",
    "PreparedBenchmark",
    "UnboundedScenarioError",
    "check_correctness",
    "prepare_benchmark",
    "prepare_for_measurement",
    "run_measurement_loop",
]
