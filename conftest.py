"""Shared pytest fixtures for implementation-parametrised tests.

Use these fixtures to exercise every registered back-end without repeating
the parametrisation in each test module.

Example
-------
def test_compiles(implementation):
    compile_matcher(implementation, ".*y")
"""

from __future__ import annotations

import pytest

from rxbench.fixtures import long_data
from rxbench.registry import Implementation, implementation_spec
from rxbench.selection import get_selected_implementations


@pytest.fixture(
    params=[
        pytest.param(member, id=f"{member.value}-implementation")
        for member in Implementation
    ],
)
def implementation(request: pytest.FixtureRequest) -> Implementation:
    """Parametrize tests to run against every registered implementation.

    Parameters
    ----------
    request : pytest.FixtureRequest
        Pytest request providing the parametrized implementation.

    Returns
    -------
    Implementation
        The implementation under test.
    """
    return request.param


@pytest.fixture
def linear_time_implementation(implementation: Implementation) -> Implementation:
    """Narrow ``implementation`` to engines with a linear-time guarantee.

    Raises
    ------
    pytest.Skip
        If the parametrized implementation may backtrack exponentially.
    """
    if not implementation_spec(implementation).linear_time:
        pytest.skip(f"{implementation.value} does not guarantee linear time")
    return implementation


@pytest.fixture
def implementation_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Provide a monkeypatch with ``RXBENCH_IMPLEMENTATION`` cleared.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch for environment variable isolation.

    Returns
    -------
    pytest.MonkeyPatch
        The same monkeypatch, ready for ``setenv`` calls.
    """
    monkeypatch.delenv("RXBENCH_IMPLEMENTATION", raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def _clear_selection_cache() -> None:
    """Clear the cached implementation selection between tests.

    Prevents cross-test pollution from ``lru_cache`` on
    ``get_selected_implementations``. The generated corpus is left cached
    because it is deterministic.
    """
    get_selected_implementations.cache_clear()


@pytest.fixture(scope="session")
def shared_long_data() -> str:
    """Return the memoised generated corpus once per session."""
    return long_data()
