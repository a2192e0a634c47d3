"""Implementation selection driven by an environment variable.

Resolves which back-ends a run exercises from the ``RXBENCH_IMPLEMENTATION``
environment variable. The selection is resolved once and cached for the
lifetime of the process, so every scenario in a run uses the same
implementations.

Example
-------
for implementation in get_selected_implementations():
    prepared = prepare_benchmark(scenario, implementation)
    ...
"""

from __future__ import annotations

import functools
import logging
import os

from rxbench.registry import (
    Implementation,
    parse_implementation,
    registered_implementations,
)

_ENV_VAR = "RXBENCH_IMPLEMENTATION"

_LOGGER = logging.getLogger(__name__)


def _read_implementation_env() -> Implementation | None:
    """Read and validate the requested implementation from the environment.

    Returns
    -------
    Implementation | None
        The implementation named by ``RXBENCH_IMPLEMENTATION``, or ``None``
        when the variable is unset or empty.

    Raises
    ------
    UnknownImplementationError
        If the environment variable contains an unrecognized value.
    """
    raw = os.environ.get(_ENV_VAR, "").strip()
    if not raw:
        return None
    return parse_implementation(raw)


@functools.lru_cache(maxsize=1)
def get_selected_implementations() -> tuple[Implementation, ...]:
    """Resolve the implementations exercised by this run.

    1. Read ``RXBENCH_IMPLEMENTATION`` from the environment.
    2. If unset or empty, select every registered implementation.
    3. Otherwise select only the named implementation; unrecognized values
       are a configuration error and never fall back to a default.

    Returns
    -------
    tuple[Implementation, ...]
        Selected implementations in registry order.

    Raises
    ------
    UnknownImplementationError
        If ``RXBENCH_IMPLEMENTATION`` contains an unrecognized value.

    Notes
    -----
    The selection is cached for the lifetime of the process. Call
    ``get_selected_implementations.cache_clear()`` to force re-resolution
    (useful in tests).
    """
    requested = _read_implementation_env()
    if requested is None:
        selected = registered_implementations()
    else:
        selected = (requested,)
    _LOGGER.debug(
        "rxbench.select implementations=%s",
        ",".join(member.value for member in selected),
    )
    return selected


__all__ = ["get_selected_implementations"]
