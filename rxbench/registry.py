"""Closed registry mapping implementation identifiers to compilers.

Each :class:`Implementation` member maps to exactly one
:class:`ImplementationSpec`, which knows how to compile a pattern into a
:class:`~rxbench.matcher.Matcher` for that back-end. The table is explicit and
inspectable; unknown identifiers are a configuration error and are never
replaced by a default back-end.

Example
-------
matcher = compile_matcher(Implementation.RE2, r".bc(d|e).*")
assert matcher.test("abcdefghijklmnopqrstuvwxyz")
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import types
import typing as typ

from rxbench.engines import Re2Matcher, RegexModuleMatcher, StdlibReMatcher

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from rxbench.matcher import Matcher

_LOGGER = logging.getLogger(__name__)


class Implementation(enum.StrEnum):
    """Identifiers for the selectable regular-expression back-ends.

    Members
    -------
    RE
        The standard library ``re`` module (backtracking).
    REGEX
        The third-party ``regex`` module (backtracking).
    RE2
        Google's RE2 engine via ``google-re2`` (linear time).
    """

    RE = "re"
    REGEX = "regex"
    RE2 = "re2"


class UnknownImplementationError(ValueError):
    """Raised when an identifier does not name a registered implementation."""

    def __init__(self, value: object) -> None:
        valid = ", ".join(sorted(member.value for member in Implementation))
        super().__init__(
            f"unknown implementation {value!r}; expected one of: {valid}",
        )
        self.value = value


@dc.dataclass(frozen=True, slots=True)
class ImplementationSpec:
    """Describe how one back-end compiles patterns.

    Attributes
    ----------
    implementation:
        Identifier this entry is registered under.
    library:
        Import name of the library providing the engine.
    linear_time:
        Whether the engine guarantees matching in time linear in the input,
        which makes it safe for adversarial backtracking scenarios.
    compiler:
        Callable turning a pattern into a matcher. Pattern errors raised by
        the library propagate unchanged.
    """

    implementation: Implementation
    library: str
    linear_time: bool
    compiler: cabc.Callable[[str], Matcher]


_REGISTRY: typ.Final[cabc.Mapping[Implementation, ImplementationSpec]] = (
    types.MappingProxyType(
        {
            Implementation.RE: ImplementationSpec(
                implementation=Implementation.RE,
                library="re",
                linear_time=False,
                compiler=StdlibReMatcher.compile,
            ),
            Implementation.REGEX: ImplementationSpec(
                implementation=Implementation.REGEX,
                library="regex",
                linear_time=False,
                compiler=RegexModuleMatcher.compile,
            ),
            Implementation.RE2: ImplementationSpec(
                implementation=Implementation.RE2,
                library="re2",
                linear_time=True,
                compiler=Re2Matcher.compile,
            ),
        },
    )
)


def parse_implementation(value: Implementation | str) -> Implementation:
    """Resolve an identifier to a registered :class:`Implementation`.

    Parameters
    ----------
    value:
        An :class:`Implementation` member or its string value. Strings are
        matched case-insensitively after stripping surrounding whitespace.

    Returns
    -------
    Implementation
        The matching registered member.

    Raises
    ------
    UnknownImplementationError
        If ``value`` does not name a registered implementation.
    """
    if isinstance(value, Implementation):
        return value
    if not isinstance(value, str):
        raise UnknownImplementationError(value)
    try:
        return Implementation(value.strip().lower())
    except ValueError:
        raise UnknownImplementationError(value) from None


def implementation_spec(implementation: Implementation | str) -> ImplementationSpec:
    """Return the registry entry for ``implementation``.

    Raises
    ------
    UnknownImplementationError
        If ``implementation`` is not registered.
    """
    return _REGISTRY[parse_implementation(implementation)]


def registered_implementations() -> tuple[Implementation, ...]:
    """Return every registered implementation in declaration order."""
    return tuple(_REGISTRY)


def compile_matcher(implementation: Implementation | str, pattern: str) -> Matcher:
    """Compile ``pattern`` with the back-end named by ``implementation``.

    Compilation happens exactly once per call; each call returns a fresh
    matcher owned by the caller, so matchers are never shared between
    implementations or concurrent runs.

    Parameters
    ----------
    implementation:
        Back-end identifier, validated before any compilation is attempted.
    pattern:
        Regular-expression source. Validity is defined by the back-end.

    Returns
    -------
    Matcher
        Compiled matcher exposing ``test(text) -> bool``.

    Raises
    ------
    UnknownImplementationError
        If ``implementation`` is not registered.
    re.error, regex.error, re2.error
        If the back-end rejects ``pattern``.
    """
    spec = implementation_spec(implementation)
    _LOGGER.debug(
        "rxbench.compile implementation=%s pattern=%r",
        spec.implementation.value,
        pattern,
    )
    return spec.compiler(pattern)


__all__ = [
    "Implementation",
    "ImplementationSpec",
    "UnknownImplementationError",
    "compile_matcher",
    "implementation_spec",
    "parse_implementation",
    "registered_implementations",
]
