"""Matcher capability shared by every back-end.

Every back-end compiles a pattern into its own native object. The harness
never sees those objects directly; it only talks to the :class:`Matcher`
protocol, which exposes a single ``test`` method answering whether the whole
input matches.

Example
-------
>>> import re
>>> matcher = FullMatchAdapter(re.compile(r".*y"))
>>> matcher.test("xxy")
True
"""

from __future__ import annotations

import typing as typ


@typ.runtime_checkable
class Matcher(typ.Protocol):
    """Compiled pattern able to test whether an input fully matches."""

    def test(self, text: str) -> bool:
        """Return ``True`` when ``text`` matches the pattern in full."""
        ...


class _SupportsFullMatch(typ.Protocol):
    """Native compiled pattern exposing ``fullmatch``."""

    def fullmatch(self, string: str, /) -> object | None: ...


class FullMatchAdapter:
    """Adapt a native compiled pattern to the :class:`Matcher` protocol.

    ``re``, ``regex`` and ``re2`` compiled objects all provide ``fullmatch``,
    so the back-end adapters in :mod:`rxbench.engines` share this base and
    differ only in how they compile.
    """

    __slots__ = ("_fullmatch", "_native")

    def __init__(self, native: _SupportsFullMatch) -> None:
        self._native = native
        self._fullmatch = native.fullmatch

    def test(self, text: str) -> bool:
        """Return ``True`` when ``text`` matches the pattern in full."""
        return self._fullmatch(text) is not None

    def __repr__(self) -> str:
        """Return a debugging representation naming the native type."""
        return f"{type(self).__name__}({type(self._native).__qualname__})"


__all__ = ["FullMatchAdapter", "Matcher"]
