"""Adapters binding each regular-expression library to the matcher protocol.

One adapter type exists per back-end. Each owns the library call that turns
a pattern into a native compiled object and keeps that object private, so
library-specific types never reach the harness. Compilation errors raised by
the libraries (``re.error``, ``regex.error``, ``re2.error``) propagate
unchanged.
"""

from __future__ import annotations

import re

import re2
import regex

from rxbench.matcher import FullMatchAdapter


class StdlibReMatcher(FullMatchAdapter):
    """Matcher backed by the standard library ``re`` module."""

    __slots__ = ()

    @classmethod
    def compile(cls, pattern: str) -> StdlibReMatcher:
        """Compile ``pattern`` with :func:`re.compile`."""
        return cls(re.compile(pattern))


class RegexModuleMatcher(FullMatchAdapter):
    """Matcher backed by the third-party ``regex`` module."""

    __slots__ = ()

    @classmethod
    def compile(cls, pattern: str) -> RegexModuleMatcher:
        """Compile ``pattern`` with :func:`regex.compile`."""
        return cls(regex.compile(pattern))


class Re2Matcher(FullMatchAdapter):
    """Matcher backed by Google's RE2 automaton engine (``google-re2``)."""

    __slots__ = ()

    @classmethod
    def compile(cls, pattern: str) -> Re2Matcher:
        """Compile ``pattern`` with :func:`re2.compile`."""
        return cls(re2.compile(pattern))


__all__ = ["Re2Matcher", "RegexModuleMatcher", "StdlibReMatcher"]
