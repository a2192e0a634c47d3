"""Code-point case mapping.

Thin wrappers over the platform's Unicode tables so that case-insensitive
matching paths can substitute their own mapping without touching callers.
Both functions follow the simple (one-to-one) case mappings: where the full
mapping of a character expands to several code points, the single code point
the simple mapping assigns is returned instead, or the input when there is
none.
"""

from __future__ import annotations

import sys

# U+0130 is the only character whose full lowercase form expands ("i" plus a
# combining dot); its simple lowercase mapping is a plain "i".
_SIMPLE_LOWER_EXPANSIONS: dict[int, int] = {0x0130: 0x0069}


def _single_code_point(mapped: str) -> int | None:
    if len(mapped) != 1:
        return None
    return ord(mapped)


def to_lower_case(code_point: int) -> int:
    """Return the simple lowercase mapping of ``code_point``.

    Code points outside the Unicode range are returned unchanged.

    Examples
    --------
    >>> to_lower_case(ord("A")) == ord("a")
    True
    >>> to_lower_case(0x0130) == ord("i")
    True
    """
    if not 0 <= code_point <= sys.maxunicode:
        return code_point
    lowered = _single_code_point(chr(code_point).lower())
    if lowered is not None:
        return lowered
    return _SIMPLE_LOWER_EXPANSIONS.get(code_point, code_point)


def to_upper_case(code_point: int) -> int:
    """Return the simple uppercase mapping of ``code_point``.

    When the full uppercase form expands, the single-code-point titlecase
    form is used: for Greek letters with a subscript iota (``"ᾳ"``) it is the
    simple uppercase mapping. Characters with no single-code-point form
    (``"ß"``) and code points outside the Unicode range are returned
    unchanged.
    """
    if not 0 <= code_point <= sys.maxunicode:
        return code_point
    char = chr(code_point)
    upper = _single_code_point(char.upper())
    if upper is not None:
        return upper
    title = _single_code_point(char.title())
    return code_point if title is None else title


__all__ = ["to_lower_case", "to_upper_case"]
