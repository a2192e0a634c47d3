"""Deterministic input corpus shared by every benchmark scenario.

The short literals are module constants. The large corpus repeats the
lowercase alphabet ``1 << 15`` times and is built lazily on first use, then
memoised for the lifetime of the process so every implementation scans the
very same string object.
"""

from __future__ import annotations

import functools
import typing as typ

ALPHABET: typ.Final = "abcdefghijklmnopqrstuvwxyz"
LONG_DATA_REPETITIONS: typ.Final = 1 << 15
LONG_DATA_LENGTH: typ.Final = len(ALPHABET) * LONG_DATA_REPETITIONS

# 50 x's then a y.
LITERAL_INPUT: typ.Final = "x" * 50 + "y"
# 80 x's then a w.
MATCH_CLASS_INPUT: typ.Final = "x" * 80 + "w"
# 'b' sits between 'a' and 'c', so range checks cannot reject it early.
IN_RANGE_INPUT: typ.Final = "b" * 80 + "c"
PATHOLOGICAL_INPUT: typ.Final = "a" * 24


def build_long_data(
    block: str = ALPHABET,
    repetitions: int = LONG_DATA_REPETITIONS,
) -> str:
    """Build a corpus by concatenating ``block`` ``repetitions`` times.

    Parameters
    ----------
    block:
        Non-empty text repeated to form the corpus.
    repetitions:
        Number of copies of ``block``; must be a positive integer.

    Returns
    -------
    str
        The concatenated corpus. Identical arguments always yield identical
        text.

    Raises
    ------
    TypeError
        If ``repetitions`` is not an integer.
    ValueError
        If ``block`` is empty or ``repetitions`` is less than one.

    Examples
    --------
    >>> build_long_data("ab", 3)
    'ababab'
    """
    if not isinstance(repetitions, int) or isinstance(repetitions, bool):
        msg = f"repetitions must be an int, got {type(repetitions).__name__}"
        raise TypeError(msg)
    if repetitions < 1:
        msg = f"repetitions must be >= 1, got {repetitions}"
        raise ValueError(msg)
    if not isinstance(block, str) or not block:
        msg = "block must be a non-empty string"
        raise ValueError(msg)
    return block * repetitions


@functools.cache
def long_data() -> str:
    """Return the memoised alphabet corpus of ``LONG_DATA_LENGTH`` characters.

    Notes
    -----
    Call ``long_data.cache_clear()`` to force the corpus to be rebuilt (useful
    in tests checking that rebuilding is deterministic).
    """
    return build_long_data()


__all__ = [
    "ALPHABET",
    "IN_RANGE_INPUT",
    "LITERAL_INPUT",
    "LONG_DATA_LENGTH",
    "LONG_DATA_REPETITIONS",
    "MATCH_CLASS_INPUT",
    "PATHOLOGICAL_INPUT",
    "build_long_data",
    "long_data",
]
