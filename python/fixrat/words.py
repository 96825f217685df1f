# FixRat - Word Types
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""
Word types: the fixed-width integers a rational is built on.

A word is a numpy integer dtype (int8 .. int64, uint8 .. uint64). Arithmetic
between rationals of different words produces a rational of their common
word, chosen from an explicit table rather than numpy's promotion rules
(which turn int64 with uint64 into float64).

Widening table:

    same signedness         the wider of the two
    int8   with uint8       int16
    int8   with uint16      int32
    int16  with uint8       int16
    int16  with uint16      int32
    int32  with uint8       int32
    int32  with uint16      int32
    int8..int32 with uint32 int64
    int64  with uint8..32   int64
    any signed with uint64  int64   (values above the int64 maximum raise)

Example:
    >>> from fixrat.words import common_word
    >>> common_word('int8', 'uint8')
    dtype('int16')
"""

from __future__ import annotations
import logging
from typing import Any, Union

import numpy as np

from .config import DEFAULT_WORD
from .exceptions import WordTypeError, RationalOverflowError


logger = logging.getLogger(__name__)

# Anything resolve_word() understands
WordLike = Union[str, type, np.dtype, None]

SIGNED = ('int8', 'int16', 'int32', 'int64')
UNSIGNED = ('uint8', 'uint16', 'uint32', 'uint64')

# Mixed-signedness entries; same-signedness pairs take the wider word
_MIXED_COMMON_WORD = {
    ('int8', 'uint8'): 'int16',
    ('int8', 'uint16'): 'int32',
    ('int8', 'uint32'): 'int64',
    ('int8', 'uint64'): 'int64',
    ('int16', 'uint8'): 'int16',
    ('int16', 'uint16'): 'int32',
    ('int16', 'uint32'): 'int64',
    ('int16', 'uint64'): 'int64',
    ('int32', 'uint8'): 'int32',
    ('int32', 'uint16'): 'int32',
    ('int32', 'uint32'): 'int64',
    ('int32', 'uint64'): 'int64',
    ('int64', 'uint8'): 'int64',
    ('int64', 'uint16'): 'int64',
    ('int64', 'uint32'): 'int64',
    ('int64', 'uint64'): 'int64',
}


def resolve_word(word: WordLike) -> np.dtype:
    """
    Normalize a word specification to a numpy integer dtype.

    Args:
        word: A numpy integer scalar type (np.int32), a dtype, a dtype name
              ('uint8'), or None for the default word.

    Returns:
        The canonical numpy dtype.

    Raises:
        WordTypeError: If word is not a fixed-width integral type.
    """
    if word is None:
        word = DEFAULT_WORD
    try:
        dt = word if isinstance(word, np.dtype) else np.dtype(word)
    except TypeError as exc:
        raise WordTypeError(f"Not a word type: {word!r}") from exc

    if dt.kind not in ('i', 'u'):
        raise WordTypeError(
            f"Word type must be a signed or unsigned integer, got {dt.name}"
        )
    return np.dtype(dt.name)


def word_of(value: Any) -> np.dtype:
    """Word type carried by a numpy integer scalar."""
    return resolve_word(value.dtype)


def is_signed(word: WordLike) -> bool:
    return resolve_word(word).kind == 'i'


def word_bounds(word: WordLike) -> tuple[int, int]:
    """Smallest and largest value of the word, as Python ints."""
    info = np.iinfo(resolve_word(word))
    return int(info.min), int(info.max)


def fits(value: int, word: WordLike) -> bool:
    lo, hi = word_bounds(word)
    return lo <= value <= hi


def check_fits(value: int, word: WordLike, what: str = 'value') -> int:
    """
    Return value unchanged if the word can hold it.

    Raises:
        RationalOverflowError: If value lies outside the word's range.
    """
    dt = resolve_word(word)
    if not fits(value, dt):
        logger.debug("Rejected %s %d for word %s", what, value, dt.name)
        raise RationalOverflowError(value, dt.name, what)
    return value


def common_word(a: WordLike, b: WordLike) -> np.dtype:
    """
    Word type of the result of combining words a and b.

    See the module docstring for the full table.
    """
    da, db = resolve_word(a), resolve_word(b)
    if da.kind == db.kind:
        return da if da.itemsize >= db.itemsize else db

    signed, unsigned = (da, db) if da.kind == 'i' else (db, da)
    result = np.dtype(_MIXED_COMMON_WORD[(signed.name, unsigned.name)])
    if unsigned.name == 'uint64':
        logger.debug("Combining %s with uint64 yields int64; large uint64 values will not fit",
                     signed.name)
    return result
