# FixRat - Exceptions
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""Exception hierarchy for FixRat."""

from __future__ import annotations
from typing import Optional, Any


# Word names ordered by width, used to suggest a roomier word on overflow
SIGNED_WORDS = ['int8', 'int16', 'int32', 'int64']
UNSIGNED_WORDS = ['uint8', 'uint16', 'uint32', 'uint64']


class RationalError(Exception):
    """Base class for all FixRat exceptions."""
    pass


class WordTypeError(RationalError, TypeError):
    """Raised when a word type is unusable for the requested operation."""
    pass


class DivisionByZero(RationalError, ZeroDivisionError):
    """Raised when a non-finite rational is cast to an integral type."""
    pass


class InvariantError(RationalError, AssertionError):
    """Raised when a rational is not in canonical reduced form."""
    pass


class RationalOverflowError(RationalError, OverflowError):
    """Raised when a value does not fit the word type of a rational."""

    def __init__(
        self,
        value: Optional[int],
        word: Any,
        what: Optional[str] = None,
    ):
        word_name = str(word)
        if value is None:
            message = f"{what or 'value'} does not fit word type {word_name}"
            suggestion = None
        else:
            message = f"{what or 'value'} {value} does not fit word type {word_name}"
            suggestion = _get_suggestion_for_word(word_name, value)
        if suggestion:
            message += f"\n  Suggestion: {suggestion}"
        super().__init__(message)
        self.value = value
        self.word = word
        self.suggestion = suggestion


class ParseError(RationalError, ValueError):
    """Raised when no fraction can be read from the input."""

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        full_message = message
        if position is not None:
            full_message += f" at position {position}"
        if text:
            full_message += f": {_excerpt(text)!r}"
        super().__init__(full_message)
        self.text = text
        self.position = position


def _excerpt(text: str, limit: int = 20) -> str:
    """Shorten the offending input for error messages."""
    if len(text) <= limit:
        return text
    return text[:limit] + '...'


def _get_suggestion_for_word(word_name: str, value: int) -> Optional[str]:
    """Suggest the narrowest word type able to hold value, if any."""
    if value < 0 and word_name in UNSIGNED_WORDS:
        return f"{word_name} cannot hold negative values. Use a signed word such as 'int64'."

    candidates = SIGNED_WORDS if value < 0 or word_name in SIGNED_WORDS else UNSIGNED_WORDS
    for name in candidates:
        bits = int(name.lstrip('uint'))
        if name.startswith('u'):
            lo, hi = 0, 2**bits - 1
        else:
            lo, hi = -2**(bits - 1), 2**(bits - 1) - 1
        if lo <= value <= hi:
            return f"Use a wider word type such as '{name}'."
    return None
