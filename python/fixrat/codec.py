# FixRat - Text Codec
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""
Writing rationals as text and reading them back.

Formatting comes in two styles. The default style formats numerator and
denominator with an ordinary integer format spec and leaves out a
denominator of 1. The fraction style (a spec ending in '/') always writes
the numerator and takes '+', '#' and ' ' flags:

    >>> from fixrat import rational, parse_fraction
    >>> format(rational(1, 2), '/')
    '1/2'
    >>> format(rational(2, 1), '#/')
    '2/1'
    >>> format(rational(1, 2), '+ /')
    '+1 / 2'

Parsing reads '<integer> [/ <integer>]' with optional whitespace around the
slash and consumes exactly the matched text:

    >>> import io
    >>> source = io.StringIO("1/2 abcef")
    >>> parse_fraction(source)
    Rational(1, 2, word='int64')
    >>> source.read()
    ' abcef'
"""

from __future__ import annotations
import logging
from typing import Optional, Union, TextIO

from .config import FormatSpec
from .exceptions import ParseError, RationalOverflowError
from .rational import Rational
from .words import WordLike, resolve_word, word_bounds


logger = logging.getLogger(__name__)


def format_rational(r: Rational, spec: Union[FormatSpec, str, None] = None) -> str:
    """
    Format a rational.

    Args:
        r: The rational to format.
        spec: A FormatSpec, a format() spec string, or None for the default.

    Returns:
        The formatted text.
    """
    if spec is None:
        spec = FormatSpec.default()
    elif isinstance(spec, str):
        spec = FormatSpec.from_string(spec)

    num, den = int(r.numerator), int(r.denominator)

    if spec.fraction_style:
        parts = []
        if spec.show_sign and num > 0:
            parts.append('+')
        parts.append(str(num))
        if spec.always_denominator or den != 1:
            parts.append(spec.separator)
            parts.append(str(den))
        return ''.join(parts)

    text = format(num, spec.int_spec)
    if den != 1:
        text += '/' + format(den, spec.int_spec)
    return text


class _TextCursor:
    """Read position over an in-memory string."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]


class _StreamCursor:
    """
    Read position over a text stream.

    Characters are pulled from the stream only when peeked at and kept in a
    buffer, so the cursor can move back over anything already read.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.buffer = ''
        self.pos = 0

    def peek(self) -> str:
        if self.pos >= len(self.buffer):
            self.buffer += self.stream.read(1)
        return self.buffer[self.pos:self.pos + 1]

    @property
    def text(self) -> str:
        return self.buffer


def _skip_space(cursor) -> None:
    while cursor.peek().isspace():
        cursor.pos += 1


def _scan_integer(cursor) -> Optional[str]:
    """Read [+-]?digit+ at the cursor; on no match, leave the cursor alone."""
    start = cursor.pos
    if cursor.peek() in ('+', '-'):
        cursor.pos += 1
    digits_start = cursor.pos
    while cursor.peek().isdigit() and cursor.peek().isascii():
        cursor.pos += 1
    if cursor.pos == digits_start:
        cursor.pos = start
        return None
    return cursor.text[start:cursor.pos]


def _significant(digits: str) -> str:
    """Digits of [+-]?digit+ text without sign or leading zeros."""
    return digits.lstrip("+-").lstrip("0")


def _to_int(digits: str) -> int:
    value = int(_significant(digits) or "0")
    return -value if digits.startswith("-") else value


def _scan(cursor, word: WordLike) -> tuple[Rational, int]:
    """
    Match a fraction at the cursor.

    Returns:
        The rational and the cursor position just after the match.
    """
    start = cursor.pos
    _skip_space(cursor)
    num_text = _scan_integer(cursor)
    if num_text is None:
        logger.debug("No fraction at position %d of %r", cursor.pos, cursor.text[start:])
        raise ParseError("Expected an integer numerator", cursor.text[start:], cursor.pos)
    end = cursor.pos

    den_text = None
    _skip_space(cursor)
    if cursor.peek() == '/':
        cursor.pos += 1
        _skip_space(cursor)
        den_text = _scan_integer(cursor)
        if den_text is not None:
            end = cursor.pos

    target = resolve_word(word)
    # No word holds more digits than its widest bound; reject before int()
    max_digits = max(len(str(bound)) for bound in word_bounds(target))
    for digits in (num_text, den_text):
        if digits is not None and len(_significant(digits)) > max_digits:
            logger.debug("Fraction %r has too many digits for %s", cursor.text[start:end], target.name)
            raise ParseError(f"Fraction out of range for word type {target.name}",
                             cursor.text[start:end], start)
    try:
        if den_text is None:
            value = Rational(_to_int(num_text), word=target)
        else:
            value = Rational(_to_int(num_text), _to_int(den_text), word=target)
    except RationalOverflowError as exc:
        logger.debug("Fraction %r out of range: %s", cursor.text[start:end], exc)
        raise ParseError(f"Fraction out of range: {exc}", cursor.text[start:end], start) from exc
    return value, end


def scan_fraction(text: str, pos: int = 0, word: WordLike = None) -> tuple[Rational, int]:
    """
    Read a fraction from text starting at pos.

    Args:
        text: Input text.
        pos: Index to start matching at.
        word: Word type of the result (default word if omitted).

    Returns:
        (value, end) where end is the index just after the matched text.

    Raises:
        ParseError: If no integer numerator is found, or the value does not
                    fit the word.
    """
    return _scan(_TextCursor(text, pos), word)


def parse_fraction(source: TextIO, word: WordLike = None) -> Rational:
    """
    Read a fraction from a text stream.

    On success the stream is left positioned just after the matched text,
    so the caller can go on reading whatever follows. The stream must be
    seekable. After a ParseError its position is unspecified.

    Raises:
        ParseError: If no integer numerator is found, or the value does not
                    fit the word.
    """
    start = source.tell()
    value, end = _scan(_StreamCursor(source), word)
    # Rewind and re-read so the stream stops exactly at the end of the match
    source.seek(start)
    source.read(end)
    return value


def parse_rational(text: str, word: WordLike = None) -> Rational:
    """
    Parse text that holds exactly one fraction, surrounding whitespace aside.

    Raises:
        ParseError: If text is not a single well-formed fraction.
    """
    value, end = scan_fraction(text, 0, word)
    if text[end:].strip():
        raise ParseError("Unexpected text after fraction", text[end:], end)
    return value
