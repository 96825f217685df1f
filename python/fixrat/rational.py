# FixRat - Rational Value Type
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""
Exact fractions over a fixed-width integer word.

A Rational keeps its numerator and denominator in canonical form: the
denominator is never negative and the pair shares no common factor. A zero
denominator is a valid state: n/0 is an infinity and 0/0 is not-a-number.

Intermediate products are computed on Python integers, so arithmetic and
comparison never wrap. A result that does not fit its word type raises
RationalOverflowError instead.

Example:
    >>> from fixrat.rational import Rational
    >>> Rational(10, 25)
    Rational(2, 5, word='int64')
    >>> Rational(3, 2) + Rational(2, 3)
    Rational(13, 6, word='int64')
    >>> Rational(1, 2, word='uint8') * 4
    Rational(2, 1, word='uint8')
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
from typing import Optional, Union, Any

import numpy as np

from .exceptions import WordTypeError, DivisionByZero, RationalOverflowError
from .words import WordLike, resolve_word, word_of, common_word, check_fits, is_signed


# Plain integers accepted wherever a rational operand is
Integral = Union[int, np.integer]

# Type for things that can be converted to Fraction
Numeric = Union[int, np.integer, Fraction, 'Rational']

# Widest supported word, in bits; larger powers of |base| > 1 cannot fit
_MAX_WORD_BITS = 64


def _is_integral(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def _normalize(num: int, den: int) -> tuple[int, int]:
    """
    Reduce a pair to canonical form.

    The sign moves to the numerator and the common factor is divided out.
    Works on Python integers, so the magnitude of a word's minimum value is
    exact. (0, 0) comes back unchanged.
    """
    if den < 0:
        num, den = -num, -den
    divisor = math.gcd(abs(num), den)
    if divisor > 1:
        num //= divisor
        den //= divisor
    return num, den


def _compare(an: int, ad: int, bn: int, bd: int) -> Optional[int]:
    """Three-way compare of two canonical pairs; None if either is NaN."""
    if (an == 0 and ad == 0) or (bn == 0 and bd == 0):
        return None
    if ad == 0 and bd == 0:
        # both infinite, numerators are +-1
        left, right = an, bn
    else:
        left, right = an * bd, bn * ad
    return (left > right) - (left < right)


def _infer_word(*operands: Any) -> np.dtype:
    """Common word of the numpy integer operands, or the default word."""
    words = [word_of(x) for x in operands if isinstance(x, np.integer)]
    if not words:
        return resolve_word(None)
    return reduce(common_word, words)


@dataclass(frozen=True, eq=False, repr=False)
class Rational:
    """
    A fraction numerator/denominator over a fixed-width integer word.

    Rationals are immutable and can be used as dictionary keys. Operators
    accept other rationals (the result takes the common word of both, see
    fixrat.words) and plain integers, which count as n/1.
    """
    num: int
    den: int
    word: np.dtype

    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(
        self,
        numerator: Union[Integral, Rational],
        denominator: Optional[Integral] = None,
        word: WordLike = None,
    ):
        """
        Create a rational.

        Args:
            numerator: An integer, or a Rational to copy into a wider word.
            denominator: Optional integer denominator, default 1.
            word: Word type. Inferred from numpy integer arguments when
                  omitted, otherwise the default word.

        Raises:
            TypeError: If the arguments are not integers.
            WordTypeError: If copying a Rational would narrow its word.
            RationalOverflowError: If a value does not fit the word.
        """
        if isinstance(numerator, Rational):
            if denominator is not None:
                raise TypeError("Cannot give a denominator when copying a Rational")
            target = numerator.word if word is None else resolve_word(word)
            if common_word(numerator.word, target) != target:
                raise WordTypeError(
                    f"Cannot narrow Rational from {numerator.word.name} to {target.name}"
                )
            self._assign(numerator.num, numerator.den, target)
            return

        operands = (numerator,) if denominator is None else (numerator, denominator)
        for x in operands:
            if not _is_integral(x):
                raise TypeError(f"Rational needs integer arguments, got {type(x).__name__}")

        target = resolve_word(word) if word is not None else _infer_word(*operands)
        num = check_fits(int(numerator), target, 'numerator')
        if denominator is None:
            self._assign(num, 1, target)
        else:
            den = check_fits(int(denominator), target, 'denominator')
            self._assign(*_normalize(num, den), target)

    def _assign(self, num: int, den: int, word: np.dtype) -> None:
        check_fits(num, word, 'numerator')
        check_fits(den, word, 'denominator')
        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'num', num)
        object.__setattr__(self, 'den', den)
        object.__setattr__(self, 'word', word)

    @classmethod
    def _from_pair(cls, num: int, den: int, word: np.dtype) -> Rational:
        """Normalize an unreduced pair into a new rational of the given word."""
        result = object.__new__(cls)
        result._assign(*_normalize(num, den), word)
        return result

    @classmethod
    def from_fraction(cls, value: Fraction, word: WordLike = None) -> Rational:
        """Create a rational from a fractions.Fraction."""
        return cls(value.numerator, value.denominator, word=word)

    def widen(self, word: WordLike) -> Rational:
        """Copy this rational into a word at least as wide as its own."""
        return Rational(self, word=word)

    # Accessors

    @property
    def numerator(self) -> np.integer:
        """Numerator as a scalar of the word type."""
        return self.word.type(self.num)

    @property
    def denominator(self) -> np.integer:
        """Denominator as a scalar of the word type."""
        return self.word.type(self.den)

    @property
    def is_finite(self) -> bool:
        """True unless the denominator is zero."""
        return self.den != 0

    @property
    def is_infinity(self) -> bool:
        """True for n/0 with n non-zero."""
        return self.den == 0 and self.num != 0

    @property
    def is_nan(self) -> bool:
        """True for the indeterminate 0/0."""
        return self.den == 0 and self.num == 0

    def _coerce(self, other: Any) -> Optional[tuple[int, int, np.dtype]]:
        """Operand as (num, den, result word), or None if unsupported."""
        if isinstance(other, Rational):
            return other.num, other.den, common_word(self.word, other.word)
        if isinstance(other, np.integer):
            return int(other), 1, common_word(self.word, word_of(other))
        if _is_integral(other):
            return other, 1, self.word
        return None

    # Arithmetic

    def __add__(self, other: Any) -> Rational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, word = operand
        return Rational._from_pair(self.num * den + num * self.den, self.den * den, word)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, word = operand
        return Rational._from_pair(self.num * den - num * self.den, self.den * den, word)

    def __rsub__(self, other: Any) -> Rational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, word = operand
        return Rational._from_pair(num * self.den - self.num * den, self.den * den, word)

    def __mul__(self, other: Any) -> Rational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, word = operand
        return Rational._from_pair(self.num * num, self.den * den, word)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Rational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, word = operand
        return Rational._from_pair(self.num * den, self.den * num, word)

    def __rtruediv__(self, other: Any) -> Rational:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, word = operand
        return Rational._from_pair(num * self.den, den * self.num, word)

    def __pow__(self, exponent: Any, modulo: Any = None) -> Union[Rational, float, np.floating]:
        """
        Raise to an integer or floating exponent.

        Integer exponents raise numerator and denominator separately; a
        negative exponent raises the reciprocal. Floating exponents convert
        the rational to the exponent's floating type first and return a
        float.
        """
        if modulo is not None:
            return NotImplemented

        if _is_integral(exponent):
            e = int(exponent)
            num, den = (self.num, self.den) if e >= 0 else (self.den, self.num)
            e = abs(e)
            if e > _MAX_WORD_BITS and max(abs(num), abs(den)) > 1:
                raise RationalOverflowError(None, self.word.name, f"power {e} of {num}/{den}")
            return Rational._from_pair(num ** e, den ** e, self.word)

        if isinstance(exponent, np.floating):
            ftype = type(exponent)
            with np.errstate(all='ignore'):
                return self.to_float(ftype) ** exponent
        if isinstance(exponent, float):
            with np.errstate(all='ignore'):
                return float(self.to_float() ** np.float64(exponent))
        return NotImplemented

    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        if not is_signed(self.word):
            raise WordTypeError(f"Cannot negate a rational over unsigned word {self.word.name}")
        return Rational._from_pair(-self.num, self.den, self.word)

    def __abs__(self) -> Rational:
        return Rational._from_pair(abs(self.num), self.den, self.word)

    def __bool__(self) -> bool:
        return self.num != 0 or self.den == 0

    # Comparison

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return self.num == other.num and self.den == other.den
        if _is_integral(other):
            return self.den == 1 and self.num == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Integer-valued rationals hash like the integer they equal
        if self.den == 1:
            return hash(self.num)
        return hash((self.num, self.den))

    def _order(self, other: Any) -> Any:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        num, den, _ = operand
        return _compare(self.num, self.den, num, den)

    def __lt__(self, other: Any) -> bool:
        result = self._order(other)
        if result is NotImplemented:
            return result
        return result is not None and result < 0

    def __le__(self, other: Any) -> bool:
        result = self._order(other)
        if result is NotImplemented:
            return result
        return result is not None and result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._order(other)
        if result is NotImplemented:
            return result
        return result is not None and result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._order(other)
        if result is NotImplemented:
            return result
        return result is not None and result >= 0

    # Casts

    def to_float(self, dtype: Any = np.float64) -> np.floating:
        """
        Divide numerator by denominator in floating point.

        Infinite rationals give +-inf and NaN gives nan.

        Raises:
            TypeError: If dtype is not a floating type.
        """
        dt = np.dtype(dtype)
        if dt.kind != 'f':
            raise TypeError(f"to_float needs a floating type, got {dt.name}")
        ftype = dt.type
        with np.errstate(all='ignore'):
            return ftype(self.num) / ftype(self.den)

    def __float__(self) -> float:
        return float(self.to_float())

    def __int__(self) -> int:
        """Truncate toward zero."""
        if self.den == 0:
            state = 'NaN' if self.num == 0 else 'infinite'
            raise DivisionByZero(f"Cannot convert {state} rational {self} to an integer")
        quotient = abs(self.num) // self.den
        return quotient if self.num >= 0 else -quotient

    __trunc__ = __int__

    def to_int(self, word: WordLike = None) -> np.integer:
        """
        Truncate toward zero into a scalar of the given word (default: own word).

        Raises:
            DivisionByZero: If the rational is infinite or NaN.
            RationalOverflowError: If the quotient does not fit the word.
        """
        target = self.word if word is None else resolve_word(word)
        return target.type(check_fits(int(self), target, 'integral value'))

    # Text

    def __str__(self) -> str:
        from .codec import format_rational
        return format_rational(self)

    def __format__(self, spec: str) -> str:
        from .codec import format_rational
        return format_rational(self, spec)

    def __repr__(self) -> str:
        return f"Rational({self.num}, {self.den}, word='{self.word.name}')"


def rational(
    numerator: Integral,
    denominator: Optional[Integral] = None,
    word: WordLike = None,
) -> Rational:
    """
    Create a rational numerator/denominator, or numerator/1.

    Without an explicit word, numpy integer arguments pick the common word of
    their dtypes; plain Python integers use the default word.

    Examples:
        >>> rational(6, 10)
        Rational(3, 5, word='int64')
        >>> rational(np.int8(3), np.uint8(4)).word
        dtype('int16')
    """
    return Rational(numerator, denominator, word=word)


def to_fraction(x: Numeric) -> Fraction:
    """
    Convert an integer, Fraction or finite Rational to a Fraction.

    Raises:
        DivisionByZero: If x is an infinite or NaN rational.
        TypeError: For any other type.

    Examples:
        >>> to_fraction(Rational(6, 10))
        Fraction(3, 5)
        >>> to_fraction(Fraction(1, 3))
        Fraction(1, 3)
    """
    if isinstance(x, Fraction):
        return x
    elif isinstance(x, Rational):
        if not x.is_finite:
            raise DivisionByZero(f"Rational {x} has no Fraction equivalent")
        return Fraction(x.num, x.den)
    elif _is_integral(x):
        return Fraction(int(x))
    raise TypeError(f"Cannot convert {type(x).__name__} to Fraction")
