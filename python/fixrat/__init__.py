# FixRat
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""
FixRat - Exact Rationals over Fixed-Width Integers.

A Rational is a numerator/denominator pair over a numpy integer word
(int8 .. uint64), always kept reduced with the sign on the numerator.
Zero denominators are allowed: n/0 is infinite and 0/0 is not-a-number.

Example:
    >>> import fixrat as fr
    >>> a = fr.rational(6, 10)
    >>> print(a)
    3/5
    >>> print(a + fr.rational(1, 10))
    7/10
    >>> fr.rational(1, 4) ** 0.5
    0.5
    >>> format(fr.rational(2, 1), '#/')
    '2/1'

Key Features:
    - Any signed or unsigned word type, with an explicit widening table
    - Overflow raises instead of wrapping
    - Float and integer casts with IEEE infinities and NaN
    - Format specs and stream parsing that stops exactly after the fraction
"""

__version__ = "0.1.0"

# Value type
from .rational import (
    Rational,
    rational,
    to_fraction,
)

# Word types
from .words import (
    resolve_word,
    common_word,
    word_bounds,
    is_signed,
)

# Text codec
from .codec import (
    format_rational,
    parse_fraction,
    parse_rational,
    scan_fraction,
)

# Configuration
from .config import FormatSpec, DEFAULT_WORD

# Invariant checks
from .validation import is_canonical, check_invariants

# Exceptions
from .exceptions import (
    RationalError,
    WordTypeError,
    RationalOverflowError,
    DivisionByZero,
    ParseError,
    InvariantError,
)

__all__ = [
    # Version
    "__version__",
    # Value type
    "Rational",
    "rational",
    "to_fraction",
    # Word types
    "resolve_word",
    "common_word",
    "word_bounds",
    "is_signed",
    # Text codec
    "format_rational",
    "parse_fraction",
    "parse_rational",
    "scan_fraction",
    # Configuration
    "FormatSpec",
    "DEFAULT_WORD",
    # Invariant checks
    "is_canonical",
    "check_invariants",
    # Exceptions
    "RationalError",
    "WordTypeError",
    "RationalOverflowError",
    "DivisionByZero",
    "ParseError",
    "InvariantError",
]
