# FixRat - Invariant Checks
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""
Canonical-form checks for rationals.

Every Rational is built through the normalizer, so these checks never run
on the arithmetic path. They exist for test suites (ours and downstream
ones) that want to assert the canonical form after a sequence of
operations.
"""

from __future__ import annotations
import math

from .exceptions import InvariantError
from .rational import Rational
from .words import fits


def is_canonical(num: int, den: int) -> bool:
    """
    True if (num, den) is in canonical reduced form.

    The denominator must be non-negative and share no factor with the
    numerator; (0, 0) is the one exemption.
    """
    if den < 0:
        return False
    if num == 0 and den == 0:
        return True
    return math.gcd(abs(num), den) == 1


def check_invariants(r: Rational) -> Rational:
    """
    Assert that r is canonical and fits its word.

    Returns:
        r, so calls can be chained in assertions.

    Raises:
        InvariantError: Describing the first violated invariant.
    """
    # Raw fields, since a corrupted value may not fit its word's scalar type
    num, den = r.num, r.den
    if den < 0:
        raise InvariantError(f"Negative denominator in {num}/{den}")
    if not is_canonical(num, den):
        raise InvariantError(f"{num}/{den} is not reduced (common factor {math.gcd(abs(num), den)})")
    if not (fits(num, r.word) and fits(den, r.word)):
        raise InvariantError(f"{num}/{den} does not fit word {r.word.name}")
    return r
