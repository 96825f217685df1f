# FixRat - Configuration
# Copyright (c) 2025 FixRat Contributors. All rights reserved.

"""Formatting options and defaults for FixRat."""

from __future__ import annotations
from dataclasses import dataclass


# Word type used when none is given and no numpy operand implies one
DEFAULT_WORD = 'int64'

# Flag characters accepted before the trailing '/' of a fraction-style spec
FRACTION_FLAGS = {'+': 'show_sign', '#': 'always_denominator', ' ': 'spaced'}


@dataclass(frozen=True)
class FormatSpec:
    """
    Options controlling how a rational is written out.

    Attributes:
        fraction_style: Use the fraction style instead of passing int_spec
                        through to the integer formatter.
        show_sign: Fraction style only. Prefix positive numerators with '+'.
        always_denominator: Fraction style only. Write the denominator even
                            when it is 1.
        spaced: Fraction style only. Separate with ' / ' instead of '/'.
        int_spec: Default style only. Format spec applied to the numerator
                  and the denominator, e.g. '04d' or 'x'.
    """
    fraction_style: bool = False
    show_sign: bool = False
    always_denominator: bool = False
    spaced: bool = False
    int_spec: str = ''

    def __post_init__(self):
        if self.fraction_style:
            if self.int_spec:
                raise ValueError(
                    f"int_spec {self.int_spec!r} cannot be combined with the fraction style"
                )
        elif self.show_sign or self.always_denominator or self.spaced:
            raise ValueError("show_sign, always_denominator and spaced need fraction_style=True")

    @classmethod
    def default(cls) -> FormatSpec:
        """Plain 'numerator/denominator' output, denominator omitted when 1."""
        return cls()

    @classmethod
    def fraction(
        cls,
        show_sign: bool = False,
        always_denominator: bool = False,
        spaced: bool = False,
    ) -> FormatSpec:
        """Fraction style with the given flags."""
        return cls(
            fraction_style=True,
            show_sign=show_sign,
            always_denominator=always_denominator,
            spaced=spaced,
        )

    @classmethod
    def from_string(cls, spec: str) -> FormatSpec:
        """
        Build options from a format() spec string.

        A spec ending in '/' selects the fraction style; the characters before
        it are flags ('+' sign, '#' always show denominator, ' ' spaced),
        optionally followed by a width. The width is accepted and ignored.
        Any other spec is passed to the integer formatter unchanged.

        Raises:
            ValueError: If a fraction-style spec carries an unknown flag.
        """
        if not spec.endswith('/'):
            return cls(int_spec=spec)

        flags = {}
        for ch in spec[:-1].rstrip('0123456789'):
            if ch not in FRACTION_FLAGS:
                raise ValueError(
                    f"Unknown fraction format flag {ch!r} in {spec!r}; "
                    f"expected any of {''.join(FRACTION_FLAGS)!r}"
                )
            flags[FRACTION_FLAGS[ch]] = True
        return cls.fraction(**flags)

    @property
    def separator(self) -> str:
        return ' / ' if self.spaced else '/'
