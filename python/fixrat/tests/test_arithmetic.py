# Tests for rational.py - Arithmetic, comparison and overflow

import pytest
import numpy as np

from fixrat.rational import Rational
from fixrat.exceptions import RationalOverflowError, WordTypeError
from fixrat.validation import check_invariants


WORDS = ['int8', 'int16', 'int32', 'int64', 'uint8', 'uint16', 'uint32', 'uint64']
SIGNED_WORDS = ['int8', 'int16', 'int32', 'int64']


class TestBinaryOperators:
    """Tests for +, -, * and / between rationals, over every word."""

    @pytest.mark.parametrize("word", WORDS)
    def test_add(self, word):
        r = Rational(3, 2, word=word) + Rational(2, 3, word=word)
        assert r == Rational(13, 6)
        assert r.word == np.dtype(word)

    @pytest.mark.parametrize("word", WORDS)
    def test_subtract(self, word):
        assert Rational(3, 2, word=word) - Rational(2, 3, word=word) == Rational(5, 6)

    @pytest.mark.parametrize("word", WORDS)
    def test_multiply(self, word):
        assert Rational(3, 2, word=word) * Rational(2, 5, word=word) == Rational(3, 5)

    @pytest.mark.parametrize("word", WORDS)
    def test_divide(self, word):
        assert Rational(3, 2, word=word) / Rational(5, 11, word=word) == Rational(33, 10)

    def test_results_are_canonical(self):
        a = Rational(-7, 12, word='int16')
        b = Rational(5, 18, word='int16')
        for r in (a + b, a - b, a * b, a / b, b / a):
            check_invariants(r)

    def test_divide_by_negative(self):
        r = Rational(1, 2) / Rational(-1, 3)
        assert r.numerator == -3
        assert r.denominator == 2


class TestIntegerOperands:
    """Tests for mixing rationals with plain integers, both directions."""

    @pytest.mark.parametrize("word", WORDS)
    def test_rational_on_left(self, word):
        assert Rational(3, 2, word=word) + 1 == Rational(5, 2)
        assert Rational(1, 2, word=word) * 2 == Rational(1, 1)
        assert Rational(2, 3, word=word) / 3 == Rational(2, 9)

    @pytest.mark.parametrize("word", SIGNED_WORDS)
    def test_subtract_integer(self, word):
        assert Rational(1, 2, word=word) - 2 == Rational(-3, 2)

    @pytest.mark.parametrize("word", WORDS)
    def test_integer_on_left(self, word):
        assert 1 + Rational(3, 2, word=word) == Rational(5, 2)
        assert 2 * Rational(1, 2, word=word) == Rational(1, 1)
        assert 2 - Rational(1, 2, word=word) == Rational(3, 2)
        assert 3 / Rational(2, 3, word=word) == Rational(9, 2)

    def test_reflected_operators_keep_word(self):
        r = 2 - Rational(1, 2, word='uint16')
        assert r.word == np.dtype('uint16')

    def test_numpy_integer_operands(self):
        r = Rational(1, 2, word='int8') + np.int32(1)
        assert r == Rational(3, 2)
        assert r.word == np.dtype('int32')

        r = np.int16(3) / Rational(2, 3, word='int8')
        assert r == Rational(9, 2)
        assert r.word == np.dtype('int16')

        r = np.uint8(2) - Rational(1, 2, word='int8')
        assert r == Rational(3, 2)
        assert r.word == np.dtype('int16')

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Rational(1, 2) + 0.5
        with pytest.raises(TypeError):
            Rational(1, 2) * "2"

    def test_compound_assignment(self):
        r = Rational(1, 2)
        r += 1
        assert r == Rational(3, 2)
        r *= Rational(2, 3)
        assert r == 1
        r -= Rational(1, 4)
        assert r == Rational(3, 4)
        r /= 3
        assert r == Rational(1, 4)


class TestMixedWords:
    """Tests for the result word of operations across words."""

    def test_same_signedness_widens(self):
        r = Rational(1, 2, word='int8') + Rational(1, 3, word='int32')
        assert r.word == np.dtype('int32')

    def test_mixed_signedness(self):
        r = Rational(1, 2, word='int8') * Rational(1, 3, word='uint8')
        assert r.word == np.dtype('int16')
        assert r == Rational(1, 6)

    def test_unsigned_subtraction_to_signed(self):
        r = Rational(1, 2, word='uint8') - Rational(1, 1, word='int16')
        assert r == Rational(-1, 2)
        assert r.word == np.dtype('int16')

    def test_widening_removes_overflow(self):
        a = Rational(100, word='int8')
        b = Rational(100, word='int16')
        assert (a + b) == 200


class TestDivisionByZero:
    """Dividing by a zero rational yields infinity or NaN, not an error."""

    def test_positive_over_zero(self):
        r = Rational(3, 2) / Rational(0, 1)
        assert r.is_infinity
        assert r.numerator == 1

    def test_negative_over_zero(self):
        r = Rational(-3, 2) / 0
        assert r.is_infinity
        assert r.numerator == -1

    def test_zero_over_zero(self):
        assert (Rational(0, 1) / 0).is_nan

    def test_integer_over_zero_rational(self):
        assert (5 / Rational(0)).is_infinity

    def test_infinity_arithmetic(self):
        inf = Rational(1, 0)
        assert (inf + 1).is_infinity
        assert (inf - inf).is_nan
        assert (inf * 0).is_nan
        assert (Rational(1, 2) / inf) == 0


class TestPower:
    """Tests for ** with integer and floating exponents."""

    @pytest.mark.parametrize("word", WORDS)
    def test_integer_power(self, word):
        assert Rational(2, 3, word=word) ** 2 == Rational(4, 9)

    def test_zero_power(self):
        assert Rational(7, 3) ** 0 == 1

    def test_negative_power(self):
        assert Rational(2, 3) ** -2 == Rational(9, 4)
        assert Rational(-2, 3) ** -1 == Rational(-3, 2)
        assert Rational(-2, 3) ** -2 == Rational(9, 4)

    def test_negative_power_of_zero(self):
        assert (Rational(0) ** -1).is_infinity

    def test_numpy_exponent(self):
        assert Rational(1, 2, word='uint8') ** np.int64(3) == Rational(1, 8)

    def test_power_overflow(self):
        with pytest.raises(RationalOverflowError):
            Rational(2, 3, word='int8') ** 5
        with pytest.raises(RationalOverflowError, match="power 1000"):
            Rational(1, 2) ** 1000

    def test_large_power_of_one(self):
        assert Rational(1) ** 10**9 == 1
        assert Rational(-1) ** (10**9 + 1) == -1

    def test_float_power(self):
        result = Rational(1, 4) ** 0.5
        assert result == 0.5
        assert isinstance(result, float)

    def test_numpy_float_power(self):
        result = Rational(1, 4) ** np.float32(0.5)
        assert isinstance(result, np.float32)
        assert result == np.float32(0.5)

    def test_float_power_of_negative_is_nan(self):
        assert np.isnan(Rational(-1, 4) ** 0.5)

    def test_modular_power_unsupported(self):
        with pytest.raises(TypeError):
            pow(Rational(1, 2), 2, 5)


class TestUnary:
    """Tests for unary +, - and abs."""

    def test_positive(self):
        r = Rational(1, 2)
        assert +r is r

    @pytest.mark.parametrize("word", SIGNED_WORDS)
    def test_negate(self, word):
        assert -Rational(1, 2, word=word) == Rational(-1, 2)
        assert -Rational(-1, 2, word=word) == Rational(1, 2)

    def test_double_negation(self):
        r = Rational(-5, 7)
        assert -(-r) == r

    def test_negate_unsigned_rejected(self):
        with pytest.raises(WordTypeError, match="unsigned"):
            -Rational(1, 2, word='uint32')

    def test_negate_minimum_overflows(self):
        with pytest.raises(RationalOverflowError):
            -Rational(-128, word='int8')

    def test_abs(self):
        assert abs(Rational(-3, 4)) == Rational(3, 4)
        assert abs(Rational(3, 4, word='uint8')) == Rational(3, 4)

    def test_bool(self):
        assert not Rational(0)
        assert Rational(1, 3)
        assert Rational(1, 0)


class TestEquality:
    """Tests for == and hashing."""

    def test_reduced_forms_equal(self):
        assert Rational(1, 2) == Rational(2, 4)

    def test_equal_across_words(self):
        assert Rational(1, 2, word='int8') == Rational(1, 2, word='uint64')

    def test_equal_to_integer(self):
        assert Rational(5, 1) == 5
        assert Rational(10, 2) == 5
        assert Rational(5, 2) != 5
        assert Rational(4, 2) == np.int8(2)

    def test_not_equal_to_float(self):
        assert Rational(1, 2) != 0.5

    def test_nan_equals_nan(self):
        assert Rational(0, 0) == Rational(0, 0)

    def test_infinities(self):
        assert Rational(3, 0) == Rational(1, 0)
        assert Rational(1, 0) != Rational(-1, 0)

    def test_hash_consistent_with_equality(self):
        assert hash(Rational(2, 4)) == hash(Rational(1, 2, word='uint8'))
        assert hash(Rational(6, 2)) == hash(3)
        assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6, word='int8')}) == 1


class TestOrdering:
    """Tests for <, <=, > and >=."""

    def test_rationals(self):
        assert Rational(2, 3) > Rational(1, 2)
        assert Rational(4, 5) < Rational(3, 2)
        assert Rational(3, 2) >= Rational(3, 2)
        assert Rational(3, 2) <= Rational(3, 2)

    def test_integers(self):
        assert Rational(3, 2) > 1
        assert Rational(1, 2) < 1
        assert Rational(4, 4) >= 1
        assert 1 < Rational(3, 2)
        assert 2 >= Rational(3, 2)

    def test_negative(self):
        assert Rational(-1, 2) < Rational(-1, 3)
        assert Rational(-1, 2) < 0

    def test_across_words(self):
        assert Rational(2, 3, word='int8') > Rational(1, 2, word='int32')
        assert Rational(1, 2, word='uint8') > Rational(-1, 2, word='int8')

    def test_infinities(self):
        inf, ninf = Rational(1, 0), Rational(-1, 0)
        assert inf > Rational(10**9)
        assert ninf < Rational(-10**9)
        assert ninf < inf
        assert inf >= inf
        assert not inf > inf
        assert inf > 5
        assert ninf < -5

    def test_nan_is_unordered(self):
        nan = Rational(0, 0)
        for other in (Rational(1, 2), Rational(1, 0), nan, 0):
            assert not nan < other
            assert not nan <= other
            assert not nan > other
            assert not nan >= other
            assert not other < nan
            assert not other >= nan

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Rational(1, 2) < 0.5

    def test_sorting(self):
        values = [Rational(1, 2), Rational(-1, 3), Rational(5), Rational(2, 3)]
        assert sorted(values) == [Rational(-1, 3), Rational(1, 2), Rational(2, 3), Rational(5)]


class TestOverflowBoundaries:
    """Results outside the word raise; intermediates never wrap."""

    def test_sum_past_maximum(self):
        with pytest.raises(RationalOverflowError, match="numerator 128"):
            Rational(127, word='int8') + 1

    def test_difference_past_minimum(self):
        with pytest.raises(RationalOverflowError):
            Rational(-128, word='int8') - 1

    def test_unsigned_below_zero(self):
        with pytest.raises(RationalOverflowError, match="cannot hold negative"):
            Rational(1, 2, word='uint8') - 1

    def test_denominator_past_maximum(self):
        with pytest.raises(RationalOverflowError, match="denominator"):
            Rational(1, 127, word='int8') * Rational(1, 2, word='int8')

    def test_large_intermediate_reduces(self):
        # 127*127 exceeds int8 but the product reduces to 1
        a = Rational(127, 126, word='int8')
        b = Rational(126, 127, word='int8')
        assert a * b == 1
        assert (a * b).word == np.dtype('int8')

    def test_int64_extremes_sum(self):
        hi = 2**63 - 1
        lo = -2**63
        assert Rational(hi) + Rational(lo) == -1
        assert Rational(hi, 2) - Rational(hi, 2) == 0

    def test_uint64_maximum(self):
        hi = 2**64 - 1
        r = Rational(hi, word='uint64') / Rational(hi, word='uint64')
        assert r == 1

    def test_comparison_never_overflows(self):
        hi = 2**63 - 1
        assert Rational(hi, hi - 1) < Rational(hi - 1, hi - 2)
        assert Rational(hi - 1, hi) < Rational(hi, hi - 1)
        assert Rational(127, 126, word='int8') < Rational(126, 125, word='int8')
        assert Rational(126, 127, word='int8') < Rational(127, 126, word='int8')
        assert Rational(-128, 127, word='int8') < Rational(-127, 128, word='int16')

    def test_error_suggests_wider_word(self):
        with pytest.raises(RationalOverflowError) as info:
            Rational(127, word='int8') + 1
        assert info.value.suggestion == "Use a wider word type such as 'int16'."
        assert info.value.value == 128
        assert info.value.word == 'int8'
