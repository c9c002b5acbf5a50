"""
Tests for ordinal arithmetic defined by limit recursion.
"""

import pytest

from transfinite.arithmetic import OrdinalArithmetic
from transfinite.cantor import Ordinal, ZERO, ONE, OMEGA
from transfinite.domain import NaturalDomain
from transfinite.recursion import EngineConfig


OMEGA_SQ = Ordinal.omega_power(2)

GRID = [ZERO, ONE, Ordinal.finite(3), OMEGA, OMEGA + 2, OMEGA * 2, OMEGA_SQ]


@pytest.fixture(scope="module")
def arith():
    return OrdinalArithmetic()


class TestAddition:
    """Tests for α + β."""

    def test_finite(self, arith):
        assert arith.add(1, 2) == 3

    def test_absorption(self, arith):
        """Test that n + ω = ω."""
        assert arith.add(2, OMEGA) == OMEGA
        assert arith.add(OMEGA, OMEGA_SQ) == OMEGA_SQ

    def test_not_commutative(self, arith):
        assert arith.add(OMEGA, 1) == OMEGA + 1
        assert arith.add(OMEGA, 1) != arith.add(1, OMEGA)

    def test_matches_normal_form(self, arith):
        for a in GRID:
            for b in GRID:
                assert arith.add(a, b) == a + b, f"{a} + {b}"

    def test_left_cancellation(self, arith):
        """a + b = a + c only when b = c, but 1 + ω = 0 + ω."""
        for a in [ONE, OMEGA]:
            for b in GRID[:5]:
                for c in GRID[:5]:
                    assert (arith.add(a, b) == arith.add(a, c)) == (b == c)
        assert arith.add(1, OMEGA) == arith.add(0, OMEGA)

    def test_associative(self, arith):
        a, b, c = OMEGA + 1, 3, OMEGA
        assert arith.add(arith.add(a, b), c) == arith.add(a, arith.add(b, c))


class TestSubtraction:
    """Tests for α - β, the least γ with β + γ ≥ α."""

    def test_finite(self, arith):
        assert arith.sub(7, 3) == 4

    def test_saturates_at_zero(self, arith):
        assert arith.sub(3, 7) == ZERO
        assert arith.sub(OMEGA, OMEGA_SQ) == ZERO

    def test_transfinite(self, arith):
        assert arith.sub(OMEGA + 3, OMEGA) == 3
        assert arith.sub(OMEGA + 3, 2) == OMEGA + 3
        assert arith.sub(OMEGA_SQ, OMEGA) == OMEGA_SQ
        assert arith.sub(OMEGA * 2, OMEGA) == OMEGA

    def test_add_sub_cancel(self, arith):
        for a in [ZERO, 2, OMEGA, OMEGA + 1]:
            for b in [ZERO, 3, OMEGA, OMEGA * 2 + 1]:
                assert arith.sub(arith.add(a, b), a) == b, f"({a} + {b}) - {a}"

    def test_iterated_subtraction(self, arith):
        """(a - b) - c = a - (b + c)."""
        for a, b, c in [(OMEGA * 2 + 5, OMEGA, 3), (OMEGA_SQ, 4, OMEGA), (9, 2, 3)]:
            assert arith.sub(arith.sub(a, b), c) == arith.sub(a, arith.add(b, c))

    def test_galois_connection(self, arith):
        """a - b ≤ c exactly when a ≤ b + c."""
        a, b = OMEGA * 2 + 1, OMEGA
        for c in [ZERO, 1, OMEGA, OMEGA + 1, OMEGA * 2]:
            assert (arith.sub(a, b) <= c) == (a <= arith.add(b, c))

    def test_sub_then_add_restores(self, arith):
        """b ≤ a implies b + (a - b) = a."""
        for a, b in [(OMEGA + 5, 3), (OMEGA * 2, OMEGA), (OMEGA_SQ + 1, OMEGA + 4)]:
            assert arith.add(b, arith.sub(a, b)) == a


class TestMultiplication:
    """Tests for α · β."""

    def test_finite(self, arith):
        assert arith.mul(3, 4) == 12

    def test_not_commutative(self, arith):
        """2 · ω = ω, but ω · 2 = ω + ω."""
        assert arith.mul(2, OMEGA) == OMEGA
        assert arith.mul(OMEGA, 2) == OMEGA * 2

    def test_omega_squared(self, arith):
        assert arith.mul(OMEGA, OMEGA) == OMEGA_SQ

    def test_matches_normal_form(self, arith):
        for a in GRID[:6]:
            for b in GRID[:6]:
                assert arith.mul(a, b) == a * b, f"{a} · {b}"

    def test_zero_product(self, arith):
        """a · b = 0 exactly when a = 0 or b = 0."""
        for a in GRID:
            for b in GRID[:6]:
                assert arith.mul(a, b).is_zero() == (a.is_zero() or b.is_zero())

    def test_left_distributive(self, arith):
        a, b, c = OMEGA + 1, 2, OMEGA
        assert arith.mul(a, arith.add(b, c)) == arith.add(arith.mul(a, b), arith.mul(a, c))

    def test_right_distributivity_fails(self, arith):
        """(1 + 1) · ω = ω, but 1 · ω + 1 · ω = ω · 2."""
        assert arith.mul(arith.add(1, 1), OMEGA) != arith.add(arith.mul(1, OMEGA), arith.mul(1, OMEGA))


class TestDivision:
    """Tests for α / β and α % β."""

    def test_finite(self, arith):
        assert arith.div(17, 5) == 3
        assert arith.mod(17, 5) == 2

    def test_by_zero(self, arith):
        assert arith.div(OMEGA, 0) == ZERO
        assert arith.mod(OMEGA + 3, 0) == OMEGA + 3

    def test_divmod_omega(self, arith):
        a = arith.add(arith.mul(OMEGA, 3), 2)
        assert arith.divmod(a, OMEGA) == (3, 2)

    def test_quotient_can_be_a_limit(self, arith):
        assert arith.div(OMEGA_SQ, OMEGA) == OMEGA
        assert arith.mod(OMEGA_SQ, OMEGA) == ZERO

    def test_finite_divisor_of_transfinite(self, arith):
        """ω = 2 · ω, so ω / 2 = ω and ω % 2 = 0."""
        assert arith.div(OMEGA, 2) == OMEGA
        assert arith.mod(OMEGA, 2) == ZERO
        assert arith.divmod(OMEGA + 5, 2) == (OMEGA + 2, 1)

    @pytest.mark.parametrize("a,b", [
        (17, 5),
        (OMEGA + 5, 2),
        (OMEGA * 3 + 2, OMEGA),
        (OMEGA * 2 + 7, OMEGA + 1),
    ])
    def test_division_algorithm(self, arith, a, b):
        """a = b · (a / b) + a % b with a % b < b."""
        quotient, remainder = arith.divmod(a, b)
        assert arith.add(arith.mul(b, quotient), remainder) == a
        assert remainder < b

    def test_quotient_bound(self, arith):
        """a / b < c exactly when a < b · c."""
        a, b = OMEGA * 2 + 3, OMEGA
        for c in [1, 2, 3, OMEGA]:
            assert (arith.div(a, b) < c) == (a < arith.mul(b, c))

    def test_multiple_plus_remainder(self, arith):
        """(x · y + z) % x = z % x."""
        x, y, z = OMEGA, 2, 5
        assert arith.mod(arith.add(arith.mul(x, y), z), x) == arith.mod(z, x)

    def test_cancellation(self, arith):
        """(a · b) / a = b for a > 0."""
        for a, b in [(3, 4), (OMEGA, 2), (OMEGA, OMEGA), (OMEGA + 1, 3)]:
            assert arith.div(arith.mul(a, b), a) == b


class TestExponentiation:
    """Tests for α ^ β."""

    def test_finite(self, arith):
        assert arith.pow(2, 10) == 1024

    def test_zero_cases(self, arith):
        assert arith.pow(0, 0) == ONE
        assert arith.pow(0, OMEGA) == ZERO
        assert arith.pow(OMEGA, 0) == ONE

    def test_two_to_omega(self, arith):
        """2 ^ ω = sup 2^n = ω."""
        assert arith.pow(2, OMEGA) == OMEGA

    def test_omega_squared(self, arith):
        assert arith.pow(OMEGA, 2) == OMEGA_SQ

    def test_omega_to_omega(self, arith):
        assert arith.pow(OMEGA, OMEGA) == Ordinal.omega_power(OMEGA)

    def test_two_to_omega_squared(self, arith):
        """2 ^ (ω·2) = (2^ω)^2 = ω², so 2 ^ ω² = sup ω^n = ω^ω."""
        assert arith.pow(2, OMEGA * 2) == OMEGA_SQ
        assert arith.pow(2, OMEGA_SQ) == Ordinal.omega_power(OMEGA)


class TestLargeArguments:
    """Operands well above ω^4 under the default configuration."""

    OMEGA_OMEGA = Ordinal.omega_power(OMEGA)

    def test_finite_absorbed_by_high_power(self, arith):
        assert arith.add(1, Ordinal.omega_power(5)) == Ordinal.omega_power(5)

    def test_many_limits_in_a_row(self, arith):
        assert arith.add(1, OMEGA * 150) == OMEGA * 150
        assert arith.add(OMEGA, OMEGA * 150 + 2) == OMEGA * 151 + 2

    def test_power_absorbed_by_omega_omega(self, arith):
        """ω^8 + ω^n keeps its ω^8 until n = 9, then ω^ω swallows it."""
        assert arith.add(Ordinal.omega_power(8), self.OMEGA_OMEGA) == self.OMEGA_OMEGA
        assert arith.add(Ordinal.omega_power(8, 2), self.OMEGA_OMEGA) == self.OMEGA_OMEGA
        assert arith.add(Ordinal.omega_power(8) + 5, self.OMEGA_OMEGA + 1) == self.OMEGA_OMEGA + 1

    def test_omega_times_omega_omega(self, arith):
        """ω · ω^ω = ω^(1 + ω) = ω^ω."""
        assert arith.mul(OMEGA, self.OMEGA_OMEGA) == self.OMEGA_OMEGA

    def test_omega_omega_squared(self, arith):
        assert arith.mul(self.OMEGA_OMEGA, self.OMEGA_OMEGA) == Ordinal.omega_power(OMEGA * 2)

    def test_divmod_by_high_power(self, arith):
        b = Ordinal.omega_power(8) + 1
        a = Ordinal.omega_power(8, 2) + OMEGA + 4
        quotient, remainder = arith.divmod(a, b)
        assert (quotient, remainder) == (2, OMEGA + 4)
        assert arith.add(arith.mul(b, quotient), remainder) == a
        assert remainder < b


class TestPredecessorAndDivisibility:
    def test_pred(self, arith):
        assert arith.pred(OMEGA + 1) == OMEGA
        assert arith.pred(OMEGA) == OMEGA
        assert arith.pred(0) == ZERO
        assert arith.pred(arith.succ(OMEGA_SQ)) == OMEGA_SQ

    def test_dvd(self, arith):
        assert arith.dvd(OMEGA, OMEGA * 3)
        assert not arith.dvd(OMEGA, OMEGA + 1)
        assert arith.dvd(0, 0)
        assert not arith.dvd(0, OMEGA)
        assert arith.dvd(3, 12)


class TestNaturalArithmetic:
    """The same operators over plain ints."""

    def setup_method(self):
        self.arith = OrdinalArithmetic(NaturalDomain())

    def test_matches_int_arithmetic(self):
        for a in range(6):
            for b in range(6):
                assert self.arith.add(a, b) == a + b
                assert self.arith.mul(a, b) == a * b
                assert self.arith.sub(a, b) == max(a - b, 0)
                if b:
                    assert self.arith.divmod(a, b) == divmod(a, b)

    def test_pow(self):
        assert self.arith.pow(3, 4) == 81

    def test_results_are_ints(self):
        assert type(self.arith.add(2, 3)) is int


class TestCaching:
    def test_without_memoization(self):
        arith = OrdinalArithmetic(config=EngineConfig(memoize=False))
        assert arith.mul(OMEGA, 2) == OMEGA * 2
        assert arith._memo == {}

    def test_clear_cache(self):
        arith = OrdinalArithmetic()
        arith.add(OMEGA, 3)
        assert arith._memo
        arith.clear_cache()
        assert arith._memo == {}

    def test_one_cache_per_left_operand(self):
        arith = OrdinalArithmetic()
        arith.add(OMEGA, 3)
        arith.add(OMEGA, 5)
        arith.add(1, 2)
        assert set(arith._memo) == {("add", OMEGA), ("add", 1)}
        assert arith._memo[("add", OMEGA)][5] == OMEGA + 5
