"""
Tests for normal functions and their fixed points.
"""

import pytest

from transfinite.arithmetic import OrdinalArithmetic
from transfinite.cantor import Ordinal, ZERO, ONE, OMEGA
from transfinite.normal import NormalFunction
from transfinite.supremum import Family, SupremumEngine


OMEGA_SQ = Ordinal.omega_power(2)


@pytest.fixture(scope="module")
def arith():
    return OrdinalArithmetic()


@pytest.fixture(scope="module")
def engine():
    return SupremumEngine()


class TestConstruction:
    """Tests for the arithmetic normal functions."""

    def test_add_left(self, arith):
        f = NormalFunction.add_left(arith, OMEGA)
        assert f(3) == OMEGA + 3
        assert f(OMEGA) == OMEGA * 2
        assert "ω + ·" in repr(f)

    def test_mul_left(self, arith):
        f = NormalFunction.mul_left(arith, OMEGA)
        assert f(2) == OMEGA * 2
        assert f(OMEGA) == OMEGA_SQ

    def test_mul_by_zero_is_not_normal(self, arith):
        with pytest.raises(ValueError):
            NormalFunction.mul_left(arith, 0)

    def test_pow_left(self, arith):
        f = NormalFunction.pow_left(arith, 2)
        assert f(5) == 32
        assert f(OMEGA) == OMEGA

    def test_pow_base_at_most_one_is_not_normal(self, arith):
        with pytest.raises(ValueError):
            NormalFunction.pow_left(arith, 1)
        with pytest.raises(ValueError):
            NormalFunction.pow_left(arith, 0)

    def test_compose(self, arith):
        f = NormalFunction.add_left(arith, OMEGA)
        g = NormalFunction.mul_left(arith, 2)
        h = f.compose(g)
        assert h(3) == OMEGA + 6
        assert h(OMEGA) == OMEGA * 2
        assert h.name == f"{f.name} ∘ {g.name}"


class TestNormality:
    """Tests for the normality axioms on samples."""

    SAMPLES = [ZERO, ONE, Ordinal.finite(4), OMEGA, OMEGA + 2, OMEGA * 2]

    def test_add_left_is_normal(self, arith, engine):
        assert NormalFunction.add_left(arith, OMEGA).check(self.SAMPLES, engine)

    def test_mul_left_is_normal(self, arith, engine):
        assert NormalFunction.mul_left(arith, 3).check(self.SAMPLES, engine)

    def test_successor_is_not_continuous(self, engine):
        """x ↦ x + 1 is strictly increasing but jumps at ω."""
        f = NormalFunction(lambda x: Ordinal.coerce(x) + 1, name="succ")
        assert f.is_strictly_monotone_on(self.SAMPLES)
        assert not f.check(self.SAMPLES, engine)

    def test_constant_is_not_increasing(self, engine):
        f = NormalFunction(lambda x: OMEGA, name="const")
        assert not f.is_strictly_monotone_on(self.SAMPLES)
        assert not f.check(self.SAMPLES, engine)

    def test_inflationary(self, arith):
        """a ≤ f(a) for every normal f."""
        f = NormalFunction.mul_left(arith, 2)
        assert all(a <= f(a) for a in self.SAMPLES)

    def test_limit_value(self, arith, engine):
        f = NormalFunction.add_left(arith, OMEGA)
        assert f.limit_value(OMEGA * 2, engine) == f(OMEGA * 2)

    def test_map_sup(self, arith, engine):
        """f(sup g) = sup (f ∘ g)."""
        f = NormalFunction.add_left(arith, OMEGA)
        family = Family(lambda n: OMEGA * n, monotone=True)
        assert f.map_sup(family, engine) == f(engine.sup(family)) == OMEGA_SQ


class TestFixedPoints:
    """Tests for fixed points of normal functions."""

    def test_is_fixed_point(self, arith):
        f = NormalFunction.add_left(arith, OMEGA)
        assert f.is_fixed_point(OMEGA_SQ)
        assert f.is_fixed_point(OMEGA_SQ + 5)
        assert not f.is_fixed_point(OMEGA * 7)

    def test_next_fixed_point_of_add(self, arith, engine):
        f = NormalFunction.add_left(arith, OMEGA)
        assert f.next_fixed_point(0, engine) == OMEGA_SQ
        assert f.next_fixed_point(OMEGA * 3, engine) == OMEGA_SQ
        assert f.next_fixed_point(OMEGA_SQ + 1, engine) == OMEGA_SQ + 1

    def test_next_fixed_point_of_finite_multiple(self, arith, engine):
        """2 · ω = ω, so ω is the least fixed point of b ↦ 2 · b above 1."""
        f = NormalFunction.mul_left(arith, 2)
        assert f.next_fixed_point(1, engine) == OMEGA
        assert f.next_fixed_point(0, engine) == ZERO

    def test_next_fixed_point_of_omega_multiple(self, arith, engine):
        f = NormalFunction.mul_left(arith, OMEGA)
        assert f.next_fixed_point(1, engine) == Ordinal.omega_power(OMEGA)
        assert f.next_fixed_point(OMEGA_SQ * 3, engine) == Ordinal.omega_power(OMEGA)

    def test_fixed_point_is_above_start(self, arith, engine):
        f = NormalFunction.add_left(arith, 3)
        for a in [0, 5, OMEGA, OMEGA + 1]:
            p = f.next_fixed_point(a, engine)
            assert a <= p
            assert f.is_fixed_point(p)
