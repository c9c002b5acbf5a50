"""
Cantor Normal Form Ordinals

Every ordinal below ε₀ has a unique Cantor normal form:

    ω^α₁·c₁ + ω^α₂·c₂ + ... + ω^α_k·c_k

where α₁ > α₂ > ... > α_k are themselves ordinals in normal form and the
c_i are positive integers.

This module provides:
1. Ordinal: an immutable, hashable normal-form value with total ordering
2. Classification helpers (zero / successor / limit) and fundamental sequences
3. Closed-form addition and multiplication on normal forms
4. The natural-number embedding ℕ → Ordinal (`nat`)
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple, Union


Term = Tuple["Ordinal", int]


@dataclass(frozen=True)
@total_ordering
class Ordinal:
    """
    An ordinal below ε₀ stored as its Cantor normal form.

    `terms` is a tuple of (exponent, coefficient) pairs with strictly
    decreasing exponents and positive coefficients. The empty tuple is 0.
    """
    terms: Tuple[Term, ...] = ()

    def __post_init__(self):
        """Validate the normal form."""
        previous: Optional[Ordinal] = None
        for exponent, coefficient in self.terms:
            if not isinstance(exponent, Ordinal):
                raise TypeError(f"Exponent must be an Ordinal, got {exponent!r}")
            if isinstance(coefficient, bool) or not isinstance(coefficient, int):
                raise TypeError(f"Coefficient must be an int, got {coefficient!r}")
            if coefficient <= 0:
                raise ValueError("Coefficients must be positive")
            if previous is not None and not exponent < previous:
                raise ValueError("Exponents must be strictly decreasing")
            previous = exponent

    @classmethod
    def zero(cls) -> Ordinal:
        return cls()

    @classmethod
    def finite(cls, n: int) -> Ordinal:
        """Embed a natural number."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Expected a natural number, got {n!r}")
        if n < 0:
            raise ValueError(f"Ordinals are non-negative, got {n}")
        if n == 0:
            return cls()
        return cls(((cls(), n),))

    @classmethod
    def omega(cls) -> Ordinal:
        """ω = first infinite ordinal."""
        return cls.omega_power(1)

    @classmethod
    def omega_power(cls, exponent: Union[Ordinal, int], coefficient: int = 1) -> Ordinal:
        """ω^exponent · coefficient."""
        return cls(((cls.coerce(exponent), coefficient),))

    @classmethod
    def from_terms(cls, *terms: Tuple[Union[Ordinal, int], int]) -> Ordinal:
        """Build from (exponent, coefficient) pairs; int exponents are embedded."""
        return cls(tuple((cls.coerce(exponent), coefficient) for exponent, coefficient in terms))

    @classmethod
    def coerce(cls, value: Union[Ordinal, int]) -> Ordinal:
        """Accept an Ordinal or a natural number."""
        if isinstance(value, Ordinal):
            return value
        return cls.finite(value)

    # Classification

    def is_zero(self) -> bool:
        return not self.terms

    def is_finite(self) -> bool:
        """Check if ordinal is finite (< ω)."""
        return self.is_zero() or (len(self.terms) == 1 and self.terms[0][0].is_zero())

    def is_successor(self) -> bool:
        return bool(self.terms) and self.terms[-1][0].is_zero()

    def is_limit(self) -> bool:
        """Nonzero and not a successor."""
        return bool(self.terms) and not self.terms[-1][0].is_zero()

    @property
    def degree(self) -> Ordinal:
        """Leading exponent (0 for the ordinal 0)."""
        return self.terms[0][0] if self.terms else Ordinal()

    @property
    def leading_coefficient(self) -> int:
        return self.terms[0][1] if self.terms else 0

    @property
    def finite_part(self) -> int:
        """Coefficient of ω⁰."""
        return self.terms[-1][1] if self.is_successor() else 0

    @property
    def norm(self) -> int:
        """Largest integer written anywhere in the normal form, exponents included."""
        return max((max(coefficient, exponent.norm) for exponent, coefficient in self.terms), default=0)

    def predecessor(self) -> Optional[Ordinal]:
        """α such that self = α + 1, or None for zero and limits."""
        if not self.is_successor():
            return None
        exponent, coefficient = self.terms[-1]
        if coefficient == 1:
            return Ordinal(self.terms[:-1])
        return Ordinal(self.terms[:-1] + ((exponent, coefficient - 1),))

    def successor(self) -> Ordinal:
        """Compute α + 1."""
        if self.is_successor():
            exponent, coefficient = self.terms[-1]
            return Ordinal(self.terms[:-1] + ((exponent, coefficient + 1),))
        return Ordinal(self.terms + ((Ordinal(), 1),))

    def fundamental(self, n: int) -> Ordinal:
        """
        n-th element of the standard fundamental sequence of a limit ordinal.

        (P + ω^(β+1))[n] = P + ω^β·n
        (P + ω^λ)[n]     = P + ω^(λ[n])   for limit λ

        The sequence is strictly increasing and cofinal in self.
        """
        if not self.is_limit():
            raise ValueError(f"{self!r} is not a limit ordinal")
        exponent, coefficient = self.terms[-1]
        prefix = self.terms[:-1]
        if coefficient > 1:
            prefix = prefix + ((exponent, coefficient - 1),)
        base = Ordinal(prefix)
        lower = exponent.predecessor()
        if lower is None:
            return base + Ordinal.omega_power(exponent.fundamental(n))
        if n == 0:
            return base
        return base + Ordinal.omega_power(lower, n)

    # Ordering

    def __lt__(self, other: Union[Ordinal, int]) -> bool:
        """Ordinal comparison (lexicographic on Cantor normal form)."""
        if not isinstance(other, (Ordinal, int)) or isinstance(other, bool):
            return NotImplemented
        other = Ordinal.coerce(other)
        for (left_exp, left_coef), (right_exp, right_coef) in zip(self.terms, other.terms):
            if left_exp != right_exp:
                return left_exp < right_exp
            if left_coef != right_coef:
                return left_coef < right_coef
        return len(self.terms) < len(other.terms)

    def __eq__(self, other) -> bool:
        if isinstance(other, Ordinal):
            return self.terms == other.terms
        if isinstance(other, int) and not isinstance(other, bool):
            return other >= 0 and self.is_finite() and int(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        # Finite ordinals hash like the ints they equal
        if self.is_finite():
            return hash(int(self))
        return hash(self.terms)

    def __int__(self) -> int:
        if not self.is_finite():
            raise ValueError(f"{self!r} is not finite")
        return self.terms[0][1] if self.terms else 0

    # Closed-form arithmetic

    def __add__(self, other: Union[Ordinal, int]) -> Ordinal:
        """
        Ordinal addition (non-commutative for transfinite!).

        Terms of self below the leading exponent of other are absorbed:
        1 + ω = ω, but ω + 1 ≠ ω.
        """
        if not isinstance(other, (Ordinal, int)) or isinstance(other, bool):
            return NotImplemented
        other = Ordinal.coerce(other)
        if other.is_zero():
            return self
        head_exponent, head_coefficient = other.terms[0]
        kept = tuple(term for term in self.terms if term[0] > head_exponent)
        matched = [coefficient for exponent, coefficient in self.terms if exponent == head_exponent]
        if matched:
            head_coefficient += matched[0]
        return Ordinal(kept + ((head_exponent, head_coefficient),) + other.terms[1:])

    def __radd__(self, other: int) -> Ordinal:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Ordinal.finite(other) + self

    def __mul__(self, other: Union[Ordinal, int]) -> Ordinal:
        """
        Ordinal multiplication, distributing on the right operand's terms.

        α · ω^β = ω^(deg α + β) for β > 0
        α · n   = ω^(deg α)·(c·n) + (lower terms of α)
        """
        if not isinstance(other, (Ordinal, int)) or isinstance(other, bool):
            return NotImplemented
        other = Ordinal.coerce(other)
        if self.is_zero() or other.is_zero():
            return Ordinal()
        lead_exponent, lead_coefficient = self.terms[0]
        result = Ordinal()
        for exponent, coefficient in other.terms:
            if exponent.is_zero():
                part = Ordinal(((lead_exponent, lead_coefficient * coefficient),) + self.terms[1:])
            else:
                part = Ordinal(((lead_exponent + exponent, coefficient),))
            result = result + part
        return result

    def __rmul__(self, other: int) -> Ordinal:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Ordinal.finite(other) * self

    def __repr__(self) -> str:
        if self.is_zero():
            return "0"

        parts = []
        for exponent, coefficient in self.terms:
            if exponent.is_zero():
                parts.append(str(coefficient))
                continue
            if exponent == 1:
                base = "ω"
            elif exponent.is_finite():
                base = f"ω^{int(exponent)}"
            else:
                text = repr(exponent)
                base = f"ω^({text})" if " " in text else f"ω^{text}"
            parts.append(base if coefficient == 1 else f"{base}·{coefficient}")

        return " + ".join(parts)


def nat(n: int) -> Ordinal:
    """Natural-number embedding ℕ → Ordinal."""
    return Ordinal.finite(n)


ZERO = Ordinal.zero()
ONE = Ordinal.finite(1)
OMEGA = Ordinal.omega()


# Common ordinals for reference
ORDINAL_CONSTANTS = {
    "zero": ZERO,
    "one": ONE,
    "omega": OMEGA,
    "omega_plus_one": OMEGA.successor(),
    "omega_times_two": OMEGA * 2,
    "omega_squared": Ordinal.omega_power(2),
    "omega_cubed": Ordinal.omega_power(3),
    "omega_omega": Ordinal.omega_power(OMEGA),
}


if __name__ == "__main__":
    print("=== Cantor Normal Form Ordinals ===\n")

    for name, ordinal in ORDINAL_CONSTANTS.items():
        kind = "zero" if ordinal.is_zero() else "successor" if ordinal.is_successor() else "limit"
        print(f"{name}: {ordinal} ({kind})")

    print("\n=== Non-commutativity ===")
    print(f"1 + ω = {1 + OMEGA}")
    print(f"ω + 1 = {OMEGA + 1}")
    print(f"2 · ω = {2 * OMEGA}")
    print(f"ω · 2 = {OMEGA * 2}")

    print("\n=== Fundamental sequence of ω² ===")
    omega_sq = Ordinal.omega_power(2)
    print(", ".join(repr(omega_sq.fundamental(n)) for n in range(5)) + ", ...")
