"""
Normal Functions

A function f on ordinals is normal when it is
1. strictly increasing at successors: f(a) < f(succ a)
2. continuous at limits: f(λ) = sup {f(a) | a < λ}

Normal functions are strictly monotone everywhere, commute with suprema
of nonempty families, are closed under composition, and satisfy
f(a) ≤ a ↔ f(a) = a. Every normal function has arbitrarily large fixed
points; the least one at or above a is the supremum of the iterates
a, f(a), f(f(a)), ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Iterable, List

from .supremum import Family

if TYPE_CHECKING:
    from .arithmetic import OrdinalArithmetic
    from .supremum import SupremumEngine


class NormalFunction:
    """
    Wrapper marking a callable as normal.

    Normality is a promise, not something checked on construction; use
    `check` to test the axioms on sample points.
    """

    def __init__(self, fn: Callable[[Any], Any], name: str = "f"):
        self.fn = fn
        self.name = name

    def __call__(self, a: Any) -> Any:
        return self.fn(a)

    @classmethod
    def add_left(cls, arithmetic: OrdinalArithmetic, a: Any) -> NormalFunction:
        """b ↦ a + b."""
        return cls(lambda b: arithmetic.add(a, b), name=f"({a!r} + ·)")

    @classmethod
    def mul_left(cls, arithmetic: OrdinalArithmetic, a: Any) -> NormalFunction:
        """b ↦ a · b, normal for a > 0."""
        if arithmetic.domain.is_zero(arithmetic.domain.coerce(a)):
            raise ValueError("b ↦ 0 · b is constant, not normal")
        return cls(lambda b: arithmetic.mul(a, b), name=f"({a!r} · ·)")

    @classmethod
    def pow_left(cls, arithmetic: OrdinalArithmetic, a: Any) -> NormalFunction:
        """b ↦ a ^ b, normal for a > 1."""
        domain = arithmetic.domain
        if not domain.one < domain.coerce(a):
            raise ValueError(f"b ↦ {a!r} ^ b is not normal for a ≤ 1")
        return cls(lambda b: arithmetic.pow(a, b), name=f"({a!r} ^ ·)")

    def compose(self, other: NormalFunction) -> NormalFunction:
        """self ∘ other, again normal."""
        return NormalFunction(lambda a: self(other(a)), name=f"{self.name} ∘ {other.name}")

    def is_fixed_point(self, a: Any) -> bool:
        # f(a) ≥ a holds for every normal f, so f(a) ≤ a already forces equality
        return self(a) <= a

    def is_strictly_monotone_on(self, samples: Iterable[Any]) -> bool:
        points = sorted(set(samples))
        values = [self(a) for a in points]
        return all(left < right for left, right in zip(values, values[1:]))

    def limit_value(self, o: Any, engine: SupremumEngine) -> Any:
        """sup {f(a) | a < o}: equals f(o) when o is a limit."""
        return engine.bsup(o, self, monotone=True)

    def map_sup(self, family: Family, engine: SupremumEngine) -> Any:
        """sup (f ∘ g): equals f(sup g) for a nonempty family g."""
        return engine.sup(family.map(self))

    def next_fixed_point(self, a: Any, engine: SupremumEngine) -> Any:
        """Least fixed point ≥ a, the supremum of the iterates of f from a."""
        iterates: List[Any] = [engine.domain.coerce(a)]

        def iterate(n: int) -> Any:
            while len(iterates) <= n:
                iterates.append(self(iterates[-1]))
            return iterates[n]

        return engine.domain.sup_sequence(iterate, engine.config.sample)

    def check(self, samples: Iterable[Any], engine: SupremumEngine) -> bool:
        """Test both normality axioms at every sample point."""
        domain = engine.domain
        for a in samples:
            a = domain.coerce(a)
            if not self(a) < self(domain.succ(a)):
                return False
            if not domain.is_zero(a) and domain.predecessor(a) is None:
                if self(a) != self.limit_value(a, engine):
                    return False
        return True

    def __repr__(self) -> str:
        return f"NormalFunction({self.name})"
