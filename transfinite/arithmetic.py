"""
Ordinal Arithmetic by Limit Recursion

Every operator recurses on its right operand with the left one fixed:

    a + 0 = a        a + succ b = succ (a + b)     a + λ = sup {a + b | b < λ}
    a · 0 = 0        a · succ b = a·b + a          a · λ = sup {a·b | b < λ}
    a ^ 0 = 1        a ^ succ b = a^b · a          a ^ λ = sup {a^b | b < λ}

Subtraction and division invert the normal functions o ↦ b + o and
o ↦ b · o with the domain's least-element search:

    a - b = least o with b + o ≥ a
    a / b = pred (least o with a < b · o)   (a / 0 = 0)
    a % b = a - b · (a / b)                 (a % 0 = a)

None of these raise: saturation at 0 and the division-by-zero
conventions make every operator total.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from .domain import CantorDomain, OrdinalDomain
from .recursion import EngineConfig, RecursionEngine


class OrdinalArithmetic:
    """
    Operations on ordinals of an injected domain.

    Results are cached per (operator, left operand) and the caches grow
    until `clear_cache` is called. `EngineConfig(memoize=False)` turns
    them off.
    """

    def __init__(self, domain: Optional[OrdinalDomain] = None, config: Optional[EngineConfig] = None):
        self.domain = domain or CantorDomain()
        self.config = config or EngineConfig()
        self.recursion = RecursionEngine(self.domain, self.config)
        self._memo: Dict[Tuple[str, Any], Dict[Any, Any]] = {}

    def _cache(self, op: str, left: Any) -> Optional[Dict[Any, Any]]:
        """Results of `op` with a fixed left operand, keyed by the right one."""
        if not self.config.memoize:
            return None
        return self._memo.setdefault((op, left), {})

    def clear_cache(self) -> None:
        self._memo.clear()

    def succ(self, a: Any) -> Any:
        return self.domain.succ(self.domain.coerce(a))

    def pred(self, a: Any) -> Any:
        """pred (succ a) = a; zero and limits are their own pred."""
        a = self.domain.coerce(a)
        previous = self.domain.predecessor(a)
        return a if previous is None else previous

    def add(self, a: Any, b: Any) -> Any:
        """
        Ordinal addition α + β.

        Note: Ordinal addition is NOT commutative for transfinite ordinals!
        1 + ω = ω, but ω + 1 ≠ ω
        """
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        return self.recursion.limit_rec_on(
            b,
            a,
            lambda _, total: self.domain.succ(total),
            lambda o, _, below: self.recursion.sup_below(o, below),
            cache=self._cache("add", a),
        )

    def sub(self, a: Any, b: Any) -> Any:
        """Least o with b + o ≥ a; 0 when b ≥ a."""
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        # b + a ≥ a, so a bounds the search
        return self.domain.invert(lambda o: self.add(b, o), a, a,
                                  sample=self.config.sample, verify=False)

    def mul(self, a: Any, b: Any) -> Any:
        """
        Ordinal multiplication α · β.

        2 · ω = sup {2·n} = ω, but ω · 2 = ω + ω
        """
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        return self.recursion.limit_rec_on(
            b,
            self.domain.zero,
            lambda _, product: self.add(product, a),
            lambda o, _, below: self.recursion.sup_below(o, below),
            cache=self._cache("mul", a),
        )

    def div(self, a: Any, b: Any) -> Any:
        """
        Largest o with b · o ≤ a; division by zero gives 0.

        The least o with b · o > a is a successor since b · o is continuous.
        """
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        if self.domain.is_zero(b):
            return self.domain.zero
        # b · succ a > a for b > 0
        above = self.domain.invert(lambda o: self.mul(b, o), a, self.domain.succ(a),
                                   strict=True, sample=self.config.sample, verify=False)
        return self.domain.predecessor(above)

    def mod(self, a: Any, b: Any) -> Any:
        """a - b · (a / b); a % 0 = a."""
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        return self.sub(a, self.mul(b, self.div(a, b)))

    def divmod(self, a: Any, b: Any) -> Tuple[Any, Any]:
        quotient = self.div(a, b)
        return quotient, self.sub(a, self.mul(b, quotient))

    def pow(self, a: Any, b: Any) -> Any:
        """
        Ordinal exponentiation α ^ β.

        0 ^ β = 0 for β ≠ 0, so 0 is handled outside the recursion.
        2 ^ ω = ω, ω ^ 2 = ω · ω
        """
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        if self.domain.is_zero(a):
            return self.domain.one if self.domain.is_zero(b) else self.domain.zero
        return self.recursion.limit_rec_on(
            b,
            self.domain.one,
            lambda _, power: self.mul(power, a),
            lambda o, _, below: self.recursion.sup_below(o, below),
            cache=self._cache("pow", a),
        )

    def dvd(self, a: Any, b: Any) -> bool:
        """a ∣ b: b = a · c for some c."""
        a, b = self.domain.coerce(a), self.domain.coerce(b)
        if self.domain.is_zero(a):
            return self.domain.is_zero(b)
        return self.domain.is_zero(self.mod(b, a))


if __name__ == "__main__":
    from .cantor import OMEGA

    arith = OrdinalArithmetic()
    print("=== Ordinal Arithmetic by Limit Recursion ===\n")
    print(f"1 + 2 = {arith.add(1, 2)}")
    print(f"2 + ω = {arith.add(2, OMEGA)}")
    print(f"ω + 1 = {arith.add(OMEGA, 1)}")
    print(f"2 · ω = {arith.mul(2, OMEGA)}")
    print(f"ω · 2 = {arith.mul(OMEGA, 2)}")
    print(f"ω · ω = {arith.mul(OMEGA, OMEGA)}")
    print(f"2 ^ ω = {arith.pow(2, OMEGA)}")
    a, b = arith.add(arith.mul(OMEGA, 3), 2), OMEGA
    print(f"({a}) divmod {b} = {arith.divmod(a, b)}")
