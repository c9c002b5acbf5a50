"""
Ordinal Domains

The arithmetic and supremum engines never look inside an ordinal value.
Everything they need from the underlying well-order is supplied by an
OrdinalDomain object handed to them at construction:

- zero, successor and predecessor (the zero/successor/limit case split)
- fundamental sequences for limit ordinals
- least-element extraction for upward-closed predicates
- the supremum of a nondecreasing ω-sequence

Two domains are provided:
1. NaturalDomain: plain ints, the finite ordinals only
2. CantorDomain: Cantor normal forms, every ordinal below ε₀
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from .cantor import Ordinal, ZERO

logger = logging.getLogger(__name__)


Sequence = Callable[[int], Any]
Predicate = Callable[[Any], bool]


def _sampled(seq: Sequence) -> Sequence:
    """Memoize an ω-sequence so repeated reads evaluate it once."""
    samples: Dict[int, Any] = {}

    def sample(n: int) -> Any:
        if n not in samples:
            samples[n] = seq(n)
        return samples[n]

    return sample


class OrdinalDomain(ABC):
    """Well-ordered value type with the operations the engines rely on."""

    name = "ordinal"

    @property
    @abstractmethod
    def zero(self) -> Any:
        """The least ordinal."""

    @property
    def one(self) -> Any:
        return self.succ(self.zero)

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """Convert a natural number (or a native value) into the domain."""

    @abstractmethod
    def succ(self, o: Any) -> Any:
        """The least ordinal strictly above o."""

    @abstractmethod
    def predecessor(self, o: Any) -> Optional[Any]:
        """a with o = succ a, or None when o is zero or a limit."""

    def is_zero(self, o: Any) -> bool:
        return o == self.zero

    @abstractmethod
    def finite_value(self, o: Any) -> Optional[int]:
        """o as an int when o is finite, else None."""

    @abstractmethod
    def norm(self, o: Any) -> int:
        """Largest integer written in o."""

    @abstractmethod
    def fundamental(self, o: Any, n: int) -> Any:
        """n-th element of a strictly increasing sequence cofinal in the limit o."""

    @abstractmethod
    def least(self, pred: Predicate, upper: Any, max_scan: int = 10_000) -> Any:
        """
        Least o with pred(o), for pred upward closed and pred(upper) true.
        """

    def invert(self, fn: Callable[[Any], Any], target: Any, upper: Any,
               strict: bool = False, sample: int = 1, verify: bool = True) -> Any:
        """
        Least o with fn(o) ≥ target (fn(o) > target when strict).

        fn must be strictly increasing. With verify=False the caller vouches
        that upper satisfies the condition, and fn is never evaluated there.
        """
        if strict:
            return self.least(lambda o: target < fn(o), upper)
        return self.least(lambda o: not fn(o) < target, upper)

    def sup_sequence(self, seq: Sequence, sample: int, horizon: int = 0) -> Any:
        """
        Supremum of the nondecreasing sequence seq(0), seq(1), ...

        The sequence is read at n and 2n, where n is at least sample, at
        least horizon / 2, and above every integer written in seq(0).
        A constant of seq(0) can only be overtaken by an index past it:
        ω^8 + ω^n keeps its ω^8 until n = 9.
        """
        seq = _sampled(seq)
        start = max(sample, horizon // 2, self.norm(self.coerce(seq(0))) + 1)
        return self.eventual_sup(seq, start, 2 * start)

    def sup_along(self, o: Any, seq: Sequence, sample: int) -> Any:
        """Supremum of seq(n), the values at the fundamental sequence of the limit o."""
        return self.sup_sequence(seq, sample)

    @abstractmethod
    def eventual_sup(self, seq: Sequence, early: int, late: int) -> Any:
        """Supremum of seq, read off its values at the indices early < late."""

    def max(self, a: Any, b: Any) -> Any:
        return b if a < b else a

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NaturalDomain(OrdinalDomain):
    """The finite ordinals as Python ints. There are no limits here."""

    name = "natural"

    @property
    def zero(self) -> int:
        return 0

    def coerce(self, value: Any) -> int:
        if isinstance(value, Ordinal):
            return int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected a natural number, got {value!r}")
        if value < 0:
            raise ValueError(f"Ordinals are non-negative, got {value}")
        return value

    def succ(self, o: int) -> int:
        return o + 1

    def predecessor(self, o: int) -> Optional[int]:
        return o - 1 if o > 0 else None

    def finite_value(self, o: int) -> Optional[int]:
        return o

    def norm(self, o: int) -> int:
        return o

    def fundamental(self, o: int, n: int) -> int:
        raise ValueError(f"{o} is not a limit ordinal")

    def least(self, pred: Predicate, upper: int, max_scan: int = 10_000) -> int:
        """Binary search over [0, upper]."""
        if not pred(upper):
            raise ValueError(f"Predicate does not hold at the upper bound {upper}")
        low, high = 0, upper
        while low < high:
            middle = (low + high) // 2
            if pred(middle):
                high = middle
            else:
                low = middle + 1
        return low

    def eventual_sup(self, seq: Sequence, early: int, late: int) -> int:
        first, last = seq(early), seq(late)
        if first == last:
            return last
        raise ValueError("Sequence grows past every natural number; its supremum is ω")


class _Search(ABC):
    """An upward-closed condition on ordinals, as seen by CantorDomain.least."""

    @abstractmethod
    def holds(self, o: Ordinal) -> bool:
        """The condition itself."""

    @abstractmethod
    def witness(self, prefix: Ordinal, exponent: Ordinal) -> Optional[int]:
        """Some k with holds(prefix + ω^exponent·k), or None if there is none."""

    @abstractmethod
    def shifted(self, base: Ordinal) -> _Search:
        """The condition e ↦ holds(base + ω^e) on exponents."""


class _PredicateSearch(_Search):
    """Arbitrary predicate; coefficients are tried by doubling up to a cap."""

    def __init__(self, pred: Predicate, max_scan: int):
        self.pred = pred
        self.max_scan = max_scan

    def holds(self, o: Ordinal) -> bool:
        return self.pred(o)

    def witness(self, prefix: Ordinal, exponent: Ordinal) -> Optional[int]:
        k = 2
        while k <= self.max_scan:
            if self.pred(prefix + Ordinal.omega_power(exponent, k)):
                return k
            k *= 2
        return None

    def shifted(self, base: Ordinal) -> _Search:
        pred = self.pred
        return _PredicateSearch(lambda e: pred(base + Ordinal.omega_power(e)), self.max_scan)


class _IncreasingSearch(_Search):
    """
    fn(o) ≥ target (or > target) for a strictly increasing fn.

    A strictly increasing sequence never attains its supremum, so some
    finite coefficient k makes fn(prefix + ω^e·k) clear the target exactly
    when sup_k fn(prefix + ω^e·k) exceeds it. That sequence runs along the
    fundamental sequence of prefix + ω^(e+1).
    """

    def __init__(self, domain: CantorDomain, fn: Callable[[Ordinal], Any],
                 target: Ordinal, strict: bool, sample: int):
        self.domain = domain
        self.fn = fn
        self.target = target
        self.strict = strict
        self.sample = sample

    def holds(self, o: Ordinal) -> bool:
        value = self.domain.coerce(self.fn(o))
        return self.target < value if self.strict else not value < self.target

    def witness(self, prefix: Ordinal, exponent: Ordinal) -> Optional[int]:
        k = 2
        while k <= 2 * self.sample:
            if self.holds(prefix + Ordinal.omega_power(exponent, k)):
                return k
            k *= 2
        limit = prefix + Ordinal.omega_power(exponent.successor())
        bound = self.domain.sup_along(limit, lambda n: self.fn(limit.fundamental(n)), self.sample)
        if not self.target < bound:
            return None
        while not self.holds(prefix + Ordinal.omega_power(exponent, k)):
            k *= 2
        return k

    def shifted(self, base: Ordinal) -> _Search:
        fn = self.fn
        return _IncreasingSearch(self.domain, lambda e: fn(base + Ordinal.omega_power(e)),
                                 self.target, self.strict, self.sample)


class CantorDomain(OrdinalDomain):
    """Ordinals below ε₀ in Cantor normal form."""

    name = "cantor"

    @property
    def zero(self) -> Ordinal:
        return ZERO

    def coerce(self, value: Any) -> Ordinal:
        return Ordinal.coerce(value)

    def succ(self, o: Ordinal) -> Ordinal:
        return o.successor()

    def predecessor(self, o: Ordinal) -> Optional[Ordinal]:
        return o.predecessor()

    def finite_value(self, o: Ordinal) -> Optional[int]:
        return int(o) if o.is_finite() else None

    def norm(self, o: Ordinal) -> int:
        return o.norm

    def fundamental(self, o: Ordinal, n: int) -> Ordinal:
        return o.fundamental(n)

    def least(self, pred: Predicate, upper: Ordinal, max_scan: int = 10_000) -> Ordinal:
        """
        Least member of an upward-closed set.

        A term ω^e·k with k > max_scan in the answer cannot be told apart
        from ω^(e+1); prefer `invert` when the condition compares a strictly
        increasing function against a target.
        """
        return self._bounded(_PredicateSearch(pred, max_scan), self.coerce(upper))

    def invert(self, fn: Callable[[Ordinal], Any], target: Any, upper: Any,
               strict: bool = False, sample: int = 1, verify: bool = True) -> Ordinal:
        search = _IncreasingSearch(self, fn, self.coerce(target), strict, sample)
        upper = self.coerce(upper)
        if not verify:
            return self._least(search, upper)
        return self._bounded(search, upper)

    def _bounded(self, search: _Search, upper: Ordinal) -> Ordinal:
        if not search.holds(upper):
            raise ValueError(f"Condition does not hold at the upper bound {upper!r}")
        return self._least(search, upper)

    def _least(self, search: _Search, upper: Ordinal) -> Ordinal:
        """
        Least m with holds(m), given holds(upper).

        Finite bounds are binary searched. Otherwise m is built term by
        term from the top. With prefix < m ≤ prefix + ω^cap, the least
        exponent e with holds(prefix + ω^e) comes from the same search one
        level down:
        - e = 0: m = prefix + 1
        - e a limit, or e = d + 1 with no finite k making
          prefix + ω^d·k hold: m = prefix + ω^e
        - otherwise m continues with the term ω^d·(k - 1) for the least
          such k, and the next term has exponent below d
        Exponents strictly decrease, so the loop terminates. When upper
        lies below prefix + ω^e some k clears it, and no witness search
        is needed.
        """
        if search.holds(ZERO):
            return ZERO
        if upper.is_finite():
            low, high = 0, int(upper)
            while high - low > 1:
                middle = (low + high) // 2
                if search.holds(Ordinal.finite(middle)):
                    high = middle
                else:
                    low = middle
            return Ordinal.finite(high)

        prefix = ZERO
        # prefix + ω^(deg upper + 1) > upper
        cap = upper.degree.successor()
        while True:
            exponent = self._least(search.shifted(prefix), cap)
            if exponent.is_zero():
                return prefix.successor()
            lower = exponent.predecessor()
            step = prefix + Ordinal.omega_power(exponent)
            if lower is None:
                return step
            if upper < step:
                high = 2
                while not upper < prefix + Ordinal.omega_power(lower, high):
                    high *= 2
            else:
                high = search.witness(prefix, lower)
                if high is None:
                    return step
            # holds at coefficient high, fails at 1
            low = 1
            while high - low > 1:
                middle = (low + high) // 2
                if search.holds(prefix + Ordinal.omega_power(lower, middle)):
                    high = middle
                else:
                    low = middle
            prefix = prefix + Ordinal.omega_power(lower, low)
            cap = lower

    def sup_along(self, o: Ordinal, seq: Sequence, sample: int) -> Ordinal:
        """
        Supremum of seq(n), the values at o[n] for the limit o.

        For o = P + ω^(d+1) the points P + ω^d·n differ only in the
        coefficient n, so the values at sample and 2·sample already show how
        the sequence grows. For o = P + ω^λ with λ a limit the exponent λ[n]
        moves, and a term of seq(0) is absorbed only once λ[n] passes it:
        the sequence is read past every integer written in seq(0), at two
        neighbouring indices since each value costs a recursion through
        ω^λ[n].
        """
        o = self.coerce(o)
        seq = _sampled(seq)
        if not o.terms[-1][0].is_limit():
            return self.eventual_sup(seq, sample, 2 * sample)
        start = max(sample, self.norm(self.coerce(seq(0))) + 1)
        return self.eventual_sup(seq, start, start + 1)

    def eventual_sup(self, seq: Sequence, early: int, late: int) -> Ordinal:
        """
        Supremum by eventual-shape analysis of the sequence.

        Equal samples mean the sequence has stabilised. Otherwise let P be
        the common prefix of terms; the tails after P grow without settling,
        so the supremum is P + ω^E with E = sup (leading tail exponent + 1),
        found by the same analysis one level down at the same indices. The
        sequence must have reached its eventual shape by the early index.
        """
        seq = _sampled(seq)
        first, last = self.coerce(seq(early)), self.coerce(seq(late))
        if first == last:
            logger.debug("eventual_sup: stable at %r", last)
            return last
        if last < first:
            raise ValueError(f"Sequence decreases between samples: {first!r} > {last!r}")

        shared = 0
        for left, right in zip(first.terms, last.terms):
            if left != right:
                break
            shared += 1
        prefix = Ordinal(last.terms[:shared])

        def tail_rank(n: int) -> Ordinal:
            terms = self.coerce(seq(n)).terms
            if len(terms) <= shared:
                return ZERO
            return terms[shared][0].successor()

        exponent = self.eventual_sup(tail_rank, early, late)
        result = prefix + Ordinal.omega_power(exponent)
        logger.debug("eventual_sup: %r .. %r grows to %r", first, last, result)
        return result
