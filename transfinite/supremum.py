"""
Suprema, Least Strict Upper Bounds and Minimum Excluded Ordinals

Families come in two flavours:
- Family: f : Index → Ordinal, where Index is a finite tuple or ℕ
- BoundedFamily: f defined on every ordinal below a bound

    sup f   = least o with f(i) ≤ o for all i
    lsub f  = least o with f(i) < o for all i  = sup (succ ∘ f)
    mex f   = least o not in range f
    bsup, blsub, bmex: the same over a bounded family

Finite index sets and finite bounds are handled exactly. An ℕ-indexed
family is read up to EngineConfig.horizon and its supremum taken from the
shape of those values (see OrdinalDomain.sup_sequence). A family that runs
along the fundamental sequence of a limit is read the way the recursion
engine reads one (see OrdinalDomain.sup_along).
Bounded families over an infinite bound are transported into a plain
index through a cofinal embedding when they are monotone; otherwise the
supremum is taken by limit recursion over the bound.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from .domain import OrdinalDomain, CantorDomain
from .recursion import EngineConfig, RecursionEngine

logger = logging.getLogger(__name__)


class _Naturals:
    """Index type ℕ = {0, 1, 2, ...}."""

    def __repr__(self) -> str:
        return "ℕ"


NATURALS = _Naturals()


@dataclass(frozen=True)
class Family:
    """
    An ordinal-valued family indexed by a finite tuple or by ℕ.

    `monotone` promises f(i) ≤ f(j) whenever i ≤ j (only meaningful for ℕ).
    `along` names the limit whose fundamental sequence indexes an ℕ-family
    transported from a bounded one.
    """
    fn: Callable[[Any], Any]
    index: Union[Tuple[Any, ...], _Naturals] = NATURALS
    monotone: bool = False
    along: Any = None

    def __post_init__(self):
        if self.index is not NATURALS:
            object.__setattr__(self, "index", tuple(self.index))

    def is_finite(self) -> bool:
        return self.index is not NATURALS

    def values(self) -> List[Any]:
        if not self.is_finite():
            raise ValueError("An ℕ-indexed family has infinitely many values")
        return [self.fn(i) for i in self.index]

    def map(self, fn: Callable[[Any], Any], monotone: Optional[bool] = None) -> Family:
        """Post-compose with fn."""
        return Family(lambda i: fn(self.fn(i)), self.index,
                      self.monotone if monotone is None else monotone, self.along)


@dataclass(frozen=True)
class BoundedFamily:
    """A family defined on the ordinals a < bound."""
    bound: Any
    fn: Callable[[Any], Any]
    monotone: bool = False

    def to_family(self, domain: OrdinalDomain) -> Family:
        """
        Transport into a plain index through an order embedding.

        - finite bound: the embedding is onto, index = 0, 1, ..., bound - 1
        - monotone family, successor bound succ p: the single index p
        - monotone family, limit bound: the fundamental sequence (cofinal)
        """
        bound = domain.coerce(self.bound)
        size = domain.finite_value(bound)
        if size is not None:
            return Family(self.fn, tuple(domain.coerce(k) for k in range(size)), self.monotone)
        if not self.monotone:
            raise ValueError(f"A non-monotone family below {bound!r} has no index transport")
        previous = domain.predecessor(bound)
        if previous is not None:
            return Family(self.fn, (previous,), True)
        return Family(lambda n: self.fn(domain.fundamental(bound, n)), NATURALS, True, along=bound)


class SupremumEngine:
    """sup / lsub / bsup / blsub / mex / bmex over an injected domain."""

    def __init__(self, domain: Optional[OrdinalDomain] = None, config: Optional[EngineConfig] = None):
        self.domain = domain or CantorDomain()
        self.config = config or EngineConfig()
        self.recursion = RecursionEngine(self.domain, self.config)

    def sup(self, family: Family) -> Any:
        """Least upper bound; the empty family has sup 0."""
        domain = self.domain
        if family.is_finite():
            result = domain.zero
            for value in family.values():
                result = domain.max(result, domain.coerce(value))
            return result
        fn = family.fn if family.monotone else self._running_max(family.fn)
        if family.along is not None:
            return domain.sup_along(family.along, fn, self.config.sample)
        return domain.sup_sequence(fn, self.config.sample, self.config.horizon)

    def _running_max(self, fn: Callable[[int], Any]) -> Callable[[int], Any]:
        """n ↦ max f(0..n): nondecreasing, with the same supremum as f."""
        prefix: List[Any] = []

        def running(n: int) -> Any:
            while len(prefix) <= n:
                value = self.domain.coerce(fn(len(prefix)))
                prefix.append(value if not prefix else self.domain.max(prefix[-1], value))
            return prefix[n]

        return running

    def lsub(self, family: Family) -> Any:
        """Least strict upper bound: sup (succ ∘ f)."""
        return self.sup(family.map(lambda value: self.domain.succ(self.domain.coerce(value))))

    def bsup(self, bound: Any, fn: Callable[[Any], Any], monotone: bool = False) -> Any:
        """sup {fn(a) | a < bound}."""
        domain = self.domain
        family = BoundedFamily(bound, fn, monotone)
        if monotone or domain.finite_value(domain.coerce(bound)) is not None:
            return self.sup(family.to_family(domain))
        # No cofinal shortcut: bsup below each point is itself a limit recursion
        return self.recursion.limit_rec_on(
            bound,
            domain.zero,
            lambda previous, best: domain.max(best, domain.coerce(fn(previous))),
            lambda o, _, below: self.recursion.sup_below(o, below),
        )

    def blsub(self, bound: Any, fn: Callable[[Any], Any], monotone: bool = False) -> Any:
        """Least o with fn(a) < o for all a < bound."""
        return self.bsup(bound, lambda a: self.domain.succ(self.domain.coerce(fn(a))), monotone)

    def mex(self, family: Family) -> Any:
        """Least ordinal not attained by the family."""
        domain = self.domain
        if family.is_finite():
            return self._least_missing(domain.zero, {domain.coerce(v) for v in family.values()})
        if family.monotone:
            return domain.sup_sequence(self._monotone_mex_stages(family.fn),
                                       self.config.sample, self.config.horizon)
        return self._sampled_mex(family.fn)

    def _least_missing(self, start: Any, attained: set) -> Any:
        candidate = start
        while candidate in attained:
            candidate = self.domain.succ(candidate)
        return candidate

    def _monotone_mex_stages(self, fn: Callable[[int], Any]) -> Callable[[int], Any]:
        """
        n ↦ mex {f(0), ..., f(n-1)} for a nondecreasing f.

        Values only grow, so the running mex advances exactly when the next
        value hits it.
        """
        stages: List[Any] = [self.domain.zero]

        def stage(n: int) -> Any:
            while len(stages) <= n:
                current = stages[-1]
                hit = self.domain.coerce(fn(len(stages) - 1)) == current
                stages.append(self.domain.succ(current) if hit else current)
            return stages[n]

        return stage

    def _sampled_mex(self, fn: Callable[[int], Any]) -> Any:
        """
        mex of an arbitrary ℕ-indexed family.

        The mex of the first n values is nondecreasing in n and converges
        to the mex of the whole family when the latter is reached as a limit
        of finite stages. When the converged value is itself attained among
        the values read so far, the search restarts just above it.
        """
        domain = self.domain
        values: List[Any] = []

        def read(n: int) -> List[Any]:
            while len(values) < n:
                values.append(domain.coerce(fn(len(values))))
            return values[:n]

        start = domain.zero
        while True:
            floor = start

            def stage(n: int) -> Any:
                return self._least_missing(floor, set(read(n)))

            result = domain.sup_sequence(stage, self.config.sample, self.config.horizon)
            if result not in values:
                return result
            logger.debug("mex candidate %r is attained; restarting above it", result)
            start = domain.succ(result)

    def bmex(self, bound: Any, fn: Callable[[Any], Any], monotone: bool = False) -> Any:
        """
        Least ordinal not of the form fn(a) with a < bound.

        Over an infinite bound the family must be monotone: the running
        mex then advances at a successor exactly when fn hits it, and at a
        limit it is the supremum of the running mex below.
        """
        domain = self.domain
        bound = domain.coerce(bound)
        if domain.finite_value(bound) is not None:
            return self.mex(BoundedFamily(bound, fn, monotone).to_family(domain))
        if not monotone:
            raise ValueError(f"bmex below the infinite bound {bound!r} needs a monotone family")
        return self.recursion.limit_rec_on(
            bound,
            domain.zero,
            lambda previous, current: domain.succ(current) if domain.coerce(fn(previous)) == current else current,
            lambda o, _, below: self.recursion.sup_below(o, below),
        )
