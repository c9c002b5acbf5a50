"""
Enumerating Unbounded Sets of Ordinals

For an unbounded set S of ordinals, enum_ord S is the unique strictly
increasing function whose range is exactly S:

    enum_ord S (o) = least s ∈ S with s ≥ blsub {enum_ord S (a) | a < o}

Uniqueness: a strictly increasing f with range f = S is enum_ord S.

The derivative of a normal function f enumerates its fixed points.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from .domain import OrdinalDomain
from .normal import NormalFunction
from .supremum import SupremumEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnboundedSet:
    """
    A set of ordinals with no upper bound.

    `least_at_or_above(x)` returns the least member ≥ x. Unboundedness is
    what makes it total; build sets through the constructors below so a
    bounded set fails loudly instead of looping.
    """
    contains: Callable[[Any], bool]
    least_at_or_above: Callable[[Any], Any]

    def __contains__(self, o: Any) -> bool:
        return self.contains(o)

    @classmethod
    def from_predicate(cls, pred: Callable[[Any], bool], domain: OrdinalDomain,
                       max_scan: int = 10_000) -> UnboundedSet:
        """Members found by scanning upward through successors."""
        def least_at_or_above(x: Any) -> Any:
            candidate = domain.coerce(x)
            for _ in range(max_scan):
                if pred(candidate):
                    return candidate
                candidate = domain.succ(candidate)
            raise ValueError(f"No member within {max_scan} steps of {x!r}; is the set bounded?")
        return cls(pred, least_at_or_above)

    @classmethod
    def range_of(cls, fn: Callable[[Any], Any], domain: OrdinalDomain) -> UnboundedSet:
        """Range of a strictly increasing fn (fn(a) ≥ a bounds the search)."""
        def least_at_or_above(x: Any) -> Any:
            x = domain.coerce(x)
            return fn(domain.invert(fn, x, x))

        def contains(x: Any) -> bool:
            return least_at_or_above(x) == domain.coerce(x)

        return cls(contains, least_at_or_above)


class EnumOrd:
    """The order isomorphism from the ordinals onto an unbounded set."""

    def __init__(self, members: UnboundedSet, engine: Optional[SupremumEngine] = None):
        self.members = members
        self.engine = engine or SupremumEngine()
        self.domain = self.engine.domain
        self._cache: Dict[Any, Any] = {}

    def __call__(self, o: Any) -> Any:
        domain = self.domain
        if domain.zero not in self._cache:
            self._cache[domain.zero] = self._pick(domain.zero)
        return self.engine.recursion.limit_rec_on(
            o,
            self._cache[domain.zero],
            # blsub below succ p of an increasing function is succ (f p)
            lambda _, previous: self._pick(domain.succ(previous)),
            lambda bound, _, below: self._pick(self.engine.blsub(bound, below, monotone=True)),
            cache=self._cache,
        )

    def _pick(self, floor: Any) -> Any:
        value = self.members.least_at_or_above(floor)
        logger.debug("enum_ord: least member ≥ %r is %r", floor, value)
        return value

    def preimage(self, s: Any) -> Any:
        """The a with enum_ord(a) = s, for s a member."""
        domain = self.domain
        s = domain.coerce(s)
        index = domain.invert(self, s, s, sample=self.engine.config.sample)
        if self(index) != s:
            raise ValueError(f"{s!r} is not a member of the enumerated set")
        return index


def enum_ord(members: UnboundedSet, engine: Optional[SupremumEngine] = None) -> EnumOrd:
    return EnumOrd(members, engine)


def is_enumeration(fn: Callable[[Any], Any], members: UnboundedSet,
                   samples: Iterable[Any], domain: OrdinalDomain) -> bool:
    """
    Check on sample points that fn is strictly increasing onto members.

    Strict monotonicity and membership are tested at the samples; for
    surjectivity, the least member at or above each sample must be hit.
    """
    points = sorted(set(domain.coerce(a) for a in samples))
    values = [fn(a) for a in points]
    if not all(left < right for left, right in zip(values, values[1:])):
        return False
    if not all(members.contains(value) for value in values):
        return False
    for a in points:
        target = members.least_at_or_above(a)
        try:
            index = domain.invert(fn, target, target)
        except ValueError:
            # fn fell below the identity somewhere, so it is not increasing
            return False
        if fn(index) != target:
            return False
    return True


def fixed_points(f: NormalFunction, engine: SupremumEngine) -> UnboundedSet:
    """Fixed points of a normal function, unbounded since nfp always exists."""
    return UnboundedSet(f.is_fixed_point, lambda a: f.next_fixed_point(a, engine))


def derivative(f: NormalFunction, engine: Optional[SupremumEngine] = None) -> EnumOrd:
    """Enumeration of the fixed points of f."""
    engine = engine or SupremumEngine()
    return EnumOrd(fixed_points(f, engine), engine)
