"""
Well-founded recursion on ordinals.

`RecursionEngine.limit_rec_on` computes a value for any ordinal from three
handlers, one per shape:

    limit_rec_on(0)      = zero_case
    limit_rec_on(succ a) = succ_case(a, limit_rec_on(a))
    limit_rec_on(o)      = limit_case(o, classification, below)   o a limit

where `below(a)` returns limit_rec_on(a) for any a < o. Every request is for
a strictly smaller ordinal, so termination follows from the
well-foundedness of the domain's order.

Evaluation runs on an explicit stack rather than the Python call stack.
Runs of successors are peeled down to the nearest cached value, zero or
limit. When a limit handler asks `below` for a value that is not cached
yet, the handler is abandoned, the missing ordinal is pushed, and the
handler runs again once it is available. Limit handlers must therefore be
free of side effects other than through `below`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .classifier import Classification, Shape, classify
from .domain import CantorDomain, OrdinalDomain

logger = logging.getLogger(__name__)


SuccCase = Callable[[Any, Any], Any]
Below = Callable[[Any], Any]
LimitCase = Callable[[Any, Classification, Below], Any]


@dataclass
class EngineConfig:
    """Configuration shared by the recursion, arithmetic and supremum engines."""
    sample: int = 1             # first index read along a fundamental sequence
    memoize: bool = True        # keep per-operand caches between calls
    max_scan: int = 10_000      # upward scan limit for predicate-defined sets
    horizon: int = 256          # ℕ-indexed families are read up to this index


class _Pending(Exception):
    """A limit handler needs a value its evaluation has not computed yet."""

    def __init__(self, evaluation: _Evaluation, ordinal: Any):
        super().__init__(ordinal)
        self.evaluation = evaluation
        self.ordinal = ordinal


class _Evaluation:
    """One limit_rec_on call: its handlers, its cache and its worklist."""

    def __init__(self, domain: OrdinalDomain, zero_case: Any, succ_case: SuccCase,
                 limit_case: LimitCase, cache: Dict[Any, Any]):
        self.domain = domain
        self.zero_case = zero_case
        self.succ_case = succ_case
        self.limit_case = limit_case
        self.cache = cache

    def _peel(self, o: Any) -> Tuple[Any, List[Any]]:
        """Walk predecessors down to a cached ordinal, zero or a limit."""
        chain = []
        base = o
        while base not in self.cache:
            shape = classify(base, self.domain)
            if shape.shape is Shape.SUCC:
                chain.append(shape.predecessor)
                base = shape.predecessor
                continue
            if shape.shape is Shape.ZERO:
                self.cache[base] = self.zero_case
            break
        return base, chain

    def _fold(self, base: Any, chain: List[Any]) -> Any:
        result = self.cache[base]
        for previous in reversed(chain):
            result = self.succ_case(previous, result)
            self.cache[self.domain.succ(previous)] = result
        return result

    def run(self, o: Any) -> Any:
        stack = [o]
        while stack:
            top = stack[-1]
            base, chain = self._peel(top)
            if base not in self.cache:
                if base != top:
                    stack.append(base)
                    continue
                try:
                    self.cache[base] = self.limit_case(base, classify(base, self.domain), self._below(base))
                except _Pending as pending:
                    if pending.evaluation is not self:
                        raise
                    stack.append(pending.ordinal)
                    continue
                logger.debug("limit case at %r -> %r", base, self.cache[base])
            self._fold(base, chain)
            stack.pop()
        return self.cache[o]

    def _below(self, bound: Any) -> Below:
        def below(a: Any) -> Any:
            a = self.domain.coerce(a)
            if not a < bound:
                raise ValueError(f"{a!r} is not below {bound!r}")
            base, chain = self._peel(a)
            if base not in self.cache:
                raise _Pending(self, base)
            return self._fold(base, chain)
        return below


class RecursionEngine:
    """Zero / successor / limit recursion over an injected ordinal domain."""

    def __init__(self, domain: Optional[OrdinalDomain] = None, config: Optional[EngineConfig] = None):
        self.domain = domain or CantorDomain()
        self.config = config or EngineConfig()

    def limit_rec_on(
        self,
        o: Any,
        zero_case: Any,
        succ_case: SuccCase,
        limit_case: LimitCase,
        cache: Optional[Dict[Any, Any]] = None,
    ) -> Any:
        """
        Evaluate the recursion at o.

        Results are memoized in `cache` (a fresh dict when none is given).
        The depth of the Python stack does not grow with the number of
        limits below o.
        """
        o = self.domain.coerce(o)
        if cache is None:
            cache = {}
        if o in cache:
            return cache[o]
        return _Evaluation(self.domain, zero_case, succ_case, limit_case, cache).run(o)

    def sup_below(self, o: Any, below: Below) -> Any:
        """
        Supremum of the recursion's results below the limit o.

        Valid when results grow monotonically with the argument: the values
        along the fundamental sequence are then cofinal among all values.
        """
        domain = self.domain
        return domain.sup_along(o, lambda n: below(domain.fundamental(o, n)), self.config.sample)
