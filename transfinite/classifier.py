"""
Zero / successor / limit classification.

Every ordinal is exactly one of:
- zero
- a successor succ(a), carrying its predecessor a
- a limit: nonzero and not a successor
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from .domain import OrdinalDomain


class Shape(IntEnum):
    """Shape of an ordinal for the three-way case split."""
    ZERO = 0
    SUCC = 1
    LIMIT = 2


@dataclass(frozen=True)
class Classification:
    """Outcome of classify: the shape, with the predecessor for successors."""
    shape: Shape
    predecessor: Optional[Any] = None   # set only for SUCC

    @property
    def is_limit(self) -> bool:
        return self.shape is Shape.LIMIT


def classify(o: Any, domain: OrdinalDomain) -> Classification:
    """Decide whether o is zero, a successor or a limit."""
    if domain.is_zero(o):
        return Classification(Shape.ZERO)
    previous = domain.predecessor(o)
    if previous is not None:
        return Classification(Shape.SUCC, previous)
    return Classification(Shape.LIMIT)


def is_limit(o: Any, domain: OrdinalDomain) -> bool:
    return classify(o, domain).shape is Shape.LIMIT


def is_successor(o: Any, domain: OrdinalDomain) -> bool:
    return classify(o, domain).shape is Shape.SUCC
