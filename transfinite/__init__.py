"""
Transfinite: Ordinal Recursion, Arithmetic and Suprema

A computable rendition of transfinite arithmetic:

1. Ordinal values in Cantor normal form (every ordinal below ε₀)
2. The zero / successor / limit case split and well-founded recursion
3. Arithmetic (+, -, ·, /, %, ^) built on that recursion
4. Normal functions, their fixed points and derivatives
5. sup / lsub / bsup / blsub / mex / bmex over families
6. enum_ord: the order isomorphism onto an unbounded set of ordinals

Every engine takes the ordinal domain as an explicit argument, so the same
code runs over plain ints (NaturalDomain) or Cantor normal forms
(CantorDomain, the default).

Example usage:
    from transfinite import OrdinalArithmetic, OMEGA

    arith = OrdinalArithmetic()
    print(arith.add(2, OMEGA))      # ω
    print(arith.mul(OMEGA, 2))      # ω·2
"""

__version__ = "0.3.0"

from .cantor import (
    Ordinal,
    nat,
    ZERO,
    ONE,
    OMEGA,
    ORDINAL_CONSTANTS,
)

from .domain import (
    OrdinalDomain,
    NaturalDomain,
    CantorDomain,
)

from .classifier import (
    Shape,
    Classification,
    classify,
    is_limit,
    is_successor,
)

from .recursion import (
    EngineConfig,
    RecursionEngine,
)

from .arithmetic import OrdinalArithmetic

from .supremum import (
    NATURALS,
    Family,
    BoundedFamily,
    SupremumEngine,
)

from .normal import NormalFunction

from .enum_ord import (
    UnboundedSet,
    EnumOrd,
    enum_ord,
    is_enumeration,
    fixed_points,
    derivative,
)

from .encoding import OrdinalEncoder

__all__ = [
    # Values
    "Ordinal",
    "nat",
    "ZERO",
    "ONE",
    "OMEGA",
    "ORDINAL_CONSTANTS",
    # Domains
    "OrdinalDomain",
    "NaturalDomain",
    "CantorDomain",
    # Classification and recursion
    "Shape",
    "Classification",
    "classify",
    "is_limit",
    "is_successor",
    "EngineConfig",
    "RecursionEngine",
    # Arithmetic
    "OrdinalArithmetic",
    # Suprema
    "NATURALS",
    "Family",
    "BoundedFamily",
    "SupremumEngine",
    # Normal functions and enumeration
    "NormalFunction",
    "UnboundedSet",
    "EnumOrd",
    "enum_ord",
    "is_enumeration",
    "fixed_points",
    "derivative",
    # Encoding
    "OrdinalEncoder",
]
