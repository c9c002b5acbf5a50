#!/usr/bin/env python3
"""
Transfinite Complete Demo

Demonstrates the features of the transfinite package:
1. Cantor normal forms (ω, ω², ω^ω, ...)
2. Zero / successor / limit classification
3. Arithmetic by limit recursion
4. Suprema and minimum excluded ordinals
5. Normal functions and their fixed points
6. Enumerating unbounded sets
7. Vector encoding
"""

import logging

from transfinite import (
    EnumOrd, Family, NormalFunction, Ordinal, OrdinalArithmetic,
    OrdinalEncoder, SupremumEngine, UnboundedSet, CantorDomain, classify,
    derivative, OMEGA, ZERO,
)

logging.basicConfig(level=logging.WARNING)


def section(number, title):
    print("\n" + "═" * 80)
    print(f"  SECTION {number}: {title}")
    print("═" * 80)


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: CANTOR NORMAL FORMS
# ═══════════════════════════════════════════════════════════════════════════════

section(1, "CANTOR NORMAL FORMS")

print("""
Every ordinal below ε₀ is a finite sum ω^β₁·c₁ + ... + ω^βₖ·cₖ with
β₁ > ... > βₖ, and the exponents are themselves in normal form:
  0, 1, 2, ... → ω → ω+1 → ... → ω·2 → ... → ω² → ... → ω^ω → ...
""")

OMEGA_SQ = Ordinal.omega_power(2)
samples = [
    ("Zero", ZERO),
    ("Seven", Ordinal.finite(7)),
    ("ω (omega)", OMEGA),
    ("ω + 5", OMEGA + 5),
    ("ω · 3", OMEGA * 3),
    ("ω²", OMEGA_SQ),
    ("ω² + ω + 7", OMEGA_SQ + OMEGA + 7),
    ("ω^ω", Ordinal.omega_power(OMEGA)),
]

print("  Ordinals and Their Shapes:")
print("  " + "-" * 50)
domain = CantorDomain()
for name, ordinal in samples:
    shape = classify(ordinal, domain).shape
    print(f"  {name:20} = {str(ordinal):15} ({shape.name})")

print("\n  Ordinal Ordering (< is well-defined):")
print("  " + "-" * 50)
comparisons = [
    (Ordinal.finite(1_000_000), OMEGA, "1,000,000 < ω"),
    (OMEGA * 1000, OMEGA_SQ, "ω·1000 < ω²"),
    (Ordinal.omega_power(100), Ordinal.omega_power(OMEGA), "ω^100 < ω^ω"),
]
for o1, o2, desc in comparisons:
    print(f"  {desc:25} → {o1 < o2}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: ARITHMETIC BY LIMIT RECURSION
# ═══════════════════════════════════════════════════════════════════════════════

section(2, "ARITHMETIC BY LIMIT RECURSION")

print("""
Addition, multiplication and exponentiation recurse on the right operand.
At limits they take the supremum along a fundamental sequence, which is
why none of them is commutative.
""")

arith = OrdinalArithmetic()
print(f"  2 + ω       = {arith.add(2, OMEGA)}")
print(f"  ω + 2       = {arith.add(OMEGA, 2)}")
print(f"  2 · ω       = {arith.mul(2, OMEGA)}")
print(f"  ω · 2       = {arith.mul(OMEGA, 2)}")
print(f"  ω · ω       = {arith.mul(OMEGA, OMEGA)}")
print(f"  2 ^ ω       = {arith.pow(2, OMEGA)}")
print(f"  ω² - ω      = {arith.sub(OMEGA_SQ, OMEGA)}")
print(f"  (ω+3) - ω   = {arith.sub(OMEGA + 3, OMEGA)}")
a = OMEGA * 3 + 2
quotient, remainder = arith.divmod(a, OMEGA)
print(f"  ({a}) = ω · {quotient} + {remainder}")
print(f"  ω² / ω      = {arith.div(OMEGA_SQ, OMEGA)}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: SUPREMA AND MEX
# ═══════════════════════════════════════════════════════════════════════════════

section(3, "SUPREMA AND MEX")

engine = SupremumEngine()
print(f"  sup {{n}}            = {engine.sup(Family(lambda n: n, monotone=True))}")
print(f"  sup {{ω·n}}          = {engine.sup(Family(lambda n: OMEGA * n, monotone=True))}")
print(f"  lsub {{2, ω, 5}}     = {engine.lsub(Family(lambda i: i, (2, OMEGA, 5)))}")
print(f"  blsub {{a | a < ω+1}} = {engine.blsub(OMEGA + 1, lambda a: a, monotone=True)}")
print(f"  mex {{0, 1, 3}}      = {engine.mex(Family(lambda i: i, (0, 1, 3)))}")
print(f"  mex {{1, 0, 3, 2, ...}} = {engine.mex(Family(lambda n: n + 1 if n % 2 == 0 else n - 1))}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: NORMAL FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

section(4, "NORMAL FUNCTIONS AND FIXED POINTS")

print("""
A normal function is strictly increasing and continuous at limits. It has
arbitrarily large fixed points; the derivative enumerates them.
""")

plus_omega = NormalFunction.add_left(arith, OMEGA)
doubling = NormalFunction.mul_left(arith, 2)
print(f"  {plus_omega!r} is normal on samples: {plus_omega.check([0, 3, OMEGA, OMEGA * 2], engine)}")
print(f"  least fixed point of ω + x: {plus_omega.next_fixed_point(0, engine)}")
print(f"  least fixed point of 2 · x above 1: {doubling.next_fixed_point(1, engine)}")

d = derivative(doubling, engine)
print("  fixed points of 2 · x: " + ", ".join(str(d(n)) for n in range(4)))

omega_times = NormalFunction.mul_left(arith, OMEGA)
print(f"  least fixed point of ω · x above 1: {omega_times.next_fixed_point(1, engine)}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: ENUMERATING UNBOUNDED SETS
# ═══════════════════════════════════════════════════════════════════════════════

section(5, "ENUMERATING UNBOUNDED SETS")

multiples = UnboundedSet.range_of(lambda o: OMEGA * Ordinal.coerce(o), domain)
enum = EnumOrd(multiples, engine)
for o in [0, 1, 5, OMEGA, OMEGA + 1]:
    print(f"  enum(multiples of ω)({o}) = {enum(o)}")
print(f"  preimage of ω² + ω: {enum.preimage(OMEGA_SQ + OMEGA)}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 6: VECTOR ENCODING
# ═══════════════════════════════════════════════════════════════════════════════

section(6, "VECTOR ENCODING")

encoder = OrdinalEncoder(degree=4)
batch = [OMEGA_SQ * 3 + OMEGA + 5, Ordinal.finite(12), OMEGA * 7, Ordinal.omega_power(3)]
matrix = encoder.encode_batch(batch)
for ordinal, row in zip(batch, matrix):
    print(f"  {str(ordinal):15} → {row.tolist()}")
print("  sorted: " + ", ".join(str(batch[i]) for i in encoder.argsort(batch)))

print("\n" + "═" * 80)
print("  Demo complete.")
print("═" * 80)
