"""
Vector Encoding of Ordinals

Ordinals below ω^degree with finite exponents (ω^k·c_k + ... + c_0) are
encoded as fixed-width integer coefficient vectors for numerical tooling:

    ω²·3 + ω + 5  ->  [3, 1, 5]        (degree = 3)

Vectors are ordered most significant coefficient first, so the
lexicographic order on vectors coincides with the ordinal order.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

import numpy as np

from .cantor import Ordinal


class OrdinalEncoder:
    """
    Converts ordinals below ω^degree to and from coefficient vectors.

    Slot i of a vector holds the coefficient of ω^(degree - 1 - i).
    """

    def __init__(self, degree: int = 4):
        if degree <= 0:
            raise ValueError("degree must be positive")
        self.degree = degree

    def fits(self, ordinal: Ordinal) -> bool:
        """Check that ordinal < ω^degree."""
        if ordinal.is_zero():
            return True
        lead = ordinal.degree
        return lead.is_finite() and int(lead) < self.degree

    def to_vector(self, ordinal: Ordinal) -> np.ndarray:
        """Convert ordinal to its coefficient vector."""
        ordinal = Ordinal.coerce(ordinal)
        if not self.fits(ordinal):
            raise ValueError(f"{ordinal!r} is not below ω^{self.degree}")
        vector = np.zeros(self.degree, dtype=np.int64)
        for exponent, coefficient in ordinal.terms:
            vector[self.degree - 1 - int(exponent)] = coefficient
        return vector

    def from_vector(self, vector: Sequence[int]) -> Ordinal:
        """Convert a coefficient vector back to an ordinal."""
        vector = np.asarray(vector)
        if vector.shape != (self.degree,):
            raise ValueError(f"Expected a vector of length {self.degree}, got shape {vector.shape}")
        if (vector < 0).any():
            raise ValueError("Coefficients must be non-negative")
        terms = [
            (self.degree - 1 - slot, int(coefficient))
            for slot, coefficient in enumerate(vector)
            if coefficient > 0
        ]
        return Ordinal.from_terms(*terms)

    def encode_batch(self, ordinals: Iterable[Ordinal]) -> np.ndarray:
        """Stack encodings into a (n, degree) matrix."""
        rows = [self.to_vector(ordinal) for ordinal in ordinals]
        if not rows:
            return np.zeros((0, self.degree), dtype=np.int64)
        return np.stack(rows)

    def argsort(self, ordinals: Iterable[Ordinal]) -> List[int]:
        """Indices that sort the ordinals ascending."""
        matrix = self.encode_batch(ordinals)
        if matrix.shape[0] == 0:
            return []
        # lexsort treats its last key as primary
        keys = tuple(matrix[:, slot] for slot in reversed(range(self.degree)))
        return [int(i) for i in np.lexsort(keys)]
