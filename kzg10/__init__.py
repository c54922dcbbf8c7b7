"""
KZG10 다항식 커밋먼트
=====================

  ┌──────────────────────────────────────────────────────┐
  │  setup(d)           → SRS ([τⁱ]₁, G2, [τ]₂), τ 폐기   │
  │  commit(srs, p)     → C = [p(τ)]₁                    │
  │  open_at(srs, p, z) → (y = p(z), π = [w(τ)]₁)        │
  │  verify(srs, C, z, y, π)                             │
  │      e(C - y·G1, G2) == e(π, [τ]₂ - z·G2)            │
  └──────────────────────────────────────────────────────┘

사용 예시:
    >>> from kzg10 import KZG10, Polynomial
    >>> kzg = KZG10.setup(max_degree=5)
    >>> p = Polynomial([1, 1, 1])
    >>> y, proof = kzg.open(p, 2)
    >>> kzg.verify(kzg.commit(p), 2, y, proof)  # True
"""

from kzg10.errors import KZGError, SetupError, PolynomialTooLarge, InvariantViolation
from kzg10.field import FR
from kzg10.kzg import KZG10, commit, open_at, create_witness, verify
from kzg10.polynomial import Polynomial, divide_by_linear
from kzg10.srs import SRS, setup
