"""
KZG 다항식 커밋먼트 스킴
=========================

Kate-Zaverucha-Goldberg (KZG10) 다항식 커밋먼트.

**커밋먼트**:
  다항식 p(x)를 타원곡선 점 하나로 요약한다.
  - C = Σᵢ cᵢ · [τⁱ]₁ = p(τ)·G1 (τ는 SRS의 폐기된 비밀 값)
  - 바인딩(binding): 한 번 커밋하면 다른 다항식으로 바꿀 수 없음
  - 결정론적: 같은 (p, SRS)는 항상 같은 점

**열기 증명 (Opening Proof)**:
  "p(z) = y" 임을 증명하는 방법:
  1. y = p(z)
  2. 몫 다항식 w(x) = (p(x) - y) / (x - z)
     (p(z) = y이면 (x-z)가 (p(x)-y)를 나누므로 나머지는 0)
  3. 증명 π = commit(w)

**검증**:
  e(C - y·G1, G2) == e(π, τ·G2 - z·G2)
  "지수 안에서" p(τ) - y = (τ - z)·w(τ) 인지를 확인한다.
  검증 실패는 예외가 아니라 False 반환이다.

사용 예시:
    >>> from kzg10.kzg import commit, open_at, verify
    >>> C = commit(srs, poly)
    >>> y, proof = open_at(srs, poly, 7)
    >>> verify(srs, C, 7, y, proof)  # True
"""

import logging

from kzg10.config import get_config
from kzg10.errors import PolynomialTooLarge, InvariantViolation
from kzg10.field import (
    FR, to_fr, ec_mul, ec_sub, ec_pairing, is_g1_point,
)
from kzg10.msm import ec_lincomb
from kzg10.polynomial import Polynomial, divide_by_linear
from kzg10.srs import setup

logger = logging.getLogger(__name__)


def commit(srs, poly, workers=None):
    """다항식을 KZG 커밋한다.

    C = Σᵢ cᵢ · [τⁱ]₁ = p(τ) · G1

    SRS의 G1 powers [G1, τG1, τ²G1, ...]에 다항식 계수를 곱하여
    선형결합한다. τ를 모르는 상태에서 p(τ)·G1을 계산하는 것이다.
    뒤쪽의 0 계수는 차수 판정에서 무시된다.

    Args:
        srs: Structured Reference String
        poly: 커밋할 다항식 (Polynomial)
        workers: 선형결합 병렬 프로세스 수 (기본값: KZG_COMMIT_WORKERS)

    Returns:
        G1 점: 커밋먼트 C (영 다항식이면 무한원점 None)

    Raises:
        PolynomialTooLarge: 다항식 차수가 SRS 최대 차수를 초과할 때

    예시:
        >>> p = Polynomial([1, 2, 3])  # 1 + 2x + 3x²
        >>> C = commit(srs, p)         # (1 + 2τ + 3τ²)·G1
    """
    degree = poly.degree
    if degree > srs.max_degree:
        raise PolynomialTooLarge(degree, srs.max_degree)
    if workers is None:
        workers = get_config().commit_workers

    n = degree + 1
    return ec_lincomb(srs.g1_powers[:n], poly.coeffs[:n], workers)


def open_at(srs, poly, point, workers=None):
    """p(z)를 계산하고 열기 증명(opening proof)을 만든다.

    수학적 근거:
        p(z) = y이면 (p(x) - y)는 (x - z)로 나누어 떨어진다.
        (다항식의 인수정리: f(a) = 0 ⟺ (x-a) | f(x))

    Args:
        srs: SRS
        poly: 열어볼 다항식 p(x)
        point: 평가 점 z (FR 원소 또는 정수)
        workers: commit()과 같음

    Returns:
        tuple: (y = p(z) FR, 증명 π G1 점)

    Raises:
        PolynomialTooLarge: 다항식 차수가 SRS 최대 차수를 초과할 때
        InvariantViolation: 나머지가 0이 아닐 때 (구현 결함)

    예시:
        >>> p = Polynomial([1, 1, 1])  # 1 + x + x²
        >>> y, proof = open_at(srs, p, 2)
        >>> y  # FR(7)
    """
    if poly.degree > srs.max_degree:
        raise PolynomialTooLarge(poly.degree, srs.max_degree)
    point = to_fr(point)

    # y = p(z)
    y = poly.evaluate(point)

    # p(x) - y (상수항에서만 뺌)
    numerator = poly - Polynomial.constant(y)

    # w(x) = (p(x) - y) / (x - z)
    witness, remainder = divide_by_linear(numerator, point)
    if remainder != FR(0):
        raise InvariantViolation(
            "열기 증명 생성 실패: (p(x) - p(z)) / (x - z)의 나머지가 0이 아닙니다"
        )

    proof = commit(srs, witness, workers)
    logger.debug("열기 증명 생성: degree=%d, witness_degree=%d",
                 poly.degree, witness.degree)
    return y, proof


def create_witness(srs, poly, point, workers=None):
    """open_at()의 증명 부분만 반환한다."""
    return open_at(srs, poly, point, workers)[1]


def verify(srs, commitment, point, value, proof):
    """KZG 열기 증명을 검증한다.

    검증 방정식 (페어링):
        e(C - y·G1, G2) == e(π, τ·G2 - z·G2)

    Args:
        srs: SRS
        commitment: 다항식 커밋먼트 C (G1 점)
        point: 평가 점 z (FR 원소 또는 정수)
        value: 주장하는 평가값 y = p(z) (FR 원소 또는 정수)
        proof: 열기 증명 π (G1 점)

    Returns:
        bool: 검증 성공 여부. 잘못된 y, π, C나 곡선 밖의 점은 False.

    예시:
        >>> C = commit(srs, p)
        >>> y, pi = open_at(srs, p, 3)
        >>> verify(srs, C, 3, y, pi)      # True
        >>> verify(srs, C, 3, y + 1, pi)  # False
    """
    if not is_g1_point(commitment) or not is_g1_point(proof):
        logger.debug("검증 거부: 커밋먼트 또는 증명이 G1 위의 점이 아님")
        return False
    point = to_fr(point)
    value = to_fr(value)

    # τ·G2 - z·G2 = [τ - z]₂
    tau_minus_z_g2 = ec_sub(srs.tau_g2, ec_mul(srs.g2, point))

    # C - y·G1
    c_minus_y = ec_sub(commitment, ec_mul(srs.g1, value))

    # 페어링 검사: e(C - y·G1, G2) == e(π, [τ-z]₂)
    lhs = ec_pairing(srs.g2, c_minus_y)
    rhs = ec_pairing(tau_minus_z_g2, proof)
    ok = lhs == rhs
    logger.debug("열기 증명 검증 결과: %s", ok)
    return ok


class KZG10:
    """SRS 하나를 공유하는 KZG 세션.

    예시:
        >>> kzg = KZG10.setup(max_degree=5)
        >>> C = kzg.commit(p)
        >>> y, pi = kzg.open(p, 3)
        >>> kzg.verify(C, 3, y, pi)  # True
    """

    def __init__(self, srs, workers=None):
        self.srs = srs
        self.workers = workers

    @classmethod
    def setup(cls, max_degree=None, seed=None, workers=None):
        if max_degree is None:
            max_degree = get_config().max_degree
        return cls(setup(max_degree, seed=seed), workers)

    @property
    def max_degree(self):
        return self.srs.max_degree

    def commit(self, poly):
        return commit(self.srs, poly, self.workers)

    def open(self, poly, point):
        return open_at(self.srs, poly, point, self.workers)

    def verify(self, commitment, point, value, proof):
        return verify(self.srs, commitment, point, value, proof)
