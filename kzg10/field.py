"""
KZG 기반 모듈: 스칼라 필드(Scalar Field) 및 페어링 그룹 연산
============================================================

KZG 커밋먼트 전체에서 사용하는 기본 대수적 도구를 정의한다.

**스칼라 필드 FR**:
  bn128 타원곡선의 스칼라 필드. 다항식 계수, 평가 점, 평가값이 모두
  이 필드의 원소이다.
  - 위수(order) r ≈ 2^254, 소수체(prime field)
  - 모든 연산 결과는 [0, r) 범위로 정규화된다.

**페어링 그룹**:
  G1, G2 (위수 r의 순환군), 그리고 쌍선형 페어링 e: G1 × G2 → GT.
  점 연산과 페어링은 py_ecc의 bn128 구현을 그대로 사용한다.
  무한원점(항등원)은 None으로 표현된다.

사용 예시:
    >>> from kzg10.field import FR, G1, ec_mul
    >>> a = FR(3)
    >>> a.inverse() * a   # FR(1)
    >>> P = ec_mul(G1, 5)  # 5·G1
"""

import secrets

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


# ─────────────────────────────────────────────────────────────────────
# 모듈러 산술 (Modular Arithmetic)
# ─────────────────────────────────────────────────────────────────────

def extended_gcd(a, b):
    """확장 유클리드 알고리즘 (반복문 버전).

    a·x + b·y = g = gcd(a, b)를 만족하는 (g, x, y)를 반환한다.
    재귀 호출을 쓰지 않으므로 입력 크기와 무관하게 스택이 자라지 않는다.

    Args:
        a, b: 정수

    Returns:
        tuple: (g, x, y)

    예시:
        >>> extended_gcd(240, 46)  # (2, -9, 47)
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a, m):
    """a의 모듈러 역원 a⁻¹ mod m.

    Raises:
        ZeroDivisionError: a ≡ 0 (mod m) 이거나 gcd(a, m) ≠ 1일 때
    """
    a %= m
    if a == 0:
        raise ZeroDivisionError("0의 역원은 존재하지 않습니다")
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise ZeroDivisionError(f"{a}는 mod {m}에서 역원이 없습니다")
    return x % m


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드 FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 원소.

    py_ecc의 FQ를 상속하여 +, -, *, /, ** 연산을 제공한다.
    거듭제곱은 square-and-multiply로 계산된다.

    예시:
        >>> x = FR(3)
        >>> x ** 2         # FR(9)
        >>> x.inverse()    # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order

    def inverse(self):
        """모듈러 역원. 0에 대해서는 ZeroDivisionError."""
        return FR(mod_inverse(self.n, self.field_modulus))

    def is_zero(self):
        return self.n == 0


# 곡선 위수 (스칼라 필드 크기)
CURVE_ORDER = bn128.curve_order


def to_fr(value):
    """정수 또는 FR을 FR로 변환한다."""
    if isinstance(value, FR):
        return value
    return FR(value)


def random_fr():
    """[0, r)에서 균등하게 뽑은 FR 원소 (secrets 사용)."""
    return FR(secrets.randbelow(CURVE_ORDER))


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bn128.G1

# G2 그룹 생성자 (generator)
G2 = bn128.G2

# 무한원점 (point at infinity) - 항등원
Z1 = None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점 (None이면 항등원)
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점). 스칼라가 0이면 None.
    """
    if isinstance(scalar, FR):
        scalar = scalar.n
    scalar %= CURVE_ORDER
    if point is None or scalar == 0:
        return None
    return bn128.multiply(point, scalar)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2. None은 항등원으로 취급된다."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원: -point."""
    if point is None:
        return None
    return bn128.neg(point)


def ec_sub(p1, p2):
    """p1 - p2."""
    return ec_add(p1, ec_neg(p2))


def is_g1_point(point):
    """G1 곡선 위의 점인지 확인한다 (None은 항등원이므로 참)."""
    return _on_curve(point, bn128.FQ, bn128.b)


def is_g2_point(point):
    """G2 (twist) 곡선 위의 점인지 확인한다."""
    return _on_curve(point, bn128.FQ2, bn128.b2)


def _on_curve(point, coord_type, b):
    if point is None:
        return True
    if not isinstance(point, tuple) or len(point) != 2:
        return False
    if not all(isinstance(c, coord_type) for c in point):
        return False
    return bool(bn128.is_on_curve(point, b))


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    bn128의 optimal Ate 페어링을 수행한다.
    어느 한쪽이 무한원점이면 GT의 항등원 1을 반환한다
    (e(O, Q) = e(P, O) = 1).

    주의:
        py_ecc.bn128.pairing과 같이 인자 순서는 (G2, G1)이다.

    예시:
        >>> e1 = ec_pairing(G2, G1)              # e(G1, G2)
        >>> e2 = ec_pairing(G2, ec_mul(G1, 5))   # e(5·G1, G2) = e1^5
    """
    if g1_point is None or g2_point is None:
        return bn128.FQ12.one()
    return bn128.pairing(g2_point, g1_point)
