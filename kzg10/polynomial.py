"""
KZG 기반 모듈: 다항식(Polynomial) 클래스
========================================

스칼라 필드 FR 위의 밀집(dense) 계수 표현 다항식.
p(x) = c₀ + c₁·x + c₂·x² + ...

**차수 규칙**:
  뒤쪽(고차항)의 0 계수는 의미가 없다. 생성 시 제거하지는 않지만
  차수와 최고차 계수를 구할 때는 건너뛴다.
  영 다항식의 차수는 0으로 정의한다.

**선형 인수 나눗셈 (divide_by_linear)**:
  KZG 열기 증명의 핵심. (p(x) - y)를 (x - z)로 조립제법(synthetic
  division)으로 나누어 몫(witness 다항식)과 나머지를 구한다.
  필드 역원을 사용하지 않는다.

사용 예시:
    >>> from kzg10.polynomial import Polynomial, divide_by_linear
    >>> p = Polynomial([1, 1, 1])        # 1 + x + x²
    >>> p.evaluate(FR(2))                # FR(7)
    >>> q, r = divide_by_linear(p - 7, FR(2))
    >>> r                                # FR(0)
"""

from kzg10.field import FR, to_fr


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 리스트로 표현: coeffs = [c₀, c₁, c₂, ...] → c₀ + c₁x + c₂x² + ...
    생성자는 입력 리스트를 복사하므로 호출자와 상태를 공유하지 않는다.

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> q = Polynomial([3, 4])          # 3 + 4x
        >>> p + q                           # 4 + 6x
        >>> p * q                           # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: FR 원소 또는 정수의 iterable [c₀, c₁, ...].
                    None이거나 원소가 없으면 영 다항식을 만든다.
        """
        coeffs = [to_fr(c) for c in coeffs or ()]
        self.coeffs = coeffs or [FR(0)]

    def _last_nonzero(self):
        for i in range(len(self.coeffs) - 1, -1, -1):
            if self.coeffs[i] != FR(0):
                return i
        return -1

    @property
    def degree(self):
        """0이 아닌 계수 중 가장 높은 인덱스. 영 다항식은 0."""
        return max(self._last_nonzero(), 0)

    @property
    def leading_coefficient(self):
        """최고차 계수. 영 다항식이면 FR(0)."""
        i = self._last_nonzero()
        return self.coeffs[i] if i >= 0 else FR(0)

    def is_zero(self):
        """영 다항식인지 확인."""
        return self._last_nonzero() < 0

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        p(x) = c₀ + x(c₁ + x(c₂ + ...)), 곱셈 degree번.

        Args:
            point: 평가할 FR 원소 또는 정수

        Returns:
            FR: p(point)

        예시:
            >>> Polynomial([1, 2, 3]).evaluate(2)  # 1 + 4 + 12 = FR(17)
        """
        point = to_fr(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def _coerce(self, other):
        if isinstance(other, (int, FR)):
            return Polynomial([other])
        return other

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x). 결과 길이 = 두 피연산자 길이의 최댓값."""
        other = self._coerce(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a + b)
        return Polynomial(result)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x).

        정수나 FR을 빼면 상수항에서만 뺀다.
        """
        other = self._coerce(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a - b)
        return Polynomial(result)

    def __rsub__(self, other):
        other = self._coerce(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return other.__sub__(self)

    def __neg__(self):
        """다항식 부호 반전: -p(x)."""
        return Polynomial([FR(0) - c for c in self.coeffs])

    def __mul__(self, other):
        """다항식 곱셈 또는 스칼라곱.

        다항식 × 다항식: O(n²) 합성곱, 결과 길이 = len(p) + len(q) - 1
        다항식 × 스칼라: 각 계수에 스칼라를 곱함
        """
        if isinstance(other, (int, FR)):
            other = to_fr(other)
            return Polynomial([c * other for c in self.coeffs])
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a == FR(0):
                continue
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        """다항식 동등 비교. 뒤쪽 0 계수는 무시한다."""
        other = self._coerce(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        n = self._last_nonzero() + 1
        return n == other._last_nonzero() + 1 and self.coeffs[:n] == other.coeffs[:n]

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"

    def __len__(self):
        """저장된 계수 개수 (뒤쪽 0 포함)."""
        return len(self.coeffs)

    def scale(self, scalar):
        """스칼라곱: scalar · p(x)."""
        return self * scalar

    @classmethod
    def zero(cls):
        """영 다항식 p(x) = 0."""
        return cls([FR(0)])

    @classmethod
    def one(cls):
        """상수 다항식 p(x) = 1."""
        return cls([FR(1)])

    @classmethod
    def constant(cls, value):
        """상수 다항식 p(x) = value."""
        return cls([value])

    @classmethod
    def interpolate(cls, points):
        """점들을 지나는 유일한 다항식을 Lagrange 보간으로 구한다.

        p(x) = Σᵢ yᵢ · Lᵢ(x),  차수 < n

        Args:
            points: [(x₀, y₀), (x₁, y₁), ...] (xᵢ는 서로 달라야 함)

        Returns:
            Polynomial: p(xᵢ) = yᵢ 를 만족하는 다항식

        Raises:
            ValueError: x 좌표가 중복될 때

        예시:
            >>> p = Polynomial.interpolate([(0, 1), (1, 3), (2, 7)])
            >>> p  # 1 + x + x²
        """
        xs = [to_fr(x) for x, _ in points]
        ys = [to_fr(y) for _, y in points]
        if len(set(int(x) for x in xs)) != len(xs):
            raise ValueError("보간 점의 x 좌표가 중복됩니다")
        result = cls.zero()
        for i, y in enumerate(ys):
            if y == FR(0):
                continue
            result = result + lagrange_basis(xs, i) * y
        return result


# ─────────────────────────────────────────────────────────────────────
# 선형 인수 나눗셈 (Synthetic Division)
# ─────────────────────────────────────────────────────────────────────

def divide_by_linear(poly, point):
    """조립제법: p(x) = (x - z) · q(x) + r.

    최고차 계수부터 acc = acc·z + cᵢ 를 누적한다. 누적값들이 몫의
    계수가 되고 마지막 누적값이 나머지 r = p(z)이다.
    (x - z)의 최고차 계수는 1이므로 역원 계산이 필요 없다.

    Args:
        poly: 피제수 다항식 p(x)
        point: z (FR 원소 또는 정수)

    Returns:
        tuple: (몫 Polynomial q(x), 나머지 FR r)

    예시:
        >>> p = Polynomial([-1, 0, 1])  # x² - 1
        >>> q, r = divide_by_linear(p, FR(1))
        >>> q  # 1 + x
        >>> r  # FR(0)
    """
    point = to_fr(point)
    acc = FR(0)
    partial = []
    for coeff in reversed(poly.coeffs):
        acc = acc * point + coeff
        partial.append(acc)
    remainder = partial.pop()
    partial.reverse()
    return Polynomial(partial), remainder


def lagrange_basis(domain, i):
    """i번째 Lagrange 기저 다항식 L_i(x)를 계수 형태로 반환한다.

    L_i(x) = ∏_{j≠i} (x - d_j) / (d_i - d_j)

    성질: L_i(d_j) = δ_{ij}

    Args:
        domain: 서로 다른 FR 원소 리스트 [d₀, d₁, ..., d_{n-1}]
        i: 기저 인덱스

    Returns:
        Polynomial: L_i(x)
    """
    domain = [to_fr(d) for d in domain]
    result = Polynomial.one()
    denominator = FR(1)
    for j, d in enumerate(domain):
        if j == i:
            continue
        result = result * Polynomial([FR(0) - d, FR(1)])
        denominator = denominator * (domain[i] - d)
    return result * denominator.inverse()
