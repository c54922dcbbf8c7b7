"""
KZG Structured Reference String (SRS)
=====================================

신뢰 설정(trusted setup)으로 KZG 공개 파라미터를 생성한다.

**SRS란?**
  비밀 값 τ ("toxic waste")의 거듭제곱을 "지수 안에" 담은 공개 값이다.

  SRS = {
      g1_powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
      g2:        G2
      tau_g2:    τ·G2
  }

  G1 쪽과 G2 쪽은 서로 다른 타입이므로 별도의 필드로 보관한다.

**Toxic waste**:
  τ를 아는 사람은 임의의 거짓 열기 증명을 만들 수 있다.
  τ는 ToxicWaste 컨텍스트 매니저 안에서만 존재하며, setup()이 어떤
  경로로 끝나든(예외 포함) 블록을 빠져나올 때 폐기된다.
  로그, 반환값, 직렬화 어디에도 τ는 나타나지 않는다.

사용 예시:
    >>> srs = setup(max_degree=16)
    >>> len(srs.g1_powers)  # 17 (0차부터 16차까지)
    >>> srs = SRS.generate(max_degree=4, seed=42)  # 테스트용 결정론적 생성
"""

import hashlib
import logging
import secrets

from kzg10.errors import SetupError
from kzg10.field import (
    FR, G1, G2, ec_mul, ec_pairing, CURVE_ORDER, is_g1_point, is_g2_point,
)
from kzg10.msm import ec_lincomb

logger = logging.getLogger(__name__)


class ToxicWaste:
    """신뢰 설정의 비밀 스칼라 τ.

    with 블록을 벗어나면 값이 폐기되고, 이후 접근은 RuntimeError가 된다.
    repr에 값을 노출하지 않고, 복사·피클링도 거부한다.

    예시:
        >>> with ToxicWaste.sample() as tau:
        ...     tau_g2 = ec_mul(G2, tau.value)
        >>> tau.destroyed  # True
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        value = FR(value)
        if value == FR(0):
            raise SetupError("τ는 0이 될 수 없습니다")
        self._value = value

    @classmethod
    def sample(cls):
        """운영체제 CSPRNG에서 τ ∈ [1, r)를 뽑는다."""
        try:
            tau_int = secrets.randbelow(CURVE_ORDER - 1) + 1
        except (OSError, NotImplementedError) as e:
            raise SetupError("난수원에서 τ를 얻지 못했습니다") from e
        return cls(tau_int)

    @classmethod
    def from_seed(cls, seed):
        """seed에서 τ를 결정론적으로 유도한다 (재현 가능한 테스트 전용)."""
        h = hashlib.sha256(str(seed).encode()).digest()
        tau_int = int.from_bytes(h, "big") % CURVE_ORDER
        return cls(tau_int or 1)

    @property
    def value(self):
        if self._value is None:
            raise RuntimeError("toxic waste가 이미 폐기되었습니다")
        return self._value

    @property
    def destroyed(self):
        return self._value is None

    def destroy(self):
        self._value = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()
        return False

    def __repr__(self):
        state = "destroyed" if self.destroyed else "live"
        return f"ToxicWaste(<{state}>)"

    def __reduce__(self):
        raise TypeError("toxic waste는 직렬화할 수 없습니다")

    def __copy__(self):
        raise TypeError("toxic waste는 복사할 수 없습니다")

    def __deepcopy__(self, memo):
        raise TypeError("toxic waste는 복사할 수 없습니다")


class SRS:
    """Structured Reference String: KZG 커밋먼트용 공개 파라미터.

    생성 후 읽기 전용이며, 여러 commit/open/verify 호출이 잠금 없이
    동시에 공유할 수 있다.

    속성:
        g1_powers: (G1, τ·G1, τ²·G1, ..., τ^d·G1) 튜플
        g2: G2 생성자
        tau_g2: τ·G2
        max_degree: 지원하는 최대 다항식 차수 d
    """

    def __init__(self, g1_powers, tau_g2, g2=G2):
        """공개 점들로 SRS를 구성한다 (저장소에서 불러올 때 등).

        Raises:
            ValueError: 곡선 위의 점이 아니거나 생성자가 맞지 않을 때
        """
        g1_powers = tuple(g1_powers)
        if not g1_powers:
            raise ValueError("g1_powers가 비어 있습니다")
        if g1_powers[0] != G1:
            raise ValueError("g1_powers[0]은 G1 생성자여야 합니다")
        if g2 != G2:
            raise ValueError("g2는 G2 생성자여야 합니다")
        for i, pt in enumerate(g1_powers):
            if pt is None or not is_g1_point(pt):
                raise ValueError(f"g1_powers[{i}]가 G1 위의 점이 아닙니다")
        if tau_g2 is None or not is_g2_point(tau_g2):
            raise ValueError("tau_g2가 G2 위의 점이 아닙니다")
        self._g1_powers = g1_powers
        self._g2 = g2
        self._tau_g2 = tau_g2

    @property
    def g1_powers(self):
        return self._g1_powers

    @property
    def g1(self):
        return self._g1_powers[0]

    @property
    def g2(self):
        return self._g2

    @property
    def tau_g2(self):
        return self._tau_g2

    @property
    def max_degree(self):
        return len(self._g1_powers) - 1

    def __eq__(self, other):
        if not isinstance(other, SRS):
            return NotImplemented
        return (self._g1_powers == other._g1_powers
                and self._tau_g2 == other._tau_g2)

    __hash__ = None

    def __repr__(self):
        return f"SRS(max_degree={self.max_degree})"

    def check_consistency(self):
        """모든 거듭제곱이 tau_g2와 같은 τ에서 나왔는지 확인한다.

        각 i에 대해 e(g1_powers[i+1], G2) == e(g1_powers[i], τ·G2) 이어야
        한다. 0이 아닌 난수 rᵢ로 묶어 페어링 두 번으로 검사한다:

            e(Σ rᵢ·P_{i+1}, G2) == e(Σ rᵢ·P_i, τ·G2)

        저장소나 JSON에서 읽은 SRS에 사용한다. setup()이 만든 SRS는
        구성상 일관되므로 검사하지 않는다.

        Raises:
            ValueError: 어느 한 쌍이라도 관계를 만족하지 않을 때
        """
        if self.max_degree < 1:
            return
        weights = [FR(secrets.randbelow(CURVE_ORDER - 1) + 1)
                   for _ in range(self.max_degree)]
        shifted = ec_lincomb(self._g1_powers[1:], weights)
        base = ec_lincomb(self._g1_powers[:-1], weights)
        if ec_pairing(self._g2, shifted) != ec_pairing(self._tau_g2, base):
            raise ValueError("g1_powers와 tau_g2가 같은 τ의 거듭제곱이 아닙니다")
        logger.debug("SRS 일관성 확인: max_degree=%d", self.max_degree)

    @classmethod
    def generate(cls, max_degree, seed=None):
        """SRS를 생성한다. setup()과 같다."""
        return setup(max_degree, seed=seed)


def setup(max_degree, seed=None):
    """신뢰 설정: τ를 뽑아 SRS를 만들고 τ를 폐기한다.

    τ⁰·G1 … τ^d·G1 은 τ의 거듭제곱을 필드에서 누적하며 순차 계산한다.
    τ에서 유도된 스칼라는 이 함수 밖(다른 프로세스 포함)으로 나가지 않는다.

    Args:
        max_degree: 지원할 최대 다항식 차수 d (양의 정수)
        seed: 결정론적 생성을 위한 시드 (테스트 전용).
              None이면 secrets로 τ를 뽑는다.

    Returns:
        SRS

    Raises:
        SetupError: max_degree가 양의 정수가 아니거나 난수원이 실패할 때

    예시:
        >>> srs = setup(max_degree=5)
        >>> srs.max_degree  # 5
    """
    if isinstance(max_degree, bool) or not isinstance(max_degree, int):
        raise SetupError(f"max_degree는 정수여야 합니다: {max_degree!r}")
    if max_degree < 1:
        raise SetupError(f"max_degree는 1 이상이어야 합니다: {max_degree}")

    waste = ToxicWaste.sample() if seed is None else ToxicWaste.from_seed(seed)
    with waste as tau:
        # G1 powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
        g1_powers = []
        tau_power = FR(1)
        for _ in range(max_degree + 1):
            g1_powers.append(ec_mul(G1, tau_power))
            tau_power = tau_power * tau.value
        tau_power = None

        tau_g2 = ec_mul(G2, tau.value)

    logger.debug("SRS 생성 완료: max_degree=%d, deterministic=%s",
                 max_degree, seed is not None)
    return SRS(g1_powers, tau_g2)
