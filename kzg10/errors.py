"""
KZG 예외 계층
=============

  - SetupError: 잘못된 max_degree, 난수원 실패 등 설정 오류 (치명적)
  - PolynomialTooLarge: 다항식 차수가 SRS 최대 차수를 초과 (용량 오류)
  - InvariantViolation: 열기 증명 내부 불변식 위반 (구현 결함)

검증 실패는 예외가 아니다. verify()는 항상 bool을 반환한다.
"""


class KZGError(Exception):
    """호출자가 처리할 수 있는 KZG 오류의 기반 클래스."""


class SetupError(KZGError, ValueError):
    """신뢰 설정 단계의 설정 오류."""


class PolynomialTooLarge(KZGError, ValueError):
    """다항식 차수가 SRS가 지원하는 최대 차수보다 클 때."""

    def __init__(self, degree, max_degree):
        self.degree = degree
        self.max_degree = max_degree
        super().__init__(
            f"다항식 차수 {degree}가 SRS 최대 차수 {max_degree}를 초과합니다"
        )


class InvariantViolation(AssertionError):
    """내부 불변식 위반.

    KZGError 계층 밖에 두어 일반적인 오류 처리기가 삼키지 않도록 한다.
    """
