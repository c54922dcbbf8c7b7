"""
KZG10 데모: 커밋 → 열기 → 검증
===============================

실행:
    python -m kzg10.example

흐름:
    1. 신뢰 설정 (SRS 생성, τ 폐기)
    2. p(x) = x² + x + 1 을 z = 2에서 열기 (y = 7), y = 8 위조
    3. p(x) = 6x² + 4x + 2 를 임의의 z에서 열기, 임의의 fake_y 위조
    4. 영 다항식 열기
"""

from kzg10.field import FR, random_fr
from kzg10.kzg import KZG10
from kzg10.log import setup_logger
from kzg10.polynomial import Polynomial
from kzg10.serializers import g1_short, fr_short


def _mark(ok):
    return "성공 ✓" if ok else "실패 ✗"


def main():
    setup_logger()

    print("=" * 60)
    print("  KZG10 Polynomial Commitment Demo")
    print("=" * 60)

    # ── 1. 신뢰 설정 ──
    print("\n[1] 신뢰 설정 (trusted setup)...")
    kzg = KZG10.setup(max_degree=5)
    print(f"    최대 다항식 차수: {kzg.max_degree}")
    print(f"    G1 powers 수: {len(kzg.srs.g1_powers)}")
    print(f"    τ·G2 = ({fr_short(kzg.srs.tau_g2[0].coeffs[0])}+..., ...)")

    # ── 2. x² + x + 1, z = 2 ──
    print("\n[2] p(x) = x² + x + 1, z = 2")
    p = Polynomial([1, 1, 1])
    C = kzg.commit(p)
    y, proof = kzg.open(p, 2)
    print(f"    커밋먼트 C = {g1_short(C)}")
    print(f"    y = p(2) = {int(y)}")
    print(f"    증명 π = {g1_short(proof)}")
    ok = kzg.verify(C, 2, y, proof)
    forged = kzg.verify(C, 2, 8, proof)
    print(f"    verify(y = 7): {_mark(ok)}")
    print(f"    verify(y = 8): {_mark(forged)}")

    # ── 3. 6x² + 4x + 2, 임의의 z ──
    print("\n[3] p(x) = 6x² + 4x + 2, 임의의 z")
    p = Polynomial([2, 4, 6])
    C = kzg.commit(p)
    z = random_fr()
    y, proof = kzg.open(p, z)
    fake_y = random_fr()
    while fake_y == y:
        fake_y = random_fr()
    ok2 = kzg.verify(C, z, y, proof)
    forged2 = kzg.verify(C, z, fake_y, proof)
    print(f"    z = {fr_short(z)}, y = {fr_short(y)}")
    print(f"    verify(y):      {_mark(ok2)}")
    print(f"    verify(fake_y): {_mark(forged2)}")

    # ── 4. 영 다항식 ──
    print("\n[4] 영 다항식")
    p = Polynomial([0, 0, 0])
    C = kzg.commit(p)
    y, proof = kzg.open(p, 11)
    ok3 = kzg.verify(C, 11, y, proof)
    print(f"    C = {g1_short(C)}, y = {int(y)}, π = {g1_short(proof)}")
    print(f"    verify: {_mark(ok3)}")

    result = ok and not forged and ok2 and not forged2 and ok3 and y == FR(0)
    print("\n" + "=" * 60)
    if result:
        print("  데모 완료: 모든 시나리오 통과!")
    else:
        print("  데모 완료: 일부 시나리오 실패")
    print("=" * 60)

    return result


if __name__ == "__main__":
    main()
