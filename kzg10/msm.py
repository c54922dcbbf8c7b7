"""
G1 선형결합 (Multi-Scalar Multiplication)
==========================================

Σᵢ sᵢ · Pᵢ 를 계산한다. 그룹 덧셈은 결합·교환 법칙을 만족하므로
항들을 여러 묶음으로 나누어 독립적으로 부분합을 구한 뒤 합쳐도
결과는 같다. workers > 1이면 부분합을 ProcessPoolExecutor에서 계산한다.
"""

from concurrent.futures import ProcessPoolExecutor

from kzg10.field import FR, ec_mul, ec_add, CURVE_ORDER


def _partial_sum(terms):
    acc = None  # 무한원점 (항등원)
    for point, scalar in terms:
        acc = ec_add(acc, ec_mul(point, scalar))
    return acc


def ec_lincomb(points, scalars, workers=1):
    """Σᵢ scalars[i] · points[i].

    Args:
        points: 같은 그룹의 점 시퀀스
        scalars: FR 원소 또는 정수 시퀀스 (points와 zip)
        workers: 부분합을 계산할 프로세스 수. 1이면 순차 계산.

    Returns:
        합산된 점 (모든 항이 0이면 None)
    """
    terms = []
    for point, scalar in zip(points, scalars):
        n = scalar.n if isinstance(scalar, FR) else scalar % CURVE_ORDER
        if n != 0:
            terms.append((point, n))

    workers = max(1, int(workers or 1))
    if workers == 1 or len(terms) < 2 * workers:
        return _partial_sum(terms)

    chunks = [terms[i::workers] for i in range(workers)]
    with ProcessPoolExecutor(max_workers=workers) as pool:
        partials = list(pool.map(_partial_sum, chunks))

    result = None
    for partial in partials:
        result = ec_add(result, partial)
    return result
