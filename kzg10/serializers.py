"""
KZG 데이터 직렬화/역직렬화 헬퍼
================================

TinyDB(JSON)에 저장하거나 전송할 수 있는 형태로 KZG 객체를 변환한다.
FR, G1, G2, Polynomial, SRS, 열기(opening) 결과.

정수는 JSON 정밀도 손실을 피하기 위해 10진 문자열로 저장한다.
무한원점은 None(null)이다. τ는 SRS에 없으므로 직렬화될 수 없다.
"""

from py_ecc import bn128

from kzg10.field import FR, is_g1_point, is_g2_point
from kzg10.polynomial import Polynomial
from kzg10.srs import SRS


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) → FR"""
    return FR(int(s))


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(int(point[0])), str(int(point[1]))]


def deserialize_g1(data):
    """[str, str] or None → G1 point

    Raises:
        ValueError: 곡선 위의 점이 아닐 때
    """
    if data is None:
        return None
    point = (bn128.FQ(int(data[0])), bn128.FQ(int(data[1])))
    if not is_g1_point(point):
        raise ValueError("G1 위의 점이 아닙니다")
    return point


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if point is None:
        return None
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))]
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return None
    point = (
        bn128.FQ2([int(data[0][0]), int(data[0][1])]),
        bn128.FQ2([int(data[1][0]), int(data[1][1])])
    )
    if not is_g2_point(point):
        raise ValueError("G2 위의 점이 아닙니다")
    return point


# ─── Polynomial ───

def serialize_poly(poly):
    """Polynomial → list of str (계수)"""
    if poly is None:
        return None
    return [str(int(c)) for c in poly.coeffs]


def deserialize_poly(data):
    """list of str → Polynomial"""
    if data is None:
        return None
    return Polynomial([FR(int(s)) for s in data])


# ─── SRS ───

def serialize_srs(srs):
    """SRS → dict"""
    return {
        "g1_powers": [serialize_g1(p) for p in srs.g1_powers],
        "g2": serialize_g2(srs.g2),
        "tau_g2": serialize_g2(srs.tau_g2),
        "max_degree": srs.max_degree,
    }


def deserialize_srs(data):
    """dict → SRS (점 검증 + τ 일관성 검사)"""
    g1_powers = [deserialize_g1(p) for p in data["g1_powers"]]
    srs = SRS(g1_powers, deserialize_g2(data["tau_g2"]), deserialize_g2(data["g2"]))
    if srs.max_degree != data["max_degree"]:
        raise ValueError(
            f"max_degree 불일치: {data['max_degree']} != {srs.max_degree}"
        )
    srs.check_consistency()
    return srs


# ─── Opening ───

def serialize_opening(commitment, point, value, proof):
    """(C, z, y, π) → dict"""
    return {
        "commitment": serialize_g1(commitment),
        "point": serialize_fr(point),
        "value": serialize_fr(value),
        "proof": serialize_g1(proof),
    }


def deserialize_opening(data):
    """dict → (C, z, y, π)"""
    return (
        deserialize_g1(data["commitment"]),
        deserialize_fr(data["point"]),
        deserialize_fr(data["value"]),
        deserialize_g1(data["proof"]),
    )


# ─── display helpers ───

def _shorten(s):
    if len(s) <= 8:
        return s
    return s[:4] + "..." + s[-4:]


def g1_short(point):
    """G1 point → 축약 문자열 (출력용)"""
    if point is None:
        return "∞"
    return f"({_shorten(str(int(point[0])))}, {_shorten(str(int(point[1])))})"


def fr_short(val):
    """FR → 축약 문자열 (출력용)"""
    if val is None:
        return "None"
    s = str(int(val))
    if len(s) <= 10:
        return s
    return s[:4] + "..." + s[-4:]
