"""
KZG 설정
========

환경 변수에서 기본값을 읽는다.

  KZG_MAX_DEGREE      기본 SRS 최대 차수 (16)
  KZG_COMMIT_WORKERS  커밋 누적에 사용할 프로세스 수 (1 = 순차)
  KZG_SRS_DB          SRS 저장소 TinyDB 파일 경로 (srs_db.json)
  KZG_LOG_LEVEL       로그 레벨 (WARNING)
"""

import os

from kzg10.errors import SetupError


def _env_int(name, default, minimum):
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise SetupError(f"{name}는 정수여야 합니다: {raw!r}") from None
    if value < minimum:
        raise SetupError(f"{name}는 {minimum} 이상이어야 합니다: {value}")
    return value


class Config:
    """설정 클래스. 각 값은 읽을 때 환경 변수에서 가져온다."""

    @property
    def max_degree(self):
        return _env_int("KZG_MAX_DEGREE", 16, 1)

    @property
    def commit_workers(self):
        return _env_int("KZG_COMMIT_WORKERS", 1, 1)

    @property
    def srs_db(self):
        return os.getenv("KZG_SRS_DB", "srs_db.json")

    @property
    def log_level(self):
        return os.getenv("KZG_LOG_LEVEL", "WARNING").upper()


def get_config():
    """설정 객체를 돌려준다.

    import 시점에는 환경 변수를 읽지 않는다. 잘못된 값은 그 값을
    실제로 쓰는 호출에서만 SetupError가 된다.
    """
    return Config()
