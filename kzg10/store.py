"""
SRS 저장소 (TinyDB)
===================

공개된 SRS를 최대 차수별로 한 번만 만들고, 이후 세션에서는
저장된 값을 다시 읽어 재사용한다. 문서 형식:

    {"type": "srs.<max_degree>", "max_degree": d, "srs": {...}}

τ는 SRS에 없으므로 저장소에도 절대 기록되지 않는다.

사용 예시:
    >>> store = SRSStore("srs_db.json")
    >>> srs = store.get_or_setup(16)
    >>> store.close()
"""

import logging

from tinydb import TinyDB, Query
from tinydb.storages import MemoryStorage

from kzg10.config import get_config
from kzg10.serializers import serialize_srs, deserialize_srs
from kzg10.srs import setup

logger = logging.getLogger(__name__)

DATA = Query()


class SRSStore:
    """TinyDB 기반 SRS 저장소.

    Args:
        path: TinyDB JSON 파일 경로 (기본값: KZG_SRS_DB)
        in_memory: True면 MemoryStorage 사용 (테스트용)
    """

    def __init__(self, path=None, in_memory=False):
        if in_memory:
            self.db = TinyDB(storage=MemoryStorage)
        else:
            self.db = TinyDB(path or get_config().srs_db)
        self.table = self.db.table("srs")

    @staticmethod
    def _key(max_degree):
        return f"srs.{max_degree}"

    def save(self, srs):
        """SRS를 저장한다. 같은 최대 차수의 문서가 있으면 덮어쓴다."""
        key = self._key(srs.max_degree)
        self.table.upsert(
            {"type": key, "max_degree": srs.max_degree, "srs": serialize_srs(srs)},
            DATA.type == key,
        )
        logger.debug("SRS 저장: %s", key)

    def load(self, max_degree):
        """저장된 SRS를 읽는다. 없으면 None."""
        doc = self.table.get(DATA.type == self._key(max_degree))
        if doc is None:
            return None
        return deserialize_srs(doc["srs"])

    def get_or_setup(self, max_degree, seed=None):
        """저장된 SRS가 있으면 읽고, 없으면 setup() 후 저장한다."""
        srs = self.load(max_degree)
        if srs is not None:
            logger.debug("저장된 SRS 재사용: max_degree=%d", max_degree)
            return srs
        srs = setup(max_degree, seed=seed)
        self.save(srs)
        return srs

    def degrees(self):
        """저장된 SRS의 최대 차수 목록 (오름차순)."""
        return sorted(doc["max_degree"] for doc in self.table.all())

    def close(self):
        self.db.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
