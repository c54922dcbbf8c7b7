"""
Module: log.py

kzg10 패키지 로거 설정. 각 모듈은 logging.getLogger(__name__)을 사용하고,
데모나 애플리케이션이 이 함수로 핸들러를 붙인다.
"""

import logging

from kzg10.config import get_config


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logger(level=None):
    """kzg10 로거에 스트림 핸들러를 붙이고 레벨을 설정한다.

    레벨은 인자 → KZG_LOG_LEVEL 환경 변수 순서로 정해지며,
    알 수 없는 이름이면 INFO를 사용한다.
    """
    level = (level or get_config().log_level).upper()
    numeric = getattr(logging, level, None)
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logger = logging.getLogger("kzg10")
    logger.setLevel(numeric)
    if not any(getattr(h, "_kzg10", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._kzg10 = True
        logger.addHandler(handler)
    return logger
