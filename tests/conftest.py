import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from kzg10.srs import SRS


@pytest.fixture(scope="session")
def srs_small():
    """Small SRS for fast tests (max_degree=8)."""
    return SRS.generate(max_degree=8, seed=42)


@pytest.fixture(scope="session")
def srs_five():
    """max_degree=5, as in the random-point scenario."""
    return SRS.generate(max_degree=5, seed=1234)
