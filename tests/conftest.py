import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_configure(config):
    """pytest 초기화 시점에 실행되어 테스트 수집 전에 환경을 준비합니다.

    이 훅은 테스트 모듈이 import되기 전에 실행되므로,
    config.py가 로드될 때 LIFE_TIMELINE_DATA_DIR이 이미 설정되어 있습니다.
    (테스트가 사용자 홈 디렉터리에 쓰지 않도록 임시 디렉터리를 사용)
    """
    if not os.getenv("LIFE_TIMELINE_DATA_DIR"):
        os.environ["LIFE_TIMELINE_DATA_DIR"] = tempfile.mkdtemp(prefix="life_timeline_")


@pytest.fixture
def sample_fields():
    """테스트용 마일스톤 입력값 (졸업 / 첫 직장)"""
    return [
        {
            "title": "Graduate",
            "timeline": "Education",
            "start": "2010-06-01",
            "end": "2010-06-01",
            "notes": "",
        },
        {
            "title": "First Job",
            "timeline": "Career",
            "start": "2010-07-01",
            "end": "2015-01-01",
            "notes": "신입 개발자",
        },
    ]
