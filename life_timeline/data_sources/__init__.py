"""
데이터 소스 추상화 계층

이 모듈은 마일스톤 컬렉션을 영구 저장하는 저장소를 제공합니다.
"""

from .store import InMemoryStore, JsonFileStore, MilestoneStore

__all__ = [
    # 저장소 프로토콜
    "MilestoneStore",
    # 구현체
    "InMemoryStore",
    "JsonFileStore",
]
