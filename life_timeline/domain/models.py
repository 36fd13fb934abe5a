"""
도메인 모델: 라이프 타임라인의 핵심 데이터 구조

이 모듈은 마일스톤 레코드를 정의합니다.
레코드는 불변(frozen) 데이터클래스로 구현되어, 리포지토리 밖으로 전달되어도
내부 상태가 변경되지 않습니다.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

# 저장소 JSON 객체의 필드 순서
MILESTONE_FIELDS = ("id", "title", "timeline", "start", "end", "notes")


@dataclass(frozen=True)
class Milestone:
    """
    하나의 기록된 이벤트 (제목, 타임라인 라벨, 기간, 메모).

    Attributes:
        id: 레코드 수명 동안 변하지 않는 고유 식별자
        title: 제목 (비어 있지 않음)
        timeline: 그룹 키 (비어 있지 않음)
        start: 시작일 ("YYYY-MM-DD")
        end: 종료일 ("YYYY-MM-DD")
        notes: 메모 (선택)

    Examples:
        >>> m = Milestone("a1", "졸업", "교육", "2010-06-01", "2010-06-01")
        >>> m.to_dict()["timeline"]
        '교육'
    """

    id: str
    title: str
    timeline: str
    start: str
    end: str
    notes: str = ""

    def to_dict(self) -> Dict[str, str]:
        """저장소에 기록되는 JSON 객체로 변환합니다."""
        return asdict(self)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Milestone":
        """
        저장소에서 읽은 JSON 객체로부터 레코드를 복원합니다.

        notes 필드가 없는 이전 형식의 레코드도 허용합니다.
        값은 검증하지 않으며, 날짜 오류는 차트 생성 시점에 드러납니다.
        """
        values = {key: record.get(key) for key in MILESTONE_FIELDS}
        return cls(
            id=str(values["id"] or ""),
            title=str(values["title"] or ""),
            timeline=str(values["timeline"] or ""),
            start=str(values["start"] or ""),
            end=str(values["end"] or ""),
            notes=str(values["notes"] or ""),
        )

    def with_fields(self, fields: Mapping[str, str]) -> "Milestone":
        """같은 id를 유지한 채 나머지 필드를 교체한 새 레코드를 반환합니다."""
        return Milestone(
            id=self.id,
            title=fields["title"],
            timeline=fields["timeline"],
            start=fields["start"],
            end=fields["end"],
            notes=fields.get("notes", ""),
        )
