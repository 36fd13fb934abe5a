"""
차트 데이터 변환

마일스톤 컬렉션을 타임라인별로 묶어 가로 범위 차트용 데이터셋으로 변환합니다.

주요 규칙:
- 시리즈는 타임라인 인덱스 순서로 생성 (카테고리 축 순서와 동일)
- 시리즈 내 포인트는 리포지토리 저장 순서 (날짜 정렬 없음)
- 날짜는 UTC 자정 기준 epoch 밀리초로 변환
- 숨김 여부는 hidden 플래그로만 표시하고 데이터는 제거하지 않음
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import (
    AbstractSet,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from ..domain.exceptions import InvalidDateError
from ..domain.models import Milestone
from ..domain.validation import parse_calendar_date
from .colors import FALLBACK_COLOR, ColorFamily, timeline_color_map
from .timeline import compute_timeline_index

logger = logging.getLogger(__name__)

# epoch 밀리초 변환 기준 (UTC 자정)
EPOCH = dt.date(1970, 1, 1)
MS_PER_DAY = 86_400_000


@dataclass(frozen=True)
class ChartPoint:
    """막대 하나 (마일스톤 하나)에 해당하는 범위 데이터."""

    range: Tuple[int, int]
    title: str
    id: str
    notes: str = ""

    @property
    def start_ms(self) -> int:
        return self.range[0]

    @property
    def end_ms(self) -> int:
        return self.range[1]


@dataclass(frozen=True)
class ChartSeries:
    """타임라인 하나에 해당하는 데이터셋."""

    label: str
    color: str
    border_color: str
    light: str
    hidden: bool
    points: Tuple[ChartPoint, ...] = ()


@dataclass(frozen=True)
class ChartDataset:
    """
    렌더링 경계로 전달되는 전체 데이터셋.

    Attributes:
        categories: 카테고리 축 순서 (= 타임라인 인덱스)
        series: 타임라인별 시리즈 (categories와 같은 순서)
    """

    categories: Tuple[str, ...] = ()
    series: Tuple[ChartSeries, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.series

    def to_dict(self) -> Dict[str, Any]:
        """렌더링 위젯이 소비하는 객체 형식으로 변환합니다."""
        return {
            "categories": list(self.categories),
            "series": [
                {
                    "label": s.label,
                    "color": s.color,
                    "borderColor": s.border_color,
                    "hidden": s.hidden,
                    "points": [
                        {"range": list(p.range), "title": p.title, "id": p.id}
                        for p in s.points
                    ],
                }
                for s in self.series
            ],
        }


def date_to_timestamp_ms(
    value: object,
    *,
    milestone_id: Optional[str] = None,
    field: Optional[str] = None,
) -> int:
    """
    달력 날짜를 UTC 자정 기준 epoch 밀리초로 변환합니다.

    Raises:
        InvalidDateError: 날짜를 해석할 수 없거나 지원 범위를 벗어났을 때
    """
    parsed = parse_calendar_date(value)
    if parsed is None:
        raise InvalidDateError(value, milestone_id=milestone_id, field=field)
    # 나노초를 거치지 않고 일 단위로 계산
    return (parsed - EPOCH).days * MS_PER_DAY


def group_by_timeline(milestones: Iterable[Milestone]) -> Dict[str, List[Milestone]]:
    """타임라인별로 마일스톤을 묶습니다. 각 그룹은 입력 순서를 유지합니다."""
    grouped: Dict[str, List[Milestone]] = {}
    for milestone in milestones:
        grouped.setdefault(milestone.timeline, []).append(milestone)
    return grouped


def _to_point(milestone: Milestone) -> ChartPoint:
    start_ms = date_to_timestamp_ms(milestone.start, milestone_id=milestone.id, field="start")
    end_ms = date_to_timestamp_ms(milestone.end, milestone_id=milestone.id, field="end")
    return ChartPoint(
        range=(start_ms, end_ms),
        title=milestone.title,
        id=milestone.id,
        notes=milestone.notes,
    )


def build_chart_dataset(
    milestones: Sequence[Milestone],
    timeline_index: Sequence[str],
    colors: Mapping[str, ColorFamily],
    hidden: AbstractSet[str],
) -> ChartDataset:
    """
    마일스톤 컬렉션을 차트 데이터셋으로 변환합니다.

    Args:
        milestones: 리포지토리 저장 순서의 마일스톤
        timeline_index: 최초 등장 순서의 타임라인 인덱스
        colors: 타임라인 → 색상 3종 매핑
        hidden: 숨겨진 타임라인 키 집합

    Returns:
        categories = timeline_index, series = 인덱스 순서의 타임라인별 시리즈

    Raises:
        InvalidDateError: 저장된 날짜를 해석할 수 없을 때
    """
    # ========================================
    # 1단계: 타임라인별 그룹화 (저장 순서 유지)
    # ========================================
    grouped = group_by_timeline(milestones)

    # ========================================
    # 2단계: 인덱스 순서로 시리즈 생성
    # ========================================
    series: List[ChartSeries] = []
    for timeline in timeline_index:
        family = colors.get(timeline, FALLBACK_COLOR)
        points = tuple(_to_point(m) for m in grouped.get(timeline, ()))
        series.append(
            ChartSeries(
                label=timeline,
                color=family.mid,
                border_color=family.dark,
                light=family.light,
                hidden=timeline in hidden,
                points=points,
            )
        )

    logger.debug(
        f"Chart dataset built: {len(series)} series, "
        f"{sum(len(s.points) for s in series)} points, {len(hidden)} hidden"
    )
    return ChartDataset(categories=tuple(timeline_index), series=tuple(series))


def build_timeline_view(
    milestones: Sequence[Milestone],
    hidden: AbstractSet[str] = frozenset(),
) -> ChartDataset:
    """타임라인 인덱스 → 색상 배정 → 차트 변환을 한 번에 수행합니다."""
    timeline_index = compute_timeline_index(milestones)
    colors = timeline_color_map(timeline_index)
    return build_chart_dataset(milestones, timeline_index, colors, hidden)
