"""
타임라인 집계 및 차트 데이터 생성

리포지토리 스냅샷과 표시 오버레이로부터 매번 새로 계산되는 순수 함수들을 제공합니다.
"""

from .chart_data import (
    ChartDataset,
    ChartPoint,
    ChartSeries,
    build_chart_dataset,
    build_timeline_view,
    date_to_timestamp_ms,
    group_by_timeline,
)
from .colors import FALLBACK_COLOR, PALETTE, ColorFamily, color_family, color_for, timeline_color_map
from .timeline import compute_timeline_index
from .visibility import VisibilityOverlay

__all__ = [
    # 타임라인 인덱스
    "compute_timeline_index",
    # 색상 배정
    "ColorFamily",
    "PALETTE",
    "FALLBACK_COLOR",
    "color_family",
    "color_for",
    "timeline_color_map",
    # 차트 변환
    "ChartPoint",
    "ChartSeries",
    "ChartDataset",
    "build_chart_dataset",
    "build_timeline_view",
    "date_to_timestamp_ms",
    "group_by_timeline",
    # 표시 오버레이
    "VisibilityOverlay",
]
