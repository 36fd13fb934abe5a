"""타임라인 색상 관리 모듈.

타임라인 인덱스 내 위치에 따라 (light, mid, dark) 색상 3종을 배정합니다.
타임라인 이름과는 무관하게 위치만으로 결정됩니다.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Sequence, Tuple


class ColorFamily(NamedTuple):
    """한 타임라인에 쓰이는 색상 3종 (칩 배경 / 막대 채움 / 테두리)."""

    light: str
    mid: str
    dark: str


# 고정 팔레트 (5종, 순서 고정)
PALETTE: Tuple[ColorFamily, ...] = (
    ColorFamily("#E3F2FD", "#42A5F5", "#1E88E5"),  # blue
    ColorFamily("#E8F5E9", "#66BB6A", "#43A047"),  # green
    ColorFamily("#F3E5F5", "#AB47BC", "#8E24AA"),  # purple
    ColorFamily("#FFF8E1", "#FFB300", "#FB8C00"),  # amber
    ColorFamily("#E0F2F1", "#26A69A", "#00897B"),  # teal
)

# 인덱스에 없는 타임라인에 쓰는 중립색
FALLBACK_COLOR = ColorFamily("#ccc", "#888", "#555")


def color_family(index: int) -> ColorFamily:
    """인덱스 위치에 해당하는 팔레트 항목을 반환합니다 (팔레트 길이로 순환).

    Args:
        index: 타임라인 인덱스 내 0부터 시작하는 위치

    Returns:
        (light, mid, dark) 색상 3종
    """
    return PALETTE[index % len(PALETTE)]


def color_for(timeline: str, timeline_index: Sequence[str]) -> ColorFamily:
    """타임라인 키의 색상을 반환합니다.

    Args:
        timeline: 타임라인 키
        timeline_index: 최초 등장 순서의 타임라인 인덱스

    Returns:
        (light, mid, dark) 색상 3종. 인덱스에 없으면 FALLBACK_COLOR.
    """
    try:
        position = list(timeline_index).index(timeline)
    except ValueError:
        return FALLBACK_COLOR
    return color_family(position)


def timeline_color_map(timeline_index: Sequence[str]) -> Dict[str, ColorFamily]:
    """타임라인 인덱스 전체에 대한 색상 매핑을 생성합니다.

    Args:
        timeline_index: 최초 등장 순서의 타임라인 인덱스

    Returns:
        타임라인 → 색상 3종 매핑
    """
    return {timeline: color_family(i) for i, timeline in enumerate(timeline_index)}
