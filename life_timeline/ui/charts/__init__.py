"""차트 렌더링 모듈."""

from .range_chart import build_range_figure, render_range_chart

__all__ = [
    "build_range_figure",
    "render_range_chart",
]
