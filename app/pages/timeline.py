from __future__ import annotations

import html
from typing import Optional

import streamlit as st

from life_timeline.domain import MilestoneRepository
from life_timeline.planning import (
    ChartDataset,
    ChartSeries,
    VisibilityOverlay,
    build_timeline_view,
)
from life_timeline.ui import handle_domain_errors, render_range_chart

# 한 줄에 표시할 필터 칩 수
CHIPS_PER_ROW = 5


def _chip_markup(series: ChartSeries) -> str:
    background = "#fff" if series.hidden else series.light
    return (
        f'<span style="display:inline-block;padding:0.25rem 0.75rem;'
        f"border:1px solid {series.border_color};border-radius:16px;"
        f'background:{background};color:{series.border_color};font-weight:bold">'
        f"{html.escape(series.label)}</span>"
    )


def build_dataset(
    repository: MilestoneRepository, overlay: VisibilityOverlay
) -> Optional[ChartDataset]:
    """Recompute the chart dataset from the current repository snapshot."""

    dataset: Optional[ChartDataset] = None
    with handle_domain_errors():
        dataset = build_timeline_view(repository.list(), overlay.hidden)
    return dataset


def render_filter_chips(dataset: ChartDataset, overlay: VisibilityOverlay) -> None:
    """Render one hide/show chip per timeline, in timeline-index order."""

    series = list(dataset.series)
    for row_start in range(0, len(series), CHIPS_PER_ROW):
        row = series[row_start : row_start + CHIPS_PER_ROW]
        columns = st.columns(CHIPS_PER_ROW)
        for column, item in zip(columns, row):
            with column:
                st.markdown(_chip_markup(item), unsafe_allow_html=True)
                action = "보이기" if item.hidden else "숨기기"
                st.button(
                    action,
                    key=f"toggle_{item.label}",
                    on_click=overlay.toggle,
                    args=(item.label,),
                )


def render_timeline_section(
    repository: MilestoneRepository, overlay: VisibilityOverlay
) -> None:
    """Filter chips followed by the range chart."""

    dataset = build_dataset(repository, overlay)
    if dataset is None:
        return

    render_filter_chips(dataset, overlay)
    render_range_chart(dataset)
