"""가로 범위(Range) 차트 렌더러.

차트 데이터셋을 Plotly 가로 막대 차트로 변환하고 Streamlit에 그립니다.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

import plotly.graph_objects as go
import streamlit as st

from life_timeline.core.config import CONFIG, ChartOptions
from life_timeline.planning.chart_data import ChartDataset, ChartSeries

# x축 눈금 단위별 라벨 형식
TICK_FORMATS = {"year": "%Y", "month": "%Y-%m", "day": "%Y-%m-%d"}

_EPOCH = dt.datetime(1970, 1, 1)


def _ms_to_datetime(ms: int) -> dt.datetime:
    # timedelta 연산은 나노초 범위 제한이 없음
    return _EPOCH + dt.timedelta(milliseconds=ms)


def _format_ms(ms: int) -> str:
    return _ms_to_datetime(ms).strftime("%Y-%m-%d")


def _series_trace(series: ChartSeries, options: ChartOptions) -> go.Bar:
    """시리즈 하나를 가로 막대 trace로 변환합니다.

    base = 시작 시각, x = 기간(ms). 시작일과 종료일이 같은 막대는
    보이도록 최소 폭(options.min_bar_ms)을 적용합니다 (표시 전용).
    """
    base: List[dt.datetime] = []
    durations: List[int] = []
    customdata: List[List[str]] = []

    for point in series.points:
        length = point.end_ms - point.start_ms
        if length == 0:
            length = options.min_bar_ms
        base.append(_ms_to_datetime(point.start_ms))
        durations.append(length)
        customdata.append(
            [
                point.title,
                _format_ms(point.start_ms),
                _format_ms(point.end_ms),
                point.notes,
                point.id,
            ]
        )

    return go.Bar(
        name=series.label,
        orientation=options.orientation,
        base=base,
        x=durations,
        y=[series.label] * len(series.points),
        text=[point.title for point in series.points],
        textposition=options.label_position,
        insidetextanchor=options.label_anchor,
        textfont=dict(size=options.label_font_size, color=options.label_color),
        marker=dict(
            color=series.color,
            line=dict(color=series.border_color, width=options.border_width),
        ),
        customdata=customdata,
        hovertemplate=(
            "<b>%{customdata[0]}</b><br>"
            "%{customdata[1]} → %{customdata[2]}<br>"
            "%{customdata[3]}"
            "<extra>%{y}</extra>"
        ),
        visible="legendonly" if series.hidden else True,
        showlegend=options.show_legend,
    )


def build_range_figure(
    dataset: ChartDataset,
    options: Optional[ChartOptions] = None,
) -> go.Figure:
    """
    차트 데이터셋으로 Plotly Figure를 생성합니다.

    - 타임라인마다 가로 막대 trace 하나 (데이터셋 순서 유지)
    - x축: 시간축, 연 단위 눈금
    - y축: categories 순서의 카테고리 축 (첫 타임라인이 맨 위)
    - 숨긴 타임라인도 카테고리 축의 자리는 유지
    - 범례 비활성화 (필터 칩이 대신함)

    Args:
        dataset: build_chart_dataset 결과
        options: 차트 옵션 (기본값: CONFIG.chart)

    Returns:
        Plotly Figure 객체
    """
    opts = options or CONFIG.chart
    fig = go.Figure()

    for series in dataset.series:
        fig.add_trace(_series_trace(series, opts))

    categories = list(dataset.categories)
    fig.update_layout(
        barmode="overlay",
        showlegend=opts.show_legend,
        height=opts.height,
        margin=dict(l=20, r=20, t=20, b=40),
        xaxis=dict(
            type="date",
            dtick=opts.x_dtick,
            tickformat=TICK_FORMATS.get(opts.time_unit, "%Y"),
            showgrid=True,
        ),
        yaxis=dict(
            type="category",
            categoryorder="array",
            categoryarray=categories,
            # 숨긴 타임라인도 자리를 차지하도록 범위를 고정하고, 첫 타임라인을 위에 둠
            range=[len(categories) - 0.5, -0.5],
            showgrid=False,
        ),
    )
    return fig


def render_range_chart(
    dataset: ChartDataset,
    options: Optional[ChartOptions] = None,
) -> None:
    """차트 데이터셋을 Streamlit에 그립니다. 마일스톤이 없으면 안내 문구를 표시합니다."""
    if dataset.is_empty:
        st.info("마일스톤을 추가하면 타임라인 차트가 표시됩니다.")
        return

    fig = build_range_figure(dataset, options)
    st.plotly_chart(fig, use_container_width=True, config={"displaylogo": False})
