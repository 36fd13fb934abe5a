"""
차트 데이터 변환 테스트

시리즈/포인트 순서, 범위 타임스탬프, hidden 플래그, 날짜 오류 처리를 검증합니다.
"""
from __future__ import annotations

import pandas as pd
import pytest

from life_timeline.domain.exceptions import InvalidDateError
from life_timeline.domain.models import Milestone
from life_timeline.planning.chart_data import (
    ChartDataset,
    build_chart_dataset,
    build_timeline_view,
    date_to_timestamp_ms,
    group_by_timeline,
)
from life_timeline.planning.colors import FALLBACK_COLOR, PALETTE, timeline_color_map
from life_timeline.planning.timeline import compute_timeline_index
from life_timeline.planning.visibility import VisibilityOverlay


def ts(value: str) -> int:
    return int(pd.Timestamp(value).value // 1_000_000)


@pytest.fixture
def example_milestones() -> list:
    """졸업(Education) / 첫 직장(Career) 예시"""
    return [
        Milestone("m1", "Graduate", "Education", "2010-06-01", "2010-06-01"),
        Milestone("m2", "First Job", "Career", "2010-07-01", "2015-01-01", "신입"),
    ]


def test_example_scenario(example_milestones):
    """Education, Career 순서의 시리즈 2개, Education 포인트 범위 확인"""
    index = compute_timeline_index(example_milestones)
    dataset = build_chart_dataset(
        example_milestones, index, timeline_color_map(index), frozenset()
    )

    assert index == ("Education", "Career")
    assert dataset.categories == ("Education", "Career")
    assert [s.label for s in dataset.series] == ["Education", "Career"]

    education = dataset.series[0]
    assert len(education.points) == 1
    assert education.points[0].range == (ts("2010-06-01"), ts("2010-06-01"))
    assert education.points[0].title == "Graduate"
    assert education.points[0].id == "m1"


def test_timestamps_are_utc_midnight_epoch_ms():
    """달력 날짜 → UTC 자정 epoch ms"""
    assert date_to_timestamp_ms("2010-06-01") == 1275350400000
    assert date_to_timestamp_ms("1970-01-01") == 0


def test_series_colors_follow_index_position(example_milestones):
    """mid = 채움, dark = 테두리, light = 칩 배경"""
    dataset = build_timeline_view(example_milestones)

    career = dataset.series[1]
    assert career.color == PALETTE[1].mid
    assert career.border_color == PALETTE[1].dark
    assert career.light == PALETTE[1].light


def test_points_keep_repository_order_without_date_sorting():
    """시리즈 내 포인트는 저장 순서, 날짜로 정렬하지 않음"""
    milestones = [
        Milestone("late", "Late", "Work", "2020-01-01", "2021-01-01"),
        Milestone("home", "Home", "Home", "2000-01-01", "2001-01-01"),
        Milestone("early", "Early", "Work", "2005-01-01", "2006-01-01"),
    ]
    dataset = build_timeline_view(milestones)

    assert [s.label for s in dataset.series] == ["Work", "Home"]
    assert [p.id for p in dataset.series[0].points] == ["late", "early"]


def test_hidden_flag_does_not_remove_data(example_milestones):
    """숨긴 타임라인도 시리즈와 카테고리가 유지되고 hidden 플래그만 설정"""
    overlay = VisibilityOverlay()
    overlay.toggle("Education")

    dataset = build_timeline_view(example_milestones, overlay.hidden)

    assert dataset.categories == ("Education", "Career")
    assert [s.hidden for s in dataset.series] == [True, False]
    assert len(dataset.series[0].points) == 1


def test_hidden_key_not_in_index_is_ignored(example_milestones):
    """인덱스에 없는 숨김 키는 결과에 영향 없음"""
    dataset = build_timeline_view(example_milestones, frozenset({"Gone"}))
    assert not any(s.hidden for s in dataset.series)


def test_missing_color_uses_fallback(example_milestones):
    """색상 매핑에 없는 타임라인은 중립색"""
    index = compute_timeline_index(example_milestones)
    dataset = build_chart_dataset(example_milestones, index, {}, frozenset())

    assert dataset.series[0].color == FALLBACK_COLOR.mid
    assert dataset.series[0].border_color == FALLBACK_COLOR.dark


def test_unparseable_stored_date_raises_invalid_date_error():
    """저장된 날짜를 해석할 수 없으면 InvalidDateError (id/필드 포함)"""
    milestones = [Milestone("bad", "Broken", "Work", "2020-01-01", "someday")]

    with pytest.raises(InvalidDateError) as excinfo:
        build_timeline_view(milestones)

    assert excinfo.value.milestone_id == "bad"
    assert excinfo.value.field == "end"
    assert excinfo.value.value == "someday"


def test_inverted_range_is_kept_as_is():
    """시작일 > 종료일도 그대로 전달 (정렬/보정 없음)"""
    dataset = build_timeline_view([Milestone("x", "X", "Work", "2012-01-01", "2010-01-01")])
    assert dataset.series[0].points[0].range == (ts("2012-01-01"), ts("2010-01-01"))


def test_empty_collection_gives_empty_dataset():
    """빈 컬렉션 → 빈 데이터셋"""
    dataset = build_timeline_view([])
    assert dataset == ChartDataset()
    assert dataset.is_empty


def test_to_dict_matches_rendering_boundary(example_milestones):
    """렌더링 경계 객체 형식"""
    payload = build_timeline_view(example_milestones, frozenset({"Career"})).to_dict()

    assert payload["categories"] == ["Education", "Career"]
    assert payload["series"][1] == {
        "label": "Career",
        "color": PALETTE[1].mid,
        "borderColor": PALETTE[1].dark,
        "hidden": True,
        "points": [
            {"range": [ts("2010-07-01"), ts("2015-01-01")], "title": "First Job", "id": "m2"}
        ],
    }


def test_group_by_timeline_preserves_group_order(example_milestones):
    """그룹 내부 순서 유지"""
    extra = Milestone("m3", "PhD", "Education", "2011-01-01", "2014-01-01")
    grouped = group_by_timeline(example_milestones + [extra])

    assert list(grouped) == ["Education", "Career"]
    assert [m.id for m in grouped["Education"]] == ["m1", "m3"]


def test_range_bound_dates_convert_without_overflow():
    """범위 경계 날짜도 epoch ms로 변환"""
    assert date_to_timestamp_ms("2262-04-11") == ts("2262-04-11")
    assert date_to_timestamp_ms("1677-09-22") == ts("1677-09-22")
    assert date_to_timestamp_ms("1969-12-31") == -86_400_000


def test_out_of_range_stored_date_raises_invalid_date_error():
    """저장 파일의 범위 밖 날짜는 OverflowError가 아닌 InvalidDateError"""
    milestones = [Milestone("far", "Far", "Future", "2300-01-01", "2301-01-01")]

    with pytest.raises(InvalidDateError) as excinfo:
        build_timeline_view(milestones)

    assert excinfo.value.milestone_id == "far"
    assert excinfo.value.field == "start"
