"""
타임라인 화면 테스트

저장된 날짜 오류가 차트 대신 에러 메시지로 표시되는지,
정상 데이터는 필터 칩과 차트가 그려지는지 검증합니다.
"""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from app.pages import timeline as page
from life_timeline.data_sources.store import InMemoryStore
from life_timeline.domain.repository import MilestoneRepository
from life_timeline.planning.visibility import VisibilityOverlay


@pytest.fixture
def fake_st():
    mock_st = MagicMock()
    mock_st.columns.side_effect = lambda n: [MagicMock() for _ in range(n)]
    with patch("app.pages.timeline.st", mock_st), patch(
        "life_timeline.ui.adapters.st", mock_st
    ), patch("life_timeline.ui.charts.range_chart.st", mock_st):
        yield mock_st


def _repository(records):
    store = InMemoryStore()
    store.save(records)
    return MilestoneRepository(store)


@pytest.mark.parametrize("bad_end", ["someday", "2300-01-01"])
def test_stored_bad_date_shows_error_without_chart(fake_st, bad_end):
    """저장된 날짜 오류 → st.error, 칩/차트는 그리지 않음"""
    repository = _repository(
        [
            {"id": "ok", "title": "Graduate", "timeline": "Education",
             "start": "2010-06-01", "end": "2010-06-01"},
            {"id": "bad", "title": "Broken", "timeline": "Work",
             "start": "2020-01-01", "end": bad_end},
        ]
    )

    assert page.build_dataset(repository, VisibilityOverlay()) is None
    page.render_timeline_section(repository, VisibilityOverlay())

    assert fake_st.error.called
    message = fake_st.error.call_args.args[0]
    assert "id=bad, field=end" in message
    assert bad_end in message
    fake_st.exception.assert_not_called()
    fake_st.plotly_chart.assert_not_called()
    fake_st.button.assert_not_called()


def test_valid_data_draws_chips_and_chart(fake_st, sample_fields):
    """정상 데이터 → 타임라인별 칩과 차트"""
    repository = MilestoneRepository(InMemoryStore())
    for fields in sample_fields:
        repository.add(fields)
    overlay = VisibilityOverlay()
    overlay.toggle("Career")

    page.render_timeline_section(repository, overlay)

    fake_st.error.assert_not_called()
    fake_st.plotly_chart.assert_called_once()
    labels = [c.args[0] for c in fake_st.button.call_args_list]
    keys = [c.kwargs["key"] for c in fake_st.button.call_args_list]
    assert labels == ["숨기기", "보이기"]
    assert keys == ["toggle_Education", "toggle_Career"]
