"""
입력 폼 콜백 테스트

성공 시 폼 초기화, 실패 시 입력값 유지, 수정/삭제 시 편집 상태 처리를 검증합니다.
Streamlit 세션 상태는 dict로 대체합니다.
"""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from app import state
from app.pages import milestones as page
from life_timeline.data_sources.store import InMemoryStore
from life_timeline.domain.repository import MilestoneRepository


@pytest.fixture
def session():
    fake_st = MagicMock()
    fake_st.session_state = {}
    with patch("app.state.st", fake_st), patch("app.pages.milestones.st", fake_st):
        yield fake_st.session_state


@pytest.fixture
def repo():
    return MilestoneRepository(InMemoryStore())


def _fill(session, fields):
    for field, key in state.FORM_KEYS.items():
        session[key] = fields.get(field, "")


def test_submit_success_adds_and_clears_form(session, repo, sample_fields):
    """추가 성공 → 폼 초기화"""
    _fill(session, sample_fields[0])

    page._handle_submit(repo)

    assert [m.title for m in repo.list()] == ["Graduate"]
    assert state.read_form() == {field: "" for field in state.FORM_KEYS}
    assert state.get_form_error() is None


def test_submit_failure_keeps_form_values(session, repo, sample_fields):
    """검증 실패 → 입력값 유지, 에러 메시지 기록"""
    fields = {**sample_fields[0], "title": ""}
    _fill(session, fields)

    page._handle_submit(repo)

    assert repo.list() == []
    assert state.read_form()["timeline"] == "Education"
    assert "제목" in state.get_form_error()


def test_edit_then_submit_updates_same_record(session, repo, sample_fields):
    """수정 모드 진입 → 제출 시 같은 id로 수정하고 편집 종료"""
    original = repo.add(sample_fields[0])

    page._handle_edit(repo, original.id)
    assert state.get_editing_id() == original.id
    assert state.read_form()["title"] == "Graduate"

    session[state.FORM_KEYS["title"]] = "Graduated"
    page._handle_submit(repo)

    assert [(m.id, m.title) for m in repo.list()] == [(original.id, "Graduated")]
    assert state.get_editing_id() is None


def test_deleting_edited_record_leaves_edit_mode(session, repo, sample_fields):
    """편집 중인 레코드를 삭제하면 편집 종료"""
    milestone = repo.add(sample_fields[0])
    page._handle_edit(repo, milestone.id)

    page._handle_delete(repo, milestone.id)

    assert repo.list() == []
    assert state.get_editing_id() is None


def test_submit_for_vanished_record_reports_not_found(session, repo, sample_fields):
    """편집 대상이 사라졌으면 NotFound 메시지 후 편집 종료"""
    _fill(session, sample_fields[1])
    session[state.EDITING_SESSION_KEY] = "gone"

    page._handle_submit(repo)

    assert repo.list() == []
    assert "gone" in state.get_form_error()
    assert state.get_editing_id() is None
