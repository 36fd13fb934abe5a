from __future__ import annotations

import logging

import streamlit as st

from app import state
from life_timeline.domain import (
    DomainError,
    MilestoneRepository,
    NotFoundError,
    submit_milestone,
)
from life_timeline.ui import show_persistence_warning

logger = logging.getLogger(__name__)


def _handle_submit(repository: MilestoneRepository) -> None:
    """Form callback: add or update, then clear the form on success."""

    editing_id = state.get_editing_id()
    try:
        submit_milestone(repository, state.read_form(), editing_id)
    except DomainError as exc:
        logger.info(f"Milestone form rejected: {exc}")
        # 입력값은 유지하고 메시지만 표시
        state.set_form_error(str(exc))
        if isinstance(exc, NotFoundError):
            st.session_state[state.EDITING_SESSION_KEY] = None
        return
    state.clear_form()


def _handle_edit(repository: MilestoneRepository, milestone_id: str) -> None:
    try:
        milestone = repository.get(milestone_id)
    except NotFoundError as exc:
        state.set_form_error(str(exc))
        return
    state.load_form(milestone)


def _handle_delete(repository: MilestoneRepository, milestone_id: str) -> None:
    repository.delete(milestone_id)
    if state.get_editing_id() == milestone_id:
        state.clear_form()


def render_milestone_form(repository: MilestoneRepository) -> None:
    """Add/Edit form. Keeps its values when validation fails."""

    editing_id = state.get_editing_id()
    st.subheader("마일스톤 수정" if editing_id else "마일스톤 추가")

    with st.form("milestone_form", clear_on_submit=False):
        cols = st.columns(5)
        cols[0].text_input("제목", key=state.FORM_KEYS["title"], placeholder="제목")
        cols[1].text_input("타임라인", key=state.FORM_KEYS["timeline"], placeholder="타임라인")
        cols[2].text_input("시작일", key=state.FORM_KEYS["start"], placeholder="YYYY-MM-DD")
        cols[3].text_input("종료일", key=state.FORM_KEYS["end"], placeholder="YYYY-MM-DD")
        cols[4].text_input("메모", key=state.FORM_KEYS["notes"], placeholder="메모")
        st.form_submit_button(
            "수정" if editing_id else "추가",
            on_click=_handle_submit,
            args=(repository,),
        )

    if editing_id:
        st.button("취소", key="cancel_edit", on_click=state.clear_form)

    error = state.get_form_error()
    if error:
        st.error(f"❌ {error}")

    show_persistence_warning(repository.last_persistence_error)


def render_milestone_list(repository: MilestoneRepository) -> None:
    """Milestones in stored order, each with edit/delete actions."""

    st.subheader("마일스톤 목록")
    milestones = repository.list()
    if not milestones:
        st.caption("등록된 마일스톤이 없습니다.")
        return

    for milestone in milestones:
        info_col, edit_col, delete_col = st.columns([8, 1, 1])
        summary = (
            f"**{milestone.title}** ({milestone.timeline}) · "
            f"{milestone.start} → {milestone.end}"
        )
        if milestone.notes:
            summary += f"  \n{milestone.notes}"
        info_col.markdown(summary)
        edit_col.button(
            "수정",
            key=f"edit_{milestone.id}",
            on_click=_handle_edit,
            args=(repository, milestone.id),
        )
        delete_col.button(
            "삭제",
            key=f"delete_{milestone.id}",
            on_click=_handle_delete,
            args=(repository, milestone.id),
        )
