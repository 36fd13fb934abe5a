from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from life_timeline.core.config import CONFIG
from life_timeline.data_sources import JsonFileStore
from life_timeline.domain import Milestone, MilestoneRepository
from life_timeline.planning import VisibilityOverlay


REPOSITORY_SESSION_KEY = "_milestone_repository"
OVERLAY_SESSION_KEY = "_visibility_overlay"
EDITING_SESSION_KEY = "_editing_id"
FORM_ERROR_SESSION_KEY = "_form_error"

# 입력 폼 위젯 키 (필드명 → 세션 키)
FORM_KEYS: Dict[str, str] = {
    "title": "form_title",
    "timeline": "form_timeline",
    "start": "form_start",
    "end": "form_end",
    "notes": "form_notes",
}


def get_repository() -> MilestoneRepository:
    """Return the session's repository, loading the durable store on first access."""

    repository = st.session_state.get(REPOSITORY_SESSION_KEY)
    if isinstance(repository, MilestoneRepository):
        return repository

    store = JsonFileStore(CONFIG.storage.data_dir, key=CONFIG.storage.key)
    repository = MilestoneRepository(store)
    st.session_state[REPOSITORY_SESSION_KEY] = repository
    return repository


def get_overlay() -> VisibilityOverlay:
    """Return the session's visibility overlay (starts empty on every new session)."""

    overlay = st.session_state.get(OVERLAY_SESSION_KEY)
    if isinstance(overlay, VisibilityOverlay):
        return overlay

    overlay = VisibilityOverlay()
    st.session_state[OVERLAY_SESSION_KEY] = overlay
    return overlay


def get_editing_id() -> Optional[str]:
    value = st.session_state.get(EDITING_SESSION_KEY)
    return str(value) if value else None


def read_form() -> Dict[str, str]:
    """Return the current form values keyed by milestone field."""

    return {field: st.session_state.get(key, "") for field, key in FORM_KEYS.items()}


def load_form(milestone: Milestone) -> None:
    """Enter edit mode with the form prefilled from ``milestone``."""

    for field, key in FORM_KEYS.items():
        st.session_state[key] = getattr(milestone, field)
    st.session_state[EDITING_SESSION_KEY] = milestone.id
    st.session_state[FORM_ERROR_SESSION_KEY] = None


def clear_form() -> None:
    """Reset the form and leave edit mode."""

    for key in FORM_KEYS.values():
        st.session_state[key] = ""
    st.session_state[EDITING_SESSION_KEY] = None
    st.session_state[FORM_ERROR_SESSION_KEY] = None


def set_form_error(message: Optional[str]) -> None:
    st.session_state[FORM_ERROR_SESSION_KEY] = message


def get_form_error() -> Optional[str]:
    return st.session_state.get(FORM_ERROR_SESSION_KEY)
