from __future__ import annotations

from typing import Optional

import streamlit as st

from app import state
from app.pages import milestones, timeline
from life_timeline.domain import MilestoneRepository
from life_timeline.ui import handle_domain_errors


def main() -> None:
    """Entrypoint for running the life timeline planner in Streamlit."""

    st.set_page_config(page_title="Life Timeline Planner", layout="wide")
    st.title("Life Timeline Planner")
    st.caption("마일스톤을 기록하고 타임라인별로 한눈에 확인하세요.")

    repository: Optional[MilestoneRepository] = None
    with handle_domain_errors():
        repository = state.get_repository()
    if repository is None:
        return

    overlay = state.get_overlay()

    timeline.render_timeline_section(repository, overlay)

    st.divider()

    milestones.render_milestone_form(repository)
    milestones.render_milestone_list(repository)


if __name__ == "__main__":
    main()
