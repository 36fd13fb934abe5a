"""
UI 레이어의 공개 API

이 모듈은 Streamlit 기반 UI 컴포넌트를 재수출합니다.
"""

from .adapters import handle_domain_errors, show_persistence_warning
from .charts import build_range_figure, render_range_chart

__all__ = (
    # Charts
    "build_range_figure",
    "render_range_chart",
    # Adapters
    "handle_domain_errors",
    "show_persistence_warning",
)
