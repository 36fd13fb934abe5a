"""
Life Timeline Planner 패키지

개인 마일스톤을 기록하고 타임라인별 가로 범위 차트로 보여줍니다.
구성:
- 도메인 로직(모델, 검증, 리포지토리)과 UI 로직의 분리
- Streamlit 의존성을 UI 계층으로 격리
- 타임라인 인덱스 / 색상 배정 / 차트 변환은 순수 함수로 구현
"""

from __future__ import annotations

__version__ = "1.0.0"
