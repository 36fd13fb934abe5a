"""
Life Timeline Planner 메인 엔트리 포인트

실행: streamlit run planner_app.py

저장 위치는 LIFE_TIMELINE_DATA_DIR 환경변수로 지정합니다
(기본값: ~/.life_timeline/milestones.json).
"""

from __future__ import annotations

import logging

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from app.main import main

main()
