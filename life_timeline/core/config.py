"""Configuration and constants for the life timeline planner.

저장소 위치, 입력 검증 규칙, 차트 옵션 등 전역 설정을 제공합니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# ============================================================
# 저장소 설정
# ============================================================

# 마일스톤 컬렉션이 저장되는 고정 키
STORE_KEY = "milestones"

# 데이터 디렉터리 환경변수 이름
DATA_DIR_ENV = "LIFE_TIMELINE_DATA_DIR"


def _default_data_dir() -> Path:
    return Path(os.getenv(DATA_DIR_ENV, str(Path.home() / ".life_timeline")))


@dataclass(frozen=True)
class StorageConfig:
    """영구 저장소 관련 설정"""

    # JSON 파일이 저장될 디렉터리
    data_dir: Path = field(default_factory=_default_data_dir)

    # 저장 키 (파일명은 <key>.json)
    key: str = STORE_KEY


# ============================================================
# 검증 설정
# ============================================================

@dataclass(frozen=True)
class ValidationConfig:
    """마일스톤 입력 검증 관련 설정"""

    # True이면 시작일이 종료일보다 늦은 입력을 거부
    # (기본값은 기존 동작과 동일하게 허용)
    enforce_date_order: bool = False


# ============================================================
# 차트 설정
# ============================================================

@dataclass(frozen=True)
class ChartOptions:
    """범위 차트 렌더링 옵션 (가로 막대 + 시간축)"""

    # 막대 방향 ("h" = 가로)
    orientation: str = "h"

    # 시간축 눈금 단위 ("year" / "month" / "day", 라벨 형식 결정)
    time_unit: str = "year"
    x_dtick: str = "M12"

    # 범례 표시 여부 (필터 칩이 범례 역할을 대신함)
    show_legend: bool = False

    # 막대 위 라벨 (마일스톤 제목, 가운데 정렬)
    label_position: str = "inside"
    label_anchor: str = "middle"
    label_font_size: int = 10
    label_color: str = "#000"

    # 차트 높이 (픽셀)
    height: int = 400

    # 시작일 == 종료일인 막대의 최소 표시 폭 (1일, ms)
    min_bar_ms: int = 86_400_000

    # 막대 테두리 두께
    border_width: int = 1


@dataclass(frozen=True)
class PlannerConfig:
    """플래너 전역 설정"""

    storage: StorageConfig = field(default_factory=StorageConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    chart: ChartOptions = field(default_factory=ChartOptions)


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = PlannerConfig()
