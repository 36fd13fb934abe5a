"""
마일스톤 입력 검증 로직

이 모듈은 리포지토리에 레코드를 커밋하기 전에 입력 필드의 유효성을 검증합니다.
Streamlit 의존성이 없는 순수한 도메인 로직으로 동작합니다.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Dict, Mapping, Optional

import pandas as pd

from ..core.config import CONFIG, ValidationConfig
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

# 커밋 시점에 비어 있으면 안 되는 필드 (화면 표시용 이름)
REQUIRED_FIELDS = {
    "title": "제목",
    "timeline": "타임라인",
    "start": "시작일",
    "end": "종료일",
}

# 허용 날짜 범위 (pandas 나노초 Timestamp로 표현 가능한 날짜)
MIN_DATE = dt.date(1677, 9, 22)
MAX_DATE = dt.date(2262, 4, 11)


def parse_calendar_date(value: object) -> Optional[dt.date]:
    """
    임의의 값을 달력 날짜로 해석합니다.

    ISO-8601 문자열("2010-06-01" 등)과 date/datetime/Timestamp 객체를 허용합니다.
    시간 정보는 버리고 날짜 부분만 사용합니다.
    MIN_DATE ~ MAX_DATE 범위를 벗어난 날짜는 입력 형식과 관계없이 거부합니다.

    Args:
        value: 해석할 값

    Returns:
        datetime.date 객체. 해석할 수 없거나 범위를 벗어나면 None.
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        parsed_date = value.date()
    elif isinstance(value, dt.date):
        parsed_date = value
    else:
        text = str(value).strip()
        if not text:
            return None
        parsed = pd.to_datetime(text, format="ISO8601", errors="coerce")
        if pd.isna(parsed):
            return None
        parsed_date = parsed.date()

    if not MIN_DATE <= parsed_date <= MAX_DATE:
        logger.debug(f"Date out of supported range: {parsed_date}")
        return None
    return parsed_date


def _clean_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def validate_milestone_fields(
    fields: Mapping[str, object],
    *,
    config: Optional[ValidationConfig] = None,
) -> Dict[str, str]:
    """
    CRUD 입력 폼이 전달한 필드를 검증하고 정규화된 값을 반환합니다.

    검증 항목:
    1. title, timeline, start, end가 비어 있지 않은지 확인 (공백만 있는 값도 빈 값)
    2. start, end가 달력 날짜로 해석되는지 확인
    3. (설정 시) start <= end 인지 확인

    Args:
        fields: {title, timeline, start, end, notes} 매핑
        config: 검증 설정 (기본값: CONFIG.validation)

    Returns:
        정규화된 필드 딕셔너리. 날짜는 "YYYY-MM-DD" 문자열로 변환됩니다.

    Raises:
        ValidationError: 검증 실패 시 발생

    Examples:
        >>> validate_milestone_fields({"title": "졸업", "timeline": "교육",
        ...                            "start": "2010-06-01", "end": "2010-06-01"})
        {'title': '졸업', 'timeline': '교육', 'start': '2010-06-01', 'end': '2010-06-01', 'notes': ''}
    """
    cfg = config or CONFIG.validation

    # ========================================
    # 1단계: 필수 필드 검증
    # ========================================
    missing = [
        label for key, label in REQUIRED_FIELDS.items() if not _clean_text(fields.get(key))
    ]
    if missing:
        logger.debug(f"Missing milestone fields: {missing}")
        raise ValidationError("필수 항목을 입력하세요: " + ", ".join(missing))

    # ========================================
    # 2단계: 날짜 형식 검증
    # ========================================
    start = parse_calendar_date(fields.get("start"))
    end = parse_calendar_date(fields.get("end"))

    invalid = [
        REQUIRED_FIELDS[key]
        for key, parsed in (("start", start), ("end", end))
        if parsed is None
    ]
    if invalid:
        logger.debug(
            f"Unparseable dates: start={fields.get('start')!r}, end={fields.get('end')!r}"
        )
        raise ValidationError(
            "날짜 형식이 올바르지 않거나 지원 범위를 벗어났습니다 "
            f"(YYYY-MM-DD, {MIN_DATE} ~ {MAX_DATE}): " + ", ".join(invalid)
        )

    # ========================================
    # 3단계: 날짜 순서 검증 (선택)
    # ========================================
    if cfg.enforce_date_order and end < start:
        logger.debug(f"Inverted date range: start={start}, end={end}")
        raise ValidationError("종료일이 시작일보다 빠릅니다. 날짜를 다시 입력하세요.")

    return {
        "title": _clean_text(fields.get("title")),
        "timeline": _clean_text(fields.get("timeline")),
        "start": start.isoformat(),
        "end": end.isoformat(),
        "notes": _clean_text(fields.get("notes")),
    }
