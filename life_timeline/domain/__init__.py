"""
도메인 계층 퍼블릭 API

이 모듈은 도메인 계층의 주요 클래스와 함수를 재수출하여
일관된 퍼블릭 API를 제공합니다.
"""
from __future__ import annotations

from .exceptions import (
    DataLoadError,
    DomainError,
    InvalidDateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from .models import Milestone
from .repository import MilestoneRepository, submit_milestone
from .validation import parse_calendar_date, validate_milestone_fields

__all__ = [
    # 예외
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "InvalidDateError",
    "DataLoadError",
    "PersistenceError",
    # 모델
    "Milestone",
    # 리포지토리
    "MilestoneRepository",
    "submit_milestone",
    # 검증
    "validate_milestone_fields",
    "parse_calendar_date",
]
