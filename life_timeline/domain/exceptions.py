"""
도메인 계층 예외 정의

이 모듈은 라이프 타임라인 도메인 계층에서 발생할 수 있는
모든 예외를 정의합니다. UI 계층은 이 예외들을 잡아서
사용자 친화적인 에러 메시지로 변환합니다.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class ValidationError(DomainError):
    """
    입력 검증 실패 시 발생하는 예외.

    필수 필드(제목, 타임라인, 시작일, 종료일)가 비어 있거나
    날짜를 해석할 수 없을 때 발생합니다.
    예외가 발생하면 레코드는 생성/수정되지 않습니다.
    """

    pass


class NotFoundError(DomainError):
    """
    존재하지 않는 마일스톤 ID를 대상으로 작업할 때 발생하는 예외.
    """

    def __init__(self, milestone_id: str) -> None:
        super().__init__(f"마일스톤을 찾을 수 없습니다: {milestone_id}")
        self.milestone_id = milestone_id


class InvalidDateError(DomainError):
    """
    차트 데이터 생성 시 저장된 날짜를 해석할 수 없을 때 발생하는 예외.

    어떤 마일스톤의 어떤 필드가 문제인지 함께 전달합니다.
    """

    def __init__(
        self,
        value: object,
        *,
        milestone_id: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        location = ""
        if milestone_id is not None:
            location = f" (id={milestone_id}, field={field})"
        super().__init__(
            f"날짜 형식이 올바르지 않거나 지원 범위를 벗어났습니다: {value!r}{location}"
        )
        self.value = value
        self.milestone_id = milestone_id
        self.field = field


class DataLoadError(DomainError):
    """
    저장소에서 마일스톤 컬렉션을 읽지 못했을 때 발생하는 예외.
    """

    pass


class PersistenceError(DomainError):
    """
    저장소에 마일스톤 컬렉션을 쓰지 못했을 때 발생하는 예외.

    저장소 접근 불가, 용량 초과 등이 원인입니다.
    리포지토리는 이 예외를 호출자에게 전파하지 않고 기록해 둡니다.
    """

    pass
