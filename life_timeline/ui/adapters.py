"""
도메인 예외 → UI 에러 메시지 어댑터

이 모듈은 도메인 계층에서 발생하는 예외를 잡아서
Streamlit 사용자 친화적인 에러 메시지로 변환합니다.

이를 통해 도메인 계층은 Streamlit에 의존하지 않으면서도
UI에서 적절한 에러 메시지를 표시할 수 있습니다.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

import streamlit as st

from life_timeline.domain.exceptions import (
    DataLoadError,
    InvalidDateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


@contextmanager
def handle_domain_errors() -> Generator[None, None, None]:
    """
    도메인 예외를 잡아서 Streamlit 에러 메시지로 변환하는 컨텍스트 매니저.

    Yields:
        None

    Examples:
        >>> with handle_domain_errors():
        ...     dataset = build_timeline_view(repository.list(), overlay.hidden)

    Notes:
        - ValidationError: 입력 검증 실패
        - NotFoundError: 대상 마일스톤 없음
        - InvalidDateError: 저장된 날짜 해석 실패 (차트 생성 시점)
        - DataLoadError: 저장소 읽기 실패
        - PersistenceError: 저장소 쓰기 실패
    """
    try:
        yield

    except ValidationError as e:
        # 검증 실패: 빨간색 에러 메시지
        st.error(f"❌ 입력 검증 실패: {str(e)}")

    except NotFoundError as e:
        # 대상 없음: 노란색 경고 메시지 (치명적이지 않음)
        st.warning(f"⚠️ {str(e)}")

    except InvalidDateError as e:
        # 차트 생성 실패: 빨간색 에러 메시지
        st.error(f"❌ 차트를 그릴 수 없습니다: {str(e)}")

    except DataLoadError as e:
        # 데이터 로드 실패: 빨간색 에러 메시지
        st.error(f"❌ 데이터 로드 실패: {str(e)}")

    except PersistenceError as e:
        # 저장 실패: 노란색 경고 메시지
        st.warning(f"⚠️ 저장 실패: {str(e)}")

    except Exception as e:
        # 예상치 못한 예외: 상세 정보와 함께 표시
        st.error(f"❌ 예상치 못한 오류가 발생했습니다: {type(e).__name__}: {str(e)}")
        st.exception(e)


def show_persistence_warning(error: Optional[PersistenceError]) -> None:
    """리포지토리에 기록된 저장 실패가 있으면 경고로 표시합니다."""
    if error is None:
        return
    st.warning(
        f"⚠️ 변경 사항이 저장되지 않았습니다. 새로 고치면 사라질 수 있습니다.\n원인: {error}"
    )
