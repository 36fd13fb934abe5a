"""
타임라인 표시 여부 오버레이

현재 숨겨진 타임라인 키의 집합을 관리합니다.
리포지토리 데이터는 건드리지 않으며, 차트 데이터의 hidden 플래그에만 반영됩니다.
숨겨진 타임라인도 카테고리 축의 자리는 그대로 유지합니다.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional, Set

logger = logging.getLogger(__name__)


class VisibilityOverlay:
    """
    숨김 처리된 타임라인 키 집합.

    저장되지 않으며, 세션이 새로 시작되면 빈 상태로 시작합니다.

    Examples:
        >>> overlay = VisibilityOverlay()
        >>> overlay.toggle("Work")
        >>> overlay.is_hidden("Work")
        True
        >>> overlay.toggle("Work")
        >>> overlay.is_hidden("Work")
        False
    """

    def __init__(self, hidden: Optional[Iterable[str]] = None) -> None:
        self._hidden: Set[str] = set(hidden or ())

    def toggle(self, timeline: str) -> None:
        """숨겨져 있으면 보이게, 보이면 숨깁니다."""
        if timeline in self._hidden:
            self._hidden.discard(timeline)
            logger.debug(f"Timeline shown: {timeline!r}")
        else:
            self._hidden.add(timeline)
            logger.debug(f"Timeline hidden: {timeline!r}")

    def is_hidden(self, timeline: str) -> bool:
        return timeline in self._hidden

    @property
    def hidden(self) -> FrozenSet[str]:
        """현재 숨겨진 타임라인 키의 읽기 전용 스냅샷."""
        return frozenset(self._hidden)

    def clear(self) -> None:
        self._hidden.clear()

    def __contains__(self, timeline: object) -> bool:
        return timeline in self._hidden

    def __len__(self) -> int:
        return len(self._hidden)
