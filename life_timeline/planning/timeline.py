"""타임라인 인덱스: 마일스톤 컬렉션에서 고유 타임라인 키를 도출합니다."""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from ..domain.models import Milestone

logger = logging.getLogger(__name__)


def compute_timeline_index(milestones: Iterable[Milestone]) -> Tuple[str, ...]:
    """
    컬렉션을 저장 순서대로 훑으며 각 타임라인을 처음 등장한 순서로 모읍니다.

    정렬하지 않습니다. 같은 입력에 대해서는 항상 같은 결과를 반환합니다.

    Examples:
        >>> compute_timeline_index([work1, home1, work2])  # timeline: Work, Home, Work
        ('Work', 'Home')
    """
    # dict는 삽입 순서를 유지하므로 최초 등장 순서가 그대로 보존됨
    index = tuple(dict.fromkeys(m.timeline for m in milestones))
    logger.debug(f"Timeline index recomputed: {len(index)} timelines")
    return index
