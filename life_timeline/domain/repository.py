"""
마일스톤 리포지토리

마일스톤 컬렉션을 소유하고 추가/수정/삭제/조회를 제공합니다.
컬렉션은 삽입 순서를 유지하며, 타임라인 인덱스의 최초 등장 순서가 이 순서에 의존합니다.
변경이 성공할 때마다 컬렉션 전체를 저장소에 기록합니다.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Callable, List, Mapping, Optional

from ..core.config import CONFIG, ValidationConfig
from .exceptions import NotFoundError, PersistenceError
from .models import Milestone
from .validation import validate_milestone_fields

if TYPE_CHECKING:
    from ..data_sources.store import MilestoneStore

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class MilestoneRepository:
    """
    저장소를 주입받는 마일스톤 컬렉션.

    생성 시점에 저장소를 한 번 읽고, 이후에는 변경 시마다 전체를 기록합니다.
    저장 실패는 호출자에게 전파하지 않고 last_persistence_error에 기록합니다.

    Args:
        store: load()/save(records)를 제공하는 저장소
        id_factory: 새 id 생성 함수 (기본값: uuid4 hex)
        validation: 입력 검증 설정 (기본값: CONFIG.validation)

    Examples:
        >>> repo = MilestoneRepository(InMemoryStore())
        >>> m = repo.add({"title": "졸업", "timeline": "교육",
        ...               "start": "2010-06-01", "end": "2010-06-01"})
        >>> [x.id for x in repo.list()] == [m.id]
        True
    """

    def __init__(
        self,
        store: MilestoneStore,
        *,
        id_factory: Callable[[], str] = _new_id,
        validation: Optional[ValidationConfig] = None,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._validation = validation or CONFIG.validation
        self._items: List[Milestone] = []
        self.last_persistence_error: Optional[PersistenceError] = None
        self._load()

    # ========================================
    # 초기 로드
    # ========================================
    def _load(self) -> None:
        seen = set()
        for record in self._store.load():
            milestone = Milestone.from_dict(record)
            if not milestone.id:
                milestone = Milestone.from_dict({**record, "id": self._fresh_id()})
                logger.warning(f"Stored milestone without id was assigned {milestone.id}")
            if milestone.id in seen:
                logger.warning(f"Dropping stored milestone with duplicate id {milestone.id}")
                continue
            seen.add(milestone.id)
            self._items.append(milestone)
        logger.info(f"Repository initialized with {len(self._items)} milestones")

    def _fresh_id(self) -> str:
        existing = {m.id for m in self._items}
        new_id = self._id_factory()
        while new_id in existing:
            new_id = self._id_factory()
        return new_id

    def _index_of(self, milestone_id: str) -> int:
        for pos, milestone in enumerate(self._items):
            if milestone.id == milestone_id:
                return pos
        raise NotFoundError(milestone_id)

    def _persist(self) -> None:
        try:
            self._store.save([m.to_dict() for m in self._items])
        except (PersistenceError, OSError) as exc:
            error = exc if isinstance(exc, PersistenceError) else PersistenceError(str(exc))
            logger.error(f"Failed to persist milestones: {error}", exc_info=True)
            self.last_persistence_error = error
            return
        self.last_persistence_error = None

    # ========================================
    # 공개 API
    # ========================================
    def add(self, fields: Mapping[str, object]) -> Milestone:
        """
        새 마일스톤을 컬렉션 끝에 추가합니다.

        Raises:
            ValidationError: 필수 필드가 비어 있거나 날짜가 올바르지 않을 때
        """
        values = validate_milestone_fields(fields, config=self._validation)
        milestone = Milestone(id=self._fresh_id(), **values)
        self._items.append(milestone)
        logger.info(f"Added milestone {milestone.id} to timeline {milestone.timeline!r}")
        self._persist()
        return milestone

    def update(self, milestone_id: str, fields: Mapping[str, object]) -> Milestone:
        """
        기존 위치와 id를 유지한 채 마일스톤의 필드를 교체합니다.

        Raises:
            NotFoundError: 해당 id의 레코드가 없을 때
            ValidationError: 필수 필드가 비어 있거나 날짜가 올바르지 않을 때
        """
        pos = self._index_of(milestone_id)
        values = validate_milestone_fields(fields, config=self._validation)
        milestone = self._items[pos].with_fields(values)
        self._items[pos] = milestone
        logger.info(f"Updated milestone {milestone_id}")
        self._persist()
        return milestone

    def delete(self, milestone_id: str) -> None:
        """id에 해당하는 마일스톤을 삭제합니다. 없으면 아무 것도 하지 않습니다."""
        try:
            pos = self._index_of(milestone_id)
        except NotFoundError:
            logger.debug(f"Delete ignored, no milestone {milestone_id}")
            return
        del self._items[pos]
        logger.info(f"Deleted milestone {milestone_id}")
        self._persist()

    def get(self, milestone_id: str) -> Milestone:
        """
        Raises:
            NotFoundError: 해당 id의 레코드가 없을 때
        """
        return self._items[self._index_of(milestone_id)]

    def list(self) -> List[Milestone]:
        """저장 순서대로 컬렉션의 복사본을 반환합니다."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def submit_milestone(
    repository: MilestoneRepository,
    fields: Mapping[str, object],
    editing_id: Optional[str] = None,
) -> Milestone:
    """
    CRUD 입력 폼의 제출을 처리합니다.

    editing_id가 있으면 수정, 없으면 추가합니다.
    성공하면 저장된 레코드를 반환하고, 실패하면 도메인 예외를 그대로 전파하여
    폼이 입력값을 유지할 수 있게 합니다.
    """
    if editing_id:
        return repository.update(editing_id, fields)
    return repository.add(fields)
