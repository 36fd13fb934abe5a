"""Durable key-value stores for the milestone collection.

리포지토리는 이 모듈의 저장소 프로토콜에만 의존합니다.
컬렉션 전체가 JSON 배열로 직렬화되어 고정 키 아래에 저장됩니다.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Protocol, Union

from ..core.config import STORE_KEY
from ..domain.exceptions import DataLoadError, PersistenceError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class MilestoneStore(Protocol):
    """Protocol describing the load/save pair the repository relies on."""

    def load(self) -> List[Record]:  # pragma: no cover - interface definition
        ...

    def save(self, records: List[Record]) -> None:  # pragma: no cover - interface definition
        ...


def _decode(text: str, source: str) -> List[Record]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"저장된 데이터를 읽을 수 없습니다 ({source}): {exc}") from exc

    if not isinstance(payload, list):
        raise DataLoadError(f"저장된 데이터 형식이 올바르지 않습니다 ({source}): 배열이 아닙니다.")

    records = [item for item in payload if isinstance(item, dict)]
    if len(records) != len(payload):
        logger.warning(f"Skipped {len(payload) - len(records)} non-object entries in {source}")
    return records


class InMemoryStore:
    """Store implementation that keeps the serialized JSON text in a dict."""

    def __init__(self, key: str = STORE_KEY) -> None:
        self.key = key
        self._values: Dict[str, str] = {}

    def load(self) -> List[Record]:
        text = self._values.get(self.key)
        if text is None:
            return []
        return _decode(text, f"memory:{self.key}")

    def save(self, records: List[Record]) -> None:
        self._values[self.key] = json.dumps(records, ensure_ascii=False)


class JsonFileStore:
    """
    JSON 파일 기반 저장소.

    <directory>/<key>.json 파일 하나에 컬렉션 전체를 기록합니다.
    쓰기는 임시 파일에 먼저 기록한 뒤 교체하므로, 실패해도 기존 파일은 유지됩니다.

    Examples:
        >>> store = JsonFileStore("/tmp/planner")
        >>> store.save([{"id": "a1", "title": "졸업", ...}])
        >>> store.load()
        [{'id': 'a1', 'title': '졸업', ...}]
    """

    def __init__(self, directory: Union[str, Path], key: str = STORE_KEY) -> None:
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> List[Record]:
        """
        저장된 컬렉션을 읽습니다.

        Returns:
            레코드 딕셔너리 리스트. 파일이 없으면 빈 리스트.

        Raises:
            DataLoadError: 파일을 읽을 수 없거나 JSON 형식이 올바르지 않을 때
        """
        if not self.path.exists():
            logger.info(f"No stored milestones at {self.path}, starting empty")
            return []

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DataLoadError(f"저장된 데이터를 읽을 수 없습니다 ({self.path}): {exc}") from exc

        records = _decode(text, str(self.path))
        logger.info(f"Loaded {len(records)} milestones from {self.path}")
        return records

    def save(self, records: List[Record]) -> None:
        """
        컬렉션 전체를 기록합니다.

        Raises:
            PersistenceError: 디렉터리 생성 또는 파일 쓰기에 실패했을 때
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.key}.", suffix=".tmp", dir=self.directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(records, handle, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"데이터를 저장하지 못했습니다 ({self.path}): {exc}") from exc

        logger.debug(f"Saved {len(records)} milestones to {self.path}")
