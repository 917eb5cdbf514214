"""Process-local election repository."""

import asyncio
import copy

from datetime import UTC, datetime

from unionvote.domain.entities.election import Election
from unionvote.domain.exceptions import ConflictError, NotFoundError
from unionvote.domain.repositories.election_repository import ElectionRepository


class InMemoryElectionRepository(ElectionRepository):
    """メモリ上に選挙集約を保持するリポジトリ.

    保存・取得のたびにディープコピーを作るため、呼び出し側が
    読み込んだ集約を変更しても保存済みの状態には影響しない。
    各操作の先頭でイベントループに制御を返すので、
    並行リクエストの読み込みと書き込みが交互に実行される。
    """

    def __init__(self) -> None:
        self._elections: dict[str, Election] = {}

    async def get_by_id(self, entity_id: str) -> Election | None:
        await asyncio.sleep(0)
        stored = self._elections.get(entity_id)
        return copy.deepcopy(stored) if stored else None

    async def get_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[Election]:
        await asyncio.sleep(0)
        elections = sorted(
            self._elections.values(),
            key=lambda e: e.created_at or datetime.min.replace(tzinfo=UTC),
            reverse=True,
        )
        start = offset or 0
        end = start + limit if limit else None
        return [copy.deepcopy(e) for e in elections[start:end]]

    async def create(self, entity: Election) -> Election:
        await asyncio.sleep(0)
        if entity.id is None or entity.id in self._elections:
            raise ValueError(f"Cannot create election with ID {entity.id!r}")
        entity.version = 1
        self._elections[entity.id] = copy.deepcopy(entity)
        return entity

    async def save(self, entity: Election, expected_version: int) -> Election:
        await asyncio.sleep(0)
        # 比較と書き込みの間にawaitを挟まない
        stored = self._elections.get(entity.id) if entity.id else None
        if stored is None:
            raise NotFoundError("Election not found", {"election_id": entity.id})
        if stored.version != expected_version:
            raise ConflictError(
                "Election was modified concurrently; reload and retry",
                {
                    "election_id": entity.id,
                    "expected_version": expected_version,
                    "stored_version": stored.version,
                },
            )
        entity.version = expected_version + 1
        entity.updated_at = datetime.now(UTC)
        self._elections[entity.id] = copy.deepcopy(entity)
        return entity

    async def delete(self, entity_id: str) -> bool:
        await asyncio.sleep(0)
        return self._elections.pop(entity_id, None) is not None

    async def count(self) -> int:
        return len(self._elections)
