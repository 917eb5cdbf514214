"""選挙集約を扱うユースケースの共通処理."""

from collections.abc import Callable
from typing import Any, TypeVar

from unionvote.application.services.conflict_retry import (
    ConflictRetryPolicy,
    run_with_conflict_retry,
)
from unionvote.common.logging import get_logger
from unionvote.domain.entities.election import Election
from unionvote.domain.exceptions import ElectionDomainError, NotFoundError
from unionvote.domain.repositories.election_repository import ElectionRepository


logger = get_logger(__name__)

R = TypeVar("R")
D = TypeVar("D")

INTERNAL_ERROR = "INTERNAL_ERROR"


class ElectionUseCaseBase:
    """選挙集約の読み込み・変更・保存を担う基底クラス.

    変更系の操作は「読み込み→変更→バージョン付き保存」を1単位とし、
    ConflictError時は集約を読み込み直して再実行する。
    """

    def __init__(
        self,
        election_repository: ElectionRepository,
        retry_policy: ConflictRetryPolicy | None = None,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            election_repository: 選挙リポジトリインスタンス
            retry_policy: 競合時の再試行ポリシー
        """
        self.election_repository = election_repository
        self.retry_policy = retry_policy or ConflictRetryPolicy()

    async def _load(self, election_id: str) -> Election:
        election = await self.election_repository.get_by_id(election_id)
        if election is None:
            raise NotFoundError("Election not found", {"election_id": election_id})
        return election

    async def _mutate(
        self, election_id: str, mutation: Callable[[Election], R]
    ) -> tuple[Election, R]:
        """集約を変更して保存する.

        mutationはドメイン例外を送出してよい。その場合は保存されない。
        """

        async def attempt() -> tuple[Election, R]:
            election = await self._load(election_id)
            expected_version = election.version
            result = mutation(election)
            saved = await self.election_repository.save(election, expected_version)
            return saved, result

        return await run_with_conflict_retry(attempt, self.retry_policy)

    def _failure(
        self, dto_class: type[D], error: Exception, operation: str, **extra: Any
    ) -> D:
        """例外を失敗DTOに変換する."""
        if isinstance(error, ElectionDomainError):
            logger.info(
                "election_operation_rejected",
                operation=operation,
                code=error.code,
                reason=error.message,
            )
            return dto_class(  # type: ignore[call-arg]
                success=False,
                error_code=error.code,
                error_message=error.message,
                **extra,
            )
        logger.error(f"Failed to {operation}: {error}")
        return dto_class(  # type: ignore[call-arg]
            success=False,
            error_code=INTERNAL_ERROR,
            error_message=str(error),
            **extra,
        )
