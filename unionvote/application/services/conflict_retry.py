"""楽観的ロック競合時の再試行."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from unionvote.common.logging import get_logger
from unionvote.domain.exceptions import ConflictError


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ConflictRetryPolicy:
    """再試行の回数と待機時間（秒）."""

    attempts: int = 5
    min_wait: float = 0.01
    max_wait: float = 0.5

    @classmethod
    def from_settings(cls, settings) -> "ConflictRetryPolicy":
        return cls(
            attempts=settings.conflict_retry_attempts,
            min_wait=settings.conflict_retry_min_wait,
            max_wait=settings.conflict_retry_max_wait,
        )


def _log_conflict(retry_state: RetryCallState) -> None:
    logger.warning(
        "election_save_conflict",
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
    )


async def run_with_conflict_retry(
    operation: Callable[[], Awaitable[T]],
    policy: ConflictRetryPolicy | None = None,
) -> T:
    """読み込み→変更→保存の処理をConflictError時に再実行する.

    operationは毎回集約を読み込み直すこと。再試行回数を使い切った場合は
    最後のConflictErrorをそのまま送出する。
    """
    policy = policy or ConflictRetryPolicy()
    retrying = AsyncRetrying(
        stop=stop_after_attempt(policy.attempts),
        wait=wait_exponential(
            multiplier=policy.min_wait, min=policy.min_wait, max=policy.max_wait
        ),
        retry=retry_if_exception_type(ConflictError),
        before_sleep=_log_conflict,
        reraise=True,
    )
    return await retrying(operation)
