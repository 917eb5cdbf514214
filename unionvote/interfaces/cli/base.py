"""CLIコマンドの共通処理."""

import asyncio
import dataclasses
import functools
import json

from collections.abc import AsyncIterator, Callable, Coroutine
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import click

from unionvote.application.services.conflict_retry import ConflictRetryPolicy
from unionvote.common.logging import get_logger
from unionvote.domain.value_objects.actor import Actor
from unionvote.infrastructure.config.async_database import AsyncDatabase
from unionvote.infrastructure.config.settings import get_settings
from unionvote.infrastructure.persistence.election_repository_impl import (
    ElectionRepositoryImpl,
)
from unionvote.interfaces.error_status import status_code_for


logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclasses.dataclass
class CliContext:
    """グループオプションから組み立てる実行コンテキスト."""

    database: AsyncDatabase
    actor: Actor
    retry_policy: ConflictRetryPolicy


def with_error_handling(f: Callable[..., Any]) -> Callable[..., Any]:
    """想定外の例外をエラーメッセージに変換して終了コード1で終わる."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except click.ClickException:
            raise
        except click.exceptions.Exit:
            raise
        except Exception as e:
            logger.error(f"Command failed: {e}")
            click.echo(f"[500] INTERNAL_ERROR: {e}", err=True)
            raise click.exceptions.Exit(1) from e

    return wrapper


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coro)


@asynccontextmanager
async def use_case_scope(
    ctx: CliContext, use_case_class: Callable[..., U]
) -> AsyncIterator[U]:
    """セッションを開き、リポジトリを注入したユースケースを渡す."""
    try:
        async with ctx.database.get_session() as session:
            yield use_case_class(
                election_repository=ElectionRepositoryImpl(session),
                retry_policy=ctx.retry_policy,
            )
    finally:
        await ctx.database.dispose()


def build_context(database_url: str | None, actor_id: str, admin: bool) -> CliContext:
    settings = get_settings()
    return CliContext(
        database=AsyncDatabase(database_url),
        actor=Actor(user_id=actor_id, is_admin=admin),
        retry_policy=ConflictRetryPolicy.from_settings(settings),
    )


def emit_result(dto: Any) -> None:
    """結果DTOを出力する. 失敗時は終了コード1で終わる."""
    if not dto.success:
        status = status_code_for(dto.error_code)
        click.echo(f"[{status}] {dto.error_code}: {dto.error_message}", err=True)
        raise click.exceptions.Exit(1)
    payload = {
        key: value
        for key, value in dataclasses.asdict(dto).items()
        if key not in ("success", "error_code", "error_message")
    }
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
