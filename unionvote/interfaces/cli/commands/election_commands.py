"""選挙管理のCLIコマンド."""

from datetime import datetime
from pathlib import Path

import click

from unionvote.application.dtos.election_dto import (
    CreateElectionInputDto,
    EditElectionInputDto,
    GetElectionInputDto,
    SetElectionStatusInputDto,
)
from unionvote.application.usecases.manage_elections_usecase import (
    ManageElectionsUseCase,
)
from unionvote.interfaces.cli.base import (
    CliContext,
    emit_result,
    run_async,
    use_case_scope,
    with_error_handling,
)
from unionvote.interfaces.cli.schemas import load_candidate_file


DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]


@click.command("init-db")
@click.pass_obj
@with_error_handling
def init_db(ctx: CliContext):
    """テーブルを作成する（開発用）."""

    async def _run():
        try:
            await ctx.database.create_schema()
        finally:
            await ctx.database.dispose()

    run_async(_run())
    click.echo("Database schema created.")


@click.command("create")
@click.option("--title", required=True, help="選挙名")
@click.option("--description", default="", help="説明")
@click.option("--start", "start_at", required=True, type=click.DateTime(DATETIME_FORMATS))
@click.option("--end", "end_at", required=True, type=click.DateTime(DATETIME_FORMATS))
@click.option("--eligible-voters", default=0, type=int, help="有権者数")
@click.option(
    "--candidates",
    "candidates_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="初期候補者のJSONファイル",
)
@click.pass_obj
@with_error_handling
def create(
    ctx: CliContext,
    title: str,
    description: str,
    start_at: datetime,
    end_at: datetime,
    eligible_voters: int,
    candidates_file: Path | None,
):
    """選挙を作成する（管理者のみ）."""
    candidates = load_candidate_file(candidates_file) if candidates_file else []

    async def _run():
        async with use_case_scope(ctx, ManageElectionsUseCase) as use_case:
            return await use_case.create_election(
                CreateElectionInputDto(
                    actor=ctx.actor,
                    title=title,
                    description=description,
                    start_at=start_at,
                    end_at=end_at,
                    eligible_voters=eligible_voters,
                    candidates=candidates,
                )
            )

    emit_result(run_async(_run()))


@click.command("list")
@click.pass_obj
@with_error_handling
def list_elections(ctx: CliContext):
    """選挙一覧を新しい順に表示する."""

    async def _run():
        async with use_case_scope(ctx, ManageElectionsUseCase) as use_case:
            return await use_case.list_elections()

    emit_result(run_async(_run()))


@click.command("show")
@click.argument("election_id")
@click.pass_obj
@with_error_handling
def show(ctx: CliContext, election_id: str):
    """選挙の詳細を表示する."""

    async def _run():
        async with use_case_scope(ctx, ManageElectionsUseCase) as use_case:
            return await use_case.get_election(GetElectionInputDto(election_id))

    emit_result(run_async(_run()))


@click.command("results")
@click.argument("election_id")
@click.pass_obj
@with_error_handling
def results(ctx: CliContext, election_id: str):
    """役職ごとの開票結果を表示する."""

    async def _run():
        async with use_case_scope(ctx, ManageElectionsUseCase) as use_case:
            return await use_case.get_results(GetElectionInputDto(election_id))

    emit_result(run_async(_run()))


@click.command("edit")
@click.argument("election_id")
@click.option("--title", default=None)
@click.option("--description", default=None)
@click.option("--start", "start_at", default=None, type=click.DateTime(DATETIME_FORMATS))
@click.option("--end", "end_at", default=None, type=click.DateTime(DATETIME_FORMATS))
@click.option("--eligible-voters", default=None, type=int)
@click.pass_obj
@with_error_handling
def edit(
    ctx: CliContext,
    election_id: str,
    title: str | None,
    description: str | None,
    start_at: datetime | None,
    end_at: datetime | None,
    eligible_voters: int | None,
):
    """選挙の表示項目を更新する（管理者のみ）."""

    async def _run():
        async with use_case_scope(ctx, ManageElectionsUseCase) as use_case:
            return await use_case.edit_election(
                EditElectionInputDto(
                    actor=ctx.actor,
                    election_id=election_id,
                    title=title,
                    description=description,
                    start_at=start_at,
                    end_at=end_at,
                    eligible_voters=eligible_voters,
                )
            )

    emit_result(run_async(_run()))


@click.command("set-status")
@click.argument("election_id")
@click.argument("status")
@click.pass_obj
@with_error_handling
def set_status(ctx: CliContext, election_id: str, status: str):
    """ステータスを変更する（Pending / Ongoing / Completed）."""

    async def _run():
        async with use_case_scope(ctx, ManageElectionsUseCase) as use_case:
            return await use_case.set_status(
                SetElectionStatusInputDto(
                    actor=ctx.actor, election_id=election_id, status=status
                )
            )

    emit_result(run_async(_run()))
