"""候補者管理のCLIコマンド."""

from pathlib import Path

import click

from unionvote.application.dtos.candidate_dto import (
    AddCandidatesInputDto,
    RemoveCandidateInputDto,
    UpdateCandidateInputDto,
)
from unionvote.application.usecases.manage_candidates_usecase import (
    ManageCandidatesUseCase,
)
from unionvote.interfaces.cli.base import (
    CliContext,
    emit_result,
    run_async,
    use_case_scope,
    with_error_handling,
)
from unionvote.interfaces.cli.schemas import load_candidate_file


@click.command("add-candidates")
@click.argument("election_id")
@click.argument(
    "candidates_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.pass_obj
@with_error_handling
def add_candidates(ctx: CliContext, election_id: str, candidates_file: Path):
    """JSONファイルの候補者を一括登録する（Pending中、管理者のみ）."""
    candidates = load_candidate_file(candidates_file)

    async def _run():
        async with use_case_scope(ctx, ManageCandidatesUseCase) as use_case:
            return await use_case.add_candidates(
                AddCandidatesInputDto(
                    actor=ctx.actor, election_id=election_id, candidates=candidates
                )
            )

    emit_result(run_async(_run()))


@click.command("update-candidate")
@click.argument("election_id")
@click.argument("candidate_id")
@click.option("--student-id", default=None)
@click.option("--name", default=None)
@click.option("--position", default=None)
@click.option("--department", default=None)
@click.option("--year", default=None)
@click.option("--profile-image", default=None)
@click.option("--bio", default=None)
@click.option("--platform", multiple=True, help="公約（複数指定可）")
@click.pass_obj
@with_error_handling
def update_candidate(
    ctx: CliContext,
    election_id: str,
    candidate_id: str,
    student_id: str | None,
    name: str | None,
    position: str | None,
    department: str | None,
    year: str | None,
    profile_image: str | None,
    bio: str | None,
    platform: tuple[str, ...],
):
    """指定した項目だけ候補者を更新する（Pending中、管理者のみ）."""

    async def _run():
        async with use_case_scope(ctx, ManageCandidatesUseCase) as use_case:
            return await use_case.update_candidate(
                UpdateCandidateInputDto(
                    actor=ctx.actor,
                    election_id=election_id,
                    candidate_id=candidate_id,
                    student_id=student_id,
                    name=name,
                    position=position,
                    department=department,
                    year=year,
                    profile_image=profile_image,
                    bio=bio,
                    platform=list(platform) if platform else None,
                )
            )

    emit_result(run_async(_run()))


@click.command("remove-candidate")
@click.argument("election_id")
@click.argument("candidate_id")
@click.pass_obj
@with_error_handling
def remove_candidate(ctx: CliContext, election_id: str, candidate_id: str):
    """候補者を削除する（Pending中、管理者のみ）."""

    async def _run():
        async with use_case_scope(ctx, ManageCandidatesUseCase) as use_case:
            return await use_case.remove_candidate(
                RemoveCandidateInputDto(
                    actor=ctx.actor, election_id=election_id, candidate_id=candidate_id
                )
            )

    emit_result(run_async(_run()))
