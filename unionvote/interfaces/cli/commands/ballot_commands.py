"""投票のCLIコマンド."""

import click

from unionvote.application.dtos.ballot_dto import CastBallotInputDto, HasVotedInputDto
from unionvote.application.usecases.cast_ballot_usecase import CastBallotUseCase
from unionvote.interfaces.cli.base import (
    CliContext,
    emit_result,
    run_async,
    use_case_scope,
    with_error_handling,
)


@click.command("vote")
@click.argument("election_id")
@click.argument("candidate_ids", nargs=-1, required=True)
@click.pass_obj
@with_error_handling
def vote(ctx: CliContext, election_id: str, candidate_ids: tuple[str, ...]):
    """--actorのユーザーとして投票する（役職ごとに候補者を複数指定可）."""

    async def _run():
        async with use_case_scope(ctx, CastBallotUseCase) as use_case:
            return await use_case.cast_ballot(
                CastBallotInputDto(
                    actor=ctx.actor,
                    election_id=election_id,
                    candidate_ids=list(candidate_ids),
                )
            )

    emit_result(run_async(_run()))


@click.command("has-voted")
@click.argument("election_id")
@click.pass_obj
@with_error_handling
def has_voted(ctx: CliContext, election_id: str):
    """--actorのユーザーが投票済みか表示する."""

    async def _run():
        async with use_case_scope(ctx, CastBallotUseCase) as use_case:
            return await use_case.has_voted(
                HasVotedInputDto(actor=ctx.actor, election_id=election_id)
            )

    emit_result(run_async(_run()))
