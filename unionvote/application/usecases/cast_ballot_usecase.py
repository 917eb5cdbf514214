"""投票のユースケース."""

from unionvote.application.dtos.ballot_dto import (
    CastBallotInputDto,
    CastBallotOutputDto,
    HasVotedInputDto,
    HasVotedOutputDto,
)
from unionvote.application.usecases.election_usecase_base import ElectionUseCaseBase
from unionvote.common.logging import get_logger


logger = get_logger(__name__)


class CastBallotUseCase(ElectionUseCaseBase):
    """投票を受け付けるユースケース.

    認証済みであれば誰でも投票できる（管理者権限は不要）。
    競合で再試行する場合も投票済み確認は読み込み直した台帳に対して行うため、
    同じ投票者の票が二重に数えられることはない。
    """

    async def cast_ballot(self, input_dto: CastBallotInputDto) -> CastBallotOutputDto:
        """投票する."""
        voter_id = input_dto.actor.user_id
        try:
            saved, vote_counts = await self._mutate(
                input_dto.election_id,
                lambda election: election.cast_ballot(
                    voter_id, input_dto.candidate_ids
                ),
            )
            logger.info(
                "ballot_cast",
                election_id=saved.id,
                voter_id=voter_id,
                selections=len(vote_counts),
            )
            return CastBallotOutputDto(
                success=True,
                vote_counts=vote_counts,
                total_votes=saved.total_votes,
            )
        except Exception as e:
            return self._failure(CastBallotOutputDto, e, "cast ballot")

    async def has_voted(self, input_dto: HasVotedInputDto) -> HasVotedOutputDto:
        """投票済みかどうかを返す."""
        try:
            election = await self._load(input_dto.election_id)
            return HasVotedOutputDto(
                success=True, has_voted=election.has_voted(input_dto.actor.user_id)
            )
        except Exception as e:
            return self._failure(HasVotedOutputDto, e, "check ballot status")
