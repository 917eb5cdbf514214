"""候補者管理のユースケース."""

from unionvote.application.dtos.candidate_dto import (
    AddCandidatesInputDto,
    AddCandidatesOutputDto,
    CandidateOutputItem,
    RemoveCandidateInputDto,
    RemoveCandidateOutputDto,
    UpdateCandidateInputDto,
    UpdateCandidateOutputDto,
)
from unionvote.application.usecases.election_usecase_base import ElectionUseCaseBase
from unionvote.common.logging import get_logger


logger = get_logger(__name__)


class ManageCandidatesUseCase(ElectionUseCaseBase):
    """候補者名簿の変更ユースケース.

    いずれも管理者のみ、かつ選挙がPendingの間だけ実行できる。
    """

    async def add_candidates(
        self, input_dto: AddCandidatesInputDto
    ) -> AddCandidatesOutputDto:
        """候補者を一括登録する.

        1件でも重複や不備があればバッチ全体を拒否し、名簿は変更しない。
        """
        try:
            input_dto.actor.require_admin("add candidates")
            profiles = [c.to_profile() for c in input_dto.candidates]
            saved, added = await self._mutate(
                input_dto.election_id,
                lambda election: election.add_candidates(profiles),
            )
            logger.info(
                "candidates_added", election_id=saved.id, count=len(added)
            )
            return AddCandidatesOutputDto(
                success=True,
                candidates=[CandidateOutputItem.from_entity(c) for c in added],
            )
        except Exception as e:
            return self._failure(AddCandidatesOutputDto, e, "add candidates")

    async def update_candidate(
        self, input_dto: UpdateCandidateInputDto
    ) -> UpdateCandidateOutputDto:
        """指定された項目のみ候補者を更新する."""
        try:
            input_dto.actor.require_admin("update candidates")
            patch = input_dto.to_patch()
            saved, candidate = await self._mutate(
                input_dto.election_id,
                lambda election: election.update_candidate(
                    input_dto.candidate_id, patch
                ),
            )
            logger.info(
                "candidate_updated",
                election_id=saved.id,
                candidate_id=candidate.id,
                fields=sorted(patch.provided_fields()),
            )
            return UpdateCandidateOutputDto(
                success=True, candidate=CandidateOutputItem.from_entity(candidate)
            )
        except Exception as e:
            return self._failure(UpdateCandidateOutputDto, e, "update candidate")

    async def remove_candidate(
        self, input_dto: RemoveCandidateInputDto
    ) -> RemoveCandidateOutputDto:
        """候補者を削除する."""
        try:
            input_dto.actor.require_admin("remove candidates")
            saved, removed = await self._mutate(
                input_dto.election_id,
                lambda election: election.remove_candidate(input_dto.candidate_id),
            )
            logger.info(
                "candidate_removed", election_id=saved.id, candidate_id=removed.id
            )
            return RemoveCandidateOutputDto(success=True)
        except Exception as e:
            return self._failure(RemoveCandidateOutputDto, e, "remove candidate")
