"""選挙管理のユースケース."""

from unionvote.application.dtos.election_dto import (
    CreateElectionInputDto,
    EditElectionInputDto,
    ElectionOutputDto,
    ElectionOutputItem,
    ElectionResultsOutputDto,
    GetElectionInputDto,
    ListElectionsOutputDto,
    SetElectionStatusInputDto,
    SetElectionStatusOutputDto,
)
from unionvote.application.services.conflict_retry import ConflictRetryPolicy
from unionvote.application.usecases.election_usecase_base import ElectionUseCaseBase
from unionvote.common.logging import get_logger
from unionvote.domain.entities.election import Election
from unionvote.domain.repositories.election_repository import ElectionRepository
from unionvote.domain.services.election_result_service import ElectionResultService


logger = get_logger(__name__)


class ManageElectionsUseCase(ElectionUseCaseBase):
    """選挙の作成・参照・状態変更のユースケース."""

    def __init__(
        self,
        election_repository: ElectionRepository,
        retry_policy: ConflictRetryPolicy | None = None,
        result_service: ElectionResultService | None = None,
    ) -> None:
        super().__init__(election_repository, retry_policy)
        self.result_service = result_service or ElectionResultService()

    async def create_election(
        self, input_dto: CreateElectionInputDto
    ) -> ElectionOutputDto:
        """選挙をPending状態で作成する（管理者のみ）."""
        try:
            input_dto.actor.require_admin("create elections")
            election = Election.create(
                title=input_dto.title,
                description=input_dto.description,
                start_at=input_dto.start_at,
                end_at=input_dto.end_at,
                eligible_voters=input_dto.eligible_voters,
                candidates=[c.to_profile() for c in input_dto.candidates],
                created_by=input_dto.actor.user_id,
            )
            created = await self.election_repository.create(election)
            logger.info(
                "election_created",
                election_id=created.id,
                candidates=len(created.roster),
            )
            return ElectionOutputDto(
                success=True, election=ElectionOutputItem.from_entity(created)
            )
        except Exception as e:
            return self._failure(ElectionOutputDto, e, "create election")

    async def list_elections(self) -> ListElectionsOutputDto:
        """全選挙を新しい順に取得する."""
        try:
            elections = await self.election_repository.get_all()
            return ListElectionsOutputDto(
                elections=[ElectionOutputItem.from_entity(e) for e in elections]
            )
        except Exception as e:
            return self._failure(
                ListElectionsOutputDto, e, "list elections", elections=[]
            )

    async def get_election(self, input_dto: GetElectionInputDto) -> ElectionOutputDto:
        """選挙を1件取得する."""
        try:
            election = await self._load(input_dto.election_id)
            return ElectionOutputDto(
                success=True, election=ElectionOutputItem.from_entity(election)
            )
        except Exception as e:
            return self._failure(ElectionOutputDto, e, "get election")

    async def edit_election(self, input_dto: EditElectionInputDto) -> ElectionOutputDto:
        """選挙名・説明・日時・有権者数を更新する（管理者のみ）."""
        try:
            input_dto.actor.require_admin("edit elections")
            saved, _ = await self._mutate(
                input_dto.election_id,
                lambda election: election.edit_details(
                    title=input_dto.title,
                    description=input_dto.description,
                    start_at=input_dto.start_at,
                    end_at=input_dto.end_at,
                    eligible_voters=input_dto.eligible_voters,
                ),
            )
            return ElectionOutputDto(
                success=True, election=ElectionOutputItem.from_entity(saved)
            )
        except Exception as e:
            return self._failure(ElectionOutputDto, e, "edit election")

    async def set_status(
        self, input_dto: SetElectionStatusInputDto
    ) -> SetElectionStatusOutputDto:
        """ステータスを変更する（管理者のみ）.

        終了日時を過ぎても自動では終了しないため、
        外部のスケジューラもこの操作を呼び出す。
        """
        try:
            input_dto.actor.require_admin("change election status")
            saved, previous = await self._mutate(
                input_dto.election_id,
                lambda election: election.set_status(input_dto.status),
            )
            logger.info(
                "election_status_changed",
                election_id=saved.id,
                previous=previous.value,
                status=saved.status.value,
            )
            return SetElectionStatusOutputDto(
                success=True,
                previous_status=previous.value,
                status=saved.status.value,
            )
        except Exception as e:
            return self._failure(
                SetElectionStatusOutputDto, e, "change election status"
            )

    async def get_results(
        self, input_dto: GetElectionInputDto
    ) -> ElectionResultsOutputDto:
        """役職ごとの開票結果を取得する."""
        try:
            election = await self._load(input_dto.election_id)
            return ElectionResultsOutputDto(
                success=True, results=self.result_service.build_results(election)
            )
        except Exception as e:
            return self._failure(ElectionResultsOutputDto, e, "get results")
