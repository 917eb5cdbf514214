"""ManageCandidatesUseCaseのテスト."""

import pytest

from tests.fixtures.election_factories import make_election, make_profile
from unionvote.application.dtos.candidate_dto import (
    AddCandidatesInputDto,
    CandidateInputItem,
    RemoveCandidateInputDto,
    UpdateCandidateInputDto,
)
from unionvote.application.services.conflict_retry import ConflictRetryPolicy
from unionvote.application.usecases.manage_candidates_usecase import (
    ManageCandidatesUseCase,
)
from unionvote.domain.value_objects.actor import Actor
from unionvote.domain.value_objects.election_status import ElectionStatus
from unionvote.infrastructure.persistence.in_memory_election_repository import (
    InMemoryElectionRepository,
)


ADMIN = Actor(user_id="admin-1", is_admin=True)


def _item(student_id: str, name: str = "Abel", position: str = "President"):
    return CandidateInputItem(student_id=student_id, name=name, position=position)


@pytest.fixture
def repository():
    return InMemoryElectionRepository()


@pytest.fixture
def use_case(repository):
    return ManageCandidatesUseCase(
        election_repository=repository,
        retry_policy=ConflictRetryPolicy(attempts=2, min_wait=0, max_wait=0),
    )


class TestAddCandidates:
    """add_candidatesメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_add_then_duplicate(self, use_case, repository):
        """同じ学籍番号の候補者を追加するとDUPLICATE_CANDIDATEになること."""
        election = await repository.create(make_election())

        first = await use_case.add_candidates(
            AddCandidatesInputDto(ADMIN, election.id, [_item("S1", "Abel")])
        )
        second = await use_case.add_candidates(
            AddCandidatesInputDto(ADMIN, election.id, [_item("S1", "Cain")])
        )

        assert first.success is True
        assert first.candidates[0].votes == 0
        assert second.success is False
        assert second.error_code == "DUPLICATE_CANDIDATE"
        stored = await repository.get_by_id(election.id)
        assert [c.name for c in stored.candidates] == ["Abel"]

    @pytest.mark.asyncio
    async def test_batch_duplicate_rejects_whole_batch(self, use_case, repository):
        election = await repository.create(make_election())

        result = await use_case.add_candidates(
            AddCandidatesInputDto(ADMIN, election.id, [_item("S1"), _item("S1", "Bea")])
        )

        assert result.error_code == "DUPLICATE_CANDIDATE"
        stored = await repository.get_by_id(election.id)
        assert stored.candidates == []
        assert stored.version == 1

    @pytest.mark.parametrize("status", [ElectionStatus.ONGOING, ElectionStatus.COMPLETED])
    @pytest.mark.asyncio
    async def test_add_outside_pending(self, use_case, repository, status):
        election = await repository.create(
            make_election(candidates=[make_profile("S1")], status=status)
        )

        result = await use_case.add_candidates(
            AddCandidatesInputDto(ADMIN, election.id, [_item("S2", "Bea")])
        )

        assert result.error_code == "INVALID_STATE"
        stored = await repository.get_by_id(election.id)
        assert [c.student_id for c in stored.candidates] == ["S1"]

    @pytest.mark.asyncio
    async def test_add_missing_required_field(self, use_case, repository):
        election = await repository.create(make_election())

        result = await use_case.add_candidates(
            AddCandidatesInputDto(ADMIN, election.id, [_item("S1", name="")])
        )

        assert result.error_code == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_add_requires_admin(self, use_case, repository):
        election = await repository.create(make_election())

        result = await use_case.add_candidates(
            AddCandidatesInputDto(Actor(user_id="student-1"), election.id, [_item("S1")])
        )

        assert result.error_code == "PERMISSION_DENIED"


class TestUpdateAndRemoveCandidate:
    """update_candidate / remove_candidateメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_update_candidate(self, use_case, repository):
        election = await repository.create(
            make_election(candidates=[make_profile("S1", department="Law")])
        )
        candidate_id = election.candidates[0].id

        result = await use_case.update_candidate(
            UpdateCandidateInputDto(
                actor=ADMIN,
                election_id=election.id,
                candidate_id=candidate_id,
                bio="Third-year law student",
                platform="Free printing",
            )
        )

        assert result.success is True
        assert result.candidate.bio == "Third-year law student"
        assert result.candidate.platform == ["Free printing"]
        assert result.candidate.department == "Law"

    @pytest.mark.asyncio
    async def test_update_unknown_candidate(self, use_case, repository):
        election = await repository.create(make_election())

        result = await use_case.update_candidate(
            UpdateCandidateInputDto(
                actor=ADMIN, election_id=election.id, candidate_id="missing", name="X"
            )
        )

        assert result.error_code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_remove_candidate(self, use_case, repository):
        election = await repository.create(
            make_election(candidates=[make_profile("S1"), make_profile("S2", "Bea")])
        )

        result = await use_case.remove_candidate(
            RemoveCandidateInputDto(ADMIN, election.id, election.candidates[0].id)
        )

        assert result.success is True
        stored = await repository.get_by_id(election.id)
        assert [c.student_id for c in stored.candidates] == ["S2"]

    @pytest.mark.asyncio
    async def test_remove_candidate_while_ongoing(self, use_case, repository):
        election = await repository.create(
            make_election(candidates=[make_profile("S1")], status=ElectionStatus.ONGOING)
        )

        result = await use_case.remove_candidate(
            RemoveCandidateInputDto(ADMIN, election.id, election.candidates[0].id)
        )

        assert result.error_code == "INVALID_STATE"
