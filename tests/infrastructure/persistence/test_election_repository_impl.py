"""Tests for ElectionRepositoryImpl."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tests.fixtures.election_factories import make_election, make_profile
from unionvote.domain.entities.election import Election
from unionvote.domain.exceptions import ConflictError, NotFoundError
from unionvote.domain.value_objects.election_status import ElectionStatus
from unionvote.infrastructure.exceptions import DatabaseError
from unionvote.infrastructure.persistence.election_repository_impl import (
    ElectionRepositoryImpl,
)
from unionvote.infrastructure.persistence.sqlalchemy_models import ElectionModel


class TestElectionRepositoryImpl:
    """Test cases for ElectionRepositoryImpl."""

    @pytest.fixture
    def mock_session(self) -> MagicMock:
        """Create mock async session."""
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock()
        session.add = MagicMock()
        session.flush = AsyncMock()
        session.commit = AsyncMock()
        session.rollback = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session: MagicMock) -> ElectionRepositoryImpl:
        """Create election repository."""
        return ElectionRepositoryImpl(mock_session)

    @pytest.fixture
    def sample_entity(self) -> Election:
        """Sample ongoing election with one ballot."""
        election = make_election(
            candidates=[make_profile("S1", "Abel"), make_profile("S2", "Bea")],
            status=ElectionStatus.ONGOING,
        )
        election.cast_ballot("V1", [election.candidates[0].id])
        election.version = 3
        return election

    @pytest.fixture
    def sample_model(self) -> ElectionModel:
        """Sample ORM model."""
        return ElectionModel(
            id="e-1",
            title="Student Union 2026",
            description="",
            start_at=datetime(2026, 11, 1, tzinfo=UTC),
            end_at=datetime(2026, 11, 3, tzinfo=UTC),
            status="Ongoing",
            eligible_voters=10,
            total_votes=1,
            candidates=[
                {
                    "id": "c-1",
                    "student_id": "S1",
                    "name": "Abel",
                    "position": "President",
                    "platform": ["Wi-Fi"],
                    "votes": 1,
                }
            ],
            voters=["V1"],
            created_by="admin-1",
            created_at=datetime(2026, 10, 1, tzinfo=UTC),
            updated_at=datetime(2026, 10, 2, tzinfo=UTC),
            version=4,
        )

    def _result_with_model(self, model):
        mock_scalars = MagicMock()
        mock_scalars.first.return_value = model
        mock_scalars.all.return_value = [model] if model else []
        mock_result = MagicMock()
        mock_result.scalars.return_value = mock_scalars
        return mock_result

    @pytest.mark.asyncio
    async def test_get_by_id(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_model: ElectionModel,
    ) -> None:
        mock_session.execute.return_value = self._result_with_model(sample_model)

        result = await repository.get_by_id("e-1")

        assert result is not None
        assert result.id == "e-1"
        assert result.status is ElectionStatus.ONGOING
        assert result.version == 4
        assert result.has_voted("V1")
        assert result.candidates[0].platform == ["Wi-Fi"]
        assert result.candidates[0].department is None
        assert result.is_tally_consistent()

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.return_value = self._result_with_model(None)

        assert await repository.get_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_get_all(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_model: ElectionModel,
    ) -> None:
        mock_session.execute.return_value = self._result_with_model(sample_model)

        result = await repository.get_all()

        assert [e.id for e in result] == ["e-1"]

    @pytest.mark.asyncio
    async def test_get_by_id_database_error(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("boom")

        with pytest.raises(DatabaseError):
            await repository.get_by_id("e-1")

    @pytest.mark.asyncio
    async def test_create(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_entity: Election,
    ) -> None:
        result = await repository.create(sample_entity)

        model = mock_session.add.call_args[0][0]
        assert isinstance(model, ElectionModel)
        assert model.version == 1
        assert model.status == "Ongoing"
        assert model.voters == ["V1"]
        assert [c["student_id"] for c in model.candidates] == ["S1", "S2"]
        assert model.candidates[0]["votes"] == 1
        assert result.version == 1
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_success(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_entity: Election,
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_session.execute.return_value = mock_result

        saved = await repository.save(sample_entity, expected_version=3)

        assert saved.version == 4
        mock_session.execute.assert_awaited_once()
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_conflict(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_entity: Election,
    ) -> None:
        update_result = MagicMock()
        update_result.rowcount = 0
        version_result = MagicMock()
        version_result.scalar_one_or_none.return_value = 5
        mock_session.execute.side_effect = [update_result, version_result]

        with pytest.raises(ConflictError) as exc_info:
            await repository.save(sample_entity, expected_version=3)

        assert exc_info.value.details["stored_version"] == 5
        assert sample_entity.version == 3
        mock_session.rollback.assert_awaited()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_deleted_election(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_entity: Election,
    ) -> None:
        update_result = MagicMock()
        update_result.rowcount = 0
        version_result = MagicMock()
        version_result.scalar_one_or_none.return_value = None
        mock_session.execute.side_effect = [update_result, version_result]

        with pytest.raises(NotFoundError):
            await repository.save(sample_entity, expected_version=3)

    @pytest.mark.asyncio
    async def test_save_database_error(
        self,
        repository: ElectionRepositoryImpl,
        mock_session: MagicMock,
        sample_entity: Election,
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("boom")

        with pytest.raises(DatabaseError):
            await repository.save(sample_entity, expected_version=3)

        mock_session.rollback.assert_awaited()

    @pytest.mark.asyncio
    async def test_delete(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_session.execute.return_value = mock_result

        assert await repository.delete("e-1") is True

    @pytest.mark.asyncio
    async def test_count_database_error(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("boom")

        with pytest.raises(DatabaseError):
            await repository.count()
