"""InMemoryElectionRepositoryのテスト."""

import pytest

from tests.fixtures.election_factories import make_election, make_profile
from unionvote.domain.exceptions import ConflictError, NotFoundError
from unionvote.infrastructure.persistence.in_memory_election_repository import (
    InMemoryElectionRepository,
)


class TestInMemoryElectionRepository:
    @pytest.fixture
    def repository(self):
        return InMemoryElectionRepository()

    @pytest.mark.asyncio
    async def test_loaded_aggregate_is_a_copy(self, repository):
        """読み込んだ集約を変更しても保存されるまで反映されないこと."""
        election = await repository.create(make_election())
        loaded = await repository.get_by_id(election.id)

        loaded.add_candidate(make_profile("S1"))

        reloaded = await repository.get_by_id(election.id)
        assert reloaded.candidates == []

    @pytest.mark.asyncio
    async def test_save_increments_version(self, repository):
        election = await repository.create(make_election())
        loaded = await repository.get_by_id(election.id)
        loaded.add_candidate(make_profile("S1"))

        saved = await repository.save(loaded, expected_version=1)

        assert saved.version == 2
        reloaded = await repository.get_by_id(election.id)
        assert [c.student_id for c in reloaded.candidates] == ["S1"]

    @pytest.mark.asyncio
    async def test_stale_save_conflicts(self, repository):
        election = await repository.create(make_election())
        first = await repository.get_by_id(election.id)
        second = await repository.get_by_id(election.id)

        first.add_candidate(make_profile("S1"))
        await repository.save(first, expected_version=1)
        second.add_candidate(make_profile("S2", "Bea"))

        with pytest.raises(ConflictError):
            await repository.save(second, expected_version=1)

        reloaded = await repository.get_by_id(election.id)
        assert [c.student_id for c in reloaded.candidates] == ["S1"]

    @pytest.mark.asyncio
    async def test_save_missing(self, repository):
        with pytest.raises(NotFoundError):
            await repository.save(make_election(), expected_version=1)

    @pytest.mark.asyncio
    async def test_delete(self, repository):
        election = await repository.create(make_election())

        assert await repository.delete(election.id) is True
        assert await repository.get_by_id(election.id) is None
        assert await repository.delete(election.id) is False
