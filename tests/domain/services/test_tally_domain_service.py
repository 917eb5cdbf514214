"""TallyDomainServiceのテスト."""

import pytest

from tests.fixtures.election_factories import make_profile
from unionvote.domain.entities.candidate_roster import CandidateRoster
from unionvote.domain.exceptions import NotFoundError
from unionvote.domain.services.tally_domain_service import TallyDomainService


class TestTallyDomainService:
    """集計サービスのテスト."""

    @pytest.fixture
    def roster(self) -> CandidateRoster:
        roster = CandidateRoster()
        roster.add_all([make_profile("S1"), make_profile("S2", "Bea")])
        return roster

    def test_apply_votes(self, roster: CandidateRoster) -> None:
        ids = [c.id for c in roster]

        added = TallyDomainService().apply_votes(roster, ids)

        assert added == 2
        assert [c.votes for c in roster] == [1, 1]

    def test_apply_votes_validates_all_ids_first(self, roster: CandidateRoster) -> None:
        first_id = next(iter(roster)).id

        with pytest.raises(NotFoundError):
            TallyDomainService().apply_votes(roster, [first_id, "missing"])

        assert [c.votes for c in roster] == [0, 0]
