"""ElectionResultServiceのテスト."""

from tests.fixtures.election_factories import make_election, make_profile
from unionvote.domain.services.election_result_service import ElectionResultService
from unionvote.domain.value_objects.election_status import ElectionStatus


class TestElectionResultService:
    """開票結果のテスト."""

    def test_build_results_groups_by_position(self) -> None:
        election = make_election(
            candidates=[
                make_profile("S1", "Abel", "President"),
                make_profile("S2", "Bea", "President"),
                make_profile("S3", "Chala", "Secretary"),
                make_profile("S4", "Dawit", "Secretary"),
            ],
            status=ElectionStatus.ONGOING,
            eligible_voters=4,
        )
        abel, bea, chala, dawit = (c.id for c in election.candidates)
        election.cast_ballot("V1", [bea, chala])
        election.cast_ballot("V2", [bea, dawit])
        election.cast_ballot("V3", [abel])

        results = ElectionResultService().build_results(election)

        assert results.total_votes == 5
        assert results.ballots_cast == 3
        assert results.turnout_percentage == 75.0
        assert [p.position for p in results.positions] == ["President", "Secretary"]

        president = results.positions[0]
        assert [c.name for c in president.candidates] == ["Bea", "Abel"]
        assert president.candidates[0].share_percentage == 66.7
        assert [c.name for c in president.leaders] == ["Bea"]

        secretary = results.positions[1]
        assert [c.name for c in secretary.candidates] == ["Chala", "Dawit"]
        assert [c.name for c in secretary.leaders] == ["Chala", "Dawit"]

    def test_build_results_without_votes(self) -> None:
        election = make_election(candidates=[make_profile("S1")])

        results = ElectionResultService().build_results(election)

        assert results.positions[0].leaders == []
        assert results.positions[0].candidates[0].share_percentage == 0.0
