"""CandidateRosterのテスト."""

import pytest

from tests.fixtures.election_factories import make_profile
from unionvote.domain.entities.candidate_roster import CandidateRoster
from unionvote.domain.exceptions import (
    DuplicateCandidateError,
    NotFoundError,
    ValidationError,
)
from unionvote.domain.value_objects.candidate_patch import CandidatePatch


class TestCandidateRoster:
    """候補者名簿のテスト."""

    def test_add_all_keeps_order_and_zero_votes(self) -> None:
        roster = CandidateRoster()

        added = roster.add_all(
            [make_profile("S2", "Bea"), make_profile("S1", "Abel", platform=("Wi-Fi",))]
        )

        assert [c.student_id for c in roster] == ["S2", "S1"]
        assert all(c.votes == 0 for c in added)
        assert added[1].platform == ["Wi-Fi"]
        assert len({c.id for c in added}) == 2

    def test_add_all_rejects_existing_student_id(self) -> None:
        roster = CandidateRoster()
        roster.add_all([make_profile("S1")])

        with pytest.raises(DuplicateCandidateError):
            roster.add_all([make_profile("S2", "Bea"), make_profile("S1", "Cain")])

        assert [c.student_id for c in roster] == ["S1"]

    def test_get_unknown(self) -> None:
        with pytest.raises(NotFoundError):
            CandidateRoster().get("missing")

    def test_find_by_student_id(self) -> None:
        roster = CandidateRoster()
        roster.add_all([make_profile("S1")])

        assert roster.find_by_student_id("S1") is not None
        assert roster.find_by_student_id("S9") is None

    def test_update_without_fields_is_rejected(self) -> None:
        """更新項目が1つもない場合はValidationError."""
        roster = CandidateRoster()
        (candidate,) = roster.add_all([make_profile("S1")])

        with pytest.raises(ValidationError):
            roster.update(candidate.id, CandidatePatch())

        assert roster.get(candidate.id).name == "Abel"
