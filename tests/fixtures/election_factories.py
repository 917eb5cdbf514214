"""テスト用の選挙ファクトリ."""

from collections.abc import Sequence
from datetime import UTC, datetime

from unionvote.domain.entities.election import Election
from unionvote.domain.value_objects.candidate_profile import CandidateProfile
from unionvote.domain.value_objects.election_status import ElectionStatus


START_AT = datetime(2026, 11, 1, 9, 0, tzinfo=UTC)
END_AT = datetime(2026, 11, 3, 17, 0, tzinfo=UTC)


def make_profile(
    student_id: str = "S1",
    name: str = "Abel",
    position: str = "President",
    **kwargs,
) -> CandidateProfile:
    return CandidateProfile(
        student_id=student_id, name=name, position=position, **kwargs
    )


def make_election(
    candidates: Sequence[CandidateProfile] = (),
    status: ElectionStatus = ElectionStatus.PENDING,
    eligible_voters: int = 100,
    title: str = "Student Union 2026",
) -> Election:
    election = Election.create(
        title=title,
        start_at=START_AT,
        end_at=END_AT,
        eligible_voters=eligible_voters,
        candidates=candidates,
        created_by="admin-1",
    )
    election.set_status(status)
    return election
