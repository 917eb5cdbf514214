"""Domain value objects."""

from unionvote.domain.value_objects.actor import Actor
from unionvote.domain.value_objects.ballot_ledger import BallotLedger
from unionvote.domain.value_objects.candidate_patch import CandidatePatch
from unionvote.domain.value_objects.candidate_profile import CandidateProfile
from unionvote.domain.value_objects.election_status import ElectionStatus


__all__ = [
    "Actor",
    "BallotLedger",
    "CandidatePatch",
    "CandidateProfile",
    "ElectionStatus",
]
