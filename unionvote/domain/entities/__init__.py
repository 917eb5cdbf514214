"""Domain entities."""

from unionvote.domain.entities.candidate import Candidate
from unionvote.domain.entities.candidate_roster import CandidateRoster
from unionvote.domain.entities.election import Election


__all__ = ["Candidate", "CandidateRoster", "Election"]
