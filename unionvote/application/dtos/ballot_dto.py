"""投票に関するDTO."""

from dataclasses import dataclass, field

from unionvote.domain.value_objects.actor import Actor


@dataclass
class CastBallotInputDto:
    """投票の入力DTO. 投票者はactorのユーザーID."""

    actor: Actor
    election_id: str
    candidate_ids: list[str]


@dataclass
class CastBallotOutputDto:
    """投票の出力DTO."""

    success: bool
    vote_counts: dict[str, int] = field(default_factory=dict)
    total_votes: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class HasVotedInputDto:
    """投票済み確認の入力DTO."""

    actor: Actor
    election_id: str


@dataclass
class HasVotedOutputDto:
    """投票済み確認の出力DTO."""

    success: bool
    has_voted: bool = False
    error_code: str | None = None
    error_message: str | None = None
