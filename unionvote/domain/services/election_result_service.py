"""開票結果ドメインサービス."""

from dataclasses import dataclass, field

from unionvote.domain.entities.election import Election


@dataclass(frozen=True)
class CandidateResult:
    """候補者ごとの得票."""

    candidate_id: str
    student_id: str
    name: str
    votes: int
    share_percentage: float


@dataclass(frozen=True)
class PositionResult:
    """役職ごとの開票結果."""

    position: str
    total_votes: int
    candidates: list[CandidateResult] = field(default_factory=list)
    leaders: list[CandidateResult] = field(default_factory=list)


@dataclass(frozen=True)
class ElectionResults:
    """選挙全体の開票結果."""

    election_id: str | None
    status: str
    total_votes: int
    ballots_cast: int
    eligible_voters: int
    turnout_percentage: float
    positions: list[PositionResult] = field(default_factory=list)


class ElectionResultService:
    """候補者を役職ごとにまとめ、得票順に並べるドメインサービス.

    同数の場合は名簿順を維持し、最多得票者が複数いれば全員をleadersに含める。
    得票が0の役職ではleadersは空になる。
    """

    def build_results(self, election: Election) -> ElectionResults:
        groups: dict[str, list] = {}
        for candidate in election.roster:
            groups.setdefault(candidate.position, []).append(candidate)

        positions = []
        for position, candidates in groups.items():
            position_total = sum(c.votes for c in candidates)
            ordered = sorted(candidates, key=lambda c: -c.votes)
            results = [
                CandidateResult(
                    candidate_id=c.id,
                    student_id=c.student_id,
                    name=c.name,
                    votes=c.votes,
                    share_percentage=(
                        round(c.votes / position_total * 100, 1)
                        if position_total
                        else 0.0
                    ),
                )
                for c in ordered
            ]
            top = results[0].votes if results else 0
            leaders = [r for r in results if top > 0 and r.votes == top]
            positions.append(
                PositionResult(
                    position=position,
                    total_votes=position_total,
                    candidates=results,
                    leaders=leaders,
                )
            )

        return ElectionResults(
            election_id=election.id,
            status=election.status.value,
            total_votes=election.total_votes,
            ballots_cast=election.ballots_cast,
            eligible_voters=election.eligible_voters,
            turnout_percentage=election.turnout_percentage,
            positions=positions,
        )
