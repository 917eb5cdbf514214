"""選挙管理に関するDTO.

このモジュールは選挙の作成・一覧・状態変更・開票結果に関するDTOを定義します。
"""

from dataclasses import dataclass, field
from datetime import datetime

from unionvote.application.dtos.candidate_dto import (
    CandidateInputItem,
    CandidateOutputItem,
)
from unionvote.domain.entities.election import Election
from unionvote.domain.services.election_result_service import ElectionResults
from unionvote.domain.value_objects.actor import Actor


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class CreateElectionInputDto:
    """選挙作成の入力DTO."""

    actor: Actor
    title: str
    start_at: datetime
    end_at: datetime
    description: str = ""
    eligible_voters: int = 0
    candidates: list[CandidateInputItem] = field(default_factory=list)


@dataclass
class GetElectionInputDto:
    """選挙取得の入力DTO."""

    election_id: str


@dataclass
class EditElectionInputDto:
    """選挙の表示項目更新の入力DTO. Noneの項目は変更しない."""

    actor: Actor
    election_id: str
    title: str | None = None
    description: str | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    eligible_voters: int | None = None


@dataclass
class SetElectionStatusInputDto:
    """ステータス変更の入力DTO."""

    actor: Actor
    election_id: str
    status: str


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class ElectionOutputItem:
    """選挙の出力アイテム."""

    id: str | None
    title: str
    description: str
    start_at: datetime
    end_at: datetime
    status: str
    eligible_voters: int
    total_votes: int
    ballots_cast: int
    turnout_percentage: float
    candidates: list[CandidateOutputItem]
    created_by: str | None
    created_at: datetime | None
    version: int

    @classmethod
    def from_entity(cls, entity: Election) -> "ElectionOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            start_at=entity.start_at,
            end_at=entity.end_at,
            status=entity.status.value,
            eligible_voters=entity.eligible_voters,
            total_votes=entity.total_votes,
            ballots_cast=entity.ballots_cast,
            turnout_percentage=entity.turnout_percentage,
            candidates=[CandidateOutputItem.from_entity(c) for c in entity.roster],
            created_by=entity.created_by,
            created_at=entity.created_at,
            version=entity.version,
        )


@dataclass
class ElectionOutputDto:
    """選挙を1件返す操作の出力DTO."""

    success: bool
    election: ElectionOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ListElectionsOutputDto:
    """選挙一覧取得の出力DTO."""

    elections: list[ElectionOutputItem]
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class SetElectionStatusOutputDto:
    """ステータス変更の出力DTO."""

    success: bool
    previous_status: str | None = None
    status: str | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ElectionResultsOutputDto:
    """開票結果の出力DTO."""

    success: bool
    results: ElectionResults | None = None
    error_code: str | None = None
    error_message: str | None = None
