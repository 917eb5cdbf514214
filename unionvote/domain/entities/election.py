"""Election entity."""

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from uuid import uuid4

from unionvote.domain.entities.base import BaseEntity
from unionvote.domain.entities.candidate import Candidate
from unionvote.domain.entities.candidate_roster import CandidateRoster
from unionvote.domain.exceptions import InvalidStateError, ValidationError
from unionvote.domain.services.tally_domain_service import TallyDomainService
from unionvote.domain.value_objects.ballot_ledger import BallotLedger
from unionvote.domain.value_objects.candidate_patch import CandidatePatch
from unionvote.domain.value_objects.candidate_profile import CandidateProfile
from unionvote.domain.value_objects.election_status import ElectionStatus


class Election(BaseEntity):
    """選挙集約のルートエンティティ.

    候補者名簿・投票台帳・集計を所有し、1つの整合性単位として扱う。
    操作の可否は``status``のみで判定し、``start_at``/``end_at``は
    表示用のメタデータとして扱う。
    """

    _tally = TallyDomainService()

    def __init__(
        self,
        title: str,
        start_at: datetime,
        end_at: datetime,
        description: str = "",
        eligible_voters: int = 0,
        status: ElectionStatus = ElectionStatus.PENDING,
        candidates: Iterable[Candidate] | None = None,
        voters: Iterable[str] | None = None,
        total_votes: int = 0,
        created_by: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        version: int = 0,
        id: str | None = None,
    ) -> None:
        """選挙エンティティを初期化する.

        永続化層からの復元にも使うため、ここでは検証しない。
        新規作成には``Election.create``を使うこと。

        Args:
            title: 選挙名
            start_at: 開始日時
            end_at: 終了日時
            description: 説明
            eligible_voters: 有権者数（投票率の算出用で上限としては扱わない）
            status: ライフサイクル状態
            candidates: 候補者
            voters: 投票済み投票者ID
            total_votes: 総得票数
            created_by: 作成者のユーザーID
            created_at: 作成日時
            updated_at: 更新日時
            version: 楽観的ロック用のバージョン
            id: 選挙ID
        """
        super().__init__(id)
        self.title = title
        self.description = description
        self.start_at = start_at
        self.end_at = end_at
        self.eligible_voters = eligible_voters
        self.status = status
        self.roster = CandidateRoster(candidates)
        self.ledger = BallotLedger(voters)
        self.total_votes = total_votes
        self.created_by = created_by
        self.created_at = created_at
        self.updated_at = updated_at
        self.version = version

    @classmethod
    def create(
        cls,
        title: str,
        start_at: datetime,
        end_at: datetime,
        description: str = "",
        eligible_voters: int = 0,
        candidates: Sequence[CandidateProfile] = (),
        created_by: str | None = None,
    ) -> "Election":
        """Pending状態の新しい選挙を作成する.

        Raises:
            ValidationError: 入力値が不正な場合
            DuplicateCandidateError: 初期候補者の学籍番号が重複する場合
        """
        start_at, end_at = _as_utc(start_at), _as_utc(end_at)
        _validate_details(title, start_at, end_at, eligible_voters)
        now = datetime.now(UTC)
        election = cls(
            id=str(uuid4()),
            title=title,
            description=description,
            start_at=start_at,
            end_at=end_at,
            eligible_voters=eligible_voters,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        if candidates:
            election.roster.add_all(candidates)
        return election

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_candidates(self, profiles: Sequence[CandidateProfile]) -> list[Candidate]:
        """候補者を一括登録する（全件成功か全件失敗）."""
        self._require_status(ElectionStatus.PENDING, "add candidates")
        if not profiles:
            raise ValidationError("At least one candidate is required")
        return self.roster.add_all(profiles)

    def add_candidate(self, profile: CandidateProfile) -> Candidate:
        return self.add_candidates([profile])[0]

    def update_candidate(self, candidate_id: str, patch: CandidatePatch) -> Candidate:
        self._require_status(ElectionStatus.PENDING, "update candidates")
        return self.roster.update(candidate_id, patch)

    def remove_candidate(self, candidate_id: str) -> Candidate:
        """候補者を削除する.

        Pending中は投票が存在しないため、得票数の調整は不要。
        """
        self._require_status(ElectionStatus.PENDING, "remove candidates")
        return self.roster.remove(candidate_id)

    @property
    def candidates(self) -> list[Candidate]:
        return list(self.roster)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def set_status(self, status: ElectionStatus | str) -> ElectionStatus:
        """ステータスを変更する.

        遷移元は制限せず、遷移先のラベルのみ検証する。

        Returns:
            変更前のステータス

        Raises:
            InvalidStatusError: 不明なステータスラベルの場合
        """
        if not isinstance(status, ElectionStatus):
            status = ElectionStatus.from_label(status)
        previous = self.status
        self.status = status
        return previous

    def edit_details(
        self,
        title: str | None = None,
        description: str | None = None,
        start_at: datetime | None = None,
        end_at: datetime | None = None,
        eligible_voters: int | None = None,
    ) -> None:
        """表示用の項目を更新する（どの状態でも可能）."""
        new_title = self.title if title is None else title
        new_start = self.start_at if start_at is None else _as_utc(start_at)
        new_end = self.end_at if end_at is None else _as_utc(end_at)
        new_eligible = self.eligible_voters if eligible_voters is None else eligible_voters
        _validate_details(new_title, new_start, new_end, new_eligible)

        self.title = new_title
        self.start_at = new_start
        self.end_at = new_end
        self.eligible_voters = new_eligible
        if description is not None:
            self.description = description

    # ------------------------------------------------------------------
    # Voting
    # ------------------------------------------------------------------

    def has_voted(self, voter_id: str) -> bool:
        return self.ledger.has_voted(voter_id)

    def cast_ballot(self, voter_id: str, candidate_ids: Sequence[str]) -> dict[str, int]:
        """投票を受け付ける.

        台帳への記録と得票数の加算はまとめて行われ、
        検証に失敗した場合はどちらも変更されない。

        Args:
            voter_id: 投票者ID
            candidate_ids: 選択した候補者ID（複数役職の同時選択を含む）

        Returns:
            選択された候補者ごとの更新後の得票数

        Raises:
            InvalidStateError: Ongoingでない場合
            AlreadyVotedError: 投票済みの場合
            ValidationError: 候補者が空、または同じ候補者が重複している場合
            NotFoundError: 存在しない候補者IDが含まれる場合
        """
        self._require_status(ElectionStatus.ONGOING, "cast a ballot")
        self.ledger.ensure_not_voted(voter_id)
        _validate_ballot(candidate_ids)

        self.total_votes += self._tally.apply_votes(self.roster, candidate_ids)
        self.ledger.record_voter(voter_id)

        return {
            candidate_id: self.roster.get(candidate_id).votes
            for candidate_id in candidate_ids
        }

    @property
    def ballots_cast(self) -> int:
        return len(self.ledger)

    @property
    def turnout_percentage(self) -> float:
        """投票率（%、小数第1位まで）. 有権者数が0の場合は0."""
        if self.eligible_voters <= 0:
            return 0.0
        return round(len(self.ledger) / self.eligible_voters * 100, 1)

    def is_tally_consistent(self) -> bool:
        return self.total_votes == self.roster.total_votes()

    def _require_status(self, required: ElectionStatus, operation: str) -> None:
        if self.status is not required:
            raise InvalidStateError(
                f"Cannot {operation} while election is {self.status.value}",
                {
                    "election_id": self.id,
                    "status": self.status.value,
                    "required": required.value,
                },
            )

    def __str__(self) -> str:
        return f"{self.title} [{self.status.value}]"


def _as_utc(value: datetime) -> datetime:
    """UTCに揃える. タイムゾーンなしの日時はUTCとして扱う."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _validate_details(
    title: str, start_at: datetime, end_at: datetime, eligible_voters: int
) -> None:
    if not title or not title.strip():
        raise ValidationError("Election title is required")
    if start_at >= end_at:
        raise ValidationError(
            "Election start must be before its end",
            {"start_at": start_at.isoformat(), "end_at": end_at.isoformat()},
        )
    if eligible_voters < 0:
        raise ValidationError(
            "Eligible voter count cannot be negative",
            {"eligible_voters": eligible_voters},
        )


def _validate_ballot(candidate_ids: Sequence[str]) -> None:
    if not candidate_ids:
        raise ValidationError("A ballot must select at least one candidate")
    if len(set(candidate_ids)) != len(candidate_ids):
        raise ValidationError(
            "A ballot cannot select the same candidate more than once",
            {"candidate_ids": list(candidate_ids)},
        )
