"""Candidate roster owned by an election."""

from collections.abc import Iterable, Iterator, Sequence

from unionvote.domain.entities.candidate import Candidate
from unionvote.domain.exceptions import (
    DuplicateCandidateError,
    NotFoundError,
    ValidationError,
)
from unionvote.domain.value_objects.candidate_patch import CandidatePatch
from unionvote.domain.value_objects.candidate_profile import CandidateProfile


class CandidateRoster:
    """選挙の候補者名簿.

    登録順を保持し、学籍番号の一意性を保証する。
    状態（Pendingかどうか）の確認は選挙集約が行う。
    """

    def __init__(self, candidates: Iterable[Candidate] | None = None) -> None:
        self._candidates: list[Candidate] = list(candidates or [])

    def find(self, candidate_id: str) -> Candidate | None:
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    def get(self, candidate_id: str) -> Candidate:
        """候補者を取得する.

        Raises:
            NotFoundError: 候補者が存在しない場合
        """
        candidate = self.find(candidate_id)
        if candidate is None:
            raise NotFoundError(
                f"Candidate with ID {candidate_id} not found",
                {"candidate_id": candidate_id},
            )
        return candidate

    def find_by_student_id(self, student_id: str) -> Candidate | None:
        for candidate in self._candidates:
            if candidate.student_id == student_id:
                return candidate
        return None

    def add_all(self, profiles: Sequence[CandidateProfile]) -> list[Candidate]:
        """候補者を一括登録する.

        バッチ全体を検証してから追加するため、1件でも不正があれば
        名簿は変更されない。

        Args:
            profiles: 登録する候補者データ

        Returns:
            追加された候補者のリスト

        Raises:
            ValidationError: 必須項目が欠けている場合
            DuplicateCandidateError: 学籍番号がバッチ内または既存候補者と重複する場合
        """
        seen: set[str] = set()
        for profile in profiles:
            profile.validate()
            if profile.student_id in seen or self.find_by_student_id(
                profile.student_id
            ):
                raise DuplicateCandidateError(
                    f"Candidate with student ID {profile.student_id} "
                    "already exists in this election",
                    {"student_id": profile.student_id},
                )
            seen.add(profile.student_id)

        added = [Candidate.from_profile(profile) for profile in profiles]
        self._candidates.extend(added)
        return added

    def update(self, candidate_id: str, patch: CandidatePatch) -> Candidate:
        """候補者を部分更新する.

        Raises:
            NotFoundError: 候補者が存在しない場合
            ValidationError: 更新する項目がない、または必須項目を空にする場合
            DuplicateCandidateError: 変更後の学籍番号が他の候補者と重複する場合
        """
        candidate = self.get(candidate_id)
        if patch.is_empty():
            raise ValidationError(
                "No candidate fields to update", {"candidate_id": candidate_id}
            )
        patch.validate()
        if patch.student_id is not None and patch.student_id != candidate.student_id:
            other = self.find_by_student_id(patch.student_id)
            if other is not None and other.id != candidate.id:
                raise DuplicateCandidateError(
                    f"Candidate with student ID {patch.student_id} "
                    "already exists in this election",
                    {"student_id": patch.student_id},
                )
        candidate.apply_patch(patch)
        return candidate

    def remove(self, candidate_id: str) -> Candidate:
        """候補者を削除する.

        Raises:
            NotFoundError: 候補者が存在しない場合
        """
        candidate = self.get(candidate_id)
        self._candidates.remove(candidate)
        return candidate

    def total_votes(self) -> int:
        return sum(candidate.votes for candidate in self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)
