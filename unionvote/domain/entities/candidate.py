"""Candidate entity."""

from uuid import uuid4

from unionvote.domain.entities.base import BaseEntity
from unionvote.domain.value_objects.candidate_patch import CandidatePatch
from unionvote.domain.value_objects.candidate_profile import (
    CandidateProfile,
    normalize_platform,
)


class Candidate(BaseEntity):
    """選挙に立候補した学生を表すエンティティ.

    1つの選挙にのみ所属し、選挙の外から参照されることはない。
    IDは選挙内でのみ一意。
    """

    def __init__(
        self,
        student_id: str,
        name: str,
        position: str,
        department: str | None = None,
        year: str | None = None,
        profile_image: str | None = None,
        bio: str | None = None,
        platform: list[str] | None = None,
        votes: int = 0,
        id: str | None = None,
    ) -> None:
        """候補者エンティティを初期化する.

        Args:
            student_id: 学籍番号（選挙内で一意）
            name: 氏名
            position: 立候補する役職
            department: 学部・学科
            year: 学年
            profile_image: プロフィール画像のURL
            bio: 自己紹介
            platform: 公約のリスト
            votes: 得票数
            id: 候補者ID
        """
        super().__init__(id)
        self.student_id = student_id
        self.name = name
        self.position = position
        self.department = department
        self.year = year
        self.profile_image = profile_image
        self.bio = bio
        self.platform = list(platform or [])
        self.votes = votes

    @classmethod
    def from_profile(cls, profile: CandidateProfile) -> "Candidate":
        """登録データから得票数0の候補者を生成する."""
        return cls(
            id=uuid4().hex,
            student_id=profile.student_id,
            name=profile.name,
            position=profile.position,
            department=profile.department,
            year=profile.year,
            profile_image=profile.profile_image,
            bio=profile.bio,
            platform=normalize_platform(profile.platform),
        )

    def apply_patch(self, patch: CandidatePatch) -> None:
        """指定されたフィールドのみを更新する."""
        for field_name, value in patch.provided_fields().items():
            if field_name == "platform":
                value = normalize_platform(value)
            setattr(self, field_name, value)

    def increment_votes(self) -> None:
        self.votes += 1

    def __str__(self) -> str:
        return f"{self.name} ({self.student_id}) - {self.position}"
