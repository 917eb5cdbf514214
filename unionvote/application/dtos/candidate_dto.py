"""候補者管理に関するDTO."""

from dataclasses import dataclass, field

from unionvote.domain.entities.candidate import Candidate
from unionvote.domain.value_objects.actor import Actor
from unionvote.domain.value_objects.candidate_patch import CandidatePatch
from unionvote.domain.value_objects.candidate_profile import (
    CandidateProfile,
    normalize_platform,
)


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class CandidateInputItem:
    """候補者登録の入力アイテム."""

    student_id: str
    name: str
    position: str
    department: str | None = None
    year: str | None = None
    profile_image: str | None = None
    bio: str | None = None
    platform: list[str] | str | None = None

    def to_profile(self) -> CandidateProfile:
        return CandidateProfile(
            student_id=self.student_id,
            name=self.name,
            position=self.position,
            department=self.department,
            year=self.year,
            profile_image=self.profile_image,
            bio=self.bio,
            platform=tuple(normalize_platform(self.platform)),
        )


@dataclass
class AddCandidatesInputDto:
    """候補者一括登録の入力DTO."""

    actor: Actor
    election_id: str
    candidates: list[CandidateInputItem]


@dataclass
class UpdateCandidateInputDto:
    """候補者更新の入力DTO. Noneの項目は変更しない."""

    actor: Actor
    election_id: str
    candidate_id: str
    student_id: str | None = None
    name: str | None = None
    position: str | None = None
    department: str | None = None
    year: str | None = None
    profile_image: str | None = None
    bio: str | None = None
    platform: list[str] | str | None = None

    def to_patch(self) -> CandidatePatch:
        return CandidatePatch(
            student_id=self.student_id,
            name=self.name,
            position=self.position,
            department=self.department,
            year=self.year,
            profile_image=self.profile_image,
            bio=self.bio,
            platform=(
                tuple(normalize_platform(self.platform))
                if self.platform is not None
                else None
            ),
        )


@dataclass
class RemoveCandidateInputDto:
    """候補者削除の入力DTO."""

    actor: Actor
    election_id: str
    candidate_id: str


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class CandidateOutputItem:
    """候補者の出力アイテム."""

    id: str | None
    student_id: str
    name: str
    position: str
    department: str | None
    year: str | None
    profile_image: str | None
    bio: str | None
    platform: list[str]
    votes: int

    @classmethod
    def from_entity(cls, entity: Candidate) -> "CandidateOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            id=entity.id,
            student_id=entity.student_id,
            name=entity.name,
            position=entity.position,
            department=entity.department,
            year=entity.year,
            profile_image=entity.profile_image,
            bio=entity.bio,
            platform=list(entity.platform),
            votes=entity.votes,
        )


@dataclass
class AddCandidatesOutputDto:
    """候補者一括登録の出力DTO."""

    success: bool
    candidates: list[CandidateOutputItem] = field(default_factory=list)
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class UpdateCandidateOutputDto:
    """候補者更新の出力DTO."""

    success: bool
    candidate: CandidateOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class RemoveCandidateOutputDto:
    """候補者削除の出力DTO."""

    success: bool
    error_code: str | None = None
    error_message: str | None = None
