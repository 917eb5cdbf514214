"""候補者の登録データ."""

from dataclasses import dataclass, field

from unionvote.domain.exceptions import ValidationError


REQUIRED_CANDIDATE_FIELDS = ("student_id", "name", "position")


def normalize_platform(platform: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """公約を文字列リストに正規化する.

    単一の文字列は要素1つのリストとして扱う。
    """
    if platform is None:
        return []
    if isinstance(platform, str):
        return [platform]
    return list(platform)


@dataclass(frozen=True)
class CandidateProfile:
    """新規候補者の入力データ."""

    student_id: str
    name: str
    position: str
    department: str | None = None
    year: str | None = None
    profile_image: str | None = None
    bio: str | None = None
    platform: tuple[str, ...] = field(default_factory=tuple)

    def validate(self) -> None:
        """必須項目を検証する.

        Raises:
            ValidationError: 必須項目が空の場合
        """
        missing = [
            name
            for name in REQUIRED_CANDIDATE_FIELDS
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ValidationError(
                f"Missing required candidate fields: {', '.join(missing)}",
                {"student_id": self.student_id, "missing": missing},
            )
