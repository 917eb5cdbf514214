"""候補者の部分更新データ."""

from dataclasses import dataclass, fields
from typing import Any

from unionvote.domain.exceptions import ValidationError
from unionvote.domain.value_objects.candidate_profile import REQUIRED_CANDIDATE_FIELDS


@dataclass(frozen=True)
class CandidatePatch:
    """候補者の部分更新.

    Noneのフィールドは「指定なし」を意味し、既存の値を変更しない。
    """

    student_id: str | None = None
    name: str | None = None
    position: str | None = None
    department: str | None = None
    year: str | None = None
    profile_image: str | None = None
    bio: str | None = None
    platform: tuple[str, ...] | None = None

    def provided_fields(self) -> dict[str, Any]:
        """指定されたフィールドのみを返す."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.provided_fields()

    def validate(self) -> None:
        """必須項目を空文字に変更しようとしていないか検証する."""
        blank = [
            name
            for name in REQUIRED_CANDIDATE_FIELDS
            if getattr(self, name) is not None and not getattr(self, name).strip()
        ]
        if blank:
            raise ValidationError(
                f"Required candidate fields cannot be blank: {', '.join(blank)}",
                {"blank": blank},
            )
