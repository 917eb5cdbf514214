"""CLIで読み込むJSONファイルのスキーマ."""

import json

from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter

from unionvote.application.dtos.candidate_dto import CandidateInputItem


class CandidateRequest(BaseModel):
    """候補者登録リクエスト.

    必須項目の空チェックはドメイン側で行うため、ここでは型のみ検証する。
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    student_id: str = ""
    name: str = ""
    position: str = ""
    department: str | None = None
    year: str | None = None
    profile_image: str | None = None
    bio: str | None = None
    platform: list[str] | str | None = None

    def to_input_item(self) -> CandidateInputItem:
        return CandidateInputItem(**self.model_dump())


_candidate_list_adapter = TypeAdapter(list[CandidateRequest])


def load_candidate_file(path: Path) -> list[CandidateInputItem]:
    """候補者JSONを読み込む. 単一オブジェクトは1件のリストとして扱う."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [data]
    return [r.to_input_item() for r in _candidate_list_adapter.validate_python(data)]
