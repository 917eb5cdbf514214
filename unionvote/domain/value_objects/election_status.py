"""選挙ステータスの値オブジェクト."""

from enum import Enum

from unionvote.domain.exceptions import InvalidStatusError


class ElectionStatus(str, Enum):
    """選挙のライフサイクル状態.

    Pending -> Ongoing -> Completed の順に管理者が遷移させる。
    時刻による自動遷移は行わない。
    """

    PENDING = "Pending"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"

    @classmethod
    def from_label(cls, label: str) -> "ElectionStatus":
        """ラベル文字列からステータスを取得する.

        Args:
            label: "Pending" / "Ongoing" / "Completed"

        Raises:
            InvalidStatusError: 不明なラベルの場合
        """
        for status in cls:
            if status.value == label:
                return status
        raise InvalidStatusError(
            f"Invalid election status: {label!r}",
            {"status": label, "allowed": [s.value for s in cls]},
        )

    def __str__(self) -> str:
        return self.value
