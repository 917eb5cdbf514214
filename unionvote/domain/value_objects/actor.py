"""認証済みの操作主体."""

from dataclasses import dataclass

from unionvote.domain.exceptions import PermissionDeniedError


@dataclass(frozen=True)
class Actor:
    """認証境界から渡される操作主体.

    資格情報の検証は呼び出し側で完了している前提で、
    コアは管理者フラグの確認のみを行う。
    """

    user_id: str
    is_admin: bool = False

    def require_admin(self, operation: str) -> None:
        """管理者でなければPermissionDeniedErrorを送出する."""
        if not self.is_admin:
            raise PermissionDeniedError(
                f"Administrator capability required to {operation}",
                {"user_id": self.user_id, "operation": operation},
            )
