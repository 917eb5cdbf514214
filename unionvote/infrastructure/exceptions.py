"""Infrastructure layer exceptions."""

from typing import Any


class InfrastructureError(Exception):
    """インフラ層のエラー基底クラス."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class DatabaseError(InfrastructureError):
    """データベース操作のエラー."""
