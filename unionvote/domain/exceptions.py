"""Domain exceptions for the election aggregate."""

from typing import Any


class ElectionDomainError(Exception):
    """選挙ドメインのエラー基底クラス.

    各サブクラスは安定したエラーコード``code``を持ち、
    トランスポート層はこのコードをステータスコードに変換する。
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidStateError(ElectionDomainError):
    """現在のライフサイクル状態では実行できない操作."""

    code = "INVALID_STATE"


class NotFoundError(ElectionDomainError):
    """選挙または候補者が見つからない."""

    code = "NOT_FOUND"


class DuplicateCandidateError(ElectionDomainError):
    """同一選挙内で学籍番号が重複している."""

    code = "DUPLICATE_CANDIDATE"


class AlreadyVotedError(ElectionDomainError):
    """投票者がすでに投票済み."""

    code = "ALREADY_VOTED"


class InvalidStatusError(ElectionDomainError):
    """不明なステータスラベル."""

    code = "INVALID_STATUS"


class ConflictError(ElectionDomainError):
    """楽観的ロックのバージョン不一致."""

    code = "CONFLICT"


class ValidationError(ElectionDomainError):
    """入力値が不正."""

    code = "VALIDATION_ERROR"


class PermissionDeniedError(ElectionDomainError):
    """管理者権限が必要な操作."""

    code = "PERMISSION_DENIED"
