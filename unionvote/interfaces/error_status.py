"""エラーコードとHTTPステータスコードの対応表."""

from unionvote.domain.exceptions import (
    AlreadyVotedError,
    ConflictError,
    DuplicateCandidateError,
    InvalidStateError,
    InvalidStatusError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


ERROR_STATUS_CODES: dict[str, int] = {
    InvalidStateError.code: 409,
    NotFoundError.code: 404,
    DuplicateCandidateError.code: 409,
    AlreadyVotedError.code: 409,
    InvalidStatusError.code: 400,
    ConflictError.code: 409,
    ValidationError.code: 400,
    PermissionDeniedError.code: 403,
}


def status_code_for(error_code: str | None) -> int:
    """エラーコードに対応するステータスコード. 不明なコードは500."""
    if error_code is None:
        return 200
    return ERROR_STATUS_CODES.get(error_code, 500)
