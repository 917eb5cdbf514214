"""Election repository interface."""

from abc import abstractmethod

from unionvote.domain.entities.election import Election
from unionvote.domain.repositories.base import BaseRepository


class ElectionRepository(BaseRepository[Election]):
    """Repository interface for elections.

    選挙集約は1つのドキュメントとして読み書きされ、
    ``save``は楽観的ロック（バージョン比較）で保護される。
    """

    @abstractmethod
    async def save(self, entity: Election, expected_version: int) -> Election:
        """選挙集約を保存する.

        保存済みのバージョンが``expected_version``と一致する場合のみ書き込み、
        バージョンを1つ進める。

        Args:
            entity: 保存する選挙
            expected_version: 読み込み時のバージョン

        Returns:
            新しいバージョンが設定された選挙

        Raises:
            ConflictError: バージョンが一致しない場合
            NotFoundError: 選挙が存在しない場合
        """
        pass
