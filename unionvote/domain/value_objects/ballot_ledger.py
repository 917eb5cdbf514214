"""投票済み投票者の台帳."""

from collections.abc import Iterable, Iterator

from unionvote.domain.exceptions import AlreadyVotedError


class BallotLedger:
    """選挙ごとの投票済み投票者集合.

    選挙集約が所有し、集約と一緒に永続化される。
    投票順を保持するため、内部では挿入順のdictを使う。
    """

    def __init__(self, voter_ids: Iterable[str] | None = None) -> None:
        self._voters: dict[str, None] = dict.fromkeys(voter_ids or ())

    def has_voted(self, voter_id: str) -> bool:
        return voter_id in self._voters

    def ensure_not_voted(self, voter_id: str) -> None:
        if self.has_voted(voter_id):
            raise AlreadyVotedError(
                "You have already voted in this election", {"voter_id": voter_id}
            )

    def record_voter(self, voter_id: str) -> None:
        """投票者を台帳に記録する.

        Raises:
            AlreadyVotedError: すでに投票済みの場合
        """
        self.ensure_not_voted(voter_id)
        self._voters[voter_id] = None

    def voter_ids(self) -> list[str]:
        return list(self._voters)

    def __len__(self) -> int:
        return len(self._voters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._voters)

    def __contains__(self, voter_id: object) -> bool:
        return voter_id in self._voters
