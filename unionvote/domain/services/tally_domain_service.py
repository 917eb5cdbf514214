"""集計ドメインサービス."""

from collections.abc import Sequence

from unionvote.domain.entities.candidate import Candidate
from unionvote.domain.entities.candidate_roster import CandidateRoster


class TallyDomainService:
    """投票を候補者の得票数に反映するドメインサービス.

    得票数は単調増加で、減るのはPending中の候補者削除のみ。
    """

    def resolve(
        self, roster: CandidateRoster, candidate_ids: Sequence[str]
    ) -> list[Candidate]:
        """全ての候補者IDを解決する.

        カウンタを変更する前に全IDを検証するため、
        1件でも不明なIDがあれば何も変更されない。

        Raises:
            NotFoundError: 名簿に存在しない候補者IDがある場合
        """
        return [roster.get(candidate_id) for candidate_id in candidate_ids]

    def apply_votes(
        self, roster: CandidateRoster, candidate_ids: Sequence[str]
    ) -> int:
        """指定された候補者の得票数を1ずつ加算する.

        Returns:
            加算した票数（総得票数に加える値）
        """
        candidates = self.resolve(roster, candidate_ids)
        for candidate in candidates:
            candidate.increment_votes()
        return len(candidates)
