"""Base entity for domain layer."""


class BaseEntity:
    """IDを持つドメインエンティティの基底クラス."""

    def __init__(self, id: str | None = None) -> None:
        self.id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))
