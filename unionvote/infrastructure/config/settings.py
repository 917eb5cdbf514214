"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """環境変数（UNIONVOTE_接頭辞）と.envから読み込む設定."""

    model_config = SettingsConfigDict(
        env_prefix="UNIONVOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./unionvote.db"
    log_level: str = "INFO"
    json_logs: bool = False

    # 楽観的ロック競合時の再試行
    conflict_retry_attempts: int = Field(default=5, ge=1)
    conflict_retry_min_wait: float = Field(default=0.01, ge=0)
    conflict_retry_max_wait: float = Field(default=0.5, ge=0)

    def get_database_url(self) -> str:
        """非同期ドライバ用のデータベースURLを返す."""
        return to_async_url(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンを取得する."""
    return Settings()


def to_async_url(database_url: str) -> str:
    """同期ドライバのURLを非同期ドライバのURLに置き換える."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return database_url
