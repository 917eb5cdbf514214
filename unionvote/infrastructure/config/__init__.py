"""
Configuration module for unionvote.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from unionvote.infrastructure.config.async_database import AsyncDatabase
from unionvote.infrastructure.config.settings import Settings, get_settings


__all__ = ["AsyncDatabase", "Settings", "get_settings"]
