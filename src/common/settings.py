"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

環境変数:
- `CP_LOG_LEVEL`       : デモ CLI のログレベル（既定 WARNING）
- `CP_SINGLETON_EAGER` : 1 なら `api.single_object` の import 時に実体を生成
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "WARNING"

    # Singleton
    SINGLETON_EAGER: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 不正値は既定値へフォールバックする（例外にしない）。
    """
    _settings.LOG_LEVEL = env_str("CP_LOG_LEVEL", "WARNING", choices=LOG_LEVELS)
    _settings.SINGLETON_EAGER = env_bool("CP_SINGLETON_EAGER", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "LOG_LEVELS"]
