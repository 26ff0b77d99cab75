"""
どこで: `common.logging`
何を: CLI/デモ向けの軽量ロギング初期化ヘルパ。
なぜ: ライブラリ側は `logging.getLogger(__name__)` のみ使い、ハンドラ構成は
      最上位の呼び出し元（`api.demo`）が 1 度だけ行うため。
"""

from __future__ import annotations

import logging

from . import settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None) -> int:
    """レベル指定を `logging` の数値レベルへ変換する。

    - `None` は設定値 `LOG_LEVEL`（`CP_LOG_LEVEL`）を使う
    - 不明な文字列は WARNING に丸める
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.strip().upper(), None)
        return lvl if isinstance(lvl, int) else logging.WARNING
    return int(level)


def setup_default_logging(level: int | str | None = None) -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（レベルのみ反映）
    - 適用した場合は True を返す
    """
    lvl = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        root.setLevel(lvl)
        return False
    logging.basicConfig(level=lvl, format=_FORMAT)
    return True


__all__ = ["resolve_level", "setup_default_logging"]
