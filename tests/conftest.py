"""共通フィクスチャ。

- 出力キャプチャ用のテキストシンク
- 新しい OnceCell
- 環境変数変更後の設定再読込
"""

from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest

from common import settings
from common.once import OnceCell


@pytest.fixture()
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def fresh_cell() -> OnceCell[object]:
    return OnceCell()


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """env を差し替えて `settings.reload_from_env()` し、終了時に元へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def keep_root_level() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
