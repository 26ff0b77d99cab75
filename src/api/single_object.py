"""
どこで: `api.single_object`（プロセス共有の単一インスタンス）。
何を: `get_instance()` 経由でのみ取得できる `SingleObject` を、初回アクセス時に 1 度だけ生成する。
なぜ: 生成経路を 1 本に絞り、並行な初回アクセスでも構築が 1 回で済むことを保証するため。

方式:
- 遅延初期化 + 1 回限りの初期化プリミティブ（`common.once.OnceCell`）。
  初期化中に到着したスレッドはロックで待ち、完了後に同じ参照を受け取る。
- 設定 `SINGLETON_EAGER`（`CP_SINGLETON_EAGER=1`）が真なら import 時に生成する。
- コンストラクタは非公開: モジュール内のトークンなしで `_SingleObject()` を呼ぶと TypeError。
- 構築失敗時は例外を初回呼び出し元へ伝播し、次回の呼び出しで再試行する。
  壊れたインスタンスを初期化済みとして保持することはない。
- 破棄・リセットは提供しない（寿命はプロセスと同じ）。

使用例:
    from api import get_instance

    obj = get_instance()
    obj.print()                 # hello world
    assert obj is get_instance()
"""

from __future__ import annotations

import logging
import threading
from typing import ClassVar, TextIO

from common import settings
from common.once import OnceCell

logger = logging.getLogger(__name__)

_TOKEN = object()


class _SingleObject:
    """プロセス内で 1 つだけ存在するオブジェクト（`SingleObject`）。"""

    __slots__ = ()

    # 構築回数（正常系では常に 0 か 1）
    construct_count: ClassVar[int] = 0
    _count_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, token: object = None) -> None:
        if token is not _TOKEN:
            raise TypeError("SingleObject は直接生成できません。get_instance() を使ってください")
        with _SingleObject._count_lock:
            _SingleObject.construct_count += 1
        logger.debug("SingleObject constructed (count=%d)", _SingleObject.construct_count)

    def print(self, file: TextIO | None = None) -> None:
        """固定メッセージを出力する。"""
        print("hello world", file=file)

    def __repr__(self) -> str:
        return "SingleObject()"


SingleObject = _SingleObject

_cell: OnceCell[_SingleObject] = OnceCell()


def _construct() -> _SingleObject:
    return _SingleObject(_TOKEN)


def get_instance() -> _SingleObject:
    """共有インスタンスを返す（未生成なら 1 度だけ生成）。

    Raises
    ------
    Exception
        構築が失敗した場合はその例外。状態は未初期化のまま。
    """
    return _cell.get_or_init(_construct)


def is_initialized() -> bool:
    """共有インスタンスが生成済みかどうか。"""
    return _cell.is_initialized


if settings.get().SINGLETON_EAGER:
    get_instance()


__all__ = ["SingleObject", "get_instance", "is_initialized"]
