"""
どこで: `common.once`
何を: 1 度だけ初期化されるスロット `OnceCell`。
なぜ: プロセス共有の実体（`api.single_object`）を、並行な初回アクセスでも
      1 回だけ構築し、以降は全呼び出し元へ同一参照を返すため。

状態遷移:
- 未初期化 → （初期化関数が正常終了）→ 初期化済み。逆遷移はない。
- 初期化関数が例外を送出した場合は未初期化のまま。例外は呼び出し元へ伝播し、
  次の呼び出しで再試行される（壊れた値はキャッシュしない）。

並行性:
- 初期化中に到着した呼び出し元はロックで待機し、完了後に同じ値を受け取る。
- 値の格納は初期化済みフラグより先に行う。初期化後の読み出しはロックを取らない。
- ロックは再入不可。初期化関数の中から同じセルを初期化しようとすると
  デッドロックせず RuntimeError を送出する。
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class OnceCell(Generic[T]):
    """書き込み 1 回・以降読み取り専用のスロット。"""

    __slots__ = ("_lock", "_value", "_initialized", "_owner")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._initialized = False
        # 初期化関数を実行中のスレッド ID
        self._owner: Optional[int] = None

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def get(self) -> Optional[T]:
        """初期化済みなら値、未初期化なら None（初期化は行わない）。"""
        return self._value if self._initialized else None

    def get_or_init(self, factory: Callable[[], T]) -> T:
        """値を返す。未初期化なら `factory()` を 1 度だけ実行して格納する。

        Raises
        ------
        RuntimeError
            `factory` の実行中に同じスレッドから再び初期化しようとした場合。
        Exception
            `factory` が送出した例外をそのまま伝播（セルは未初期化のまま）。
        """
        if self._initialized:
            return self._value  # type: ignore[return-value]
        if self._owner == threading.get_ident():
            raise RuntimeError("OnceCell の初期化中に同じセルを再帰的に初期化しようとしました")
        with self._lock:
            if not self._initialized:
                self._owner = threading.get_ident()
                try:
                    value = factory()
                finally:
                    self._owner = None
                self._value = value
                self._initialized = True
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        state = f"value={self._value!r}" if self._initialized else "<uninitialized>"
        return f"OnceCell({state})"


__all__ = ["OnceCell"]
