"""
どこで: `shapes.kinds`
何を: ファクトリが扱う形状の閉じた種別集合 `ShapeKind`。
なぜ: 文字列キーの比較を 1 箇所（`ShapeKind.parse`）に閉じ込め、以降は列挙タグで
      ディスパッチするため。
"""

from __future__ import annotations

from enum import Enum


class ShapeKind(str, Enum):
    """形状種別。値はレジストリキー（小文字）。"""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    SQUARE = "square"

    @classmethod
    def parse(cls, key: object) -> "ShapeKind | None":
        """文字列キーを大文字小文字を無視して種別へ変換する。

        照合は文字ごとに大文字化→小文字化した形で行う（"ſquare" や "cırcle" も一致）。
        前後空白の除去や別名は行わない（完全一致のみ）。
        未知のキー・空文字・None・str 以外はすべて None。
        """
        if isinstance(key, cls):
            return key
        if not isinstance(key, str) or not key:
            return None
        try:
            return cls(key.upper().lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


__all__ = ["ShapeKind"]
