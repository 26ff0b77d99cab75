"""
シェイプ基底モジュール

概要:
- 描画可能オブジェクトの抽象基底 `BaseShape` を定義する。
- 各シェイプは状態を持たず、`draw()` で自分を名乗る 1 行を出力するだけ。

公開 API:
- `BaseShape.message() -> str`: 出力する 1 行（改行なし）。
- `BaseShape.draw(file=None) -> None`: `message()` を `file`（既定は標準出力）へ書く。

使用例:
    @shape
    class Circle(BaseShape):
        kind = ShapeKind.CIRCLE   # 種別は `shapes.kinds.ShapeKind` の閉じた集合

    Circle().draw()   # -> "Inside Circle::draw() method."
"""

from __future__ import annotations

from abc import ABC
from typing import ClassVar, TextIO

from .kinds import ShapeKind


class BaseShape(ABC):
    """すべてのシェイプのベースクラス。

    設計方針
    -------
    - インスタンス状態を持たない（`__slots__ = ()`）。同一性に意味はない。
    - 出力先は引数で差し替え可能（テストでは `io.StringIO` を渡す）。
    """

    __slots__ = ()

    kind: ClassVar[ShapeKind]

    def message(self) -> str:
        """`draw()` が出力する行を返す。"""
        return f"Inside {type(self).__name__}::draw() method."

    def draw(self, file: TextIO | None = None) -> None:
        """形状を「描画」する（1 行をテキスト出力）。

        Parameters
        ----------
        file : TextIO | None, default None
            出力先。None のときは `sys.stdout`。
        """
        print(self.message(), file=file)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["BaseShape"]
