"""
どこで: `api.shape_factory`（形状生成の高レベル API）。
何を: 文字列キー → `ShapeKind` → 登録クラスの順に解決し、新しいシェイプを返すファクトリ。
なぜ: 呼び出し側から具体クラスを隠し、「どの形状を作るか」の選択を 1 箇所に集約するため。

Notes
-----
- `create(key)` はキーを大文字小文字無視で照合する。未知キー/空文字/None は
  例外にせず None を返す（呼び出し側で不在を判定する）。
- キャッシュ・プールは行わない。呼び出しごとに新しいインスタンスを生成する
  （シェイプは状態を持たないため同一性に意味はない）。
- 動的ディスパッチ: インスタンス `__getattr__` で `G.circle()` の形も提供する。
  こちらは属性アクセスの規約に合わせ、未登録名は `AttributeError`。

Examples
--------
    from api import G

    G.create("circle").draw()       # Inside Circle::draw() method.
    G.create("SQUARE").draw()       # Inside Square::draw() method.
    G.create("triangle")            # None
    G.rectangle().draw()            # Inside Rectangle::draw() method.
"""

from __future__ import annotations

import logging
from typing import Callable

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from shapes.base import BaseShape
from shapes.kinds import ShapeKind
from shapes.registry import find_shape
from shapes.registry import get_shape as get_shape_class
from shapes.registry import list_shapes as list_registered_shapes

logger = logging.getLogger(__name__)


class ShapeFactory:
    """形状ファクトリ（`G` の実体）。

    責務:
    - キー → 種別タグ（`ShapeKind`）への正規化
    - 種別タグ → 登録クラスのディスパッチと生成

    使い方:
        from api import G
        c = G.create("circle")
        s = G.create_kind(ShapeKind.SQUARE)
    """

    def create(self, key: str | None) -> BaseShape | None:
        """キーに対応するシェイプを新規生成する。

        Parameters
        ----------
        key : str | None
            "circle" / "rectangle" / "square"（大文字小文字は無視）。

        Returns
        -------
        BaseShape | None
            生成したシェイプ。未知キー・空文字・None の場合は None。
        """
        kind = ShapeKind.parse(key)
        if kind is None:
            logger.debug("unknown shape key: %r", key)
            return None
        shape_cls = find_shape(kind)
        if shape_cls is None:
            logger.debug("shape kind %s is not registered", kind)
            return None
        return shape_cls()

    # 旧 API 名（getShape）
    get_shape = create

    def create_kind(self, kind: ShapeKind) -> BaseShape:
        """種別タグから直接生成する（不在結果なし）。

        Raises
        ------
        KeyError
            種別に対応するクラスが登録されていない場合。
        """
        return get_shape_class(kind)()

    @staticmethod
    def list_shapes() -> list[str]:
        """利用可能な形状（レジストリ登録済み名）の一覧を返す。"""
        return list_registered_shapes()

    def __getattr__(self, name: str) -> Callable[[], BaseShape]:
        """インスタンスレベルでの動的属性アクセス。

        `G.<name>() -> BaseShape` を提供する。未登録名は `AttributeError`。
        """
        if name.startswith("_"):
            raise AttributeError(name)
        kind = ShapeKind.parse(name)
        if kind is None or find_shape(kind) is None:
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        def shape_method() -> BaseShape:
            return self.create_kind(kind)

        shape_method.__name__ = kind.value
        return shape_method

    # 補完体験向上: dir(G) で登録シェイプ名を出す
    def __dir__(self) -> list[str]:
        return sorted(set(object.__dir__(self)).union(list_registered_shapes()))

    def __repr__(self) -> str:
        return f"ShapeFactory(shapes={list_registered_shapes()})"


# 共有インスタンス（`from api import G` で公開）
G = ShapeFactory()


__all__ = ["ShapeFactory", "G"]
