"""
どこで: `shapes` のレジストリ層（クラス専用）。
何を: `@shape` デコレータで BaseShape 派生クラスを登録し、取得/一覧/検査を提供。
なぜ: 種別タグ（`ShapeKind`）→コンストラクタの対応を 1 箇所で管理し、
      `api.shape_factory` から安全に解決するため。

概要:
- 登録対象は `BaseShape` 派生クラスのみ。
- 登録名は `ShapeKind` のいずれかでなければならない（閉じた集合）。
- デコレータは名前省略可（`@shape` / `@shape()`）と明示名指定をサポート。
  省略時は `kind` クラス属性、無ければクラス名から推論する。
"""

from __future__ import annotations

import inspect
from typing import Any, Mapping

from common.base_registry import BaseRegistry

from .base import BaseShape
from .kinds import ShapeKind

ShapeCls = type[BaseShape]

# 統一されたレジストリシステム
_shape_registry = BaseRegistry()


def _resolve_kind(obj: ShapeCls, name: str | None) -> ShapeKind:
    candidate: Any = name or getattr(obj, "kind", None) or obj.__name__
    kind = ShapeKind.parse(candidate)
    if kind is None:
        allowed = ", ".join(k.value for k in ShapeKind)
        raise ValueError(f"未知のシェイプ種別です: {candidate!r}（許可: {allowed}）")
    declared = obj.__dict__.get("kind")
    if declared is not None and ShapeKind.parse(declared) is not kind:
        raise ValueError(f"{obj.__name__}.kind={declared!r} と登録名 {kind.value!r} が一致しません")
    return kind


def shape(arg: Any | None = None, /, name: str | None = None):
    """シェイプクラスをレジストリに登録するデコレータ。

    使用例:
    - `@shape` / `@shape()`                      → `kind` 属性またはクラス名から推論。
    - `@shape("circle")` / `@shape(name="circle")` → 明示名で登録。

    例外:
    - TypeError: BaseShape 派生クラス以外を登録しようとした場合。
    - ValueError: 登録名が `ShapeKind` に無い場合、または同名が既に登録済みの場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not (inspect.isclass(obj) and issubclass(obj, BaseShape)):
            raise TypeError(f"@shape は BaseShape 派生クラスのみ登録可能です: got {obj!r}")

        kind = _resolve_kind(obj, resolved_name)
        obj.kind = kind
        return _shape_registry.register(kind.value)(obj)

    # 直付け (@shape)。クラス以外もここで TypeError にする
    if arg is not None and not isinstance(arg, str) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@shape("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_shape(name: str) -> ShapeCls:
    """登録されたシェイプクラスを取得。

    引数:
        name: シェイプ名（または `ShapeKind`）

    返り値:
        シェイプクラス

    例外:
        KeyError: シェイプが登録されていない場合
    """
    return _shape_registry.get(name)


def find_shape(name: object) -> ShapeCls | None:
    """登録されたシェイプクラスを取得（未登録・不正キーは None）。"""
    return _shape_registry.find(name)


def list_shapes() -> list[str]:
    """登録されているシェイプの一覧を取得。

    返り値:
        シェイプ名のリスト
    """
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: str) -> bool:
    """シェイプが登録されているかチェック。"""
    return _shape_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _shape_registry.unregister(name)


def get_registry() -> Mapping[str, ShapeCls]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _shape_registry.registry


__all__ = [
    "shape",
    "get_shape",
    "find_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
]
