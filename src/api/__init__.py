"""
どこで: `api` 入口（高レベル公開 API）。
何を: 形状ファクトリ `G`・装飾子 `shape`・共有インスタンス取得 `get_instance` を再輸出。
なぜ: 利用者が単一名前空間から Factory / Singleton の両デモを扱えるようにするため。

Usage:
    from api import G, get_instance

    G.create("circle").draw()
    get_instance().print()
"""

# コアクラス（高度な使用）
from shapes.base import BaseShape
from shapes.kinds import ShapeKind
from shapes.registry import (
    shape as shape,
)  # 公開唯一経路（api.shape）

# 主要API
from .shape_factory import G, ShapeFactory
from .single_object import SingleObject, get_instance

__all__ = [
    # メインAPI
    "G",  # 形状ファクトリ
    "get_instance",  # 共有インスタンス
    "shape",  # ユーザー拡張用デコレータ（唯一の公開経路）
    # クラス（高度な使用）
    "ShapeFactory",
    "ShapeKind",
    "BaseShape",
    "SingleObject",
]

# バージョン情報
__version__ = "2025.10"
