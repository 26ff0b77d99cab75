"""
どこで: `shapes` パッケージ（クラス登録）。
何を: ビルトイン shape（circle/rectangle/square）を import 副作用で登録し、
      `api.shape_factory` から解決できるようにする。
なぜ: 種別→クラスの対応を一箇所に集約し、薄いファクトリ層から再利用するため。
"""

# クラス版 shape 定義を import して登録（副作用）
from .base import BaseShape
from .circle import Circle
from .kinds import ShapeKind
from .rectangle import Rectangle
from .registry import find_shape, get_shape, is_shape_registered, list_shapes, shape  # re-export
from .square import Square

__all__ = [
    "BaseShape",
    "ShapeKind",
    "Circle",
    "Rectangle",
    "Square",
    "shape",
    "get_shape",
    "find_shape",
    "list_shapes",
    "is_shape_registered",
]
