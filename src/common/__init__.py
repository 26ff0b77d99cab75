"""
どこで: `common` パッケージ。
何を: shapes/api 双方で使う軽量ユーティリティ（BaseRegistry, OnceCell など）。
なぜ: API 層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .once import OnceCell

__all__ = [
    "BaseRegistry",
    "OnceCell",
]
