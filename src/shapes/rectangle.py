from __future__ import annotations

from .base import BaseShape
from .kinds import ShapeKind
from .registry import shape


@shape
class Rectangle(BaseShape):
    """Rectangle shape."""

    __slots__ = ()

    kind = ShapeKind.RECTANGLE
