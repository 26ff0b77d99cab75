from __future__ import annotations

from .base import BaseShape
from .kinds import ShapeKind
from .registry import shape


@shape
class Circle(BaseShape):
    """Circle shape."""

    __slots__ = ()

    kind = ShapeKind.CIRCLE
