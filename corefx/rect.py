"""Integer rectangle used for sprite bounds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """Axis-aligned rectangle with integer origin and extent."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def position(self) -> tuple[int, int]:
        """Top-left corner as ``(x, y)``."""
        return (self.x, self.y)

    def size(self) -> tuple[int, int]:
        """Extent as ``(w, h)``."""
        return (self.w, self.h)