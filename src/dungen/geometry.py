from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room footprint in grid units; (x, y) is the low corner."""

    x: int
    y: int
    w: int
    h: int

    def right(self) -> int:
        return self.x + self.w

    def top(self) -> int:
        return self.y + self.h

    def intersects_with(self, other: "Rect") -> bool:
        # Inclusive: rects sharing an edge count as intersecting.
        return (
            self.x <= other.right()
            and self.right() >= other.x
            and self.y <= other.top()
            and self.top() >= other.y
        )

    def center(self) -> Point:
        return Point((self.x + self.right()) // 2, (self.y + self.top()) // 2)

    def cells(self):
        for x in range(self.x, self.right()):
            for y in range(self.y, self.top()):
                yield x, y
