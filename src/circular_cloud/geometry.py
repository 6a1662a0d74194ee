"""Integer geometry primitives shared by the layouter and its consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def half(self) -> Size:
        """Half of the size, truncated to whole units."""

        return Size(self.width // 2, self.height // 2)

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: Size) -> Point:
        return Point(self.x + other.width, self.y + other.height)

    def __sub__(self, other: Size) -> Point:
        return Point(self.x - other.width, self.y - other.height)


PointLike = Union[Point, Tuple[int, int]]
SizeLike = Union[Size, Tuple[int, int]]


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


def as_size(value: SizeLike) -> Size:
    if isinstance(value, Size):
        return value
    width, height = value
    return Size(int(width), int(height))


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle covering ``[x, x + width) x [y, y + height)``."""

    location: Point
    size: Size

    @property
    def x(self) -> int:
        return self.location.x

    @property
    def y(self) -> int:
        return self.location.y

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def left(self) -> int:
        return self.location.x

    @property
    def top(self) -> int:
        return self.location.y

    @property
    def right(self) -> int:
        return self.location.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.location.y + self.size.height

    @property
    def center(self) -> Point:
        return self.location + self.size.half()

    @property
    def area(self) -> int:
        return self.size.area

    def intersects_with(self, other: Rectangle) -> bool:
        """Return ``True`` when the interiors overlap; shared edges do not count."""

        return (
            other.x < self.right
            and self.x < other.right
            and other.y < self.bottom
            and self.y < other.bottom
        )

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "w": self.width, "h": self.height}


def bounding_rectangle(rectangles: Iterable[Rectangle]) -> Rectangle:
    """Smallest rectangle enclosing every rectangle in ``rectangles``."""

    rects = list(rectangles)
    if not rects:
        raise ValueError("rectangles must not be empty")

    left = min(rect.left for rect in rects)
    top = min(rect.top for rect in rects)
    right = max(rect.right for rect in rects)
    bottom = max(rect.bottom for rect in rects)
    return Rectangle(Point(left, top), Size(right - left, bottom - top))
