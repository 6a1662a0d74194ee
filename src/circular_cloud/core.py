from __future__ import annotations

import logging
import math
from typing import Iterator, List, Tuple

from .geometry import Point, PointLike, Rectangle, Size, SizeLike, as_point, as_size

log = logging.getLogger(__name__)

DEFAULT_RADIUS_STEP = 1.0
DEFAULT_ANGLE_STEP = 0.01
DEFAULT_MAX_ITERATIONS: int | None = 1_000_000

FULL_TURN = 2 * math.pi


class InvalidSizeError(ValueError):
    """Raised when a rectangle size has a non-positive width or height."""

    def __init__(self, size: Size) -> None:
        self.size = size
        super().__init__(f"Rectangle size must be positive in both dimensions, got {size.width}x{size.height}")


class LayoutUnreachableError(RuntimeError):
    """Raised when the spiral search gives up before finding a free position."""

    def __init__(self, size: Size, iterations: int) -> None:
        self.size = size
        self.iterations = iterations
        super().__init__(
            f"No free position found for {size.width}x{size.height} rectangle after {iterations} candidates"
        )


def circumscribing_radius(size: Size) -> float:
    """Radius of the circle through the four corners of ``size`` centered at its middle."""

    half = size.half()
    return math.sqrt(half.width * half.width + half.height * half.height)


def point_away_from_center(center: Point, angle: float, distance: float) -> Point:
    return Point(
        center.x + round(distance * math.cos(angle)),
        center.y + round(distance * math.sin(angle)),
    )


def rectangle_away_from_center(center: Point, angle: float, distance: float, size: Size) -> Rectangle:
    """Rectangle whose bounding circle sits ``distance`` away from ``center`` along ``angle``.

    The rectangle's own center is pushed out by its circumscribing radius so the
    whole rectangle, not just its middle, clears the requested distance.
    """

    middle = point_away_from_center(center, angle, distance + circumscribing_radius(size))
    return Rectangle(middle - size.half(), size)


class CircularCloudLayouter:
    """Places rectangles one by one into a dense, roughly circular cloud.

    Each new rectangle is found by walking an Archimedean spiral outward from
    the last search position until a free spot appears, then sliding it back
    toward the center along the same ray as far as it goes without overlapping.
    The spiral position is kept between calls, so later rectangles keep
    searching from where the previous one was found.
    """

    def __init__(
        self,
        center: PointLike,
        *,
        radius_step: float = DEFAULT_RADIUS_STEP,
        angle_step: float = DEFAULT_ANGLE_STEP,
        max_iterations: int | None = DEFAULT_MAX_ITERATIONS,
    ) -> None:
        if radius_step <= 0.0:
            raise ValueError("radius_step must be positive")
        if angle_step <= 0.0:
            raise ValueError("angle_step must be positive")
        if max_iterations is not None and max_iterations <= 0:
            raise ValueError("max_iterations must be positive or None")

        self._center = as_point(center)
        self.radius_step = radius_step
        self.angle_step = angle_step
        self.max_iterations = max_iterations
        self._radius = 0.0
        self._angle = 0.0
        self._placed: List[Rectangle] = []

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        return tuple(self._placed)

    def __len__(self) -> int:
        return len(self._placed)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(tuple(self._placed))

    def put_next_rectangle(self, size: SizeLike) -> Rectangle:
        """Place a rectangle of ``size`` and return its final position."""

        size = as_size(size)
        if size.width <= 0 or size.height <= 0:
            raise InvalidSizeError(size)

        if self._radius == 0.0:
            rectangle = Rectangle(self._center - size.half(), size)
            self._radius += self.radius_step
            self._placed.append(rectangle)
            log.debug("Placed first rectangle %s at the cloud center", rectangle)
            return rectangle

        angle, radius, iterations = self._spiral_search(size)
        rectangle = rectangle_away_from_center(
            self._center, angle, self._pull_to_center(size, angle, radius), size
        )

        self._angle = angle
        self._radius = radius
        self._placed.append(rectangle)
        log.debug(
            "Placed rectangle %s after %d candidates (angle=%.2f, radius=%.1f)",
            rectangle,
            iterations,
            angle,
            radius,
        )
        return rectangle

    def can_place(self, rectangle: Rectangle) -> bool:
        return not any(rectangle.intersects_with(placed) for placed in self._placed)

    def _candidate(self, size: Size, angle: float, radius: float) -> Rectangle:
        return rectangle_away_from_center(self._center, angle, radius, size)

    def _spiral_search(self, size: Size) -> Tuple[float, float, int]:
        angle = self._angle
        radius = self._radius
        iterations = 1
        if self.can_place(self._candidate(size, angle, radius)):
            return angle, radius, iterations

        while True:
            # Sweep the rest of the current ring, then step outward.
            while angle <= FULL_TURN:
                angle += self.angle_step
                iterations += 1
                self._check_budget(size, iterations)
                if self.can_place(self._candidate(size, angle, radius)):
                    return angle, radius, iterations

            angle = 0.0
            radius += self.radius_step
            iterations += 1
            self._check_budget(size, iterations)
            if self.can_place(self._candidate(size, angle, radius)):
                return angle, radius, iterations

    def _check_budget(self, size: Size, iterations: int) -> None:
        if self.max_iterations is not None and iterations > self.max_iterations:
            log.warning(
                "Giving up on %dx%d rectangle after %d candidates (%d placed)",
                size.width,
                size.height,
                self.max_iterations,
                len(self._placed),
            )
            raise LayoutUnreachableError(size, self.max_iterations)

    def _pull_to_center(self, size: Size, angle: float, radius: float) -> float:
        """Walk inward along ``angle`` and return the last collision-free radius."""

        lower_bound = -circumscribing_radius(size)
        free_radius = radius
        current = radius
        while current > lower_bound and self.can_place(self._candidate(size, angle, current)):
            free_radius = current
            current -= self.radius_step
        return free_radius
