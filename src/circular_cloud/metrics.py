"""Shape measurements for a finished cloud (density, drift from the center)."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .geometry import Point, PointLike, Rectangle, as_point, bounding_rectangle


def _as_array(rectangles: Sequence[Rectangle]) -> np.ndarray:
    """Return an ``(N, 4)`` int64 array of ``x, y, w, h`` rows."""

    if not rectangles:
        raise ValueError("rectangles must not be empty")
    return np.array([(r.x, r.y, r.width, r.height) for r in rectangles], dtype=np.int64)


def total_area(rectangles: Sequence[Rectangle]) -> int:
    boxes = _as_array(rectangles)
    return int((boxes[:, 2] * boxes[:, 3]).sum())


def cloud_radius(rectangles: Sequence[Rectangle]) -> float:
    """Average half-extent of the bounding box: ``(w + h) / 4``."""

    bounds = bounding_rectangle(rectangles)
    return (bounds.width + bounds.height) / 2.0 / 2.0


def cloud_density(rectangles: Sequence[Rectangle]) -> float:
    """Filled area relative to the circle of radius :func:`cloud_radius`."""

    radius = cloud_radius(rectangles)
    return total_area(rectangles) / (math.pi * radius * radius)


def farthest_corner_distance(rectangles: Sequence[Rectangle], center: PointLike) -> float:
    origin = as_point(center)
    boxes = _as_array(rectangles).astype(np.float64)
    xs = np.stack([boxes[:, 0], boxes[:, 0] + boxes[:, 2]], axis=1) - origin.x
    ys = np.stack([boxes[:, 1], boxes[:, 1] + boxes[:, 3]], axis=1) - origin.y
    # Corner (i, j) pairs every x edge with every y edge of the same rectangle.
    distances = np.hypot(xs[:, :, None], ys[:, None, :])
    return float(distances.max())


def circumscribed_density(rectangles: Sequence[Rectangle], center: PointLike) -> float:
    """Filled area relative to the circle around ``center`` that contains every corner."""

    radius = farthest_corner_distance(rectangles, center)
    if radius <= 0.0:
        return 0.0
    return total_area(rectangles) / (math.pi * radius * radius)


def center_offset(rectangles: Sequence[Rectangle], center: PointLike) -> float:
    """Distance between ``center`` and the middle of the cloud's bounding box."""

    origin = as_point(center)
    middle: Point = bounding_rectangle(rectangles).center
    return math.hypot(origin.x - middle.x, origin.y - middle.y)


def summarize(rectangles: Sequence[Rectangle], center: PointLike) -> dict[str, float | int | dict[str, int]]:
    bounds = bounding_rectangle(rectangles)
    return {
        "count": len(rectangles),
        "bounding_box": bounds.to_dict(),
        "total_area": total_area(rectangles),
        "cloud_density": cloud_density(rectangles),
        "circumscribed_density": circumscribed_density(rectangles, center),
        "center_offset": center_offset(rectangles, center),
    }


__all__ = [
    "total_area",
    "cloud_radius",
    "cloud_density",
    "farthest_corner_distance",
    "circumscribed_density",
    "center_offset",
    "summarize",
]
