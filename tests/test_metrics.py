import math

import pytest

from circular_cloud import Point, Rectangle, Size
from circular_cloud.metrics import (
    center_offset,
    circumscribed_density,
    cloud_density,
    cloud_radius,
    farthest_corner_distance,
    summarize,
    total_area,
)


def _square() -> list[Rectangle]:
    return [Rectangle(Point(0, 0), Size(10, 10))]


def test_single_square_metrics() -> None:
    rects = _square()
    assert total_area(rects) == 100
    assert cloud_radius(rects) == 5.0
    assert math.isclose(cloud_density(rects), 100 / (math.pi * 25))
    assert math.isclose(farthest_corner_distance(rects, (5, 5)), math.sqrt(50))
    assert math.isclose(circumscribed_density(rects, Point(5, 5)), 100 / (math.pi * 50))
    assert center_offset(rects, Point(5, 5)) == 0.0


def test_center_offset_uses_bounding_box_middle() -> None:
    rects = [
        Rectangle(Point(0, 0), Size(4, 4)),
        Rectangle(Point(4, 0), Size(4, 8)),
    ]
    assert math.isclose(center_offset(rects, (0, 0)), 4 * math.sqrt(2))
    assert center_offset(rects, (4, 4)) == 0.0


def test_farthest_corner_picks_opposite_corner() -> None:
    rects = [
        Rectangle(Point(-2, -2), Size(4, 4)),
        Rectangle(Point(2, -1), Size(6, 2)),
    ]
    assert math.isclose(farthest_corner_distance(rects, (0, 0)), math.hypot(8, 1))


def test_summary_is_json_friendly() -> None:
    summary = summarize(_square(), (5, 5))
    assert summary["count"] == 1
    assert summary["bounding_box"] == {"x": 0, "y": 0, "w": 10, "h": 10}
    assert isinstance(summary["total_area"], int)
    assert isinstance(summary["circumscribed_density"], float)


@pytest.mark.parametrize("func", [total_area, cloud_density, cloud_radius])
def test_empty_input_is_rejected(func) -> None:
    with pytest.raises(ValueError):
        func([])
