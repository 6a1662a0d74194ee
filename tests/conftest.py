from __future__ import annotations

from pathlib import Path

import pytest

from circular_cloud import Size, save_cloud_png

REFERENCE_SIZES = [
    (684, 76), (564, 94), (666, 74), (297, 66), (121, 22),
    (123, 82), (640, 80), (222, 74), (138, 92), (205, 82),
    (476, 56), (544, 68), (96, 32), (84, 28), (216, 72),
    (272, 34), (36, 36), (80, 32), (574, 82), (540, 72),
    (396, 44), (407, 74), (180, 36), (250, 100), (287, 82),
    (410, 82), (94, 94), (66, 44), (595, 70), (270, 30),
    (224, 56), (114, 38), (252, 84), (90, 90), (555, 74),
    (156, 52), (448, 64), (266, 38), (940, 94), (560, 56),
    (51, 34), (84, 24), (576, 64), (165, 66), (648, 72),
    (40, 20), (282, 94), (544, 68), (132, 22), (330, 66),
]


@pytest.fixture
def reference_sizes() -> list[Size]:
    return [Size(w, h) for w, h in REFERENCE_SIZES]


@pytest.fixture
def record_cloud(request: pytest.FixtureRequest):
    """Remember a test's rectangles so a failure can dump them as a PNG."""

    def record(rectangles):
        request.node.cloud_rectangles = list(rectangles)
        return rectangles

    return record


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call):
    outcome = yield
    report = outcome.get_result()
    rectangles = getattr(item, "cloud_rectangles", None)
    if report.when != "call" or not report.failed or not rectangles:
        return
    directory = Path(item.config.rootpath) / "FailedTestVisualizations"
    path = save_cloud_png(rectangles, directory / f"{item.name}.png", seed=0)
    report.sections.append(("cloud visualization", f"Tag cloud visualization saved to file {path}"))
