"""High-level APIs for batch cloud layout workflows."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Any, Iterable, Sequence

from .core import CircularCloudLayouter
from .geometry import PointLike, Rectangle, Size, SizeLike, as_point
from .metrics import summarize
from .rendering import save_cloud_png

log = logging.getLogger(__name__)


def random_sizes(
    count: int,
    *,
    width_range: tuple[int, int] = (10, 100),
    height_range: tuple[int, int] = (1, 41),
    seed: int | None = None,
) -> list[Size]:
    """Return ``count`` random sizes drawn from half-open ``[low, high)`` ranges."""

    if count < 0:
        raise ValueError("count must be non-negative")
    if width_range[0] <= 0 or height_range[0] <= 0:
        raise ValueError("size ranges must start above zero")

    rng = random.Random(seed)
    return [
        Size(rng.randrange(*width_range), rng.randrange(*height_range))
        for _ in range(count)
    ]


def layout_cloud(
    sizes: Iterable[SizeLike],
    *,
    center: PointLike = (0, 0),
    **layouter_options: Any,
) -> list[Rectangle]:
    """Place ``sizes`` in order on a fresh layouter and return the rectangles."""

    layouter = CircularCloudLayouter(center, **layouter_options)
    return [layouter.put_next_rectangle(size) for size in sizes]


def export_cloud(
    prj_id: str,
    sizes: Sequence[SizeLike],
    *,
    center: PointLike = (0, 0),
    output_root: Path | str = "output",
    seed: int | None = None,
    border: int = 20,
    line_width: int = 5,
    **layouter_options: Any,
) -> dict[str, Any]:
    """Lay out ``sizes`` and write a PNG preview plus a JSON summary.

    Parameters
    ----------
    prj_id:
        Identifier used to create ``output_root / prj_id`` to store artifacts.
    sizes:
        Rectangle sizes, placed in the given order.
    center:
        Cloud center passed to :class:`CircularCloudLayouter`.
    output_root:
        Directory under which project-specific folders are created.
    seed:
        Seed for the outline colors of the preview image.
    layouter_options:
        Extra keyword options for the layouter (``radius_step``, ``angle_step``,
        ``max_iterations``).
    """

    if not prj_id:
        raise ValueError("prj_id must be non-empty")
    if not sizes:
        raise ValueError("sizes must not be empty")

    origin = as_point(center)
    rectangles = layout_cloud(sizes, center=origin, **layouter_options)

    project_dir = Path(output_root) / prj_id
    project_dir.mkdir(parents=True, exist_ok=True)

    image_path = save_cloud_png(
        rectangles,
        project_dir / "cloud.png",
        border=border,
        line_width=line_width,
        seed=seed,
    )

    summary: dict[str, Any] = {
        "project_id": prj_id,
        "center": {"x": origin.x, "y": origin.y},
        "output_dir": str(project_dir),
        "image_path": str(image_path),
        "metrics": summarize(rectangles, origin),
        "rectangles": [rect.to_dict() for rect in rectangles],
    }

    summary_path = project_dir / "cloud.json"
    summary["summary_path"] = str(summary_path)
    summary_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")
    log.info("Exported %d rectangles to %s", len(rectangles), project_dir)
    return summary


__all__ = ["random_sizes", "layout_cloud", "export_cloud"]
