"""Pillow rendering of a placed cloud, used for previews and failed-test snapshots."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw

from .geometry import Rectangle, bounding_rectangle

DEFAULT_BORDER = 20
DEFAULT_LINE_WIDTH = 5


def draw_cloud(
    rectangles: Sequence[Rectangle],
    *,
    border: int = DEFAULT_BORDER,
    line_width: int = DEFAULT_LINE_WIDTH,
    background: str | tuple[int, int, int] = "black",
    seed: int | None = None,
) -> Image.Image:
    """Draw every rectangle outline in a random color on a canvas fitted to the cloud.

    The canvas covers the cloud's bounding box plus ``border`` pixels on each
    side. Colors come from ``random.Random(seed)`` so a fixed seed gives a
    byte-identical image.
    """

    if not rectangles:
        raise ValueError("rectangles must not be empty")
    if border < 0:
        raise ValueError("border must be non-negative")

    bounds = bounding_rectangle(rectangles)
    origin_x = bounds.x - border
    origin_y = bounds.y - border
    image = Image.new("RGB", (bounds.width + 2 * border, bounds.height + 2 * border), color=background)
    draw = ImageDraw.Draw(image)
    rng = random.Random(seed)

    for rect in rectangles:
        color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
        left = rect.x - origin_x
        top = rect.y - origin_y
        # Pillow's rectangle corners are inclusive.
        draw.rectangle(
            (left, top, left + rect.width - 1, top + rect.height - 1),
            outline=color,
            width=line_width,
        )
    return image


def save_cloud_png(rectangles: Sequence[Rectangle], path: Path | str, **kwargs) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    draw_cloud(rectangles, **kwargs).save(output, format="PNG")
    return output


__all__ = ["draw_cloud", "save_cloud_png"]
