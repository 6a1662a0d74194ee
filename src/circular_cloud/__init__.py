"""circular_cloud package."""

from .api import export_cloud, layout_cloud, random_sizes
from .core import CircularCloudLayouter, InvalidSizeError, LayoutUnreachableError
from .geometry import Point, Rectangle, Size, bounding_rectangle
from .rendering import draw_cloud, save_cloud_png

__all__ = [
	"Point",
	"Size",
	"Rectangle",
	"bounding_rectangle",
	"CircularCloudLayouter",
	"InvalidSizeError",
	"LayoutUnreachableError",
	"random_sizes",
	"layout_cloud",
	"export_cloud",
	"draw_cloud",
	"save_cloud_png",
]
__version__ = "0.1.0"
