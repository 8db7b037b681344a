from importlib.metadata import version as _metadata_version

from .utils.aabb import (
    Aabb,
    init_aabb,
    add_point,
    has_data,
    get_width,
    get_height,
    get_area,
    intersect,
)

__all__ = (
    "__version__",
    "Aabb",
    "init_aabb",
    "add_point",
    "has_data",
    "get_width",
    "get_height",
    "get_area",
    "intersect",
)

__version__ = _metadata_version("aabb2d")
