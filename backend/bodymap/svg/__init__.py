"""Path-data parsing, path primitives and SVG output."""

from bodymap.svg.parser import parse_path_data
from bodymap.svg.primitives import Path, Point, bounding_box, union_bounding_box

__all__ = ["parse_path_data", "Path", "Point", "bounding_box", "union_bounding_box"]
