"""Write SVG output: path data strings and diagram documents."""

from __future__ import annotations

from html import escape
from typing import Any

from typing_extensions import assert_never

from bodymap.svg.primitives import ClosePath, CubicCurveTo, LineTo, MoveTo, Path, Point, QuadCurveTo


def fmt(value: float) -> str:
    """Shortest decimal that reads back as the same float."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return "0" if text == "-0" else text


def _pt(p: Point) -> str:
    return f"{fmt(p.x)} {fmt(p.y)}"


def path_to_d(path: Path) -> str:
    """Absolute-command path data for ``path``. Parsing it back gives the same segments."""
    parts: list[str] = []
    for seg in path.segments:
        if isinstance(seg, MoveTo):
            parts.append(f"M {_pt(seg.point)}")
        elif isinstance(seg, LineTo):
            parts.append(f"L {_pt(seg.point)}")
        elif isinstance(seg, CubicCurveTo):
            parts.append(f"C {_pt(seg.control1)} {_pt(seg.control2)} {_pt(seg.end)}")
        elif isinstance(seg, QuadCurveTo):
            parts.append(f"Q {_pt(seg.control)} {_pt(seg.end)}")
        elif isinstance(seg, ClosePath):
            parts.append("Z")
        else:
            assert_never(seg)
    return " ".join(parts)


def _element_lines(elem: dict[str, Any], indent: int) -> list[str]:
    pad = "  " * indent
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children") and v is not None}
    attr_str = " ".join(f'{k}="{escape(str(v), quote=True)}"' for k, v in attrs.items())
    opening = f"{tag} {attr_str}".rstrip()
    children = elem.get("children")
    if not children:
        return [f"{pad}<{opening} />"]
    lines = [f"{pad}<{opening}>"]
    for child in children:
        lines.extend(_element_lines(child, indent + 1))
    lines.append(f"{pad}</{tag}>")
    return lines


def serialize_svg(
    elements: list[dict[str, Any]],
    width: float,
    height: float,
    viewbox: str | None = None,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions; ``children`` nests elements."""
    vb = viewbox or f"0 0 {fmt(width)} {fmt(height)}"
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{fmt(width)}" height="{fmt(height)}" viewBox="{vb}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        lines.extend(_element_lines(elem, 1))

    lines.append("</svg>")
    return "\n".join(lines)
