"""Shared formatting helpers for spinner exports."""

from functools import lru_cache
from html import escape

from PIL import ImageColor

from ..spinner.shapes import (
    BezierPathPrimitive,
    CirclePrimitive,
    PolygonPrimitive,
    Primitive,
    RectPrimitive,
)


@lru_cache(maxsize=8192)
def _fmt_num(value: float) -> str:
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def fmt_num(value: float) -> str:
    """Compact decimal text with at most six fractional digits."""
    if isinstance(value, int):
        return str(value)
    return _fmt_num(float(value))


def fmt_point(point: tuple[float, float]) -> str:
    return f"{fmt_num(point[0])},{fmt_num(point[1])}"


def fmt_seconds(value: float) -> str:
    return f"{fmt_num(value)}s"


def fmt_style(style: dict[str, str]) -> str:
    return " ".join(f"{name}: {value};" for name, value in style.items())


def fmt_attributes(attributes: dict[str, str]) -> str:
    return " ".join(f'{name}="{escape(value, quote=True)}"' for name, value in attributes.items())


def rgba(color: str, opacity: float = 1.0) -> str:
    """CSS ``rgba()`` for a color string, combining its alpha with ``opacity``."""
    try:
        parsed = ImageColor.getrgb(color)
    except ValueError:
        return color
    red, green, blue = parsed[:3]
    alpha = (parsed[3] / 255 if len(parsed) == 4 else 1.0) * opacity
    return f"rgba({red}, {green}, {blue}, {fmt_num(alpha)})"


def path_data(primitive: BezierPathPrimitive) -> str:
    parts = [f"M {fmt_num(primitive.start[0])} {fmt_num(primitive.start[1])}"]
    for c1, c2, end in primitive.segments:
        parts.append(
            f"C {fmt_num(c1[0])} {fmt_num(c1[1])}, "
            f"{fmt_num(c2[0])} {fmt_num(c2[1])}, "
            f"{fmt_num(end[0])} {fmt_num(end[1])}"
        )
    parts.append("Z")
    return " ".join(parts)


def primitive_markup(primitive: Primitive, rotate_attribute: bool = True) -> tuple[str, dict[str, str]]:
    """
    Tag name and geometry attributes for a primitive.

    Args:
        primitive: Shape primitive
        rotate_attribute: Emit rect rotation as a ``transform`` attribute
    """
    if isinstance(primitive, CirclePrimitive):
        return "circle", {
            "cx": fmt_num(primitive.cx),
            "cy": fmt_num(primitive.cy),
            "r": fmt_num(primitive.r),
        }
    if isinstance(primitive, RectPrimitive):
        attributes = {
            "x": fmt_num(primitive.x),
            "y": fmt_num(primitive.y),
            "width": fmt_num(primitive.width),
            "height": fmt_num(primitive.height),
        }
        if primitive.rotation and rotate_attribute:
            cx, cy = primitive.center
            attributes["transform"] = (
                f"rotate({fmt_num(primitive.rotation)} {fmt_num(cx)} {fmt_num(cy)})"
            )
        return "rect", attributes
    if isinstance(primitive, PolygonPrimitive):
        return "polygon", {"points": " ".join(fmt_point(point) for point in primitive.points)}
    return "path", {"d": path_data(primitive)}
