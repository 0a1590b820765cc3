"""Raster preview of a compiled spinner using Pillow."""

import math
from io import BytesIO
from typing import Callable

from PIL import Image, ImageColor, ImageDraw, ImageFilter

from .config import GradientType, SpinnerConfig
from .constants import CANVAS_SIZE
from .spinner.colors import GradientDefinition, GradientRef
from .spinner.geometry import CompiledSpinner, Element, ShadowFilter
from .spinner.shapes import (
    BezierPathPrimitive,
    CirclePrimitive,
    PolygonPrimitive,
    Primitive,
    RectPrimitive,
)

RGBA = tuple[int, int, int, int]
_ToPixels = Callable[[float, float], tuple[float, float]]


def parse_rgba(color: str, opacity: float = 1.0) -> RGBA:
    """Parse any CSS color Pillow understands into an RGBA tuple."""
    parsed = ImageColor.getrgb(color)
    alpha = parsed[3] if len(parsed) == 4 else 255
    return (parsed[0], parsed[1], parsed[2], round(alpha * max(0.0, min(1.0, opacity))))


def _lerp_color(a: RGBA, b: RGBA, t: float) -> RGBA:
    return tuple(round(a[k] + (b[k] - a[k]) * t) for k in range(4))  # type: ignore[return-value]


def gradient_color(gradient: GradientDefinition, t: float) -> RGBA:
    """Color of the gradient at offset ``t`` in [0, 1]."""
    stops = [(stop.position / 100, parse_rgba(stop.color)) for stop in gradient.stops]
    if t <= stops[0][0]:
        return stops[0][1]
    for (start, start_color), (end, end_color) in zip(stops, stops[1:]):
        if t <= end:
            span = end - start
            return _lerp_color(start_color, end_color, (t - start) / span if span > 0 else 1.0)
    return stops[-1][1]


def gradient_patch(gradient: GradientDefinition, width: int, height: int) -> Image.Image:
    """Gradient spread over one element's bounding box, like SVG's objectBoundingBox."""
    patch = Image.new("RGBA", (width, height))
    pixels = []
    for py in range(height):
        v = (py + 0.5) / height
        for px in range(width):
            u = (px + 0.5) / width
            if gradient.kind == GradientType.LINEAR:
                t = (u + v) / 2
            else:
                t = min(1.0, math.hypot(u - 0.5, v - 0.5) / 0.5)
            pixels.append(gradient_color(gradient, t))
    patch.putdata(pixels)
    return patch


class PreviewRenderer:
    """Renders the first frame of a compiled spinner as a PIL Image."""

    def __init__(
        self,
        compiled: CompiledSpinner,
        config: SpinnerConfig,
        size: int = CANVAS_SIZE,
        background: str | None = None,
    ):
        """
        Initialize renderer.

        Args:
            compiled: Output of the geometry engine
            config: Configuration the spinner was compiled from
            size: Output width and height in pixels
            background: Background color, or None for transparency
        """
        self.compiled = compiled
        self.config = config
        self.size = size
        self.background = background
        extent = compiled.layout.extent
        self.scale = size / extent if extent > 0 else 1.0
        self.origin = compiled.layout.origin

    def to_pixels(self, x: float, y: float) -> tuple[float, float]:
        return ((x - self.origin) * self.scale, (y - self.origin) * self.scale)

    def render_frame(self) -> Image.Image:
        """
        Render the spinner at the start of its animation.

        Returns:
            RGBA image of the spinner
        """
        fill = parse_rgba(self.background) if self.background else (0, 0, 0, 0)
        canvas = Image.new("RGBA", (self.size, self.size), fill)
        for element in self.compiled.elements:
            if self.compiled.shadow is not None:
                self._draw_shadow(canvas, element, self.compiled.shadow)
            self._draw_element(canvas, element)
        return canvas

    def _draw_shadow(self, canvas: Image.Image, element: Element, shadow: ShadowFilter) -> None:
        dx, dy = shadow.dx * self.scale, shadow.dy * self.scale

        def shifted(x: float, y: float) -> tuple[float, float]:
            px, py = self.to_pixels(x, y)
            return px + dx, py + dy

        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        _draw_primitive(
            ImageDraw.Draw(layer),
            element.primitive,
            shifted,
            fill=parse_rgba(shadow.color, shadow.opacity),
        )
        if shadow.blur > 0:
            layer = layer.filter(ImageFilter.GaussianBlur(shadow.blur * self.scale))
        canvas.alpha_composite(layer)

    def _draw_element(self, canvas: Image.Image, element: Element) -> None:
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        if isinstance(element.fill, GradientRef):
            mask = Image.new("L", canvas.size, 0)
            _draw_primitive(ImageDraw.Draw(mask), element.primitive, self.to_pixels, fill=255)
            box = mask.getbbox()
            if box is not None:
                width, height = box[2] - box[0], box[3] - box[1]
                patch = gradient_patch(element.fill.gradient, width, height)
                layer.paste(patch, box[:2], mask.crop(box))
        else:
            _draw_primitive(
                ImageDraw.Draw(layer),
                element.primitive,
                self.to_pixels,
                fill=parse_rgba(element.fill.color),
            )

        if element.stroke_color and element.stroke_width > 0:
            _draw_primitive(
                ImageDraw.Draw(layer),
                element.primitive,
                self.to_pixels,
                outline=parse_rgba(element.stroke_color),
                width=max(1, round(element.stroke_width * self.scale)),
            )
        canvas.alpha_composite(layer)


def _outline(primitive: Primitive) -> tuple[tuple[float, float], ...]:
    if isinstance(primitive, RectPrimitive):
        return primitive.corners()
    if isinstance(primitive, PolygonPrimitive):
        return primitive.points
    if isinstance(primitive, BezierPathPrimitive):
        return primitive.flatten()
    raise TypeError(f"No polygon outline for {type(primitive).__name__}")


def _draw_primitive(
    draw: ImageDraw.ImageDraw,
    primitive: Primitive,
    to_pixels: _ToPixels,
    fill: RGBA | int | None = None,
    outline: RGBA | None = None,
    width: int = 1,
) -> None:
    if isinstance(primitive, CirclePrimitive):
        left, top = to_pixels(primitive.cx - primitive.r, primitive.cy - primitive.r)
        right, bottom = to_pixels(primitive.cx + primitive.r, primitive.cy + primitive.r)
        draw.ellipse([left, top, right, bottom], fill=fill, outline=outline, width=width)
        return
    points = [to_pixels(x, y) for x, y in _outline(primitive)]
    draw.polygon(points, fill=fill, outline=outline, width=width)


def encode_png(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="png")
    return buffer.getvalue()
