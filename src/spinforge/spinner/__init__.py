"""Configuration-to-geometry compiler for radial spinners."""

from .animation import (
    INFINITE,
    AnimationDescriptor,
    bind_element_animation,
    bind_group_animation,
    direction,
    is_grouped,
    iteration_count,
)
from .colors import GradientDefinition, GradientRef, LiteralColor, build_gradient, resolve_fill
from .geometry import (
    CompiledSpinner,
    Element,
    Layout,
    RandomDraws,
    ShadowFilter,
    compile_spinner,
    compute_layout,
    copy_offset,
)
from .shapes import (
    CONCRETE_SHAPES,
    BezierPathPrimitive,
    CirclePrimitive,
    PolygonPrimitive,
    RectPrimitive,
    build_primitive,
)
from .variation import radius_at, size_at

__all__ = [
    "INFINITE",
    "AnimationDescriptor",
    "bind_element_animation",
    "bind_group_animation",
    "direction",
    "is_grouped",
    "iteration_count",
    "GradientDefinition",
    "GradientRef",
    "LiteralColor",
    "build_gradient",
    "resolve_fill",
    "CompiledSpinner",
    "Element",
    "Layout",
    "RandomDraws",
    "ShadowFilter",
    "compile_spinner",
    "compute_layout",
    "copy_offset",
    "CONCRETE_SHAPES",
    "BezierPathPrimitive",
    "CirclePrimitive",
    "PolygonPrimitive",
    "RectPrimitive",
    "build_primitive",
    "radius_at",
    "size_at",
]
