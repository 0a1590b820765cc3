"""Geometry engine: compile a spinner configuration into positioned elements."""

import math
import random
from dataclasses import dataclass

from ..config import RadiusVariation, ShapeType, SpinnerConfig
from ..constants import RANDOM_RADIUS_MIN, RANDOM_RADIUS_SPAN, SHADOW_FILTER_ID
from .animation import AnimationDescriptor, bind_element_animation, bind_group_animation
from .colors import Fill, GradientDefinition, build_gradient, resolve_fill
from .shapes import Primitive, build_primitive, sample_shapes
from .variation import radius_at, size_at


@dataclass(frozen=True)
class Element:
    """One fully resolved drawable."""

    index: int
    duplicate_index: int
    shape: ShapeType
    center: tuple[float, float]
    radius: float  # distance of the center from the spinner origin
    size: float
    rotation: float  # degrees; non-zero for lines only
    fill: Fill
    stroke_color: str | None
    stroke_width: float
    animation: AnimationDescriptor | None
    primitive: Primitive


@dataclass(frozen=True)
class Layout:
    """Square viewport centered on the spinner origin."""

    max_copy_offset: float
    effective_radius: float
    extent: float

    @property
    def origin(self) -> float:
        return -self.extent / 2


@dataclass(frozen=True)
class ShadowFilter:
    dx: float
    dy: float
    blur: float
    color: str
    opacity: float
    id: str = SHADOW_FILTER_ID


@dataclass(frozen=True)
class RandomDraws:
    """Random values sampled once per compile and shared by every element."""

    radius_factors: tuple[float, ...] = ()
    shapes: tuple[ShapeType, ...] = ()


@dataclass(frozen=True)
class CompiledSpinner:
    elements: tuple[Element, ...]
    layout: Layout
    gradient: GradientDefinition | None
    shadow: ShadowFilter | None
    group_animation: AnimationDescriptor | None
    random_draws: RandomDraws
    seed: int | None

    @property
    def is_animated(self) -> bool:
        return self.group_animation is not None or any(
            element.animation is not None for element in self.elements
        )


def copy_offset(duplicate_index: int, copies: int, copy_spread: float) -> float:
    """Radial offset of one duplicate; duplicates are centered on the base radius."""
    if copies <= 1:
        return 0.0
    return (duplicate_index - (copies - 1) / 2) * copy_spread


def compute_layout(config: SpinnerConfig) -> Layout:
    """Viewport sizing every emitter shares to avoid clipping."""
    max_copy_offset = ((config.copies - 1) / 2) * config.copy_spread if config.copies > 1 else 0.0
    effective_radius = config.radius + max_copy_offset
    return Layout(
        max_copy_offset=max_copy_offset,
        effective_radius=effective_radius,
        extent=effective_radius * 2 + config.size * 2,
    )


def build_shadow(config: SpinnerConfig) -> ShadowFilter | None:
    if not config.shadow:
        return None
    return ShadowFilter(
        dx=config.shadow_offset_x,
        dy=config.shadow_offset_y,
        blur=config.shadow_blur,
        color=config.shadow_color,
        opacity=config.shadow_opacity,
    )


def uses_randomness(config: SpinnerConfig) -> bool:
    return config.shape == ShapeType.RANDOM or config.radius_variation == RadiusVariation.RANDOM


def draw_random_values(config: SpinnerConfig, rng: random.Random) -> RandomDraws:
    """Sample the random radius factors and shapes the configuration needs."""
    # Independent streams so enabling one random feature never shifts the other
    radius_rng = random.Random(rng.getrandbits(64))
    shape_rng = random.Random(rng.getrandbits(64))

    radius_factors: tuple[float, ...] = ()
    if config.radius_variation == RadiusVariation.RANDOM:
        radius_factors = tuple(
            RANDOM_RADIUS_MIN + radius_rng.random() * RANDOM_RADIUS_SPAN
            for _ in range(config.count)
        )

    shapes: tuple[ShapeType, ...] = ()
    if config.shape == ShapeType.RANDOM:
        shapes = sample_shapes(shape_rng, config.count * config.copies)

    return RandomDraws(radius_factors=radius_factors, shapes=shapes)


def compile_spinner(
    config: SpinnerConfig,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> CompiledSpinner:
    """
    Compile a configuration into elements and layout metadata.

    Elements are ordered by angular slot, then by duplicate. Random values
    are drawn exactly once per call; pass the returned ``seed`` back in to
    reproduce a compile that used random features. Configurations without
    random features never draw and compile with ``seed=None``.

    Args:
        config: Spinner configuration
        seed: Optional deterministic seed for random-driven features
        rng: Optional random source (takes precedence over ``seed``)

    Returns:
        The compiled spinner
    """
    if uses_randomness(config):
        if rng is None:
            if seed is None:
                seed = random.Random().getrandbits(64)
            rng = random.Random(seed)
        draws = draw_random_values(config, rng)
    else:
        seed = None
        draws = RandomDraws()
    gradient = build_gradient(config)
    stroke_color = config.stroke_color if config.stroke else None
    stroke_width = config.stroke_width if config.stroke else 0

    elements: list[Element] = []
    for i in range(config.count):
        slot_radius = radius_at(
            config.radius_variation, i, config.count, config.radius, draws.radius_factors
        )
        slot_size = size_at(config.size_variation, i, config.count, config.size)
        angle = (i / config.count) * 2 * math.pi
        animation = bind_element_animation(config, i)

        for j in range(config.copies):
            final_radius = slot_radius + copy_offset(j, config.copies, config.copy_spread)
            x = final_radius * math.cos(angle)
            y = final_radius * math.sin(angle)
            shape = draws.shapes[i * config.copies + j] if draws.shapes else config.shape
            rotation = math.degrees(angle) if shape == ShapeType.LINE else 0.0

            elements.append(
                Element(
                    index=i,
                    duplicate_index=j,
                    shape=shape,
                    center=(x, y),
                    radius=final_radius,
                    size=slot_size,
                    rotation=rotation,
                    fill=resolve_fill(i, j, config.colors, gradient, config.gradient_type),
                    stroke_color=stroke_color,
                    stroke_width=stroke_width,
                    animation=animation,
                    primitive=build_primitive(shape, x, y, slot_size, rotation),
                )
            )

    return CompiledSpinner(
        elements=tuple(elements),
        layout=compute_layout(config),
        gradient=gradient,
        shadow=build_shadow(config),
        group_animation=bind_group_animation(config),
        random_draws=draws,
        seed=seed,
    )
