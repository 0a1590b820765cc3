"""Fill color resolution for spinner elements."""

from dataclasses import dataclass
from typing import Sequence, Union

from ..config import ColorStop, GradientType, SpinnerConfig
from ..constants import DEFAULT_FILL_COLOR, GRADIENT_ID, MAX_GRADIENT_STOPS, MIN_GRADIENT_STOPS


@dataclass(frozen=True)
class GradientDefinition:
    """The single document-level gradient (linear or radial)."""

    kind: GradientType
    stops: tuple[ColorStop, ...]
    id: str = GRADIENT_ID


@dataclass(frozen=True)
class LiteralColor:
    color: str


@dataclass(frozen=True)
class GradientRef:
    """Fill that resolves against the document-level gradient definition."""

    gradient: GradientDefinition

    @property
    def kind(self) -> GradientType:
        return self.gradient.kind

    @property
    def stops(self) -> tuple[ColorStop, ...]:
        return self.gradient.stops


Fill = Union[LiteralColor, GradientRef]


def build_gradient(config: SpinnerConfig) -> GradientDefinition | None:
    """Build the gradient definition when the color mode is continuous."""
    if not config.gradient_type.is_continuous:
        return None
    stops = sorted(config.gradient_stops, key=lambda stop: stop.position)[:MAX_GRADIENT_STOPS]
    # A short stop list is padded so every gradient has both ends
    while len(stops) < MIN_GRADIENT_STOPS:
        color = stops[-1].color if stops else pick_color(config.colors, 0)
        stops.append(ColorStop(id=f"{GRADIENT_ID}-pad-{len(stops)}", color=color, position=100))
    return GradientDefinition(kind=config.gradient_type, stops=tuple(stops))


def pick_color(colors: Sequence[str], position: int) -> str:
    """Cyclic color lookup that never fails: colors[k] -> colors[0] -> default."""
    if not colors:
        return DEFAULT_FILL_COLOR
    return colors[position % len(colors)] or colors[0] or DEFAULT_FILL_COLOR


def resolve_fill(
    index: int,
    duplicate_index: int,
    colors: Sequence[str],
    gradient: GradientDefinition | None,
    gradient_type: GradientType,
) -> Fill:
    """
    Resolve the fill of one element.

    Args:
        index: Angular slot index
        duplicate_index: Duplicate index within the slot
        colors: Configured flat colors
        gradient: Document gradient (required for linear/radial modes)
        gradient_type: Color resolution mode
    """
    if gradient_type == GradientType.PER_DUPLICATE:
        return LiteralColor(pick_color(colors, duplicate_index))
    if gradient_type == GradientType.SWEEP:
        return LiteralColor(pick_color(colors, index))
    if gradient_type.is_continuous and gradient is not None:
        return GradientRef(gradient)
    return LiteralColor(pick_color(colors, 0))
