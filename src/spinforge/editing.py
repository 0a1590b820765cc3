"""State transitions that keep a configuration's auxiliary arrays in sync.

These belong to the control layer: the compiler never calls them. Each
transition takes a configuration and returns a new one.
"""

from dataclasses import replace
from typing import Any

from .constants import MAX_GRADIENT_STOPS, MIN_GRADIENT_STOPS
from .config import ColorStop, GradientType, SpinnerConfig, new_stop_id, parse_field

_PAD_COLOR = "#ffffff"


def _sorted_stops(stops: list[ColorStop] | tuple[ColorStop, ...]) -> tuple[ColorStop, ...]:
    return tuple(sorted(stops, key=lambda stop: stop.position))


def _pad_colors(colors: list[str], length: int) -> tuple[str, ...]:
    padded = list(colors[:length])
    last_color = padded[-1] if padded else _PAD_COLOR
    while len(padded) < length:
        padded.append(last_color)
    return tuple(padded)


def set_copies(config: SpinnerConfig, copies: int) -> SpinnerConfig:
    """Change the duplicate count, growing or truncating the per-copy colors."""
    return replace(config, copies=copies, colors=_pad_colors(list(config.colors), copies))


def set_gradient_type(config: SpinnerConfig, gradient_type: GradientType) -> SpinnerConfig:
    """Switch color mode, converting between flat colors and gradient stops."""
    entering = gradient_type.is_continuous and not config.gradient_type.is_continuous
    leaving = config.gradient_type.is_continuous and not gradient_type.is_continuous
    updated = replace(config, gradient_type=gradient_type)

    if entering:
        colors = config.colors
        last = len(colors) - 1
        stops = [
            ColorStop(
                id=new_stop_id(),
                color=color,
                position=round(index / last * 100) if last > 0 else 50,
            )
            for index, color in enumerate(colors)
        ]
        # One flat color cannot form a gradient on its own
        if len(stops) < MIN_GRADIENT_STOPS:
            stops.append(ColorStop(id=new_stop_id(), color=_PAD_COLOR, position=100))
        return replace(updated, gradient_stops=_sorted_stops(stops[:MAX_GRADIENT_STOPS]))

    if leaving:
        stop_colors = [stop.color for stop in config.gradient_stops]
        return replace(updated, colors=_pad_colors(stop_colors, max(config.copies, 1)))

    return updated


def set_color(config: SpinnerConfig, index: int, color: str) -> SpinnerConfig:
    colors = list(config.colors)
    colors[index] = color
    return replace(config, colors=tuple(colors))


def update_gradient_stop(
    config: SpinnerConfig,
    stop_id: str,
    color: str | None = None,
    position: float | None = None,
) -> SpinnerConfig:
    """Edit one gradient stop by id and keep the list ordered by position."""
    stops = []
    for stop in config.gradient_stops:
        if stop.id == stop_id:
            stop = replace(
                stop,
                color=stop.color if color is None else color,
                position=stop.position if position is None else position,
            )
        stops.append(stop)
    return replace(config, gradient_stops=_sorted_stops(stops))


def add_gradient_stop(config: SpinnerConfig) -> SpinnerConfig:
    """Add a white stop in the middle of the gradient, up to the stop limit."""
    if len(config.gradient_stops) >= MAX_GRADIENT_STOPS:
        return config
    stop = ColorStop(id=new_stop_id(), color=_PAD_COLOR, position=50)
    return replace(config, gradient_stops=_sorted_stops([*config.gradient_stops, stop]))


def remove_gradient_stop(config: SpinnerConfig, stop_id: str) -> SpinnerConfig:
    """Remove a gradient stop, never going below two stops."""
    if len(config.gradient_stops) <= MIN_GRADIENT_STOPS:
        return config
    stops = tuple(stop for stop in config.gradient_stops if stop.id != stop_id)
    return replace(config, gradient_stops=stops)


def apply_overrides(config: SpinnerConfig, overrides: dict[str, Any]) -> SpinnerConfig:
    """
    Apply field overrides the way the control panel would.

    Args:
        config: Configuration to start from
        overrides: Field name to raw value (strings are parsed)

    Returns:
        The updated configuration
    """
    updated = config
    for name, raw_value in overrides.items():
        value = parse_field(name, raw_value)
        if name == "copies":
            updated = set_copies(updated, value)
        elif name == "gradient_type":
            updated = set_gradient_type(updated, value)
        else:
            updated = replace(updated, **{name: value})
    return updated
