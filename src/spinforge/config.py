"""Spinner configuration model and its JSON boundary."""

import json
import re
import uuid
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


class ConfigError(ValueError):
    """Raised when a configuration mapping cannot be turned into a SpinnerConfig."""
    pass


class ShapeType(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    LINE = "line"
    TRIANGLE = "triangle"
    STAR = "star"
    HEART = "heart"
    RANDOM = "random"


class AnimationType(str, Enum):
    NONE = "none"
    CHASE = "chase"
    PULSE = "pulse"
    WAVE = "wave"
    ORBIT = "orbit"
    DISTORT = "distort"
    FADE = "fade"
    SPIRAL = "spiral"


class Easing(str, Enum):
    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    SPRING = "spring"
    EASE_IN_BACK = "ease-in-back"

    @property
    def css(self) -> str:
        """CSS timing function for this easing."""
        return _EASING_CSS.get(self, self.value)


_EASING_CSS = {
    Easing.SPRING: "cubic-bezier(0.68, -0.55, 0.27, 1.55)",
    Easing.EASE_IN_BACK: "cubic-bezier(0.36, 0, 0.66, -0.56)",
}


class SizeVariation(str, Enum):
    NONE = "none"
    SMALL_TO_LARGE = "sm-lg"
    LARGE_TO_SMALL = "lg-sm"


class RadiusVariation(str, Enum):
    EVEN = "even"
    UNEVEN = "uneven"
    RANDOM = "random"


class PlaybackMode(str, Enum):
    LOOP = "loop"
    ONCE = "once"
    REPEAT = "repeat"
    ALTERNATE = "alternate"


class GradientType(str, Enum):
    PER_DUPLICATE = "per-duplicate"
    LINEAR = "linear"
    RADIAL = "radial"
    SWEEP = "sweep"
    NONE = "none"  # single color

    @property
    def is_continuous(self) -> bool:
        return self in (GradientType.LINEAR, GradientType.RADIAL)


def new_stop_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ColorStop:
    id: str
    color: str
    position: float  # 0-100


@dataclass(frozen=True)
class SpinnerConfig:
    """Immutable description of one spinner."""

    shape: ShapeType = ShapeType.CIRCLE
    count: int = 12
    size: float = 15
    radius: float = 80
    colors: tuple[str, ...] = ("#6366f1", "#a5b4fc")
    gradient_stops: tuple[ColorStop, ...] = (
        ColorStop(id="stop-start", color="#6366f1", position=0),
        ColorStop(id="stop-end", color="#a5b4fc", position=100),
    )
    animation_type: AnimationType = AnimationType.NONE
    duration: float = 1.5
    stagger: float = 0.1
    easing: Easing = Easing.EASE_IN_OUT
    copies: int = 2
    copy_spread: float = 10
    size_variation: SizeVariation = SizeVariation.NONE
    radius_variation: RadiusVariation = RadiusVariation.EVEN
    gradient_type: GradientType = GradientType.PER_DUPLICATE
    playback_mode: PlaybackMode = PlaybackMode.LOOP
    repeat_count: int = 3
    shadow: bool = False
    shadow_offset_x: float = 2
    shadow_offset_y: float = 3
    shadow_blur: float = 3
    shadow_color: str = "#000000"
    shadow_opacity: float = 0.3
    background_blur: float = 0
    stroke: bool = False
    stroke_width: float = 2
    stroke_color: str = "#ffffff"


DEFAULT_CONFIG = SpinnerConfig()

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "shape": ShapeType,
    "animation_type": AnimationType,
    "easing": Easing,
    "size_variation": SizeVariation,
    "radius_variation": RadiusVariation,
    "gradient_type": GradientType,
    "playback_mode": PlaybackMode,
}
_INT_FIELDS = {"count", "copies", "repeat_count"}
_BOOL_FIELDS = {"shadow", "stroke"}
_STR_FIELDS = {"shadow_color", "stroke_color"}
_FIELD_NAMES = {f.name for f in fields(SpinnerConfig)}
_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _camel_case(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def parse_easing(value: Any) -> Easing:
    """Parse an easing identifier, also accepting its CSS timing function."""
    if isinstance(value, Easing):
        return value
    text = str(value).strip()
    for easing in Easing:
        if text in (easing.value, easing.css):
            return easing
    available = ", ".join(easing.value for easing in Easing)
    raise ConfigError(f"Unknown easing '{value}'. Available: {available}")


def _parse_enum(name: str, value: Any) -> Enum:
    if name == "easing":
        return parse_easing(value)
    enum_type = _ENUM_FIELDS[name]
    try:
        return enum_type(value)
    except ValueError:
        available = ", ".join(member.value for member in enum_type)
        raise ConfigError(f"Unknown {name} '{value}'. Available: {available}")


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "1", "yes", "on"):
        return True
    if isinstance(value, str) and value.lower() in ("false", "0", "no", "off"):
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _parse_number(name: str, value: Any) -> float | int:
    try:
        if name in _INT_FIELDS:
            return int(value)
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid number for {name}: {value!r}")


def _parse_stops(value: Any) -> tuple[ColorStop, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigError("gradient_stops must be a list")
    stops = []
    for raw in value:
        if isinstance(raw, ColorStop):
            stops.append(raw)
            continue
        if not isinstance(raw, Mapping) or "color" not in raw:
            raise ConfigError(f"Invalid gradient stop: {raw!r}")
        stops.append(
            ColorStop(
                id=str(raw.get("id") or new_stop_id()),
                color=str(raw["color"]),
                position=_parse_number("position", raw.get("position", 0)),
            )
        )
    return tuple(sorted(stops, key=lambda stop: stop.position))


def parse_field(name: str, value: Any) -> Any:
    """Convert one raw (JSON or command-line) value for a SpinnerConfig field."""
    if name in _ENUM_FIELDS:
        return _parse_enum(name, value)
    if name in _BOOL_FIELDS:
        return _parse_bool(name, value)
    if name in _STR_FIELDS:
        return str(value)
    if name == "colors":
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        if not isinstance(value, (list, tuple)):
            raise ConfigError("colors must be a list")
        return tuple(str(color) for color in value)
    if name == "gradient_stops":
        return _parse_stops(value)
    if name in _FIELD_NAMES:
        return _parse_number(name, value)
    raise ConfigError(f"Unknown configuration field '{name}'")


def normalize_key(key: str) -> str:
    """Map a camelCase or snake_case key onto a SpinnerConfig field name."""
    name = _snake_case(key.replace("-", "_"))
    if name not in _FIELD_NAMES:
        raise ConfigError(f"Unknown configuration field '{key}'")
    return name


def config_from_dict(data: Mapping[str, Any], base: SpinnerConfig = DEFAULT_CONFIG) -> SpinnerConfig:
    """
    Build a SpinnerConfig from a mapping.

    Keys may use the camelCase names of the web designer or snake_case
    field names. Missing keys keep the value from ``base``.

    Raises:
        ConfigError: If a key or value cannot be parsed
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration must be a JSON object")
    values = {f.name: getattr(base, f.name) for f in fields(SpinnerConfig)}
    for key, value in data.items():
        name = normalize_key(key)
        values[name] = parse_field(name, value)
    return SpinnerConfig(**values)


def config_to_dict(config: SpinnerConfig, camel_case: bool = True) -> dict[str, Any]:
    """Serialize a SpinnerConfig to JSON-compatible data."""
    data: dict[str, Any] = {}
    for f in fields(SpinnerConfig):
        value = getattr(config, f.name)
        if isinstance(value, Enum):
            value = value.value
        elif f.name == "colors":
            value = list(value)
        elif f.name == "gradient_stops":
            value = [
                {"id": stop.id, "color": stop.color, "position": stop.position}
                for stop in value
            ]
        data[_camel_case(f.name) if camel_case else f.name] = value
    return data


def load_config(path: str | Path) -> SpinnerConfig:
    """Load a SpinnerConfig from a JSON file."""
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in '{path}': {e}")
    return config_from_dict(data)
