"""Animation parameter derivation for elements and the element group."""

from dataclasses import dataclass
from typing import Literal, Union

from ..config import AnimationType, Easing, PlaybackMode, SpinnerConfig

INFINITE = "infinite"
IterationCount = Union[int, Literal["infinite"]]
AnimationSubject = Literal["element", "group"]
Direction = Literal["normal", "alternate"]

GROUP_ANIMATIONS: frozenset[AnimationType] = frozenset(
    {AnimationType.ORBIT, AnimationType.SPIRAL}
)


@dataclass(frozen=True)
class AnimationDescriptor:
    subject: AnimationSubject
    name: AnimationType
    duration_seconds: float
    easing: Easing
    iteration_count: IterationCount
    direction: Direction
    delay_seconds: float = 0.0


def iteration_count(mode: PlaybackMode, repeat_count: int) -> IterationCount:
    if mode in (PlaybackMode.LOOP, PlaybackMode.ALTERNATE):
        return INFINITE
    if mode == PlaybackMode.ONCE:
        return 1
    return repeat_count


def direction(mode: PlaybackMode) -> Direction:
    return "alternate" if mode == PlaybackMode.ALTERNATE else "normal"


def is_grouped(animation_type: AnimationType) -> bool:
    """Whether the animation moves the whole element collection as one unit."""
    return animation_type in GROUP_ANIMATIONS


def _descriptor(
    config: SpinnerConfig, subject: AnimationSubject, delay_seconds: float
) -> AnimationDescriptor:
    return AnimationDescriptor(
        subject=subject,
        name=config.animation_type,
        duration_seconds=config.duration,
        easing=config.easing,
        iteration_count=iteration_count(config.playback_mode, config.repeat_count),
        direction=direction(config.playback_mode),
        delay_seconds=delay_seconds,
    )


def bind_element_animation(config: SpinnerConfig, index: int) -> AnimationDescriptor | None:
    """Per-element animation for angular slot ``index``; None when grouped or static."""
    if config.animation_type == AnimationType.NONE or is_grouped(config.animation_type):
        return None
    return _descriptor(config, "element", index * config.stagger)


def bind_group_animation(config: SpinnerConfig) -> AnimationDescriptor | None:
    """Single animation for the element group; None unless the kind is grouped."""
    if not is_grouped(config.animation_type):
        return None
    return _descriptor(config, "group", 0.0)
