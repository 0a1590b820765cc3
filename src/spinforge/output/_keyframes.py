"""Keyframe stylesheet bodies, one per animation kind."""

from typing import Literal

from ..config import AnimationType, ShapeType
from ..constants import DISTORT_SQUARE_RX, WAVE_LIFT
from ._svg_shared import fmt_num

KeyframeTarget = Literal["svg", "box"]

# Animations whose keyframes write the CSS transform property
TRANSFORM_ANIMATIONS: frozenset[AnimationType] = frozenset(
    {
        AnimationType.CHASE,
        AnimationType.PULSE,
        AnimationType.WAVE,
        AnimationType.ORBIT,
        AnimationType.DISTORT,
        AnimationType.SPIRAL,
    }
)


def keyframes_css(
    animation_type: AnimationType,
    shape: ShapeType,
    target: KeyframeTarget = "svg",
    wave_lift: float = WAVE_LIFT,
) -> str:
    """
    Build the ``@keyframes`` rule for an animation kind.

    Args:
        animation_type: Active animation kind
        shape: Configured shape (squares distort differently)
        target: ``svg`` for vector primitives, ``box`` for HTML boxes
        wave_lift: Rise of the wave animation in target units

    Returns:
        The keyframes rule, or an empty string for ``none``
    """
    if animation_type == AnimationType.CHASE:
        return (
            "@keyframes chase { 0% { transform: scale(1); opacity: 1; } "
            "50% { transform: scale(0.3); opacity: 0.3; } "
            "100% { transform: scale(1); opacity: 1; } }"
        )
    if animation_type == AnimationType.PULSE:
        return (
            "@keyframes pulse { 0%, 100% { transform: scale(1); } "
            "50% { transform: scale(1.3); } }"
        )
    if animation_type == AnimationType.WAVE:
        return (
            "@keyframes wave { 0%, 100% { transform: translateY(0); } "
            f"50% {{ transform: translateY(-{fmt_num(wave_lift)}px); }} }}"
        )
    if animation_type == AnimationType.ORBIT:
        return (
            "@keyframes orbit { from { transform: rotate(0deg); } "
            "to { transform: rotate(360deg); } }"
        )
    if animation_type == AnimationType.SPIRAL:
        return (
            "@keyframes spiral { from { transform: rotate(0deg) scale(1); opacity: 1; } "
            "to { transform: rotate(360deg) scale(0); opacity: 0; } }"
        )
    if animation_type == AnimationType.FADE:
        return (
            "@keyframes fade { 0% { opacity: 1; } 50% { opacity: 0.2; } "
            "100% { opacity: 1; } }"
        )
    if animation_type == AnimationType.DISTORT:
        return _distort_keyframes(shape, target)
    return ""


def _distort_keyframes(shape: ShapeType, target: KeyframeTarget) -> str:
    if shape == ShapeType.SQUARE and target == "box":
        return (
            "@keyframes distort { 0%, 100% { border-radius: 0; transform: rotate(0deg) scale(1); } "
            "50% { border-radius: 50%; transform: rotate(180deg) scale(0.7); } }"
        )
    if shape == ShapeType.SQUARE:
        return (
            "@keyframes distort { 0%, 100% { rx: 0; transform: rotate(0deg) scale(1); } "
            f"50% {{ rx: {DISTORT_SQUARE_RX}; transform: rotate(180deg) scale(0.7); }} }}"
        )
    return (
        "@keyframes distort { 0%, 100% { transform: scale(1) skew(0); } "
        "50% { transform: scale(0.7) skew(30deg); } }"
    )
