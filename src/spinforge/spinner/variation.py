"""Per-index radius and size variation policies."""

import math
from typing import Sequence

from ..config import RadiusVariation, SizeVariation
from ..constants import MIN_SIZE_FRACTION, UNEVEN_RADIUS_AMPLITUDE, UNEVEN_RADIUS_LOBES


def _sweep_ratio(index: int, count: int) -> float:
    # A single element sits at the start of the sweep
    span = count - 1
    return index / span if span > 0 else 0.0


def radius_at(
    variation: RadiusVariation,
    index: int,
    count: int,
    radius: float,
    random_factors: Sequence[float] = (),
) -> float:
    """
    Radius of the angular slot ``index`` out of ``count``.

    Args:
        variation: Radius variation policy
        index: Angular slot index
        count: Number of angular slots
        radius: Base radius
        random_factors: Per-slot factors drawn once per compile (random policy only)
    """
    if variation == RadiusVariation.UNEVEN:
        phase = (index / count) * 2 * math.pi * UNEVEN_RADIUS_LOBES
        return radius + math.sin(phase) * (radius * UNEVEN_RADIUS_AMPLITUDE)
    if variation == RadiusVariation.RANDOM:
        return radius * random_factors[index]
    return radius


def size_at(variation: SizeVariation, index: int, count: int, size: float) -> float:
    """Element size of the angular slot ``index`` out of ``count``."""
    ratio = _sweep_ratio(index, count)
    growth = size * (1 - MIN_SIZE_FRACTION)
    if variation == SizeVariation.SMALL_TO_LARGE:
        return size * MIN_SIZE_FRACTION + growth * ratio
    if variation == SizeVariation.LARGE_TO_SMALL:
        return size - growth * ratio
    return size
