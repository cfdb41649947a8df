from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class AnimationPlan:
    """Per-path draw-on timing, in milliseconds."""

    duration: float
    delay: float


def schedule_animation(lengths: Sequence[float], total_duration: float, start_delay: float = 0.0) -> list[AnimationPlan]:
    """Split `total_duration` across paths in proportion to their length.

    Paths reveal one after another: each starts when the previous finishes,
    so the whole set completes `total_duration` ms after `start_delay`.
    """

    total_length = float(sum(lengths))
    plans: list[AnimationPlan] = []
    offset = 0.0
    for length in lengths:
        duration = total_duration * (length / total_length) if total_length else 0.0
        plans.append(AnimationPlan(duration=duration, delay=start_delay + offset))
        offset += duration
    return plans


def total_duration(plans: Sequence[AnimationPlan]) -> float:
    return float(sum(plan.duration for plan in plans))
