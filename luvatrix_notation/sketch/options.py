from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .rng import SeededRandom


StrokeClass = Literal["single", "double", "highlight"]
STROKE_CLASSES: tuple[StrokeClass, ...] = ("single", "double", "highlight")


@dataclass(frozen=True)
class SketchOptions:
    """Rendering style consumed by a sketch generator.

    Each instance owns its random source, seeded from `seed`, so every stroke
    drawn with the same options object continues one deterministic sequence.
    Equality ignores the random source state.
    """

    max_randomness_offset: float = 2.0
    roughness: float = 1.5
    bowing: float = 1.0
    stroke: str = "#000"
    stroke_width: float = 1.5
    curve_tightness: float = 0.0
    curve_fitting: float = 0.95
    curve_step_count: float = 9.0
    fill_style: str = "hachure"
    fill_weight: float = -1.0
    hachure_angle: float = -41.0
    hachure_gap: float = -1.0
    dash_offset: float = -1.0
    dash_gap: float = -1.0
    zigzag_offset: float = -1.0
    combine_nested_svg_paths: bool = False
    disable_multi_stroke: bool = True
    disable_multi_stroke_fill: bool = False
    seed: int = 0
    _randomizer: SeededRandom = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_randomizer", SeededRandom(self.seed))

    def random(self) -> float:
        return self._randomizer.next()


def resolve_sketch_options(stroke_class: StrokeClass, seed: int) -> SketchOptions:
    if stroke_class not in STROKE_CLASSES:
        raise ValueError(f"unknown stroke class: {stroke_class}")
    return SketchOptions(
        roughness=3.0 if stroke_class == "highlight" else 1.5,
        disable_multi_stroke=stroke_class != "double",
        seed=seed,
    )
