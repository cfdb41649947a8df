from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Union


AnnotationType = Literal["underline", "box", "circle", "highlight", "strike-through", "crossed-off"]
ANNOTATION_TYPES: tuple[AnnotationType, ...] = (
    "underline",
    "box",
    "circle",
    "highlight",
    "strike-through",
    "crossed-off",
)

FullPadding = tuple[float, float, float, float]
RoughPadding = Union[float, Sequence[float], None]

SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_ANIMATION_DURATION = 800.0
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_ITERATIONS = 2
DEFAULT_COLOR = "currentColor"
DASH_KEYFRAMES_NAME = "rough-notation-dash"


@dataclass(frozen=True)
class Rect:
    """Target region in surface coordinates."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class AnnotationConfig:
    """Caller-facing annotation options.

    Unset fields resolve to library defaults through the `effective_*`
    properties; the raw values are kept so callers can tell "unset" from
    an explicit value.
    """

    type: str
    color: str | None = None
    stroke_width: float | None = None
    padding: RoughPadding = None
    animate: bool | None = None
    animation_duration: float | None = None
    iterations: int | None = None

    @property
    def effective_color(self) -> str:
        return self.color or DEFAULT_COLOR

    @property
    def effective_stroke_width(self) -> float:
        return self.stroke_width or DEFAULT_STROKE_WIDTH

    @property
    def effective_animate(self) -> bool:
        return True if self.animate is None else bool(self.animate)

    @property
    def effective_iterations(self) -> int:
        # An explicit 0 (or negative) count means "draw nothing".
        return DEFAULT_ITERATIONS if self.iterations is None else int(self.iterations)

    @property
    def effective_animation_duration(self) -> float:
        if self.animation_duration == 0:
            return 0.0
        return float(self.animation_duration or DEFAULT_ANIMATION_DURATION)
