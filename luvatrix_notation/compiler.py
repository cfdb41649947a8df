from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from .model import FullPadding, Rect
from .sketch.options import StrokeClass
from .sketch.ops import EllipsePrimitive, LinePrimitive, Primitive, RectanglePrimitive

LOGGER = logging.getLogger(__name__)
HIGHLIGHT_HEIGHT_RATIO = 0.95


@dataclass(frozen=True)
class StrokeRequest:
    primitive: Primitive
    stroke_class: StrokeClass
    seed: int


@dataclass(frozen=True)
class CompiledAnnotation:
    """Ordered strokes for one annotation plus the stroke width to paint them with."""

    strokes: tuple[StrokeRequest, ...]
    stroke_width: float


StrokePlanner = Callable[[Rect, FullPadding, int, float, int], CompiledAnnotation]


def _alternating_lines(
    start: tuple[float, float],
    end: tuple[float, float],
    iterations: int,
    stroke_class: StrokeClass,
    seed: int,
) -> list[StrokeRequest]:
    # Even passes run start->end, odd passes run back.
    strokes: list[StrokeRequest] = []
    for i in range(iterations):
        a, b = (start, end) if i % 2 == 0 else (end, start)
        strokes.append(StrokeRequest(LinePrimitive(a[0], a[1], b[0], b[1]), stroke_class, seed))
    return strokes


def plan_underline(rect: Rect, padding: FullPadding, iterations: int, stroke_width: float, seed: int) -> CompiledAnnotation:
    y = rect.y + rect.h + padding[2]
    strokes = _alternating_lines((rect.x, y), (rect.x + rect.w, y), iterations, "single", seed)
    return CompiledAnnotation(strokes=tuple(strokes), stroke_width=stroke_width)


def plan_strike_through(rect: Rect, padding: FullPadding, iterations: int, stroke_width: float, seed: int) -> CompiledAnnotation:
    y = rect.y + rect.h / 2
    strokes = _alternating_lines((rect.x, y), (rect.x + rect.w, y), iterations, "single", seed)
    return CompiledAnnotation(strokes=tuple(strokes), stroke_width=stroke_width)


def plan_box(rect: Rect, padding: FullPadding, iterations: int, stroke_width: float, seed: int) -> CompiledAnnotation:
    top, right, bottom, left = padding
    box = RectanglePrimitive(
        x=rect.x - left,
        y=rect.y - top,
        width=rect.w + left + right,
        height=rect.h + top + bottom,
    )
    strokes = tuple(StrokeRequest(box, "single", seed) for _ in range(iterations))
    return CompiledAnnotation(strokes=strokes, stroke_width=stroke_width)


def plan_crossed_off(rect: Rect, padding: FullPadding, iterations: int, stroke_width: float, seed: int) -> CompiledAnnotation:
    x, y = rect.x, rect.y
    x2, y2 = x + rect.w, y + rect.h
    strokes = _alternating_lines((x, y), (x2, y2), iterations, "single", seed)
    strokes += _alternating_lines((x2, y), (x, y2), iterations, "single", seed)
    return CompiledAnnotation(strokes=tuple(strokes), stroke_width=stroke_width)


def plan_circle(rect: Rect, padding: FullPadding, iterations: int, stroke_width: float, seed: int) -> CompiledAnnotation:
    top, right, bottom, left = padding
    width = rect.w + left + right
    height = rect.h + top + bottom
    ellipse = EllipsePrimitive(
        cx=rect.x - left + width / 2,
        cy=rect.y - top + height / 2,
        width=width,
        height=height,
    )
    double_passes = max(iterations, 0) // 2
    single_passes = max(iterations - double_passes * 2, 0)
    strokes = [StrokeRequest(ellipse, "double", seed) for _ in range(double_passes)]
    strokes += [StrokeRequest(ellipse, "single", seed) for _ in range(single_passes)]
    return CompiledAnnotation(strokes=tuple(strokes), stroke_width=stroke_width)


def plan_highlight(rect: Rect, padding: FullPadding, iterations: int, stroke_width: float, seed: int) -> CompiledAnnotation:
    y = rect.y + rect.h / 2
    strokes = _alternating_lines((rect.x, y), (rect.x + rect.w, y), iterations, "highlight", seed)
    return CompiledAnnotation(strokes=tuple(strokes), stroke_width=rect.h * HIGHLIGHT_HEIGHT_RATIO)


STROKE_PLANNERS: dict[str, StrokePlanner] = {
    "underline": plan_underline,
    "strike-through": plan_strike_through,
    "box": plan_box,
    "crossed-off": plan_crossed_off,
    "circle": plan_circle,
    "highlight": plan_highlight,
}


def compile_annotation(
    kind: str,
    rect: Rect,
    padding: FullPadding,
    iterations: int,
    stroke_width: float,
    seed: int,
) -> CompiledAnnotation:
    planner = STROKE_PLANNERS.get(kind)
    if planner is None:
        LOGGER.warning("unknown annotation type %r; nothing will be drawn", kind)
        return CompiledAnnotation(strokes=(), stroke_width=stroke_width)
    # Planners emit nothing for iterations <= 0.
    return planner(rect, padding, iterations, stroke_width, seed)
