from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from .options import SketchOptions
from .ops import (
    CurveOp,
    EllipsePrimitive,
    LinePrimitive,
    MoveOp,
    OpSet,
    Primitive,
    RectanglePrimitive,
    SketchOp,
)


class SketchGenerator(Protocol):
    """Turns a primitive into hand-drawn-looking drawing operations.

    Implementations must be deterministic: identical geometry and options
    (including seed) yield identical ops.
    """

    def line(self, x1: float, y1: float, x2: float, y2: float, options: SketchOptions) -> OpSet:
        ...

    def rectangle(self, x: float, y: float, width: float, height: float, options: SketchOptions) -> tuple[OpSet, ...]:
        ...

    def ellipse(self, cx: float, cy: float, width: float, height: float, options: SketchOptions) -> OpSet:
        ...


def sketch_primitive(generator: SketchGenerator, primitive: Primitive, options: SketchOptions) -> tuple[OpSet, ...]:
    if isinstance(primitive, LinePrimitive):
        return (generator.line(primitive.x1, primitive.y1, primitive.x2, primitive.y2, options),)
    if isinstance(primitive, RectanglePrimitive):
        return tuple(generator.rectangle(primitive.x, primitive.y, primitive.width, primitive.height, options))
    if isinstance(primitive, EllipsePrimitive):
        return (generator.ellipse(primitive.cx, primitive.cy, primitive.width, primitive.height, options),)
    raise TypeError(f"unsupported primitive: {type(primitive).__name__}")


class RoughSketchGenerator:
    """Default sketch generator with rough.js-compatible stroke shapes.

    Lines are bowed cubic curves with jittered endpoints; unless multi-stroke
    is disabled each line is drawn twice. Ellipses are jittered point rings
    joined by a Catmull-Rom spline that overshoots its start.
    """

    def line(self, x1: float, y1: float, x2: float, y2: float, options: SketchOptions) -> OpSet:
        return OpSet(ops=tuple(_double_line(x1, y1, x2, y2, options)))

    def rectangle(self, x: float, y: float, width: float, height: float, options: SketchOptions) -> tuple[OpSet, ...]:
        corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        sides: list[OpSet] = []
        for i, (sx, sy) in enumerate(corners):
            ex, ey = corners[(i + 1) % len(corners)]
            sides.append(OpSet(ops=tuple(_double_line(sx, sy, ex, ey, options))))
        return tuple(sides)

    def ellipse(self, cx: float, cy: float, width: float, height: float, options: SketchOptions) -> OpSet:
        psq = math.sqrt(math.pi * 2 * math.sqrt(((width / 2) ** 2 + (height / 2) ** 2) / 2))
        step_count = max(options.curve_step_count, (options.curve_step_count / math.sqrt(200)) * psq)
        increment = (math.pi * 2) / step_count
        rx = abs(width / 2)
        ry = abs(height / 2)
        curve_fit_randomness = 1 - options.curve_fitting
        rx += _offset_opt(rx * curve_fit_randomness, options)
        ry += _offset_opt(ry * curve_fit_randomness, options)

        overlap = increment * _offset(0.1, _offset(0.4, 1, options), options)
        ops = _curve(_ellipse_points(increment, cx, cy, rx, ry, 1.0, overlap, options), options)
        if not options.disable_multi_stroke:
            ops.extend(_curve(_ellipse_points(increment, cx, cy, rx, ry, 1.5, 0.0, options), options))
        return OpSet(ops=tuple(ops))


def _offset(low: float, high: float, options: SketchOptions, roughness_gain: float = 1.0) -> float:
    return options.roughness * roughness_gain * (options.random() * (high - low) + low)


def _offset_opt(x: float, options: SketchOptions, roughness_gain: float = 1.0) -> float:
    return _offset(-x, x, options, roughness_gain)


def _double_line(x1: float, y1: float, x2: float, y2: float, options: SketchOptions) -> list[SketchOp]:
    ops = _line(x1, y1, x2, y2, options, overlay=False)
    if options.disable_multi_stroke:
        return ops
    return ops + _line(x1, y1, x2, y2, options, overlay=True)


def _line(x1: float, y1: float, x2: float, y2: float, options: SketchOptions, *, overlay: bool) -> list[SketchOp]:
    length_sq = (x1 - x2) ** 2 + (y1 - y2) ** 2
    length = math.sqrt(length_sq)
    if length < 200:
        gain = 1.0
    elif length > 500:
        gain = 0.4
    else:
        gain = -0.0016668 * length + 1.233334

    offset = options.max_randomness_offset or 0.0
    if offset * offset * 100 > length_sq:
        offset = length / 10
    half_offset = offset / 2
    diverge_point = 0.2 + options.random() * 0.2
    mid_disp_x = options.bowing * options.max_randomness_offset * (y2 - y1) / 200
    mid_disp_y = options.bowing * options.max_randomness_offset * (x1 - x2) / 200
    mid_disp_x = _offset_opt(mid_disp_x, options, gain)
    mid_disp_y = _offset_opt(mid_disp_y, options, gain)
    jitter = half_offset if overlay else offset

    def rand() -> float:
        return _offset_opt(jitter, options, gain)

    start_x = x1 + rand()
    start_y = y1 + rand()
    c1x = mid_disp_x + x1 + (x2 - x1) * diverge_point + rand()
    c1y = mid_disp_y + y1 + (y2 - y1) * diverge_point + rand()
    c2x = mid_disp_x + x1 + 2 * (x2 - x1) * diverge_point + rand()
    c2y = mid_disp_y + y1 + 2 * (y2 - y1) * diverge_point + rand()
    end_x = x2 + rand()
    end_y = y2 + rand()
    return [MoveOp(start_x, start_y), CurveOp(c1x, c1y, c2x, c2y, end_x, end_y)]


def _ellipse_points(
    increment: float,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    offset: float,
    overlap: float,
    options: SketchOptions,
) -> np.ndarray:
    rad_offset = _offset(-0.5, 0.5, options) - math.pi / 2
    angles: list[float] = []
    angle = rad_offset
    while angle < math.pi * 2 + rad_offset - 0.01:
        angles.append(angle)
        angle += increment

    # Lead-in point, the ring, then three closing points that overshoot the start.
    theta = np.asarray(
        [rad_offset - increment, *angles, rad_offset + math.pi * 2 + overlap * 0.5, rad_offset + overlap, rad_offset + overlap * 0.5],
        dtype=np.float64,
    )
    scale = np.ones_like(theta)
    scale[0] = 0.9
    scale[-2] = 0.98
    scale[-1] = 0.9
    base = np.column_stack((cx + scale * rx * np.cos(theta), cy + scale * ry * np.sin(theta)))
    jitter = np.asarray(
        [[_offset(-offset, offset, options), _offset(-offset, offset, options)] for _ in range(theta.size)],
        dtype=np.float64,
    )
    return base + jitter


def _curve(points: np.ndarray, options: SketchOptions) -> list[SketchOp]:
    count = len(points)
    if count < 4:
        return []
    s = 1 - options.curve_tightness
    ops: list[SketchOp] = [MoveOp(float(points[1][0]), float(points[1][1]))]
    for i in range(1, count - 2):
        prev, cur, nxt, after = points[i - 1], points[i], points[i + 1], points[i + 2]
        c1 = cur + (s * nxt - s * prev) / 6
        c2 = nxt + (s * cur - s * after) / 6
        ops.append(
            CurveOp(float(c1[0]), float(c1[1]), float(c2[0]), float(c2[1]), float(nxt[0]), float(nxt[1]))
        )
    return ops
