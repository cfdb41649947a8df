from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


OpKind = Literal["move", "lineTo", "bcurveTo"]


@dataclass(frozen=True)
class MoveOp:
    x: float
    y: float
    op: OpKind = "move"


@dataclass(frozen=True)
class LineOp:
    x: float
    y: float
    op: OpKind = "lineTo"


@dataclass(frozen=True)
class CurveOp:
    """Cubic bezier segment: two control points, then the end point."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    op: OpKind = "bcurveTo"


SketchOp: TypeAlias = MoveOp | LineOp | CurveOp


@dataclass(frozen=True)
class OpSet:
    """One drawing produced by the sketch generator."""

    ops: tuple[SketchOp, ...]


@dataclass(frozen=True)
class LinePrimitive:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RectanglePrimitive:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class EllipsePrimitive:
    """Ellipse given by its center and full width/height."""

    cx: float
    cy: float
    width: float
    height: float


Primitive: TypeAlias = LinePrimitive | RectanglePrimitive | EllipsePrimitive
