"""Sketch vocabulary: style presets, drawing ops, and the default generator."""

from .generator import RoughSketchGenerator, SketchGenerator, sketch_primitive
from .options import STROKE_CLASSES, SketchOptions, StrokeClass, resolve_sketch_options
from .ops import (
    CurveOp,
    EllipsePrimitive,
    LineOp,
    LinePrimitive,
    MoveOp,
    OpSet,
    Primitive,
    RectanglePrimitive,
    SketchOp,
)
from .rng import SeededRandom

__all__ = [
    "CurveOp",
    "EllipsePrimitive",
    "LineOp",
    "LinePrimitive",
    "MoveOp",
    "OpSet",
    "Primitive",
    "RectanglePrimitive",
    "RoughSketchGenerator",
    "STROKE_CLASSES",
    "SeededRandom",
    "SketchGenerator",
    "SketchOp",
    "SketchOptions",
    "StrokeClass",
    "resolve_sketch_options",
    "sketch_primitive",
]
