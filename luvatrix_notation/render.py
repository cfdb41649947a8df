from __future__ import annotations

from dataclasses import dataclass
import logging

from .compiler import CompiledAnnotation, StrokeRequest, compile_annotation
from .model import DASH_KEYFRAMES_NAME, AnnotationConfig, Rect
from .padding import parse_padding
from .paths import format_number, ops_to_paths
from .schedule import AnimationPlan, schedule_animation, total_duration
from .sketch.generator import RoughSketchGenerator, SketchGenerator, sketch_primitive
from .sketch.options import SketchOptions, StrokeClass, resolve_sketch_options
from .sketch.ops import OpSet
from .surface import Surface

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    handles: tuple[int, ...]
    paths: tuple[str, ...]
    lengths: tuple[float, ...]
    plans: tuple[AnimationPlan, ...]
    stroke_width: float

    @property
    def duration(self) -> float:
        return total_duration(self.plans)


def render_annotation(
    surface: Surface,
    rect: Rect,
    config: AnnotationConfig,
    animation_group_delay: float,
    seed: int,
    *,
    generator: SketchGenerator | None = None,
) -> RenderResult:
    """Draw one annotation onto `surface` as sketched, optionally animated paths."""

    padding = parse_padding(config.padding)
    compiled = compile_annotation(
        config.type,
        rect,
        padding,
        config.effective_iterations,
        config.effective_stroke_width,
        seed,
    )
    drawings = sketch_strokes(compiled, generator or RoughSketchGenerator())
    path_strings = ops_to_paths(drawings)
    if not path_strings:
        return RenderResult(handles=(), paths=(), lengths=(), plans=(), stroke_width=compiled.stroke_width)

    animate = config.effective_animate
    handles: list[int] = []
    lengths: list[float] = []
    for d in path_strings:
        handle = surface.create_path(d)
        surface.set_attributes(
            handle,
            {
                "fill": "none",
                "stroke": config.effective_color,
                "stroke-width": format_number(compiled.stroke_width),
            },
        )
        if animate:
            lengths.append(surface.path_length(handle))
        handles.append(handle)

    plans: list[AnimationPlan] = []
    if animate:
        plans = schedule_animation(lengths, config.effective_animation_duration, animation_group_delay)
        for handle, length, plan in zip(handles, lengths, plans):
            surface.set_style(
                handle,
                {
                    "stroke-dashoffset": format_number(length),
                    "stroke-dasharray": format_number(length),
                    "animation": (
                        f"{DASH_KEYFRAMES_NAME} {format_number(plan.duration)}ms ease-out "
                        f"{format_number(plan.delay)}ms forwards"
                    ),
                },
            )

    LOGGER.debug(
        "rendered %s annotation: strokes=%d paths=%d animate=%s",
        config.type,
        len(compiled.strokes),
        len(handles),
        animate,
    )
    return RenderResult(
        handles=tuple(handles),
        paths=tuple(path_strings),
        lengths=tuple(lengths),
        plans=tuple(plans),
        stroke_width=compiled.stroke_width,
    )


def sketch_strokes(compiled: CompiledAnnotation, generator: SketchGenerator) -> list[OpSet]:
    """Run every stroke through the generator, in order.

    One options object is resolved per stroke class so repeated passes of the
    same class continue a single seeded sequence instead of retracing.
    """

    styles: dict[tuple[StrokeClass, int], SketchOptions] = {}
    drawings: list[OpSet] = []
    for stroke in compiled.strokes:
        options = _style_for(styles, stroke)
        drawings.extend(sketch_primitive(generator, stroke.primitive, options))
    return drawings


def _style_for(styles: dict[tuple[StrokeClass, int], SketchOptions], stroke: StrokeRequest) -> SketchOptions:
    key = (stroke.stroke_class, stroke.seed)
    if key not in styles:
        styles[key] = resolve_sketch_options(stroke.stroke_class, stroke.seed)
    return styles[key]
