"""Hand-drawn annotation strokes and draw-on animation for Luvatrix surfaces."""

from .compiler import STROKE_PLANNERS, CompiledAnnotation, StrokeRequest, compile_annotation
from .config import (
    NotationDocument,
    annotation_config_from_mapping,
    load_annotation_file,
    notation_document_from_mapping,
    parse_rect_notation,
)
from .errors import NotationConfigError
from .group import AnnotationGroup, GroupItem
from .model import (
    ANNOTATION_TYPES,
    DEFAULT_ANIMATION_DURATION,
    AnnotationConfig,
    AnnotationType,
    FullPadding,
    Rect,
)
from .padding import DEFAULT_PADDING, parse_padding
from .paths import PathGeometry, flatten_drawings, measure_path_length, ops_to_paths
from .render import RenderResult, render_annotation
from .schedule import AnimationPlan, schedule_animation
from .surface import SVGSurface, Surface, SurfacePath

__all__ = [
    "ANNOTATION_TYPES",
    "AnimationPlan",
    "AnnotationConfig",
    "AnnotationGroup",
    "AnnotationType",
    "CompiledAnnotation",
    "DEFAULT_ANIMATION_DURATION",
    "DEFAULT_PADDING",
    "FullPadding",
    "GroupItem",
    "NotationConfigError",
    "NotationDocument",
    "PathGeometry",
    "Rect",
    "RenderResult",
    "STROKE_PLANNERS",
    "SVGSurface",
    "StrokeRequest",
    "Surface",
    "SurfacePath",
    "annotation_config_from_mapping",
    "compile_annotation",
    "flatten_drawings",
    "load_annotation_file",
    "measure_path_length",
    "notation_document_from_mapping",
    "ops_to_paths",
    "parse_padding",
    "parse_rect_notation",
    "render_annotation",
    "schedule_animation",
]
