from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tomllib
from typing import Any, Mapping

from .errors import NotationConfigError
from .group import GroupItem
from .model import ANNOTATION_TYPES, AnnotationConfig, Rect


_KEY_ALIASES = {
    "strokeWidth": "stroke_width",
    "animationDuration": "animation_duration",
}
_CONFIG_KEYS = ("type", "color", "stroke_width", "padding", "animate", "animation_duration", "iterations")
DEFAULT_CANVAS_SIZE = (640.0, 360.0)


@dataclass(frozen=True)
class NotationDocument:
    width: float
    height: float
    items: tuple[GroupItem, ...]


def annotation_config_from_mapping(raw: Mapping[str, Any]) -> AnnotationConfig:
    """Validate a plain mapping into an `AnnotationConfig`.

    camelCase keys (`strokeWidth`, `animationDuration`) are accepted as
    aliases of their snake_case names.
    """

    values: dict[str, Any] = {}
    for key, value in raw.items():
        name = _KEY_ALIASES.get(key, key)
        if name not in _CONFIG_KEYS:
            raise NotationConfigError(f"unknown annotation option: {key}")
        if name in values:
            raise NotationConfigError(f"duplicate annotation option: {key}")
        values[name] = value

    kind = values.get("type")
    if kind is None:
        raise NotationConfigError("annotation config missing required field: type")
    if kind not in ANNOTATION_TYPES:
        raise NotationConfigError(f"unknown annotation type: {kind}")
    return AnnotationConfig(
        type=str(kind),
        color=_coerce_optional_str(values.get("color"), "color"),
        stroke_width=_coerce_optional_number(values.get("stroke_width"), "stroke_width"),
        padding=_coerce_padding(values.get("padding")),
        animate=_coerce_optional_bool(values.get("animate"), "animate"),
        animation_duration=_coerce_optional_number(values.get("animation_duration"), "animation_duration"),
        iterations=_coerce_optional_int(values.get("iterations"), "iterations"),
    )


def parse_rect_notation(notation: str) -> Rect:
    """Parse `x,y,w,h` into a Rect."""

    parts = [p.strip() for p in notation.strip().split(",")]
    if len(parts) != 4 or not all(parts):
        raise NotationConfigError("rect must use `x,y,w,h` format")
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError as exc:
        raise NotationConfigError(f"rect values must be numbers: {notation}") from exc
    return Rect(x=x, y=y, w=w, h=h)


def load_annotation_file(path: str | Path) -> NotationDocument:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"annotation file not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return notation_document_from_mapping(raw)


def notation_document_from_mapping(raw: Mapping[str, Any]) -> NotationDocument:
    canvas = raw.get("canvas", {})
    if not isinstance(canvas, Mapping):
        raise NotationConfigError("canvas must be a table")
    width = _coerce_optional_number(canvas.get("width"), "canvas.width") or DEFAULT_CANVAS_SIZE[0]
    height = _coerce_optional_number(canvas.get("height"), "canvas.height") or DEFAULT_CANVAS_SIZE[1]
    if width <= 0 or height <= 0:
        raise NotationConfigError("canvas width/height must be > 0")

    entries = raw.get("annotation", [])
    if not isinstance(entries, list):
        raise NotationConfigError("annotation must be an array of tables")
    items: list[GroupItem] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise NotationConfigError(f"annotation[{index}] must be a table")
        body = dict(entry)
        rect = _coerce_rect(body.pop("rect", None), f"annotation[{index}].rect")
        seed = _coerce_optional_int(body.pop("seed", None), f"annotation[{index}].seed")
        items.append(
            GroupItem(
                rect=rect,
                config=annotation_config_from_mapping(body),
                seed=index + 1 if seed is None else seed,
            )
        )
    return NotationDocument(width=width, height=height, items=tuple(items))


def _coerce_rect(value: object, field_name: str) -> Rect:
    if not isinstance(value, (list, tuple)) or len(value) != 4:
        raise NotationConfigError(f"{field_name} must be a list of four numbers")
    x, y, w, h = (_coerce_number(v, field_name) for v in value)
    return Rect(x=x, y=y, w=w, h=h)


def _coerce_padding(value: object) -> float | tuple[float, ...] | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return tuple(_coerce_number(v, "padding") for v in value)
    return _coerce_number(value, "padding")


def _coerce_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NotationConfigError(f"{field_name} must be a number")
    return float(value)


def _coerce_optional_number(value: object, field_name: str) -> float | None:
    if value is None:
        return None
    return _coerce_number(value, field_name)


def _coerce_optional_int(value: object, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise NotationConfigError(f"{field_name} must be an integer if provided")
    return value


def _coerce_optional_bool(value: object, field_name: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise NotationConfigError(f"{field_name} must be a boolean if provided")
    return value


def _coerce_optional_str(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise NotationConfigError(f"{field_name} must be a string if provided")
    return value
