from __future__ import annotations

import logging
from pathlib import Path
import re

from PIL import Image, ImageColor, ImageDraw

from .model import DEFAULT_COLOR
from .paths import sample_path_points
from .surface import SVGSurface

LOGGER = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

_BLACK: RGBA = (0, 0, 0, 255)
_INVISIBLE = frozenset({"none", "transparent"})
_RGBA_FUNCTION = re.compile(
    r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d*\.?\d+)(%?)\s*\)",
    re.IGNORECASE,
)


def export_svg(surface: SVGSurface, out_path: str | Path) -> Path:
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(surface.to_markup() + "\n", encoding="utf-8")
    return path


def render_preview(
    surface: SVGSurface,
    *,
    scale: float = 1.0,
    background: RGBA = (255, 255, 255, 255),
) -> Image.Image:
    """Rasterize the fully drawn state of every path on the surface.

    Each path is drawn on its own layer and composited, so translucent
    strokes blend with what is underneath.
    """

    if scale <= 0:
        raise ValueError("preview scale must be > 0")
    width = max(1, int(round(surface.width * scale)))
    height = max(1, int(round(surface.height * scale)))
    image = Image.new("RGBA", (width, height), background)
    for path in surface.paths:
        color = _resolve_color(path.attributes.get("stroke"))
        if color is None:
            continue
        layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        line_width = max(1, int(round(path.stroke_width * scale)))
        for points in sample_path_points(path.d):
            xy = [(float(x) * scale, float(y) * scale) for x, y in points]
            draw.line(xy, fill=color, width=line_width, joint="curve")
        image.alpha_composite(layer)
    return image


def export_preview_png(
    surface: SVGSurface,
    out_path: str | Path,
    *,
    scale: float = 1.0,
    background: RGBA = (255, 255, 255, 255),
) -> Path:
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_preview(surface, scale=scale, background=background).save(path)
    return path


def _resolve_color(value: str | None) -> RGBA | None:
    """Map an SVG stroke value to a Pillow fill; `None` means draw nothing."""

    # `currentColor` has no document context outside a browser; draw it black.
    if not value or value == DEFAULT_COLOR:
        return _BLACK
    text = value.strip()
    if text.lower() in _INVISIBLE:
        return None
    match = _RGBA_FUNCTION.fullmatch(text)
    if match is not None:
        r, g, b = (min(255, int(part)) for part in match.group(1, 2, 3))
        alpha = float(match.group(4)) / (100.0 if match.group(5) else 1.0)
        return (r, g, b, int(round(min(max(alpha, 0.0), 1.0) * 255)))
    try:
        rgb = ImageColor.getcolor(text, "RGBA")
    except ValueError:
        LOGGER.warning("unsupported stroke color in preview, drawing black: %s", value)
        return _BLACK
    return (int(rgb[0]), int(rgb[1]), int(rgb[2]), int(rgb[3]))
