from __future__ import annotations

import argparse
from pathlib import Path

from luvatrix_notation import (
    ANNOTATION_TYPES,
    AnnotationConfig,
    AnnotationGroup,
    GroupItem,
    SVGSurface,
    load_annotation_file,
    parse_rect_notation,
)
from luvatrix_notation.errors import NotationConfigError
from luvatrix_notation.exporters import export_preview_png, export_svg


def main() -> None:
    parser = argparse.ArgumentParser(prog="luvatrix-notation")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a single annotation to an SVG document.")
    render.add_argument("kind", choices=ANNOTATION_TYPES)
    render.add_argument("--rect", required=True, help="Target region as `x,y,w,h`.")
    render.add_argument("--padding", default=None, help="Padding as `n` or `top,right[,bottom[,left]]`.")
    render.add_argument("--iterations", type=int, default=None)
    render.add_argument("--color", default=None)
    render.add_argument("--stroke-width", type=float, default=None)
    render.add_argument("--duration", type=float, default=None, help="Animation duration in ms.")
    render.add_argument("--no-animate", action="store_true")
    render.add_argument("--seed", type=int, default=1)
    render.add_argument("--width", type=_positive_float, default=None, help="Canvas width. Default: fits the rect.")
    render.add_argument("--height", type=_positive_float, default=None, help="Canvas height. Default: fits the rect.")
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--png", type=Path, default=None, help="Also write a rasterized preview.")

    render_file = sub.add_parser("render-file", help="Render every annotation in a TOML file as one group.")
    render_file.add_argument("config", type=Path)
    render_file.add_argument("--out", type=Path, required=True)
    render_file.add_argument("--png", type=Path, default=None, help="Also write a rasterized preview.")
    args = parser.parse_args()

    if args.command == "render":
        rect = parse_rect_notation(args.rect)
        config = AnnotationConfig(
            type=args.kind,
            color=args.color,
            stroke_width=args.stroke_width,
            padding=_parse_padding_arg(args.padding),
            animate=not args.no_animate,
            animation_duration=args.duration,
            iterations=args.iterations,
        )
        width, height = _resolve_canvas_size(rect.x + rect.w, rect.y + rect.h, args.width, args.height)
        items = [GroupItem(rect=rect, config=config, seed=args.seed)]
    elif args.command == "render-file":
        document = load_annotation_file(args.config)
        width, height = document.width, document.height
        items = list(document.items)
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    surface = SVGSurface(width=width, height=height)
    results = AnnotationGroup(items).render(surface)
    export_svg(surface, args.out)
    if args.png is not None:
        export_preview_png(surface, args.png)
    end_ms = max((plan.delay + plan.duration for result in results for plan in result.plans), default=0.0)
    print(f"render complete: annotations={len(results)} paths={len(surface.paths)} duration={end_ms:g}ms out={args.out}")


def _parse_padding_arg(value: str | None) -> float | tuple[float, ...] | None:
    if value is None:
        return None
    try:
        parts = tuple(float(p) for p in value.split(","))
    except ValueError as exc:
        raise NotationConfigError(f"padding values must be numbers: {value}") from exc
    if len(parts) == 1:
        return parts[0]
    return parts


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from exc
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number


def _resolve_canvas_size(
    right: float, bottom: float, width: float | None, height: float | None, margin: float = 20.0
) -> tuple[float, float]:
    return (
        width if width is not None else max(1.0, right + margin),
        height if height is not None else max(1.0, bottom + margin),
    )


if __name__ == "__main__":
    main()
