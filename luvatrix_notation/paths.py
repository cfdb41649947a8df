from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import math
import re
from typing import Iterable

import numpy as np

from .sketch.ops import CurveOp, LineOp, MoveOp, OpSet

LOGGER = logging.getLogger(__name__)
CURVE_SAMPLES = 32

_TOKEN = re.compile(r"[MLC]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True)
class PathGeometry:
    d: str
    length: float


def format_number(value: float) -> str:
    """Format a coordinate the way browsers stringify numbers (`25`, not `25.0`)."""

    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0:
        return "0"
    # Shortest round-trip digits, laid out with the ECMAScript Number::toString rules.
    _, digit_tuple, exponent = Decimal(repr(abs(v))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent
    prefix = "-" if v < 0 else ""
    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{prefix}{mantissa}e{'+' if n - 1 > 0 else '-'}{abs(n - 1)}"


def ops_to_paths(drawings: Iterable[OpSet]) -> list[str]:
    """Flatten drawings into standalone path strings.

    Every `move` starts a new path, so one drawing can yield several
    disconnected paths. Output order follows drawing order.
    """

    paths: list[str] = []
    for drawing in drawings:
        path = ""
        for item in drawing.ops:
            if isinstance(item, MoveOp):
                if path.strip():
                    paths.append(path.strip())
                path = f"M{format_number(item.x)} {format_number(item.y)} "
            elif isinstance(item, CurveOp):
                path += (
                    f"C{format_number(item.x1)} {format_number(item.y1)}, "
                    f"{format_number(item.x2)} {format_number(item.y2)}, "
                    f"{format_number(item.x)} {format_number(item.y)} "
                )
            elif isinstance(item, LineOp):
                path += f"L{format_number(item.x)} {format_number(item.y)} "
            else:
                LOGGER.warning("ignoring unsupported sketch op: %r", item)
        if path.strip():
            paths.append(path.strip())
    return paths


def flatten_drawings(drawings: Iterable[OpSet]) -> list[PathGeometry]:
    return [PathGeometry(d=d, length=measure_path_length(d)) for d in ops_to_paths(drawings)]


def sample_path_points(d: str, curve_samples: int = CURVE_SAMPLES) -> list[np.ndarray]:
    """Approximate a path string as polylines, one `(n, 2)` array per subpath."""

    if curve_samples < 1:
        raise ValueError("curve_samples must be >= 1")
    tokens = _TOKEN.findall(d)
    polylines: list[np.ndarray] = []
    current: list[np.ndarray] = []
    pen = np.zeros(2, dtype=np.float64)
    t = np.linspace(0.0, 1.0, curve_samples + 1, dtype=np.float64)[1:, None]
    i = 0
    while i < len(tokens):
        cmd = tokens[i]
        if cmd == "M":
            if len(current) > 1:
                polylines.append(np.vstack(current))
            pen = _read_points(tokens, i + 1, 1)[0]
            current = [pen[None, :]]
            i += 3
        elif cmd == "L":
            pen = _read_points(tokens, i + 1, 1)[0]
            current.append(pen[None, :])
            i += 3
        elif cmd == "C":
            c1, c2, end = _read_points(tokens, i + 1, 3)
            mt = 1.0 - t
            current.append(mt**3 * pen + 3 * mt**2 * t * c1 + 3 * mt * t**2 * c2 + t**3 * end)
            pen = end
            i += 7
        else:
            raise ValueError(f"malformed path data near token {i}: {cmd!r}")
    if len(current) > 1:
        polylines.append(np.vstack(current))
    return polylines


def measure_path_length(d: str) -> float:
    total = 0.0
    for points in sample_path_points(d):
        total += float(np.sum(np.hypot(*np.diff(points, axis=0).T)))
    return total


def _read_points(tokens: list[str], start: int, count: int) -> list[np.ndarray]:
    raw = tokens[start : start + count * 2]
    if len(raw) != count * 2:
        raise ValueError("path data ended before command operands")
    values = np.asarray([float(v) for v in raw], dtype=np.float64)
    return [values[j * 2 : j * 2 + 2] for j in range(count)]
