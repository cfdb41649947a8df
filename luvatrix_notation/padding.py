from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np

from .model import FullPadding


DEFAULT_PADDING: FullPadding = (5.0, 5.0, 5.0, 5.0)


def parse_padding(padding: Any) -> FullPadding:
    """Normalize a padding value to `(top, right, bottom, left)`.

    Accepts `None`, a number, or a sequence of 1-4 numbers (CSS shorthand
    order); one-dimensional numpy arrays count as sequences. Anything else
    falls back to `DEFAULT_PADDING`; this never raises.
    """

    if padding is None:
        return DEFAULT_PADDING
    if _is_number(padding):
        p = float(padding)
        return (p, p, p, p)
    if isinstance(padding, np.ndarray):
        if padding.ndim != 1:
            return DEFAULT_PADDING
        padding = padding.tolist()
    if not isinstance(padding, Sequence) or isinstance(padding, (str, bytes)):
        return DEFAULT_PADDING
    items = list(padding)
    if not items or not all(_is_number(v) for v in items):
        return DEFAULT_PADDING
    values = [float(v) for v in items]
    if len(values) == 1:
        return (values[0], values[0], values[0], values[0])
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 3:
        return (values[0], values[1], values[2], values[1])
    return (values[0], values[1], values[2], values[3])


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
