from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from .model import AnnotationConfig, Rect
from .render import RenderResult, render_annotation
from .sketch.generator import SketchGenerator
from .surface import Surface

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupItem:
    rect: Rect
    config: AnnotationConfig
    seed: int


class AnnotationGroup:
    """Annotations revealed one after another.

    Each item starts once the previous item's animation budget has elapsed,
    whether or not that item actually animates.
    """

    def __init__(self, items: Sequence[GroupItem]) -> None:
        self._items = tuple(items)

    @property
    def items(self) -> tuple[GroupItem, ...]:
        return self._items

    def delays(self) -> list[float]:
        delays: list[float] = []
        delay = 0.0
        for item in self._items:
            delays.append(delay)
            delay += item.config.effective_animation_duration
        return delays

    def render(self, surface: Surface, *, generator: SketchGenerator | None = None) -> list[RenderResult]:
        results: list[RenderResult] = []
        for item, delay in zip(self._items, self.delays()):
            results.append(render_annotation(surface, item.rect, item.config, delay, item.seed, generator=generator))
        LOGGER.debug("rendered annotation group: items=%d", len(results))
        return results
