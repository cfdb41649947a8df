from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol
import xml.etree.ElementTree as ET

from .model import DASH_KEYFRAMES_NAME, SVG_NS
from .paths import format_number, measure_path_length


DASH_KEYFRAMES_CSS = f"@keyframes {DASH_KEYFRAMES_NAME} {{ to {{ stroke-dashoffset: 0; }} }}"


class Surface(Protocol):
    """Rendering target that receives finished path geometry.

    `create_path` appends a new path element and returns an opaque handle the
    surface owns from then on.
    """

    def create_path(self, d: str) -> int:
        ...

    def set_attributes(self, handle: int, attributes: Mapping[str, str]) -> None:
        ...

    def set_style(self, handle: int, properties: Mapping[str, str]) -> None:
        ...

    def path_length(self, handle: int) -> float:
        ...


@dataclass
class SurfacePath:
    d: str
    attributes: dict[str, str] = field(default_factory=dict)
    style: dict[str, str] = field(default_factory=dict)

    @property
    def stroke_width(self) -> float:
        try:
            return float(self.attributes.get("stroke-width", "1"))
        except ValueError:
            return 1.0


class SVGSurface:
    """In-memory SVG document surface.

    Paths keep insertion order. `to_markup()` serializes the document with
    the dash keyframes embedded so animated paths play when opened standalone.
    """

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("SVGSurface width/height must be > 0")
        self.width = float(width)
        self.height = float(height)
        self._paths: list[SurfacePath] = []
        self._length_cache: dict[int, float] = {}

    @property
    def paths(self) -> tuple[SurfacePath, ...]:
        return tuple(self._paths)

    def create_path(self, d: str) -> int:
        self._paths.append(SurfacePath(d=d, attributes={"d": d}))
        return len(self._paths) - 1

    def set_attributes(self, handle: int, attributes: Mapping[str, str]) -> None:
        path = self._get(handle)
        path.attributes.update({str(k): str(v) for k, v in attributes.items()})
        if "d" in attributes:
            path.d = str(attributes["d"])
            self._length_cache.pop(handle, None)

    def set_style(self, handle: int, properties: Mapping[str, str]) -> None:
        self._get(handle).style.update({str(k): str(v) for k, v in properties.items()})

    def path_length(self, handle: int) -> float:
        if handle not in self._length_cache:
            self._length_cache[handle] = measure_path_length(self._get(handle).d)
        return self._length_cache[handle]

    def clear(self) -> None:
        """Remove every path; handles restart from 0."""

        self._paths.clear()
        self._length_cache.clear()

    def to_element(self) -> ET.Element:
        root = ET.Element(
            f"{{{SVG_NS}}}svg",
            {
                "width": format_number(self.width),
                "height": format_number(self.height),
                "viewBox": f"0 0 {format_number(self.width)} {format_number(self.height)}",
            },
        )
        style = ET.SubElement(root, f"{{{SVG_NS}}}style")
        style.text = DASH_KEYFRAMES_CSS
        for path in self._paths:
            attrib = dict(path.attributes)
            if path.style:
                attrib["style"] = "; ".join(f"{k}: {v}" for k, v in path.style.items())
            ET.SubElement(root, f"{{{SVG_NS}}}path", attrib)
        return root

    def to_markup(self) -> str:
        ET.register_namespace("", SVG_NS)
        return ET.tostring(self.to_element(), encoding="unicode")

    def _get(self, handle: int) -> SurfacePath:
        if handle < 0 or handle >= len(self._paths):
            raise KeyError(f"unknown path handle: {handle}")
        return self._paths[handle]
