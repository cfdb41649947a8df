from __future__ import annotations

from pathlib import Path
import sys
import tempfile
import unittest
from unittest import mock
import xml.etree.ElementTree as ET

import numpy as np

from luvatrix_notation.model import SVG_NS, AnnotationConfig, Rect
from luvatrix_notation.render import render_annotation
from luvatrix_notation.surface import DASH_KEYFRAMES_CSS, SVGSurface
from luvatrix_notation.exporters import export_preview_png, export_svg, render_preview


class SVGSurfaceTests(unittest.TestCase):
    def test_rejects_empty_canvas(self) -> None:
        with self.assertRaises(ValueError):
            SVGSurface(0, 10)

    def test_markup_contains_keyframes_and_styled_paths(self) -> None:
        surface = SVGSurface(200, 80)
        render_annotation(surface, Rect(10.0, 10.0, 100.0, 20.0), AnnotationConfig(type="underline", color="#d32f2f"), 0.0, 3)
        root = ET.fromstring(surface.to_markup())
        self.assertEqual(root.tag, f"{{{SVG_NS}}}svg")
        self.assertEqual(root.attrib["viewBox"], "0 0 200 80")
        self.assertEqual(root.find(f"{{{SVG_NS}}}style").text, DASH_KEYFRAMES_CSS)
        paths = root.findall(f"{{{SVG_NS}}}path")
        self.assertEqual(len(paths), 2)
        for path in paths:
            self.assertEqual(path.attrib["fill"], "none")
            self.assertEqual(path.attrib["stroke"], "#d32f2f")
            self.assertIn("rough-notation-dash", path.attrib["style"])
            self.assertTrue(path.attrib["d"].startswith("M"))

    def test_unknown_handle_raises(self) -> None:
        surface = SVGSurface(10, 10)
        with self.assertRaises(KeyError):
            surface.set_style(3, {"animation": "none"})

    def test_clear_removes_paths_and_restarts_handles(self) -> None:
        surface = SVGSurface(50, 50)
        render_annotation(surface, Rect(5.0, 5.0, 20.0, 10.0), AnnotationConfig(type="strike-through"), 0.0, 2)
        self.assertEqual(len(surface.paths), 2)
        surface.clear()
        self.assertEqual(surface.paths, ())
        self.assertEqual(ET.fromstring(surface.to_markup()).findall(f"{{{SVG_NS}}}path"), [])
        with self.assertRaises(KeyError):
            surface.path_length(0)
        self.assertEqual(surface.create_path("M0 0 L3 4"), 0)
        self.assertAlmostEqual(surface.path_length(0), 5.0)

    def test_path_length_tracks_attribute_updates(self) -> None:
        surface = SVGSurface(10, 10)
        handle = surface.create_path("M0 0 L3 4")
        self.assertAlmostEqual(surface.path_length(handle), 5.0)
        surface.set_attributes(handle, {"d": "M0 0 L6 8"})
        self.assertAlmostEqual(surface.path_length(handle), 10.0)


class ExporterTests(unittest.TestCase):
    def _surface(self) -> SVGSurface:
        surface = SVGSurface(160, 60)
        render_annotation(
            surface,
            Rect(20.0, 20.0, 120.0, 20.0),
            AnnotationConfig(type="box", color="#ff0000", stroke_width=3, iterations=1),
            0.0,
            11,
        )
        return surface

    def test_export_svg_writes_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = export_svg(self._surface(), Path(tmp) / "nested" / "box.svg")
            text = out.read_text(encoding="utf-8")
        self.assertIn("<svg", text)
        self.assertEqual(text.count("<path"), 4)

    def test_preview_draws_stroke_color(self) -> None:
        image = render_preview(self._surface(), scale=2.0)
        self.assertEqual(image.size, (320, 120))
        pixels = np.asarray(image)
        red = (pixels[:, :, 0] > 200) & (pixels[:, :, 1] < 60) & (pixels[:, :, 2] < 60)
        self.assertTrue(np.any(red))
        self.assertEqual(tuple(pixels[0, 0]), (255, 255, 255, 255))

    def _highlight(self, color: str) -> SVGSurface:
        surface = SVGSurface(120, 40)
        render_annotation(surface, Rect(10.0, 10.0, 100.0, 20.0), AnnotationConfig(type="highlight", color=color, iterations=1), 0.0, 4)
        return surface

    def test_preview_blends_translucent_rgba_strokes(self) -> None:
        pixels = np.asarray(render_preview(self._highlight("rgba(255, 213, 79, 0.5)"))).astype(int)
        blended = np.all(np.abs(pixels - np.array([255, 234, 167, 255])) <= 3, axis=2)
        self.assertTrue(np.any(blended))
        self.assertTrue(np.all(pixels[:, :, 3] == 255))

    def test_preview_skips_transparent_strokes(self) -> None:
        pixels = np.asarray(render_preview(self._highlight("transparent")))
        self.assertTrue(np.all(pixels == 255))

    def test_preview_draws_unsupported_colors_black(self) -> None:
        surface = self._highlight("var(--accent)")
        with self.assertLogs("luvatrix_notation.exporters", level="WARNING"):
            pixels = np.asarray(render_preview(surface))
        self.assertTrue(np.any(np.all(pixels == np.array([0, 0, 0, 255]), axis=2)))

    def test_preview_rejects_non_positive_scale(self) -> None:
        with self.assertRaises(ValueError):
            render_preview(self._surface(), scale=0.0)

    def test_export_preview_png(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = export_preview_png(self._surface(), Path(tmp) / "box.png")
            self.assertTrue(out.exists())
            self.assertGreater(out.stat().st_size, 0)


class CommandLineTests(unittest.TestCase):
    def test_render_command_writes_svg_and_png(self) -> None:
        import main as cli

        with tempfile.TemporaryDirectory() as tmp:
            svg_path = Path(tmp) / "out.svg"
            png_path = Path(tmp) / "out.png"
            argv = [
                "luvatrix-notation",
                "render",
                "circle",
                "--rect",
                "20,20,100,30",
                "--iterations",
                "3",
                "--out",
                str(svg_path),
                "--png",
                str(png_path),
            ]
            with mock.patch.object(sys, "argv", argv), mock.patch("builtins.print") as printed:
                cli.main()
            root = ET.fromstring(svg_path.read_text(encoding="utf-8"))
            self.assertTrue(png_path.exists())
        self.assertEqual(len(root.findall(f"{{{SVG_NS}}}path")), 3)
        self.assertEqual(root.attrib["width"], "140")
        self.assertIn("paths=3", printed.call_args[0][0])

    def test_non_positive_canvas_size_is_a_usage_error(self) -> None:
        import main as cli

        for flag, value in (("--width", "0"), ("--height", "-5"), ("--width", "wide")):
            argv = ["luvatrix-notation", "render", "box", "--rect", "0,0,10,10", flag, value, "--out", "unused.svg"]
            with self.subTest(flag=flag, value=value):
                with mock.patch.object(sys, "argv", argv), mock.patch("sys.stderr") as stderr:
                    with self.assertRaises(SystemExit) as exit_info:
                        cli.main()
                self.assertEqual(exit_info.exception.code, 2)
                written = "".join(call.args[0] for call in stderr.write.call_args_list)
                self.assertIn(flag, written)


if __name__ == "__main__":
    unittest.main()
