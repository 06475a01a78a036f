from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from rastergraph.errors import ConfigurationError
from rastergraph.style import BLACK, BLUE, WHITE, GraphStyle, Window, coerce_color, load_config


class GraphStyleTests(unittest.TestCase):
    def test_defaults(self) -> None:
        style = GraphStyle()
        self.assertTrue(style.draw_gridlines)
        self.assertEqual(style.grid_spacing, 0.10)
        self.assertEqual(style.grid_thickness, 0.01)
        self.assertEqual(style.grid_color, BLUE)
        self.assertTrue(style.draw_ticks)
        self.assertEqual(style.tick_length, 0.10)
        self.assertFalse(style.label_ticks)
        self.assertEqual(style.background_color, WHITE)
        self.assertEqual(style.axis_color, BLACK)
        self.assertEqual(style.axis_width, 0.02)
        self.assertEqual(style.plot_width, 0.01)
        self.assertEqual(style.plot_color, BLUE)
        self.assertFalse(style.flip_y)
        self.assertEqual(Window(), Window(x_min=-10.0, x_max=10.0, y_min=-10.0, y_max=10.0))

    def test_relative_sizes_above_one_are_rejected(self) -> None:
        for name in ("grid_spacing", "grid_thickness", "tick_length", "axis_width", "plot_width"):
            with self.subTest(field=name):
                with self.assertRaises(ConfigurationError):
                    GraphStyle(**{name: 1.01}).validate()

    def test_relative_size_of_exactly_one_is_allowed(self) -> None:
        GraphStyle(grid_spacing=1.0, plot_width=1.0).validate()

    def test_negative_relative_size_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            GraphStyle(tick_length=-0.1).validate()

    def test_non_positive_stroke_override_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            GraphStyle(axis_stroke=0).validate()
        GraphStyle(axis_stroke=3).validate()

    def test_window_rejects_empty_or_inverted_ranges(self) -> None:
        for window in (
            Window(x_min=1.0, x_max=1.0),
            Window(x_min=2.0, x_max=1.0),
            Window(y_min=0.0, y_max=0.0),
            Window(x_max=float("inf")),
        ):
            with self.subTest(window=window):
                with self.assertRaises(ConfigurationError):
                    window.validate()

    def test_wrongly_typed_fields_are_rejected(self) -> None:
        for style in (
            GraphStyle(grid_spacing="0.1"),  # type: ignore[arg-type]
            GraphStyle(plot_stroke=True),  # type: ignore[arg-type]
            GraphStyle(flip_y="yes"),  # type: ignore[arg-type]
            GraphStyle(tick_label_font_px=None),  # type: ignore[arg-type]
        ):
            with self.subTest(style=style):
                with self.assertRaises(ConfigurationError):
                    style.validate()
        with self.assertRaises(ConfigurationError):
            Window(x_min="-1").validate()  # type: ignore[arg-type]


class ColorTests(unittest.TestCase):
    def test_coerce_color_forms(self) -> None:
        self.assertEqual(coerce_color("blue"), BLUE)
        self.assertEqual(coerce_color("  White "), WHITE)
        self.assertEqual(coerce_color("#ff8000"), (255, 128, 0, 255))
        self.assertEqual(coerce_color("#ff800080"), (255, 128, 0, 128))
        self.assertEqual(coerce_color((1, 2, 3)), (1, 2, 3, 255))
        self.assertEqual(coerce_color([1, 2, 3, 4]), (1, 2, 3, 4))

    def test_coerce_color_rejects_invalid_values(self) -> None:
        for bad in ("mauve", "#12345", "#gg0000", (0, 0), (0, 0, 256), (0.5, 0, 0), True, None):
            with self.subTest(color=bad):
                with self.assertRaises(ConfigurationError):
                    coerce_color(bad)


class LoadConfigTests(unittest.TestCase):
    def _write(self, text: str) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        path = Path(tmp.name) / "graph.toml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_config_reads_window_and_style(self) -> None:
        path = self._write(
            "[window]\n"
            "x_min = 0\n"
            "x_max = 5\n"
            "[style]\n"
            "grid_spacing = 0.2\n"
            "draw_ticks = false\n"
            'plot_color = "red"\n'
            "axis_color = [10, 20, 30]\n"
        )
        window, style = load_config(path)
        self.assertEqual(window, Window(x_min=0.0, x_max=5.0, y_min=-10.0, y_max=10.0))
        self.assertEqual(style.grid_spacing, 0.2)
        self.assertFalse(style.draw_ticks)
        self.assertEqual(style.plot_color, (255, 0, 0, 255))
        self.assertEqual(style.axis_color, (10, 20, 30, 255))

    def test_load_config_rejects_unknown_keys(self) -> None:
        for text in ("[style]\ngrid_colour = 'red'\n", "[window]\nz_min = 1\n", "[extra]\na = 1\n"):
            with self.subTest(text=text):
                with self.assertRaises(ConfigurationError):
                    load_config(self._write(text))

    def test_load_config_rejects_missing_file_and_bad_toml(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config("/nonexistent/graph.toml")
        with self.assertRaises(ConfigurationError):
            load_config(self._write("[window\n"))

    def test_load_config_rejects_wrongly_typed_style_values(self) -> None:
        for text in (
            "[style]\ngrid_spacing = \"0.1\"\n",
            "[style]\naxis_stroke = true\n",
            "[style]\ndraw_ticks = 1\n",
            "[style]\ntick_length = [0.1]\n",
        ):
            with self.subTest(text=text):
                with self.assertRaises(ConfigurationError):
                    load_config(self._write(text))

    def test_load_config_validates_style_ranges(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config(self._write("[style]\nplot_width = 2.0\n"))

    def test_load_config_converts_integer_sizes_to_float(self) -> None:
        _, style = load_config(self._write("[style]\nplot_stroke = 3\n"))
        self.assertEqual(style.plot_stroke, 3.0)
        self.assertIsInstance(style.plot_stroke, float)


if __name__ == "__main__":
    unittest.main()
