from __future__ import annotations

import unittest

import numpy as np

from rastergraph.raster import (
    draw_line,
    draw_markers,
    draw_pixel,
    draw_text,
    fill,
    fill_rect,
    new_canvas,
    text_size,
)

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


def _painted(canvas: np.ndarray, color=RED) -> set[tuple[int, int]]:
    match = np.all(canvas[:, :, :3] == np.asarray(color[:3], dtype=np.uint8), axis=2)
    return {(int(x), int(y)) for y, x in zip(*np.nonzero(match), strict=True)}


class CanvasTests(unittest.TestCase):
    def test_new_canvas_and_fill(self) -> None:
        canvas = new_canvas(4, 3, color=(1, 2, 3, 4))
        self.assertEqual(canvas.shape, (3, 4, 4))
        self.assertEqual(canvas[2, 3].tolist(), [1, 2, 3, 4])
        fill(canvas, WHITE)
        self.assertTrue(np.all(canvas == 255))

    def test_fill_supports_rgb_canvas(self) -> None:
        canvas = np.zeros((2, 2, 3), dtype=np.uint8)
        fill(canvas, (9, 8, 7, 255))
        self.assertEqual(canvas[1, 1].tolist(), [9, 8, 7])

    def test_pixel_writes_are_clipped(self) -> None:
        canvas = new_canvas(3, 3)
        draw_pixel(canvas, -1, 0, RED)
        draw_pixel(canvas, 3, 3, RED)
        draw_pixel(canvas, 1, 2, RED)
        self.assertEqual(_painted(canvas), {(1, 2)})

    def test_fill_rect_is_inclusive_and_clipped(self) -> None:
        canvas = new_canvas(5, 5)
        fill_rect(canvas, -3, 1, 10, 1, RED)
        fill_rect(canvas, 4, 99, 4, 3, RED)
        expected = {(x, 1) for x in range(5)} | {(4, 3), (4, 4)}
        self.assertEqual(_painted(canvas), expected)

    def test_translucent_color_blends(self) -> None:
        canvas = new_canvas(1, 1, color=(0, 0, 0, 255))
        draw_pixel(canvas, 0, 0, (200, 100, 50, 128))
        r, g, b, a = canvas[0, 0].tolist()
        self.assertTrue(90 <= r <= 110)
        self.assertTrue(45 <= g <= 55)
        self.assertEqual(a, 255)


class LineTests(unittest.TestCase):
    def test_thick_vertical_line_spreads_around_center(self) -> None:
        canvas = new_canvas(10, 4)
        draw_line(canvas, 5, 0, 5, 4, RED, 2.0)
        self.assertEqual(_painted(canvas), {(x, y) for x in (4, 5) for y in range(4)})

    def test_thin_horizontal_line(self) -> None:
        canvas = new_canvas(6, 6)
        draw_line(canvas, 0, 2, 6, 2, RED, 0.5)
        self.assertEqual(_painted(canvas), {(x, 2) for x in range(6)})

    def test_diagonal_line_touches_both_endpoints(self) -> None:
        canvas = new_canvas(8, 8)
        draw_line(canvas, 0, 0, 7, 7, RED, 1.0)
        self.assertEqual(_painted(canvas), {(i, i) for i in range(8)})


def _marker(canvas: np.ndarray, x: int, y: int, diameter: int) -> None:
    draw_markers(canvas, np.asarray([x]), np.asarray([y]), RED, diameter=diameter)


class MarkerTests(unittest.TestCase):
    def test_single_pixel_marker(self) -> None:
        canvas = new_canvas(5, 5)
        _marker(canvas, 2, 3, 1)
        self.assertEqual(_painted(canvas), {(2, 3)})

    def test_marker_is_round_and_centered(self) -> None:
        canvas = new_canvas(11, 11)
        _marker(canvas, 5, 5, 5)
        painted = _painted(canvas)
        self.assertIn((5, 5), painted)
        self.assertIn((3, 5), painted)
        self.assertIn((5, 7), painted)
        self.assertNotIn((3, 3), painted)
        self.assertNotIn((7, 7), painted)
        self.assertEqual(painted, {(10 - x, 10 - y) for x, y in painted})

    def test_zero_diameter_draws_nothing(self) -> None:
        canvas = new_canvas(3, 3)
        _marker(canvas, 1, 1, 0)
        self.assertEqual(_painted(canvas), set())

    def test_markers_near_edge_are_clipped(self) -> None:
        canvas = new_canvas(4, 4)
        draw_markers(canvas, np.asarray([0, 4]), np.asarray([0, 4]), RED, diameter=3)
        self.assertEqual(_painted(canvas), {(0, 0), (1, 0), (0, 1), (1, 1), (3, 3)})


class TextTests(unittest.TestCase):
    def test_text_renders_antialiased_pixels(self) -> None:
        canvas = new_canvas(80, 30, color=(0, 0, 0, 255))
        draw_text(canvas, 2, 2, "-8.5", (255, 255, 255, 255), font_size_px=14.0)
        chan = canvas[:, :, 0]
        self.assertTrue(np.any(chan > 0))
        self.assertEqual(int(canvas[29, 79, 0]), 0)

    def test_text_size_grows_with_length(self) -> None:
        w1, h1 = text_size("1", font_size_px=12.0)
        w2, _ = text_size("1000", font_size_px=12.0)
        self.assertGreater(w2, w1)
        self.assertGreaterEqual(h1, 1)

    def test_empty_text_is_noop(self) -> None:
        canvas = new_canvas(4, 4)
        draw_text(canvas, 0, 0, "", RED)
        self.assertEqual(_painted(canvas), set())


if __name__ == "__main__":
    unittest.main()
