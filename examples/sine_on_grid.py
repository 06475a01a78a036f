from __future__ import annotations

import math
from pathlib import Path

from PIL import Image

from rastergraph import RED, grapher


def main() -> None:
    renderer = grapher()
    renderer.set_window(x_min=-2 * math.pi, x_max=2 * math.pi, y_min=-1.5, y_max=1.5)
    renderer.set_ticks(labeled=True, label_font_px=12)
    renderer.set_plot_style(width=0.008, flip_y=True)

    # A Pillow image is drawn on in place; numpy arrays and torch tensors work too.
    image = Image.new("RGBA", (720, 480))
    renderer.render_grid(image)
    renderer.render_function(image, math.sin)
    renderer.set_plot_style(color=RED, stroke=9)
    renderer.render_points(image, [-math.pi, -math.pi / 2, 0.0, math.pi / 2, math.pi], [0.0, -1.0, 0.0, 1.0, 0.0])

    out = Path(__file__).with_name("sine_on_grid.png")
    image.save(out)
    print(f"wrote {out}")


if __name__ == "__main__":
    main()
