from .canvas import draw_pixel, fill, fill_rect, new_canvas
from .draw_lines import draw_line
from .draw_markers import draw_markers
from .draw_text import draw_text, text_size

__all__ = [
    "draw_line",
    "draw_markers",
    "draw_pixel",
    "draw_text",
    "fill",
    "fill_rect",
    "new_canvas",
    "text_size",
]
