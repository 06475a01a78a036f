from rastergraph.api import blank_image, grapher
from rastergraph.errors import ConfigurationError, GraphError, ShapeMismatchError
from rastergraph.renderer import GraphRenderer, identity
from rastergraph.style import BLACK, BLUE, GRAY, GREEN, RED, WHITE, GraphStyle, Window, coerce_color, load_config
from rastergraph.transform import coordinate_to_pixel, pixel_to_coordinate

__all__ = [
    "BLACK",
    "BLUE",
    "ConfigurationError",
    "GRAY",
    "GREEN",
    "GraphError",
    "GraphRenderer",
    "GraphStyle",
    "RED",
    "ShapeMismatchError",
    "WHITE",
    "Window",
    "blank_image",
    "coerce_color",
    "coordinate_to_pixel",
    "grapher",
    "identity",
    "load_config",
    "pixel_to_coordinate",
]
