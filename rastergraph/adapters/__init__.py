from .normalize import normalize_points
from .surface import open_surface, surface_size

__all__ = ["normalize_points", "open_surface", "surface_size"]
