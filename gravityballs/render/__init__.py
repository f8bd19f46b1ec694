from .frame import draw_frame
from .surface import CommandSurface, Surface

__all__ = ["draw_frame", "CommandSurface", "Surface"]
