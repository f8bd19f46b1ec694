from typing import Iterable

from ..body import GravityBall
from .surface import Surface

LABEL_OFFSET = 6  # Pixels between a ball's edge and its name


def draw_frame(
    bodies: Iterable[GravityBall],
    surface: Surface,
    width: float,
    height: float,
    show_names: bool = False,
) -> None:
    """
    Repaint the whole surface: one clear, then every ball in order.
    """
    surface.begin_frame()
    surface.clear_rect(0, 0, width, height)
    for body in bodies:
        body.draw(surface)
        if show_names:
            surface.set_fill_color(body.name_color)
            surface.fill_text(body.name, body.x, body.y - body.radius - LABEL_OFFSET)
