from typing import Any, Dict, List, Protocol


class Surface(Protocol):
    """The subset of a canvas 2D context the simulation draws with."""

    def begin_frame(self) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def set_fill_color(self, color: str) -> None: ...

    def begin_path(self) -> None: ...

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None: ...

    def fill(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...


class CommandSurface:
    """
    Records draw calls as JSON-ready dicts so the browser can replay them
    on its own canvas context. Each frame starts a new recording,
    so ``commands`` always holds the latest frame.
    """

    def __init__(self) -> None:
        self._commands: List[Dict[str, Any]] = []

    @property
    def commands(self) -> List[Dict[str, Any]]:
        return list(self._commands)

    def reset(self) -> None:
        self._commands = []

    def begin_frame(self) -> None:
        self.reset()

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._commands.append(
            {"op": "clearRect", "x": x, "y": y, "width": width, "height": height}
        )

    def set_fill_color(self, color: str) -> None:
        self._commands.append({"op": "fillStyle", "color": color})

    def begin_path(self) -> None:
        self._commands.append({"op": "beginPath"})

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        self._commands.append(
            {"op": "arc", "x": x, "y": y, "radius": radius, "start": start, "end": end}
        )

    def fill(self) -> None:
        self._commands.append({"op": "fill"})

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._commands.append({"op": "fillText", "text": text, "x": x, "y": y})
