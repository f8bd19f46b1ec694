"""
Utilities for constructing a Simulation and its bodies from the browser's
add-ball form. Coordinates are canvas pixels: (0, 0) is the upper left
corner, positive x is right and positive y is down.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from .body import DEFAULT_COLOR, DEFAULT_NAME_COLOR
from .config import DEFAULT_CONFIG, SimulationConfig
from .system import Simulation
from .vector import Vector2

# Form defaults shown in the add-ball dialog
FORM_DEFAULTS: Dict[str, Any] = {
    "position": "(200 , 200)",
    "velocity": "(0 , 0)",
    "mass": 1e13,
    "radius": 10.0,
    "color": DEFAULT_COLOR,
    "name": "gravity ball!",
    "nameColor": DEFAULT_NAME_COLOR,
}

INITIAL_BODIES: List[Dict[str, Any]] = [
    {"position": Vector2(500, 400), "velocity": Vector2(0, 2), "mass": 8e15, "radius": 30},
    {"position": Vector2(1000, 400), "velocity": Vector2(0, 3.2), "mass": 1e13, "radius": 4},
    {"position": Vector2(300, 400), "velocity": Vector2(0, -3.5), "mass": 9e13, "radius": 9},
    {"position": Vector2(600, 800), "velocity": Vector2(3, 0.4), "mass": 9e12, "radius": 15},
]

_NOT_NUMERIC = re.compile(r"[^0-9eE+\-.,]")


def parse_vector(text: str) -> Vector2:
    """
    Parse form text such as ``"(200 , -3.5)"`` into a Vector2. Anything that
    is not part of a number or the separating comma is dropped first.
    """
    cleaned = _NOT_NUMERIC.sub("", text)
    try:
        vector = Vector2.from_iterable(float(part) for part in cleaned.split(","))
    except ValueError:
        raise ValueError(f"expected two comma separated numbers, got {text!r}") from None
    if not vector.is_finite():
        raise ValueError(f"vector components must be finite, got {text!r}")
    return vector


def body_from_form(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert add-ball form fields into GravityBall keyword arguments. Missing
    fields fall back to the form defaults.
    """
    fields = {**FORM_DEFAULTS, **{k: v for k, v in payload.items() if v is not None}}
    return {
        "position": parse_vector(str(fields["position"])),
        "velocity": parse_vector(str(fields["velocity"])),
        "mass": float(fields["mass"]),
        "radius": float(fields["radius"]),
        "color": fields["color"],
        "name": fields["name"],
        "name_color": fields["nameColor"],
    }


def build_simulation(
    config: SimulationConfig = DEFAULT_CONFIG,
    bodies: Optional[Sequence[Dict[str, Any]]] = None,
) -> Simulation:
    return Simulation(
        config=config,
        initial_bodies=INITIAL_BODIES if bodies is None else bodies,
    )
