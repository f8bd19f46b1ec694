"""
Tuning knobs for the simulation and the server, with environment overrides.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

G_DEFAULT = 6.674e-12  # Tuned for pixel distances and ~1e13 kg balls, not SI
UPDATES_PER_SECOND = 60
CANVAS_SIZE = 2000
MIN_SEPARATION = 1.0  # Pixels

_FINITE_FIELDS = (
    "gravitational_constant",
    "updates_per_second",
    "force_multiplier",
    "min_separation",
)


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "")
    if value.strip() == "":
        return default
    return float(value)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name, "")
    if value.strip() == "":
        return default
    return value.strip().lower() == "true"


@dataclass(frozen=True)
class SimulationConfig:
    gravitational_constant: float = G_DEFAULT
    updates_per_second: float = UPDATES_PER_SECOND
    force_multiplier: float = 1.0
    min_separation: float = MIN_SEPARATION  # Pairs closer than this exert no force
    canvas_width: int = CANVAS_SIZE
    canvas_height: int = CANVAS_SIZE
    show_names: bool = False

    def __post_init__(self) -> None:
        for name in _FINITE_FIELDS:
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.updates_per_second <= 0:
            raise ValueError("updates_per_second must be positive")
        if self.min_separation < 0:
            raise ValueError("min_separation must not be negative")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas size must be positive")

    @property
    def delta_time(self) -> float:
        return 1 / self.updates_per_second

    @classmethod
    def from_env(cls) -> SimulationConfig:
        return cls(
            gravitational_constant=_env_float("GRAVITY_G", G_DEFAULT),
            updates_per_second=_env_float("GRAVITY_UPDATES_PER_SECOND", UPDATES_PER_SECOND),
            force_multiplier=_env_float("GRAVITY_FORCE_MULTIPLIER", 1.0),
            min_separation=_env_float("GRAVITY_MIN_SEPARATION", MIN_SEPARATION),
            canvas_width=int(_env_float("GRAVITY_CANVAS_WIDTH", CANVAS_SIZE)),
            canvas_height=int(_env_float("GRAVITY_CANVAS_HEIGHT", CANVAS_SIZE)),
            show_names=_env_bool("GRAVITY_SHOW_NAMES", False),
        )


DEFAULT_CONFIG = SimulationConfig()


def autostart_enabled() -> bool:
    return _env_bool("GRAVITY_AUTOSTART", True)


def configure_logging() -> None:
    level = os.getenv("GRAVITY_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
