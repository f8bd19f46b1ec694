"""
Main class for handling a set of gravity balls.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .body import DEFAULT_COLOR, DEFAULT_NAME, DEFAULT_NAME_COLOR, GravityBall
from .config import DEFAULT_CONFIG, SimulationConfig
from .vector import Vector2

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns the GravityBall instances and is the only thing that mutates them.
    Callers go through add_body, add_bodies, clear and step.
    """

    def __init__(
        self,
        config: SimulationConfig = DEFAULT_CONFIG,
        initial_bodies: Optional[Sequence[dict]] = None,
    ):
        self.config = config
        self.tick = 0
        self._bodies: List[GravityBall] = []
        if initial_bodies:
            self.add_bodies(initial_bodies)

    @property
    def bodies(self) -> Tuple[GravityBall, ...]:
        return tuple(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def add_body(
        self,
        position: Vector2,
        velocity: Vector2,
        mass: float,
        radius: float = 0.0,
        color: str = DEFAULT_COLOR,
        name: str = DEFAULT_NAME,
        name_color: str = DEFAULT_NAME_COLOR,
    ) -> GravityBall:
        body = GravityBall(position, velocity, mass, radius, color, name, name_color)
        self._bodies.append(body)
        logger.info("Added %r (%d bodies)", body, len(self._bodies))
        return body

    def add_bodies(self, configs: Sequence[dict]) -> List[GravityBall]:
        # Validate everything first so a bad entry leaves the collection untouched
        created = [GravityBall(**cfg) for cfg in configs]
        self._bodies.extend(created)
        logger.info("Added %d bodies (%d total)", len(created), len(self._bodies))
        return created

    def clear(self) -> int:
        removed = len(self._bodies)
        self._bodies.clear()
        logger.info("Cleared %d bodies", removed)
        return removed

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Every unordered index pair (i, j) with i < j, once."""
        count = len(self._bodies)
        for i in range(count):
            for j in range(i + 1, count):
                yield i, j

    def step(self) -> int:
        """
        Apply every pairwise attraction, then move every ball. Positions only
        change after all velocities for the tick are final. Returns the number
        of pairwise interactions applied.
        """
        interactions = 0
        for i, j in self.pairs():
            self._bodies[i].apply_attraction(self._bodies[j], self.config)
            interactions += 1
        for body in self._bodies:
            body.update_position()
        self.tick += 1
        logger.debug("Tick %d: %d interactions", self.tick, interactions)
        return interactions

    def total_mass(self) -> float:
        return sum(body.mass for body in self._bodies)

    def total_momentum(self) -> np.ndarray:
        if not self._bodies:
            return np.zeros(2, dtype=float)
        masses = np.array([body.mass for body in self._bodies], dtype=float)
        velocities = np.array([body.velocity.to_array() for body in self._bodies])
        return (masses[:, None] * velocities).sum(axis=0)

    def center_of_mass(self) -> np.ndarray:
        if not self._bodies:
            return np.zeros(2, dtype=float)
        masses = np.array([body.mass for body in self._bodies], dtype=float)
        positions = np.array([body.position.to_array() for body in self._bodies])
        return (masses[:, None] * positions).sum(axis=0) / masses.sum()

    def snapshot(self) -> List[Dict[str, Any]]:
        return [body.to_dict() for body in self._bodies]
