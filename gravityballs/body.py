"""
Mutable representation of a gravity ball that belongs to a Simulation.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Dict

from .config import DEFAULT_CONFIG, SimulationConfig
from .vector import Vector2

if TYPE_CHECKING:  # Avoid circular import during runtime
    from .render.surface import Surface

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#304050"
DEFAULT_NAME = "wow!"
DEFAULT_NAME_COLOR = "#efe0e2"


class GravityBall:
    """
    A point mass drawn as a circle. ``radius`` is visual only; attraction
    treats every ball as a point.
    """

    def __init__(
        self,
        position: Vector2 | None = None,
        velocity: Vector2 | None = None,
        mass: float = 0.0,
        radius: float = 0.0,
        color: str = DEFAULT_COLOR,
        name: str = DEFAULT_NAME,
        name_color: str = DEFAULT_NAME_COLOR,
    ) -> None:
        self.position = position if position is not None else Vector2.zero()
        self.velocity = velocity if velocity is not None else Vector2.zero()
        self.mass = float(mass)
        self.radius = float(radius)
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"mass must be a positive finite number, got {mass!r}")
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(f"radius must be a non-negative finite number, got {radius!r}")
        if not self.position.is_finite() or not self.velocity.is_finite():
            raise ValueError("position and velocity must be finite")
        self.color = color
        self.name = name
        self.name_color = name_color

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def delta_x(self) -> float:
        return self.velocity.x

    @property
    def delta_y(self) -> float:
        return self.velocity.y

    def momentum(self) -> Vector2:
        return self.velocity * self.mass

    def impulse_velocity(self, force: Vector2, dt: float) -> Vector2:
        """
        Impulse F*dt equals the change in momentum m*dv, so the velocity
        changes by F * dt / m. Returns the resulting velocity without
        applying it.
        """
        return self.velocity + force * (dt / self.mass)

    def apply_impulse(self, force: Vector2, dt: float) -> None:
        self.velocity = self.impulse_velocity(force, dt)

    def apply_attraction(
        self, other: GravityBall, config: SimulationConfig = DEFAULT_CONFIG
    ) -> Vector2:
        """
        Newtonian attraction between this ball and ``other``:

            F = G * m1 * m2 * dir / r^2

        where dir points from this ball to ``other``. This ball receives F and
        ``other`` receives -F, so one call updates the whole pair. Returns
        the force applied to this ball.

        Pairs closer than ``config.min_separation`` are skipped, and so is any
        pair whose force or resulting velocities would overflow, so a step
        never produces non-finite state.
        """
        offset = other.position - self.position
        distance = self.position.distance_to(other.position)
        distance_sq = distance * distance
        if distance <= config.min_separation or distance_sq == 0:
            return Vector2.zero()  # Collocated balls; skip to avoid singularity.
        direction = offset.normalized()
        magnitude = config.gravitational_constant * self.mass * other.mass / distance_sq
        force = direction * (magnitude * config.force_multiplier)
        own_velocity = self.impulse_velocity(force, config.delta_time)
        other_velocity = other.impulse_velocity(-force, config.delta_time)
        if not (force.is_finite() and own_velocity.is_finite() and other_velocity.is_finite()):
            logger.warning("Skipping overflowing attraction between %r and %r", self, other)
            return Vector2.zero()
        self.velocity = own_velocity
        other.velocity = other_velocity
        return force

    def update_position(self) -> None:
        # velocity is already in distance per tick
        position = self.position + self.velocity
        if not position.is_finite():
            logger.warning("Holding %r in place; next position overflows", self)
            return
        self.position = position

    def draw(self, surface: Surface) -> None:
        surface.set_fill_color(self.color)
        surface.begin_path()
        surface.arc(self.x, self.y, self.radius, 0.0, 2 * math.pi)
        surface.fill()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position.to_list(),
            "velocity": self.velocity.to_list(),
            "mass": self.mass,
            "radius": self.radius,
            "color": self.color,
            "nameColor": self.name_color,
        }

    def __repr__(self) -> str:
        return (
            f"GravityBall(name={self.name!r}, position={self.position}, "
            f"velocity={self.velocity}, mass={self.mass})"
        )
