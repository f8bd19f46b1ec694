"""
Fixed-interval driver: every tick runs one simulation step followed by one
full repaint, on the running asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .render import Surface, draw_frame
from .system import Simulation

logger = logging.getLogger(__name__)


class SimulationLoop:
    def __init__(self, simulation: Simulation, surface: Optional[Surface] = None):
        self.simulation = simulation
        self.surface = surface
        self.frame = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval(self) -> float:
        return self.simulation.config.delta_time

    def tick(self) -> int:
        interactions = self.simulation.step()
        if self.surface is not None:
            config = self.simulation.config
            draw_frame(
                self.simulation.bodies,
                self.surface,
                config.canvas_width,
                config.canvas_height,
                show_names=config.show_names,
            )
        self.frame += 1
        return interactions

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while True:
            try:
                self.tick()
            except Exception:
                logger.exception("Tick %d failed; stopping loop", self.frame)
                raise
            next_tick += self.interval
            delay = next_tick - loop.time()
            if delay < 0:
                # Overran the schedule: drop the missed ticks instead of bursting
                next_tick = loop.time()
                delay = 0.0
            await asyncio.sleep(delay)

    def start(self) -> None:
        """Schedule ticks on the running event loop. No-op when already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Loop started at %.1f ticks/s", 1 / self.interval)

    async def stop(self) -> None:
        """Cancel the pending tick and wait for it so nothing fires afterwards."""
        task, self._task = self._task, None
        if task is None:
            return
        if task.done():
            if not task.cancelled():
                task.exception()  # Failure was logged by _run when it happened
        else:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        logger.info("Loop stopped after %d frames", self.frame)
