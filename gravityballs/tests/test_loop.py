import asyncio

from gravityballs.config import SimulationConfig
from gravityballs.loop import SimulationLoop
from gravityballs.render import CommandSurface
from gravityballs.system import Simulation
from gravityballs.vector import Vector2

FAST = SimulationConfig(updates_per_second=200)


def _simulation(config=FAST):
    return Simulation(
        config,
        initial_bodies=[
            {"position": Vector2(0, 0), "mass": 1e13, "radius": 3},
            {"position": Vector2(50, 0), "mass": 1e13, "radius": 4},
        ],
    )


def test_tick_steps_then_repaints():
    surface = CommandSurface()
    loop = SimulationLoop(_simulation(), surface=surface)
    assert loop.tick() == 1
    assert loop.frame == 1
    assert loop.simulation.tick == 1

    ops = [cmd["op"] for cmd in surface.commands]
    assert ops == ["clearRect"] + ["fillStyle", "beginPath", "arc", "fill"] * 2
    moved_x = loop.simulation.bodies[0].x
    assert surface.commands[3]["x"] == moved_x
    assert moved_x > 0


def test_each_tick_replaces_the_frame():
    surface = CommandSurface()
    loop = SimulationLoop(_simulation(), surface=surface)
    loop.tick()
    loop.tick()
    assert len(surface.commands) == 9


def test_tick_without_surface():
    loop = SimulationLoop(_simulation())
    loop.tick()
    assert loop.frame == 1


def test_start_and_stop_cancel_pending_ticks():
    async def scenario():
        loop = SimulationLoop(_simulation(), surface=CommandSurface())
        loop.start()
        task = loop._task
        loop.start()
        assert loop._task is task
        assert loop.running
        await asyncio.sleep(0.05)
        await loop.stop()
        stopped_at = loop.frame
        await asyncio.sleep(0.03)
        return loop, stopped_at

    loop, stopped_at = asyncio.run(scenario())
    assert stopped_at > 0
    assert loop.frame == stopped_at
    assert not loop.running


def test_stop_is_idempotent():
    async def scenario():
        loop = SimulationLoop(_simulation())
        await loop.stop()
        loop.start()
        await loop.stop()
        await loop.stop()
        return loop

    assert not asyncio.run(scenario()).running


def test_failing_tick_stops_the_loop():
    def explode():
        raise RuntimeError("boom")

    async def scenario():
        loop = SimulationLoop(_simulation())
        loop.simulation.step = explode
        loop.start()
        await asyncio.sleep(0.01)
        running = loop.running
        await loop.stop()
        return running

    assert asyncio.run(scenario()) is False
