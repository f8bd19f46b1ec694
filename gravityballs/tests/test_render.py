from gravityballs.body import GravityBall
from gravityballs.render import CommandSurface, draw_frame
from gravityballs.vector import Vector2


def _balls():
    return [
        GravityBall(Vector2(10, 20), mass=1.0, radius=5, color="#111", name="a", name_color="#aaa"),
        GravityBall(Vector2(30, 40), mass=1.0, radius=2, color="#222", name="b", name_color="#bbb"),
    ]


def test_draw_frame_clears_once_then_draws_in_order():
    surface = CommandSurface()
    draw_frame(_balls(), surface, 800, 600)
    commands = surface.commands
    assert commands[0] == {"op": "clearRect", "x": 0, "y": 0, "width": 800, "height": 600}
    assert [c["op"] for c in commands].count("clearRect") == 1
    fills = [c["color"] for c in commands if c["op"] == "fillStyle"]
    assert fills == ["#111", "#222"]


def test_draw_frame_labels_names():
    surface = CommandSurface()
    draw_frame(_balls(), surface, 800, 600, show_names=True)
    labels = [c for c in surface.commands if c["op"] == "fillText"]
    assert [label["text"] for label in labels] == ["a", "b"]
    assert labels[0]["x"] == 10
    assert labels[0]["y"] < 20 - 5
    fills = [c["color"] for c in surface.commands if c["op"] == "fillStyle"]
    assert fills == ["#111", "#aaa", "#222", "#bbb"]


def test_empty_frame_only_clears():
    surface = CommandSurface()
    draw_frame([], surface, 10, 10)
    assert [c["op"] for c in surface.commands] == ["clearRect"]


def test_partial_clear_keeps_the_recording():
    surface = CommandSurface()
    draw_frame(_balls(), surface, 800, 600)
    recorded = len(surface.commands)
    surface.clear_rect(0, 0, 10, 10)
    assert len(surface.commands) == recorded + 1


def test_begin_frame_starts_new_recording():
    surface = CommandSurface()
    surface.fill()
    surface.begin_frame()
    assert surface.commands == []
