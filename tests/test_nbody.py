"""Tests for the N-body scenario."""

import numpy as np
from nbody_tui.physics.body import Body, Marker
from nbody_tui.render.base import Canvas, Renderer
from nbody_tui.simulations.engine import Simulation
from nbody_tui.simulations.nbody import NBody, DRAG, GRAVITY, SPEED
from nbody_tui.utils.config import Config


class RecordingCanvas(Canvas):
    def __init__(self):
        self.points = []

    def print(self, x, y, glyph, color):
        self.points.append((x, y, glyph, color))


class ScriptedRenderer(Renderer):
    """Returns the given keys one per poll, then quits."""

    def __init__(self, keys):
        self.keys = list(keys)

    def draw(self, simulation):
        pass

    def poll(self, timeout):
        return self.keys.pop(0) if self.keys else "q"

    def close(self):
        pass


def make_nbody(**config):
    return NBody(Config(**config), rng=np.random.default_rng(1))


def place(sim, *positions):
    sim.entities.clear()
    for i, (x, y) in enumerate(positions):
        sim.entities.append(Body(1.0, x, y, 0.0, 0.0, Marker("☼", "red")))
    sim.id_counter = len(positions)


def test_init_returns_paused_engine():
    """Test init wraps a three-body scenario in an engine."""
    engine = NBody.init(rng=np.random.default_rng(0))

    assert isinstance(engine, Simulation)
    assert isinstance(engine.simulation, NBody)
    assert len(engine.simulation.entities) == 3
    assert engine.pause is True


def test_settings_drive_physics():
    """Test the physics step reads the panel's values."""
    sim = make_nbody(speed=2, gravity=10.0, drag=0.5)

    assert sim.speed == 2
    assert sim.gravity == 10.0
    assert sim.drag == 0.5

    sim.settings.down()
    sim.settings.right()
    assert sim.gravity == 100.0
    assert sim.settings[GRAVITY] is sim.settings.settings[GRAVITY]
    assert sim.settings[SPEED].value == 2
    assert sim.settings[DRAG].value == 0.5


def test_update_zero_and_one_body():
    """Test update is safe and inert with 0 or 1 bodies."""
    sim = make_nbody(bodies=0)
    sim.update()
    assert len(sim.entities) == 0

    sim.add_body()
    before = (sim.entities[0].position, sim.entities[0].velocity)
    for _ in range(3):
        sim.update()
    assert (sim.entities[0].position, sim.entities[0].velocity) == before


def test_update_three_bodies():
    """Test one step of the symmetric three-body scenario."""
    sim = make_nbody(speed=1, gravity=100.0, drag=1.0)
    place(sim, (0.0, 0.0), (10.0, 0.0), (0.0, 10.0))
    sim.update()

    a, b, c = sim.entities
    assert a.dx > 0 and a.dy > 0
    assert b.dx < 0 and b.dy > 0
    assert c.dx > 0 and c.dy < 0
    assert np.isclose(np.hypot(b.dx, b.dy), np.hypot(c.dx, c.dy))


def test_update_appends_trail_and_recenters():
    """Test trail snapshots are taken and shifted with the bodies."""
    sim = make_nbody(speed=0, gravity=0.0, drag=1.0)
    place(sim, (30.0, 60.0), (30.0, 70.0))
    start = [b.position for b in sim.entities]
    sim.update()

    assert len(sim.trail) == 2
    centroid = np.mean(start, axis=0)
    for body, origin in zip(sim.entities, start):
        assert np.allclose(body.position, np.array(origin) - 0.1 * centroid)
    for marker, origin in zip(sim.trail, start):
        assert np.allclose(marker.position, np.array(origin) - 0.1 * centroid)


def test_trail_is_bounded():
    """Test old trail markers are evicted past trail_length."""
    sim = make_nbody(trail_length=7)
    for _ in range(10):
        sim.update()

    assert len(sim.trail) == 7


def test_add_and_remove_bodies():
    """Test add appends with the next color and remove drops the oldest."""
    sim = make_nbody()
    oldest = sim.entities[0]
    added = sim.add_body()

    assert len(sim.entities) == 4
    assert sim.entities[-1] is added
    assert sim.id_counter == 4
    assert added.marker.color == "blue"

    removed = sim.remove_body()
    assert removed is oldest
    assert len(sim.entities) == 3


def test_remove_from_empty():
    """Test removing from an empty collection is a no-op."""
    sim = make_nbody(bodies=0)
    assert sim.remove_body() is None
    sim.update()


def test_scenario_keys():
    """Test a / d / t keys."""
    sim = make_nbody()
    sim.handle_key_events("a")
    assert len(sim.entities) == 4
    sim.handle_key_events("d")
    assert len(sim.entities) == 3
    sim.handle_key_events("t")
    assert sim.show_trail is True
    sim.handle_key_events("z")
    assert len(sim.entities) == 3


def test_keys_through_engine():
    """Test the engine forwards scenario keys."""
    engine = NBody.init(rng=np.random.default_rng(0))
    engine.handle_key_event("a")
    engine.handle_key_event("a")

    assert len(engine.simulation.entities) == 5


def test_reset_builds_new_scenario_and_keeps_settings():
    """Test reset replaces bodies and trail but not the live settings."""
    sim = make_nbody()
    sim.add_body()
    sim.update()
    old = [b.position for b in sim.entities]
    sim.settings.right()

    sim.reset()

    assert len(sim.entities) == 3
    assert len(sim.trail) == 0
    assert sim.id_counter == 3
    assert [b.position for b in sim.entities] != old[:3]
    assert sim.speed == 4


def test_canvas_render_with_and_without_trail():
    """Test bodies are always drawn and trails only when enabled."""
    sim = make_nbody()
    sim.update()

    canvas = RecordingCanvas()
    sim.canvas_render(canvas)
    assert len(canvas.points) == 3
    assert all(glyph == "☼" for _, _, glyph, _ in canvas.points)

    sim.show_trail = True
    canvas = RecordingCanvas()
    sim.canvas_render(canvas)
    assert len(canvas.points) == 6
    assert canvas.points[0][2] == "·"


def test_query_surface():
    """Test titles, bounds and info text."""
    sim = make_nbody(canvas_bounds=(-10, 10, -5, 5))

    assert sim.canvas_title() == " N-Body Simulation "
    assert sim.info_title() == " Entity Info "
    assert sim.canvas_bounds() == (-10.0, 10.0, -5.0, 5.0)

    lines = sim.info_text()
    assert len(lines) == 3
    assert lines[0].marker == sim.entities[0].marker
    assert lines[0].text == str(sim.entities[0])


def test_running_scenario_logs_pairs_and_forces():
    """Test a running scenario reports pair distances and applied forces."""
    engine = NBody.init(Config(paused=False), rng=np.random.default_rng(4))
    engine.run(ScriptedRenderer([None, None]))

    records = engine.logger.records()
    assert any(line.startswith("[0,1] r:") for line in records)
    assert any(line.startswith("[1,2] r:") for line in records)
    assert any(line.startswith("[2] force:") for line in records)
    assert records[-1] == "simulation stopped"


def test_long_run_keeps_last_hundred_log_lines():
    """Test the log buffer stays at 100 lines however long the run."""
    engine = NBody.init(Config(paused=False), rng=np.random.default_rng(4))
    # Three bodies log three pairs and three forces per tick
    engine.run(ScriptedRenderer([None] * 19))

    records = engine.logger.records()
    assert len(engine.logger) == 100
    assert records[-1] == "simulation stopped"
    assert "simulation started" not in records
