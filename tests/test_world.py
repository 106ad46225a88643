import io
import logging

import pytest
from softshape import shapes
from softshape.logging_config import default_level, setup_logging
from softshape.profiler import Profiler
from softshape.renderer import BufferedRenderer, DebugRenderer
from softshape.soft_body import SoftBody
from softshape.vector import Vector2
from softshape.world import World

SQUARE = shapes.from_coords(0, 0, 10, 0, 10, 10, 0, 10)


def make_world():
    world = World()
    box = SoftBody(SQUARE, 1.0, 40.0, 1.0, 0.5)
    ring = SoftBody(shapes.translate(shapes.circle(5.0, 12), Vector2(100, 100)), 1.0, 40.0, 1.0, 0.5)
    world.add_body(box)
    world.add_body(ring)
    return world, box, ring


def test_add_body_assigns_ids():
    world, box, ring = make_world()
    assert (box.id, ring.id) == (1, 2)
    assert world.bodies == [box, ring]


def test_step_advances_time():
    world, _, _ = make_world()
    for _ in range(3):
        world.step(0.25)
    assert world.time == pytest.approx(0.75)


def test_query_point():
    world, box, ring = make_world()
    assert world.query_point(Vector2(5, 5)) is box
    assert world.query_point(Vector2(100, 100)) is ring
    assert world.query_point(Vector2(50, 50)) is None


def test_query_point_prefers_topmost():
    world, box, _ = make_world()
    cover = SoftBody(shapes.from_coords(2, 2, 8, 2, 8, 8, 2, 8), 1.0, 1.0, 0.0, 0.0)
    world.add_body(cover)
    assert world.query_point(Vector2(5, 5)) is cover
    assert world.query_point(Vector2(1, 1)) is box


def test_nearest_vertex():
    world, box, ring = make_world()
    assert world.nearest_vertex(Vector2(9, -1)) == (box, 1)
    assert world.nearest_vertex(Vector2(1, -1)) == (box, 0)
    assert world.nearest_vertex(Vector2(106, 100)) == (ring, 0)
    assert World().nearest_vertex(Vector2(0, 0)) is None


def test_pin_holds_vertex_near_target():
    world, box, _ = make_world()
    target = Vector2(-4.0, -4.0)
    world.pin(box, 0, target)
    for _ in range(300):
        world.step(1 / 60)
    # The body has caught up with the pin, so the step barely moves it
    assert (box.points[0].p - target).len() < 0.05


def test_pin_drag_then_release_restores_shape():
    world, box, _ = make_world()
    pin = world.pin(box, 2, Vector2(14.0, 14.0))
    for i in range(60):
        pin.set_target(Vector2(14.0 + 0.1 * i, 14.0))
        world.step(1 / 60)
    world.unpin(pin)
    assert world.pins == []
    for _ in range(900):
        world.step(1 / 60)
    pts = box.get_shape()
    for i in range(4):
        assert (pts[(i + 1) % 4] - pts[i]).len() == pytest.approx(10.0, abs=1e-2)


def test_pin_index_contract():
    world, box, _ = make_world()
    with pytest.raises(ValueError):
        world.pin(box, 4, Vector2(0, 0))


def test_remove_body_drops_its_pins():
    world, box, ring = make_world()
    world.pin(box, 0, Vector2(0, 0))
    world.pin(ring, 0, Vector2(100, 100))
    world.remove_body(box)
    assert world.bodies == [ring]
    assert [pin.body for pin in world.pins] == [ring]


def test_profiler_sections():
    prof = Profiler()
    world, _, _ = make_world()
    world.profiler = prof
    for _ in range(5):
        world.step(1 / 60)
    summary = prof.stats.summary()
    assert summary["pins"]["n"] == 5
    assert summary["update"]["n"] == 5
    assert summary["update"]["max_ms"] >= summary["update"]["mean_ms"] >= 0.0


def test_buffered_renderer_records_outlines():
    world, box, ring = make_world()
    renderer = BufferedRenderer()
    for _ in range(3):
        world.step(1 / 60)
        renderer.render_world(world)
    assert len(renderer.frames) == 3
    last = renderer.frames[-1]
    assert last["time"] == pytest.approx(3 / 60)
    assert [b["id"] for b in last["bodies"]] == [1, 2]
    assert last["bodies"][0]["vertices"] == [(p.x, p.y) for p in box.get_shape()]
    renderer.clear()
    assert renderer.frames == []


def test_debug_renderer_writes_frames():
    world, _, _ = make_world()
    out = io.StringIO()
    DebugRenderer(output=out).render_world(world)
    text = out.getvalue()
    assert "=== Frame t=0.0000 ===" in text
    assert "[1] 4 pts" in text
    assert "[2] 12 pts" in text


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="softshape"):
        world = World()
        world.add_body(SoftBody(SQUARE, 1.0, 1.0, 0.0, 0.0))
    assert "SoftBody created: 4 points" in caplog.text
    assert "Body 1 added" in caplog.text


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("SOFTSHAPE_LOG_LEVEL", "debug")
    assert default_level() == logging.DEBUG
    monkeypatch.setenv("SOFTSHAPE_LOG_LEVEL", "nonsense")
    assert default_level() == logging.WARNING
    monkeypatch.delenv("SOFTSHAPE_LOG_LEVEL")
    assert default_level() == logging.WARNING


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "softshape.log"
    out = io.StringIO()
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file), stream=out)
    assert logger is logging.getLogger("softshape")
    assert len(logger.handlers) == 2

    World().add_body(SoftBody(SQUARE, 1.0, 1.0, 0.0, 0.0))
    assert "Logging initialized at DEBUG" in out.getvalue()
    assert "softshape.world - DEBUG - Body 1 added" in out.getvalue()

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    assert "Body 1 added" in log_file.read_text(encoding="utf-8")
    logger.setLevel(logging.NOTSET)
