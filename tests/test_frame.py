import pytest

from gravity.camera import Viewport
from gravity.config import SimulationConfig
from gravity.errors import ConfigurationError
from gravity.frame import FrameDriver
from gravity.simulation import Simulation

STATES = [(-50.0, 0.0, 80.0), (60.0, 10.0, 5.0), (0.0, 70.0, 30.0)]


def _driver(mode):
    config = SimulationConfig(recenter_mode=mode, view_width=800, view_height=600)
    sim = Simulation.from_tuples(STATES, config)
    return FrameDriver.from_config(sim, config), sim


def test_before_draw_keeps_drift_on_center():
    driver, sim = _driver("before_draw")
    for i in range(5):
        frame = driver.advance()
        assert frame.index == i
        assert frame.drift_point == (400, 300)
        assert frame.drift == sim.drift()
        assert len(frame.body_points) == 3


def test_after_draw_projects_with_previous_drift():
    driver, sim = _driver("after_draw")
    initial_drift = sim.drift()
    frame = driver.advance()
    reference = Viewport(center=(400, 300))
    reference.recenter(initial_drift)
    assert frame.body_points == reference.project_all(sim.positions())
    assert frame.origin_point == reference.project((0.0, 0.0))
    # the next frame is anchored on this frame's drift
    reference.recenter(frame.drift)
    second = driver.advance()
    assert second.origin_point == reference.project((0.0, 0.0))


def test_body_points_follow_body_order():
    driver, sim = _driver("before_draw")
    frame = driver.advance()
    assert frame.body_points == [driver.viewport.project(p) for p in sim.positions()]


def test_run_stops_between_frames():
    driver, sim = _driver("before_draw")
    seen = []
    count = driver.run(seen.append, should_stop=lambda: len(seen) >= 4)
    assert count == 4
    assert sim.step_count == 4
    assert [f.index for f in seen] == [0, 1, 2, 3]


def test_run_max_frames():
    driver, sim = _driver("after_draw")
    assert driver.run(lambda frame: None, max_frames=7) == 7
    assert sim.step_count == 7


def test_unknown_recenter_mode():
    sim = Simulation.from_tuples(STATES)
    with pytest.raises(ConfigurationError):
        FrameDriver(sim, Viewport(center=(0, 0)), recenter_mode="never")
