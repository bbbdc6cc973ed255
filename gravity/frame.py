#!/usr/bin/env python3
"""
Per-frame driver tying the Simulation to the Viewport.

Each advance() runs one physics step and produces a Frame: one screen point
per body (in body order) plus the origin and drift markers. The driver knows
nothing about windows or drawing; the caller hands each Frame to a renderer.

Recenter ordering
- before_draw: step, compute drift, recenter, project. The drift marker sits
  on the window center every frame.
- after_draw: step, project with the anchor from the previous frame, then
  compute drift and recenter for the next frame (one frame of lag).
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .camera import Viewport
from .config import SimulationConfig
from .constants import RECENTER_AFTER_DRAW, RECENTER_BEFORE_DRAW, STATS_EVERY_N_FRAMES
from .errors import ConfigurationError
from .simulation import Simulation
from .vector_utils import ZERO, Vector2

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


@dataclass(frozen=True)
class Frame:
    index: int
    body_points: List[Point]
    origin_point: Point
    drift_point: Point
    drift: Vector2


class FrameDriver:
    """
    Advances a Simulation one frame at a time and projects it through a Viewport.

    recenter_mode picks whether the viewport follows this frame's drift
    ("before_draw") or the previous frame's ("after_draw").
    """
    def __init__(self, simulation: Simulation, viewport: Viewport,
                 recenter_mode: str = RECENTER_BEFORE_DRAW):
        if recenter_mode not in (RECENTER_BEFORE_DRAW, RECENTER_AFTER_DRAW):
            raise ConfigurationError(f"unknown recenter_mode {recenter_mode!r}")
        self.simulation = simulation
        self.viewport = viewport
        self.recenter_mode = recenter_mode
        self.frame_index = 0
        # Lagged mode needs an anchor for its first frame.
        self.viewport.recenter(simulation.drift())

    @classmethod
    def from_config(cls, simulation: Simulation, config: SimulationConfig) -> "FrameDriver":
        return cls(simulation, Viewport(config.center, config.view_scale), config.recenter_mode)

    def advance(self) -> Frame:
        self.simulation.step()
        drift = self.simulation.drift()
        lagged = self.recenter_mode == RECENTER_AFTER_DRAW
        if not lagged:
            self.viewport.recenter(drift)
        frame = self._project(drift)
        if lagged:
            self.viewport.recenter(drift)

        self.frame_index += 1
        if self.frame_index % STATS_EVERY_N_FRAMES == 0:
            logger.debug("frame %d: drift=(%.3f, %.3f) momentum=%s",
                         self.frame_index, drift.x, drift.y,
                         tuple(round(c, 6) for c in self.simulation.total_momentum()))
        return frame

    def _project(self, drift: Vector2) -> Frame:
        vp = self.viewport
        return Frame(
            index=self.frame_index,
            body_points=vp.project_all(self.simulation.positions()),
            origin_point=vp.project(ZERO),
            drift_point=vp.project(drift),
            drift=drift,
        )

    def run(self, on_frame: Callable[[Frame], None],
            should_stop: Callable[[], bool] = lambda: False,
            max_frames: Optional[int] = None) -> int:
        """
        Advance frames until should_stop() is true or max_frames is reached.

        The stop signal is checked between frames only; returns the number of
        frames advanced.
        """
        count = 0
        while max_frames is None or count < max_frames:
            if should_stop():
                break
            on_frame(self.advance())
            count += 1
        logger.info("Stopped after %d frames", count)
        return count
