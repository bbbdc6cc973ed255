#!/usr/bin/env python3
"""
Gravity simulator application entry point and pygame renderer.

What this module does
- Builds a SimulationConfig from a preset, an optional JSON file and the
  command line.
- Creates a randomly populated Simulation and a FrameDriver that recenters the
  view on the system's drift every frame.
- Runs a single-threaded pygame loop: poll events, advance one frame, draw the
  bodies as white points plus origin and drift markers, pace to the target FPS.

Controls
- Escape or closing the window: quit
- Space: pause/resume stepping
- F1: toggle frame pacing (debug; runs as fast as possible)

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python gravity_sim.py --preset dense --seed 7`
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from gravity.camera import is_on_screen, safe_point
from gravity.config import PRESETS, RECENTER_MODES, UPDATE_POLICIES, SimulationConfig, get_preset, load_config
from gravity.constants import (
    BACKGROUND_COLOR,
    BODY_COLOR,
    DRIFT_COLOR,
    ORIGIN_COLOR,
    WINDOW_TITLE,
)
from gravity.errors import SimulationError
from gravity.frame import Frame, FrameDriver
from gravity.simulation import Simulation

logger = logging.getLogger("gravity_sim")


class PygameRenderer:
    """
    Pygame loop: owns the window, polls input, advances frames and draws them.
    """
    def __init__(self, driver: FrameDriver, config: SimulationConfig):
        self.driver = driver
        self.config = config
        self.surface = None
        self.clock = None
        self.running = True
        self.playing = True
        self.frame_pacing = config.frame_pacing
        self.last_frame: Optional[Frame] = None

    def run(self, max_frames: Optional[int] = None) -> int:
        pygame.init()
        try:
            pygame.display.set_caption(WINDOW_TITLE)
            self.surface = pygame.display.set_mode((self.config.view_width, self.config.view_height))
            self.clock = pygame.time.Clock()
            frames = 0
            while self.running and (max_frames is None or frames < max_frames):
                self.handle_events()
                if not self.running:
                    break
                if self.playing:
                    self.last_frame = self.driver.advance()
                    frames += 1
                if self.last_frame is not None:
                    self.draw(self.last_frame)
                if self.frame_pacing:
                    self.clock.tick(self.config.fps)
                else:
                    self.clock.tick()
            logger.info("Renderer stopped after %d frames (%.1f fps)", frames, self.clock.get_fps())
            return frames
        finally:
            pygame.quit()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.playing = not self.playing
                    logger.info("Simulation %s", "resumed" if self.playing else "paused")
                elif event.key == pygame.K_F1:
                    self.frame_pacing = not self.frame_pacing
                    logger.info("Frame pacing %s", "on" if self.frame_pacing else "off")

    def draw(self, frame: Frame) -> None:
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)
        w, h = surf.get_size()
        for pt in frame.body_points:
            p = safe_point(pt)
            if p and is_on_screen(p, w, h):
                surf.set_at(p, BODY_COLOR)
        for pt, color in ((frame.origin_point, ORIGIN_COLOR), (frame.drift_point, DRIFT_COLOR)):
            p = safe_point(pt)
            if p:
                pygame.draw.circle(surf, color, p, 3, 1)
        pygame.display.flip()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Real-time 2D gravitational N-body simulator")
    p.add_argument("--preset", choices=sorted(PRESETS), default="classic")
    p.add_argument("--config", type=str, default=None, help="JSON file of config overrides")
    p.add_argument("--bodies", type=int, default=None, help="number of bodies")
    p.add_argument("--g", type=float, default=None, help="gravitational constant")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--policy", choices=UPDATE_POLICIES, default=None)
    p.add_argument("--recenter", choices=RECENTER_MODES, default=None)
    p.add_argument("--no-pacing", action="store_true", help="do not limit the frame rate")
    p.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    config = get_preset(args.preset)
    if args.config:
        config = load_config(args.config, base=config)
    config = config.with_overrides(
        body_count=args.bodies,
        gravitational_constant=args.g,
        seed=args.seed,
        update_policy=args.policy,
        recenter_mode=args.recenter,
        frame_pacing=False if args.no_pacing else None,
    )
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = build_config(args)
        simulation = Simulation.from_config(config)
    except SimulationError as exc:
        logger.error("Invalid setup: %s", exc)
        return 2

    driver = FrameDriver.from_config(simulation, config)
    try:
        PygameRenderer(driver, config).run(max_frames=args.frames)
    except pygame.error as exc:
        logger.error("Display initialization failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
