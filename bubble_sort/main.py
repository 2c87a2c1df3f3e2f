import argparse
import sys

import numpy as np
import pygame

from . import render
from .playback import Playback
from .sim import Sim
from .sound import SoundEngine

WINDOW_SIZE = (800, 600)
FPS = 60
TITLE = "Bubble sort visualization"
HUD_COLOR = (200, 200, 200)


class App:
    def __init__(self, width=WINDOW_SIZE[0], height=WINDOW_SIZE[1], seed=None, fps=FPS, mute=False):
        self.rng = np.random.default_rng(seed)
        self.playback = Playback(Sim.new_randomized(self.rng))

        pygame.mixer.pre_init(44100, -16, 1, 512)
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.sound = SoundEngine(enabled=not mute)
        self.fps = fps
        self.running = True

    def run(self):
        try:
            while self.running:
                self._handle_events()
                if self.playback.tick():
                    self._on_advance()
                self._draw()
                pygame.display.flip()
                self.clock.tick(self.fps)
        finally:
            pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.get_surface()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.playback.toggle_pause()
                elif event.key == pygame.K_RIGHT:
                    if self.playback.step():
                        self._on_advance()
                elif event.key == pygame.K_r:
                    self.playback.reset(Sim.new_randomized(self.rng))
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    def _on_advance(self):
        self.sound.on_step(self.playback.sim.snapshot())

    def _draw(self):
        snapshot = self.playback.sim.snapshot()
        render.draw(self.screen, snapshot)

        state = "paused" if self.playback.paused else "running"
        text = f"pass {snapshot.pass_index}  |  {snapshot.step.value}  |  {state}"
        label = self.font.render(text, True, HUD_COLOR)
        self.screen.blit(label, (render.H_MARGIN, render.H_MARGIN))


def seed_arg(value):
    seed = int(value)
    if seed < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative, got {seed}")
    return seed


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bubble_sort",
        description=(
            "Bubble sort visualization.\n"
            "Space: pause/resume  Right: single step (paused)  R: reshuffle  Esc: quit"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--seed", type=seed_arg, help="Random seed for the initial values")
    parser.add_argument("--width", type=int, default=WINDOW_SIZE[0], help="Window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_SIZE[1], help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap; one step per frame while running")
    parser.add_argument("--mute", action="store_true", help="Disable step tones")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        app = App(args.width, args.height, seed=args.seed, fps=args.fps, mute=args.mute)
    except (pygame.error, OSError) as e:
        print(f"Startup error: {e}", file=sys.stderr)
        pygame.quit()
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
