"""
jmp
Dodge falling blocks and climb the stack. Tap (click, space, or up) to jump.
"""
from __future__ import annotations

import argparse
import logging

import pygame

from jmp_game.app import Jmp
from jmp_game.config import GameConfig
from jmp_game.render import Camera, Renderer

TITLE = "jmp"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="jmp - fixed-timestep physics arcade game")
    p.add_argument("--width", type=int, default=480, help="Window width in pixels (default: 480)")
    p.add_argument("--height", type=int, default=800, help="Window height in pixels (default: 800)")
    p.add_argument("--fps", type=int, default=60, help="Frame rate cap (default: 60)")
    p.add_argument("--seed", type=int, default=None, help="Random seed for block spawns")
    p.add_argument("--debug", action="store_true", help="Draw body outlines")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig.from_args(args)

    pygame.init()
    surface = pygame.display.set_mode(config.window_size)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    renderer = Renderer(surface, Camera(config.world_width, config.world_height))
    app = Jmp(config, renderer)

    running = True
    try:
        while running:
            delta = clock.tick(config.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    app.input.handle(event)

            app.frame(delta)
            pygame.display.flip()
    finally:
        app.dispose()
        pygame.quit()


if __name__ == "__main__":
    main()
