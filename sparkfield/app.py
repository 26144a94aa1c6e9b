"""Interactive window: click to set off a burst of particle emitters."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from sparkfield.emitter import ParticleEmitter
from sparkfield.particles import Color, Vector2
from sparkfield.randomizer import Randomizer
from sparkfield.system import ParticleSystem

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
FRAMERATE_LIMIT = 144
FONT_SIZE = 14
TITLE = "Particles Project"

_DEBUG_BOX_POSITION = (10, 10)
_DEBUG_BOX_SIZE = (120, 62)
_DEBUG_BOX_ALPHA = 28
_FPS_TEXT_POSITION = (20, 20)
_COUNT_TEXT_POSITION = (20, 42)


class Palette:
    """Dark theme colours used by the window."""

    BLACK = Color(0x28, 0x2A, 0x36)
    WHITE = Color(0xF8, 0xF8, 0xF2)
    CYAN = Color(0x8B, 0xE9, 0xFD)
    GREEN = Color(0x50, 0xFA, 0x7B)
    ORANGE = Color(0xFF, 0xB8, 0x6C)
    PINK = Color(0xFF, 0x79, 0xC6)
    PURPLE = Color(0xBD, 0x93, 0xF9)
    RED = Color(0xFF, 0x55, 0x55)
    YELLOW = Color(0xF1, 0xFA, 0x8C)


# (colour, duration, emission rate, min velocity, max velocity,
#  min lifetime, max lifetime, particles per emission)
_BURST_LAYERS = (
    (Palette.WHITE, 5.0, 5.0, 5.0, 10.0, 2.0, 5.0, 200),
    (Palette.YELLOW, 0.5, 5.0, 1.0, 50.0, 0.1, 0.5, 200),
    (Palette.ORANGE, 0.5, 3.0, 1.0, 50.0, 0.1, 0.5, 200),
    (Palette.PINK, 0.1, 100.0, 1.0, 50.0, 0.1, 0.5, 200),
    (Palette.CYAN, 1.0 / 100.0, 1000.0, 495.0, 505.0, 1.0, 2.0, 3000),
)


def build_burst(
    system: ParticleSystem,
    position: Vector2,
    randomizer: Randomizer | None = None,
) -> list[ParticleEmitter]:
    """Register the smoke, flame and blast emitters of one explosion at ``position``."""
    emitters = []
    for (
        color,
        duration,
        rate,
        min_velocity,
        max_velocity,
        min_lifetime,
        max_lifetime,
        count,
    ) in _BURST_LAYERS:
        emitter = ParticleEmitter(system, position, randomizer)
        emitter.color = color
        emitter.duration = duration
        emitter.emission_rate = rate
        emitter.direction = Vector2(0.0, 0.0)
        emitter.set_velocity(min_velocity, max_velocity)
        emitter.set_lifetime(min_lifetime, max_lifetime)
        emitter.particles_per_emission = count
        system.spawn_emitter(emitter)
        emitters.append(emitter)
    return emitters


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (color.r, color.g, color.b, color.a)


def render(
    surface: pygame.Surface,
    system: ParticleSystem,
    font: pygame.font.Font | None = None,
    fps: int | None = None,
    background: Color = Palette.BLACK,
) -> None:
    """Draw the background, every particle and the debug overlay onto ``surface``."""
    surface.fill(_rgba(background))

    bounds = surface.get_rect()
    with _locked(surface):
        for particle in system:
            point = (int(particle.position.x), int(particle.position.y))
            if bounds.collidepoint(point):
                surface.set_at(point, _rgba(particle.color))

    overlay = pygame.Surface(_DEBUG_BOX_SIZE, pygame.SRCALPHA)
    overlay.fill(_rgba(Palette.WHITE.with_alpha(_DEBUG_BOX_ALPHA)))
    surface.blit(overlay, _DEBUG_BOX_POSITION)

    if font is None:
        return
    text_color = _rgba(Palette.WHITE)[:3]
    if fps is not None:
        surface.blit(font.render(f"FPS: {fps}", True, text_color), _FPS_TEXT_POSITION)
    surface.blit(
        font.render(f"Particles: {len(system)}", True, text_color), _COUNT_TEXT_POSITION
    )


class _locked:
    """Keep a surface locked while many pixels are written."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    def __enter__(self) -> pygame.Surface:
        self._surface.lock()
        return self._surface

    def __exit__(self, *exc_info: object) -> None:
        self._surface.unlock()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Click to spawn particle explosions.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--fps-limit", type=int, default=FRAMERATE_LIMIT)
    parser.add_argument("--font", default=None, help="path of a TrueType font file")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive window until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        window = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(args.font, FONT_SIZE)

        system = ParticleSystem(args.width, args.height)
        randomizer = Randomizer(args.seed)
        clock = pygame.time.Clock()
        fps_refresh = 1.0
        fps: int | None = None
        running = True

        while running:
            elapsed = clock.tick(args.fps_limit) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    build_burst(system, Vector2(float(x), float(y)), randomizer)

            system.update(elapsed)

            if fps_refresh <= 0.0:
                if elapsed > 0:
                    fps = int(1.0 / elapsed)
                fps_refresh = 1.0
            else:
                fps_refresh -= elapsed

            render(window, system, font, fps)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0