from collections import Counter
from unittest import mock

import pygame
import pytest

from sparkfield.app import Palette, build_burst, main, render
from sparkfield.particles import Vector2
from sparkfield.randomizer import Randomizer
from sparkfield.system import ParticleSystem


def _rgb(color):
    return (color.r, color.g, color.b)


def test_palette_matches_theme_values():
    surface = pygame.Surface((200, 100))
    system = ParticleSystem(200, 100)
    system.spawn_particle(Vector2(150.0, 50.0), Vector2(0.0, 0.0), Palette.CYAN, 1.0)
    system.spawn_particle(Vector2(160.0, 50.0), Vector2(0.0, 0.0), Palette.WHITE, 1.0)
    render(surface, system, None, None, Palette.BLACK)
    assert tuple(surface.get_at((190, 90)))[:3] == (0x28, 0x2A, 0x36)
    assert tuple(surface.get_at((150, 50)))[:3] == (0x8B, 0xE9, 0xFD)
    assert tuple(surface.get_at((160, 50)))[:3] == (0xF8, 0xF8, 0xF2)
    faded = Palette.PINK.with_alpha(28)
    assert _rgb(faded) == _rgb(Palette.PINK)
    assert faded.a == 28
    assert Palette.PINK.a == 255


def test_build_burst_registers_five_configured_emitters():
    system = ParticleSystem(800, 600)
    emitters = build_burst(system, Vector2(100.0, 100.0), Randomizer(1))
    assert [e.color for e in emitters] == [
        Palette.WHITE,
        Palette.YELLOW,
        Palette.ORANGE,
        Palette.PINK,
        Palette.CYAN,
    ]
    assert [e.duration for e in emitters] == [5.0, 0.5, 0.5, 0.1, 1.0 / 100.0]
    assert [e.particles_per_emission for e in emitters] == [200, 200, 200, 200, 3000]
    blast = emitters[-1]
    assert (blast.min_velocity, blast.max_velocity) == (495.0, 505.0)
    assert all(e.direction == Vector2(0.0, 0.0) for e in emitters)


def test_burst_spawns_particles_at_its_position():
    system = ParticleSystem(800, 600)
    origin = Vector2(100.0, 100.0)
    emitters = build_burst(system, origin, Randomizer(7))
    system.update(0.25)
    counts = Counter(p.color for p in system)
    assert counts == {Palette.WHITE: 200, Palette.YELLOW: 200}
    assert all(p.position == origin for p in system)
    assert [e.active for e in emitters] == [True, True, False, False, False]


def test_burst_particles_move_outwards_within_velocity_range():
    system = ParticleSystem(800, 600)
    origin = Vector2(400.0, 300.0)
    emitters = build_burst(system, origin, Randomizer(3))
    system.update(0.25)
    smoke = emitters[0]
    for particle in system:
        speed = particle.velocity.length()
        if particle.color == Palette.WHITE:
            assert smoke.min_velocity - 1e-9 <= speed <= smoke.max_velocity + 1e-9


def test_render_draws_background_and_particles():
    surface = pygame.Surface((200, 100))
    system = ParticleSystem(200, 100)
    system.spawn_particle(Vector2(5.0, 6.0), Vector2(0.0, 0.0), Palette.PINK, 1.0)
    render(surface, system, None, None, Palette.BLACK)
    assert tuple(surface.get_at((5, 6)))[:3] == _rgb(Palette.PINK)
    assert tuple(surface.get_at((190, 90)))[:3] == _rgb(Palette.BLACK)


def test_render_overlay_lightens_debug_box():
    surface = pygame.Surface((200, 100))
    system = ParticleSystem(200, 100)
    render(surface, system, None, None, Palette.BLACK)
    inside = tuple(surface.get_at((15, 15)))[:3]
    black = _rgb(Palette.BLACK)
    assert inside != black
    assert all(a >= b for a, b in zip(inside, black))


def test_render_ignores_particles_outside_surface():
    surface = pygame.Surface((50, 40))
    system = ParticleSystem(50, 40)
    system.spawn_particle(Vector2(50.0, 40.0), Vector2(0.0, 0.0), Palette.RED, 1.0)
    render(surface, system, None, None, Palette.BLACK)
    assert tuple(surface.get_at((49, 39)))[:3] == _rgb(Palette.BLACK)


def test_render_with_font_draws_text():
    pygame.font.init()
    font = pygame.font.Font(None, 14)
    system = ParticleSystem(200, 100)
    plain = pygame.Surface((200, 100))
    texted = pygame.Surface((200, 100))
    render(plain, system, None, None, Palette.BLACK)
    render(texted, system, font, 60, Palette.BLACK)
    differing = [
        (x, y)
        for x in range(20, 120)
        for y in range(20, 60)
        if plain.get_at((x, y)) != texted.get_at((x, y))
    ]
    assert len(differing) > 0


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_main_quits_on_close_event(headless):
    batches = iter([[pygame.event.Event(pygame.QUIT)]])
    with mock.patch("pygame.event.get", side_effect=lambda *a, **k: next(batches)):
        assert main(["--width", "320", "--height", "240"]) == 0


def test_main_handles_click_then_escape(headless):
    batches = iter(
        [
            [pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1)],
            [],
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)],
        ]
    )
    with mock.patch("pygame.event.get", side_effect=lambda *a, **k: next(batches)):
        assert main(["--width", "320", "--height", "240", "--seed", "5"]) == 0