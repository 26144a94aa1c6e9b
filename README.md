# sparkfield

A small 2D particle system. Emitters spawn bursts of particles into a
`ParticleSystem`; particles move with a constant velocity and are removed once
their lifetime runs out or they leave the rectangular area of the system.
Random values can be drawn from a uniform, Gaussian or Perlin-noise
distribution.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The demo

```
sparkfield
```

This opens a pygame window, 1920×1080 by default. Click anywhere to set off an
explosion made of five emitters: long-lived white smoke, short yellow, orange
and pink sparks, and a fast cyan blast. The top-left corner shows the frame
rate (refreshed about once a second) and the number of live particles. Press
Escape or close the window to quit.

Options:

```
sparkfield --width 1280 --height 720 --fps-limit 60 --seed 7 --font path/to/font.ttf
```

- `--width`, `--height`: window size, which is also the area particles live in.
- `--fps-limit`: frame-rate cap (default 144).
- `--font`: a TrueType font for the overlay text; pygame's default font is used
  otherwise.
- `--seed`: seed for the random number generator.

## Using the library

```python
from sparkfield.particles import Vector2, Color
from sparkfield.randomizer import Randomizer, DistributionType
from sparkfield.system import ParticleSystem
from sparkfield.emitter import ParticleEmitter

system = ParticleSystem(800, 600)
rng = Randomizer(seed=42, distribution=DistributionType.UNIFORM)

emitter = ParticleEmitter(system, Vector2(400.0, 300.0), rng)
emitter.color = Color(255, 184, 108)
emitter.duration = 1.0
emitter.emission_rate = 10.0
emitter.particles_per_emission = 50
emitter.set_velocity(20.0, 80.0)
emitter.set_lifetime(0.5, 1.5)
system.spawn_emitter(emitter)

for _ in range(60):
    system.update(1 / 60)

print(len(system), "particles alive")
for particle in system:
    print(particle.position, particle.color, particle.remaining)
```

`ParticleSystem.update(elapsed)` takes the time step in seconds. It first
removes particles that have expired or left the area, then moves the rest and
counts down their remaining life, and finally advances every emitter. An
emitter is dropped once its duration is over.

### Emitters

A `ParticleEmitter` emits from `position` in a cone of `angle` radians
(a full circle by default) around `direction`; a zero direction means any
direction. Each emission spawns `particles_per_emission` particles with a speed
drawn from the velocity range and a lifetime drawn from the lifetime range.

- Setting `duration` restarts the emitter's clock.
- Setting `emission_rate` (emissions per second) clears any pending emission
  time; a rate of zero or less never emits.
- Setting `active` also restarts the clock.

Defaults: duration 2 s, 10 emissions per second, 10 particles per emission,
speed 1–2, lifetime 1–3 s, white particles.

### Value types

`Vector2` is an immutable 2D vector supporting `+`, `-`, multiplication by a
number, `length()`, `normalized()` (which raises `ValueError` for a zero
vector) and unpacking into `x, y`. `Color` is an RGBA colour whose channels
must be in 0..255 (`ValueError` otherwise); `with_alpha()` returns a copy with
a different alpha. `Particle` holds a particle's position, velocity, colour,
lifetime, remaining life and scale.

### Randomizer

```python
rng = Randomizer(seed=1, distribution=DistributionType.GAUSSIAN)
rng.random_float(0.0, 1.0)       # clustered around 0.5, clamped to [0, 1]
rng.random_unsigned(0, 255)      # integer clamped to [0, 255]
rng.random_vector(0, 10, 0, 5)   # Vector2, components drawn independently
rng.random_directional_vector(Vector2(1.0, 0.0), 0.5)
rng.perlin_noise_2d(1.3, 4.7)
rng.reset_noise_index()          # restart the Perlin sequence
```

The distribution can be changed at any time through `rng.distribution`. With
`DistributionType.PERLIN`, successive calls walk along a 1D noise sequence
instead of drawing independent values.

`random_directional_vector` with a zero direction gives a random unit vector
pointing anywhere; otherwise the result keeps the direction's length and lies
within half the angle of it on either side.

### Drawing

`sparkfield.app.render(surface, system, font=None, fps=None)` draws the
background, each particle as a single pixel and the debug overlay onto a
pygame surface. `sparkfield.app.build_burst(system, position, randomizer=None)`
registers the demo's five explosion emitters and returns them.

## Limitations

Particles keep their colour and size for their whole life: the emitter's
`start_color` and `end_color` and a particle's `scale` are stored but not used
for fading or scaling. Particles have no forces acting on them (no gravity or
drag) and are drawn only as single pixels.