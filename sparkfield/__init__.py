"""Emitter-driven 2D particle system with an interactive pygame demo."""

__version__ = "0.1.0"
__all__ = ["particles", "randomizer", "emitter", "system", "app"]