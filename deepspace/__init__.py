"""Spaceflight environment models: vectors, atmosphere and gravity, cabin emergencies,
subsystem damage with cascades, micrometeorites, reentry heating and a text runtime."""

__version__ = "0.2.0"