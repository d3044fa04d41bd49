"""Stochastic micrometeorite impacts and the damage they deal."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from deepspace.vector import Vec3d

FLUX_SCALE = 1e-7
SCALE_HEIGHT = 700000.0
TYPICAL_VELOCITY = 20000.0
CRATER_COEFFICIENT = 0.3
CRATER_EXPONENT = 1.0 / 3.0

_POISSON_CHUNK = 30.0


@dataclass
class ImpactEvent:
    position: Vec3d = field(default_factory=Vec3d)
    velocity: Vec3d = field(default_factory=Vec3d)
    diameter_mm: float = 0.0
    energy_joules: float = 0.0


@dataclass
class SubsystemDamage:
    """Accumulated damage per vessel subsystem."""

    tps: float = 0.0
    structural: float = 0.0
    propulsion: float = 0.0
    life_support: float = 0.0


def crater_diameter(energy_joules: float) -> float:
    """Crater diameter produced by an impact of the given energy."""
    if energy_joules <= 0.0:
        return 0.0
    return CRATER_COEFFICIENT * energy_joules ** CRATER_EXPONENT


def _poisson(rng: random.Random, lam: float) -> int:
    count = 0
    # Split large means so exp(-lam) stays representable.
    while lam > _POISSON_CHUNK:
        count += _poisson(rng, _POISSON_CHUNK)
        lam -= _POISSON_CHUNK
    limit = math.exp(-lam)
    product = rng.random()
    while product > limit:
        count += 1
        product *= rng.random()
    return count


class MicrometeoriteImpact:
    """Generates impacts from an altitude-dependent flux model."""

    def __init__(self, seed: int = 12345) -> None:
        self.impact_count = 0
        self.total_energy = 0.0
        self.seed = seed

    def _next_rng(self) -> random.Random:
        rng = random.Random(self.seed)
        self.seed += 1
        return rng

    def impact_probability(self, altitude: float, area: float) -> float:
        """Expected number of impacts on ``area`` at ``altitude``."""
        if area <= 0.0 or altitude <= 0.0:
            return 0.0
        flux = FLUX_SCALE * math.exp(-altitude / SCALE_HEIGHT)
        return flux * area

    def generate_impact(self, altitude: float, area: float) -> Optional[ImpactEvent]:
        lam = self.impact_probability(altitude, area)
        if lam <= 0.0:
            return None

        count = _poisson(self._next_rng(), lam)
        if count <= 0:
            return None

        position = self._surface_location()
        diameter = self._meteorite_diameter()
        mass = 2.5 * diameter ** 3 * 1e-9
        event = ImpactEvent(
            position=position,
            velocity=Vec3d(0.0, 0.0, TYPICAL_VELOCITY),
            diameter_mm=diameter,
            energy_joules=0.5 * mass * TYPICAL_VELOCITY * TYPICAL_VELOCITY,
        )

        self.impact_count += count
        self.total_energy += event.energy_joules * count
        return event

    def apply_impact(self, impact: ImpactEvent, damage: SubsystemDamage) -> None:
        """Add an impact's damage contributions to ``damage``."""
        damage.tps += crater_diameter(impact.energy_joules) * 0.01
        damage.structural += impact.energy_joules * 1e-9
        damage.propulsion += impact.energy_joules * 5e-10
        damage.life_support += impact.energy_joules * 2e-10

    def update(self, dt: float, altitude: float, area: float, damage: SubsystemDamage) -> Optional[ImpactEvent]:
        """Check for an impact over ``dt`` seconds and apply it to ``damage``."""
        if dt <= 0.0 or area <= 0.0:
            return None
        impact = self.generate_impact(altitude, area * dt)
        if impact is not None:
            self.apply_impact(impact, damage)
        return impact

    def _surface_location(self) -> Vec3d:
        rng = self._next_rng()
        theta = rng.uniform(0.0, 2.0 * math.pi)
        phi = rng.uniform(0.0, math.pi / 2.0)
        return Vec3d(
            math.sin(phi) * math.cos(theta),
            math.sin(phi) * math.sin(theta),
            math.cos(phi),
        )

    def _meteorite_diameter(self) -> float:
        diameter = self._next_rng().expovariate(1.0) * 1000.0
        return min(diameter, 5000.0)