"""Blast overpressure and structural effects of an airlock explosion."""

from __future__ import annotations

import math

from deepspace.vector import Vec3d

OVERPRESSURE_DECAY_RATE = 0.5
DAMAGE_THRESHOLD = 0.3


class AirlockExplosion:
    """Tracks an explosion's blast field and the damage it leaves behind."""

    def __init__(self) -> None:
        self.center = Vec3d()
        self.energy = 0.0
        self.structural_integrity = 1.0
        self.asymmetric_damage = 0.0
        self.exploded = False
        self.time_since_explosion = 0.0

    def trigger_explosion(self, center: Vec3d, energy: float) -> None:
        self.center = center
        self.energy = energy
        self.exploded = True
        self.time_since_explosion = 0.0

    def overpressure_at(self, position: Vec3d, time: float) -> float:
        """Overpressure at a position, ``time`` seconds after the blast."""
        if not self.exploded:
            return 0.0
        distance = max((position - self.center).length(), 0.1)
        pressure = self.energy / (distance * distance)
        decay = math.exp(-OVERPRESSURE_DECAY_RATE * time)
        return pressure * decay * 0.001

    def torque_from_asymmetric_damage(self) -> Vec3d:
        if self.asymmetric_damage < 0.1:
            return Vec3d()
        magnitude = self.asymmetric_damage * self.energy * 0.001
        return Vec3d(magnitude * 0.3, magnitude * 0.7, 0.0)

    def apply_damage(self, damage: float) -> None:
        self.structural_integrity = max(0.0, self.structural_integrity - damage)
        self.asymmetric_damage = min(1.0, self.asymmetric_damage + damage * 0.5)

    def update(self, dt: float) -> None:
        if self.exploded:
            self.time_since_explosion += dt