"""Damage models for individual vessel subsystems."""

from __future__ import annotations

import abc
import math
from typing import Any

from deepspace.vector import Vec3d


class DamageComponent(abc.ABC):
    """Interface for a damageable component attached to a physics body."""

    def __init__(self) -> None:
        self.damage_level = 0.0

    @abc.abstractmethod
    def total_damage(self) -> float:
        """Overall damage from 0 (intact) to 1 (destroyed)."""

    @abc.abstractmethod
    def apply_damage(self, amount: float, location: Vec3d = Vec3d()) -> None:
        """Apply ``amount`` of damage at a location on the component."""

    @abc.abstractmethod
    def update(self, dt: float, body: Any) -> None:
        """Advance the component's state and act on the body."""

    def is_critical(self) -> bool:
        return self.total_damage() > 0.8

    def is_destroyed(self) -> bool:
        return self.total_damage() >= 1.0


class PropulsionDamage:
    """Engine damage reducing thrust and causing leaks and steering error."""

    def __init__(self) -> None:
        self.damage_level = 0.0
        self.elapsed = 0.0

    def apply_damage(self, amount: float) -> None:
        self.damage_level = min(1.0, self.damage_level + amount)

    def update(self, dt: float) -> None:
        """Advance the elapsed time; the damage level itself does not change."""
        self.elapsed += dt

    def thrust_multiplier(self) -> float:
        return 1.0 - self.damage_level * 0.8

    def fuel_leak_rate(self) -> float:
        return self.damage_level * 0.5

    def vectoring_error(self) -> float:
        return self.damage_level * 0.1

    def is_critical(self) -> bool:
        return self.damage_level > 0.5


class StructuralDamage:
    """Hull damage that adds drag, inertia and an off-axis torque."""

    def __init__(self) -> None:
        self.damage_level = 0.0
        self.asymmetric_vector = Vec3d()
        self.elapsed = 0.0

    def apply_damage(self, amount: float, impact_location: Vec3d) -> None:
        self.damage_level = min(1.0, self.damage_level + amount)
        self.asymmetric_vector = self.asymmetric_vector + impact_location.normalized() * amount

    def update(self, dt: float) -> None:
        """Advance the elapsed time; the damage level itself does not change."""
        self.elapsed += dt

    def drag_multiplier(self) -> float:
        return 1.0 + self.damage_level * 0.5

    def inertia_multiplier(self) -> float:
        return 1.0 + self.damage_level * 0.3

    def asymmetric_torque(self) -> Vec3d:
        return self.asymmetric_vector * self.damage_level * 1000.0

    def is_critical(self) -> bool:
        return self.damage_level > 0.8


class TPSDamage:
    """Thermal protection damage: impact craters, heating and ablation."""

    NORMAL_THICKNESS = 0.025
    CRITICAL_TEMP = 1800.0
    CHAPMAN_C = 1.9e-4

    def __init__(self) -> None:
        self.damage_level = 0.0
        self.surface_temperature = 293.15
        self.remaining_thickness = self.NORMAL_THICKNESS
        self.ablation_rate = 0.0

    def apply_impact(self, crater_diameter: float) -> None:
        area_ratio = crater_diameter / 1.0
        self.damage_level = min(1.0, self.damage_level + area_ratio * 0.5)

    def update(self, dt: float, velocity: float, density: float) -> None:
        if velocity < 100.0 or density < 1e-10:
            return

        q_conv = self.CHAPMAN_C * math.sqrt(density) * velocity ** 3
        q_effective = q_conv * self.heat_flux_multiplier()

        self.surface_temperature = min(self.surface_temperature + q_effective * dt / 10000.0, 3000.0)

        if self.surface_temperature > 500.0:
            ablation_enthalpy = 50e6
            self.ablation_rate = q_effective / ablation_enthalpy
            self.remaining_thickness = max(0.0, self.remaining_thickness - self.ablation_rate * dt / 256.0)

        if self.remaining_thickness < self.NORMAL_THICKNESS * 0.2:
            self.damage_level = 1.0

    def heat_flux_multiplier(self) -> float:
        return 1.0 + self.damage_level * 3.0

    def is_critical(self) -> bool:
        return self.damage_level > 0.5 or self.surface_temperature > 1500.0


class LifeSupportDamage:
    """Cabin atmosphere degradation as life support is damaged."""

    def __init__(self, crew_count: int = 4) -> None:
        self.damage_level = 0.0
        self.crew_count = crew_count
        self.co2_level = 0.0004
        self.o2_level = 0.209
        self.cabin_temperature = 293.15
        self.cabin_pressure = 101.325

    def apply_damage(self, amount: float) -> None:
        self.damage_level = min(1.0, self.damage_level + amount)

    def update(self, dt: float) -> None:
        scrubber_efficiency = 1.0 - self.damage_level
        co2_generation = 0.008 / 3600.0 * self.crew_count
        if scrubber_efficiency == 0.0:
            # With no scrubbing the CO2 fraction saturates.
            self.co2_level = 1.0
        else:
            self.co2_level = min(1.0, self.co2_level + co2_generation * dt / scrubber_efficiency)

        o2_generation = 5.5 / 60000.0 * self.crew_count
        self.o2_level = min(0.5, self.o2_level + o2_generation * scrubber_efficiency * dt)

        self.cabin_temperature = min(350.0, self.cabin_temperature + self.damage_level * 0.1 * dt)
        self.cabin_pressure = max(0.0, self.cabin_pressure - self.damage_level * 0.05 * dt)

    def is_critical(self) -> bool:
        return (
            self.co2_level > 0.04
            or self.o2_level < 0.16
            or self.cabin_temperature > 310.0
            or self.cabin_pressure < 70.0
        )

    def check_casualty(self) -> bool:
        return (
            self.co2_level > 0.1
            or self.o2_level < 0.10
            or self.cabin_temperature > 330.0
            or self.cabin_pressure < 50.0
        )