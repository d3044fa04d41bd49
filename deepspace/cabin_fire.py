"""Cabin fire growth, oxygen depletion and suppression."""

from __future__ import annotations

import enum

O2_CONSUMPTION_PERSON = 0.000005
FIRE_TEMP_RISE_RATE = 5.0
SMOKE_RATE = 0.001
SUPPRESSION_COOLING_RATE = 2.0
SUPPRESSION_O2_RESTORE_RATE = 0.0001

AMBIENT_TEMPERATURE = 293.15
NORMAL_OXYGEN = 0.21


class FireState(enum.Enum):
    NONE = "none"
    SMOLDERING = "smoldering"
    ACTIVE = "active"
    SUPPRESSED = "suppressed"


class CabinFire:
    """A fire in one module, with temperature, oxygen fraction and smoke."""

    def __init__(self, module_volume: float = 100.0, crew_count: int = 4) -> None:
        self.state = FireState.NONE
        self.temperature = AMBIENT_TEMPERATURE
        self.oxygen_level = NORMAL_OXYGEN
        self.smoke_density = 0.0
        self.suppression_active = False
        self.module_volume = module_volume
        self.crew_count = crew_count

    def ignite(self) -> None:
        if self.state is FireState.NONE:
            self.state = FireState.SMOLDERING

    def update(self, dt: float) -> None:
        if self.state in (FireState.NONE, FireState.SUPPRESSED):
            return

        if self.state is FireState.SMOLDERING:
            self.temperature += 1.0 * dt
            if self.temperature > 400.0:
                self.state = FireState.ACTIVE

        if self.state is FireState.ACTIVE:
            self.temperature = min(self.temperature + FIRE_TEMP_RISE_RATE * dt, 1200.0)

            consumption = self.crew_count * O2_CONSUMPTION_PERSON + 0.00001
            self.oxygen_level = max(self.oxygen_level - consumption * dt / self.module_volume, 0.0)
            if self.oxygen_level < 0.05:
                self.state = FireState.SMOLDERING

            self.smoke_density = min(self.smoke_density + SMOKE_RATE * dt, 1.0)

        if self.suppression_active:
            self.temperature = max(self.temperature - SUPPRESSION_COOLING_RATE * dt, AMBIENT_TEMPERATURE)
            self.oxygen_level = min(self.oxygen_level + SUPPRESSION_O2_RESTORE_RATE * dt, NORMAL_OXYGEN)
            if self.temperature <= 320.0 and self.smoke_density < 0.3:
                self.state = FireState.SUPPRESSED
                self.suppression_active = False

    def activate_suppression(self) -> None:
        self.suppression_active = True
        if self.state in (FireState.SMOLDERING, FireState.ACTIVE):
            self.state = FireState.ACTIVE