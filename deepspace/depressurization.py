"""Exponential cabin pressure loss through a hull leak."""

from __future__ import annotations

import enum
import math

ATMOSPHERIC_PRESSURE = 101325.0
CONSCIOUSNESS_THRESHOLD = 16000.0
LETHAL_THRESHOLD = 0.0


class ModuleId(enum.Enum):
    BRIDGE = "bridge"
    LAB = "lab"
    MESS = "mess"
    SLEEP = "sleep"
    CARGO = "cargo"
    AIRLOCK = "airlock"


class Depressurization:
    """A pressurised volume that vents through a leak of a given area."""

    def __init__(self, volume: float = 100.0) -> None:
        self.volume = volume
        self.leak_area = 0.0
        self.conductance = 0.0001
        self.current_pressure = ATMOSPHERIC_PRESSURE
        self._sealed = {module: False for module in ModuleId}

    def _rate(self) -> float:
        return self.conductance * self.leak_area / self.volume

    def create_leak(self, area: float) -> None:
        self.leak_area = area
        self.conductance = 0.0001 * (area / 0.001)

    def seal_bulkhead(self, module: ModuleId) -> None:
        self._sealed[module] = True

    def open_bulkhead(self, module: ModuleId) -> None:
        self._sealed[module] = False

    def is_bulkhead_sealed(self, module: ModuleId) -> bool:
        return self._sealed.get(module, False)

    def pressure_at(self, time: float, initial_pressure: float = ATMOSPHERIC_PRESSURE) -> float:
        """Pressure ``time`` seconds after the leak opened."""
        if self.leak_area <= 0.0:
            return initial_pressure
        return initial_pressure * math.exp(-self._rate() * time)

    def time_to_unconsciousness(self) -> float:
        if self.leak_area <= 0.0:
            return math.inf
        return math.log(CONSCIOUSNESS_THRESHOLD / ATMOSPHERIC_PRESSURE) / -self._rate()

    def time_to_lethal(self) -> float:
        if self.leak_area <= 0.0:
            return math.inf
        return math.log(LETHAL_THRESHOLD / ATMOSPHERIC_PRESSURE + 1.0) / -self._rate()

    def update(self, dt: float) -> None:
        if self.leak_area > 0.0:
            self.current_pressure = max(self.current_pressure * math.exp(-self._rate() * dt), 0.0)