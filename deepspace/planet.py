"""Planet gravity and the US Standard Atmosphere 1976."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from deepspace.vector import Vec3d

GRAVITATIONAL_CONSTANT = 6.67430e-11

_AIR_GAS_CONSTANT = 287.05287
_GAMMA_AIR = 1.4

_G0 = 9.80665
_UNIVERSAL_GAS_CONSTANT = 8.3144598
_MOLAR_MASS_AIR = 0.0289644
_EXPONENT_SCALE = (_G0 * _MOLAR_MASS_AIR) / _UNIVERSAL_GAS_CONSTANT


class _IsaLayer(NamedTuple):
    h_base: float
    h_top: float
    t_base: float
    p_base: float
    lapse: float


_LAYERS = (
    _IsaLayer(0.0, 11000.0, 288.15, 101325.0, -0.0065),
    _IsaLayer(11000.0, 20000.0, 216.65, 22632.06, 0.0),
    _IsaLayer(20000.0, 32000.0, 216.65, 5474.889, 0.001),
    _IsaLayer(32000.0, 47000.0, 228.65, 868.0187, 0.0028),
    _IsaLayer(47000.0, 51000.0, 270.65, 110.9063, 0.0),
    _IsaLayer(51000.0, 71000.0, 270.65, 66.93887, -0.0028),
    _IsaLayer(71000.0, 84852.0, 214.65, 3.956420, -0.002),
)

_TOP_ALTITUDE = 84852.0
_TOP_TEMPERATURE = 186.946
_TOP_PRESSURE = 0.3734


def _evaluate_isa(altitude: float) -> tuple[float, float]:
    """Return (pressure in Pa, temperature in K) at a non-negative altitude."""
    for layer in _LAYERS:
        if altitude <= layer.h_top:
            dh = altitude - layer.h_base
            if abs(layer.lapse) < 1e-12:
                pressure = layer.p_base * math.exp(-(_EXPONENT_SCALE * dh) / layer.t_base)
                return pressure, layer.t_base
            temperature = layer.t_base + layer.lapse * dh
            pressure = layer.p_base * math.pow(layer.t_base / temperature, _EXPONENT_SCALE / layer.lapse)
            return pressure, temperature

    # Above the standard model: isothermal decay from its top boundary.
    dh = altitude - _TOP_ALTITUDE
    pressure = _TOP_PRESSURE * math.exp(-(_EXPONENT_SCALE * dh) / _TOP_TEMPERATURE)
    return pressure, _TOP_TEMPERATURE


@dataclass(frozen=True)
class Atmosphere:
    """Layered standard atmosphere; negative altitudes read as sea level."""

    sea_level_pressure: float
    scale_height: float

    def pressure(self, altitude: float) -> float:
        pressure, _ = _evaluate_isa(max(0.0, altitude))
        return max(0.0, pressure)

    def density(self, altitude: float) -> float:
        pressure, temperature = _evaluate_isa(max(0.0, altitude))
        if temperature <= 0.0:
            return 0.0
        return max(0.0, pressure / (_AIR_GAS_CONSTANT * temperature))

    def temperature(self, altitude: float) -> float:
        _, temperature = _evaluate_isa(max(0.0, altitude))
        return temperature

    def speed_of_sound(self, altitude: float) -> float:
        temperature = self.temperature(altitude)
        if temperature <= 0.0:
            return 0.0
        return math.sqrt(_GAMMA_AIR * _AIR_GAS_CONSTANT * temperature)


@dataclass(frozen=True)
class Planet:
    """A spherical body with point-mass gravity and an atmosphere."""

    name: str
    mass: float
    radius: float
    atmosphere: Atmosphere

    def gravity_at(self, position: Vec3d) -> Vec3d:
        """Gravitational acceleration at a position relative to the planet's centre."""
        r = position.length()
        if r == 0.0:
            return Vec3d()
        magnitude = (GRAVITATIONAL_CONSTANT * self.mass) / (r * r)
        return position.normalized() * -magnitude

    def altitude(self, position: Vec3d) -> float:
        return position.length() - self.radius