"""Re-entry heating and heat shield ablation."""

from __future__ import annotations

STAGNATION_POINT_FACTOR = 1.3
ABLATION_COEFFICIENT = 3.0e-4
CHAR_LAYER_DENSITY = 300.0
PRANDTL_NUMBER = 0.71
SPECIFIC_HEAT = 1005.0
SUBLIMATION_ENTHALPY = 50e6
LATENT_HEAT = 2.5e6

INITIAL_TPS_THICKNESS = 0.025
AMBIENT_TEMPERATURE = 293.15


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


class ThermalSimulation:
    """Tracks heat shield temperature, heat load and remaining thickness."""

    def __init__(self) -> None:
        self.surface_temperature = AMBIENT_TEMPERATURE
        self.ablation_rate = 0.0
        self.total_heat_load = 0.0
        self.ablated_mass = 0.0
        self.char_layer_thickness = 0.0
        self.tps_thickness = INITIAL_TPS_THICKNESS
        self.reentry_severity = 0.0
        self.peak_deceleration = 0.0

    def update(self, dt: float, velocity: float, density: float, tps_integrity: float) -> None:
        if velocity < 1.0 or density < 1e-15 or dt <= 0.0:
            return

        q_stag = 0.5 * density * velocity ** 3 * SPECIFIC_HEAT / PRANDTL_NUMBER ** 0.6
        q_stag *= STAGNATION_POINT_FACTOR

        self.total_heat_load += q_stag * dt

        if self.surface_temperature > 500.0:
            total_enthalpy = SUBLIMATION_ENTHALPY + LATENT_HEAT
            effective_flux = q_stag * (1.0 + (1.0 - tps_integrity) * ABLATION_COEFFICIENT)

            self.ablation_rate = effective_flux / total_enthalpy
            self.ablated_mass += self.ablation_rate * dt * CHAR_LAYER_DENSITY
            self.tps_thickness = max(0.0, self.tps_thickness - self.ablation_rate * dt)
            self.char_layer_thickness = min(self.char_layer_thickness + self.ablation_rate * dt * 0.5, 0.02)

        self.surface_temperature = min(self.surface_temperature + q_stag * dt / 8000.0, 3000.0)

        self.reentry_severity = self.total_heat_load / 10e6
        self.peak_deceleration = max(self.peak_deceleration, velocity / 100.0)

    def heat_shield_integrity(self) -> float:
        return _clamp01(self.tps_thickness / INITIAL_TPS_THICKNESS)

    def is_survivable(self) -> bool:
        return self.heat_shield_integrity() > 0.15 and self.surface_temperature < 2000.0

    def crew_survival_probability(self) -> float:
        integrity = self.heat_shield_integrity()
        if integrity > 0.8:
            base = 1.0
        elif integrity > 0.5:
            base = 1.0 - (0.8 - integrity) / 0.3 * 0.5
        elif integrity > 0.2:
            base = 0.5 - (0.5 - integrity) / 0.3 * 0.5
        else:
            base = 0.0

        g_force_risk = 0.0
        if self.peak_deceleration > 8.0:
            g_force_risk = min((self.peak_deceleration - 8.0) * 0.01, 0.1)

        return _clamp01(base - g_force_risk)

    def simulate_reentry(self, peak_deceleration: float, total_heat_load: float) -> None:
        """Set the shield state from a whole re-entry's peak load and heat load."""
        self.peak_deceleration = peak_deceleration
        self.total_heat_load = total_heat_load
        self.reentry_severity = total_heat_load / 10e6

        base_integrity = _clamp01(1.0 - self.reentry_severity * 0.8)

        g_force_damage = 0.0
        if peak_deceleration > 8.0:
            g_force_damage = min((peak_deceleration - 8.0) * 0.05, 0.3)

        self.tps_thickness = max(0.0, INITIAL_TPS_THICKNESS * (base_integrity - g_force_damage))

        if total_heat_load > 5e6:
            ablation_fraction = (total_heat_load - 5e6) / 15e6
            ablation_amount = ablation_fraction * 0.015
            self.tps_thickness = max(0.0, self.tps_thickness - ablation_amount)
            self.char_layer_thickness = min(ablation_amount * 2.0, 0.02)
            self.ablated_mass = (0.015 - self.tps_thickness) * CHAR_LAYER_DENSITY

        self.surface_temperature = min(AMBIENT_TEMPERATURE + (total_heat_load / 10e6) * 1000.0, 3000.0)