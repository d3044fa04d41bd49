import pytest

from deepspace.thermal import ThermalSimulation


def test_initial_shield_is_intact():
    sim = ThermalSimulation()
    assert sim.heat_shield_integrity() == 1.0
    assert sim.crew_survival_probability() == 1.0
    assert sim.is_survivable()
    assert sim.surface_temperature == 293.15


@pytest.mark.parametrize(
    "dt, velocity, density",
    [(0.0, 7000.0, 0.01), (-1.0, 7000.0, 0.01), (1.0, 0.5, 0.01), (1.0, 7000.0, 1e-16)],
)
def test_update_ignores_degenerate_inputs(dt, velocity, density):
    sim = ThermalSimulation()
    sim.update(dt, velocity, density, 1.0)
    assert sim.surface_temperature == 293.15
    assert sim.total_heat_load == 0.0


def test_heating_raises_temperature_and_load():
    sim = ThermalSimulation()
    sim.update(0.1, 500.0, 1e-6, 1.0)
    assert sim.surface_temperature > 293.15
    assert sim.total_heat_load > 0.0
    assert sim.heat_shield_integrity() == 1.0


def test_sustained_heating_ablates_shield():
    sim = ThermalSimulation()
    for _ in range(100):
        sim.update(1.0, 7500.0, 0.001, 1.0)
    assert sim.surface_temperature == 3000.0
    assert sim.ablation_rate > 0.0
    assert sim.heat_shield_integrity() < 1.0
    assert not sim.is_survivable()


def test_gentle_reentry_leaves_shield_intact():
    sim = ThermalSimulation()
    sim.simulate_reentry(5.0, 0.0)
    assert sim.heat_shield_integrity() == 1.0
    assert sim.surface_temperature == 293.15
    assert sim.crew_survival_probability() == 1.0


def test_extreme_reentry_is_fatal():
    sim = ThermalSimulation()
    sim.simulate_reentry(20.0, 2e7)
    assert sim.heat_shield_integrity() == 0.0
    assert sim.crew_survival_probability() == 0.0
    assert not sim.is_survivable()


def test_survival_falls_with_heat_load():
    results = []
    for load in (1e6, 3e6, 6e6, 9e6):
        sim = ThermalSimulation()
        sim.simulate_reentry(6.0, load)
        results.append(sim.crew_survival_probability())
    assert results == sorted(results, reverse=True)
    assert all(0.0 <= p <= 1.0 for p in results)


def test_high_g_reduces_survival():
    calm = ThermalSimulation()
    rough = ThermalSimulation()
    calm.simulate_reentry(6.0, 1e6)
    rough.simulate_reentry(12.0, 1e6)
    assert rough.crew_survival_probability() < calm.crew_survival_probability()