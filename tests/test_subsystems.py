import pytest

from deepspace.subsystems import (
    DamageComponent,
    LifeSupportDamage,
    PropulsionDamage,
    StructuralDamage,
    TPSDamage,
)
from deepspace.vector import Vec3d


class _Panel(DamageComponent):
    def total_damage(self):
        return self.damage_level

    def apply_damage(self, amount, location=Vec3d()):
        self.damage_level = min(1.0, self.damage_level + amount)

    def update(self, dt, body):
        pass


def test_damage_component_is_abstract():
    with pytest.raises(TypeError):
        DamageComponent()


def test_damage_component_thresholds():
    panel = _Panel()
    assert DamageComponent.is_critical(panel) is False
    panel.apply_damage(0.9)
    assert DamageComponent.is_critical(panel) is True
    assert DamageComponent.is_destroyed(panel) is False
    panel.apply_damage(0.5)
    assert DamageComponent.is_destroyed(panel) is True


def test_propulsion_starts_intact():
    prop = PropulsionDamage()
    assert prop.thrust_multiplier() == 1.0
    assert prop.fuel_leak_rate() == 0.0
    assert not prop.is_critical()


def test_propulsion_damage_clamps_and_degrades():
    prop = PropulsionDamage()
    prop.apply_damage(0.3)
    partial = prop.thrust_multiplier()
    prop.apply_damage(0.9)
    assert prop.damage_level == 1.0
    assert prop.thrust_multiplier() < partial
    assert prop.fuel_leak_rate() == pytest.approx(0.5)
    assert prop.is_critical()


def test_propulsion_update_keeps_state():
    prop = PropulsionDamage()
    prop.apply_damage(0.4)
    prop.update(10.0)
    assert prop.damage_level == pytest.approx(0.4)


def test_structural_torque_follows_impact_direction():
    hull = StructuralDamage()
    hull.apply_damage(0.5, Vec3d(10.0, 0.0, 0.0))
    torque = hull.asymmetric_torque()
    assert torque.x > 0.0
    assert torque.y == 0.0
    assert torque.z == 0.0
    assert hull.drag_multiplier() > 1.0
    assert hull.inertia_multiplier() > 1.0
    assert hull.drag_multiplier() > hull.inertia_multiplier()


def test_structural_critical_and_clamped():
    hull = StructuralDamage()
    hull.apply_damage(0.5, Vec3d(0.0, 1.0, 0.0))
    assert not hull.is_critical()
    hull.apply_damage(0.6, Vec3d(0.0, 1.0, 0.0))
    assert hull.damage_level == 1.0
    assert hull.is_critical()


def test_structural_no_damage_no_torque():
    hull = StructuralDamage()
    assert hull.asymmetric_torque() == Vec3d()


def test_tps_initial_state():
    tps = TPSDamage()
    assert tps.remaining_thickness == TPSDamage.NORMAL_THICKNESS
    assert tps.surface_temperature == 293.15
    assert tps.heat_flux_multiplier() == 1.0


def test_tps_impact_increases_heat_flux():
    tps = TPSDamage()
    tps.apply_impact(1.0)
    assert tps.damage_level == pytest.approx(0.5)
    assert tps.heat_flux_multiplier() == pytest.approx(2.5)
    tps.apply_impact(5.0)
    assert tps.damage_level == 1.0


def test_tps_slow_flight_does_nothing():
    tps = TPSDamage()
    tps.update(1.0, 50.0, 1.0)
    tps.update(1.0, 5000.0, 1e-12)
    assert tps.surface_temperature == 293.15
    assert tps.remaining_thickness == TPSDamage.NORMAL_THICKNESS


def test_tps_heating_ablates_and_caps_temperature():
    tps = TPSDamage()
    for _ in range(50):
        tps.update(1.0, 8000.0, 0.01)
    assert tps.surface_temperature == 3000.0
    assert tps.remaining_thickness < TPSDamage.NORMAL_THICKNESS
    assert tps.ablation_rate > 0.0
    assert tps.is_critical()


def test_tps_burn_through_destroys():
    tps = TPSDamage()
    for _ in range(2000):
        tps.update(10.0, 11000.0, 1.0)
    assert tps.remaining_thickness < TPSDamage.NORMAL_THICKNESS * 0.2
    assert tps.damage_level == 1.0


def test_life_support_healthy_cabin():
    life = LifeSupportDamage()
    co2 = life.co2_level
    o2 = life.o2_level
    life.update(60.0)
    assert life.co2_level > co2
    assert life.o2_level > o2
    assert life.cabin_temperature == 293.15
    assert not life.is_critical()
    assert not life.check_casualty()


def test_life_support_total_failure():
    life = LifeSupportDamage()
    life.apply_damage(0.6)
    life.apply_damage(0.6)
    assert life.damage_level == 1.0
    life.update(1.0)
    assert life.co2_level == 1.0
    assert life.check_casualty()


def test_life_support_pressure_never_negative():
    life = LifeSupportDamage()
    life.apply_damage(0.5)
    life.update(1e6)
    assert life.cabin_pressure == 0.0
    assert life.cabin_temperature == 350.0
    assert life.is_critical()


def test_life_support_damage_raises_co2_faster():
    healthy = LifeSupportDamage()
    damaged = LifeSupportDamage()
    damaged.apply_damage(0.5)
    healthy.update(100.0)
    damaged.update(100.0)
    assert damaged.co2_level > healthy.co2_level
    assert damaged.o2_level < healthy.o2_level