import pytest

from deepspace.cabin_fire import CabinFire, FireState


def test_new_fire_is_idle():
    fire = CabinFire()
    fire.update(10.0)
    assert fire.state is FireState.NONE
    assert fire.temperature == pytest.approx(293.15)
    assert fire.oxygen_level == pytest.approx(0.21)


def test_ignite_starts_smoldering():
    fire = CabinFire()
    fire.ignite()
    assert fire.state is FireState.SMOLDERING


def test_ignite_does_not_reset_active_fire():
    fire = CabinFire()
    fire.ignite()
    fire.update(200.0)
    fire.ignite()
    assert fire.state is FireState.ACTIVE


def test_smoldering_heats_slowly():
    fire = CabinFire()
    fire.ignite()
    before = fire.temperature
    fire.update(10.0)
    assert fire.temperature == pytest.approx(before + 10.0)
    assert fire.state is FireState.SMOLDERING
    assert fire.smoke_density == 0.0


def test_smoldering_becomes_active_and_temperature_caps():
    fire = CabinFire()
    fire.ignite()
    fire.update(200.0)
    assert fire.state is FireState.ACTIVE
    assert fire.temperature == pytest.approx(1200.0)
    assert fire.oxygen_level < 0.21


def test_smoke_saturates():
    fire = CabinFire()
    fire.ignite()
    fire.update(200.0)
    fire.update(2000.0)
    assert fire.smoke_density == 1.0


def test_oxygen_starvation_returns_to_smoldering():
    fire = CabinFire()
    fire.ignite()
    fire.update(200.0)
    fire.module_volume = 1e-4
    fire.update(1.0)
    assert fire.oxygen_level == 0.0
    assert fire.state is FireState.SMOLDERING


def test_suppression_puts_out_early_fire():
    fire = CabinFire()
    fire.ignite()
    fire.activate_suppression()
    assert fire.state is FireState.ACTIVE
    assert fire.suppression_active
    fire.update(1.0)
    assert fire.state is FireState.SUPPRESSED
    assert fire.suppression_active is False


def test_suppressed_fire_stays_out():
    fire = CabinFire()
    fire.ignite()
    fire.activate_suppression()
    fire.update(1.0)
    temperature = fire.temperature
    fire.update(100.0)
    assert fire.state is FireState.SUPPRESSED
    assert fire.temperature == temperature


def test_suppression_without_fire_keeps_state():
    fire = CabinFire()
    fire.activate_suppression()
    fire.update(5.0)
    assert fire.state is FireState.NONE
    assert fire.suppression_active