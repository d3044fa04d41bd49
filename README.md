# deepspace

Building blocks for a text-based spaceflight simulation. The package holds
physical and environmental models and a small frame-loop runtime. It uses only
the standard library and supports Python 3.10 and later.

## What is in the package

- `deepspace.vector`: `Vec3d` is an immutable 3-D vector. It supports `+`, `-`,
  scalar `*` and `/`, unary minus, iteration, `length`, `length_squared`,
  `normalized` (the zero vector stays zero), `dot` and `cross`.
- `deepspace.planet`: `Planet` gives point-mass gravity (`gravity_at`) and
  `altitude` above its radius. `Atmosphere` follows the US Standard Atmosphere
  1976 layers up to 84.852 km and decays isothermally above that. It gives
  `pressure`, `density`, `temperature` and `speed_of_sound`. Negative altitudes
  read as sea level.
- `deepspace.cabin_fire`: `CabinFire` moves through the `FireState` values
  `NONE`, `SMOLDERING`, `ACTIVE` and `SUPPRESSED`. It tracks temperature, oxygen
  fraction and smoke density, and it supports `activate_suppression`.
- `deepspace.depressurization`: `Depressurization` models exponential pressure
  loss through a leak (`create_leak`, `pressure_at`, `update`). It also gives
  `time_to_unconsciousness` and `time_to_lethal`, and it tracks bulkheads per
  `ModuleId`. With no leak, both times are `math.inf`.
- `deepspace.airlock`: `AirlockExplosion` gives blast overpressure that falls
  with distance and time. It also tracks structural integrity and the torque
  from asymmetric damage.
- `deepspace.subsystems` holds the damage models for single subsystems:
  - `PropulsionDamage`: thrust multiplier, fuel leak rate and vectoring error.
  - `StructuralDamage`: drag and inertia multipliers and an asymmetric torque.
  - `TPSDamage`: crater damage, convective heating and ablation.
  - `LifeSupportDamage`: cabin CO2, O2, temperature and pressure, with
    `is_critical` and `check_casualty`.

  `DamageComponent` is an abstract base class for components that act on a
  physics body.
- `deepspace.thermal`: `ThermalSimulation` models stagnation-point heating,
  ablation and heat-shield integrity. It gives `is_survivable` and
  `crew_survival_probability`. `simulate_reentry` sets the shield state from a
  peak deceleration and a total heat load.
- `deepspace.micrometeorite`: `MicrometeoriteImpact` draws Poisson-distributed
  impacts from a flux that falls with altitude. It is seeded, so runs repeat.
  Each impact comes back as an `ImpactEvent`, and its damage is added to a
  `SubsystemDamage`. The module also provides `crater_diameter(energy_joules)`.
- `deepspace.damage_system`: `DamageSystem` applies damage of each `DamageType`
  to a `VesselDamage` record or any object with the same four fields. Damage
  spreads between systems through random, delayed `CascadeEffect`s. Pass
  `seed=` to make the cascades repeat. `damage_level` and `vessel_health` report
  the levels the system has set.
  - `apply_repair` works on a detached, freshly made record. It changes neither
    the tracked levels nor any vessel.
  - `critical_systems`, `is_system_critical` and `is_system_destroyed` also
    look at a fresh record. They therefore report no critical or destroyed
    systems.
- `deepspace.engine` is the runtime scaffolding:
  - `Engine` runs `Layer`s in a frame loop at `target_fps`, 60 by default. It
    keeps going until `stop()` is called. Each frame it reads typed characters
    from stdin when `read_stdin` is true, and from `feed_input`.
  - `Logger` writes `[LEVEL] [category] message` lines, with the helpers
    `info`, `warn`, `error` and `trace`. Helper messages use the category
    `Mock`.
  - `InputManager` tracks held and just-pressed `KeyCode`s. `key_for_char`
    maps a character to its key.
  - `Scene`, `GameObject`, `Camera`, `CameraMode` and `Timestep` round out the
    runtime.
- `deepspace.ui`: `Canvas` (text, colored text, rects, progress bars and
  separators) and `Console` (log, info, warning and error lines) format HUD
  output. They pass each line to a callback set with `set_output_callback`.
  When no callback is set they do nothing.

## Examples

### Atmosphere and gravity

```python
from deepspace.planet import Atmosphere, Planet
from deepspace.vector import Vec3d

earth = Planet("Earth", 5.9722e24, 6371000.0, Atmosphere(101325.0, 8500.0))

position = Vec3d(0.0, earth.radius + 10000.0, 0.0)
print(earth.altitude(position))                 # 10000.0
print(earth.gravity_at(position))               # points toward the centre
print(earth.atmosphere.pressure(11000.0))       # tropopause pressure, Pa
print(earth.atmosphere.speed_of_sound(0.0))     # about 340 m/s
```

### Vessel damage with cascades

```python
from deepspace.damage_system import DamageSystem, DamageType, VesselDamage

vessel = VesselDamage()
damage = DamageSystem(seed=1)

damage.trigger_damage(DamageType.TPS, 0.3, vessel)
damage.trigger_damage(DamageType.PROPULSION, 0.25, vessel)

for _ in range(100):
    damage.update(0.1, vessel)   # cascades may spread damage over time

print(vessel.life_support_damage)
print(damage.vessel_health())
```

### Micrometeorite impacts

```python
from deepspace.micrometeorite import MicrometeoriteImpact, SubsystemDamage

impacts = MicrometeoriteImpact(seed=12345)
damage = SubsystemDamage()
for _ in range(1000):
    impacts.update(1.0, 400000.0, 5e6, damage)
print(impacts.impact_count, damage.tps)
```

### Cabin fire

```python
from deepspace.cabin_fire import CabinFire, FireState

fire = CabinFire()
fire.ignite()
for _ in range(200):
    fire.update(1.0)
fire.activate_suppression()
print(fire.state is FireState.ACTIVE, fire.temperature)
```

### Reentry heating

```python
from deepspace.thermal import ThermalSimulation

thermal = ThermalSimulation()
thermal.simulate_reentry(6.5, 8e6)
print(thermal.heat_shield_integrity(), thermal.crew_survival_probability())
```

## What the package does not do

There is no command or launcher. There is also no ready-made simulation to run:
the package has no vessel or rocket model and no engines, tanks or staging. It
also lacks orbit computation, ascent or circularization guidance, mission
scripts, configuration files and telemetry export. `DamageSystem` works on a
plain `VesselDamage` record, not on a flying vehicle. You build a simulation by
putting these models together in your own `Layer` and running it with `Engine`.

## Running the tests

Install the `test` extra and run `pytest` from the project root.