# spiritflow

Data records and analysis helpers for heavy-ion collision studies: vector
types, detector and event records, a reconstructed-particle model with
quality flags, neutron-wall cluster kinematics, a run-number to beam-system
lookup and bootstrap error estimates for scalar and azimuthal quantities.

The package has no dependencies outside the standard library.

## Installation

```
pip install spiritflow
```

To run the tests:

```
pip install "spiritflow[test]"
pytest
```

## Modules

- `spiritflow.geometry`: the immutable `Vector2`, `Vector3` and
  `LorentzVector` value types (magnitude, angles, rotations, cross and dot
  products, rapidity), and `phi_mpi_pi`, which wraps an angle into [-π, π).
- `spiritflow.records`: dataclass records for transport-model particles
  (`AMDParticle`), KATANA signals and events (`KatanaSignal`, `TriggerBox`,
  `KatanaEvent` with `add_signal` and `reset`) and beam drift chamber data
  (`BDC`, whose `clear` keeps the run number and beam mass number).
- `spiritflow.trigger`: `TriggerArray`, the per-event KYOTO multiplicity
  array, KATANA trigger bits and RPV130 bits. `clear_kyoto_array` resets only
  the KYOTO part.
- `spiritflow.neuland`: `NeuLANDCluster` and `NeuLANDHit`.
  `NeuLANDCluster.set_local_pos` converts a local position in cm to global
  coordinates in mm. `set_mass` takes a PDG code or one of the names
  `"neutron"`, `"proton"`, `"deuteron"` and `"triton"`, and derives β, γ,
  momentum, energy and rapidity from the time of flight. `set_beam_angle`
  rotates the momentum into the beam frame. Veto hits are stored and read per
  `VetoCut` with `set_veto_hit` and `get_veto_hit`.
- `spiritflow.run_to_beam`: `get_system_id`, `get_beam_a`, `get_beam_sn_a`
  and `get_system_name` map a run number to its beam system (132Sn, 108Sn,
  124Sn, 112Sn, pp or the simulated 100Sn).
- `spiritflow.particle`: `Particle` is a reconstructed track built from a
  `TrackData` with `set_track`. It covers PID and mass assignment (doubly
  charged helium species get twice the momentum), the Lorentz vector and
  rapidity, rotation along the beam direction, vertex distance and the
  combined good-track flag, which is updated by each quality-flag setter.
- `spiritflow.flow_info`: `FlowInfo`, the per-event record of track
  multiplicities, reaction-plane vectors and bootstrap results.
- `spiritflow.bootstrap`: `BootStrap` resamples scalar values (bootstrap
  mean) or `Vector2` samples (bootstrap mean direction). It stores the
  per-replica means and standard deviations, the central 95 % interval and an
  error estimate. A `seed` makes the resampling reproducible.

## Example

```python
from spiritflow.geometry import Vector3
from spiritflow.particle import Particle

particle = Particle()
particle.set_rotated_momentum(Vector3(100.0, 50.0, 800.0))
particle.set_pid(2212)  # proton
print(particle.rapidity, particle.mass)
```

```python
from spiritflow.bootstrap import BootStrap

boot = BootStrap(seed=1)
for value in (1.0, 2.0, 3.0, 4.0, 5.0):
    boot.add(value)
boot.bootstrapping(200)
print(boot.cl_low, boot.cl_up, boot.std_dev_error())
```

## What it does not do

The package holds records and per-track or per-event arithmetic only. It does
not compute dE/dx energy loss, estimate masses from dE/dx and rigidity, or
apply reaction-plane re-centring and Fourier flattening. It reads and writes
no files and has no command-line interface.