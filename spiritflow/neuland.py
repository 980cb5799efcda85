"""Neutron wall clusters and bar hits."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .geometry import Vector3

_MASS_NEUTRON = 939.565346
_MASS_PROTON = 938.2720813
_MASS_DEUTERON = 1875.612762
_MASS_TRITON = 2808.921112

_MASSES = {
    2112: _MASS_NEUTRON,
    2212: _MASS_PROTON,
    1000010020: _MASS_DEUTERON,
    1000010030: _MASS_TRITON,
}

_PARTICLE_NAMES = {
    "neutron": 2112,
    "proton": 2212,
    "deuteron": 1000010020,
    "triton": 1000010030,
}

PID_GAMMA = 22


class VetoCut(enum.Enum):
    """Veto-wall selection used to tag a charged particle in front of a cluster."""

    ALL = "all"
    ONE = "one"
    MID = "mid"
    LOOSE = "loose"
    LOOSE1 = "loose1"
    LOOSE2 = "loose2"


def _ratio(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class NeuLANDCluster:
    """A cluster of hits in the neutron wall with time-of-flight kinematics."""

    ANGLE = 29.579 * math.pi / 180.0
    TARGET_OFFSET = -8.9  # mm
    DISTANCE_TO_CENTER = 8561.05 + 280.0  # mm, target to the first plane
    C = 299.79245  # mm/ns
    TOF_OFFSET = 0.0  # ns

    def __init__(self) -> None:
        self.angle = self.ANGLE
        self.target_offset = self.TARGET_OFFSET
        self.target_pos = Vector3(0.0, 0.0, self.TARGET_OFFSET)
        self.distance_to_center = self.DISTANCE_TO_CENTER
        self.global_offset = Vector3(
            self.DISTANCE_TO_CENTER * math.sin(self.ANGLE),
            0.0,
            self.DISTANCE_TO_CENTER * math.cos(self.ANGLE),
        )
        self.c = self.C
        self.tof_offset = self.TOF_OFFSET
        self.pid = 0
        self.global_pos_last = Vector3()
        self.clear()

    def clear(self) -> None:
        """Reset the measured and derived quantities to their empty values."""
        self.nhit = -1
        self.edep = -1.0
        self.tof = -1.0
        self.tof_last = -1.0
        self.local_x, self.local_y, self.local_z = -500.0, -500.0, -1.0
        self.local_x_last, self.local_y_last, self.local_z_last = -500.0, -500.0, -1.0
        self.distance = -1.0
        self.local_pos = Vector3(self.local_x, self.local_y, self.local_z)
        self.local_pos_last = Vector3(self.local_x_last, self.local_y_last, self.local_z_last)
        self.global_pos = Vector3(self.local_x, self.local_y, self.local_z)
        self._veto = {cut: [-1, -1] for cut in VetoCut}
        self.momentum = Vector3(0.0, 0.0, 1.0)
        self.beta = 0.0
        self.gamma = 0.0
        self.mass = 0.0
        self.energy = 0.0
        self.rapidity = 0.0
        self.beam_angle_a = 0.0
        self.beam_angle_b = 0.0

    def _to_global(self, local: Vector3) -> Vector3:
        return local.rotate_y(self.angle) + self.global_offset

    def set_local_pos(self, pos: Vector3) -> None:
        """Set the cluster position from local coordinates in cm."""
        self.local_pos = pos * 10.0
        self.local_x, self.local_y, self.local_z = self.local_pos.x, self.local_pos.y, self.local_pos.z
        self.global_pos = self._to_global(self.local_pos)
        self.distance = self.global_pos.mag()

    def set_local_pos_last(self, pos: Vector3) -> None:
        """Set the position of the last hit from local coordinates in cm."""
        self.local_pos_last = pos * 10.0
        self.local_x_last = self.local_pos_last.x
        self.local_y_last = self.local_pos_last.y
        self.local_z_last = self.local_pos_last.z
        self.global_pos_last = self._to_global(self.local_pos_last)

    def set_mass(self, particle: int | str) -> None:
        """Assume a particle species (PDG code or name) and derive the momentum."""
        if isinstance(particle, str):
            pid = _PARTICLE_NAMES.get(particle, 0)
        else:
            pid = int(particle)
        self.pid = pid
        self.mass = _MASSES.get(pid, 0.0)
        self._set_momentum()

    def _momentum_scale(self) -> float:
        return self.mass * self.beta * self.gamma

    def _update_rapidity(self) -> None:
        p_para = self.momentum.mag() * math.cos(self.momentum.theta())
        self.rapidity = 0.5 * math.log((self.energy + p_para) / (self.energy - p_para))

    def _set_momentum(self) -> None:
        self.tof -= self.tof_offset
        self.beta = _ratio(_ratio(self.distance, self.tof), self.c)
        self.gamma = 1.0 / math.sqrt(1.0 - self.beta * self.beta) if self.beta < 1.0 else 0.0

        if self.tof < 5:
            self.pid = PID_GAMMA
            self.mass = 0.0

        if self._momentum_scale() > 0:
            self.momentum = self.global_pos.with_mag(self._momentum_scale())
            self.energy = self.mass * self.gamma
            self._update_rapidity()
        else:
            self.pid = 0

    def set_beam_angle(self, angle_a: float, angle_b: float) -> None:
        """Rotate the momentum into the beam frame given the beam angles."""
        self.beam_angle_a = angle_a
        self.beam_angle_b = angle_b
        if self._momentum_scale() > 0:
            self.momentum = self.momentum.rotate_y(-angle_a).rotate_x(-angle_b)
            self._update_rapidity()

    def set_veto_hit(self, cut: VetoCut, index: int, value: int) -> None:
        """Store a veto time (index 0) or charge (any other index) for a cut."""
        self._veto[cut][0 if index == 0 else 1] = value

    def get_veto_hit(self, cut: VetoCut, index: int) -> int:
        return self._veto[cut][0 if index == 0 else 1]

    @property
    def mom(self) -> float:
        return self.momentum.mag()

    @property
    def global_x(self) -> float:
        return self.global_pos.x

    @property
    def global_y(self) -> float:
        return self.global_pos.y

    @property
    def global_z(self) -> float:
        return self.global_pos.z


@dataclass
class NeuLANDHit:
    """A single bar hit in the neutron wall."""

    bar_id: int = 0
    edep: float = -1.0
    tof: float = -1.0
    beta: float = -1.0
    local_x: float = -1.0
    local_y: float = -1.0
    local_z: float = -1.0

    def clear(self) -> None:
        self.edep = -1.0
        self.tof = -1.0
        self.beta = -1.0
        self.local_x = self.local_y = self.local_z = -1.0