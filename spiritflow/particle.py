"""Reconstructed charged-particle track with identification, kinematics and quality flags."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .geometry import LorentzVector, Vector2, Vector3, phi_mpi_pi

_UNSET = Vector3(-9999.0, -9999.0, -9999.0)

MASS_PION = 139.57018
MASS_PROTON = 938.2720813
MASS_NEUTRON = 939.565346
MASS_DEUTERON = 1875.612762
MASS_TRITON = 2808.921112
MASS_HELIUM3 = 2808.39132
MASS_HELIUM4 = 3727.379378

# PDG code -> (mass, sequential species index, doubly charged)
_SPECIES = {
    -211: (MASS_PION, 0, False),
    211: (MASS_PION, 1, False),
    2212: (MASS_PROTON, 2, False),
    1000010020: (MASS_DEUTERON, 3, False),
    1000010030: (MASS_TRITON, 4, False),
    1000020030: (MASS_HELIUM3, 5, True),
    1000020040: (MASS_HELIUM4, 6, True),
}
PID_SEQ_UNKNOWN = 99

# vertex acceptance window around the target (mm)
_TARGET_Z = -14.85
_TARGET_Z_WINDOW = 3.0 * 1.33
_TARGET_X_WINDOW = 15.0
_TARGET_Y = -205.0
_TARGET_Y_WINDOW = 20.0


@dataclass(frozen=True)
class TrackData:
    """Reconstructed-track quantities a particle is built from."""

    dedx: float = 0.0
    momentum: Vector3 = field(default_factory=Vector3)
    charge: int = 0
    genfit_charge: int = 0
    pdg: int = 0
    pid_probability: float = 0.0
    vertex_id: int = 0
    dedx_point_size: int = 0
    ndf: int = 0
    poca_vertex: Vector3 = field(default_factory=Vector3)
    chi2: float = 0.0
    cluster_size: int = 0


class Particle:
    """A charged particle for flow analysis, with its quality flags."""

    max_dedx = 2000.0
    max_momentum = 4000.0
    min_momentum = 20.0
    max_bb_mass = 20000.0

    def __init__(self) -> None:
        self.rotated = False
        self.flatten = False
        self.track_id = -1
        self.pid_seq = PID_SEQ_UNKNOWN
        self.etotal = 0.0
        self.charge = 0
        self.gf_charge = 0
        self.mass = 0.0
        self.pid_probability = 0.0
        self.goto_katana_flag = 0
        self.goto_kyoto_flag = 0
        self.dedx_point_size_flag_value = 1
        self.mix_track_id = -1
        self.track: TrackData | None = None
        self.vertex_id = 0
        self.dedx_point_size = 0
        self.dedx_point_size_threshold = 1
        self.ndf = 0
        self.distance_at_vertex = 0.0
        self.poca_vertex = Vector3()
        self.clear()

    def clear(self) -> None:
        """Reset kinematics, identification and quality flags."""
        self.rotated_momentum = _UNSET
        self.momentum_at_target = _UNSET
        self.vertex = _UNSET
        self.lorentz_vector = LorentzVector()

        self.rotated_pt = Vector2()
        self.pxz = Vector2()
        self.pyz = Vector2()

        self.p = -9999.0
        self.dedx = -9999.0
        self.mass = 0.0

        self.pi_pid = 0
        self.pid = 0
        self.pid_tight = 0
        self.pid_norm = 0
        self.pid_loose = 0
        self.vertex_ndf = 0.0
        self.nclust = 0
        self.expected_clusters = -1.0
        self.cluster_ratio = -1.0

        self.beam_on_target_flag = 1
        self.vertex_bdc_correlation_flag = 1
        self.bdc_correlation_flag = 1
        self.good_track_flag = 1
        self.vertex_at_target_flag = 1
        self.distance_at_vertex_flag = 1
        self.target_flag = 1
        self.momentum_flag = 1
        self.dedx_flag = 1
        self.rapidity = -9.0
        self.rapidity_cm = -9.0

        self.ndf_flag = 1
        self.num_cluster_flag = 1
        self.cluster_ratio_flag = 1
        self.mass_flag = 1

        self.rp_weight = 0.0
        self.individual_rp_vector = _UNSET
        self.individual_rp_angle = -10.0
        self.azm_angle_wrt_rp = -10.0
        self.individual_rp_vector2 = _UNSET
        self.individual_rp_angle2 = -10.0
        self.azm_angle2_wrt_rp = -10.0

        self.mixed_event_id = -1
        self.mixed_ntrack = -1

        self.reaction_plane_flag = 0

        self.chi2 = 0.0
        self.bb_mass = 0.0
        self.bb_mass_he = 0.0
        self.cluster_size = 0

    def _update_good_track_flag(self) -> None:
        if self.good_track_flag == 0:
            return
        self.good_track_flag = (
            1000 * (self.momentum_flag * self.dedx_flag)
            + 100 * self.mass_flag
            + 10 * self.distance_at_vertex_flag
            + self.num_cluster_flag
        )

    def _update_projections(self) -> None:
        m = self.rotated_momentum
        self.rotated_pt = Vector2(m.x, m.y)
        self.pxz = Vector2(m.z, m.x)
        self.pyz = Vector2(m.z, m.y)

    def set_track(self, track: TrackData) -> None:
        """Fill the particle from a reconstructed track and evaluate its quality."""
        self.clear()
        self.track = track

        self.dedx = track.dedx
        self.momentum_at_target = track.momentum
        self.rotated_momentum = track.momentum
        self._update_projections()

        self.p = track.momentum.mag()
        self.charge = track.charge
        self.gf_charge = track.genfit_charge
        self.pid = track.pdg
        self.pid_probability = track.pid_probability

        self.vertex_id = track.vertex_id
        self.dedx_point_size = track.dedx_point_size
        self.ndf = track.ndf
        self.poca_vertex = track.poca_vertex
        self.chi2 = track.chi2
        self.cluster_size = track.cluster_size

        if self.p > self.max_momentum or self.p <= self.min_momentum:
            self.set_momentum_flag(0)
        if self.dedx > self.max_dedx or self.dedx <= 0:
            self.set_dedx_flag(0)

        poca = track.poca_vertex
        at_target = (
            abs(poca.z - _TARGET_Z) <= _TARGET_Z_WINDOW
            and abs(poca.x) <= _TARGET_X_WINDOW
            and abs(poca.y - _TARGET_Y) <= _TARGET_Y_WINDOW
        )
        if not at_target:
            self.set_vertex_at_target_flag(0)
        else:
            self._update_good_track_flag()

    def set_pid(self, pid: int) -> None:
        self.pid = pid
        self.set_mass(pid)

    def set_pid_norm(self, pid: int) -> None:
        self.pid_norm = pid
        self.set_mass(pid)

    def set_mass(self, pid: int) -> None:
        """Assign the mass of a PDG species; doubly charged species get twice the momentum."""
        species = _SPECIES.get(pid)
        if species is None:
            self.mass = 0.0
            self.set_mass_flag(0)
            self.pid_seq = PID_SEQ_UNKNOWN
        else:
            mass, seq, doubly_charged = species
            if doubly_charged:
                self.rotated_momentum = self.rotated_momentum.with_mag(self.p * 2.0)
            self.mass = mass
            self.pid_seq = seq
        self.set_lorentz_vector()

    def set_lorentz_vector(self) -> None:
        """Build the four-momentum and rapidity from the mass and rotated momentum."""
        self.etotal = math.sqrt(self.mass * self.mass + self.rotated_momentum.mag2())
        self.lorentz_vector = LorentzVector(self.rotated_momentum, self.etotal)
        self.rapidity = self.lorentz_vector.rapidity()
        if self.mass == 0:
            self.etotal = 0.0
            self.rapidity = -10.0
            self.lorentz_vector = LorentzVector(self.rotated_momentum, 0.0)

    def rotate_along_beam_direction(self, angle_x: float, angle_y: float) -> None:
        """Rotate the momentum so that the beam direction becomes the z axis."""
        beam = Vector3(math.tan(angle_x), math.tan(angle_y), 1.0).unit()
        z_axis = Vector3(0.0, 0.0, 1.0)
        axis = beam.cross(z_axis)
        angle = beam.angle(z_axis)
        self.rotated_momentum = self.rotated_momentum.rotate(angle, axis)
        self._update_projections()
        self.rotated = True

    def set_rotated_momentum(self, momentum: Vector3) -> None:
        self.rotated_momentum = momentum
        self._update_projections()
        self.set_lorentz_vector()

    def set_vertex(self, vertex: Vector3, ndf: float | None = None) -> None:
        """Set the event vertex (and its fit NDF) and the track's distance to it."""
        if ndf is not None:
            self.vertex_ndf = ndf
        self.vertex = vertex
        self.distance_at_vertex = (self.poca_vertex - vertex).mag()

    def set_bb_mass(self, value: float) -> None:
        if value > 0:
            self.bb_mass = value

    def set_bb_mass_he(self, value: float) -> None:
        if value > 0:
            self.bb_mass_he = value

    def set_expected_cluster_number(self, value: float) -> None:
        self.expected_clusters = value
        if value > 0:
            self.cluster_ratio = self.cluster_size / value

    def yaw_angle(self) -> float:
        return phi_mpi_pi(self.pxz.phi())

    def pitch_angle(self) -> float:
        return phi_mpi_pi(self.pyz.phi())

    def dedx_point_size_flag(self) -> int:
        """Flag cleared once the dE/dx point count falls below the threshold."""
        if self.dedx_point_size < self.dedx_point_size_threshold:
            self.dedx_point_size_flag_value = 0
        return self.dedx_point_size_flag_value

    def set_vertex_at_target_flag(self, value: int) -> None:
        self.vertex_at_target_flag = value
        self.target_flag = self.vertex_at_target_flag * self.distance_at_vertex_flag
        self._update_good_track_flag()

    def set_distance_at_vertex_flag(self, value: int) -> None:
        self.distance_at_vertex_flag = value
        self.target_flag = self.vertex_at_target_flag * self.distance_at_vertex_flag
        self._update_good_track_flag()

    def set_dedx_flag(self, value: int) -> None:
        self.dedx_flag = value
        self._update_good_track_flag()

    def set_momentum_flag(self, value: int) -> None:
        self.momentum_flag = value
        self._update_good_track_flag()

    def set_num_cluster_flag(self, value: int) -> None:
        self.num_cluster_flag = value
        self._update_good_track_flag()

    def set_mass_flag(self, value: int) -> None:
        self.mass_flag = value
        self._update_good_track_flag()

    def set_beam_on_target_flag(self, value: int) -> None:
        self.beam_on_target_flag = value
        self._update_good_track_flag()

    def set_ndf_flag(self, value: int) -> None:
        self.ndf_flag = value
        self._update_good_track_flag()