"""Per-event reaction-plane information for flow analysis."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .geometry import Vector3

N_TRACK_CLASSES = 7


def _zeros(n: int):
    return lambda: [0.0] * n


@dataclass
class FlowInfo:
    """Track multiplicities, reaction-plane vectors and bootstrap results of one event."""

    run: int = 0
    evt: int = 0
    sna: int = 0
    beam_pid: int = 0

    ntrack: list[int] = field(default_factory=lambda: [0] * N_TRACK_CLASSES)

    unit_p: Vector3 = field(default_factory=Vector3)
    unit_p_fc: Vector3 = field(default_factory=Vector3)
    unit_p_rc: Vector3 = field(default_factory=Vector3)
    unit_p_1: Vector3 = field(default_factory=Vector3)
    unit_p_2: Vector3 = field(default_factory=Vector3)
    unit_p_1fc: Vector3 = field(default_factory=Vector3)
    unit_p_2fc: Vector3 = field(default_factory=Vector3)
    cos_dpsi: float = 0.0

    unit2_p: Vector3 = field(default_factory=Vector3)
    unit2_p_1: Vector3 = field(default_factory=Vector3)
    unit2_p_2: Vector3 = field(default_factory=Vector3)
    unit2_p_fc: Vector3 = field(default_factory=Vector3)
    unit2_p_1fc: Vector3 = field(default_factory=Vector3)
    unit2_p_2fc: Vector3 = field(default_factory=Vector3)
    cos2_dpsi: float = 0.0

    mtrack_1: int = 0
    mtrack_2: int = 0

    bs_phi: list[float] = field(default_factory=_zeros(3))
    bs_phi_1: list[float] = field(default_factory=_zeros(3))
    bs_phi_2: list[float] = field(default_factory=_zeros(3))

    rp_sigma: float = 0.0
    rp_chi: list[float] = field(default_factory=_zeros(2))

    good_event_flag: int = 1
    rp_mid_cut: float = 0.0
    pid_selection: int = 0  # 0: tight, 1: normal, 2: loose

    def clear(self) -> None:
        """Reset the reaction-plane quantities; run, event and multiplicities are kept."""
        self.unit_p = self.unit_p_fc = self.unit_p_rc = Vector3()
        self.unit_p_1 = self.unit_p_2 = Vector3()
        self.unit_p_1fc = self.unit_p_2fc = Vector3()
        self.cos_dpsi = 0.0

        self.unit2_p = self.unit2_p_fc = Vector3()
        self.unit2_p_1 = self.unit2_p_2 = Vector3()
        self.unit2_p_1fc = self.unit2_p_2fc = Vector3()
        self.cos2_dpsi = 0.0

        self.mtrack_1 = 0
        self.mtrack_2 = 0

        self.bs_phi = [0.0] * 3
        self.bs_phi_1 = [0.0] * 3
        self.bs_phi_2 = [0.0] * 3

        self.rp_sigma = 0.0
        self.rp_chi = [0.0, 0.0]

    def all_clear(self) -> None:
        """Reset the event number and multiplicities as well as the reaction plane."""
        self.evt = 0
        self.ntrack = [0] * N_TRACK_CLASSES
        self.clear()

    def set_ntracks(self, values: Sequence[int]) -> None:
        """Set all seven multiplicity classes from the first seven values."""
        if len(values) < N_TRACK_CLASSES:
            raise ValueError(
                f"expected at least {N_TRACK_CLASSES} multiplicities, got {len(values)}"
            )
        self.ntrack = [int(v) for v in values[:N_TRACK_CLASSES]]

    def set_ntrack(self, index: int, value: int) -> None:
        """Set one multiplicity class; an index outside the seven classes is ignored."""
        if 0 <= index < N_TRACK_CLASSES:
            self.ntrack[index] = value

    def get_ntrack(self, index: int) -> int:
        """Return one multiplicity class, or 0 for an index outside the seven classes."""
        if 0 <= index < N_TRACK_CLASSES:
            return self.ntrack[index]
        return 0

    def set_rp_chi(self, value: float, n: int) -> None:
        """Store a reaction-plane resolution parameter; only the first slot is ever written."""
        self.rp_chi[0] = value

    @property
    def mtrack0(self) -> int:
        return self.ntrack[0]

    @property
    def mtrack1(self) -> int:
        return self.ntrack[1]

    @property
    def mtrack2(self) -> int:
        return self.ntrack[2]

    @property
    def mtrack3(self) -> int:
        return self.ntrack[3]

    @property
    def mtrack4(self) -> int:
        return self.ntrack[4]

    @property
    def mtrack5(self) -> int:
        return self.ntrack[5]

    @property
    def mtrack6(self) -> int:
        return self.ntrack[6]