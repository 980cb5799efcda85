"""Plain event records: model particles, KATANA signals and beam-drift-chamber data."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields

from .geometry import LorentzVector


@dataclass
class AMDParticle:
    """A particle from the transport model, with its momentum and vertex."""

    pdg: int = 0
    z: int = -2
    n: int = -1
    charge: int = -2
    momentum: LorentzVector = field(default_factory=LorentzVector)
    position: LorentzVector = field(default_factory=LorentzVector)
    event_id: int = 0
    fragment_id: int = 0


@dataclass
class KatanaSignal:
    """Digitised waveform summary of one KATANA channel."""

    module: int = 0
    channel: int = 0
    amplitude: list[int] = field(default_factory=list)
    tstart: list[int] = field(default_factory=list)
    tstop: list[int] = field(default_factory=list)
    tmax: list[int] = field(default_factory=list)
    pedestal: float = 0.0
    npeak: int = 0


@dataclass
class TriggerBox:
    """Trigger-box word and decoded trigger bits."""

    evnum: int = 0
    bitpat: int = 0
    time_stamp: int = 0
    katana_m: int = 0
    min_bias: int = 0
    veto: int = 0
    ac: int = 0
    kyoto: int = 0
    offset: int = 0
    bitpattern: list[int] = field(default_factory=list)


@dataclass
class KatanaEvent:
    """All KATANA signals of one event."""

    run_number: int = 0
    event_number: int = 0
    event_size: int = 0
    time_stamp: int = 0
    max_veto: float = 0.0
    mult: int = 0
    signals: list[KatanaSignal] = field(default_factory=list)

    def add_signal(self, signal: KatanaSignal) -> None:
        """Store a copy of the signal and count it."""
        self.signals.append(copy.deepcopy(signal))
        self.mult += 1

    def reset(self) -> None:
        self.signals.clear()
        self.mult = 0
        self.max_veto = 0.0


_BDC_KEPT_ON_CLEAR = frozenset({"run", "sna"})


@dataclass
class BDC:
    """Beam identification and beam-drift-chamber projection at the target."""

    run: int = 0
    evt: int = 0
    sna: int = 0
    beam_pid: int = 0

    aoq: float = 0.0
    z: float = 0.0
    tof: float = 0.0
    beta: float = 0.0
    brho: float = 0.0
    is_good: float = 0.0
    int_z: float = 0.0
    int_a: float = 0.0

    bdcax: float = 0.0
    bdcby: float = 0.0
    proj_x: float = 0.0
    proj_y: float = 0.0
    proj_z: float = 0.0
    proj_p: float = 0.0
    proj_px: float = 0.0
    proj_py: float = 0.0
    proj_pz: float = 0.0
    proj_a: float = 0.0
    proj_b: float = 0.0

    def clear(self) -> None:
        """Reset everything except the run number and the beam mass number."""
        for f in fields(self):
            if f.name not in _BDC_KEPT_ON_CLEAR:
                setattr(self, f.name, f.default)