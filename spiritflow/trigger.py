"""Trigger information: KYOTO multiplicity array, KATANA trigger bits and RPV130 bits."""

from __future__ import annotations

from dataclasses import dataclass, field

N_KYOTO_CHANNELS = 64

_CHANNEL_ARRAYS = ("adch", "adcl", "scr", "mhit", "tdcl_first", "tdct_first")
_KYOTO_HIT_LISTS = ("kch", "kah", "kal", "kt_l", "kt_t", "kzpos", "kxpos", "kscinum")


def _channels() -> list[int]:
    return [0] * N_KYOTO_CHANNELS


@dataclass
class TriggerArray:
    """Per-event trigger data of the KYOTO array, the KATANA wall and the RPV130 module."""

    run: int = 0
    evt: int = 0
    time: int = 0

    # KYOTO array
    knhit: int = 0
    adch: list[int] = field(default_factory=_channels)
    adcl: list[int] = field(default_factory=_channels)
    tdcl_first: list[int] = field(default_factory=_channels)
    tdct_first: list[int] = field(default_factory=_channels)
    scr: list[int] = field(default_factory=_channels)
    sc_or_u: int = 0
    sc_or_l: int = 0
    sc_or_64: int = 0
    mhit: list[int] = field(default_factory=_channels)

    # hit paddles
    kch: list[int] = field(default_factory=list)
    kah: list[int] = field(default_factory=list)
    kal: list[int] = field(default_factory=list)
    kt_l: list[int] = field(default_factory=list)
    kt_t: list[int] = field(default_factory=list)
    kscinum: list[int] = field(default_factory=list)
    kxpos: list[float] = field(default_factory=list)
    kzpos: list[float] = field(default_factory=list)

    # trigger bits
    katnhit: int = 0
    katxpos: list[float] = field(default_factory=list)
    katzpos: list[float] = field(default_factory=list)
    bitpat: list[int] = field(default_factory=list)
    tbox_missing: bool = False
    tbox_bit_data: int = 0
    tbox_event_data: int = 0

    # RPV130
    rpvnhit: int = 0
    rpvbitpat: list[int] = field(default_factory=list)

    def clear_kyoto_array(self) -> None:
        """Reset the KYOTO channel arrays, scalers and hit lists; other data is kept."""
        for name in _CHANNEL_ARRAYS:
            getattr(self, name)[:] = _channels()
        self.sc_or_u = 0
        self.sc_or_l = 0
        self.sc_or_64 = 0
        self.knhit = 0
        for name in _KYOTO_HIT_LISTS:
            getattr(self, name).clear()