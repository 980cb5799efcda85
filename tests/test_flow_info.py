import pytest

from spiritflow.flow_info import FlowInfo
from spiritflow.geometry import Vector3


def test_defaults():
    info = FlowInfo()
    assert info.run == 0
    assert info.sna == 0
    assert info.good_event_flag == 1
    assert info.ntrack == [0] * 7
    assert info.unit_p == Vector3()
    assert info.rp_chi == [0.0, 0.0]


def test_set_ntracks_updates_all_classes():
    info = FlowInfo()
    info.set_ntracks([10, 11, 12, 13, 14, 15, 16, 99])
    assert info.ntrack == [10, 11, 12, 13, 14, 15, 16]
    assert (info.mtrack0, info.mtrack3, info.mtrack6) == (10, 13, 16)


def test_set_ntracks_rejects_short_input():
    with pytest.raises(ValueError):
        FlowInfo().set_ntracks([1, 2, 3])


def test_set_ntrack_single_class():
    info = FlowInfo()
    info.set_ntrack(4, 42)
    assert info.get_ntrack(4) == 42
    assert info.mtrack4 == 42


def test_out_of_range_index_ignored_and_reads_zero():
    info = FlowInfo()
    info.set_ntrack(7, 5)
    assert info.ntrack == [0] * 7
    assert info.get_ntrack(7) == 0
    assert info.get_ntrack(-1) == 0


def test_set_rp_chi_always_writes_first_slot():
    info = FlowInfo()
    info.set_rp_chi(0.5, 0)
    assert info.rp_chi == [0.5, 0.0]
    info.set_rp_chi(0.8, 1)
    assert info.rp_chi == [0.8, 0.0]


def test_clear_keeps_multiplicities_and_event():
    info = FlowInfo(run=2900, evt=33)
    info.set_ntracks([1, 2, 3, 4, 5, 6, 7])
    info.unit_p = Vector3(1.0, 2.0, 0.0)
    info.cos_dpsi = 0.7
    info.bs_phi[1] = 1.2
    info.rp_sigma = 0.3
    info.mtrack_1 = 4

    info.clear()

    assert info.unit_p == Vector3()
    assert info.cos_dpsi == 0.0
    assert info.bs_phi == [0.0, 0.0, 0.0]
    assert info.rp_sigma == 0.0
    assert info.mtrack_1 == 0
    assert info.ntrack == [1, 2, 3, 4, 5, 6, 7]
    assert info.evt == 33
    assert info.run == 2900


def test_all_clear_resets_event_and_multiplicities():
    info = FlowInfo(run=2900, evt=33)
    info.set_ntracks([1, 2, 3, 4, 5, 6, 7])
    info.unit2_p = Vector3(0.0, 1.0, 0.0)

    info.all_clear()

    assert info.evt == 0
    assert info.ntrack == [0] * 7
    assert info.mtrack6 == 0
    assert info.unit2_p == Vector3()
    assert info.run == 2900