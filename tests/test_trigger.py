from spiritflow.trigger import N_KYOTO_CHANNELS, TriggerArray


def test_default_channel_arrays_have_64_zeros():
    trigger = TriggerArray()
    for values in (trigger.adch, trigger.adcl, trigger.scr, trigger.mhit,
                   trigger.tdcl_first, trigger.tdct_first):
        assert values == [0] * N_KYOTO_CHANNELS


def test_channel_arrays_are_independent_between_instances():
    first = TriggerArray()
    second = TriggerArray()
    first.adch[3] = 17
    assert second.adch[3] == 0


def test_clear_kyoto_array_resets_kyoto_data():
    trigger = TriggerArray()
    trigger.adch[0] = 5
    trigger.adcl[63] = 7
    trigger.scr[10] = 1
    trigger.mhit[2] = 4
    trigger.tdcl_first[5] = 9
    trigger.tdct_first[6] = 8
    trigger.sc_or_u, trigger.sc_or_l, trigger.sc_or_64 = 1, 2, 3
    trigger.knhit = 2
    trigger.kch.extend([1, 2])
    trigger.kah.extend([10, 20])
    trigger.kal.append(3)
    trigger.kt_l.append(4)
    trigger.kt_t.append(5)
    trigger.kscinum.append(6)
    trigger.kxpos.append(1.5)
    trigger.kzpos.append(2.5)

    trigger.clear_kyoto_array()

    assert trigger.adch == [0] * N_KYOTO_CHANNELS
    assert trigger.adcl == [0] * N_KYOTO_CHANNELS
    assert trigger.scr == [0] * N_KYOTO_CHANNELS
    assert trigger.mhit == [0] * N_KYOTO_CHANNELS
    assert trigger.tdcl_first == [0] * N_KYOTO_CHANNELS
    assert trigger.tdct_first == [0] * N_KYOTO_CHANNELS
    assert (trigger.sc_or_u, trigger.sc_or_l, trigger.sc_or_64) == (0, 0, 0)
    assert trigger.knhit == 0
    for values in (trigger.kch, trigger.kah, trigger.kal, trigger.kt_l,
                   trigger.kt_t, trigger.kscinum, trigger.kxpos, trigger.kzpos):
        assert values == []


def test_clear_kyoto_array_keeps_other_data():
    trigger = TriggerArray(run=2900, evt=12, katnhit=3)
    trigger.katxpos.append(4.0)
    trigger.bitpat.append(1)
    trigger.rpvbitpat.append(2)

    trigger.clear_kyoto_array()

    assert trigger.run == 2900
    assert trigger.evt == 12
    assert trigger.katnhit == 3
    assert trigger.katxpos == [4.0]
    assert trigger.bitpat == [1]
    assert trigger.rpvbitpat == [2]