import pytest

from spiritflow.run_to_beam import (
    get_beam_a,
    get_beam_sn_a,
    get_system_id,
    get_system_name,
)


@pytest.mark.parametrize(
    "run, system_id",
    [
        (2841, 0),
        (3039, 0),
        (2261, 1),
        (2509, 1),
        (3059, 2),
        (3184, 2),
        (2520, 3),
        (2653, 3),
        (1000, 5),
        (1001, 4),
        (2700, 4),
    ],
)
def test_system_id_boundaries(run, system_id):
    assert get_system_id(run) == system_id


@pytest.mark.parametrize(
    "run, name, beam_a",
    [(2900, "132Sn", 132), (2300, "108Sn", 108), (3100, "124Sn", 124), (2600, "112Sn", 112), (500, "100Sn", 100)],
)
def test_names_and_masses(run, name, beam_a):
    assert get_system_name(run) == name
    assert get_beam_a(run) == beam_a
    assert get_beam_sn_a(run) == name


def test_pp_system():
    assert get_system_name(1500) == "pp"
    assert get_beam_a(1500) == 1