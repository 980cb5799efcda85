"""Mapping from run numbers to the beam/target system of the experiment."""

BEAM_ID = (0, 1, 2, 3, 4, 5)
BEAM_A = (132, 108, 124, 112, 1, 100)
SYSTEM_NAMES = ("132Sn", "108Sn", "124Sn", "112Sn", "pp", "100Sn")


def get_system_id(run: int) -> int:
    """Return the system index for a run number; unknown runs map to p + p."""
    if 2841 <= run <= 3039:
        return 0
    if 2261 <= run <= 2509:
        return 1
    if 3059 <= run <= 3184:
        return 2
    if 2520 <= run <= 2653:
        return 3
    if run <= 1000:
        return 5
    return 4


def get_beam_a(run: int) -> int:
    return BEAM_A[get_system_id(run)]


def get_beam_sn_a(run: int) -> str:
    return f"{get_beam_a(run)}Sn"


def get_system_name(run: int) -> str:
    return SYSTEM_NAMES[get_system_id(run)]