import math

import pytest

from spiritflow.geometry import LorentzVector, Vector2, Vector3, phi_mpi_pi


@pytest.mark.parametrize("angle", [0.0, 1.0, -1.0, 3 * math.pi, -7.5, 20.0, math.pi])
def test_phi_mpi_pi_range_and_direction(angle):
    wrapped = phi_mpi_pi(angle)
    assert -math.pi <= wrapped < math.pi
    assert math.cos(wrapped) == pytest.approx(math.cos(angle))
    assert math.sin(wrapped) == pytest.approx(math.sin(angle), abs=1e-12)


def test_phi_mpi_pi_keeps_in_range_value():
    assert phi_mpi_pi(0.5) == pytest.approx(0.5)


def test_vector2_phi_range_and_unit():
    v = Vector2(-3.0, -4.0)
    assert 0.0 <= v.phi() <= 2 * math.pi
    assert v.unit().mod() == pytest.approx(1.0)
    assert v.mod() == pytest.approx(5.0)


def test_vector2_rotate_preserves_mod_and_shifts_phi():
    v = Vector2(1.0, 2.0)
    r = v.rotate(0.3)
    assert r.mod() == pytest.approx(v.mod())
    assert r.delta_phi(v) == pytest.approx(0.3)


def test_vector2_zero_unit_is_zero():
    assert Vector2().unit() == Vector2()


def test_vector3_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vector3_with_mag_keeps_direction():
    v = Vector3(1.0, 2.0, 2.0)
    scaled = v.with_mag(7.0)
    assert scaled.mag() == pytest.approx(7.0)
    assert scaled.angle(v) == pytest.approx(0.0, abs=1e-7)


def test_vector3_with_mag_of_null_vector_is_unchanged():
    assert Vector3().with_mag(3.0) == Vector3()


def test_vector3_with_phi_keeps_perp_and_z():
    v = Vector3(3.0, 4.0, 1.5)
    r = v.with_phi(1.2)
    assert r.perp() == pytest.approx(v.perp())
    assert r.z == v.z
    assert r.phi() == pytest.approx(1.2)


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y"])
def test_axis_rotations_preserve_length(method):
    v = Vector3(1.0, -2.0, 0.5)
    r = getattr(v, method)(0.7)
    assert r.mag() == pytest.approx(v.mag())
    back = getattr(r, method)(-0.7)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)
    assert back.z == pytest.approx(v.z)


def test_rotate_about_axis_matches_rotate_y():
    v = Vector3(1.0, 2.0, 3.0)
    a = v.rotate(0.4, Vector3(0.0, 5.0, 0.0))
    b = v.rotate_y(0.4)
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)
    assert a.z == pytest.approx(b.z)


def test_rotate_with_null_axis_is_identity():
    v = Vector3(1.0, 2.0, 3.0)
    assert v.rotate(1.0, Vector3()) == v


def test_theta_and_unit():
    v = Vector3(0.0, 0.0, 2.0)
    assert v.theta() == pytest.approx(0.0)
    assert Vector3(1.0, 1.0, 1.0).unit().mag() == pytest.approx(1.0)


def test_rapidity_zero_for_transverse_momentum():
    lv = LorentzVector(Vector3(100.0, 0.0, 0.0), 1000.0)
    assert lv.rapidity() == pytest.approx(0.0)


def test_rapidity_is_odd_in_pz():
    forward = LorentzVector(Vector3(0.0, 0.0, 300.0), 1000.0)
    backward = LorentzVector(Vector3(0.0, 0.0, -300.0), 1000.0)
    assert forward.rapidity() == pytest.approx(-backward.rapidity())
    assert forward.rapidity() > 0.0