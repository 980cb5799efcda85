"""Small immutable vector types for momenta and detector positions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_TWO_PI = 2.0 * math.pi


def phi_mpi_pi(angle: float) -> float:
    """Wrap an angle into the interval [-pi, pi)."""
    if math.isnan(angle):
        return angle
    wrapped = math.fmod(angle + math.pi, _TWO_PI)
    if wrapped < 0.0:
        wrapped += _TWO_PI
    result = wrapped - math.pi
    if result >= math.pi:
        result -= _TWO_PI
    return result


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def mod(self) -> float:
        return math.hypot(self.x, self.y)

    def phi(self) -> float:
        """Azimuth in the interval [0, 2*pi]."""
        return math.pi + math.atan2(-self.y, -self.x)

    def unit(self) -> Vector2:
        length = self.mod()
        return self if length == 0.0 else Vector2(self.x / length, self.y / length)

    def rotate(self, angle: float) -> Vector2:
        c, s = math.cos(angle), math.sin(angle)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def delta_phi(self, other: Vector2) -> float:
        return phi_mpi_pi(self.phi() - other.phi())


@dataclass(frozen=True)
class Vector3:
    """A three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def mag2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        return math.sqrt(self.mag2())

    def perp(self) -> float:
        return math.hypot(self.x, self.y)

    def phi(self) -> float:
        if self.x == 0.0 and self.y == 0.0:
            return 0.0
        return math.atan2(self.y, self.x)

    def theta(self) -> float:
        if self.x == 0.0 and self.y == 0.0 and self.z == 0.0:
            return 0.0
        return math.atan2(self.perp(), self.z)

    def unit(self) -> Vector3:
        length = self.mag()
        return self if length == 0.0 else self * (1.0 / length)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )

    def angle(self, other: Vector3) -> float:
        norm2 = self.mag2() * other.mag2()
        if norm2 <= 0.0:
            return 0.0
        cosine = max(-1.0, min(1.0, self.dot(other) / math.sqrt(norm2)))
        return math.acos(cosine)

    def with_mag(self, mag: float) -> Vector3:
        """Return the vector scaled to the given length; a null vector is kept."""
        length = self.mag()
        if length == 0.0:
            return self
        return self * (mag / length)

    def with_phi(self, phi: float) -> Vector3:
        transverse = self.perp()
        return Vector3(transverse * math.cos(phi), transverse * math.sin(phi), self.z)

    def rotate_x(self, angle: float) -> Vector3:
        c, s = math.cos(angle), math.sin(angle)
        return Vector3(self.x, c * self.y - s * self.z, s * self.y + c * self.z)

    def rotate_y(self, angle: float) -> Vector3:
        c, s = math.cos(angle), math.sin(angle)
        return Vector3(s * self.z + c * self.x, self.y, c * self.z - s * self.x)

    def rotate(self, angle: float, axis: Vector3) -> Vector3:
        """Rotate by ``angle`` around ``axis``; a null axis leaves the vector unchanged."""
        if axis.mag() == 0.0:
            return self
        k = axis.unit()
        c, s = math.cos(angle), math.sin(angle)
        return self * c + k.cross(self) * s + k * (k.dot(self) * (1.0 - c))


@dataclass(frozen=True)
class LorentzVector:
    """A four-vector made of a spatial part and an energy/time component."""

    vect: Vector3 = field(default_factory=Vector3)
    t: float = 0.0

    @property
    def x(self) -> float:
        return self.vect.x

    @property
    def y(self) -> float:
        return self.vect.y

    @property
    def z(self) -> float:
        return self.vect.z

    @property
    def e(self) -> float:
        return self.t

    def rapidity(self) -> float:
        numerator = self.t + self.vect.z
        denominator = self.t - self.vect.z
        if denominator == 0.0:
            return math.inf if numerator > 0.0 else math.nan
        ratio = numerator / denominator
        if ratio <= 0.0:
            return -math.inf if ratio == 0.0 else math.nan
        return 0.5 * math.log(ratio)