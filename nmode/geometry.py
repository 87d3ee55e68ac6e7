"""Three-dimensional points and quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

_TOLERANCE = 0.000001


@dataclass
class P3D:
    """A point (or vector) in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: P3D | float) -> P3D:
        if isinstance(other, P3D):
            return P3D(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return P3D(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: P3D) -> P3D:
        if not isinstance(other, P3D):
            return NotImplemented
        return P3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: P3D | float) -> P3D:
        """Scale by a number, or take the cross product with another point."""
        if isinstance(other, P3D):
            return self.cross(other)
        if isinstance(other, (int, float)):
            return P3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> P3D:
        if isinstance(other, (int, float)):
            return P3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, value: float) -> P3D:
        if not isinstance(value, (int, float)):
            return NotImplemented
        return P3D(self.x / value, self.y / value, self.z / value)

    def __neg__(self) -> P3D:
        return self.inverted()

    def __eq__(self, other: object) -> bool:
        """Equality within a tolerance of 1e-6 on each coordinate."""
        if not isinstance(other, P3D):
            return NotImplemented
        return (
            abs(self.x - other.x) < _TOLERANCE
            and abs(self.y - other.y) < _TOLERANCE
            and abs(self.z - other.z) < _TOLERANCE
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}, {self.z:g}"

    def cross(self, other: P3D) -> P3D:
        return P3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: P3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalised(self) -> P3D:
        """Return this vector scaled to unit length."""
        return self / self.length()

    def inverted(self) -> P3D:
        return P3D(-self.x, -self.y, -self.z)

    def rotated(self, angles: P3D) -> P3D:
        """Rotate by the Euler angles given in ``angles``."""
        sx, cx = math.sin(angles.x), math.cos(angles.x)
        sy, cy = math.sin(angles.y), math.cos(angles.y)
        sz, cz = math.sin(angles.z), math.cos(angles.z)
        x, y, z = self.x, self.y, self.z
        return P3D(
            x * cy * cz + z * sy - y * cy * sz,
            -z * cy * sx + x * (cz * sx * sy + cx * sz) + y * (cx * cz - sx * sy * sz),
            z * cx * cy + x * (-cx * cz * sy + sx * sz) + y * (cz * sx + cx * sy * sz),
        )

    def rotated_inverse(self, angles: P3D) -> P3D:
        """Rotate by the inverse-ordered Euler rotation given in ``angles``."""
        sx, cx = math.sin(angles.x), math.cos(angles.x)
        sy, cy = math.sin(angles.y), math.cos(angles.y)
        sz, cz = math.sin(angles.z), math.cos(angles.z)
        x, y, z = self.x, self.y, self.z
        return P3D(
            x * cy * cz + y * (cz * sx * sy - cx * sz) + z * (cx * cz * sy + sx * sz),
            x * cy * sz + z * (-cz * sx + cx * sy * sz) + y * (cx * cz + sx * sy * sz),
            z * cx * cy + y * cy * sx - x * sy,
        )

    def rotated_by(self, quaternion: Quaternion) -> P3D:
        """Rotate this vector by a quaternion."""
        vector = Quaternion(0.0, self.x, self.y, self.z)
        result = quaternion * vector * quaternion.conjugate()
        return P3D(result.x, result.y, result.z)

    def distance(self, other: P3D) -> float:
        return (self - other).length()


@dataclass
class Quaternion:
    """A quaternion ``w + xi + yj + zk``; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_euler(cls, angles: P3D) -> Quaternion:
        """Build a quaternion from Euler angles (roll, pitch, yaw)."""
        sx, cx = math.sin(angles.x / 2), math.cos(angles.x / 2)
        sy, cy = math.sin(angles.y / 2), math.cos(angles.y / 2)
        sz, cz = math.sin(angles.z / 2), math.cos(angles.z / 2)
        return cls(
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        )

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        w, x, y, z = self.w, self.x, self.y, self.z
        return Quaternion(
            w * other.w - x * other.x - y * other.y - z * other.z,
            w * other.x + x * other.w + y * other.z - z * other.y,
            w * other.y - x * other.z + y * other.w + z * other.x,
            w * other.z + x * other.y - y * other.x + z * other.w,
        )

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{self.w:g}, {self.x:g}, {self.y:g}, {self.z:g}"

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        d = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        return Quaternion(self.w / d, -self.x / d, -self.y / d, -self.z / d)

    def to_euler(self) -> P3D:
        """Convert to Euler angles (roll, pitch, yaw)."""
        sqw = self.w * self.w
        sqx = self.x * self.x
        sqy = self.y * self.y
        sqz = self.z * self.z
        roll = math.atan2(2.0 * (self.y * self.z + self.x * self.w), -sqx - sqy + sqz + sqw)
        sin_pitch = -2.0 * (self.x * self.z - self.y * self.w)
        if abs(sin_pitch - 1.0) < _TOLERANCE:
            pitch = math.pi / 2
        elif -1.0 <= sin_pitch <= 1.0:
            pitch = math.asin(sin_pitch)
        else:
            pitch = math.nan
        yaw = math.atan2(2.0 * (self.x * self.y + self.z * self.w), sqx - sqy - sqz + sqw)
        return P3D(roll, pitch, yaw)