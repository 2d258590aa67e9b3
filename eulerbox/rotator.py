"""Orientation in 3D space as three independent per-axis Euler angles"""

import math
from typing import Any, ClassVar, Iterator, Optional

import attrs

from eulerbox import InvalidDimensionError
from eulerbox.angles import AngleUnit, wrap_angle
from eulerbox.numeric_types import NumberLike, is_real_number
from eulerbox.vector import Vector, Vector3

__all__ = ["Rotator3"]


def _wrap_radians(value: Any) -> float:
    if not is_real_number(value):
        raise TypeError(f"Angle isn't a real number, but {type(value).__name__}")
    return wrap_angle(value, AngleUnit.Radian)


def _to_canonical(value: Any, unit: AngleUnit) -> float:
    if not is_real_number(value):
        raise TypeError(f"Angle isn't a real number, but {type(value).__name__}")
    return unit.to_radians(wrap_angle(value, unit))


def _check_is_3d(v: object, *, ctx: str) -> None:
    if not isinstance(v, Vector) or v.dimension != 3:
        raise InvalidDimensionError(
            f"{ctx} needs a 3D vector, got {getattr(v, 'dimension', 'no')} dimension(s) ({type(v).__name__})"
        )


@attrs.define(init=False, repr=False)
class Rotator3:
    """
    Rotation about each of the three axes: x is roll, y is pitch, z is yaw.

    Each angle is held once, in radians, wrapped into [0, 2pi). Degree values are derived
    on read and lie in [0, 360). Assigning to an axis (in either unit) wraps the new value,
    so e.g. setting -10 degrees yields 350 degrees.
    """

    _x = attrs.field(converter=_wrap_radians) # type: float
    _y = attrs.field(converter=_wrap_radians) # type: float
    _z = attrs.field(converter=_wrap_radians) # type: float

    dimension: ClassVar[int] = 3

    def __init__(self, x: NumberLike = 0.0, y: NumberLike = 0.0, z: NumberLike = 0.0, *, unit: AngleUnit = AngleUnit.Radian):
        if not isinstance(unit, AngleUnit):
            raise TypeError(f"Angle unit isn't an AngleUnit, but {type(unit).__name__}")
        self.__attrs_init__(x=_to_canonical(x, unit), y=_to_canonical(y, unit), z=_to_canonical(z, unit))

    @classmethod
    def from_vector(cls, v: Vector3, *, unit: AngleUnit = AngleUnit.Radian) -> "Rotator3":
        """Build a rotator by reading a 3D vector's x, y and z components as the axis angles."""
        _check_is_3d(v, ctx=f"{cls.__name__}.from_vector")
        return cls(v.x, v.y, v.z, unit=unit)

    @property
    def x(self) -> float:
        """x axis (roll) rotation in radians"""
        return self._x

    @x.setter
    def x(self, value: NumberLike) -> None:
        self._x = value

    @property
    def x_deg(self) -> float:
        """x axis (roll) rotation in degrees"""
        return self._in_degrees(self._x)

    @x_deg.setter
    def x_deg(self, value: NumberLike) -> None:
        self._x = _to_canonical(value, AngleUnit.Degree)

    @property
    def y(self) -> float:
        """y axis (pitch) rotation in radians"""
        return self._y

    @y.setter
    def y(self, value: NumberLike) -> None:
        self._y = value

    @property
    def y_deg(self) -> float:
        """y axis (pitch) rotation in degrees"""
        return self._in_degrees(self._y)

    @y_deg.setter
    def y_deg(self, value: NumberLike) -> None:
        self._y = _to_canonical(value, AngleUnit.Degree)

    @property
    def z(self) -> float:
        """z axis (yaw) rotation in radians"""
        return self._z

    @z.setter
    def z(self, value: NumberLike) -> None:
        self._z = value

    @property
    def z_deg(self) -> float:
        """z axis (yaw) rotation in degrees"""
        return self._in_degrees(self._z)

    @z_deg.setter
    def z_deg(self, value: NumberLike) -> None:
        self._z = _to_canonical(value, AngleUnit.Degree)

    @property
    def roll(self) -> float:
        return self._x

    @property
    def pitch(self) -> float:
        return self._y

    @property
    def yaw(self) -> float:
        return self._z

    def get_rotation_x_vector(self) -> Vector3:
        """Get the X direction vector after this rotation."""
        return self.rotate_vector(Vector3.unit_x())

    def rotate_vector(self, v: Vector3) -> Vector3:
        """
        Rotate a copy of the given vector by this rotator.

        The rotation is applied as a sequence of rotations within coordinate planes: yaw in
        the xy-plane, then pitch in the xz-plane, then roll in the yz-plane. Each step keeps
        the length of the vector's projection onto that plane and sets the projection's
        direction to the axis angle. Because each step preserves the length of its plane
        projection, the length of the whole vector is preserved.

        Parameters
        ----------
        v : Vector3
            The vector to rotate; it's not modified

        Returns
        -------
        Vector3
            A new, rotated vector

        Raises
        ------
        InvalidDimensionError
            If the given vector isn't 3D
        """
        _check_is_3d(v, ctx=f"{type(self).__name__}.rotate_vector")
        vec = v.copy()

        # yaw
        length_yaw = math.sqrt(vec.x ** 2 + vec.y ** 2)
        vec.x = length_yaw * math.cos(self._z)
        vec.y = length_yaw * math.sin(self._z)

        # pitch
        length_pitch = math.sqrt(vec.x ** 2 + vec.z ** 2)
        vec.x = length_pitch * math.cos(self._y)
        vec.z = length_pitch * math.sin(self._y)

        # roll
        length_roll = math.sqrt(vec.y ** 2 + vec.z ** 2)
        vec.y = length_roll * math.cos(self._x)
        vec.z = length_roll * math.sin(self._x)

        return vec

    def to_array(self, unit: AngleUnit = AngleUnit.Radian) -> list[float]:
        match unit:
            case AngleUnit.Radian:
                return [self._x, self._y, self._z]
            case AngleUnit.Degree:
                return [self.x_deg, self.y_deg, self.z_deg]
            case _:
                raise TypeError(f"Angle unit isn't an AngleUnit, but {type(unit).__name__}")

    def to_vector(self, unit: AngleUnit = AngleUnit.Radian) -> Vector3:
        return Vector3.from_array(self.to_array(unit))

    def copy(self) -> "Rotator3":
        return Rotator3(self._x, self._y, self._z)

    def equals(self, other: "Rotator3", tolerance: Optional[NumberLike] = None) -> bool:
        """Compare per-axis angles, treating angles on either side of the wrap point as neighbors."""
        if not isinstance(other, Rotator3):
            raise TypeError(f"Can only compare a rotator to another rotator, not {type(other).__name__}")
        if not tolerance:
            return self == other
        full_turn = AngleUnit.Radian.period
        for a, b in zip(self, other):
            diff = abs(a - b)
            if min(diff, full_turn - diff) > tolerance:
                return False
        return True

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self._x!r}, y={self._y!r}, z={self._z!r})"

    def __str__(self) -> str:
        return f"({self.x_deg}°, {self.y_deg}°, {self.z_deg}°)"

    @staticmethod
    def _in_degrees(radians: float) -> float:
        return wrap_angle(AngleUnit.Degree.from_radians(radians), AngleUnit.Degree)
