"""Angle units, conversion between them, and wrapping into a canonical range"""

from enum import Enum
import math

from expression import Option

from eulerbox.numeric_types import NumberLike

__all__ = ["AngleUnit", "deg_to_rad", "rad_to_deg", "wrap_angle"]


def rad_to_deg(rad: NumberLike) -> float:
    return (rad * 180) / math.pi


def deg_to_rad(deg: NumberLike) -> float:
    return (deg * math.pi) / 180


class AngleUnit(Enum):
    """The unit in which an angle is expressed; each member knows the length of a full turn."""
    Degree = "degree"
    Radian = "radian"

    @property
    def period(self) -> float:
        match self:
            case AngleUnit.Degree:
                return 360.0
            case AngleUnit.Radian:
                return 2 * math.pi

    def to_radians(self, value: NumberLike) -> float:
        return deg_to_rad(value) if self is AngleUnit.Degree else float(value)

    def from_radians(self, value: NumberLike) -> float:
        return rad_to_deg(value) if self is AngleUnit.Degree else float(value)

    @classmethod
    def parse(cls, s: str) -> Option["AngleUnit"]:
        """Find the unit named by the given text, ignoring case and a trailing plural 's'."""
        key = s.strip().lower().removesuffix("s")
        for unit in cls:
            if unit.value == key:
                return Option.Some(unit)
        return Option.Nothing()


def wrap_angle(value: NumberLike, unit: AngleUnit = AngleUnit.Radian) -> float:
    """
    Wrap an angle into the half-open range [0, period) of the given unit.

    Parameters
    ----------
    value : NumberLike
        The angle to wrap, possibly negative and possibly many turns away from 0
    unit : AngleUnit
        The unit in which the angle is expressed, which determines the period

    Returns
    -------
    float
        The equivalent angle within [0, 360) for degrees or [0, 2pi) for radians
    """
    period = unit.period
    wrapped = float(value) % period
    # A tiny negative input can round up to exactly one full period.
    return 0.0 if wrapped >= period else wrapped
