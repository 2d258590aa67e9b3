"""Free functions for working with rotations: unit conversion and look-at rotations"""

import logging
import math
from typing import overload

from eulerbox import InvalidDimensionError
from eulerbox.angles import AngleUnit, deg_to_rad, rad_to_deg
from eulerbox.rotator import Rotator3
from eulerbox.vector import Vector, Vector2, Vector3

__all__ = ["deg_to_rad", "find_look_at_rotation", "find_look_at_rotation_degrees", "rad_to_deg"]


@overload
def find_look_at_rotation(start: Vector2, target: Vector2) -> float: ...
@overload
def find_look_at_rotation(start: Vector3, target: Vector3) -> Rotator3: ...
def find_look_at_rotation(start, target):
    """
    Find the rotation which orients an object at the start location to face the target location.

    Parameters
    ----------
    start : Vector2 or Vector3
        Location of the object to orient
    target : Vector2 or Vector3
        Location to face, of the same dimension as the start

    Returns
    -------
    float or Rotator3
        In 2D, the bare angle (radians, in (-pi, pi]) of the direction from start to target.
        In 3D, a rotator with yaw and pitch pointing from start to target; roll isn't
        determined by a look-at and is always 0.

    Raises
    ------
    InvalidDimensionError
        If start and target differ in dimension, or if either isn't a 2D or 3D vector
    """
    match start, target:
        case Vector2(), Vector2():
            delta = _normalized_delta(start, target)
            return math.atan2(delta.y, delta.x)
        case Vector3(), Vector3():
            delta = _normalized_delta(start, target)
            yaw = math.atan2(delta.y, delta.x)
            if delta.z == 0:
                return Rotator3(0, 0, yaw)
            # The delta is normalized, so the hypotenuse is 1 and the pitch's sine is simply z.
            pitch = math.asin(max(-1.0, min(1.0, delta.z)))
            return Rotator3(0, pitch, yaw)
        case _:
            raise InvalidDimensionError(
                f"Cannot find look-at rotation from {_describe(start)} to {_describe(target)}"
            )


def find_look_at_rotation_degrees(start: Vector, target: Vector) -> float | list[float]:
    """Like find_look_at_rotation, but in degrees: a bare angle in 2D, [roll, pitch, yaw] in 3D."""
    match find_look_at_rotation(start, target):
        case Rotator3() as rotator:
            return rotator.to_array(AngleUnit.Degree)
        case angle:
            return rad_to_deg(angle)


def _normalized_delta(start: Vector, target: Vector) -> Vector:
    delta = target.minus(start)
    if delta.length() == 0:
        logging.debug("Look-at start and target coincide (%s), direction is undetermined", start)
    return delta.normalize()


def _describe(obj: object) -> str:
    return f"{type(obj).__name__} ({getattr(obj, 'dimension', '?')}D)"
