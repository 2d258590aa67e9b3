"""Free functions over vectors: distances, angles, box containment, and clamping"""

from enum import Enum
import logging
import math

import numpy as np
from numpydoc_decorator import doc

from eulerbox import InvalidDimensionError
from eulerbox.numeric_types import NumberLike, is_real_number
from eulerbox.rotator import Rotator3
from eulerbox.rotator_math import find_look_at_rotation
from eulerbox.utilities import check_same_dimension
from eulerbox.vector import Vector, Vector2, Vector3

__all__ = [
    "RotatedBoxTransform",
    "angle_between_vectors",
    "distance",
    "get_forward_vector",
    "get_right_vector",
    "get_up_vector",
    "is_point_in_box",
    "is_point_in_rotated_box",
    "rotation_matrix",
    "vector_bounded_to_cube",
    "vector_bounded_to_sphere",
]


class RotatedBoxTransform(Enum):
    """How a 3D point is brought into the local frame of a rotated box"""
    Componentwise = "componentwise"
    InverseRotation = "inverse_rotation"


def distance(a: Vector, b: Vector) -> float:
    return a.minus(b).length()


def angle_between_vectors(source: Vector, target: Vector) -> float:
    """
    Get the angle of the target vector relative to the source vector, in radians.

    If either vector has zero length, the angle is undefined and the result is NaN.
    """
    check_same_dimension(source, target, ctx="Angle between vectors")
    lengths = source.length() * target.length()
    if lengths == 0:
        logging.debug("Angle between %s and %s is undefined, as one has zero length", source, target)
        return math.nan
    cosine = source.dot(target) / lengths
    return math.acos(max(-1.0, min(1.0, cosine)))


@doc(
    summary="Determine whether a point is within an axis-aligned box, boundary included",
    parameters=dict(
        point="The location to test",
        box_origin="Center of the box",
        box_extent="Half of the box's size along each axis",
    ),
    returns="Whether, for every axis, the point lies between the origin minus and plus the extent",
)
def is_point_in_box(point: Vector, box_origin: Vector, box_extent: Vector) -> bool:
    _check_vectors(point, box_origin, box_extent, ctx="Point in box")
    return all(o - e <= p <= o + e for p, o, e in zip(point, box_origin, box_extent))


@doc(
    summary="Determine whether a point is within a box that's rotated about its own origin",
    extended_summary="""
        In 2D, the point is expressed in the box's unrotated frame by taking its direction from the
        box origin, removing the box's rotation from that angle, and rebuilding a vector of the same
        length at the resulting angle. In 3D, the default transform multiplies the point's offset
        from the box origin componentwise by the vector of the rotation's angles (radians); the
        alternative applies the inverse of the rotation's matrix to the offset. In every case the
        transformed offset is then tested against the axis-aligned box at the zero origin.
        Under the componentwise transform, an axis with zero angle zeroes that component of the
        offset, so a zero rotator maps every point onto the origin and every point counts as inside.
    """,
    parameters=dict(
        point="The location to test",
        box_origin="Center of the box, about which the box is rotated",
        box_extent="Half of the box's size along each of its own axes",
        box_rotation="Rotation of the box: an angle in radians for 2D, a Rotator3 for 3D",
        transform="How to bring a 3D point into the box's frame; ignored in 2D",
    ),
    returns="Whether the point lies within the rotated box, boundary included",
)
def is_point_in_rotated_box(
    point: Vector,
    box_origin: Vector,
    box_extent: Vector,
    box_rotation: NumberLike | Rotator3,
    *,
    transform: RotatedBoxTransform = RotatedBoxTransform.Componentwise,
) -> bool:
    dim = _check_vectors(point, box_origin, box_extent, ctx="Point in rotated box")
    match dim, box_rotation:
        case 2, angle if is_real_number(angle):
            local = _to_local_frame_2d(point, box_origin, angle)
        case 3, Rotator3() as rotator:
            local = _to_local_frame_3d(point, box_origin, rotator, transform)
        case _:
            raise InvalidDimensionError(
                f"Rotation of type {type(box_rotation).__name__} doesn't fit a {dim}D box; need {'a real-valued angle' if dim == 2 else 'a Rotator3'}"
            )
    return is_point_in_box(local, type(box_extent).zero(), box_extent)


def rotation_matrix(rotator: Rotator3) -> np.ndarray:
    """
    Build the 3x3 matrix of the rotator's yaw, then pitch, then roll, as Rz(yaw) Ry(pitch) Rx(roll).

    Positive pitch raises the x axis toward +z, matching the look-at convention.
    """
    cr, sr = math.cos(rotator.roll), math.sin(rotator.roll)
    cp, sp = math.cos(rotator.pitch), math.sin(rotator.pitch)
    cy, sy = math.cos(rotator.yaw), math.sin(rotator.yaw)
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cr, -sr], [0.0, sr, cr]])
    ry = np.array([[cp, 0.0, -sp], [0.0, 1.0, 0.0], [sp, 0.0, cp]])
    rz = np.array([[cy, -sy, 0.0], [sy, cy, 0.0], [0.0, 0.0, 1.0]])
    return rz @ ry @ rx


def vector_bounded_to_cube(v: Vector, radius: NumberLike) -> Vector:
    """Clamp each component of a copy of the vector into [-radius, radius]."""
    return v.from_array(min(max(c, -radius), radius) for c in v)


def vector_bounded_to_sphere(v: Vector, radius: NumberLike) -> Vector:
    """Scale a copy of the vector down to the given length if it's longer; otherwise just copy it."""
    if v.length() > radius:
        return v.get_normal().multiply(radius)
    return v.copy()


def get_forward_vector(rotator: Rotator3) -> Vector3:
    return rotator.rotate_vector(Vector3.unit_x())


def get_right_vector(rotator: Rotator3) -> Vector3:
    return rotator.rotate_vector(Vector3.unit_y())


def get_up_vector(rotator: Rotator3) -> Vector3:
    return rotator.rotate_vector(Vector3.unit_z())


def _check_vectors(*operands: object, ctx: str) -> int:
    for obj in operands:
        if not isinstance(obj, Vector):
            raise InvalidDimensionError(f"{ctx}: operand isn't a vector, but {type(obj).__name__}")
    return check_same_dimension(*operands, ctx=ctx)


def _to_local_frame_2d(point: Vector2, box_origin: Vector2, box_angle: NumberLike) -> Vector2:
    relative_angle = find_look_at_rotation(box_origin, point) - box_angle
    length = distance(point, box_origin)
    return Vector2(length * math.cos(relative_angle), length * math.sin(relative_angle))


def _to_local_frame_3d(point: Vector3, box_origin: Vector3, rotator: Rotator3, transform: RotatedBoxTransform) -> Vector3:
    delta = point.minus(box_origin)
    match transform:
        case RotatedBoxTransform.Componentwise:
            return delta.multiply(rotator.to_vector())
        case RotatedBoxTransform.InverseRotation:
            # Rotation matrices are orthogonal, so the transpose is the inverse.
            local = rotation_matrix(rotator).T @ np.array(delta.to_array(), dtype=float)
            return Vector3.from_array(float(c) for c in local)
        case _:
            raise TypeError(f"Unknown rotated box transform: {transform}")
