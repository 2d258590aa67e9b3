"""Groupings of numeric types and tools for working with them"""

from typing import *
import numpy as np

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "INTEGER_TYPES", "REAL_NUMBER_TYPES", "is_integer", "is_real_number"]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]

REAL_NUMBER_TYPES = (int, float, np.integer, np.floating)
INTEGER_TYPES = (int, np.integer)


def is_real_number(obj: object) -> bool:
    """Determine whether the given object may serve as a vector component or angle."""
    return isinstance(obj, REAL_NUMBER_TYPES) and not isinstance(obj, bool)


def is_integer(obj: object) -> bool:
    """Determine whether the given object may serve as a component index."""
    return isinstance(obj, INTEGER_TYPES) and not isinstance(obj, bool)
