"""Vector algebra, Euler-angle rotation, and rotation-aware box containment in 2D and 3D"""

from typing import *

from expression import Result, result

__all__ = [
    "DEFAULT_TOLERANCE",
    "ConfigurationValueError",
    "DimensionalityError",
    "EulerboxException",
    "IndexOutOfBoundsError",
    "InvalidDimensionError",
    "unsafe_extract_result",
    ]

DEFAULT_TOLERANCE = 1e-9
SUPPORTED_DIMENSIONS = (2, 3)

_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")


class EulerboxException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(EulerboxException):
    """Error subtype for when one or more dimensions of an object are unexpected"""
    pass


class InvalidDimensionError(DimensionalityError, ValueError):
    """Error subtype for operands of mismatched or unsupported dimension"""


class IndexOutOfBoundsError(EulerboxException, IndexError):
    """Error subtype for a component index outside of a vector's dimension"""


class ConfigurationValueError(EulerboxException):
    "Exception subtype for when something's wrong with a config value"
    pass
