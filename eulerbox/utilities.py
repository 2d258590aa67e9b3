"""Very general-purpose utilities"""

import functools
from typing import Callable, Optional, ParamSpec, TypeVar

from expression import Result, compose, curry_flip
from numpydoc_decorator import doc

from eulerbox import SUPPORTED_DIMENSIONS, InvalidDimensionError

_A = TypeVar("_A")
_P = ParamSpec("_P")

_Exception = TypeVar("_Exception", bound=Exception)


# Courtesy of @Hugovdberg in Issues discussion on dbratti/Expression repo
@curry_flip(1)
def wrap_exception(
    fun: Callable[_P, _A],
    exc: type[_Exception] | tuple[type[_Exception], ...] = Exception,
) -> Callable[_P, Result[_A, _Exception]]:
    """Wrap a function that might raise an Exception in a Result monad

    Args:
        fun (Callable[P, a]):
            The function to be wrapped.
        exc (Union[Tuple[Type[Exception], ...], Type[Exception]], optional):
            The Exception types to be wrapped into the monad. Defaults to Exception.

    Returns:
        Callable[P, Result[a, Exception]]:
            The decorated function.

    Examples:
        >>> @wrap_exception(InvalidDimensionError)
        ... def parse(xs: list[float]) -> Vector3:
        ...     return Vector3.from_array(xs)
        >>> t: Result[Vector3, InvalidDimensionError] = parse([1.0, 2.0])
    """

    @functools.wraps(fun)
    def _wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Result[_A, _Exception]:
        try:
            return Result[_A, _Exception].Ok(fun(*args, **kwargs))
        except exc as e:
            return Result[_A, _Exception].Error(e)

    return _wrapper


@curry_flip(1)
def wrap_error_message(
    fun: Callable[_P, Result[_A, _Exception]],
    context: Optional[str] = None,
) -> Callable[_P, Result[_A, str]]:
    write_error: Callable[[_Exception], str] = \
        str if context is None else (lambda e: f"{context}: {e}")
    def transform(either: Result[_A, _Exception]) -> Result[_A, str]:
        return either.map_error(write_error)
    return compose(fun, transform)


@doc(
    summary="Round a value to a fixed number of decimal places",
    parameters=dict(
        value="The number to round",
        precision="How many digits to keep after the decimal point",
    ),
    returns="The value, rounded half away from zero at the given precision",
)
def to_fixed_precision(value: float, precision: int) -> float:
    factor = 10 ** precision
    scaled = abs(value) * factor
    rounded = float(int(scaled + 0.5)) / factor
    return rounded if value >= 0 else -rounded


def check_supported_dimension(dimension: int, *, ctx: str) -> None:
    if dimension not in SUPPORTED_DIMENSIONS:
        raise InvalidDimensionError(f"{ctx}: unsupported dimension {dimension}, not one of {SUPPORTED_DIMENSIONS}")


def check_same_dimension(*operands: object, ctx: str) -> int:
    """Get the dimension shared by all the given operands, raising if they disagree or lack one."""
    dims = []
    for obj in operands:
        try:
            dims.append(obj.dimension)
        except AttributeError:
            raise InvalidDimensionError(f"{ctx}: operand of type {type(obj).__name__} has no dimension")
    match sorted(set(dims)):
        case [d]:
            check_supported_dimension(d, ctx=ctx)
            return d
        case []:
            raise ValueError(f"{ctx}: no operands to check")
        case distinct:
            raise InvalidDimensionError(f"{ctx}: mismatched dimensions {distinct}")
