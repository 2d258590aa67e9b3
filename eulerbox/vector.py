"""Fixed-dimension vectors in 2D and 3D (assumed Euclidean) space"""

import logging
import math
from typing import Any, ClassVar, Iterable, Iterator, TypeVar, Union

import attrs
from expression import Result

from eulerbox import IndexOutOfBoundsError, InvalidDimensionError
from eulerbox.numeric_types import IntegerLike, NumberLike, is_integer, is_real_number
from eulerbox.utilities import check_same_dimension, wrap_exception

__all__ = ["Vector", "Vector2", "Vector3"]

_V = TypeVar("_V", bound="Vector")


def _is_component(_, attribute: attrs.Attribute, value: Any) -> None:
    if not is_real_number(value):
        raise TypeError(f"Value for component {attribute.name} isn't a real number, but {type(value).__name__}")


class Vector:
    """
    Behavior shared by the fixed-dimension vector types.

    Methods named with a verb (add, subtract, multiply, divide, normalize, set) mutate
    this instance and return it, to allow chaining; their past-tense / preposition
    counterparts (plus, minus, multiplied_by, divided_by, get_normal, copy) build a new
    vector and leave this one untouched.
    """

    __slots__ = ()

    # Make numpy scalars on the left of an operator defer to this class's reflected methods.
    __array_ufunc__ = None

    dimension: ClassVar[int]
    _AXES: ClassVar[tuple[str, ...]]

    @classmethod
    def from_array(cls: type[_V], values: Iterable[NumberLike]) -> _V:
        components = list(values)
        if len(components) != cls.dimension:
            raise InvalidDimensionError(
                f"Cannot build {cls.__name__} from {len(components)} value(s), need {cls.dimension}"
            )
        return cls(*components)

    @classmethod
    def try_from_array(cls: type[_V], values: Iterable[NumberLike]) -> Result[_V, Exception]:
        return wrap_exception((InvalidDimensionError, TypeError))(cls.from_array)(values)

    @classmethod
    def zero(cls: type[_V]) -> _V:
        return cls.from_array([0.0] * cls.dimension)

    @classmethod
    def basis(cls: type[_V], index: int) -> _V:
        """Unit vector along the axis with the given index."""
        v = cls.zero()
        v.set(index, 1.0)
        return v

    @classmethod
    def unit_x(cls: type[_V]) -> _V:
        return cls.basis(0)

    @classmethod
    def unit_y(cls: type[_V]) -> _V:
        return cls.basis(1)

    @staticmethod
    def dot_product(a: "Vector", b: "Vector") -> float:
        return a.dot(b)

    def get(self, index: IntegerLike) -> NumberLike:
        return getattr(self, self._axis_name(index))

    def set(self: _V, index: IntegerLike, value: NumberLike) -> _V:
        setattr(self, self._axis_name(index), value)
        return self

    def to_array(self) -> list[NumberLike]:
        return [getattr(self, axis) for axis in self._AXES]

    def copy(self: _V) -> _V:
        return self.from_array(self.to_array())

    def add(self: _V, *others: "Vector") -> _V:
        """Add up the given vectors' values into this vector."""
        for v in others:
            self._check_compatible(v, ctx="add")
            self._assign(a + b for a, b in zip(self, v))
        return self

    def plus(self: _V, *others: "Vector") -> _V:
        """Create a new vector from this one plus all the given vectors."""
        return self.copy().add(*others)

    def subtract(self: _V, *others: "Vector") -> _V:
        """Subtract all the given vectors' values from this vector."""
        for v in others:
            self._check_compatible(v, ctx="subtract")
            self._assign(a - b for a, b in zip(self, v))
        return self

    def minus(self: _V, *others: "Vector") -> _V:
        """Create a new vector from this one minus all the given vectors."""
        return self.copy().subtract(*others)

    def multiply(self: _V, factor: Union["Vector", NumberLike]) -> _V:
        """Multiply this vector by a scalar, or componentwise by another vector."""
        self._assign(a * b for a, b in zip(self, self._factors(factor, ctx="multiply")))
        return self

    def multiplied_by(self: _V, factor: Union["Vector", NumberLike]) -> _V:
        return self.copy().multiply(factor)

    def divide(self: _V, divisor: Union["Vector", NumberLike]) -> _V:
        """Divide this vector by a scalar, or componentwise by another vector."""
        self._assign(a / b for a, b in zip(self, self._factors(divisor, ctx="divide")))
        return self

    def divided_by(self: _V, divisor: Union["Vector", NumberLike]) -> _V:
        return self.copy().divide(divisor)

    def equals(self, other: "Vector", tolerance: NumberLike | None = None) -> bool:
        """
        Check against another vector for equality, within specified error limits.

        Parameters
        ----------
        other : Vector
            The vector to check against, of the same dimension as this one
        tolerance : NumberLike, optional
            Largest allowed absolute difference per component; exact equality if omitted

        Returns
        -------
        bool
            Whether the vectors are equal within the tolerance limits
        """
        self._check_compatible(other, ctx="equals")
        if not tolerance:
            return self.to_array() == other.to_array()
        return all(abs(a - b) <= tolerance for a, b in zip(self, other))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def dot(self, other: "Vector") -> float:
        self._check_compatible(other, ctx="dot")
        return sum(a * b for a, b in zip(self, other))

    def normalize(self: _V) -> _V:
        """Scale this vector to unit length in place; a zero-length vector becomes the zero vector."""
        length = self.length()
        if length == 0:
            logging.debug("Normalizing zero-length %s, result is the zero vector", type(self).__name__)
            self._assign([0.0] * self.dimension)
        else:
            self._assign(c / length for c in self)
        return self

    def get_normal(self: _V) -> _V:
        return self.copy().normalize()

    def __iter__(self) -> Iterator[NumberLike]:
        return iter(self.to_array())

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: IntegerLike) -> NumberLike:
        return self.get(index)

    def __setitem__(self, index: IntegerLike, value: NumberLike) -> None:
        self.set(index, value)

    def __add__(self, other):
        return self.plus(other) if isinstance(other, Vector) else NotImplemented

    def __sub__(self, other):
        return self.minus(other) if isinstance(other, Vector) else NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector) or is_real_number(other):
            return self.multiplied_by(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.multiplied_by(other) if is_real_number(other) else NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector) or is_real_number(other):
            return self.divided_by(other)
        return NotImplemented

    def __neg__(self):
        return self.multiplied_by(-1)

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self) + ")"

    def _axis_name(self, index: IntegerLike) -> str:
        if not is_integer(index):
            raise TypeError(f"Component index isn't an int, but {type(index).__name__}")
        index = int(index)
        if index < 0 or index >= self.dimension:
            raise IndexOutOfBoundsError(f"Index {index} is out-of-bounds [0, {self.dimension}) for {type(self).__name__}")
        return self._AXES[index]

    def _assign(self, values: Iterable[NumberLike]) -> None:
        for axis, value in zip(self._AXES, list(values), strict=True):
            setattr(self, axis, value)

    def _check_compatible(self, other: object, *, ctx: str) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"{type(self).__name__}.{ctx} needs another vector, not {type(other).__name__}")
        check_same_dimension(self, other, ctx=f"{type(self).__name__}.{ctx}")

    def _factors(self, factor: Union["Vector", NumberLike], *, ctx: str) -> list[NumberLike]:
        match factor:
            case Vector():
                self._check_compatible(factor, ctx=ctx)
                return factor.to_array()
            case _ if is_real_number(factor):
                return [factor] * self.dimension
            case _:
                raise TypeError(f"Cannot {ctx} {type(self).__name__} by value of type {type(factor).__name__}")


@attrs.define
class Vector2(Vector):
    """Vector in 2D space"""
    x = attrs.field(validator=_is_component) # type: NumberLike
    y = attrs.field(validator=_is_component) # type: NumberLike

    dimension: ClassVar[int] = 2
    _AXES: ClassVar[tuple[str, ...]] = ("x", "y")

    def cross(self, other: "Vector2") -> float:
        """2D cross product, i.e. the z-component of the cross product of the vectors lifted into 3D"""
        self._check_compatible(other, ctx="cross")
        return self.x * other.y - self.y * other.x


@attrs.define
class Vector3(Vector):
    """Vector in 3D space"""
    x = attrs.field(validator=_is_component) # type: NumberLike
    y = attrs.field(validator=_is_component) # type: NumberLike
    z = attrs.field(validator=_is_component) # type: NumberLike

    dimension: ClassVar[int] = 3
    _AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls.basis(2)

    def cross(self, other: "Vector3") -> "Vector3":
        self._check_compatible(other, ctx="cross")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
