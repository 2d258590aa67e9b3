"""Tools related to eulerbox configuration"""

import logging
from pathlib import Path
from typing import Any, Literal, Mapping

import attrs
from expression import Result
import yaml

from eulerbox import DEFAULT_TOLERANCE, ConfigurationValueError, unsafe_extract_result
from eulerbox.angles import AngleUnit
from eulerbox.numeric_types import NumberLike, is_real_number
from eulerbox.rotator import Rotator3
from eulerbox.utilities import wrap_error_message, wrap_exception
from eulerbox.vector import Vector

__all__ = ["ANGLE_UNIT_KEY", "TOLERANCE_KEY", "GeometryConfiguration", "read_configuration_file"]

ANGLE_UNIT_KEY: Literal["angleUnit"] = "angleUnit"
TOLERANCE_KEY: Literal["tolerance"] = "tolerance"


def _is_valid_tolerance(_, attribute: attrs.Attribute, value: Any) -> None:
    if not is_real_number(value):
        raise TypeError(f"Value for {attribute.name} isn't a real number, but {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Value for {attribute.name} is negative: {value}")


@attrs.define(kw_only=True, frozen=True)
class GeometryConfiguration:
    """The unit in which a caller's raw angles are expressed, and the tolerance for approximate equality"""
    angle_unit = attrs.field(default=AngleUnit.Radian, validator=attrs.validators.instance_of(AngleUnit)) # type: AngleUnit
    tolerance = attrs.field(default=DEFAULT_TOLERANCE, validator=_is_valid_tolerance) # type: int | float

    @classmethod
    def from_mapping(cls, m: Mapping[str, object]) -> Result["GeometryConfiguration", ConfigurationValueError]:
        unknown = set(m.keys()) - {ANGLE_UNIT_KEY, TOLERANCE_KEY}
        if unknown:
            return Result.Error(ConfigurationValueError(f"Unknown configuration key(s): {', '.join(sorted(map(str, unknown)))}"))
        return _parse_angle_unit(m.get(ANGLE_UNIT_KEY))\
            .bind(lambda unit: cls._build(angle_unit=unit, tolerance=m.get(TOLERANCE_KEY, DEFAULT_TOLERANCE)))\
            .map_error(ConfigurationValueError)

    @classmethod
    def unsafe_from_mapping(cls, m: Mapping[str, object]) -> "GeometryConfiguration":
        return unsafe_extract_result(cls.from_mapping(m))

    def build_rotator(self, x: NumberLike = 0.0, y: NumberLike = 0.0, z: NumberLike = 0.0) -> Rotator3:
        """Build a rotator from raw angles given in the configured unit."""
        return Rotator3(x, y, z, unit=self.angle_unit)

    def vectors_equal(self, a: Vector, b: Vector) -> bool:
        return a.equals(b, self.tolerance)

    @classmethod
    def _build(cls, **kwargs) -> Result["GeometryConfiguration", str]:
        @wrap_error_message("Illegal configuration value")
        @wrap_exception((TypeError, ValueError))
        def build(values: Mapping[str, object]) -> "GeometryConfiguration":
            return cls(**values)

        return build(kwargs)


def read_configuration_file(config_file: Path | str) -> GeometryConfiguration:
    """Parse the geometry configuration from a YAML file; an empty file means all defaults."""
    logging.info("Reading eulerbox configuration file: %s", config_file)
    with open(config_file, "r") as fh:
        data = yaml.safe_load(fh)
    match data:
        case None:
            return GeometryConfiguration()
        case dict():
            return GeometryConfiguration.unsafe_from_mapping(data)
        case _:
            raise ConfigurationValueError(f"Configuration file ({config_file}) doesn't hold a mapping, but {type(data).__name__}")


def _parse_angle_unit(raw: object) -> Result[AngleUnit, str]:
    match raw:
        case None:
            return Result.Ok(AngleUnit.Radian)
        case AngleUnit():
            return Result.Ok(raw)
        case str():
            return AngleUnit.parse(raw).to_result(
                f"Unknown angle unit ('{raw}'), not one of: {', '.join(u.value for u in AngleUnit)}"
            )
        case _:
            return Result.Error(f"Angle unit isn't text, but {type(raw).__name__}")
