"""Tests for reading and using the geometry configuration"""

import math

from expression import result
import pytest

from eulerbox import DEFAULT_TOLERANCE, ConfigurationValueError
from eulerbox.angles import AngleUnit
from eulerbox.configuration import ANGLE_UNIT_KEY, TOLERANCE_KEY, GeometryConfiguration, read_configuration_file
from eulerbox.rotator import Rotator3
from eulerbox.vector import Vector3
from conftest import write_config_text


def test_defaults():
    conf = GeometryConfiguration()
    assert conf.angle_unit == AngleUnit.Radian
    assert conf.tolerance == DEFAULT_TOLERANCE


@pytest.mark.parametrize(["data", "expected"], [
    ({}, GeometryConfiguration()),
    ({ANGLE_UNIT_KEY: "degrees"}, GeometryConfiguration(angle_unit=AngleUnit.Degree)),
    ({ANGLE_UNIT_KEY: "Radian", TOLERANCE_KEY: 0.5}, GeometryConfiguration(tolerance=0.5)),
    ({TOLERANCE_KEY: 0}, GeometryConfiguration(tolerance=0)),
    ])
def test_from_mapping__success(data, expected):
    match GeometryConfiguration.from_mapping(data):
        case result.Result(tag="ok", ok=conf):
            assert conf == expected
        case result.Result(tag="error", error=err):
            pytest.fail(f"Failed to parse configuration: {err}")


@pytest.mark.parametrize(["data", "expected_message_part"], [
    ({ANGLE_UNIT_KEY: "gradians"}, "Unknown angle unit"),
    ({ANGLE_UNIT_KEY: 1}, "Angle unit isn't text"),
    ({TOLERANCE_KEY: -1e-3}, "Illegal configuration value: Value for tolerance is negative"),
    ({TOLERANCE_KEY: "small"}, "Illegal configuration value: Value for tolerance isn't a real number"),
    ({"unit": "degree"}, "Unknown configuration key(s): unit"),
    ])
def test_from_mapping__failure(data, expected_message_part):
    match GeometryConfiguration.from_mapping(data):
        case result.Result(tag="ok", ok=conf):
            pytest.fail(f"Expected parse failure but got {conf}")
        case result.Result(tag="error", error=err):
            assert isinstance(err, ConfigurationValueError)
            assert expected_message_part in str(err)
    with pytest.raises(ConfigurationValueError):
        GeometryConfiguration.unsafe_from_mapping(data)


def test_read_configuration_file(config_file):
    write_config_text(config_file, f"{ANGLE_UNIT_KEY}: degree\n{TOLERANCE_KEY}: 1.0e-6\n")
    conf = read_configuration_file(config_file)
    assert conf == GeometryConfiguration(angle_unit=AngleUnit.Degree, tolerance=1e-6)


def test_read_empty_configuration_file_gives_defaults(config_file):
    write_config_text(config_file, "")
    assert read_configuration_file(config_file) == GeometryConfiguration()


def test_read_non_mapping_configuration_file_is_error(config_file):
    write_config_text(config_file, "- degree\n- radian\n")
    with pytest.raises(ConfigurationValueError):
        read_configuration_file(config_file)


def test_build_rotator_uses_configured_unit():
    conf = GeometryConfiguration(angle_unit=AngleUnit.Degree)
    assert conf.build_rotator(0, 0, 90).equals(Rotator3(0, 0, math.pi / 2), 1e-12)
    assert GeometryConfiguration().build_rotator(1, 2, 3) == Rotator3(1, 2, 3)


def test_vectors_equal_uses_configured_tolerance():
    a = Vector3(1, 2, 3)
    b = Vector3(1, 2, 3.001)
    assert not GeometryConfiguration().vectors_equal(a, b)
    assert GeometryConfiguration(tolerance=0.01).vectors_equal(a, b)


def test_configuration_is_frozen():
    conf = GeometryConfiguration()
    with pytest.raises(AttributeError):
        conf.tolerance = 1.0
