"""Test fixtures and utilities"""

from pathlib import Path

import pytest

from eulerbox.vector import Vector2, Vector3

NUM_DIGITS = 5
TOLERANCE = 10 ** -NUM_DIGITS


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def config_file(tmp_path) -> Path:
    return tmp_path / "eulerbox.yaml"


@pytest.fixture
def origin_2d() -> Vector2:
    return Vector2(0, 0)


@pytest.fixture
def origin_3d() -> Vector3:
    return Vector3(0, 0, 0)


#################################################################
# Other helpers
#################################################################
def write_config_text(path: Path, text: str) -> Path:
    with open(path, "w") as fh:
        fh.write(text)
    return path


def assert_components_close(observed, expected, tolerance: float = TOLERANCE) -> None:
    obs = list(observed)
    exp = list(expected)
    assert len(obs) == len(exp), f"Length mismatch: {len(obs)} != {len(exp)}"
    for i, (o, e) in enumerate(zip(obs, exp)):
        assert abs(o - e) <= tolerance, f"Component {i} differs: {o} vs. {e} (observed {obs}, expected {exp})"
