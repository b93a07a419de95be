"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for configuration loading and object parameters of line sets.
"""

from pathlib import Path

import numpy as np
import pytest
import yaml

from line_sets.core import Config
from line_sets.geometry import LineSet


@pytest.fixture
def config_dir(tmp_path):
    """Point Config at a temporary directory holding a linesets.yaml."""
    config = {
        "placed": {
            "scale": 2.0,
            "rotation": [0, 0, 90],
            "translation": [1.0, 0.0, 0.0],
            "color": [1.0, 0.0, 0.0],
        },
        "colored_only": {"color": [0.0, 0.0, 1.0]},
    }
    with open(tmp_path / "linesets.yaml", "w") as file:
        yaml.safe_dump(config, file)

    Config.set_config_dir(tmp_path)
    yield tmp_path
    Config.set_config_dir(None)


@pytest.fixture
def square():
    points = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]]
    return LineSet(points, [[0, 1], [1, 2], [2, 3], [3, 0]])


def test_load_lineset_config(config_dir):
    params = Config.load_lineset_config("placed")

    assert params["scale"] == 2.0
    assert params["rotation"] == [0, 0, 90]
    assert Config.get_linesets_config_path() == config_dir / "linesets.yaml"


def test_missing_object_raises_key_error(config_dir):
    with pytest.raises(KeyError):
        Config.load_lineset_config("not_there")


def test_missing_config_file(tmp_path):
    Config.set_config_dir(tmp_path / "nowhere")
    try:
        with pytest.raises(FileNotFoundError):
            Config.load_lineset_config("default")
    finally:
        Config.set_config_dir(None)


def test_shipped_config_has_default():
    Config.set_config_dir(Path(__file__).resolve().parents[1] / "config")
    try:
        params = Config.load_lineset_config("default")
    finally:
        Config.set_config_dir(None)

    assert params["scale"] == 1.0


def test_apply_object_parameters(config_dir, square):
    result = square.apply_object_parameters("placed")

    assert result is square
    # scaled by 2 and turned by 90 degrees about the center (0.5, 0.5, 0),
    # then moved by +1 along x
    np.testing.assert_allclose(square.get_center(), [1.5, 0.5, 0.0], atol=1e-12)
    np.testing.assert_allclose(square.points[0], [2.5, -0.5, 0.0], atol=1e-12)
    np.testing.assert_allclose(square.get_line_lengths(), np.full(4, 2.0))
    assert square.has_colors()
    np.testing.assert_allclose(square.colors, np.tile([1.0, 0.0, 0.0], (4, 1)))


def test_apply_object_parameters_only_touches_present_keys(config_dir, square):
    before = square.points.copy()

    square.apply_object_parameters("colored_only")

    np.testing.assert_array_equal(square.points, before)
    np.testing.assert_allclose(square.colors, np.tile([0.0, 0.0, 1.0], (4, 1)))


def test_get_info_lists_paths(config_dir):
    info = Config.get_info()

    assert info["config_dir"] == str(config_dir)
    assert info["linesets_config"].endswith("linesets.yaml")
