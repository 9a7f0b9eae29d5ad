"""Configuration validation tests."""

import pytest

from environment import ConfigurationError
from experimenter.config import PillarSortConfig, create_default_config


def test_defaults_match_scene():
    config = create_default_config()
    assert config.number_of_pillars == 1000
    assert config.minimum_pillar_height == 1.0
    assert config.maximum_pillar_height == 1000.0
    assert config.pillar_width == 1.0
    assert config.distance_between_pillars == 2.0
    assert config.dt == pytest.approx(1.0 / 60.0)


@pytest.mark.parametrize("n", [0, 1, -5])
def test_too_few_pillars_rejected(n):
    with pytest.raises(ConfigurationError):
        PillarSortConfig(number_of_pillars=n)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        PillarSortConfig(initial_heights=[3.0])


def test_initial_heights_set_pillar_count():
    config = PillarSortConfig(number_of_pillars=1000, initial_heights=[3, 1, 4, 1])
    assert config.number_of_pillars == 4
    assert config.initial_heights == [3.0, 1.0, 4.0, 1.0]


def test_non_finite_initial_heights_rejected():
    with pytest.raises(ConfigurationError):
        PillarSortConfig(initial_heights=[1.0, float('nan')])


def test_non_positive_frame_rate_rejected():
    with pytest.raises(ConfigurationError):
        PillarSortConfig(frame_rate=0.0)


def test_out_of_range_values_are_adjusted():
    config = PillarSortConfig(
        number_of_pillars=10,
        minimum_pillar_height=50.0,
        maximum_pillar_height=5.0,
        logging_frequency=1000.0,
        plotting_frequency=0.0,
        ambient_brightness=3.0,
        linger_frames=-4,
    )
    assert (config.minimum_pillar_height, config.maximum_pillar_height) == (5.0, 50.0)
    assert config.logging_frequency == 100.0
    assert config.plotting_frequency == 0.01
    assert config.ambient_brightness == 1.0
    assert config.linger_frames == 0


def test_create_default_config_overrides():
    config = create_default_config(number_of_pillars=25, seed=3)
    assert config.number_of_pillars == 25
    assert config.seed == 3
