import pytest

from weathermood.schemas.weather import TemperatureThresholds, TemperatureUnit, WeatherCondition
from weathermood.services.weather.conditions import (
    classify_condition,
    convert_temperature,
    format_temperature,
    threshold_display,
    validate_thresholds,
)

C = TemperatureUnit.CELSIUS
F = TemperatureUnit.FAHRENHEIT
DEFAULT = TemperatureThresholds(cold_threshold=10, hot_threshold=30)


@pytest.mark.parametrize(
    "temp, expected",
    [
        (-5, WeatherCondition.COLD),
        (10, WeatherCondition.COLD),
        (10.01, WeatherCondition.COOL),
        (20, WeatherCondition.COOL),
        (29.99, WeatherCondition.COOL),
        (30, WeatherCondition.HOT),
        (45, WeatherCondition.HOT),
    ],
)
def test_classify_celsius_inclusive_boundaries(temp, expected):
    assert classify_condition(temp, C, DEFAULT) == expected


def test_classify_fahrenheit_body_temperature_is_hot():
    assert classify_condition(98.6, F, DEFAULT) == WeatherCondition.HOT


def test_classify_fahrenheit_boundaries():
    assert classify_condition(50, F, DEFAULT) == WeatherCondition.COLD
    assert classify_condition(86, F, DEFAULT) == WeatherCondition.HOT
    assert classify_condition(68, F, DEFAULT) == WeatherCondition.COOL


def test_classify_overlapping_thresholds_prefers_cold():
    overlapping = TemperatureThresholds(cold_threshold=25, hot_threshold=15)
    assert classify_condition(20, C, overlapping) == WeatherCondition.COLD
    assert classify_condition(26, C, overlapping) == WeatherCondition.HOT


def test_convert_temperature():
    assert convert_temperature(100, C, F) == 212
    assert convert_temperature(32, F, C) == 0
    assert convert_temperature(12.5, C, C) == 12.5


def test_validate_accepts_defaults():
    result = validate_thresholds(10, 30)
    assert result.valid
    assert result.reason is None


@pytest.mark.parametrize(
    "cold, hot, reason",
    [
        (30, 30, "Cold threshold must be less than hot threshold"),
        (40, 20, "Cold threshold must be less than hot threshold"),
        # ordering is checked before ranges
        (70, 65, "Cold threshold must be less than hot threshold"),
        (-51, 20, "Cold threshold must be between -50°C and 50°C"),
        (51, 55, "Cold threshold must be between -50°C and 50°C"),
        (-10, -1, "Hot threshold must be between 0°C and 60°C"),
        (10, 61, "Hot threshold must be between 0°C and 60°C"),
    ],
)
def test_validate_rejects(cold, hot, reason):
    result = validate_thresholds(cold, hot)
    assert not result.valid
    assert result.reason == reason


def test_validate_range_edges_are_inclusive():
    assert validate_thresholds(-50, 0).valid
    assert validate_thresholds(50, 60).valid


def test_format_temperature_rounds_half_up():
    assert format_temperature(24.5, C) == "25°C"
    assert format_temperature(-0.4, C) == "0°C"
    assert format_temperature(98.6, F) == "99°F"


def test_threshold_display():
    assert threshold_display(DEFAULT, C) == {"cold": "10°C", "hot": "30°C"}
    assert threshold_display(DEFAULT, F) == {"cold": "50°F", "hot": "86°F"}
