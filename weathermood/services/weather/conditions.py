from __future__ import annotations

import math

from weathermood.schemas.weather import (
    TemperatureThresholds,
    TemperatureUnit,
    ThresholdValidation,
    WeatherCondition,
)


COLD_THRESHOLD_RANGE = (-50.0, 50.0)
HOT_THRESHOLD_RANGE = (0.0, 60.0)

UNIT_SYMBOLS = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
}


def convert_temperature(temp: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> float:
    if from_unit == to_unit:
        return temp
    if from_unit == TemperatureUnit.CELSIUS:
        return temp * 9 / 5 + 32
    return (temp - 32) * 5 / 9


def to_celsius(temp: float, unit: TemperatureUnit) -> float:
    return convert_temperature(temp, unit, TemperatureUnit.CELSIUS)


def classify_condition(
    temperature: float,
    unit: TemperatureUnit,
    thresholds: TemperatureThresholds,
) -> WeatherCondition:
    """Classify a reading against inclusive Celsius thresholds.

    Thresholds are not validated here. If they overlap, cold wins.
    """
    temp_c = to_celsius(temperature, unit)
    if temp_c <= thresholds.cold_threshold:
        return WeatherCondition.COLD
    if temp_c >= thresholds.hot_threshold:
        return WeatherCondition.HOT
    return WeatherCondition.COOL


def validate_thresholds(cold: float, hot: float) -> ThresholdValidation:
    if cold >= hot:
        return ThresholdValidation(valid=False, reason="Cold threshold must be less than hot threshold")

    lo, hi = COLD_THRESHOLD_RANGE
    if cold < lo or cold > hi:
        return ThresholdValidation(valid=False, reason="Cold threshold must be between -50°C and 50°C")

    lo, hi = HOT_THRESHOLD_RANGE
    if hot < lo or hot > hi:
        return ThresholdValidation(valid=False, reason="Hot threshold must be between 0°C and 60°C")

    return ThresholdValidation(valid=True)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_temperature(temp: float, unit: TemperatureUnit) -> str:
    return f"{_round_half_up(temp)}{UNIT_SYMBOLS[unit]}"


def threshold_display(thresholds: TemperatureThresholds, unit: TemperatureUnit) -> dict[str, str]:
    cold = convert_temperature(thresholds.cold_threshold, TemperatureUnit.CELSIUS, unit)
    hot = convert_temperature(thresholds.hot_threshold, TemperatureUnit.CELSIUS, unit)
    return {"cold": format_temperature(cold, unit), "hot": format_temperature(hot, unit)}
