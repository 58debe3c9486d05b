from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from weathermood.schemas.news import NewsFilterType


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WeatherCondition(str, Enum):
    COLD = "cold"
    COOL = "cool"
    HOT = "hot"


class TemperatureThresholds(BaseModel):
    """Condition boundaries, always in Celsius."""

    model_config = ConfigDict(frozen=True)

    cold_threshold: float = Field(10.0, description="At or below this is cold (C).")
    hot_threshold: float = Field(30.0, description="At or above this is hot (C).")


class ThresholdValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: str | None = None


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class WeatherDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    main: str | None = None
    description: str | None = None
    icon: str | None = None


class WeatherMain(BaseModel):
    model_config = ConfigDict(frozen=True)

    temp: float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = None
    humidity: float | None = None


class WeatherWind(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed: float | None = None
    deg: float | None = None


class WeatherData(BaseModel):
    """Current conditions as returned by OpenWeatherMap, in the requested unit."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    dt: int | None = None
    main: WeatherMain
    weather: list[WeatherDescription] = Field(default_factory=list)
    wind: WeatherWind | None = None


class ForecastEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    dt: int
    dt_txt: str | None = None
    main: WeatherMain
    weather: list[WeatherDescription] = Field(default_factory=list)
    wind: WeatherWind | None = None


class ForecastCity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    country: str | None = None


class ForecastData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: ForecastCity | None = None
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")


class ConditionResponse(BaseModel):
    temperature: float
    unit: TemperatureUnit
    temperature_c: float
    condition: WeatherCondition
    mood: NewsFilterType
    thresholds: TemperatureThresholds
