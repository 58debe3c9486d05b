from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weathermood.schemas.news import NewsCategory
from weathermood.schemas.weather import TemperatureThresholds, TemperatureUnit


class UserSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    selected_news_categories: tuple[NewsCategory, ...] = (NewsCategory.GENERAL,)
    temperature_thresholds: TemperatureThresholds = Field(default_factory=TemperatureThresholds)

    @property
    def news_enabled(self) -> bool:
        return bool(self.selected_news_categories)


class SettingsResponse(BaseModel):
    settings: UserSettings
    revision: int
    threshold_display: dict[str, str]


class TemperatureUnitUpdate(BaseModel):
    temperature_unit: TemperatureUnit


class NewsCategoriesUpdate(BaseModel):
    categories: list[NewsCategory] = Field(default_factory=list)


class ThresholdsUpdate(BaseModel):
    cold_threshold: float
    hot_threshold: float
