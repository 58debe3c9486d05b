from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable

from weathermood.core.config import get_settings
from weathermood.schemas.news import NewsCategory
from weathermood.schemas.settings import UserSettings
from weathermood.schemas.weather import TemperatureThresholds, TemperatureUnit
from weathermood.services.weather.conditions import validate_thresholds


logger = logging.getLogger(__name__)


class InvalidThresholdsError(ValueError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _unique(categories: Iterable[NewsCategory]) -> tuple[NewsCategory, ...]:
    return tuple(dict.fromkeys(categories))


class SettingsStore:
    """In-memory user settings.

    Every change swaps in a new frozen ``UserSettings`` and bumps ``revision``;
    clients refresh when the revision moves. Rejected changes leave both alone.
    """

    def __init__(self, initial: UserSettings | None = None, *, defaults: TemperatureThresholds | None = None) -> None:
        self._settings = initial or UserSettings()
        self._default_thresholds = defaults or TemperatureThresholds()
        self._revision = 0

    @property
    def revision(self) -> int:
        return self._revision

    def snapshot(self) -> UserSettings:
        return self._settings

    def _replace(self, **changes) -> UserSettings:
        updated = self._settings.model_copy(update=changes)
        if updated.model_dump() != self._settings.model_dump():
            self._settings = updated
            self._revision += 1
            logger.info("Settings updated to revision %d: %s", self._revision, sorted(changes))
        return self._settings

    def set_temperature_unit(self, unit: TemperatureUnit) -> UserSettings:
        return self._replace(temperature_unit=unit)

    def toggle_temperature_unit(self) -> UserSettings:
        current = self._settings.temperature_unit
        new_unit = TemperatureUnit.FAHRENHEIT if current == TemperatureUnit.CELSIUS else TemperatureUnit.CELSIUS
        return self.set_temperature_unit(new_unit)

    def set_news_categories(self, categories: Iterable[NewsCategory]) -> UserSettings:
        return self._replace(selected_news_categories=_unique(categories))

    def toggle_news_category(self, category: NewsCategory) -> UserSettings:
        current = self._settings.selected_news_categories
        if category in current:
            return self.set_news_categories(c for c in current if c != category)
        return self.set_news_categories((*current, category))

    def enable_all_categories(self) -> UserSettings:
        return self.set_news_categories(NewsCategory)

    def disable_all_categories(self) -> UserSettings:
        return self.set_news_categories(())

    def update_thresholds(self, cold: float, hot: float) -> UserSettings:
        result = validate_thresholds(cold, hot)
        if not result.valid:
            raise InvalidThresholdsError(result.reason or "Invalid thresholds")
        return self._replace(temperature_thresholds=TemperatureThresholds(cold_threshold=cold, hot_threshold=hot))

    def reset_thresholds(self) -> UserSettings:
        return self._replace(temperature_thresholds=self._default_thresholds)


def build_store_from_settings() -> SettingsStore:
    settings = get_settings()
    defaults = TemperatureThresholds(
        cold_threshold=settings.default_cold_threshold,
        hot_threshold=settings.default_hot_threshold,
    )
    result = validate_thresholds(defaults.cold_threshold, defaults.hot_threshold)
    if not result.valid:
        raise InvalidThresholdsError(f"Configured default thresholds are invalid: {result.reason}")
    initial = UserSettings(
        temperature_unit=TemperatureUnit(settings.default_temperature_unit),
        selected_news_categories=_unique(NewsCategory(c) for c in settings.default_news_categories),
        temperature_thresholds=defaults,
    )
    return SettingsStore(initial, defaults=defaults)


@lru_cache(maxsize=1)
def get_settings_store() -> SettingsStore:
    return build_store_from_settings()
