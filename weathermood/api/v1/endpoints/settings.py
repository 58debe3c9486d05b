from fastapi import APIRouter, Depends

from weathermood.api.v1.deps import get_store
from weathermood.schemas.news import NewsCategory
from weathermood.schemas.settings import (
    NewsCategoriesUpdate,
    SettingsResponse,
    TemperatureUnitUpdate,
    ThresholdsUpdate,
)
from weathermood.schemas.weather import ThresholdValidation
from weathermood.services.settings_store import SettingsStore
from weathermood.services.weather.conditions import threshold_display, validate_thresholds


router = APIRouter()


def _response(store: SettingsStore) -> SettingsResponse:
    current = store.snapshot()
    return SettingsResponse(
        settings=current,
        revision=store.revision,
        threshold_display=threshold_display(current.temperature_thresholds, current.temperature_unit),
    )


@router.get("", response_model=SettingsResponse)
async def read_settings(store: SettingsStore = Depends(get_store)):
    return _response(store)


@router.put("/unit", response_model=SettingsResponse)
async def update_unit(body: TemperatureUnitUpdate, store: SettingsStore = Depends(get_store)):
    store.set_temperature_unit(body.temperature_unit)
    return _response(store)


@router.post("/unit/toggle", response_model=SettingsResponse)
async def toggle_unit(store: SettingsStore = Depends(get_store)):
    store.toggle_temperature_unit()
    return _response(store)


@router.put("/categories", response_model=SettingsResponse)
async def update_categories(body: NewsCategoriesUpdate, store: SettingsStore = Depends(get_store)):
    """Replace the selection. An empty list disables news."""
    store.set_news_categories(body.categories)
    return _response(store)


@router.post("/categories/enable-all", response_model=SettingsResponse)
async def enable_all_categories(store: SettingsStore = Depends(get_store)):
    store.enable_all_categories()
    return _response(store)


@router.post("/categories/disable-all", response_model=SettingsResponse)
async def disable_all_categories(store: SettingsStore = Depends(get_store)):
    store.disable_all_categories()
    return _response(store)


@router.post("/categories/{category}/toggle", response_model=SettingsResponse)
async def toggle_category(category: NewsCategory, store: SettingsStore = Depends(get_store)):
    store.toggle_news_category(category)
    return _response(store)


@router.put("/thresholds", response_model=SettingsResponse)
async def update_thresholds(body: ThresholdsUpdate, store: SettingsStore = Depends(get_store)):
    store.update_thresholds(body.cold_threshold, body.hot_threshold)
    return _response(store)


@router.post("/thresholds/validate", response_model=ThresholdValidation)
async def check_thresholds(body: ThresholdsUpdate):
    return validate_thresholds(body.cold_threshold, body.hot_threshold)


@router.post("/thresholds/reset", response_model=SettingsResponse)
async def reset_thresholds(store: SettingsStore = Depends(get_store)):
    store.reset_thresholds()
    return _response(store)
