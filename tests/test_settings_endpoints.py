import pytest

from weathermood.main import create_app


@pytest.mark.asyncio
async def test_settings_read_and_update_flow():
    app = create_app()

    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.get("/api/v1/settings")
        assert r.status_code == 200
        body = r.json()
        assert body["revision"] == 0
        assert body["settings"]["temperature_unit"] == "celsius"
        assert body["settings"]["selected_news_categories"] == ["general"]
        assert body["threshold_display"] == {"cold": "10°C", "hot": "30°C"}

        r = await client.put("/api/v1/settings/unit", json={"temperature_unit": "fahrenheit"})
        assert r.json()["revision"] == 1
        assert r.json()["threshold_display"] == {"cold": "50°F", "hot": "86°F"}

        r = await client.post("/api/v1/settings/unit/toggle")
        assert r.json()["settings"]["temperature_unit"] == "celsius"

        r = await client.put("/api/v1/settings/categories", json={"categories": ["sports", "business"]})
        assert r.json()["settings"]["selected_news_categories"] == ["sports", "business"]

        r = await client.post("/api/v1/settings/categories/sports/toggle")
        assert r.json()["settings"]["selected_news_categories"] == ["business"]

        r = await client.post("/api/v1/settings/categories/disable-all")
        assert r.json()["settings"]["selected_news_categories"] == []

        r = await client.post("/api/v1/settings/categories/enable-all")
        assert len(r.json()["settings"]["selected_news_categories"]) == 7
        assert r.json()["revision"] == 6


@pytest.mark.asyncio
async def test_invalid_thresholds_rejected_without_mutation():
    app = create_app()

    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.put("/api/v1/settings/thresholds", json={"cold_threshold": 35, "hot_threshold": 30})
        assert r.status_code == 422
        assert r.json()["detail"] == "Cold threshold must be less than hot threshold"

        r = await client.get("/api/v1/settings")
        assert r.json()["revision"] == 0
        assert r.json()["settings"]["temperature_thresholds"] == {"cold_threshold": 10.0, "hot_threshold": 30.0}

        r = await client.put("/api/v1/settings/thresholds", json={"cold_threshold": 5, "hot_threshold": 35})
        assert r.status_code == 200
        assert r.json()["settings"]["temperature_thresholds"] == {"cold_threshold": 5.0, "hot_threshold": 35.0}

        r = await client.post("/api/v1/settings/thresholds/reset")
        assert r.json()["settings"]["temperature_thresholds"] == {"cold_threshold": 10.0, "hot_threshold": 30.0}


@pytest.mark.asyncio
async def test_threshold_validation_endpoint_does_not_save():
    app = create_app()

    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.post("/api/v1/settings/thresholds/validate", json={"cold_threshold": 0, "hot_threshold": 65})
        assert r.json() == {"valid": False, "reason": "Hot threshold must be between 0°C and 60°C"}

        r = await client.post("/api/v1/settings/thresholds/validate", json={"cold_threshold": 0, "hot_threshold": 25})
        assert r.json() == {"valid": True, "reason": None}

        r = await client.get("/api/v1/settings")
        assert r.json()["revision"] == 0
