import pytest
from fastapi.testclient import TestClient

from app.weather.service import WeatherService, mock_current_weather


@pytest.fixture
def weather_at(monkeypatch: pytest.MonkeyPatch):
    """Pin the current weather every location resolves to."""
    def pin(temperature: float, humidity: float, location: str = "Jaipur"):
        async def fake_current(self: WeatherService, requested: str):
            return mock_current_weather(location).model_copy(
                update={"temperature": temperature, "humidity": humidity}
            )

        monkeypatch.setattr(WeatherService, "get_current_weather", fake_current)

    return pin


def test_current_weather_uses_mock_without_key(client: TestClient, api: str) -> None:
    r = client.get(f"{api}/weather/current/Pune")

    assert r.status_code == 200
    data = r.json()
    assert data["location"] == "Pune"
    assert data["temperature"] == 28
    assert data["humidity"] == 65


def test_forecast_has_seven_days(client: TestClient, api: str) -> None:
    r = client.get(f"{api}/weather/forecast/Pune")

    assert r.status_code == 200
    assert len(r.json()["daily"]) == 7


def test_suitability_requires_location(client: TestClient, api: str) -> None:
    r = client.post(f"{api}/weather/suitability", json={"plantRequirements": {"temp_min": 5}})

    assert r.status_code == 400
    assert r.json()["detail"] == "Location is required"


def test_suitability_rejects_blank_location(client: TestClient, api: str) -> None:
    r = client.post(f"{api}/weather/suitability", json={"location": "   "})

    assert r.status_code == 400


def test_suitability_without_body_is_missing_location(client: TestClient, api: str) -> None:
    r = client.post(f"{api}/weather/suitability")

    assert r.status_code == 400
    assert r.json() == {"detail": "Location is required"}


def test_suitability_with_null_body_is_missing_location(client: TestClient, api: str) -> None:
    r = client.post(
        f"{api}/weather/suitability",
        content="null",
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json()["detail"] == "Location is required"


def test_suitability_with_defaults(client: TestClient, api: str) -> None:
    r = client.post(f"{api}/weather/suitability", json={"location": "Pune"})

    assert r.status_code == 200
    assert r.json() == {
        "location": "Pune",
        "score": 100,
        "suitability": "Excellent",
        "warnings": [],
        "recommendations": [],
        "current_conditions": {"temperature": 28, "humidity": 65, "weather": "Partly cloudy"},
    }


def test_suitability_reports_resolved_location(client: TestClient, api: str, weather_at) -> None:
    weather_at(50, 10, location="Jaipur")

    r = client.post(
        f"{api}/weather/suitability",
        json={
            "location": "jaipur",
            "plantRequirements": {"temp_min": 10, "temp_max": 35, "humidity_min": 30},
        },
    )

    assert r.status_code == 200
    data = r.json()
    assert data["location"] == "Jaipur"
    assert data["score"] == 60
    assert data["suitability"] == "Good"
    assert data["warnings"][0].startswith("Temperature too high (50°C)")
    assert len(data["recommendations"]) == 2


def test_suitability_accepts_snake_case_requirements(client: TestClient, api: str, weather_at) -> None:
    weather_at(5, 65)

    r = client.post(
        f"{api}/weather/suitability",
        json={"location": "Shimla", "plant_requirements": {"temp_min": 10}},
    )

    assert r.json()["score"] == 75


def test_suitability_rejects_inverted_range(client: TestClient, api: str) -> None:
    r = client.post(
        f"{api}/weather/suitability",
        json={"location": "Pune", "plantRequirements": {"temp_min": 30, "temp_max": 20}},
    )

    assert r.status_code == 422
    assert r.json()["detail"][0]["msg"].endswith("temp_min must not exceed temp_max")


def test_suitability_rejects_nan(client: TestClient, api: str) -> None:
    r = client.post(
        f"{api}/weather/suitability",
        content='{"location": "Pune", "plantRequirements": {"humidity_min": NaN}}',
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 422
    error = r.json()["detail"][0]
    assert error["loc"][0] == "body"
    assert error["loc"][-1] == "humidity_min"
    assert "input" not in error


def test_suitability_rejects_infinity_with_plain_error(client: TestClient, api: str) -> None:
    safe_client = TestClient(client.app, raise_server_exceptions=False)
    r = safe_client.post(
        f"{api}/weather/suitability",
        content='{"location": "Pune", "plantRequirements": {"temp_max": Infinity}}',
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 422
    assert [e["type"] for e in r.json()["detail"]] == ["finite_number"]


def test_health(client: TestClient) -> None:
    r = client.get("/health")

    assert r.status_code == 200
    assert r.json()["weather_source"] == "mock"
    assert r.json()["database"] == "disconnected"


def test_oversized_body_is_rejected(client: TestClient, api: str) -> None:
    r = client.post(f"{api}/weather/suitability", json={"location": "x" * 20_000})

    assert r.status_code == 413
