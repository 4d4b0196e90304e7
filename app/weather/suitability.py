"""
Climate suitability scoring.

Compares current weather against a plant's preferred temperature and humidity
ranges and produces a 0-100 score, a qualitative band, and paired
warnings/recommendations. Pure and deterministic; no I/O.
"""

import math
from typing import Optional

from app.weather.models import (
    CurrentConditions,
    PlantRequirements,
    Suitability,
    SuitabilityReport,
    WeatherSnapshot,
)

TEMPERATURE_PENALTY_PER_DEGREE = 5
TEMPERATURE_PENALTY_CAP = 30
HUMIDITY_PENALTY_PER_PERCENT = 0.5
HUMIDITY_PENALTY_CAP = 20

# (exclusive upper bound, band), checked in order
SUITABILITY_BANDS = (
    (40, Suitability.POOR),
    (60, Suitability.FAIR),
    (80, Suitability.GOOD),
)


def _fmt(value: float) -> str:
    """Render a number the way clients print it: 5 rather than 5.0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def classify(score: int) -> Suitability:
    """Map a rounded score to its suitability band."""
    for upper, band in SUITABILITY_BANDS:
        if score < upper:
            return band
    return Suitability.EXCELLENT


def calculate_climate_suitability(
    weather: WeatherSnapshot,
    requirements: Optional[PlantRequirements] = None,
) -> SuitabilityReport:
    """Score how well `weather` suits a plant with the given requirements."""
    req = requirements or PlantRequirements()
    temperature = weather.temperature
    humidity = weather.humidity

    score = 100.0
    warnings = []
    recommendations = []

    if temperature < req.temp_min:
        diff = req.temp_min - temperature
        score -= min(diff * TEMPERATURE_PENALTY_PER_DEGREE, TEMPERATURE_PENALTY_CAP)
        warnings.append(
            f"Temperature too low ({_fmt(temperature)}°C). "
            f"Plant prefers {_fmt(req.temp_min)}°C minimum."
        )
        recommendations.append("Consider indoor growing or greenhouse protection.")
    elif temperature > req.temp_max:
        diff = temperature - req.temp_max
        score -= min(diff * TEMPERATURE_PENALTY_PER_DEGREE, TEMPERATURE_PENALTY_CAP)
        warnings.append(
            f"Temperature too high ({_fmt(temperature)}°C). "
            f"Plant prefers {_fmt(req.temp_max)}°C maximum."
        )
        recommendations.append("Provide shade during peak hours and ensure adequate watering.")

    if humidity < req.humidity_min:
        diff = req.humidity_min - humidity
        score -= min(diff * HUMIDITY_PENALTY_PER_PERCENT, HUMIDITY_PENALTY_CAP)
        warnings.append(
            f"Humidity too low ({_fmt(humidity)}%). "
            f"Plant prefers {_fmt(req.humidity_min)}% minimum."
        )
        recommendations.append("Increase humidity with misting or humidifiers.")
    elif humidity > req.humidity_max:
        diff = humidity - req.humidity_max
        score -= min(diff * HUMIDITY_PENALTY_PER_PERCENT, HUMIDITY_PENALTY_CAP)
        warnings.append(
            f"Humidity too high ({_fmt(humidity)}%). "
            f"Plant prefers {_fmt(req.humidity_max)}% maximum."
        )
        recommendations.append("Ensure good air circulation to prevent fungal diseases.")

    score = max(0.0, min(100.0, score))
    # Round half up; built-in round() would send 56.5 to 56.
    rounded = int(math.floor(score + 0.5))

    return SuitabilityReport(
        score=rounded,
        suitability=classify(rounded),
        warnings=warnings,
        recommendations=recommendations,
        current_conditions=CurrentConditions(
            temperature=temperature,
            humidity=humidity,
            weather=weather.weather,
        ),
    )
