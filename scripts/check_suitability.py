#!/usr/bin/env python3
"""
Print the climate suitability report for a plant at a location.

Usage:
    # Default requirements (10-35°C, 30-80% humidity)
    python -m scripts.check_suitability --location Pune

    # Custom ranges
    python -m scripts.check_suitability --location Delhi --temp-min 15 --temp-max 30 \\
        --humidity-min 40 --humidity-max 70

Exit codes:
    0 - Report printed
    2 - Invalid arguments
"""

import argparse
import asyncio
import json
import logging
import os
import sys

# Make app package importable when run from scripts/ or repo root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from app.weather.models import PlantRequirements
from app.weather.service import WeatherService
from app.weather.suitability import calculate_climate_suitability


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Climate suitability for a plant at a location")
    parser.add_argument("--location", required=True, help="City name or 'lat,lon'")
    parser.add_argument("--temp-min", type=float, help="Minimum preferred temperature (°C)")
    parser.add_argument("--temp-max", type=float, help="Maximum preferred temperature (°C)")
    parser.add_argument("--humidity-min", type=float, help="Minimum preferred humidity (%%)")
    parser.add_argument("--humidity-max", type=float, help="Maximum preferred humidity (%%)")
    return parser.parse_args(argv)


def build_requirements(args: argparse.Namespace) -> PlantRequirements:
    """Only pass the flags that were given so the model defaults apply to the rest."""
    given = {
        "temp_min": args.temp_min,
        "temp_max": args.temp_max,
        "humidity_min": args.humidity_min,
        "humidity_max": args.humidity_max,
    }
    return PlantRequirements(**{k: v for k, v in given.items() if v is not None})


async def run(args: argparse.Namespace) -> dict:
    weather = await WeatherService().get_current_weather(args.location)
    report = calculate_climate_suitability(weather, build_requirements(args))
    return {"location": weather.location, **report.model_dump(mode="json")}


def main(argv=None) -> int:
    args = parse_args(argv)
    if not args.location.strip():
        logger.error("Location is required")
        return 2
    
    try:
        build_requirements(args)
    except ValidationError as e:
        logger.error(f"Invalid plant requirements: {e}")
        return 2
    
    result = asyncio.run(run(args))
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
