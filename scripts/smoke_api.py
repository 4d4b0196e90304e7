#!/usr/bin/env python3
"""
End-to-end smoke check for a running Verdant API.

Usage:
    python -m scripts.smoke_api
    python -m scripts.smoke_api --base-url http://staging:8000 --token <jwt>

Without --token a token is minted locally from JWT_SECRET_KEY, which only
works against a server sharing the same secret.
"""

import argparse
import os
import sys
from typing import Optional

# Make app package importable when run from scripts/ or repo root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import requests

from app.auth.service import AuthService

API_PREFIX = "/api/v1/verdant"

TEST_PLANT = {
    "plantId": 182512,
    "commonName": "Sweet basil",
    "scientificName": "Ocimum basilicum",
}


class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    END = '\033[0m'

def print_test(name: str):
    print(f"\n{Colors.BLUE}=== {name} ==={Colors.END}")

def print_success(msg: str):
    print(f"{Colors.GREEN}✓ {msg}{Colors.END}")

def print_error(msg: str):
    print(f"{Colors.RED}✗ {msg}{Colors.END}")

def print_info(msg: str):
    print(f"{Colors.YELLOW}ℹ {msg}{Colors.END}")


def check_health(base_url: str) -> bool:
    print_test("Health Checks")
    try:
        r = requests.get(f"{base_url}/health", timeout=10)
        r.raise_for_status()
        data = r.json()
        assert data["status"] == "healthy"
        print_success("GET /health")
        print_info(f"Database: {data.get('database')}, weather: {data.get('weather_source')}")
        return True
    except (requests.RequestException, AssertionError, KeyError) as e:
        print_error(f"GET /health - {e}")
        return False


def check_weather(api: str) -> bool:
    print_test("Weather")
    ok = True
    
    for path in ("current/Bangalore", "forecast/Bangalore"):
        try:
            r = requests.get(f"{api}/weather/{path}", timeout=15)
            assert r.status_code == 200, r.text
            print_success(f"GET /weather/{path}")
        except (requests.RequestException, AssertionError) as e:
            print_error(f"GET /weather/{path} - {e}")
            ok = False
    
    try:
        r = requests.post(f"{api}/weather/suitability", json={}, timeout=15)
        assert r.status_code == 400, r.text
        print_success("POST /weather/suitability without location - 400")
        
        r = requests.post(
            f"{api}/weather/suitability",
            json={"location": "Bangalore", "plantRequirements": {"temp_min": 15, "temp_max": 30}},
            timeout=15,
        )
        assert r.status_code == 200, r.text
        data = r.json()
        assert 0 <= data["score"] <= 100
        assert len(data["warnings"]) == len(data["recommendations"])
        print_success("POST /weather/suitability")
        print_info(f"{data['location']}: {data['score']} ({data['suitability']})")
    except (requests.RequestException, AssertionError, KeyError) as e:
        print_error(f"POST /weather/suitability - {e}")
        ok = False
    
    return ok


def check_plants(api: str) -> bool:
    print_test("Plant Search")
    try:
        r = requests.get(f"{api}/plants/search", params={"q": "basil"}, timeout=15)
        if r.status_code == 502:
            print_info("Trefle unavailable or token not configured")
            return True
        assert r.status_code == 200, r.text
        print_success(f"GET /plants/search - {len(r.json().get('data', []))} result(s)")
        return True
    except (requests.RequestException, AssertionError) as e:
        print_error(f"GET /plants/search - {e}")
        return False


def check_favorites(api: str, token: str) -> bool:
    print_test("Favorites")
    headers = {"Authorization": f"Bearer {token}"}
    favorite_id: Optional[str] = None
    try:
        r = requests.post(f"{api}/plants/favorites", json=TEST_PLANT, headers=headers, timeout=10)
        if r.status_code == 400:
            print_info("Plant already in favorites, reusing it")
            listed = requests.get(f"{api}/plants/favorites", headers=headers, timeout=10).json()
            favorite_id = next(f["_id"] for f in listed if f["plantId"] == TEST_PLANT["plantId"])
        else:
            assert r.status_code == 201, r.text
            favorite_id = r.json()["_id"]
            print_success("POST /plants/favorites")
        
        r = requests.get(f"{api}/plants/favorites", headers=headers, timeout=10)
        assert r.status_code == 200, r.text
        print_success(f"GET /plants/favorites - {len(r.json())} favorite(s)")
        
        r = requests.delete(f"{api}/plants/favorites/{favorite_id}", headers=headers, timeout=10)
        assert r.status_code == 200, r.text
        print_success("DELETE /plants/favorites/{id}")
        return True
    except (requests.RequestException, AssertionError, KeyError, StopIteration) as e:
        print_error(f"Favorites - {e}")
        return False


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--token", help="Bearer token; minted locally when omitted")
    args = parser.parse_args()
    
    base_url = args.base_url.rstrip("/")
    api = f"{base_url}{API_PREFIX}"
    token = args.token or AuthService.create_access_token("smoke-test-user", "smoke@verdant.test")
    
    if not check_health(base_url):
        return 1
    
    results = [
        check_weather(api),
        check_plants(api),
        check_favorites(api, token),
    ]
    
    print()
    if all(results):
        print_success("All checks passed")
        return 0
    print_error(f"{results.count(False)} check group(s) failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
