#!/usr/bin/env python3
"""Manual check that the venue API is reachable and its payloads decode."""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from dopc.config import settings
from dopc.services.errors import FetchError
from dopc.services.venues.client import VenueApiClient, check_health


def main(venue_slug: str = "home-assignment-venue-helsinki") -> int:
    print("=" * 60)
    print("Venue API Connection Test")
    print("=" * 60)
    print()

    print(f"1. Venue API base URL: {settings.venue_api_base_url}")
    if not check_health():
        print("   [ERROR] Venue API is not responding")
        return 1
    print("   [OK] Venue API is reachable")
    print()

    print(f"2. Fetching data for venue '{venue_slug}'...")
    client = VenueApiClient()
    try:
        location = client.get_static_data(venue_slug)
        pricing = client.get_dynamic_data(venue_slug)
    except FetchError as e:
        print(f"   [ERROR] {e}")
        return 1
    print(f"   [OK] Location: lat={location.latitude} lon={location.longitude}")
    print(f"   [OK] Base price: {pricing.base_price}")
    print(f"   [OK] Order minimum without surcharge: {pricing.order_minimum_no_surcharge}")
    for distance_range in pricing.ranges:
        print(f"   [OK] Range: {distance_range}")
    print()

    print("=" * 60)
    print("[SUCCESS] Venue API is connected and working!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
