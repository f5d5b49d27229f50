"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (``round`` would pick the even one)."""

    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the fraction directly; adding 0.5 first can round 0.49999999999999994 up
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def distance_meters(a: Coordinate, b: Coordinate) -> int:
    """Great-circle distance between two coordinates, rounded to whole meters."""

    return round_half_away(haversine_meters(a.latitude, a.longitude, b.latitude, b.longitude))
