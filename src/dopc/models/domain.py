"""Domain models for venues, pricing rules and price results."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class PricedRange:
    """Distance band [min, max) priced as ``a + round(b * distance / 10)``."""

    min: int
    max: int
    a: int
    b: int

    def contains(self, distance: int) -> bool:
        return self.min <= distance < self.max


@dataclass(frozen=True, slots=True)
class CutoffRange:
    """Delivery is not offered at or beyond ``min`` meters."""

    min: int


DistanceRange = Union[PricedRange, CutoffRange]


@dataclass(frozen=True, slots=True)
class VenuePricing:
    base_price: int
    order_minimum_no_surcharge: int
    ranges: tuple[DistanceRange, ...]


@dataclass(frozen=True, slots=True)
class PriceRequest:
    venue_slug: str
    cart_value: int
    user_location: Coordinate


@dataclass(frozen=True, slots=True)
class PriceResult:
    total_price: int
    small_order_surcharge: int
    cart_value: int
    delivery_fee: int
    distance_meters: int
