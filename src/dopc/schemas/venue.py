"""Pydantic models for the venue API static and dynamic payloads."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Coordinate, CutoffRange, DistanceRange, PricedRange, VenuePricing


class VenueLocationModel(BaseModel):
    # GeoJSON order: [longitude, latitude] with an optional altitude
    coordinates: List[float] = Field(..., min_length=2)

    @field_validator("coordinates")
    @classmethod
    def validate_bounds(cls, value: List[float]) -> List[float]:
        lon, lat = value[0], value[1]
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"longitude {lon} out of range")
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude {lat} out of range")
        return value


class VenueStaticRaw(BaseModel):
    location: VenueLocationModel


class VenueStaticPayload(BaseModel):
    venue_raw: VenueStaticRaw

    def to_location(self) -> Coordinate:
        lon, lat = self.venue_raw.location.coordinates[:2]
        return Coordinate(latitude=lat, longitude=lon)


class DistanceRangeModel(BaseModel):
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)
    a: int
    b: int

    def to_domain(self) -> DistanceRange:
        # max == 0 marks the cutoff record
        if self.max == 0:
            return CutoffRange(min=self.min)
        return PricedRange(min=self.min, max=self.max, a=self.a, b=self.b)


class DeliveryPricingModel(BaseModel):
    base_price: int
    distance_ranges: List[DistanceRangeModel]


class DeliverySpecsModel(BaseModel):
    order_minimum_no_surcharge: int
    delivery_pricing: DeliveryPricingModel


class VenueDynamicRaw(BaseModel):
    delivery_specs: DeliverySpecsModel


class VenueDynamicPayload(BaseModel):
    venue_raw: VenueDynamicRaw

    def to_pricing(self) -> VenuePricing:
        specs = self.venue_raw.delivery_specs
        return VenuePricing(
            base_price=specs.delivery_pricing.base_price,
            order_minimum_no_surcharge=specs.order_minimum_no_surcharge,
            ranges=tuple(item.to_domain() for item in specs.delivery_pricing.distance_ranges),
        )
