"""Delivery order price response schemas."""

from __future__ import annotations

from pydantic import BaseModel

from ..models.domain import PriceResult


class DeliveryModel(BaseModel):
    fee: int
    distance: int


class DeliveryOrderPriceResponse(BaseModel):
    total_price: int
    small_order_surcharge: int
    cart_value: int
    delivery: DeliveryModel

    @classmethod
    def from_result(cls, result: PriceResult) -> "DeliveryOrderPriceResponse":
        return cls(
            total_price=result.total_price,
            small_order_surcharge=result.small_order_surcharge,
            cart_value=result.cart_value,
            delivery=DeliveryModel(fee=result.delivery_fee, distance=result.distance_meters),
        )
