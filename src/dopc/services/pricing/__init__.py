"""Delivery order pricing services."""

from ..errors import DeliveryImpossible, FetchError, PricingError, VenueDataUnavailable
from .fees import resolve_delivery_fee, small_order_surcharge
from .service import DeliveryPriceCalculator, calculate_delivery_order_price

__all__ = [
    "DeliveryImpossible",
    "DeliveryPriceCalculator",
    "FetchError",
    "PricingError",
    "VenueDataUnavailable",
    "calculate_delivery_order_price",
    "resolve_delivery_fee",
    "small_order_surcharge",
]
