"""Delivery order price orchestration service."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from ...models.domain import Coordinate, PriceRequest, PriceResult, VenuePricing
from ..geospatial import distance_meters
from ..venues.client import VenueApiClient, VenueDataSource
from ..errors import VenueDataUnavailable
from .fees import resolve_delivery_fee, small_order_surcharge

logger = logging.getLogger(__name__)


class DeliveryPriceCalculator:
    """Prices a delivery order from venue data fetched through ``venue_source``."""

    def __init__(self, venue_source: VenueDataSource) -> None:
        self.venue_source = venue_source

    def _fetch_venue(self, venue_slug: str) -> tuple[Coordinate, VenuePricing]:
        """Fetch static and dynamic venue data concurrently; both must succeed.

        The first failing branch aborts the fetch without waiting for the other.
        """
        executor = ThreadPoolExecutor(max_workers=2)
        try:
            static_future = executor.submit(self.venue_source.get_static_data, venue_slug)
            dynamic_future = executor.submit(self.venue_source.get_dynamic_data, venue_slug)

            done, _ = wait((static_future, dynamic_future), return_when=FIRST_EXCEPTION)
            for future in (static_future, dynamic_future):
                if future not in done:
                    continue
                exc = future.exception()
                if exc is not None:
                    logger.warning(f"Failed to fetch venue data for '{venue_slug}': {exc}")
                    raise VenueDataUnavailable(venue_slug, exc) from exc

            return static_future.result(), dynamic_future.result()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def calculate(self, request: PriceRequest) -> PriceResult:
        venue_location, pricing = self._fetch_venue(request.venue_slug)

        distance = distance_meters(request.user_location, venue_location)
        delivery_fee = resolve_delivery_fee(distance, pricing.base_price, pricing.ranges)
        surcharge = small_order_surcharge(request.cart_value, pricing.order_minimum_no_surcharge)
        total_price = request.cart_value + surcharge + delivery_fee

        logger.info(
            f"Priced order for venue '{request.venue_slug}': distance={distance}m "
            f"fee={delivery_fee} surcharge={surcharge} total={total_price}"
        )
        return PriceResult(
            total_price=total_price,
            small_order_surcharge=surcharge,
            cart_value=request.cart_value,
            delivery_fee=delivery_fee,
            distance_meters=distance,
        )


def calculate_delivery_order_price(request: PriceRequest) -> PriceResult:
    """Price ``request`` against the configured venue API."""
    calculator = DeliveryPriceCalculator(VenueApiClient())
    return calculator.calculate(request)
