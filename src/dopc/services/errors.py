"""Exceptions raised while pricing a delivery order."""

from __future__ import annotations


class FetchError(Exception):
    """Raised by a venue data source when venue data cannot be retrieved or decoded."""


class PricingError(Exception):
    """Base class for failures of the price calculation."""


class DeliveryImpossible(PricingError):
    """The user is outside every deliverable distance range of the venue."""

    def __init__(self, distance: int, reason: str) -> None:
        super().__init__(f"Delivery not possible at {distance} m: {reason}")
        self.distance = distance
        self.reason = reason


class VenueDataUnavailable(PricingError):
    """Venue static or dynamic data could not be obtained."""

    def __init__(self, venue_slug: str, cause: BaseException) -> None:
        super().__init__(f"Venue data unavailable for '{venue_slug}': {cause}")
        self.venue_slug = venue_slug
        self.cause = cause
