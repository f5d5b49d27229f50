"""Delivery order price endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...models.domain import Coordinate, PriceRequest
from ...schemas.pricing import DeliveryOrderPriceResponse
from ...services.errors import DeliveryImpossible, VenueDataUnavailable
from ...services.pricing import service as pricing_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pricing"])


@router.get(
    "/delivery-order-price",
    response_model=DeliveryOrderPriceResponse,
    status_code=status.HTTP_200_OK,
)
def delivery_order_price(
    venue_slug: str = Query(..., min_length=1, description="Venue identifier."),
    cart_value: int = Query(..., ge=0, description="Cart value in minor currency units."),
    user_lat: float = Query(..., ge=-90.0, le=90.0),
    user_lon: float = Query(..., ge=-180.0, le=180.0),
) -> DeliveryOrderPriceResponse:
    request = PriceRequest(
        venue_slug=venue_slug,
        cart_value=cart_value,
        user_location=Coordinate(latitude=user_lat, longitude=user_lon),
    )
    try:
        result = pricing_service.calculate_delivery_order_price(request)
    except DeliveryImpossible as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except VenueDataUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error calculating delivery order price: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to calculate delivery order price: {str(exc)}",
        ) from exc
    return DeliveryOrderPriceResponse.from_result(result)
