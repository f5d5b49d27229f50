"""Delivery fee and small-order surcharge rules."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import CutoffRange, DistanceRange
from ..errors import DeliveryImpossible


def _variable_fee(b: int, distance: int) -> int:
    """``round(b * distance / 10)`` in integer arithmetic, ties away from zero."""

    product = b * distance
    quotient, remainder = divmod(abs(product), 10)
    if remainder >= 5:
        quotient += 1
    return quotient if product >= 0 else -quotient


def resolve_delivery_fee(distance: int, base_price: int, ranges: Sequence[DistanceRange]) -> int:
    """Return the delivery fee for ``distance`` using the first matching range.

    Ranges are scanned in the configured order. A cutoff range stops the scan
    with ``DeliveryImpossible`` once the distance reaches its minimum; a priced
    range matches on ``min <= distance < max``. Running out of ranges is also
    reported as ``DeliveryImpossible``, never as a zero fee.
    """

    for distance_range in ranges:
        if isinstance(distance_range, CutoffRange):
            if distance >= distance_range.min:
                raise DeliveryImpossible(
                    distance, f"beyond delivery radius of {distance_range.min} m"
                )
            continue
        if distance_range.contains(distance):
            return base_price + distance_range.a + _variable_fee(distance_range.b, distance)

    raise DeliveryImpossible(distance, "no matching distance range")


def small_order_surcharge(cart_value: int, order_minimum_no_surcharge: int) -> int:
    return max(0, order_minimum_no_surcharge - cart_value)
