"""HTTP client for the venue API (static location and dynamic pricing data)."""

from __future__ import annotations

import logging
import time
from typing import Protocol
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ...config import settings
from ...models.domain import Coordinate, VenuePricing
from ...schemas.venue import VenueDynamicPayload, VenueStaticPayload
from ..errors import FetchError

logger = logging.getLogger(__name__)


class VenueDataSource(Protocol):
    """Source of per-venue data consumed by the price calculator."""

    def get_static_data(self, venue_slug: str) -> Coordinate:
        ...

    def get_dynamic_data(self, venue_slug: str) -> VenuePricing:
        ...


class VenueApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.venue_api_base_url).rstrip("/")
        if not self.base_url:
            raise ValueError("Venue API base URL is not configured.")
        self.timeout = timeout if timeout is not None else settings.venue_api_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.venue_api_max_retries
        self.backoff_seconds = (
            backoff_seconds if backoff_seconds is not None else settings.venue_api_backoff_seconds
        )
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        """Create a short-lived HTTP client; one per request keeps threads independent."""
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    def get_static_data(self, venue_slug: str) -> Coordinate:
        payload = self._fetch(venue_slug, "static", VenueStaticPayload)
        return payload.to_location()

    def get_dynamic_data(self, venue_slug: str) -> VenuePricing:
        payload = self._fetch(venue_slug, "dynamic", VenueDynamicPayload)
        return payload.to_pricing()

    def _fetch(self, venue_slug: str, endpoint: str, model: type[BaseModel]):
        if venue_slug in (".", ".."):
            raise FetchError(f"Invalid venue slug '{venue_slug}'")
        # The slug must stay a single path segment
        url = f"{self.base_url}/{quote(venue_slug, safe='')}/{endpoint}"
        data = self._get_json(url, endpoint)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise FetchError(f"Malformed {endpoint} payload for venue '{venue_slug}': {exc}") from exc

    def _get_json(self, url: str, endpoint: str) -> object:
        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url)
                    response.raise_for_status()
                    return response.json()
                except httpx.HTTPStatusError as exc:
                    status_code = exc.response.status_code
                    # Client errors (unknown venue etc.) will not change on retry
                    if status_code < 500 or attempt >= self.max_retries:
                        raise FetchError(
                            f"{endpoint} endpoint returned status {status_code}"
                        ) from exc
                except httpx.TimeoutException as exc:
                    if attempt >= self.max_retries:
                        logger.warning(
                            f"Venue API {endpoint} request timed out after {attempt + 1} attempts: {exc}"
                        )
                        raise FetchError(f"{endpoint} endpoint timed out") from exc
                except httpx.HTTPError as exc:
                    if attempt >= self.max_retries:
                        raise FetchError(
                            f"Failed to call {endpoint} endpoint at {self.base_url}: {exc}"
                        ) from exc
                except ValueError as exc:
                    raise FetchError(f"Failed to decode {endpoint} JSON: {exc}") from exc
                attempt += 1
                wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                logger.debug(
                    f"Venue API {endpoint} request failed, retrying in {wait_time:.1f}s "
                    f"(attempt {attempt}/{self.max_retries})"
                )
                time.sleep(wait_time)
        finally:
            client.close()


def check_health(base_url: str | None = None) -> bool:
    """Check that the venue API host answers at all.

    The venue API has no health endpoint; any HTTP response below 500 from the
    base URL counts as reachable.
    """
    base = base_url or settings.venue_api_base_url
    if not base:
        return False
    try:
        response = httpx.get(base, timeout=settings.venue_api_timeout_seconds)
        return response.status_code < 500
    except (httpx.HTTPError, httpx.InvalidURL):
        return False
