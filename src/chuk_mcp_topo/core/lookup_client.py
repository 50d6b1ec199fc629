"""
Elevation lookup client.

Sends one batched POST per sampling operation to an Open-Elevation compatible
endpoint and translates between the internal ``lat``/``lng`` points and the
API's ``latitude``/``longitude`` fields. Every failure is raised as a
categorised :class:`~.errors.ProfileError`; nothing is retried.
"""

import logging
from collections.abc import Sequence

import httpx
from pydantic import BaseModel, ValidationError

from ..constants import ErrorMessages, get_api_timeout, get_api_url
from .errors import LookupFailedError, LookupUnavailableError
from .geodesy import LocationPoint
from .reducer import ElevationSample

logger = logging.getLogger(__name__)


class LookupLocation(BaseModel):
    """A location in the lookup request body."""

    latitude: float
    longitude: float


class LookupResult(BaseModel):
    """Elevation for a single queried location."""

    latitude: float
    longitude: float
    elevation: float


class LookupResponse(BaseModel):
    """Response body of the lookup endpoint."""

    results: list[LookupResult]


class ElevationLookupClient:
    """Async client for the remote elevation lookup."""

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url or get_api_url()
        self.timeout = timeout if timeout is not None else get_api_timeout()
        self._transport = transport

    async def lookup(self, points: Sequence[LocationPoint]) -> list[ElevationSample]:
        """Fetch elevations for ``points`` in one request.

        Returns:
            One sample per point in query order, or an empty list when the
            service returned no results.

        Raises:
            LookupUnavailableError: The service could not be reached
            LookupFailedError: Error status, unreadable or malformed body, or a
                result count that does not match the query
        """
        if not points:
            return []

        locations = [LookupLocation(latitude=p.lat, longitude=p.lng).model_dump() for p in points]
        logger.info(f"Requesting elevation for {len(locations)} locations from {self.api_url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    json={"locations": locations},
                    headers={"Accept": "application/json"},
                )
        except httpx.TransportError as e:
            logger.warning(f"Elevation service unreachable: {e!r}")
            raise LookupUnavailableError(
                ErrorMessages.LOOKUP_UNAVAILABLE.format(type(e).__name__)
            ) from e
        except httpx.HTTPError as e:
            # Reached the service but could not read its reply (e.g. bad content encoding)
            logger.warning(f"Elevation request failed: {e!r}")
            raise LookupFailedError(ErrorMessages.LOOKUP_HTTP.format(type(e).__name__)) from e

        if not response.is_success:
            raise LookupFailedError(self._error_message(response))

        try:
            body = LookupResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise LookupFailedError(
                ErrorMessages.LOOKUP_MALFORMED.format(f"{e.error_count()} validation error(s)")
            ) from e

        if not body.results:
            logger.info("Elevation service returned no results")
            return []

        if len(body.results) != len(points):
            raise LookupFailedError(
                ErrorMessages.LOOKUP_COUNT_MISMATCH.format(len(body.results), len(points))
            )

        try:
            return [
                ElevationSample(
                    location=LocationPoint(r.latitude, r.longitude),
                    elevation=r.elevation,
                )
                for r in body.results
            ]
        except ValueError as e:
            raise LookupFailedError(ErrorMessages.LOOKUP_MALFORMED.format(e)) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the body's ``error`` field, else a status-code message."""
        try:
            detail = response.json().get("error")
        except (ValueError, AttributeError):
            detail = None
        if detail:
            return ErrorMessages.LOOKUP_DETAIL.format(detail)
        return ErrorMessages.LOOKUP_STATUS.format(response.status_code)
