"""Async client for the Trassenfinder infrastructure API."""

from typing import Any, List, Optional

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..domain import StationGraph, build_station_graph
from .schemas import InfrastructureDocument, InfrastructureSummary

logger = structlog.get_logger(__name__)

_SUMMARY_LIST = TypeAdapter(List[InfrastructureSummary])


class ApiClientError(Exception):
    """Base exception for infrastructure API failures."""


class ApiTransportError(ApiClientError):
    """The request could not be completed or returned an error status."""


class ApiFormatError(ApiClientError):
    """The response body is not a valid infrastructure payload."""


class InfrastructureClient:
    """Fetches infrastructure indexes and documents over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api.timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _get_json(self, url: str) -> Any:
        try:
            async with self._client() as client:
                resp = await client.get(url)
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise ApiTransportError(f"Request to {url} failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise ApiFormatError(f"Response from {url} is not valid JSON: {e}") from e

    async def list_infrastructures(self) -> List[InfrastructureSummary]:
        """List available infrastructures ordered by id."""
        data = await self._get_json(self.base_url)
        try:
            summaries = _SUMMARY_LIST.validate_python(data)
        except ValidationError as e:
            raise ApiFormatError(f"Invalid infrastructure index: {e}") from e

        logger.info("Loaded infrastructure index", count=len(summaries))
        return sorted(summaries, key=lambda summary: summary.id)

    async def fetch_infrastructure(self, infrastructure_id: int) -> InfrastructureDocument:
        """Fetch the full document of one infrastructure."""
        data = await self._get_json(f"{self.base_url}/{infrastructure_id}")
        try:
            document = InfrastructureDocument.model_validate(data)
        except ValidationError as e:
            raise ApiFormatError(
                f"Invalid infrastructure document {infrastructure_id}: {e}"
            ) from e

        logger.info(
            "Loaded infrastructure document",
            infrastructure_id=document.id,
            stations=len(document.framework.stations),
            segments=len(document.framework.segments),
        )
        return document

    async def load_station_graph(self, infrastructure_id: int) -> StationGraph:
        """Fetch an infrastructure and build its validated station graph."""
        document = await self.fetch_infrastructure(infrastructure_id)
        return build_station_graph(document)
