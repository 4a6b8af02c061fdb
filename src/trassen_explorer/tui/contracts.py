"""Typed service contracts for TUI dependency injection."""

from __future__ import annotations

from typing import List, Protocol

from ..domain import StationGraph
from ..services.schemas import InfrastructureSummary


class InfrastructureSource(Protocol):
    """Loader dependency required by the navigator's load requests."""

    async def list_infrastructures(self) -> List[InfrastructureSummary]: ...

    async def load_station_graph(self, infrastructure_id: int) -> StationGraph: ...
