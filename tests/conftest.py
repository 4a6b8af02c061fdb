"""
Pytest configuration and fixtures for Trassen Explorer tests.
"""

from typing import Any, Dict, List, Optional

import pytest

from trassen_explorer.config import settings
from trassen_explorer.domain import StationGraph, build_station_graph
from trassen_explorer.services.schemas import InfrastructureDocument, InfrastructureSummary


def _make_payload(
    stations: List[tuple],
    segments: List[tuple],
    *,
    infrastructure_id: int = 7,
    name: str = "Netz 2024",
) -> Dict[str, Any]:
    return {
        "id": infrastructure_id,
        "anzeigename": name,
        "ordnungsrahmen": {
            "betriebsstellen": [
                {"ds100": code, "langname_stammdaten": longname, "x": x, "y": y}
                for code, longname, x, y in stations
            ],
            "streckensegmente": [
                {"von": from_code, "bis": to_code, "streckennummer": route}
                for from_code, to_code, route in segments
            ],
        },
    }


class FakeInfrastructureSource:
    """In-memory infrastructure source recording every call."""

    def __init__(
        self,
        summaries: List[InfrastructureSummary],
        graphs: Optional[Dict[int, StationGraph]] = None,
        error: Optional[Exception] = None,
    ):
        self.summaries = summaries
        self.graphs = graphs or {}
        self.error = error
        self.calls: List[tuple] = []

    async def list_infrastructures(self) -> List[InfrastructureSummary]:
        self.calls.append(("list",))
        if self.error is not None:
            raise self.error
        return list(self.summaries)

    async def load_station_graph(self, infrastructure_id: int) -> StationGraph:
        self.calls.append(("load", infrastructure_id))
        if self.error is not None:
            raise self.error
        return self.graphs[infrastructure_id]


@pytest.fixture
def make_payload():
    """Factory for raw API payloads from (code, name, x, y) and (from, to, route) tuples."""
    return _make_payload


@pytest.fixture
def alpha_beta_payload():
    """Two stations joined by route 42."""
    return _make_payload(
        stations=[("A", "Alpha", 0.0, 0.0), ("B", "Beta", 1.0, 1.0)],
        segments=[("A", "B", 42)],
    )


@pytest.fixture
def alpha_beta_document(alpha_beta_payload):
    return InfrastructureDocument.model_validate(alpha_beta_payload)


@pytest.fixture
def sample_graph():
    """Small graph with three stations and two segments."""
    payload = _make_payload(
        stations=[
            ("FF", "Frankfurt (Main) Hbf", 8.66, 50.10),
            ("FD", "Fulda", 9.68, 50.55),
            ("NN", "Nuernberg Hbf", 11.08, 49.45),
        ],
        segments=[("FF", "FD", 3600), ("FD", "NN", 5900)],
    )
    return build_station_graph(InfrastructureDocument.model_validate(payload))


@pytest.fixture
def sample_summaries():
    return [
        InfrastructureSummary(id=1, display_name="Netz 2023"),
        InfrastructureSummary(id=2, display_name="Netz 2024"),
        InfrastructureSummary(id=3, display_name="Netz 2025"),
    ]


@pytest.fixture
def source_factory():
    return FakeInfrastructureSource


@pytest.fixture
def fake_source(sample_summaries, sample_graph):
    return FakeInfrastructureSource(
        summaries=sample_summaries,
        graphs={summary.id: sample_graph for summary in sample_summaries},
    )


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Keep the event log out of the user's log directory."""
    monkeypatch.setattr(settings, "environment", "test")
    monkeypatch.setattr(settings.logging, "level", "DEBUG")
    monkeypatch.setattr(settings.logging, "file_path", str(tmp_path / "events.log"))
