"""Strict schema for Trassenfinder infrastructure payloads.

Only the fields the explorer needs are modelled; anything else the API sends
is ignored at this boundary.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class InfrastructureSummary(_ApiModel):
    """One entry of the infrastructure index."""

    id: int
    display_name: str = Field(alias="anzeigename")
    timetable_year: Optional[int] = Field(default=None, alias="fahrplanjahr")
    valid_from: Optional[str] = Field(default=None, alias="gueltig_von")
    valid_to: Optional[str] = Field(default=None, alias="gueltig_bis")

    @property
    def label(self) -> str:
        return f"{self.id}: {self.display_name}"


class StationRecord(_ApiModel):
    """Raw operating point ("Betriebsstelle")."""

    code: str = Field(alias="ds100")
    name: str = Field(alias="langname_stammdaten")
    x: float = Field(allow_inf_nan=False)
    y: float = Field(allow_inf_nan=False)


class SegmentRecord(_ApiModel):
    """Raw track segment ("Streckensegment") referencing stations by code."""

    from_code: str = Field(alias="von")
    to_code: str = Field(alias="bis")
    route_number: int = Field(alias="streckennummer", ge=0)


class FrameworkRecord(_ApiModel):
    """The "Ordnungsrahmen" holding stations and segments."""

    stations: List[StationRecord] = Field(default_factory=list, alias="betriebsstellen")
    segments: List[SegmentRecord] = Field(default_factory=list, alias="streckensegmente")


class InfrastructureDocument(_ApiModel):
    """Full infrastructure payload as returned by ``GET {base_url}/{id}``."""

    id: int
    display_name: str = Field(alias="anzeigename")
    framework: FrameworkRecord = Field(alias="ordnungsrahmen")
