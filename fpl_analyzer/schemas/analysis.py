"""Pydantic schemas for the analysis response.

Attributes are snake_case; JSON keys are camelCase to match the browser
client (``teamName``, ``isCaptain``, ``projectedPoints``...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fpl_analyzer.schemas.player import ProjectedFixture


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class SquadSlot(_CamelModel):
    """One analyzed squad member: display fields plus raw scoring inputs."""

    id: int
    name: str
    team: str
    position: str
    price: float
    form: str
    selected_by: str
    fixtures: str
    avg_difficulty: str
    rating: str
    rating_class: str
    total_points: int
    points_per_game: str
    is_captain: bool = False
    is_vice_captain: bool = False

    # Raw values for the recommendation engines; not serialized.
    form_value: float = Field(default=0.0, exclude=True)
    avg_difficulty_value: float = Field(default=3.0, exclude=True)
    now_cost: int = Field(default=0, exclude=True)
    team_id: int | None = Field(default=None, exclude=True)
    upcoming: list[ProjectedFixture] = Field(default_factory=list, exclude=True)


class TransferSide(_CamelModel):
    name: str
    team: str
    form: str
    price: float
    fixtures: str


class TransferReasoning(_CamelModel):
    out: str
    in_: str = Field(alias="in")


class TransferSuggestion(_CamelModel):
    """A sell/buy pair with its cost and projected point gain."""

    player_out: TransferSide
    player_in: TransferSide
    cost: str  # negative means money back
    projected_points: str
    reasoning: TransferReasoning

    # Raw identity of the incoming player, used for de-duplication.
    player_in_id: int = Field(default=0, exclude=True)


class CaptainPick(_CamelModel):
    name: str
    confidence: int
    reasoning: str


class Insight(_CamelModel):
    icon: str
    title: str
    message: str


class TeamAnalysis(_CamelModel):
    """Full response for one manager."""

    team_name: str
    team_value: str
    bank: str
    overall_rank: int | None = None
    gameweek_rank: int | None = None
    total_points: int | None = None
    current_gw: int = Field(alias="currentGW")
    squad: list[SquadSlot] = Field(default_factory=list)
    transfers: list[TransferSuggestion] = Field(default_factory=list)
    captains: list[CaptainPick] = Field(default_factory=list)
    insights: list[Insight] = Field(default_factory=list)
