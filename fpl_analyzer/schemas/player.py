"""Pydantic schemas for the FPL catalog: players, teams, fixtures, picks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fpl_analyzer.config import POSITION_LABELS, UNKNOWN
from fpl_analyzer.utils.nan_handling import safe_float


class Team(BaseModel):
    """A club, used as a join key for fixtures and for display."""

    model_config = ConfigDict(frozen=True)

    team_id: int
    short_name: str = UNKNOWN
    name: str = ""

    @classmethod
    def from_api(cls, raw: dict) -> "Team":
        return cls(
            team_id=raw["id"],
            short_name=raw.get("short_name") or UNKNOWN,
            name=raw.get("name", ""),
        )


class Player(BaseModel):
    """Snapshot of one bootstrap ``elements`` entry."""

    model_config = ConfigDict(frozen=True)

    player_id: int
    web_name: str
    team_id: int | None = None
    team: str = UNKNOWN  # short code of team_id
    position: str = UNKNOWN  # GK, DEF, MID, FWD
    now_cost: int = 0  # Price in 0.1m units (e.g. 100 = 10.0m)
    form: float = 0.0
    selected_by_percent: str = "0.0"
    total_points: int = 0
    points_per_game: str = "0.0"

    @property
    def price(self) -> float:
        return self.now_cost / 10

    @classmethod
    def from_element(cls, el: dict, teams: dict[int, Team]) -> "Player":
        team = teams.get(el.get("team"))
        return cls(
            player_id=el["id"],
            web_name=el.get("web_name", "Unknown"),
            team_id=el.get("team"),
            team=team.short_name if team else UNKNOWN,
            position=POSITION_LABELS.get(el.get("element_type"), UNKNOWN),
            now_cost=int(el.get("now_cost") or 0),
            form=safe_float(el.get("form")),
            selected_by_percent=str(el.get("selected_by_percent", "0.0")),
            total_points=int(el.get("total_points") or 0),
            points_per_game=str(el.get("points_per_game", "0.0")),
        )


class Fixture(BaseModel):
    """A scheduled (or unscheduled, ``event=None``) match between two teams."""

    model_config = ConfigDict(frozen=True)

    event: int | None = None
    team_h: int
    team_a: int
    team_h_difficulty: int = 3
    team_a_difficulty: int = 3


class Pick(BaseModel):
    """One of the manager's 15 squad slots for a gameweek."""

    model_config = ConfigDict(frozen=True)

    element: int
    is_captain: bool = False
    is_vice_captain: bool = False


class ProjectedFixture(BaseModel):
    """An upcoming fixture seen from one team's side."""

    model_config = ConfigDict(frozen=True)

    gameweek: int
    opponent: str  # "@" prefix marks an away fixture
    difficulty: int
    is_home: bool
    difficulty_label: str = UNKNOWN
