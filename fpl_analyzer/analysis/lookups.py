"""Lookup builders over the bootstrap payload."""

from __future__ import annotations

import pandas as pd

from fpl_analyzer.schemas.player import Player, Team


def build_team_map(bootstrap: dict) -> dict[int, Team]:
    """Return ``{team_id: Team}``."""
    return {t["id"]: Team.from_api(t) for t in bootstrap.get("teams", [])}


def build_player_map(bootstrap: dict, teams: dict[int, Team] | None = None) -> dict[int, Player]:
    """Return ``{player_id: Player}`` with each player's team short code resolved."""
    if teams is None:
        teams = build_team_map(bootstrap)
    return {
        el["id"]: Player.from_element(el, teams)
        for el in bootstrap.get("elements", [])
    }


POOL_COLUMNS = [
    "player_id", "web_name", "team_id", "team", "position",
    "now_cost", "form", "selected_by_percent",
]


def build_player_pool(players: dict[int, Player]) -> pd.DataFrame:
    """Flatten the player map into a DataFrame for candidate searches.

    Rows keep bootstrap order so ties between equally scored candidates
    resolve the same way on every run.
    """
    if not players:
        return pd.DataFrame(columns=POOL_COLUMNS)
    return pd.DataFrame(
        [p.model_dump(include=set(POOL_COLUMNS)) for p in players.values()],
        columns=POOL_COLUMNS,
    )
