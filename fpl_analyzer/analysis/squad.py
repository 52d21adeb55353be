"""Squad analysis — join picks with player and fixture data."""

from __future__ import annotations

from collections.abc import Iterable

from fpl_analyzer.analysis.fixtures import average_difficulty, fixture_window, opponents_string
from fpl_analyzer.analysis.scoring import rate_player
from fpl_analyzer.config import projection_cfg
from fpl_analyzer.schemas.analysis import SquadSlot
from fpl_analyzer.schemas.player import Pick, Player, ProjectedFixture
from fpl_analyzer.utils.nan_handling import fmt1


def parse_picks(picks_payload: dict) -> list[Pick]:
    return [Pick.model_validate(p) for p in picks_payload.get("picks", [])]


def analyze_slot(
    pick: Pick,
    player: Player,
    projections: dict[int, list[ProjectedFixture]],
) -> SquadSlot:
    """Rate one squad member on form and the next five fixtures."""
    window = fixture_window(projections, player.team_id, projection_cfg.squad_window)
    avg = average_difficulty(window)
    rating = rate_player(player.form, avg)
    return SquadSlot(
        id=player.player_id,
        name=player.web_name,
        team=player.team,
        position=player.position,
        price=player.price,
        form=fmt1(player.form),
        selected_by=player.selected_by_percent,
        fixtures=opponents_string(window),
        avg_difficulty=fmt1(avg),
        rating=rating,
        rating_class=rating.lower(),
        total_points=player.total_points,
        points_per_game=player.points_per_game,
        is_captain=pick.is_captain,
        is_vice_captain=pick.is_vice_captain,
        form_value=player.form,
        avg_difficulty_value=avg,
        now_cost=player.now_cost,
        team_id=player.team_id,
        upcoming=projections.get(player.team_id, []),
    )


def analyze_squad(
    picks: Iterable[Pick],
    players: dict[int, Player],
    projections: dict[int, list[ProjectedFixture]],
) -> list[SquadSlot]:
    """Analyze every pick in squad order.

    Raises
    ------
    KeyError
        A pick references a player missing from the catalog.
    """
    squad = []
    for pick in picks:
        player = players.get(pick.element)
        if player is None:
            raise KeyError(f"Player {pick.element} not found in bootstrap data")
        squad.append(analyze_slot(pick, player, projections))
    return squad
