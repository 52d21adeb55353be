"""Team analysis pipeline — fetch, join, score, assemble.

:func:`build_analysis` is pure over a fetched :class:`TeamSnapshot`;
:func:`analyze_team` adds the two-phase fetch in front of it.
"""

from __future__ import annotations

from fpl_analyzer.analysis.captain import rank_captains
from fpl_analyzer.analysis.fixtures import parse_fixtures, project_fixtures
from fpl_analyzer.analysis.insights import generate_insights
from fpl_analyzer.analysis.lookups import build_player_map, build_player_pool, build_team_map
from fpl_analyzer.analysis.squad import analyze_squad, parse_picks
from fpl_analyzer.analysis.transfers import suggest_transfers
from fpl_analyzer.data.fpl_api import TeamSnapshot, fetch_team_snapshot
from fpl_analyzer.logging_config import get_logger
from fpl_analyzer.schemas.analysis import TeamAnalysis
from fpl_analyzer.utils.nan_handling import fmt1

logger = get_logger(__name__)


def build_analysis(snapshot: TeamSnapshot) -> TeamAnalysis:
    """Join the four payloads of *snapshot* into ranked recommendations."""
    entry = snapshot.entry
    teams = build_team_map(snapshot.bootstrap)
    players = build_player_map(snapshot.bootstrap, teams)
    projections = project_fixtures(
        parse_fixtures(snapshot.fixtures), snapshot.current_gw, teams,
    )

    squad = analyze_squad(parse_picks(snapshot.picks), players, projections)

    bank = int(entry.get("last_deadline_bank") or 0)
    team_value = (entry.get("last_deadline_value") or 0) / 10

    transfers = suggest_transfers(squad, build_player_pool(players), projections, bank)
    captains = rank_captains(squad)
    insights = generate_insights(squad, transfers, team_value)

    logger.info(
        "Team %s GW%d: %d players, %d transfers, %d insights",
        snapshot.team_id, snapshot.current_gw, len(squad), len(transfers), len(insights),
    )

    return TeamAnalysis(
        team_name=f"{entry.get('player_first_name', '')} {entry.get('player_last_name', '')}".strip(),
        team_value=fmt1(team_value),
        bank=fmt1(bank / 10),
        overall_rank=entry.get("summary_overall_rank"),
        gameweek_rank=entry.get("summary_event_rank"),
        total_points=entry.get("summary_overall_points"),
        current_gw=snapshot.current_gw,
        squad=squad,
        transfers=transfers,
        captains=captains,
        insights=insights,
    )


def analyze_team(team_id: int | str) -> TeamAnalysis:
    """Fetch a fresh snapshot for *team_id* and analyze it."""
    logger.info("Analyzing team: %s", team_id)
    return build_analysis(fetch_team_snapshot(team_id))
