"""Fixture projection: each team's upcoming fixtures within the lookahead."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fpl_analyzer.config import DIFFICULTY_LABELS, UNKNOWN, projection_cfg
from fpl_analyzer.schemas.player import Fixture, ProjectedFixture, Team


def parse_fixtures(raw_fixtures: Iterable[dict]) -> list[Fixture]:
    """Validate the fixtures payload into :class:`Fixture` models."""
    return [Fixture.model_validate(f) for f in raw_fixtures]


def project_fixtures(
    fixtures: Iterable[Fixture],
    current_gw: int,
    teams: dict[int, Team],
    horizon: int | None = None,
) -> dict[int, list[ProjectedFixture]]:
    """Build ``{team_id: [ProjectedFixture, ...]}`` for every team.

    Parameters
    ----------
    fixtures:
        Whole-season fixture list.  Fixtures without a gameweek are skipped.
    current_gw:
        First gameweek of the window.
    teams:
        Team lookup; every team gets an entry, possibly empty.
    horizon:
        Window covers ``[current_gw, current_gw + horizon]`` and each team
        keeps at most ``horizon`` fixtures.  Defaults to
        :pyattr:`ProjectionConfig.fetch_horizon`.
    """
    if horizon is None:
        horizon = projection_cfg.fetch_horizon

    last_gw = current_gw + horizon
    upcoming = sorted(
        (f for f in fixtures if f.event is not None and current_gw <= f.event <= last_gw),
        key=lambda f: f.event,
    )

    projections: dict[int, list[ProjectedFixture]] = {tid: [] for tid in teams}
    for f in upcoming:
        for tid, opp_id, is_home, fdr in (
            (f.team_h, f.team_a, True, f.team_h_difficulty),
            (f.team_a, f.team_h, False, f.team_a_difficulty),
        ):
            if tid not in projections or len(projections[tid]) >= horizon:
                continue
            opp = teams.get(opp_id)
            opp_name = opp.short_name if opp else UNKNOWN
            projections[tid].append(ProjectedFixture(
                gameweek=f.event,
                opponent=opp_name if is_home else f"@{opp_name}",
                difficulty=fdr,
                is_home=is_home,
                difficulty_label=DIFFICULTY_LABELS.get(fdr, UNKNOWN),
            ))

    return projections


def fixture_window(
    projections: dict[int, list[ProjectedFixture]],
    team_id: int | None,
    size: int,
) -> list[ProjectedFixture]:
    """First *size* projected fixtures for *team_id*, empty when unknown."""
    return projections.get(team_id, [])[:size]


def average_difficulty(window: Sequence[ProjectedFixture]) -> float:
    """Mean difficulty of *window*; the neutral value when it is empty."""
    if not window:
        return projection_cfg.neutral_difficulty
    return sum(f.difficulty for f in window) / len(window)


def opponents_string(window: Sequence[ProjectedFixture]) -> str:
    """``"ARS, @LIV, ..."`` display string."""
    return ", ".join(f.opponent for f in window)
