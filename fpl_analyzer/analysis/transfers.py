"""Transfer suggestions — swap weak squad members for in-form alternatives."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from fpl_analyzer.analysis.fixtures import average_difficulty, fixture_window, opponents_string
from fpl_analyzer.analysis.scoring import candidate_score, projected_points_delta
from fpl_analyzer.config import projection_cfg, transfer_cfg
from fpl_analyzer.logging_config import get_logger
from fpl_analyzer.schemas.analysis import (
    SquadSlot,
    TransferReasoning,
    TransferSide,
    TransferSuggestion,
)
from fpl_analyzer.schemas.player import ProjectedFixture
from fpl_analyzer.utils.nan_handling import fmt1

logger = get_logger(__name__)


def is_weak(slot: SquadSlot) -> bool:
    """Poor form or a hard run of fixtures."""
    return (
        slot.form_value < transfer_cfg.weak_form
        or slot.avg_difficulty_value > transfer_cfg.hard_fixtures
    )


def select_outgoing(squad: Sequence[SquadSlot]) -> list[SquadSlot]:
    """Weak players, worst form first, capped at ``max_outgoing``."""
    weak = sorted((s for s in squad if is_weak(s)), key=lambda s: s.form_value)
    return weak[:transfer_cfg.max_outgoing]


def score_pool(
    pool: pd.DataFrame,
    projections: dict[int, list[ProjectedFixture]],
) -> pd.DataFrame:
    """Add ``avg_difficulty`` and ``score`` columns over each team's next-5 window."""
    team_avg = {
        tid: average_difficulty(fixture_window(projections, tid, projection_cfg.squad_window))
        for tid in projections
    }
    scored = pool.copy()
    scored["avg_difficulty"] = (
        scored["team_id"].map(team_avg).fillna(projection_cfg.neutral_difficulty).astype(float)
    )
    scored["score"] = candidate_score(scored["form"].astype(float), scored["avg_difficulty"])
    return scored


def find_replacement(
    slot: SquadSlot,
    scored_pool: pd.DataFrame,
    excluded_ids: set[int],
    bank: int,
) -> pd.Series | None:
    """Best affordable same-position player in better form, or ``None``.

    *bank* is in 0.1m units, matching ``now_cost``.
    """
    mask = (
        (scored_pool["position"] == slot.position)
        & (scored_pool["now_cost"] <= slot.now_cost + bank)
        & (scored_pool["form"] > slot.form_value)
        & ~scored_pool["player_id"].isin(excluded_ids)
    )
    candidates = scored_pool[mask]
    if candidates.empty:
        return None
    # Stable sort keeps bootstrap order between equal scores.
    return candidates.sort_values("score", ascending=False, kind="mergesort").iloc[0]


def _build_suggestion(
    slot: SquadSlot,
    row: pd.Series,
    projections: dict[int, list[ProjectedFixture]],
) -> TransferSuggestion:
    team_id = None if pd.isna(row["team_id"]) else int(row["team_id"])
    in_fixtures = opponents_string(
        fixture_window(projections, team_id, projection_cfg.squad_window)
    )
    in_form = float(row["form"])
    in_cost = int(row["now_cost"])
    return TransferSuggestion(
        player_out=TransferSide(
            name=slot.name,
            team=slot.team,
            form=slot.form,
            price=slot.price,
            fixtures=slot.fixtures,
        ),
        player_in=TransferSide(
            name=row["web_name"],
            team=row["team"],
            form=fmt1(in_form),
            price=in_cost / 10,
            fixtures=in_fixtures,
        ),
        cost=fmt1((in_cost - slot.now_cost) / 10),
        projected_points=fmt1(projected_points_delta(in_form, slot.form_value)),
        reasoning=TransferReasoning(
            out=f"Form {slot.form}, Difficult fixtures ({slot.fixtures}), Rating: {slot.rating}",
            in_=(
                f"Strong form {fmt1(in_form)}, Favorable fixtures ({in_fixtures}), "
                f"{row['selected_by_percent']}% owned"
            ),
        ),
        player_in_id=int(row["player_id"]),
    )


def suggest_transfers(
    squad: Sequence[SquadSlot],
    pool: pd.DataFrame,
    projections: dict[int, list[ProjectedFixture]],
    bank: int,
) -> list[TransferSuggestion]:
    """Pair up to ``max_outgoing`` weak players with replacements.

    Parameters
    ----------
    squad:
        Analyzed squad from :func:`~fpl_analyzer.analysis.squad.analyze_squad`.
    pool:
        Whole player catalog from
        :func:`~fpl_analyzer.analysis.lookups.build_player_pool`.
    projections:
        Per-team projected fixtures.
    bank:
        Money in the bank, 0.1m units.

    Returns
    -------
    list[TransferSuggestion]
        At most ``max_suggestions`` pairs, in outgoing order (worst form
        first).  An incoming player is proposed at most once.
    """
    outgoing = select_outgoing(squad)
    if not outgoing or pool.empty:
        return []

    scored = score_pool(pool, projections)
    excluded = {s.id for s in squad}
    suggestions: list[TransferSuggestion] = []

    for slot in outgoing:
        row = find_replacement(slot, scored, excluded, bank)
        if row is None:
            logger.debug("No replacement found for %s", slot.name)
            continue
        suggestion = _build_suggestion(slot, row, projections)
        suggestions.append(suggestion)
        if transfer_cfg.dedupe_incoming:
            excluded.add(suggestion.player_in_id)

    return suggestions[:transfer_cfg.max_suggestions]
