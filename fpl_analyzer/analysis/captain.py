"""Captaincy ranking on form and the immediate next fixture."""

from __future__ import annotations

from collections.abc import Sequence

from fpl_analyzer.analysis.scoring import captain_confidence, captain_score
from fpl_analyzer.config import captain_cfg, projection_cfg
from fpl_analyzer.schemas.analysis import CaptainPick, SquadSlot


def rank_captains(squad: Sequence[SquadSlot]) -> list[CaptainPick]:
    """Return the top ``captain_cfg.top_n`` captain picks.

    Each player is scored with :func:`captain_score` using only their
    team's next fixture.  Ties keep squad order.  The top pick's reasoning
    also quotes ownership.
    """
    scored = []
    for slot in squad:
        window = slot.upcoming[:projection_cfg.captain_window]
        nxt = window[0] if window else None
        score = captain_score(
            slot.form_value,
            nxt.difficulty if nxt else None,
            nxt.is_home if nxt else False,
        )
        scored.append((score, slot, nxt.opponent if nxt else "N/A"))

    scored.sort(key=lambda t: t[0], reverse=True)

    picks = []
    for idx, (score, slot, opponent) in enumerate(scored[:captain_cfg.top_n]):
        if idx == 0:
            reasoning = (
                f"Top form ({slot.form}), favorable fixture vs {opponent}, "
                f"{slot.selected_by}% owned"
            )
        else:
            reasoning = f"Good form ({slot.form}), decent fixture vs {opponent}"
        picks.append(CaptainPick(
            name=f"{slot.name} ({slot.team})",
            confidence=captain_confidence(score),
            reasoning=reasoning,
        ))
    return picks
