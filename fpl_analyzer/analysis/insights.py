"""Squad insights — a fixed battery of threshold checks."""

from __future__ import annotations

from collections.abc import Sequence

from fpl_analyzer.config import insight_cfg
from fpl_analyzer.schemas.analysis import Insight, SquadSlot, TransferSuggestion


def _fixture_insight(squad: Sequence[SquadSlot]) -> Insight | None:
    easy = sum(1 for p in squad if p.avg_difficulty_value < insight_cfg.easy_difficulty)
    hard = sum(1 for p in squad if p.avg_difficulty_value > insight_cfg.hard_difficulty)
    if easy >= insight_cfg.fixture_run_players:
        return Insight(
            icon="✅",
            title="Strong Fixture Run",
            message=(
                f"{easy} of your players have favorable fixtures in the next 5 gameweeks. "
                "Good time to hold your team."
            ),
        )
    if hard >= insight_cfg.fixture_run_players:
        return Insight(
            icon="⚠️",
            title="Difficult Fixtures Ahead",
            message=(
                f"{hard} players face tough fixtures. Consider using your free transfer "
                "strategically or save it for a double gameweek."
            ),
        )
    return None


def _form_insight(squad: Sequence[SquadSlot]) -> Insight | None:
    poor = sum(1 for p in squad if p.form_value < insight_cfg.poor_form)
    if poor < insight_cfg.poor_form_players:
        return None
    return Insight(
        icon="📉",
        title="Form Concerns",
        message=(
            f"{poor} players are struggling for form. Monitor team news and consider "
            "transfers if this continues."
        ),
    )


def _value_insight(team_value: float) -> Insight | None:
    if team_value < insight_cfg.strong_team_value:
        return None
    return Insight(
        icon="💰",
        title="Strong Team Value",
        message=(
            f"Your team is valued at £{team_value:.1f}m. You've built good value "
            "through smart transfers and price rises."
        ),
    )


def _transfer_insight(transfers: Sequence[TransferSuggestion]) -> Insight:
    if transfers:
        return Insight(
            icon="🔄",
            title="Transfer Opportunities",
            message=(
                f"We've identified {len(transfers)} potential upgrade(s) that could "
                "improve your team over the next 5 gameweeks."
            ),
        )
    return Insight(
        icon="✨",
        title="Team Looking Solid",
        message=(
            "No urgent transfers needed. Consider banking your free transfer or "
            "monitoring for upcoming double gameweeks."
        ),
    )


def generate_insights(
    squad: Sequence[SquadSlot],
    transfers: Sequence[TransferSuggestion],
    team_value: float,
) -> list[Insight]:
    """Run every check in order; the transfer verdict is always last.

    *team_value* is in millions (``last_deadline_value / 10``).
    """
    insights = [
        _fixture_insight(squad),
        _form_insight(squad),
        _value_insight(team_value),
        _transfer_insight(transfers),
    ]
    return [i for i in insights if i is not None]
