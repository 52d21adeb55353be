"""Scoring heuristics.

Each formula is a named pure function so the coefficients (kept in
:mod:`fpl_analyzer.config`) can be tuned without touching the pipeline.
"""

from __future__ import annotations

from fpl_analyzer.config import captain_cfg, rating_cfg, transfer_cfg
from fpl_analyzer.utils.nan_handling import round_half_up


def rating_score(form: float, avg_difficulty: float) -> float:
    """Form-based rating adjusted by fixture difficulty: ``2*form + 2*(5 - avg)``."""
    return (
        rating_cfg.form_weight * form
        + rating_cfg.fixture_weight * (rating_cfg.fixture_pivot - avg_difficulty)
    )


def classify_rating(score: float) -> str:
    """Map a rating score onto Excellent / Good / Average / Poor (lower bounds inclusive)."""
    for threshold, label in rating_cfg.thresholds:
        if score >= threshold:
            return label
    return rating_cfg.floor_label


def rate_player(form: float, avg_difficulty: float) -> str:
    return classify_rating(rating_score(form, avg_difficulty))


def candidate_score(form: float, avg_difficulty: float) -> float:
    """Rank replacements: ``2*form - avg_difficulty``."""
    return transfer_cfg.candidate_form_weight * form - avg_difficulty


def projected_points_delta(form_in: float, form_out: float) -> float:
    """Form gap projected over the points horizon: ``(in - out) * 5``."""
    return (form_in - form_out) * transfer_cfg.points_horizon


def captain_score(form: float, next_difficulty: int | None, is_home: bool) -> float:
    """``10*form + 5*(6 - difficulty) + 5*is_home``; no fixture scores form only."""
    score = captain_cfg.form_weight * form
    if next_difficulty is not None:
        score += captain_cfg.fixture_weight * (captain_cfg.fixture_pivot - next_difficulty)
        if is_home:
            score += captain_cfg.home_bonus
    return score


def captain_confidence(score: float) -> int:
    """``round(score * 1.2)`` clamped to [0, 95]."""
    raw = int(round_half_up(score * captain_cfg.confidence_multiplier))
    return max(0, min(captain_cfg.max_confidence, raw))
