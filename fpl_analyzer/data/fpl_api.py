"""FPL API client — fetch the four payloads one team analysis needs.

Nothing is cached: every analysis reads a fresh snapshot.  The fetch plan is
two-phase because the picks endpoint needs the current gameweek, which only
the bootstrap payload knows.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import requests

from fpl_analyzer.config import data_cfg
from fpl_analyzer.errors import UpstreamError
from fpl_analyzer.logging_config import get_logger

logger = get_logger(__name__)


# ── Low-level HTTP ──────────────────────────────────────────────────────

def _fetch_json(url: str, timeout: float | None = None):
    """GET *url* and decode JSON, raising :class:`UpstreamError` on any failure."""
    logger.info("Fetching %s", url)
    try:
        resp = requests.get(url, timeout=timeout or data_cfg.request_timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.RequestException as exc:
        raise UpstreamError(f"Request to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise UpstreamError(f"Invalid JSON from {url}: {exc}") from exc


def _url(path: str) -> str:
    return f"{data_cfg.fpl_api_base}/{path}"


# ── Endpoints ───────────────────────────────────────────────────────────

def fetch_bootstrap() -> dict:
    """Fetch the global player/team/event catalog."""
    return _fetch_json(_url("bootstrap-static/"))


def fetch_fixtures() -> list[dict]:
    """Fetch every fixture of the season."""
    return _fetch_json(_url("fixtures/"))


def fetch_manager_entry(team_id: int | str) -> dict:
    """Fetch manager overview (name, bank, value, ranks)."""
    return _fetch_json(_url(f"entry/{team_id}/"))


def fetch_manager_picks(team_id: int | str, event: int) -> dict:
    """Fetch manager's 15 picks for gameweek *event*."""
    return _fetch_json(_url(f"entry/{team_id}/event/{event}/picks/"))


# ── Fetch plan ──────────────────────────────────────────────────────────

def get_current_gw(bootstrap: dict) -> int:
    """Return the id of the event flagged ``is_current``, or 1 before the season starts."""
    for ev in bootstrap.get("events", []):
        if ev.get("is_current"):
            return ev["id"]
    return 1


@dataclass(frozen=True)
class TeamSnapshot:
    """Raw upstream payloads for one analysis request."""

    team_id: str
    bootstrap: dict
    entry: dict
    fixtures: list[dict]
    current_gw: int
    picks: dict


def fetch_team_snapshot(team_id: int | str) -> TeamSnapshot:
    """Run the two-phase fetch plan for *team_id*.

    Phase 1 fetches bootstrap, manager entry and fixtures concurrently and
    waits for all three.  Phase 2 fetches the picks for the current
    gameweek found in bootstrap.  The first failure aborts the plan.
    """
    with ThreadPoolExecutor(max_workers=data_cfg.phase_one_workers) as pool:
        bootstrap_f = pool.submit(fetch_bootstrap)
        entry_f = pool.submit(fetch_manager_entry, team_id)
        fixtures_f = pool.submit(fetch_fixtures)
        bootstrap = bootstrap_f.result()
        entry = entry_f.result()
        fixtures = fixtures_f.result()

    current_gw = get_current_gw(bootstrap)
    picks = fetch_manager_picks(team_id, current_gw)

    return TeamSnapshot(
        team_id=str(team_id),
        bootstrap=bootstrap,
        entry=entry,
        fixtures=fixtures,
        current_gw=current_gw,
        picks=picks,
    )
