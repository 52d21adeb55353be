"""Central configuration — every magic number in one place."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Data source
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DataConfig:
    fpl_api_base: str = field(
        default_factory=lambda: os.environ.get(
            "FPL_API_BASE", "https://fantasy.premierleague.com/api"
        ).rstrip("/")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FPL_REQUEST_TIMEOUT", "30"))
    )
    phase_one_workers: int = 3  # bootstrap, entry, fixtures


# ---------------------------------------------------------------------------
# Fixture projection
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ProjectionConfig:
    fetch_horizon: int = 8     # GWs ahead kept per team
    squad_window: int = 5      # fixtures used for squad / transfer scoring
    captain_window: int = 1    # next fixture only
    neutral_difficulty: float = 3.0


# ---------------------------------------------------------------------------
# Squad rating
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RatingConfig:
    form_weight: float = 2.0
    fixture_weight: float = 2.0
    fixture_pivot: float = 5.0
    thresholds: tuple[tuple[float, str], ...] = (
        (14.0, "Excellent"),
        (10.0, "Good"),
        (6.0, "Average"),
    )
    floor_label: str = "Poor"


# ---------------------------------------------------------------------------
# Transfers
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TransferConfig:
    weak_form: float = 3.0            # form strictly below is weak
    hard_fixtures: float = 3.5        # avg difficulty strictly above is weak
    max_outgoing: int = 3
    max_suggestions: int = 2
    candidate_form_weight: float = 2.0
    points_horizon: int = 5           # GWs used for projected point delta
    dedupe_incoming: bool = True


# ---------------------------------------------------------------------------
# Captaincy
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class CaptainConfig:
    form_weight: float = 10.0
    fixture_weight: float = 5.0
    fixture_pivot: float = 6.0
    home_bonus: float = 5.0
    confidence_multiplier: float = 1.2
    max_confidence: int = 95
    top_n: int = 3


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class InsightConfig:
    easy_difficulty: float = 2.5
    hard_difficulty: float = 3.5
    fixture_run_players: int = 5
    poor_form: float = 2.0
    poor_form_players: int = 3
    strong_team_value: float = 103.0


# ---------------------------------------------------------------------------
# HTTP server
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ServerConfig:
    host: str = field(default_factory=lambda: os.environ.get("FPL_ANALYZER_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.environ.get("FPL_ANALYZER_PORT", "9874")))
    cors_headers: tuple[tuple[str, str], ...] = (
        ("Access-Control-Allow-Origin", "*"),
        ("Access-Control-Allow-Headers", "Content-Type"),
        ("Access-Control-Allow-Methods", "GET, OPTIONS"),
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LoggingConfig:
    level: str = field(
        default_factory=lambda: os.environ.get("FPL_ANALYZER_LOG_LEVEL", "INFO").upper()
    )
    cli_level: str = "WARNING"     # `analyze` prints its report to stdout
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"
    quiet_loggers: tuple[str, ...] = ("urllib3", "werkzeug")
    quiet_level: str = "WARNING"


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------
POSITION_LABELS: dict[int, str] = {1: "GK", 2: "DEF", 3: "MID", 4: "FWD"}

DIFFICULTY_LABELS: dict[int, str] = {
    1: "Very Easy",
    2: "Easy",
    3: "Medium",
    4: "Hard",
    5: "Very Hard",
}

UNKNOWN = "UNK"


# ---------------------------------------------------------------------------
# Singleton instances (importable as `from fpl_analyzer.config import data_cfg, ...`)
# ---------------------------------------------------------------------------
data_cfg = DataConfig()
projection_cfg = ProjectionConfig()
rating_cfg = RatingConfig()
transfer_cfg = TransferConfig()
captain_cfg = CaptainConfig()
insight_cfg = InsightConfig()
server_cfg = ServerConfig()
log_cfg = LoggingConfig()
