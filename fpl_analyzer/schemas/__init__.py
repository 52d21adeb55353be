"""Pydantic schemas for FPL catalog data and analysis results."""

from fpl_analyzer.schemas.analysis import (
    CaptainPick,
    Insight,
    SquadSlot,
    TeamAnalysis,
    TransferReasoning,
    TransferSide,
    TransferSuggestion,
)
from fpl_analyzer.schemas.player import Fixture, Pick, Player, ProjectedFixture, Team

__all__ = [
    "Team",
    "Player",
    "Fixture",
    "Pick",
    "ProjectedFixture",
    "SquadSlot",
    "TransferSide",
    "TransferReasoning",
    "TransferSuggestion",
    "CaptainPick",
    "Insight",
    "TeamAnalysis",
]
