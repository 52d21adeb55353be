"""Analysis layer — fixture projection, squad rating, transfer, captaincy
and insight engines, and the pipeline that joins them.

Re-exports the main functions for convenience::

    from fpl_analyzer.analysis import analyze_team, build_analysis, ...
"""

from fpl_analyzer.analysis.captain import rank_captains
from fpl_analyzer.analysis.fixtures import average_difficulty, project_fixtures
from fpl_analyzer.analysis.insights import generate_insights
from fpl_analyzer.analysis.pipeline import analyze_team, build_analysis
from fpl_analyzer.analysis.squad import analyze_squad
from fpl_analyzer.analysis.transfers import suggest_transfers

__all__ = [
    "analyze_team",
    "build_analysis",
    "project_fixtures",
    "average_difficulty",
    "analyze_squad",
    "suggest_transfers",
    "rank_captains",
    "generate_insights",
]
