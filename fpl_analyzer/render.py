"""Plain-text rendering of a :class:`TeamAnalysis` for the terminal."""

from __future__ import annotations

import pandas as pd

from fpl_analyzer.schemas.analysis import TeamAnalysis

SQUAD_COLUMNS = {
    "name": "Player",
    "team": "Team",
    "position": "Pos",
    "price": "Price",
    "form": "Form",
    "avg_difficulty": "FDR",
    "rating": "Rating",
    "fixtures": "Next 5",
}


def _squad_table(analysis: TeamAnalysis) -> str:
    rows = []
    for slot in analysis.squad:
        row = {col: getattr(slot, col) for col in SQUAD_COLUMNS}
        if slot.is_captain:
            row["name"] = f"{slot.name} (C)"
        elif slot.is_vice_captain:
            row["name"] = f"{slot.name} (V)"
        rows.append(row)
    df = pd.DataFrame(rows, columns=list(SQUAD_COLUMNS)).rename(columns=SQUAD_COLUMNS)
    return df.to_string(index=False)


def render_text(analysis: TeamAnalysis) -> str:
    """Render the analysis as a multi-section text report."""
    lines = [
        f"{analysis.team_name} - GW{analysis.current_gw}",
        f"Value £{analysis.team_value}m | Bank £{analysis.bank}m | "
        f"Points {analysis.total_points} | Overall rank {analysis.overall_rank} | "
        f"GW rank {analysis.gameweek_rank}",
        "",
        "Squad",
        _squad_table(analysis) if analysis.squad else "  (empty)",
        "",
        "Transfers",
    ]
    if not analysis.transfers:
        lines.append("  None suggested")
    for t in analysis.transfers:
        lines.append(
            f"  OUT {t.player_out.name} ({t.player_out.team}, £{t.player_out.price:.1f}m) "
            f"-> IN {t.player_in.name} ({t.player_in.team}, £{t.player_in.price:.1f}m) "
            f"| cost {t.cost} | +{t.projected_points} pts"
        )
        lines.append(f"      {t.reasoning.in_}")

    lines += ["", "Captaincy"]
    for i, c in enumerate(analysis.captains, start=1):
        lines.append(f"  {i}. {c.name} {c.confidence}% - {c.reasoning}")

    lines += ["", "Insights"]
    for ins in analysis.insights:
        lines.append(f"  {ins.icon} {ins.title}: {ins.message}")
    return "\n".join(lines)
