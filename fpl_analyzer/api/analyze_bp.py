"""Analyze blueprint — one GET endpoint returning the full team analysis."""

from flask import Blueprint, Response, jsonify, request

from fpl_analyzer.analysis.pipeline import analyze_team
from fpl_analyzer.api.helpers import require_team_id
from fpl_analyzer.errors import RequestValidationError
from fpl_analyzer.logging_config import get_logger
from fpl_analyzer.utils.nan_handling import scrub_nan

log = get_logger(__name__)

analyze_bp = Blueprint("analyze", __name__)


@analyze_bp.route("/api/analyze-team", methods=["GET", "OPTIONS"])
@analyze_bp.route("/.netlify/functions/analyze-team", methods=["GET", "OPTIONS"])
def api_analyze_team():
    """Rate the squad and suggest transfers and captains for ``teamId``."""
    if request.method == "OPTIONS":
        return Response("", status=200, mimetype="application/json")

    try:
        team_id = require_team_id(request.args)
    except RequestValidationError as exc:
        return jsonify({"error": str(exc)}), exc.status_code

    try:
        analysis = analyze_team(team_id)
    except Exception as exc:
        log.exception("Analysis failed for team %s", team_id)
        return jsonify({"error": "Failed to analyze team", "message": str(exc)}), 500

    return jsonify(scrub_nan(analysis.to_json_dict()))


@analyze_bp.route("/api/health")
def api_health():
    return jsonify({"status": "ok"})
