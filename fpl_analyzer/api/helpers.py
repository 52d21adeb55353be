"""Shared helpers for API blueprints."""

from fpl_analyzer.errors import RequestValidationError

TEAM_ID_PARAMS = ("teamId", "manager_id")


def require_team_id(args) -> str:
    """Extract the team identifier from query *args*.

    ``teamId`` is the canonical name; ``manager_id`` is accepted as an alias.
    Raises :class:`RequestValidationError` when both are missing or blank, or
    when the value is not a plain decimal id (it ends up in the upstream URL
    path).
    """
    for name in TEAM_ID_PARAMS:
        value = (args.get(name) or "").strip()
        if value:
            if not (value.isascii() and value.isdigit()):
                raise RequestValidationError("Team ID must be numeric")
            return value
    raise RequestValidationError("Team ID is required")
