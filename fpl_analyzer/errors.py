"""Exception types surfaced by the analyzer.

Only two kinds reach the HTTP layer: a bad request (missing team id) and
everything else, which collapses to a 500 with the message passed through.
"""


class AnalyzerError(Exception):
    """Base class for analyzer errors."""

    status_code = 500


class RequestValidationError(AnalyzerError):
    """The inbound request is missing the team identifier."""

    status_code = 400


class UpstreamError(AnalyzerError):
    """An FPL API call failed (network, HTTP status, or undecodable body)."""

    status_code = 500
