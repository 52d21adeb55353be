"""Entry point: python -m fpl_analyzer [serve|analyze]"""

from __future__ import annotations

import argparse
import json
import sys

from fpl_analyzer.config import log_cfg, server_cfg
from fpl_analyzer.logging_config import setup_logging


def _serve(args: argparse.Namespace) -> int:
    from fpl_analyzer.api import create_app

    app = create_app()
    app.run(host=args.host, port=args.port, debug=False)
    return 0


def _analyze(args: argparse.Namespace) -> int:
    from fpl_analyzer.analysis.pipeline import analyze_team
    from fpl_analyzer.errors import AnalyzerError
    from fpl_analyzer.render import render_text

    try:
        analysis = analyze_team(args.team_id)
    except AnalyzerError as exc:
        print(f"Failed to analyze team: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(analysis.to_json_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_text(analysis))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fpl_analyzer", description="FPL team analyzer")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=server_cfg.host)
    serve.add_argument("--port", type=int, default=server_cfg.port)
    serve.set_defaults(func=_serve)

    analyze = sub.add_parser("analyze", help="Analyze one team and print the report")
    analyze.add_argument("team_id", type=int, help="FPL team (entry) id")
    analyze.add_argument("--json", action="store_true", help="Print raw JSON")
    analyze.set_defaults(func=_analyze)

    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["serve", *(argv or [])])

    setup_logging(log_cfg.level if args.command == "serve" else log_cfg.cli_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
