"""Command line interface for HomePlan.

Usage:
  homeplan plan --area 1000 --floors 2 --timeline 24 [--config rates.json] [--out plan.json]
  homeplan compress --area 1000 --floors 2 --timeline 24 --new-timeline 18
  homeplan serve [--host 127.0.0.1] [--port 3001]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from homeplan.config.errors import HomePlanError, ValidationError
from homeplan.config.settings import settings
from homeplan.services.planner import plan_project, simulate_plan_compression
from homeplan.utils.plan_logger import (
    configure_logging,
    log_compression_summary,
    log_plan_summary,
)
from homeplan.validators.input_validator import (
    parse_compression_request,
    parse_project_inputs,
)

logger = structlog.get_logger(__name__)


def _load_overrides(path: Optional[str]) -> Optional[Dict[str, Any]]:
    """Load rate overrides from a JSON file."""
    if not path:
        return None
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read rate overrides from {path}: {e}", field="config")
    if not isinstance(data, dict):
        raise ValidationError(f"Rate overrides in {path} must be a JSON object", field="config")
    return data


def _inputs_from_args(args: argparse.Namespace):
    return parse_project_inputs({
        "builtUpArea": args.area,
        "numberOfFloors": args.floors,
        "projectTimeline": args.timeline,
    })


def _emit(data: Dict[str, Any], out: Optional[str]) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if out:
        Path(out).write_text(text + "\n", encoding="utf-8")
        logger.info("output_written", path=out)
    else:
        print(text)


def _cmd_plan(args: argparse.Namespace) -> None:
    plan = plan_project(_inputs_from_args(args), _load_overrides(args.config))
    log_plan_summary(plan)
    _emit(plan.to_dict(), args.out)


def _cmd_compress(args: argparse.Namespace) -> None:
    inputs = _inputs_from_args(args)
    new_timeline = parse_compression_request({"newTimeline": args.new_timeline}, inputs.project_timeline)
    plan = plan_project(inputs, _load_overrides(args.config))
    result = simulate_plan_compression(plan, new_timeline)
    log_compression_summary(result)
    _emit(result.to_dict(), args.out)


def _cmd_serve(args: argparse.Namespace) -> None:
    from homeplan.api import create_app

    settings.validate()
    app = create_app()
    app.run(host=args.host, port=args.port)


def _add_project_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--area", type=float, required=True, help="Built-up area per floor (sq ft)")
    parser.add_argument("--floors", type=int, required=True, help="Number of floors")
    parser.add_argument("--timeline", type=int, required=True, help="Project timeline (weeks)")
    parser.add_argument("--config", help="JSON file with rate overrides")
    parser.add_argument("--out", help="Write JSON output to this file instead of stdout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="homeplan", description="Residential construction planner")
    parser.add_argument("--log-level", default=None, help="Log level (default from LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="Compute a full project plan")
    _add_project_args(plan)
    plan.set_defaults(func=_cmd_plan)

    compress = sub.add_parser("compress", help="Simulate a shorter timeline")
    _add_project_args(compress)
    compress.add_argument("--new-timeline", type=int, required=True, help="Compressed timeline (weeks)")
    compress.set_defaults(func=_cmd_compress)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.api_host)
    serve.add_argument("--port", type=int, default=settings.api_port)
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        args.func(args)
    except HomePlanError as e:
        print(json.dumps({"error": e.to_dict()}, indent=2), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
