"""Command-line front end.

Usage:
    terminal-nav route A1 F2-3 --profile wheelchair
    terminal-nav compare A1 F2-3
    terminal-nav nodes
    terminal-nav profiles
    terminal-nav serve --port 8080
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import AppConfig, LayoutConfig, get_config
from .container import Container
from .domain.errors import NavigationError
from .domain.models import RouteDescription
from .observability import configure_logging
from .services import RouteService


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        "terminal-nav", description="Accessible indoor routing for a terminal layout."
    )
    ap.add_argument("--layout", type=Path, help="Path to the layout JSON file")
    ap.add_argument("--log-level", help="Override the configured log level")

    sub = ap.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="Shortest route for one profile")
    route.add_argument("source")
    route.add_argument("target")
    route.add_argument("--profile", help="Traveler profile name")

    compare = sub.add_parser("compare", help="Shortest route for every profile")
    compare.add_argument("source")
    compare.add_argument("target")

    sub.add_parser("nodes", help="List the layout's nodes")
    sub.add_parser("profiles", help="List traveler profiles")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)
    return ap


def _config_for(layout: Optional[Path]) -> AppConfig:
    config = get_config()
    if layout is None:
        return config
    return config.model_copy(
        update={
            "layout": LayoutConfig(
                data_dir=layout.resolve().parent, layout_file=layout.name
            )
        }
    )


def format_route(description: RouteDescription, decimals: int = 1) -> List[str]:
    """Render a route as text lines, marking floor transitions."""
    result = description.result
    parts: List[str] = []
    previous_floor = None
    for step in description.steps:
        if previous_floor is not None and step.floor != previous_floor:
            parts.append(f"[F{previous_floor:g}->F{step.floor:g}]")
        parts.append(step.node_id)
        previous_floor = step.floor

    return [
        f"  Cost: {round(result.total_cost, decimals)}",
        f"  Path: {' -> '.join(parts)}",
    ]


def _print_lines(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


def _run(args: argparse.Namespace, config: AppConfig) -> int:
    if args.command == "serve":
        import uvicorn

        from .api import create_app

        uvicorn.run(
            create_app(config=config),
            host=args.host or config.api.host,
            port=args.port or config.api.port,
        )
        return 0

    service: RouteService = Container.create_default(config).resolve(RouteService)
    decimals = config.api.cost_decimals

    if args.command == "route":
        result = service.route(args.source, args.target, args.profile)
        print(f"--- {result.profile.key.upper()} ---")
        _print_lines(format_route(service.describe(result), decimals))
    elif args.command == "compare":
        print(f"From: {args.source}  To: {args.target}")
        for outcome in service.compare_profiles(args.source, args.target):
            print(f"--- {outcome.profile.key.upper()} ---")
            if outcome.result is None:
                print("  No accessible route available!")
            else:
                _print_lines(format_route(service.describe(outcome.result), decimals))
    elif args.command == "nodes":
        for node in service.list_nodes():
            label = f"  {node.label}" if node.label else ""
            print(f"{node.id}{label}")
    elif args.command == "profiles":
        for profile in service.list_profiles():
            print(f"{profile.key}: {profile.description}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = _config_for(args.layout)
    configure_logging(config.observability, level=args.log_level)

    try:
        return _run(args, config)
    except NavigationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
