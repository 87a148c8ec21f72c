# campus_nav/cli.py
import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from campus_nav.app.build import App, build
from campus_nav.app.directions import describe
from campus_nav.errors import CampusNavError, ConfigError
from campus_nav.routing.resolver import InvalidQuery, Route, reject_message
from campus_nav.runtime.types import Algorithm

EXIT_OK, EXIT_NO_ROUTE, EXIT_INVALID = 0, 1, 2


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="campus-nav", description="Walking routes across campus.")
    p.add_argument("--config", help="JSON config file (AppModel)")
    p.add_argument("--dataset", help="campus nodes/edges JSON; overrides config")
    p.add_argument("--verbose", action="store_true", help="emit JSON query logs on stderr")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("locations", help="list selectable locations")

    r = sub.add_parser("route", help="find a route between two locations")
    r.add_argument("start")
    r.add_argument("end")
    r.add_argument("--algorithm", choices=[a.value for a in Algorithm])
    r.add_argument("--accessible", action="store_true", default=None)
    r.add_argument("--meters-per-unit", type=float)
    r.add_argument("--prompt", action="store_true", help="also print the text-generation prompt")
    return p


def _config(args) -> dict:
    cfg: dict = {}
    if args.config:
        try:
            cfg = json.loads(Path(args.config).read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(f"{args.config}: not a UTF-8 JSON document ({exc})") from exc
        if not isinstance(cfg, dict):
            raise ConfigError(f"{args.config}: expected a JSON object, got {type(cfg).__name__}")
    if args.dataset:
        cfg["dataset"] = {"file": args.dataset}
    routing = cfg.setdefault("routing", {})
    if not isinstance(routing, dict):
        return cfg  # left for AppModel validation to reject
    if getattr(args, "algorithm", None):
        routing["algorithm"] = args.algorithm
    if getattr(args, "accessible", None):
        routing["accessible_only"] = True
    if getattr(args, "meters_per_unit", None) is not None:
        routing["meters_per_unit"] = args.meters_per_unit
    return cfg


def _print_locations(app: App, out) -> int:
    for loc in app.locations:
        c = loc.center
        print(f"{loc.name}\t{len(loc.nodes)} node(s)\t{c.lat:.6f},{c.lng:.6f}", file=out)
    return EXIT_OK


def _print_route(app: App, args, out) -> int:
    outcome = app.find_route(args.start, args.end)
    if isinstance(outcome, InvalidQuery):
        print(reject_message(outcome), file=sys.stderr)
        return EXIT_INVALID
    if not isinstance(outcome, Route):
        print("No path found between the selected locations.", file=sys.stderr)
        return EXIT_NO_ROUTE

    desc = describe(outcome, app.graph)
    print(" -> ".join(str(n) for n in outcome.path), file=out)
    for i, step in enumerate(desc.steps, 1):
        print(f"{i}. {step}", file=out)
    print(f"Total distance: {outcome.distance:.2f} meters", file=out)
    if args.prompt:
        print(desc.prompt, file=out)
    return EXIT_OK


def main(argv: list[str] | None = None, out=None) -> int:
    out = out or sys.stdout
    args = _parser().parse_args(argv)
    try:
        app = build(_config(args), use_logging=args.verbose, log_stream=sys.stderr)
    except (ValidationError, CampusNavError, OSError) as exc:
        print(f"campus-nav: {exc}", file=sys.stderr)
        return EXIT_INVALID

    if args.command == "locations":
        return _print_locations(app, out)
    return _print_route(app, args, out)


if __name__ == "__main__":
    raise SystemExit(main())
