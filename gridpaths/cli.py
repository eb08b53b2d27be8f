"""Command-line interface for gridpaths."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from gridpaths.bfs import find_all_shortest_paths
from gridpaths.config import DEMO_CONFIG
from gridpaths.io import load_grid_file
from gridpaths.logging import get_logger, set_global_log_level
from gridpaths.types import Grid, PathStrategy

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string (e.g. ``"0.4 ms"``, ``"1.23 s"``)."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _print_paths(start: int, end: int, paths: List[str]) -> None:
    """Print paths as numbered lines."""
    print(f"Shortest paths from {start} to {end}:")
    if not paths:
        print("   (none)")
        return
    for idx, path in enumerate(paths, start=1):
        print(f"Path {idx}: {path}")


def _paths_payload(start: int, end: int, paths: List[str]) -> Dict[str, Any]:
    return {
        "start": start,
        "end": end,
        "distance": len(paths[0]) if paths else None,
        "count": len(paths),
        "paths": paths,
    }


def _search(
    grid: Grid,
    start: int,
    end: int,
    strategy: PathStrategy,
    as_json: bool,
) -> None:
    _start_time = perf_counter()
    paths = find_all_shortest_paths(grid, start, end, strategy=strategy)
    logger.info(
        f"Found {len(paths)} path(s) from {start} to {end} "
        f"in {_format_duration(perf_counter() - _start_time)}"
    )
    if as_json:
        print(json.dumps(_paths_payload(start, end, paths), indent=2))
    else:
        _print_paths(start, end, paths)


def _find(
    parser: argparse.ArgumentParser,
    path: Path,
    start: Optional[int],
    end: Optional[int],
    strategy: PathStrategy,
    as_json: bool,
) -> None:
    """Load a grid file and print every shortest path between two labels."""
    logger.info(f"Loading grid from: {path}")
    try:
        document = load_grid_file(path)
    except FileNotFoundError:
        logger.error(f"Grid file not found: {path}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read grid file: {path}: {type(e).__name__}: {e}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError, jsonschema.ValidationError) as e:
        logger.error(f"Failed to load grid: {type(e).__name__}: {e}")
        sys.exit(1)

    start = start if start is not None else document.get("start")
    end = end if end is not None else document.get("end")
    if start is None or end is None:
        parser.error(
            "start and end labels are required (use --start/--end or set them in the grid file)"
        )

    _search(document["grid"], start, end, strategy, as_json)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``gridpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="gridpaths",
        description="Find all shortest paths between two labeled grid cells.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{find,demo}",
        help="Available commands",
    )

    find_parser = subparsers.add_parser(
        "find", help="Find shortest paths in a grid file"
    )
    find_parser.add_argument(
        "grid", type=Path, help="Path to a YAML or JSON grid document"
    )
    find_parser.add_argument("--start", "-s", type=int, help="Start label")
    find_parser.add_argument("--end", "-e", type=int, help="End label")
    find_parser.add_argument(
        "--json", action="store_true", help="Print results as a JSON object"
    )
    find_parser.add_argument(
        "--strategy",
        choices=[s.name.lower() for s in PathStrategy],
        default=PathStrategy.QUEUE_PATHS.name.lower(),
        help="Path enumeration method (results are identical)",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Run the search on the built-in 3x3 sample grid"
    )
    demo_parser.add_argument(
        "--json", action="store_true", help="Print results as a JSON object"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "find":
        _find(
            parser=find_parser,
            path=args.grid,
            start=args.start,
            end=args.end,
            strategy=PathStrategy.from_string(args.strategy),
            as_json=args.json,
        )
    elif args.command == "demo":
        _search(
            DEMO_CONFIG.grid,
            DEMO_CONFIG.start,
            DEMO_CONFIG.end,
            PathStrategy.QUEUE_PATHS,
            args.json,
        )


if __name__ == "__main__":
    main()
