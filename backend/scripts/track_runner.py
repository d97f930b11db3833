#!/usr/bin/env python3
"""CLI script for tracking marathon runners by bib number or name.

Usage:
    # One lookup
    python backend/scripts/track_runner.py 1234

    # Several runners, refreshed every 30 seconds
    python backend/scripts/track_runner.py 1234 5678 --watch

    # JSON output (same fields as the API)
    python backend/scripts/track_runner.py 1234 --json

    # Name search (needs MARATHON_API_BASE)
    MARATHON_API_BASE=https://results.example.com \
        python backend/scripts/track_runner.py 홍길동
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from marathon_tracker.config import settings
from marathon_tracker.features.runners import get_runner_service
from marathon_tracker.features.runners.tracking import (
    LookupResult,
    lookup_all,
    unique_queries,
    watch,
)
from marathon_tracker.schemas.runners import RunnerSchema


def print_summary(results: list[LookupResult]) -> None:
    """Human-readable status per runner."""
    print(f"\n=== {datetime.now():%H:%M:%S} ===")
    for result in results:
        if not result.ok:
            print(f"[{result.query}] {result.error.message} ({result.error.kind.value})")
            continue

        r = result.runner
        print(f"[{r.bib_number}] {r.name} ({r.category})")
        print(f"  Checkpoint: {r.current_checkpoint} ({r.total_distance})")
        print(f"  Elapsed:    {r.elapsed_time}")
        print(f"  Pace:       {r.pace}")
        print(f"  Finish:     {r.estimated_finish}")
        if r.progress_percentage is not None:
            print(f"  Progress:   {r.progress_percentage:.1f}%")
        if r.current_position:
            print(f"  Position:   {r.current_position.lat:.5f}, {r.current_position.lng:.5f}")


def print_json(results: list[LookupResult]) -> None:
    """One JSON document per poll: {query: runner | {error, kind}}."""
    output = {}
    for result in results:
        if result.ok:
            output[result.query] = RunnerSchema.from_runner(result.runner).to_json_dict()
        else:
            output[result.query] = {
                "error": result.error.message,
                "kind": result.error.kind.value,
            }
    print(json.dumps(output, ensure_ascii=False, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Track marathon runners")
    parser.add_argument("queries", nargs="+", help="Bib numbers or runner names")
    parser.add_argument("--watch", action="store_true", help="Refresh until interrupted")
    parser.add_argument(
        "--interval",
        type=float,
        default=settings.poll_interval_s,
        help=f"Refresh interval in seconds (default {settings.poll_interval_s:.0f})",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    if args.interval <= 0:
        parser.error("--interval must be positive")

    queries = unique_queries(args.queries)
    if not queries:
        parser.error("At least one bib number or name is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    service = get_runner_service()
    render = print_json if args.json else print_summary

    try:
        if args.watch:
            asyncio.run(watch(service, queries, args.interval, render))
        else:
            results = asyncio.run(lookup_all(service, queries))
            render(results)
            if not all(r.ok for r in results):
                sys.exit(1)
    except KeyboardInterrupt:
        print("\nStopped.")


if __name__ == "__main__":
    main()
