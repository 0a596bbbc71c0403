# src/metric_clock/scripts/convert.py
"""
Command-line converter between Unix time and metric time.

Examples:
    metric-clock                      # now
    metric-clock --seconds 100123456  # Unix seconds to metric
    metric-clock --state 17-006-00-000
    metric-clock --state 17-006-00-000 --step-days 10
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from metric_clock.core.civil import SystemClock
from metric_clock.core.metric import encode
from metric_clock.core.state import parse_state
from metric_clock.schemas.clock import ConversionOut
from metric_clock.services.converter import ConverterService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metric-clock",
        description="Convert between Unix time and metric time (yy-ddd-hh-mmm).",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seconds", type=int, help="Unix seconds; negative before 1970")
    source.add_argument("--state", help="State token such as 17-006-00-000")
    parser.add_argument("--step-years", type=int, default=0, help="Years to move by")
    parser.add_argument("--step-days", type=int, default=0, help="Days to move by")
    parser.add_argument("--json", action="store_true", help="Print the full view as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def render_text(view: ConversionOut) -> str:
    metric = view.metric
    lines = [
        f"Metric:   {view.state}  (yy={metric.yy} ddd={metric.ddd} hh={metric.hh} mmm={metric.mmm})",
        f"Unix:     {view.unix_seconds}",
        f"Local:    {view.local or 'out of range'}",
        f"UTC:      {view.utc or 'out of range'}",
        f"Week:     days {view.week.start} - {view.week.end}",
    ]
    for day in view.week.days:
        marker = "*" if day.current else " "
        lines.append(f"  {marker} {day.day:03d}  {day.short_date or '-'}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    converter = ConverterService(SystemClock())
    if args.seconds is not None:
        metric = encode(args.seconds)
    else:
        if args.state is not None and parse_state(args.state) is None:
            logger.warning("State %r is not yy-ddd-hh-mmm; showing now instead", args.state)
        metric = converter.resolve(args.state)

    view = converter.step(metric, args.step_years, args.step_days)

    if args.json:
        print(json.dumps(view.model_dump(), indent=2))
    else:
        print(render_text(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
