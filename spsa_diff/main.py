#!/usr/bin/env python3
"""
SPSA Diff

Fetch a tuning page and report how far each option moved between the
starting configuration (spsa-input) and the tuned result (spsa-output).

Usage:
    python -m spsa_diff.main <url>
    python -m spsa_diff.main <url> --metric relative
    python -m spsa_diff.main <url> --pair-by name --no-color

Metrics:
    - range: change as a fraction of the option's min..max range (default)
    - relative: change as a percentage of the starting value
"""

from __future__ import annotations

import argparse
import sys

from spsa_diff.diff_engine import METRICS, PAIRING_MODES, diff_records
from spsa_diff.errors import SpsaDiffError
from spsa_diff.page import extract_blocks, fetch_page
from spsa_diff.records import parse_records
from spsa_diff.report import render


def build_report(
    page_text: str,
    metric: str = "range",
    pair_by: str = "position",
    color: bool = True,
    verbose: bool = False,
) -> list[str]:
    """Turn fetched page text into report lines.

    Args:
        page_text: Full HTML of the tuning page.
        metric: Change metric name.
        pair_by: "position" or "name".
        color: Whether to emit ANSI color codes.
        verbose: Print progress to stderr.

    Returns:
        The rendered report lines.
    """
    input_text, output_text = extract_blocks(page_text)
    before = parse_records(input_text, "input")
    after = parse_records(output_text, "output")
    if verbose:
        print(f"Parsed {len(before)} input options, {len(after)} output options", file=sys.stderr)

    pairs = diff_records(before, after, metric=metric, pair_by=pair_by)
    if verbose:
        changed = sum(1 for pair in pairs if pair.after.value != pair.before.value)
        print(f"{changed} of {len(pairs)} options changed", file=sys.stderr)

    return render(pairs, metric=metric, color=color)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Report option changes from an SPSA tuning page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("url", help="URL of the tuning page")
    parser.add_argument(
        "--metric",
        choices=sorted(METRICS),
        default="range",
        help="Change metric (default: range)"
    )
    parser.add_argument(
        "--pair-by",
        choices=sorted(PAIRING_MODES),
        default="position",
        help="Match input and output options by position or by name (default: position)"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress to stderr")

    args = parser.parse_args(argv)

    print(f"Fetching {args.url}")
    try:
        text = fetch_page(args.url)
        if args.verbose:
            print(f"Fetched {len(text):,} characters", file=sys.stderr)
        lines = build_report(
            text,
            metric=args.metric,
            pair_by=args.pair_by,
            color=not args.no_color,
            verbose=args.verbose,
        )
    except SpsaDiffError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print()
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
