#!/usr/bin/env python3
"""
SVB STRESS LAB scenario runner.

Usage:
    python scripts/run_scenario.py --preset svb
    python scripts/run_scenario.py --preset run --withdrawal-speed 60
    python scripts/run_scenario.py --rate-shock 3 --uninsured 90 --json
    python scripts/run_scenario.py --list-presets
    python scripts/run_scenario.py -v
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Ensure svb_stress is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svb_stress.explain.formatting import (
    format_duration_loss,
    format_input_labels,
    format_score,
)
from svb_stress.pipeline.engine import StressPipeline
from svb_stress.presets.library import get_preset, list_presets
from svb_stress.types import StressInputs

OVERRIDES = [
    ("--rate-shock", "rate_shock_pct", "Rate shock in percentage points (0-6)"),
    ("--uninsured", "uninsured_pct", "Uninsured deposit share, percent (0-100)"),
    ("--duration", "duration_years", "Asset duration in years (0-10)"),
    ("--losses", "unrealized_loss_pct_cap", "Unrealized losses, percent of capital (0-120)"),
    ("--withdrawal-speed", "withdrawal_speed", "Withdrawal speed intensity (0-100)"),
    ("--concentration", "concentration", "Deposit concentration intensity (0-100)"),
]


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Compute the SVB-style bank stress score for a scenario",
    )
    parser.add_argument(
        "--preset", "-p", type=str, default=None, help="Start from a named preset"
    )
    for flag, dest, help_text in OVERRIDES:
        parser.add_argument(flag, dest=dest, type=float, default=None, help=help_text)
    parser.add_argument("--list-presets", action="store_true", help="List presets and exit")
    parser.add_argument("--json", "-j", action="store_true", help="Output JSON only")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list_presets:
        for name, title in list_presets():
            print(f"{name:<10} {title}")
        return 0

    inputs = StressInputs()
    if args.preset:
        try:
            inputs = get_preset(args.preset)
        except KeyError as exc:
            print(f"Error: {exc.args[0]}")
            return 1

    overrides = {
        dest: getattr(args, dest)
        for _, dest, _ in OVERRIDES
        if getattr(args, dest) is not None
    }
    inputs = replace(inputs, **overrides)

    result = StressPipeline().process(inputs)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        labels = format_input_labels(result.inputs)
        print()
        print("=" * 60)
        print("SVB STRESS LAB")
        print("=" * 60)
        print(f"Preset:       {args.preset or '-'}")
        for name, value in labels.items():
            print(f"  {name:<26}{value}")
        print("-" * 60)
        print(f"Stress Score: {format_score(result.score)}")
        print(f"Status:       {result.status.value}")
        print(f"Duration:     {format_duration_loss(result.duration_loss_pct)}")
        print("-" * 60)
        print(result.narrative)
        print("-" * 60)
        print("Drivers:")
        for note in result.driver_notes:
            print(f"  - {note}")
        print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
