#!/usr/bin/env python3
"""
Print the orb palette across a full day, one row every --step minutes.
Handy for checking period boundaries and blend windows after editing palettes.

Usage:
  python apps/day_sweep.py --step 15
  python apps/day_sweep.py --step 5 --transitions-only
"""
from __future__ import annotations

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from timeorb.runtime import build_runtime, load_config


def sweep_states(engine, step: int, transitions_only: bool = False):
    """One state every `step` minutes from 00:00; optionally only inside blend windows."""
    for m in range(0, 24 * 60, step):
        s = engine.compute(m // 60, m % 60)
        if transitions_only and not s.is_transitioning:
            continue
        yield s


def main() -> int:
    parser = argparse.ArgumentParser(description="Sweep 24h of orb colors.")
    parser.add_argument("--config", default=None, help="config YAML (default config/config.yaml)")
    parser.add_argument(
        "--step",
        type=int,
        default=30,
        help="Minutes between rows (1-720). Default 30.",
    )
    parser.add_argument(
        "--transitions-only",
        action="store_true",
        help="Only print rows that fall inside a blend window",
    )
    args = parser.parse_args()

    step = max(1, min(720, args.step))
    engine = build_runtime(load_config(args.config))

    print(f"{'time':<6} {'period':<10} {'next':<10} {'progress':>8}  primary  secondary tertiary glow_op")
    rows = 0
    for s in sweep_states(engine, step, args.transitions_only):
        c = s.colors
        print(f"{s.hour:02d}:{s.minute:02d}  {s.period.value:<10} {s.next_period.value:<10} {s.progress:>8.3f}  "
              f"{c.primary.to_hex()}  {c.secondary.to_hex()}  {c.tertiary.to_hex()}  {c.glow_opacity:.3f}")
        rows += 1
    print(f"{rows} rows (step={step}min, blend={engine.blend_hours * 60:.0f}min)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
