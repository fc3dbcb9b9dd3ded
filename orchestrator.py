#!/usr/bin/env python
"""
orchestrator.py
---------------
Build every stylesheet listed in a YAML file:

1. For each grid in grids.yaml:
    - compile the rule set (rows beyond the grid's cap are reported, not built)
    - write it to the grid's outfile (default build/<name>.<format>)
    - (optional) verify the rendered rules against every preset tape
    - append the rule count to results/summary.csv
    - append a record to the compile log
2. Refuse to start if the projected enumeration work exceeds a hard ceiling

Example grids.yaml
------------------
grids:
  - name: demo
    rows: 15
    cols: 40
  - name: small
    rows: 4
    cols: 12
    format: jsonl
"""
from __future__ import annotations

import argparse
import csv
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from compile_stylesheet import write_rule_set
from compiler import compile_rule_set
from config import GridConfig, load_batch
from errors import ConfigurationError
from presets import PRESETS, load_preset
from run_log import LOG_PATH, log_compile
from verify import verify_tape

# Paths & Globals
BUILD_DIR  = Path("build")
RESULT_DIR = Path("results")

HARD_WORK_CEILING = 50_000_000  # assignments enumerated across all grids


# Helpers
def projected_work(cfg: GridConfig) -> int:
    """Number of assignments the compiler will enumerate for one grid."""
    depth = min(cfg.rows, cfg.cap)
    return cfg.cols * sum(1 << (2 * r + 1) for r in range(1, depth + 1))


def outfile_for(cfg: GridConfig, build_dir: Path) -> Path:
    return cfg.outfile if cfg.outfile is not None else build_dir / f"{cfg.name}.{cfg.format}"


# Main orchestration
def run(
    cfg_path: Path,
    *,
    dry_run: bool = False,
    verify: bool = False,
    build_dir: Path = BUILD_DIR,
    result_dir: Path = RESULT_DIR,
    log_file: Path = LOG_PATH,
) -> None:
    try:
        grids = load_batch(cfg_path)
    except ConfigurationError as e:
        sys.exit(f"error: {e}")

    projected_total = sum(projected_work(g) for g in grids)
    if projected_total > HARD_WORK_CEILING:
        sys.exit(
            f"Projected work ({projected_total:,} assignments) exceeds "
            f"hard ceiling {HARD_WORK_CEILING:,}. Aborting."
        )
    print(f"{len(grids)} grids, {projected_total:,} assignments to enumerate")

    if dry_run:
        for cfg in grids:
            print(f"[dry-run] {cfg.name}: {cfg.rows}x{cfg.cols} → {outfile_for(cfg, build_dir)}")
        return

    result_dir.mkdir(parents=True, exist_ok=True)
    summary_path = result_dir / "summary.csv"
    first_write  = not summary_path.exists()

    with summary_path.open("a", newline="") as fp_summary:
        writer = csv.writer(fp_summary)
        if first_write:
            writer.writerow([
                "date_utc",
                "grid",
                "rows",
                "cols",
                "max_row",
                "rule_count",
                "min_accuracy",
                "outfile",
            ])

        for cfg in grids:
            rule_set = compile_rule_set(cfg.rows, cfg.cols, cap=cfg.cap)
            outfile  = outfile_for(cfg, build_dir)
            write_rule_set(rule_set, outfile, cfg.format)
            log_compile(rule_set, name=cfg.name, log_file=log_file)

            min_acc = ""
            if verify:
                min_acc = f"{min(verify_tape(rule_set, load_preset(k, cfg.cols)) for k in PRESETS):.4f}"

            if rule_set.note:
                print(f"[warning] {cfg.name}: {rule_set.note}", file=sys.stderr)
            print(f"Grid {cfg.name}: {len(rule_set):,} rules → {outfile}")

            writer.writerow([
                datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
                cfg.name,
                cfg.rows,
                cfg.cols,
                rule_set.max_row,
                len(rule_set),
                min_acc,
                str(outfile),
            ])


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Compile every grid listed in a YAML file.")
    p.add_argument("--config", type=Path, default=Path("grids.yaml"), help="Batch YAML file.")
    p.add_argument("--dry-run", action="store_true", help="Print the plan without compiling.")
    p.add_argument("--verify", action="store_true", help="Check each rule set against the presets.")
    p.add_argument("--build-dir", type=Path, default=BUILD_DIR)
    p.add_argument("--result-dir", type=Path, default=RESULT_DIR)
    p.add_argument("--log", type=Path, default=LOG_PATH)
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    run(
        args.config,
        dry_run=args.dry_run,
        verify=args.verify,
        build_dir=args.build_dir,
        result_dir=args.result_dir,
        log_file=args.log,
    )


if __name__ == "__main__":
    main()
