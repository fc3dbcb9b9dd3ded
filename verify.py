#!/usr/bin/env python
"""
verify.py

Check a compiled rule set against direct evaluation of Rule 110.

For each preset tape the rules are evaluated the way a stylesheet renderer
would, and the lit cells are compared with the value `simulate` gives for the
same cell on a tape padded with dead cells.

Example
-------
python verify.py --rows 4 --cols 24 --preset single --preset ether --show
"""

from __future__ import annotations
import argparse, itertools, sys
from typing import List, Sequence

from compiler import MAX_CSS_ROWS, compile_rule_set
from errors import ConfigurationError
from presets import PRESETS, load_preset
from render import format_grid, render_grid
from ruleset import RuleSet
from simulate import simulate


def reference_grid(root: Sequence[bool], rows: int) -> List[List[int]]:
    """
    Rows 1..rows of the evolution of `root`, with every cell beyond the tape
    fixed dead in the root row.
    """
    cols = len(root)
    padded = [False] * rows + [bool(x) for x in root] + [False] * rows
    return [
        [int(simulate(padded[rows + c - r: rows + c + r + 1], r)) for c in range(cols)]
        for r in range(1, rows + 1)
    ]


def cell_accuracy(expected: List[List[int]], rendered: List[List[int]]) -> float:
    '''
    Share of grid cells rendered with the expected state, row by row.
    A row or cell present in only one grid counts as wrong.
    '''
    total = sum(len(row) for row in expected)
    if not total:
        return 0.0

    wrong = 0
    for want_row, got_row in itertools.zip_longest(expected, rendered, fillvalue=[]):
        wrong += sum(w != g for w, g in zip(want_row, got_row))
        wrong += abs(len(want_row) - len(got_row))
    return max(0.0, 1.0 - wrong / max(total, sum(len(row) for row in rendered)))


def verify_tape(rule_set: RuleSet, root: Sequence[bool]) -> float:
    """Accuracy of the rendered rows 1..max_row against the reference evolution."""
    rendered = render_grid(rule_set, root)[: rule_set.max_row]
    expected = reference_grid(root, rule_set.max_row)
    return cell_accuracy(expected, rendered)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Verify compiled Rule 110 selectors against direct evaluation.")
    p.add_argument("--rows", type=int, default=4, help="Grid depth to compile.")
    p.add_argument("--cols", type=int, default=24, help="Tape length.")
    p.add_argument("--cap", type=int, default=MAX_CSS_ROWS, help="Deepest row to compile.")
    p.add_argument("--preset", action="append", choices=sorted(PRESETS),
                   help="Preset tape to check (repeatable). Defaults to every preset.")
    p.add_argument("--seed", type=int, default=42, help="Seed for the random preset.")
    p.add_argument("--show", action="store_true", help="Print the rendered grid for each preset.")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        rule_set = compile_rule_set(args.rows, args.cols, cap=args.cap)
    except ConfigurationError as e:
        sys.exit(f"error: {e}")
    keys = args.preset or list(PRESETS)

    failures = 0
    for key in keys:
        root = load_preset(key, args.cols, seed=args.seed)
        acc = verify_tape(rule_set, root)
        if acc < 1.0:
            failures += 1
        print(f"-{key}: accuracy {acc:.4f}")
        if args.show:
            print(format_grid(root, render_grid(rule_set, root)))

    print(f"-Checked {len(keys)} tapes against {len(rule_set):,} rules (rows 1-{rule_set.max_row})")
    if failures:
        print(f"-{failures} tapes rendered incorrectly", file=sys.stderr)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
