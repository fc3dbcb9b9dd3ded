"""
compile_stylesheet.py

Compile Rule 110 into a stylesheet of CSS sibling selectors (or a JSONL dump
of the same rules).

Example (CSS)
-------
python compile_stylesheet.py --rows 15 --cols 40 \
       --outfile build/logic.css

Example (from a YAML config, JSONL output)
-------
python compile_stylesheet.py --config grid.yaml --format jsonl \
       --outfile build/logic.jsonl
"""

from __future__ import annotations
import argparse, dataclasses, pathlib, sys
from typing import List

from compiler import compile_rule_set
from config import FORMATS, GridConfig, load_config
from errors import ConfigurationError
from ruleset import RuleSet, render_css, rule_to_jsonl
from run_log import LOG_PATH, log_compile


def write_rule_set(rule_set: RuleSet, outfile: pathlib.Path, fmt: str = "css") -> None:
    outfile.parent.mkdir(parents=True, exist_ok=True)
    with outfile.open("w", encoding="utf-8") as f:
        if fmt == "jsonl":
            for rule in rule_set.rules:
                f.write(rule_to_jsonl(rule) + "\n")
        else:
            f.write(render_css(rule_set))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Compile Rule 110 into CSS sibling selectors.")

    p.add_argument("--config", type=pathlib.Path, help="YAML file with grid settings.")
    p.add_argument("--rows", type=int, help="Rows below the input tape (default 15).")
    p.add_argument("--cols", type=int, help="Length of the input tape (default 40).")
    p.add_argument("--cap", type=int, help="Deepest row to compile (default 6).")
    p.add_argument("--format", choices=FORMATS, help="Output format (default css).")
    p.add_argument("--outfile", type=pathlib.Path, help="Where to write the rules.")
    p.add_argument("--log", type=pathlib.Path, default=LOG_PATH, help="Compile log (JSON lines).")
    p.add_argument("--no-log", action="store_true", help="Do not append to the compile log.")
    return p


def resolve_config(args: argparse.Namespace) -> GridConfig:
    cfg = load_config(args.config) if args.config else GridConfig()
    overrides = {
        key: getattr(args, key)
        for key in ("rows", "cols", "cap", "format", "outfile")
        if getattr(args, key) is not None
    }
    return dataclasses.replace(cfg, **overrides)


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(args)
        if cfg.outfile is None:
            raise ConfigurationError("no output file given (--outfile or 'outfile' in the config)")
        rule_set = compile_rule_set(cfg.rows, cfg.cols, cap=cfg.cap)
    except ConfigurationError as e:
        sys.exit(f"error: {e}")

    write_rule_set(rule_set, cfg.outfile, cfg.format)
    if not args.no_log:
        log_compile(rule_set, name=cfg.name, log_file=args.log)

    if rule_set.note:
        print(f"[warning] {rule_set.note}", file=sys.stderr)
    print(f"Wrote {len(rule_set):,} rules (rows 1-{rule_set.max_row}) to {cfg.outfile}")


if __name__ == "__main__":
    main()
