from __future__ import annotations

import json
import pathlib
import time

from ruleset import RuleSet

# Path to the global compile log file
LOG_PATH = pathlib.Path("logs") / "compile.log"


def log_compile(rule_set: RuleSet, *, name: str = "rule110", log_file: pathlib.Path = LOG_PATH) -> None:
    """Append a record of one compile run to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - name: grid name
      - rows, cols: requested grid size
      - max_row: deepest compiled row
      - rule_count: number of emitted rules
      - note: truncation note, or null
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "name": name,
        "rows": rule_set.rows,
        "cols": rule_set.cols,
        "max_row": rule_set.max_row,
        "rule_count": len(rule_set),
        "note": rule_set.note,
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, ensure_ascii=False) + "\n")
