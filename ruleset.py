"""
Immutable rule records and their serialized forms.

A TargetRule activates one grid cell when every tape input named by its
predicates is in the asserted state. Several rules may share a target; any
one of them matching is enough.
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

DEFAULT_STYLES = """\
/* Default State */
.cell { background-color: #1a1a25; }
.cell.active { background-color: var(--primary-color); box-shadow: 0 0 5px var(--primary-color); }
"""

ALIVE_DECLARATIONS = (
    "background-color: var(--primary-color); "
    "box-shadow: 0 0 8px var(--primary-color); "
    "border-color: #fff;"
)


def input_id(index: int) -> str:
    """Identifier of tape input `index` (root row)."""
    return f"t_{index}"


class Coordinate(NamedTuple):
    row: int
    col: int

    @property
    def identifier(self) -> str:
        return f"r_{self.row}_c_{self.col}"


@dataclass(frozen=True)
class CellPredicate:
    index: int
    asserted: bool

    def to_css(self) -> str:
        state = ":checked" if self.asserted else ":not(:checked)"
        return f"#{input_id(self.index)}{state}"


@dataclass(frozen=True)
class TargetRule:
    predicates: Tuple[CellPredicate, ...]
    target: Coordinate

    def matches(self, root) -> bool:
        return all(bool(root[p.index]) == p.asserted for p in self.predicates)

    def selector(self) -> str:
        chain = "".join(f"{p.to_css()} ~ " for p in self.predicates)
        return f"{chain}.grid .{self.target.identifier}"

    def to_css(self) -> str:
        return f"{self.selector()} {{ {ALIVE_DECLARATIONS} }}"


@dataclass(frozen=True)
class RuleSet:
    rows: int
    cols: int
    max_row: int
    rules: Tuple[TargetRule, ...]
    note: Optional[str] = None

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def truncated(self) -> bool:
        return self.rows > self.max_row


def render_css(rule_set: RuleSet) -> str:
    lines: List[str] = [
        "/*",
        " * GENERATED RULE 110 LOGIC",
        " *",
        f" * Grid: {rule_set.cols} columns, rows 1-{rule_set.max_row} compiled from the input tape.",
        " * Each rule targets one cell for one combination of the tape inputs",
        " * it depends on; a cell is active when any of its rules match.",
        " */",
        "",
        DEFAULT_STYLES,
    ]
    lines.extend(rule.to_css() for rule in rule_set.rules)
    if rule_set.note:
        lines.append("")
        lines.append(f"/* Note: {rule_set.note} */")
    return "\n".join(lines) + "\n"


def rule_to_jsonl(rule: TargetRule) -> str:
    return json.dumps(
        {
            "target": [rule.target.row, rule.target.col],
            "checked": [p.index for p in rule.predicates if p.asserted],
            "unchecked": [p.index for p in rule.predicates if not p.asserted],
        },
        separators=(",", ":"),
    )
