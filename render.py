from __future__ import annotations
from typing import List, Sequence, Set

from ruleset import Coordinate, RuleSet


def active_cells(rule_set: RuleSet, root: Sequence[bool]) -> Set[Coordinate]:
    """
    Cells a stylesheet renderer would light up for tape `root`: every target
    with at least one rule whose predicates all hold.
    """
    if len(root) != rule_set.cols:
        raise ValueError(f"tape has {len(root)} cells, rule set expects {rule_set.cols}")
    return {rule.target for rule in rule_set.rules if rule.matches(root)}


def render_grid(rule_set: RuleSet, root: Sequence[bool]) -> List[List[int]]:
    """
    Rows 1..rule_set.rows as 0/1 lists. Rows past the compiled depth have no
    rules and stay dead.
    """
    active = active_cells(rule_set, root)
    return [
        [int(Coordinate(r, c) in active) for c in range(rule_set.cols)]
        for r in range(1, rule_set.rows + 1)
    ]


def format_grid(root: Sequence[bool], grid: List[List[int]], alive: str = "#", dead: str = ".") -> str:
    lines = ["".join(alive if x else dead for x in root)]
    lines.extend("".join(alive if x else dead for x in row) for row in grid)
    return "\n".join(lines)
