"""
compiler.py

Compile Rule 110 into static CSS sibling selectors.

Every derived cell (row r, column c) is a pure function of the tape inputs
c-r .. c+r, so it can be styled by listing the input combinations that make
it alive. The number of combinations per cell is 2**(2r+1), which quadruples
with every extra row; rows beyond MAX_CSS_ROWS are left uncompiled and
reported in a note.

Example
-------
>>> result = compile_rules(rows=1, cols=5)
>>> result.rule_count
20
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from enumerator import enumerate_cell
from errors import ConfigurationError
from ruleset import Coordinate, RuleSet, TargetRule, render_css
from synthesize import Emittable, synthesize

MAX_CSS_ROWS = 6


@dataclass(frozen=True)
class CompileResult:
    rule_set: RuleSet
    css: str
    rule_count: int

    @property
    def note(self) -> str | None:
        return self.rule_set.note


def _require_positive_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def truncation_note(rows: int, cap: int) -> str:
    return (
        f"Rows {cap + 1}-{rows} are not compiled; enumerating their input combinations "
        f"beyond row {cap} is too large for a stylesheet."
    )


def compile_cell(row: int, col: int, cols: int) -> List[TargetRule]:
    '''
    Rules for one cell, in assignment order. Independent of every other cell.
    '''
    cell = enumerate_cell(row, col)
    target = Coordinate(row, col)
    rules: List[TargetRule] = []
    for assignment in cell.alive:
        outcome = synthesize(cell.window, assignment, target, cols)
        if isinstance(outcome, Emittable):
            rules.append(outcome.rule)
    return rules


def compile_rule_set(rows: int, cols: int, *, cap: int = MAX_CSS_ROWS) -> RuleSet:
    _require_positive_int("rows", rows)
    _require_positive_int("cols", cols)
    _require_positive_int("cap", cap)
    if cap > MAX_CSS_ROWS:
        raise ConfigurationError(f"cap must be at most {MAX_CSS_ROWS}, got {cap}")

    max_row = min(rows, cap)
    rules: List[TargetRule] = []
    for row in range(1, max_row + 1):
        for col in range(cols):
            rules.extend(compile_cell(row, col, cols))

    note = truncation_note(rows, cap) if rows > cap else None
    return RuleSet(rows=rows, cols=cols, max_row=max_row, rules=tuple(rules), note=note)


def compile_rules(rows: int, cols: int, *, cap: int = MAX_CSS_ROWS) -> CompileResult:
    """
    Compile a `rows` x `cols` grid. Raises ConfigurationError for non-positive
    dimensions before any enumeration starts.
    """
    rule_set = compile_rule_set(rows, cols, cap=cap)
    return CompileResult(rule_set=rule_set, css=render_css(rule_set), rule_count=len(rule_set))
