from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Union

from enumerator import Window
from errors import InvariantViolation
from ruleset import CellPredicate, Coordinate, TargetRule


@dataclass(frozen=True)
class Emittable:
    rule: TargetRule


@dataclass(frozen=True)
class Unreachable:
    '''
    The assignment needs a live cell at `index`, which lies outside the tape and is always dead.
    '''
    index: int


Synthesis = Union[Emittable, Unreachable]


def synthesize(window: Window, assignment: Sequence[bool], target: Coordinate, cols: int) -> Synthesis:
    """
    Turn one alive assignment into a conjunctive rule guarding `target`.
    Predicates follow the window left to right. Out-of-range dead cells are
    dropped; an out-of-range live cell makes the whole assignment unreachable.
    """
    if len(assignment) != window.width:
        raise InvariantViolation(
            f"assignment of length {len(assignment)} does not fit window {window.lo}..{window.hi}"
        )

    predicates: List[CellPredicate] = []
    for index, bit in zip(window.indices(), assignment):
        if 0 <= index < cols:
            predicates.append(CellPredicate(index, bool(bit)))
        elif bit:
            return Unreachable(index)
    return Emittable(TargetRule(tuple(predicates), target))
